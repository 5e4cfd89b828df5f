"""Built-in resource sets.

LANG_EN is the default language resource set. It defines every
LangResourceKey member and nothing else; the test suite checks both
directions. Applications may pass their own ResourceCollection instead,
usually loaded with langresources.loading.

Python 3.13+. Zero external dependencies.
"""

from types import MappingProxyType

from langresources.constants import DEFAULT_LANGUAGE
from langresources.types import LanguageResource, ResourceCollection

__all__ = ["BUILTIN_RESOURCES", "LANG_EN"]

LANG_EN: LanguageResource = MappingProxyType(
    {
        "welcomeBegin": "You are now ready to use",
        "welcomeEnd": "Enjoy!",
        "newVersion": "Thanks for upgrading to",
        "seeReleaseNotes": "See Release Notes",
        "dontShowThis": "Don't show this message again",
        "activate": "Activate",
        "activationPath": MappingProxyType(
            {
                "darwin": "Code > Preferences > File Icon Theme",
                "linux": "File > Preferences > File Icon Theme",
                "win32": "File > Preferences > File Icon Theme",
            }
        ),
        "reload": "Reload",
        "restart": "Restart",
        "restore": "Restore",
        "customization": "Customization applied",
        "disabled": "Disabled",
        "enabled": "Enabled",
        "presetDisabled": "The preset is disabled in your settings",
        "projectDetected": "A project was detected in your workspace",
        "projectNotDetected": "No project was detected in your workspace",
        "conflictDetected": "Conflicting settings were detected",
        "folderIconsDisabled": "Folder icons are disabled",
        "learnMore": "Learn more",
        "flavorDefault": "Default",
        "flavorMinimal": "Minimal",
    }
)

BUILTIN_RESOURCES: ResourceCollection = MappingProxyType({DEFAULT_LANGUAGE: LANG_EN})
