"""Enumerations for langresources type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so a LangResourceKey can be used
directly wherever its key name is expected.

Python 3.13+.
"""

from enum import StrEnum


class LangResourceKey(StrEnum):
    """Symbolic reference to a localizable message slot.

    Each member's value is the stable key name used in every language
    resource set. The default language set must define all of them.

    StrEnum provides automatic string conversion: str(LangResourceKey.RESTART) == "restart"
    """

    WELCOME_BEGIN = "welcomeBegin"
    WELCOME_END = "welcomeEnd"
    NEW_VERSION = "newVersion"
    SEE_RELEASE_NOTES = "seeReleaseNotes"
    DONT_SHOW_THIS = "dontShowThis"
    ACTIVATE = "activate"
    ACTIVATION_PATH = "activationPath"
    RELOAD = "reload"
    RESTART = "restart"
    RESTORE = "restore"
    CUSTOMIZATION = "customization"
    DISABLED = "disabled"
    ENABLED = "enabled"
    PRESET_DISABLED = "presetDisabled"
    PROJECT_DETECTED = "projectDetected"
    PROJECT_NOT_DETECTED = "projectNotDetected"
    CONFLICT_DETECTED = "conflictDetected"
    FOLDER_ICONS_DISABLED = "folderIconsDisabled"
    LEARN_MORE = "learnMore"
    FLAVOR_DEFAULT = "flavorDefault"
    FLAVOR_MINIMAL = "flavorMinimal"


class Platform(StrEnum):
    """Host operating system identifier used by OS-variant resources.

    StrEnum provides automatic string conversion: str(Platform.LINUX) == "linux"
    """

    DARWIN = "darwin"
    """macOS"""

    LINUX = "linux"
    """Linux and other Unix-likes reporting 'linux'"""

    WIN32 = "win32"
    """Windows, 32 and 64 bit"""


class LoadStatus(StrEnum):
    """Outcome of loading a single resource file.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Resource parsed and merged into the collection"""

    NOT_FOUND = "not_found"
    """Resource file does not exist for this language"""

    ERROR = "error"
    """Resource could not be read, parsed, or has an invalid shape"""


__all__ = [
    "LangResourceKey",
    "LoadStatus",
    "Platform",
]
