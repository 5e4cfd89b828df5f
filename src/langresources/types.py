"""Type aliases for the langresources data model.

Provides semantic type aliases used throughout the package and by user
code when annotating resource collections.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

from langresources.enums import LangResourceKey

__all__ = [
    "JSONSource",
    "LanguageCode",
    "LanguageResource",
    "MessagePart",
    "OSVariant",
    "PlatformId",
    "ResourceCollection",
    "ResourceId",
    "ResourceValue",
]

type LanguageCode = str
"""Language code as used for collection keys (e.g., 'en', 'de', 'zh-cn')."""

type PlatformId = str
"""Host platform identifier (e.g., 'darwin', 'linux', 'win32')."""

type OSVariant = Mapping[PlatformId, str]
"""Resource value that differs per host operating system."""

type ResourceValue = str | OSVariant
"""A single resource entry: literal text or an OS-variant mapping."""

type LanguageResource = Mapping[str, ResourceValue]
"""All resource entries for one language, keyed by resource key name."""

type ResourceCollection = Mapping[LanguageCode, LanguageResource]
"""Resource sets for every available language."""

type MessagePart = str | LangResourceKey | None
"""One argument to LanguageResourceManager.get_message()."""

type ResourceId = str
"""Resource file identifier (e.g., 'messages.json')."""

type JSONSource = str
"""Raw JSON resource text as a Python string."""
