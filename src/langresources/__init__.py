"""langresources - compose localized messages from resource keys and literals.

Resolves an ordered sequence of literal strings and symbolic resource keys
into one user-facing message for a fixed language, with OS-specific
variants and fallback to English for missing entries.

Public API:
    LanguageResourceManager - Resolve message parts for one language
    LangResourceKey - Enumeration of resource key names
    ResolverConfig - Resolution policy (default language, strict OS variants)
    BUILTIN_RESOURCES - Built-in resource collection (English)

Exceptions:
    LangResourceError - Base exception class
    InvalidMessagePartError - Unresolvable key or disallowed literal character

Submodules:
    langresources.loading - Resource loaders and load summaries
    langresources.integrity - Key coverage and catalog consistency checks
    langresources.locale_utils - Language code helpers (Babel)
    langresources.platform_utils - Host platform detection
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .builtin import BUILTIN_RESOURCES
from .config import ResolverConfig
from .enums import LangResourceKey, Platform
from .errors import (
    InvalidMessagePartError,
    LangResourceError,
    ResourceFormatError,
    ResourceIntegrityError,
)
from .resolver import LanguageResourceManager

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("langresources")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BUILTIN_RESOURCES",
    "InvalidMessagePartError",
    "LangResourceError",
    "LangResourceKey",
    "LanguageResourceManager",
    "Platform",
    "ResolverConfig",
    "ResourceFormatError",
    "ResourceIntegrityError",
    "__version__",
]
