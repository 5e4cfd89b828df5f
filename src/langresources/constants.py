"""Shared constants for langresources.

Centralizes the values that the resolver, loader, and integrity checks
must agree on. Placing them here avoids circular imports between modules.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Languages
    "DEFAULT_LANGUAGE",
    # Platforms
    "SUPPORTED_PLATFORMS",
    "PLATFORM_ALIASES",
    # Literal validation
    "ALLOWED_PUNCTUATION",
    # Loading
    "DEFAULT_RESOURCE_ID",
    "MAX_RESOURCE_SIZE",
]

# ============================================================================
# LANGUAGES
# ============================================================================

# Fallback language consulted when the active language lacks a key.
# The built-in resource set for this language must cover every resource key.
DEFAULT_LANGUAGE: str = "en"

# ============================================================================
# PLATFORMS
# ============================================================================

# Platform identifiers used as keys in OS-variant resource values.
# Spelled the way sys.platform reports them on current interpreters.
SUPPORTED_PLATFORMS: tuple[str, ...] = ("darwin", "linux", "win32")

# Alternative sys.platform spellings mapped to a supported identifier.
PLATFORM_ALIASES: dict[str, str] = {
    "linux2": "linux",
    "cygwin": "win32",
    "msys": "win32",
    "win64": "win32",
    "macos": "darwin",
}

# ============================================================================
# LITERAL VALIDATION
# ============================================================================

# Punctuation permitted in literal message parts, on top of letters,
# combining marks, decimal digits and whitespace.
ALLOWED_PUNCTUATION: frozenset[str] = frozenset(
    "'.,!?:;-()\""
    "’"  # right single quotation mark (typographic apostrophe)
    "‘“”"  # typographic quotes
    "«»"  # guillemets
    "¡¿"  # inverted exclamation and question marks
    "…"  # ellipsis
)

# ============================================================================
# LOADING
# ============================================================================

# Resource file loaded per language when no resource ids are given.
DEFAULT_RESOURCE_ID: str = "messages.json"

# Upper bound on a single resource file, in characters (10 MB).
MAX_RESOURCE_SIZE: int = 10 * 1024 * 1024
