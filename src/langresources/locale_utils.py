"""Language code utilities backed by Babel (CLDR locale data).

Resource collections are keyed by lowercase BCP-47 style codes ("en",
"pt-br", "zh-cn"). This module normalizes codes to that form, detects the
system language, and exposes CLDR metadata through Babel.

Python 3.13+. External dependency: Babel.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING

from langresources.constants import DEFAULT_LANGUAGE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_display_name",
    "get_system_language",
    "is_known_language",
    "normalize_language",
]

logger = logging.getLogger(__name__)


def normalize_language(language_code: str) -> str:
    """Convert a language code to the form used as a collection key.

    POSIX codes use underscores (pt_BR) and mixed case; collection keys are
    lowercase with hyphens (pt-br). Surrounding whitespace is removed.

    Args:
        language_code: BCP-47 or POSIX code (e.g., "pt_BR", "zh-CN", "EN")

    Returns:
        Normalized code (e.g., "pt-br", "zh-cn", "en")

    Example:
        >>> normalize_language("pt_BR")
        'pt-br'
        >>> normalize_language("en")
        'en'
    """
    return language_code.strip().replace("_", "-").lower()


@functools.lru_cache(maxsize=128)
def get_babel_locale(language_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        language_code: Language code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If the code is not in CLDR
        ValueError: If the code is malformed
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(language_code.strip(), sep="-" if "-" in language_code else "_")


def clear_locale_cache() -> None:
    """Clear the get_babel_locale() cache."""
    get_babel_locale.cache_clear()


def is_known_language(language_code: str) -> bool:
    """Check whether CLDR has data for the given language code.

    Example:
        >>> is_known_language("de")
        True
        >>> is_known_language("xx")
        False
    """
    from babel import UnknownLocaleError  # noqa: PLC0415

    try:
        get_babel_locale(language_code)
    except (UnknownLocaleError, ValueError, TypeError):
        return False
    return True


def get_display_name(language_code: str, display_language: str = DEFAULT_LANGUAGE) -> str:
    """Return the CLDR display name of a language.

    Unknown codes are returned unchanged rather than raising, since display
    names are informational only.

    Args:
        language_code: Language to describe (e.g., "de", "pt-br")
        display_language: Language the name is written in (default: "en")

    Returns:
        Display name (e.g., "German", "Portuguese (Brazil)")

    Example:
        >>> get_display_name("de")
        'German'
        >>> get_display_name("de", "de")
        'Deutsch'
    """
    from babel import UnknownLocaleError  # noqa: PLC0415

    try:
        locale = get_babel_locale(language_code)
        display_locale = get_babel_locale(display_language)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        logger.debug("No display name for '%s': %s", language_code, e)
        return language_code
    name = locale.get_display_name(display_locale)
    return name if name else language_code


def get_system_language() -> str:
    """Detect the system language from environment variables.

    Detection order:
    1. LC_ALL environment variable (overrides all)
    2. LC_MESSAGES environment variable (for message catalogs)
    3. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales and strips encoding and
    modifier suffixes ("de_DE.UTF-8@euro" -> "de-de").

    Returns:
        Normalized language code, or "en" if none is set.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_system_language()
        'de-de'
    """
    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if not value:
            continue
        code = value.split(".")[0].split("@")[0]
        if code and code not in ("C", "POSIX"):
            return normalize_language(code)

    logger.debug("System language not set, using '%s'", DEFAULT_LANGUAGE)
    return DEFAULT_LANGUAGE
