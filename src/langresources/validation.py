"""Validation of literal message parts and loaded resource data.

Literal parts passed to LanguageResourceManager.get_message() are user
prose: letters of any script, decimal digits, whitespace, and a small set
of punctuation. Anything else (markup, placeholders such as '#' or '{')
is rejected so stray formatting syntax never reaches the user.

Thread Safety:
    All functions in this module are pure functions with no shared state.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Mapping

from langresources.constants import ALLOWED_PUNCTUATION
from langresources.errors import InvalidMessagePartError, ResourceFormatError

__all__ = [
    "is_allowed_char",
    "is_valid_literal",
    "validate_language_resource",
    "validate_literal",
]

# Unicode general categories accepted besides whitespace and punctuation:
# L* letters (any script), M* combining marks (needed by Indic and other
# scripts, and by decomposed accents), Nd decimal digits.
_ALLOWED_CATEGORY_PREFIXES: tuple[str, ...] = ("L", "M")
_ALLOWED_CATEGORIES: frozenset[str] = frozenset({"Nd"})

# Whitespace: Unicode separators plus tab, newline and carriage return.
# Other characters str.isspace() accepts (\x0b, \x0c, \x1c-\x1f, \x85) are
# control characters and stay rejected.
_WHITESPACE_CATEGORIES: frozenset[str] = frozenset({"Zs", "Zl", "Zp"})
_WHITESPACE_CONTROLS: frozenset[str] = frozenset("\t\n\r")


def is_allowed_char(ch: str) -> bool:
    """Check if a single character may appear in a literal message part.

    Args:
        ch: Single character to check

    Returns:
        True for letters, combining marks, decimal digits, whitespace and
        allowed punctuation; False otherwise

    Example:
        >>> is_allowed_char("ж")
        True
        >>> is_allowed_char("?")
        True
        >>> is_allowed_char("#")
        False
    """
    if len(ch) != 1:
        return False
    if ch in _WHITESPACE_CONTROLS or ch in ALLOWED_PUNCTUATION:
        return True
    category = unicodedata.category(ch)
    return (
        category.startswith(_ALLOWED_CATEGORY_PREFIXES)
        or category in _ALLOWED_CATEGORIES
        or category in _WHITESPACE_CATEGORIES
    )


def is_valid_literal(text: str) -> bool:
    """Check that every character of a literal part is allowed.

    The empty string is valid; it contributes nothing to a message.

    Example:
        >>> is_valid_literal("test's can often fail. Or do they?")
        True
        >>> is_valid_literal("50% off")
        False
    """
    return all(is_allowed_char(ch) for ch in text)


def validate_literal(text: str) -> str:
    """Return a literal part unchanged, or raise if it contains bad characters.

    Args:
        text: Literal message part

    Returns:
        The same text, for use as a resolved segment

    Raises:
        InvalidMessagePartError: If any character is not allowed
    """
    for ch in text:
        if not is_allowed_char(ch):
            msg = f"Literal message part {text!r} is not valid: character {ch!r} is not allowed"
            raise InvalidMessagePartError(msg, part=text, reason=f"disallowed character {ch!r}")
    return text


def validate_language_resource(resource: object, *, language: str = "") -> dict[str, object]:
    """Check the shape of a resource set loaded from external data.

    A resource set maps string keys to either a string or an OS-variant
    mapping of string platform identifiers to strings.

    Args:
        resource: Decoded data to check
        language: Language the data was loaded for, used in error messages

    Returns:
        A plain dict copy of the resource set

    Raises:
        ResourceFormatError: If the data has any other shape
    """
    if not isinstance(resource, Mapping):
        msg = (
            f"Resource for language '{language}' must be an object, "
            f"got {type(resource).__name__}"
        )
        raise ResourceFormatError(msg, language=language)

    validated: dict[str, object] = {}
    for key, value in resource.items():
        if not isinstance(key, str) or not key:
            msg = f"Resource for language '{language}' has invalid key: {key!r}"
            raise ResourceFormatError(msg, language=language, key=str(key))
        match value:
            case str():
                validated[key] = value
            case Mapping():
                for platform, text in value.items():
                    if not isinstance(platform, str) or not isinstance(text, str):
                        msg = (
                            f"OS variant '{key}' for language '{language}' must map "
                            f"platform names to strings, got {platform!r}: {text!r}"
                        )
                        raise ResourceFormatError(msg, language=language, key=key)
                validated[key] = dict(value)
            case _:
                msg = (
                    f"Resource '{key}' for language '{language}' must be a string "
                    f"or an OS variant object, got {type(value).__name__}"
                )
                raise ResourceFormatError(msg, language=language, key=key)
    return validated
