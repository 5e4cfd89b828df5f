"""Resolver configuration for LanguageResourceManager.

Provides a single frozen dataclass holding the policy knobs of message
resolution, validated once at construction.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from langresources.constants import DEFAULT_LANGUAGE

__all__ = ["ResolverConfig"]


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Immutable configuration for LanguageResourceManager.

    Constructing ``ResolverConfig()`` with no arguments gives the standard
    behavior: fall back to English, and let an OS variant without an entry
    for the current platform contribute an empty segment.

    Attributes:
        default_language: Language consulted when the active language has
            no entry for a key (default: "en").
        strict_os_variants: If True, an OS variant with no entry for the
            current platform raises InvalidMessagePartError instead of
            resolving to "" (default: False).

    Example:
        >>> config = ResolverConfig(strict_os_variants=True)
        >>> manager = LanguageResourceManager("de", resources, config=config)
    """

    default_language: str = DEFAULT_LANGUAGE
    strict_os_variants: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If default_language is empty or not a string
        """
        if not isinstance(self.default_language, str) or not self.default_language.strip():
            msg = "default_language must be a non-empty string"
            raise ValueError(msg)
