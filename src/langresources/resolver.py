"""LanguageResourceManager - compose user-facing messages from resources.

A message is built from an ordered sequence of parts. Each part is either
a literal string, used verbatim after character validation, or a
LangResourceKey, looked up in the active language and then in the default
language. Resolved segments are concatenated with no separators.

Thread Safety:
    A manager holds no mutable state after construction, so one instance
    may be shared between threads. The resource collection passed in must
    not be mutated while messages are being resolved.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from langresources.builtin import BUILTIN_RESOURCES
from langresources.config import ResolverConfig
from langresources.enums import LangResourceKey
from langresources.errors import InvalidMessagePartError
from langresources.locale_utils import get_system_language
from langresources.platform_utils import get_current_platform, normalize_platform
from langresources.validation import validate_literal

if TYPE_CHECKING:
    from langresources.types import (
        LanguageCode,
        LanguageResource,
        MessagePart,
        PlatformId,
        ResourceCollection,
        ResourceValue,
    )

__all__ = ["LanguageResourceManager"]

logger = logging.getLogger(__name__)

# Sentinel distinguishing "key absent" from any stored value.
_MISSING = object()


class LanguageResourceManager:
    """Resolve message parts for one fixed language.

    Example:
        >>> resources = {"en": {"newVersion": "Thanks for upgrading to", "restart": "Restart"}}
        >>> manager = LanguageResourceManager("en", resources)
        >>> manager.get_message(
        ...     LangResourceKey.NEW_VERSION, " 12.0. ", LangResourceKey.RESTART, "?"
        ... )
        'Thanks for upgrading to 12.0. Restart?'

    Example - Fallback to the default language:
        >>> manager = LanguageResourceManager("de", {"en": {"restart": "Restart"}})
        >>> manager.get_message(LangResourceKey.RESTART)
        'Restart'

    Attributes:
        language: Active language code, fixed at construction
        default_language: Language consulted when the active one lacks a key
        platform: Platform identifier used to pick OS-variant entries
        resources: The resource collection, never mutated by the manager
    """

    __slots__ = ("_config", "_language", "_platform", "_resources")

    def __init__(
        self,
        language: LanguageCode | None = None,
        resources: ResourceCollection | None = None,
        *,
        platform: PlatformId | None = None,
        config: ResolverConfig | None = None,
    ) -> None:
        """Initialize the manager.

        Args:
            language: Active language code. None detects it from the
                environment (LC_ALL, LC_MESSAGES, LANG).
            resources: Resource collection keyed by language code. None
                uses the built-in collection.
            platform: Platform identifier for OS-variant resources. None
                reads sys.platform on every call.
            config: Resolution policy. None uses ResolverConfig() defaults.

        Raises:
            ValueError: If language is an empty string
            TypeError: If resources is not a mapping
        """
        if language is None:
            language = get_system_language()
        if not isinstance(language, str) or not language:
            msg = "language must be a non-empty string"
            raise ValueError(msg)
        if resources is None:
            resources = BUILTIN_RESOURCES
        if not isinstance(resources, Mapping):
            msg = f"resources must be a mapping, got {type(resources).__name__}"
            raise TypeError(msg)

        self._language = language
        self._resources = resources
        self._platform = normalize_platform(platform) if platform is not None else None
        self._config = config if config is not None else ResolverConfig()

        logger.debug(
            "LanguageResourceManager created for language: %s (default: %s)",
            self._language,
            self._config.default_language,
        )
        if self._language not in self._resources:
            logger.debug(
                "No resources for language '%s'; keys resolve from '%s'",
                self._language,
                self._config.default_language,
            )

    @property
    def language(self) -> LanguageCode:
        """Active language code."""
        return self._language

    @property
    def default_language(self) -> LanguageCode:
        """Fallback language code."""
        return self._config.default_language

    @property
    def platform(self) -> PlatformId:
        """Platform identifier in effect for OS-variant resources."""
        return self._platform if self._platform is not None else get_current_platform()

    @property
    def resources(self) -> ResourceCollection:
        """Resource collection this manager reads from."""
        return self._resources

    @property
    def config(self) -> ResolverConfig:
        """Resolution policy."""
        return self._config

    def get_message(self, *parts: MessagePart) -> str:
        """Resolve every part in order and concatenate the results.

        None and empty-string parts contribute nothing, so ``get_message()``
        and ``get_message(None)`` both return "". No separators are inserted
        between parts; callers pass spacing and punctuation as literals.

        Args:
            *parts: Literal strings, LangResourceKey members, or None

        Returns:
            The composed message

        Raises:
            InvalidMessagePartError: If a literal contains a disallowed
                character, a key is defined in neither the active nor the
                default language, a part has an unsupported type, or a resource
                value is neither a string nor an OS-variant mapping. The
                message always contains "is not valid".
        """
        if not parts:
            return ""
        platform = self.platform
        return "".join(self._resolve_part(part, platform) for part in parts)

    def _resolve_part(self, part: MessagePart, platform: PlatformId) -> str:
        # LangResourceKey is a str subclass; match it before plain strings.
        match part:
            case None | "":
                return ""
            case LangResourceKey():
                return self._resolve_key(part, platform)
            case str():
                return validate_literal(part)
            case _:
                msg = f"Message part {part!r} is not valid: unsupported type {type(part).__name__}"
                raise InvalidMessagePartError(
                    msg, part=repr(part), reason=f"unsupported type {type(part).__name__}"
                )

    def _resolve_key(self, key: LangResourceKey, platform: PlatformId) -> str:
        name = key.value
        for language in (self._language, self._config.default_language):
            value = self._lookup(language, name)
            if value is not _MISSING:
                return self._select_variant(name, value, platform)  # type: ignore[arg-type]

        msg = (
            f"Resource key '{name}' is not valid: no entry for language "
            f"'{self._language}' or '{self._config.default_language}'"
        )
        raise InvalidMessagePartError(msg, part=name, reason="unknown resource key")

    def _lookup(self, language: LanguageCode, name: str) -> object:
        resource: LanguageResource | None = self._resources.get(language)
        if not resource:
            return _MISSING
        return resource.get(name, _MISSING)

    def _select_variant(self, name: str, value: ResourceValue, platform: PlatformId) -> str:
        if isinstance(value, str):
            return value
        if not isinstance(value, Mapping):
            msg = (
                f"Resource key '{name}' is not valid: value has unsupported "
                f"type {type(value).__name__}"
            )
            raise InvalidMessagePartError(
                msg, part=name, reason=f"unsupported value type {type(value).__name__}"
            )
        text = value.get(platform)
        if isinstance(text, str):
            return text
        if text is not None:
            msg = (
                f"Resource key '{name}' is not valid: entry for platform '{platform}' "
                f"has unsupported type {type(text).__name__}"
            )
            raise InvalidMessagePartError(
                msg, part=name, reason=f"unsupported value type {type(text).__name__}"
            )
        if self._config.strict_os_variants:
            msg = f"Resource key '{name}' is not valid: no entry for platform '{platform}'"
            raise InvalidMessagePartError(
                msg, part=name, reason=f"no entry for platform {platform!r}"
            )
        return ""
