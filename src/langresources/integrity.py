"""Integrity checks for resource sets and catalogs.

Message resolution relies on the default language defining every
LangResourceKey. These checks let applications verify that, and related
consistency properties, when resources are built or loaded.

Components:
    KeyCoverageReport - Keys missing from, and unknown to, a resource set
    CatalogDiff - Key differences between a catalog and its template
    check_key_coverage - Compare a resource set against the key enumeration
    compare_catalogs - Compare two flat catalogs key by key
    find_incomplete_os_variants - OS variants lacking supported platforms
    ensure_default_coverage - Raise if the default language is incomplete

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from langresources.constants import DEFAULT_LANGUAGE, SUPPORTED_PLATFORMS
from langresources.enums import LangResourceKey
from langresources.errors import ResourceIntegrityError
from langresources.types import LanguageCode, LanguageResource, ResourceCollection

__all__ = [
    "CatalogDiff",
    "KeyCoverageReport",
    "check_key_coverage",
    "compare_catalogs",
    "ensure_default_coverage",
    "find_incomplete_os_variants",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class KeyCoverageReport:
    """Result of comparing a resource set with the resource keys.

    Attributes:
        missing: Key names with no entry in the resource set, sorted
        unknown: Entry names matching no resource key, sorted
    """

    missing: tuple[str, ...] = ()
    unknown: tuple[str, ...] = ()

    @property
    def is_complete(self) -> bool:
        """True if keys and entries match exactly."""
        return not self.missing and not self.unknown


@dataclass(frozen=True, slots=True)
class CatalogDiff:
    """Key differences between a catalog and its template.

    Attributes:
        only_in_catalog: Keys present in the catalog but not the template
        only_in_template: Keys present in the template but not the catalog
    """

    only_in_catalog: tuple[str, ...] = ()
    only_in_template: tuple[str, ...] = ()

    @property
    def is_consistent(self) -> bool:
        """True if both sides define the same keys."""
        return not self.only_in_catalog and not self.only_in_template


def check_key_coverage(
    resource: LanguageResource,
    keys: Iterable[LangResourceKey | str] = LangResourceKey,
) -> KeyCoverageReport:
    """Compare a resource set with a set of resource keys, both directions.

    Args:
        resource: Resource set for one language
        keys: Keys expected to be defined (default: every LangResourceKey)

    Returns:
        KeyCoverageReport with missing and unknown key names

    Example:
        >>> report = check_key_coverage({"restart": "Restart"})
        >>> "newVersion" in report.missing
        True
        >>> report.unknown
        ()
    """
    expected = {str(key) for key in keys}
    defined = set(resource)
    return KeyCoverageReport(
        missing=tuple(sorted(expected - defined)),
        unknown=tuple(sorted(defined - expected)),
    )


def compare_catalogs(catalog: Mapping[str, object], template: Mapping[str, object]) -> CatalogDiff:
    """Compare the keys of a catalog with those of its template.

    Values are ignored; only key presence matters.

    Example:
        >>> diff = compare_catalogs({"a": "x", "b": "y"}, {"a": "", "c": ""})
        >>> diff.only_in_catalog, diff.only_in_template
        (('b',), ('c',))
    """
    catalog_keys = set(catalog)
    template_keys = set(template)
    return CatalogDiff(
        only_in_catalog=tuple(sorted(catalog_keys - template_keys)),
        only_in_template=tuple(sorted(template_keys - catalog_keys)),
    )


def find_incomplete_os_variants(
    resource: LanguageResource,
    platforms: Iterable[str] = SUPPORTED_PLATFORMS,
) -> dict[str, tuple[str, ...]]:
    """Find OS-variant entries that lack a value for some platform.

    A missing platform entry resolves to an empty segment at runtime, which
    is rarely intended. Plain string entries are never reported.

    Args:
        resource: Resource set for one language
        platforms: Platforms every OS variant should cover

    Returns:
        Mapping of key name to the sorted platforms it is missing

    Example:
        >>> find_incomplete_os_variants({"activationPath": {"linux": "File"}})
        {'activationPath': ('darwin', 'win32')}
    """
    required = {str(platform) for platform in platforms}
    incomplete: dict[str, tuple[str, ...]] = {}
    for key, value in resource.items():
        if isinstance(value, Mapping):
            missing = required - set(value)
            if missing:
                incomplete[key] = tuple(sorted(missing))
    return incomplete


def ensure_default_coverage(
    resources: ResourceCollection,
    default_language: LanguageCode = DEFAULT_LANGUAGE,
) -> None:
    """Raise unless the default language defines exactly the resource keys.

    Args:
        resources: Resource collection to check
        default_language: Language expected to be complete (default: "en")

    Raises:
        ResourceIntegrityError: If keys are missing or unknown entries exist
    """
    report = check_key_coverage(resources.get(default_language, {}))
    if report.is_complete:
        logger.debug("Default language '%s' covers all resource keys", default_language)
        return

    parts = []
    if report.missing:
        parts.append(f"missing: {', '.join(report.missing)}")
    if report.unknown:
        parts.append(f"unknown: {', '.join(report.unknown)}")
    msg = f"Default language '{default_language}' resource set is incomplete ({'; '.join(parts)})"
    raise ResourceIntegrityError(msg, missing=report.missing, unknown=report.unknown)
