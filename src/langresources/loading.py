"""Resource loading infrastructure for LanguageResourceManager.

Provides the protocol for resource loaders, a filesystem implementation
with path-traversal protection, and result/summary data structures for
tracking load attempts.

Components:
    ResourceLoader - Protocol for loading JSON resources (structural typing)
    PathResourceLoader - Disk-based loader with path-traversal prevention
    ResourceLoadResult - Immutable result of a single resource load attempt
    LoadSummary - Immutable aggregate of all load results
    load_resource_collection - Build a ResourceCollection from a loader

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from langresources.constants import DEFAULT_RESOURCE_ID, MAX_RESOURCE_SIZE
from langresources.enums import LoadStatus
from langresources.errors import ResourceFormatError
from langresources.types import JSONSource, LanguageCode, ResourceCollection, ResourceId
from langresources.validation import validate_language_resource

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "ResourceLoader",
    # Concrete loader
    "PathResourceLoader",
    # Load result types
    "ResourceLoadResult",
    "LoadSummary",
    # Collection builder
    "load_resource_collection",
]

logger = logging.getLogger(__name__)


class ResourceLoader(Protocol):
    """Protocol for loading resource files for specific languages.

    Implementations must provide a load() method that retrieves the raw
    JSON text for a given language and resource identifier.

    Example:
        >>> class DictLoader:
        ...     def __init__(self, files: dict[tuple[str, str], str]) -> None:
        ...         self.files = files
        ...     def load(self, language: str, resource_id: str) -> str:
        ...         try:
        ...             return self.files[(language, resource_id)]
        ...         except KeyError:
        ...             raise FileNotFoundError(resource_id) from None
        ...     def describe_path(self, language: str, resource_id: str) -> str:
        ...         return f"{language}/{resource_id}"
    """

    def load(self, language: LanguageCode, resource_id: ResourceId) -> JSONSource:
        """Load a resource file for the given language.

        Args:
            language: Language code (e.g., 'en', 'de', 'zh-cn')
            resource_id: Resource identifier (e.g., 'messages.json')

        Returns:
            JSON source text

        Raises:
            FileNotFoundError: If the resource doesn't exist for this language
            OSError: If the file cannot be read
        """

    def describe_path(self, language: LanguageCode, resource_id: ResourceId) -> str:
        """Return human-readable path for diagnostics."""
        return f"{language}/{resource_id}"


@dataclass(frozen=True, slots=True)
class PathResourceLoader:
    """File system resource loader using path templates.

    Uses a {language} placeholder in the path template for substitution.

    Security:
        Language codes containing path separators or ".." are rejected.
        Resource IDs containing ".." or absolute paths are rejected.
        All resolved paths are validated against a fixed root directory.

    Example:
        >>> loader = PathResourceLoader("locales/{language}")
        >>> text = loader.load("de", "messages.json")
        # Loads from: locales/de/messages.json

    Attributes:
        base_path: Path template with {language} placeholder
        root_dir: Fixed root directory for path traversal validation.
                  Defaults to the static prefix of base_path.
    """

    base_path: str
    root_dir: str | None = None
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved root directory and validate template at initialization.

        Raises:
            ValueError: If base_path does not contain {language} placeholder
        """
        # Without the placeholder every language would read the same file.
        if "{language}" not in self.base_path:
            msg = (
                f"base_path must contain '{{language}}' placeholder for language substitution, "
                f"got: '{self.base_path}'"
            )
            raise ValueError(msg)

        if self.root_dir is not None:
            resolved = Path(self.root_dir).resolve()
        else:
            # e.g., "locales/{language}" -> "locales"
            static_prefix = self.base_path.split("{language}")[0].rstrip("/\\")
            resolved = Path(static_prefix).resolve() if static_prefix else Path.cwd().resolve()
        object.__setattr__(self, "_resolved_root", resolved)

    @staticmethod
    def _validate_language(language: LanguageCode) -> None:
        if not language:
            msg = "Language code cannot be empty"
            raise ValueError(msg)
        if ".." in language:
            msg = f"Path traversal sequences not allowed in language: '{language}'"
            raise ValueError(msg)
        if "/" in language or "\\" in language:
            msg = f"Path separators not allowed in language: '{language}'"
            raise ValueError(msg)

    @staticmethod
    def _validate_resource_id(resource_id: ResourceId) -> None:
        if resource_id.strip() != resource_id or not resource_id:
            msg = f"Resource ID is empty or has leading/trailing whitespace: {resource_id!r}"
            raise ValueError(msg)
        if Path(resource_id).is_absolute() or resource_id.startswith(("/", "\\")):
            msg = f"Absolute paths not allowed in resource_id: '{resource_id}'"
            raise ValueError(msg)
        if ".." in resource_id:
            msg = f"Path traversal sequences not allowed in resource_id: '{resource_id}'"
            raise ValueError(msg)

    def describe_path(self, language: LanguageCode, resource_id: ResourceId) -> str:
        """Return the language-substituted path for diagnostics."""
        return f"{self.base_path.replace('{language}', language)}/{resource_id}"

    def load(self, language: LanguageCode, resource_id: ResourceId) -> JSONSource:
        """Load a JSON resource file from disk.

        Args:
            language: Language code to substitute in path template
            resource_id: File name (e.g., 'messages.json')

        Returns:
            JSON source text

        Raises:
            ValueError: If language or resource_id is unsafe, or the
                resolved path escapes the root directory
            FileNotFoundError: If the file doesn't exist
            OSError: If the file cannot be read
        """
        self._validate_language(language)
        self._validate_resource_id(resource_id)

        # replace() rather than format(): the template may hold other braces
        base_dir = Path(self.base_path.replace("{language}", language)).resolve()
        full_path = (base_dir / resource_id).resolve()

        try:
            full_path.relative_to(self._resolved_root)
        except ValueError:
            msg = (
                f"Path traversal detected: resolved path escapes root directory. "
                f"language='{language}', resource_id='{resource_id}'"
            )
            raise ValueError(msg) from None

        return full_path.read_text(encoding="utf-8")


@dataclass(frozen=True, slots=True)
class ResourceLoadResult:
    """Result of loading a single resource file.

    Attributes:
        language: Language code for this resource
        resource_id: Resource identifier (e.g., 'messages.json')
        status: Load status (success, not_found, error)
        error: Exception if status is ERROR, None otherwise
        source_path: Human-readable path to the resource
        entry_count: Number of entries merged on success
    """

    language: LanguageCode
    resource_id: ResourceId
    status: LoadStatus
    error: Exception | None = None
    source_path: str | None = None
    entry_count: int = 0

    @property
    def is_success(self) -> bool:
        """Check if resource loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if resource was not found."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if loading failed with an error."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Summary of all resource load attempts.

    Attributes:
        results: All individual load results, in load order
    """

    results: tuple[ResourceLoadResult, ...]

    @property
    def total_attempted(self) -> int:
        """Number of load attempts."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of resources loaded successfully."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        """Number of resources that were not found."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        """Number of resources that failed with errors."""
        return sum(1 for r in self.results if r.is_error)

    @property
    def all_successful(self) -> bool:
        """True if every attempted resource loaded."""
        return self.successful == self.total_attempted

    def get_errors(self) -> tuple[ResourceLoadResult, ...]:
        """Get all results with errors."""
        return tuple(r for r in self.results if r.is_error)

    def get_not_found(self) -> tuple[ResourceLoadResult, ...]:
        """Get all results where the resource was not found."""
        return tuple(r for r in self.results if r.is_not_found)

    def get_by_language(self, language: LanguageCode) -> tuple[ResourceLoadResult, ...]:
        """Get all results for a specific language."""
        return tuple(r for r in self.results if r.language == language)


def _parse_resource(source: JSONSource, language: LanguageCode) -> dict[str, object]:
    if len(source) > MAX_RESOURCE_SIZE:
        msg = (
            f"Resource for language '{language}' exceeds maximum size "
            f"({len(source)} > {MAX_RESOURCE_SIZE} characters)"
        )
        raise ResourceFormatError(msg, language=language)
    try:
        data = json.loads(source)
    except json.JSONDecodeError as e:
        msg = f"Resource for language '{language}' is not valid JSON: {e}"
        raise ResourceFormatError(msg, language=language) from e
    except RecursionError as e:
        msg = f"Resource for language '{language}' is nested too deeply"
        raise ResourceFormatError(msg, language=language) from e
    return validate_language_resource(data, language=language)


def load_resource_collection(
    languages: Iterable[LanguageCode],
    loader: ResourceLoader,
    resource_ids: Iterable[ResourceId] = (DEFAULT_RESOURCE_ID,),
) -> tuple[ResourceCollection, LoadSummary]:
    """Load every resource file for every language into one collection.

    Failures never raise. Missing files are recorded as NOT_FOUND; read
    errors, invalid JSON and malformed shapes are recorded as ERROR. When a
    language has several resource files they merge in order, later files
    overriding earlier keys. Languages with no successfully loaded file are
    left out of the collection.

    Args:
        languages: Language codes to load (e.g., ['en', 'de'])
        loader: Loader used to fetch raw JSON text
        resource_ids: Files to load per language (default: messages.json)

    Returns:
        Tuple of (collection, summary)

    Example:
        >>> loader = PathResourceLoader("locales/{language}")
        >>> resources, summary = load_resource_collection(["en", "de"], loader)
        >>> if summary.errors:
        ...     raise RuntimeError(f"{summary.errors} resources failed to load")
        >>> manager = LanguageResourceManager("de", resources)
    """
    resource_id_list = tuple(resource_ids)
    collection: dict[LanguageCode, dict[str, object]] = {}
    results: list[ResourceLoadResult] = []

    for language in languages:
        for resource_id in resource_id_list:
            source_path = loader.describe_path(language, resource_id)
            try:
                source = loader.load(language, resource_id)
                entries = _parse_resource(source, language)
            except FileNotFoundError:
                logger.debug("Resource not found: %s", source_path)
                results.append(
                    ResourceLoadResult(
                        language=language,
                        resource_id=resource_id,
                        status=LoadStatus.NOT_FOUND,
                        source_path=source_path,
                    )
                )
                continue
            except (OSError, ValueError, ResourceFormatError) as e:
                logger.warning("Failed to load resource %s: %s", source_path, e)
                results.append(
                    ResourceLoadResult(
                        language=language,
                        resource_id=resource_id,
                        status=LoadStatus.ERROR,
                        error=e,
                        source_path=source_path,
                    )
                )
                continue

            collection.setdefault(language, {}).update(entries)
            logger.debug("Loaded %d entries from %s", len(entries), source_path)
            results.append(
                ResourceLoadResult(
                    language=language,
                    resource_id=resource_id,
                    status=LoadStatus.SUCCESS,
                    source_path=source_path,
                    entry_count=len(entries),
                )
            )

    summary = LoadSummary(results=tuple(results))
    logger.info(
        "Loaded %d of %d resources (%d not found, %d errors)",
        summary.successful,
        summary.total_attempted,
        summary.not_found,
        summary.errors,
    )
    return collection, summary
