"""Exception hierarchy for langresources.

All exceptions derive from LangResourceError so callers can catch the
whole family with one clause. Message resolution raises exactly one kind,
InvalidMessagePartError.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "InvalidMessagePartError",
    "LangResourceError",
    "ResourceFormatError",
    "ResourceIntegrityError",
]


class LangResourceError(Exception):
    """Base exception for all langresources errors."""


class InvalidMessagePartError(LangResourceError):
    """A message part could not be resolved.

    Raised for a literal part containing a disallowed character, or for a
    resource key defined neither in the active language nor in the default
    language. Resolution aborts; no partial message is returned.

    Attributes:
        part: The offending literal text or resource key name
        reason: Short human-readable cause

    Example:
        >>> try:
        ...     manager.get_message("#")
        ... except InvalidMessagePartError as e:
        ...     print(e.part)
        #
    """

    def __init__(self, message: str, *, part: str = "", reason: str = "") -> None:
        """Initialize InvalidMessagePartError.

        Args:
            message: Error message, always containing "is not valid"
            part: The offending literal text or resource key name
            reason: Short human-readable cause
        """
        super().__init__(message)
        self.part = part
        self.reason = reason


class ResourceFormatError(LangResourceError):
    """Loaded resource data does not have the expected shape.

    Attributes:
        language: Language the resource was loaded for
        key: Offending entry key, empty if the whole resource is malformed
    """

    def __init__(self, message: str, *, language: str = "", key: str = "") -> None:
        super().__init__(message)
        self.language = language
        self.key = key


class ResourceIntegrityError(LangResourceError):
    """Default language resource set does not match the resource keys.

    Attributes:
        missing: Key names with no entry in the resource set
        unknown: Entry names that match no resource key
    """

    def __init__(
        self,
        message: str,
        *,
        missing: tuple[str, ...] = (),
        unknown: tuple[str, ...] = (),
    ) -> None:
        super().__init__(message)
        self.missing = missing
        self.unknown = unknown
