"""Host platform detection for OS-variant resources.

Resource values may hold one string per operating system. This module
provides the canonical platform identifier used to pick the entry.

Python 3.13+.
"""

from __future__ import annotations

import sys

from langresources.constants import PLATFORM_ALIASES

__all__ = [
    "get_current_platform",
    "normalize_platform",
]


def normalize_platform(value: str) -> str:
    """Map a sys.platform style value to a canonical platform identifier.

    Lowercases the input and folds known aliases ("linux2", "cygwin",
    "msys", ...) onto "darwin", "linux", or "win32". Values with no known
    alias are returned lowercased, so OS-variant mappings may still carry
    entries for other platforms such as "freebsd".

    Args:
        value: Platform string (e.g., "linux", "Win32", "cygwin")

    Returns:
        Canonical platform identifier

    Example:
        >>> normalize_platform("linux2")
        'linux'
        >>> normalize_platform("Darwin")
        'darwin'
        >>> normalize_platform("freebsd14")
        'freebsd14'
    """
    lowered = value.strip().lower()
    return PLATFORM_ALIASES.get(lowered, lowered)


def get_current_platform() -> str:
    """Return the canonical identifier of the running host.

    Reads sys.platform on every call; nothing is cached, so tests that
    patch sys.platform observe the patched value.
    """
    return normalize_platform(sys.platform)
