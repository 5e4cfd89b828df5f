"""Hypothesis strategies for the langresources test suite.

Submodules:
    messages - Literal parts, resource sets, and part sequences

Python 3.13+.
"""

from tests.strategies.messages import (
    invalid_literals,
    language_codes,
    language_resources,
    message_sequences,
    resource_keys,
    valid_literals,
)

__all__ = [
    "invalid_literals",
    "language_codes",
    "language_resources",
    "message_sequences",
    "resource_keys",
    "valid_literals",
]
