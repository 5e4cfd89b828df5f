"""Hypothesis strategies for langresources property-based testing.

Provides reusable strategies for generating message-resolution test data:
- Literal parts drawn only from allowed characters
- Literal parts guaranteed to contain a disallowed character
- Language codes and language resource sets
- Mixed part sequences together with their expected output

Event-Emitting Strategies (HypoFuzz-Optimized):
- valid_literals: Emits literal_script=ascii|unicode
- message_sequences: Emits part_mix=literal|key|mixed

Python 3.13+.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

from langresources.constants import ALLOWED_PUNCTUATION
from langresources.enums import LangResourceKey
from langresources.validation import is_allowed_char

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn

_LANGUAGE_POOL = [
    "en", "de", "fr", "es", "it", "nl", "pl", "ru",
    "ja", "ko", "pt-br", "zh-cn", "zh-tw", "cs", "test",
]

_ASCII_ALLOWED = string.ascii_letters + string.digits + " " + "".join(sorted(ALLOWED_PUNCTUATION))

_DISALLOWED = "#$%&*+/<=>@[\\]^_`{|}~"

allowed_chars = st.characters(
    categories=("L", "M", "Nd", "Zs"),
).filter(is_allowed_char) | st.sampled_from(sorted(ALLOWED_PUNCTUATION))

language_codes = st.sampled_from(_LANGUAGE_POOL)

resource_keys = st.sampled_from(list(LangResourceKey))


@st.composite
def valid_literals(draw: DrawFn, min_size: int = 0) -> str:
    """Generate literal parts made only of allowed characters.

    Events emitted:
    - literal_script=ascii|unicode
    """
    if draw(st.booleans()):
        event("literal_script=ascii")
        return draw(st.text(alphabet=_ASCII_ALLOWED, min_size=min_size, max_size=40))
    event("literal_script=unicode")
    return draw(st.text(alphabet=allowed_chars, min_size=min_size, max_size=40))


@st.composite
def invalid_literals(draw: DrawFn) -> str:
    """Generate literal parts containing at least one disallowed character."""
    prefix = draw(st.text(alphabet=_ASCII_ALLOWED, max_size=10))
    bad = draw(st.sampled_from(_DISALLOWED))
    suffix = draw(st.text(alphabet=_ASCII_ALLOWED, max_size=10))
    return prefix + bad + suffix


@st.composite
def language_resources(draw: DrawFn) -> dict[str, str]:
    """Generate a resource set defining a random subset of keys."""
    keys = draw(st.sets(resource_keys, min_size=1))
    return {key.value: draw(st.text(max_size=30)) for key in keys}


@st.composite
def message_sequences(
    draw: DrawFn, resource: dict[str, str]
) -> tuple[list[str | LangResourceKey], str]:
    """Generate parts resolvable against ``resource`` and the expected message.

    Events emitted:
    - part_mix=literal|key|mixed
    """
    defined = [key for key in LangResourceKey if key.value in resource]
    part_strategy = valid_literals()
    if defined:
        part_strategy = part_strategy | st.sampled_from(defined)
    parts = draw(st.lists(part_strategy, max_size=8))

    kinds = {isinstance(part, LangResourceKey) for part in parts}
    if kinds == {True}:
        event("part_mix=key")
    elif kinds == {False}:
        event("part_mix=literal")
    else:
        event("part_mix=mixed")

    expected = "".join(
        resource[part.value] if isinstance(part, LangResourceKey) else part for part in parts
    )
    return parts, expected
