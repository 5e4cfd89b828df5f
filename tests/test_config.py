"""Tests for ResolverConfig."""

import dataclasses

import pytest

from langresources.config import ResolverConfig


class TestResolverConfig:
    """ResolverConfig defaults and validation."""

    def test_defaults(self) -> None:
        """Defaults fall back to English without strict OS variants."""
        config = ResolverConfig()
        assert config.default_language == "en"
        assert config.strict_os_variants is False

    def test_frozen(self) -> None:
        """Configuration cannot be modified after construction."""
        config = ResolverConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.default_language = "de"  # type: ignore[misc]

    @pytest.mark.parametrize("value", ["", "   "])
    def test_empty_default_language_rejected(self, value: str) -> None:
        """default_language must be non-empty."""
        with pytest.raises(ValueError, match="default_language must be a non-empty string"):
            ResolverConfig(default_language=value)
