"""Tests for key coverage, catalog parity, and OS-variant completeness."""

from __future__ import annotations

import pytest

from langresources.builtin import BUILTIN_RESOURCES, LANG_EN
from langresources.enums import LangResourceKey
from langresources.errors import ResourceIntegrityError
from langresources.integrity import (
    check_key_coverage,
    compare_catalogs,
    ensure_default_coverage,
    find_incomplete_os_variants,
)


class TestCheckKeyCoverage:
    """check_key_coverage compares both directions."""

    def test_builtin_english_is_complete(self) -> None:
        """The built-in set matches the enumeration exactly."""
        report = check_key_coverage(LANG_EN)
        assert report.is_complete
        assert report.missing == ()
        assert report.unknown == ()

    def test_missing_and_unknown(self) -> None:
        """Missing keys and stray entries are reported sorted."""
        report = check_key_coverage(
            {"restart": "Restart", "zzz": "?", "aaa": "?"},
            keys=[LangResourceKey.RESTART, LangResourceKey.RELOAD],
        )
        assert report.missing == ("reload",)
        assert report.unknown == ("aaa", "zzz")
        assert not report.is_complete

    def test_accepts_plain_key_names(self) -> None:
        """keys may be given as plain strings."""
        assert check_key_coverage({"a": "x"}, keys=["a"]).is_complete


class TestCompareCatalogs:
    """compare_catalogs checks catalog/template key parity."""

    def test_consistent(self) -> None:
        """Identical key sets are consistent regardless of values."""
        diff = compare_catalogs({"a": "Title", "b": "Desc"}, {"a": "", "b": ""})
        assert diff.is_consistent

    def test_differences(self) -> None:
        """Keys present on one side only are reported."""
        diff = compare_catalogs({"a": "x", "b": "y"}, {"a": "", "c": ""})
        assert diff.only_in_catalog == ("b",)
        assert diff.only_in_template == ("c",)
        assert not diff.is_consistent


class TestFindIncompleteOSVariants:
    """find_incomplete_os_variants reports platforms missing per key."""

    def test_builtin_is_complete(self) -> None:
        """The built-in set has no incomplete OS variants."""
        assert find_incomplete_os_variants(LANG_EN) == {}

    def test_reports_missing_platforms(self) -> None:
        """Missing platforms are listed, strings are ignored."""
        resource = {
            "activationPath": {"linux": "File"},
            "restart": "Restart",
        }
        assert find_incomplete_os_variants(resource) == {"activationPath": ("darwin", "win32")}

    def test_custom_platforms(self) -> None:
        """The required platform set is configurable."""
        resource = {"activationPath": {"linux": "File"}}
        assert find_incomplete_os_variants(resource, platforms=["linux"]) == {}


class TestEnsureDefaultCoverage:
    """ensure_default_coverage raises on incomplete default sets."""

    def test_builtin_passes(self) -> None:
        """The built-in collection passes."""
        ensure_default_coverage(BUILTIN_RESOURCES)

    def test_incomplete_raises(self) -> None:
        """Missing and unknown keys are carried on the error."""
        with pytest.raises(ResourceIntegrityError, match="is incomplete") as exc_info:
            ensure_default_coverage({"en": {"restart": "Restart", "bogus": "x"}})
        assert "newVersion" in exc_info.value.missing
        assert exc_info.value.unknown == ("bogus",)

    def test_missing_default_language(self) -> None:
        """A collection without the default language is incomplete."""
        with pytest.raises(ResourceIntegrityError, match="'en'"):
            ensure_default_coverage({"de": dict(LANG_EN)})

    def test_other_default_language(self) -> None:
        """The default language to check is configurable."""
        ensure_default_coverage({"fr": dict(LANG_EN)}, default_language="fr")
