# SPDX-License-Identifier: MIT
"""Unit tests for semantic version parsing."""

import dataclasses

import pytest

from sk_semver import (
    LOOSE,
    MAX_COMPONENT,
    BuildMetadata,
    GrammarMismatch,
    InvalidBuildMetadata,
    InvalidPrereleaseIdentifier,
    InvalidVersion,
    MissingRequiredComponent,
    NumericConversionError,
    Prerelease,
    Version,
    is_valid_semver,
    parse_version,
)


class TestParseVersion:
    """Tests for Version.parse under the strict policy."""

    def test_basic_version(self):
        """Test parsing basic MAJOR.MINOR.PATCH version."""
        v = Version.parse("1.2.3")
        assert v.major == 1
        assert v.minor == 2
        assert v.patch == 3
        assert v.prerelease is None
        assert v.build is None

    def test_version_with_zeros(self):
        v = Version.parse("0.0.0")
        assert (v.major, v.minor, v.patch) == (0, 0, 0)

    def test_large_version_numbers(self):
        v = Version.parse(f"{MAX_COMPONENT}.888.777")
        assert v.major == MAX_COMPONENT

    def test_prerelease(self):
        """Test that prerelease identifiers keep their order."""
        v = Version.parse("1.2.3-alpha.1")
        assert [str(i) for i in v.prerelease] == ["alpha", "1"]
        assert v.is_prerelease is True
        assert v.build is None

    def test_build_metadata(self):
        v = Version.parse("1.2.3+build.7")
        assert v.build == BuildMetadata("build.7")
        assert v.prerelease is None
        assert v.is_prerelease is False

    def test_prerelease_and_build(self):
        v = Version.parse("1.2.3-alpha+001")
        assert v.prerelease == Prerelease.parse("alpha")
        assert str(v.build) == "001"

    def test_numeric_prerelease(self):
        v = Version.parse("1.0.0-0.3.7")
        assert [str(i) for i in v.prerelease] == ["0", "3", "7"]

    def test_alphanumeric_prerelease_with_inner_zero(self):
        v = Version.parse("1.0.0-alpha01")
        assert str(v.prerelease) == "alpha01"

    def test_policy_by_name(self):
        assert Version.parse("1.2.3", "strict") == Version(1, 2, 3)

    def test_parse_version_shorthand(self):
        assert parse_version("1.2.3-rc.1") == Version.parse("1.2.3-rc.1")

    def test_text_kept(self):
        assert Version.parse("1.2.3-rc.1+b").text == "1.2.3-rc.1+b"


class TestLooseParse:
    """Tests for Version.parse under the loose policy."""

    def test_major_only(self):
        v = Version.parse("1", LOOSE)
        assert (v.major, v.minor, v.patch) == (1, 0, 0)

    def test_leading_v_without_patch(self):
        v = Version.parse("v1.2", LOOSE)
        assert (v.major, v.minor, v.patch) == (1, 2, 0)

    def test_leading_v_stripped(self):
        v = Version.parse("v1.2.3", "loose")
        assert str(v) == "1.2.3"
        assert v.text == "v1.2.3"
        assert v == Version(1, 2, 3)

    def test_suffixes(self):
        v = Version.parse("v2-beta.3+sha.abc", LOOSE)
        assert str(v) == "2.0.0-beta.3+sha.abc"

    def test_leading_zero_still_rejected(self):
        with pytest.raises(GrammarMismatch):
            Version.parse("v01.2", LOOSE)


class TestInvalidVersions:
    """Tests for invalid version strings."""

    @pytest.mark.parametrize("text", ["", "abc", "1.2.3.4", "-1.2.3", "   ", "1.2.3-", "1.2.3-a..b", "1.2.3+", "v1.2.3"])
    def test_grammar_mismatch(self, text):
        with pytest.raises(GrammarMismatch, match="invalid version string"):
            Version.parse(text)

    def test_leading_zero_in_component(self):
        """Leading zeros are rejected by the grammar, not the schema check."""
        with pytest.raises(GrammarMismatch):
            Version.parse("01.2.3")

    def test_missing_patch(self):
        with pytest.raises(MissingRequiredComponent, match="patch version is required") as exc_info:
            Version.parse("1.2")
        assert exc_info.value.component == "patch"

    def test_missing_minor(self):
        with pytest.raises(MissingRequiredComponent, match="minor version is required") as exc_info:
            Version.parse("1")
        assert exc_info.value.component == "minor"

    def test_missing_component_not_prefixed(self):
        with pytest.raises(InvalidVersion) as exc_info:
            Version.parse("1.2")
        assert str(exc_info.value) == "patch version is required"

    def test_numeric_leading_zero_prerelease(self):
        with pytest.raises(GrammarMismatch):
            Version.parse("1.0.0-01")

    def test_alphanumeric_leading_zero_prerelease(self):
        """"0a" passes the grammar but fails the stricter identifier check."""
        with pytest.raises(InvalidVersion) as exc_info:
            Version.parse("1.2.3-0a")
        assert str(exc_info.value) == (
            "Failed to parse version string: leading zero in prerelease part"
        )
        assert isinstance(exc_info.value.__cause__, InvalidPrereleaseIdentifier)

    def test_overflow_wrapped(self):
        with pytest.raises(InvalidVersion, match="^Failed to parse version string: ") as exc_info:
            Version.parse(f"1.{MAX_COMPONENT + 1}.0")
        cause = exc_info.value.__cause__
        assert isinstance(cause, NumericConversionError)
        assert cause.field == "minor"
        assert exc_info.value.version == f"1.{MAX_COMPONENT + 1}.0"

    def test_non_string_input(self):
        with pytest.raises(InvalidVersion):
            Version.parse(123)  # type: ignore

    def test_none_input(self):
        with pytest.raises(InvalidVersion):
            Version.parse(None)  # type: ignore

    def test_unknown_policy(self):
        with pytest.raises(ValueError):
            Version.parse("1.2.3", "lenient")


class TestIsValidSemver:
    """Tests for is_valid_semver function."""

    def test_valid_full(self):
        assert is_valid_semver("1.0.0-alpha.1+build.123") is True

    def test_invalid_missing_patch(self):
        assert is_valid_semver("1.0") is False

    def test_loose_missing_patch(self):
        assert is_valid_semver("1.0", LOOSE) is True

    def test_invalid_identifier(self):
        assert is_valid_semver("1.0.0-0a") is False

    def test_invalid_non_string(self):
        assert is_valid_semver(123) is False  # type: ignore

    def test_whitespace_not_trimmed(self):
        assert is_valid_semver("  1.0.0  ") is False


class TestVersionValue:
    """Tests for Version construction, equality and formatting."""

    def test_direct_construction(self):
        v = Version(1, 2, 3, Prerelease.parse("rc.1"), BuildMetadata.parse("b5"))
        assert str(v) == "1.2.3-rc.1+b5"
        assert v.source == "1.2.3-rc.1+b5"

    def test_source_prefers_text(self):
        assert Version.parse("v4", LOOSE).source == "v4"

    def test_base_version(self):
        assert Version.parse("1.2.3-alpha.1+build").base_version == "1.2.3"

    def test_build_affects_equality(self):
        assert Version.parse("1.0.0+a") != Version.parse("1.0.0+b")

    def test_hashable(self):
        assert Version.parse("1.0.0") in {Version(1, 0, 0)}

    def test_frozen(self):
        v = Version.parse("1.0.0")
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.major = 2  # type: ignore

    def test_not_orderable(self):
        with pytest.raises(TypeError):
            Version(1, 0, 0) < Version(2, 0, 0)  # type: ignore[operator]

    def test_each_parse_returns_new_value(self):
        assert Version.parse("1.0.0") is not Version.parse("1.0.0")
