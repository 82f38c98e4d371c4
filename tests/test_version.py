# SPDX-License-Identifier: MIT
"""Unit tests for the Version class."""

import dataclasses
from concurrent.futures import ThreadPoolExecutor

import pytest

from software_version import (
    Token,
    TokenKind,
    Version,
    VersionError,
    VersionTypeError,
    as_version,
    software_version,
)


class TestDisplay:
    """Tests for string representation."""

    def test_round_trip(self):
        """Test that the original string is returned untouched."""
        for raw in ("1:2.3.4-beta~rc2", "1.0.0", " 1.0 ", "KB.16.10.0012", "1.00"):
            assert str(Version(raw)) == raw

    def test_none_version(self):
        """Test that None renders as the empty string."""
        assert str(Version(None)) == ""
        assert str(Version()) == ""

    def test_empty_version(self):
        """Test that the empty string renders as itself."""
        assert str(Version("")) == ""

    def test_number_input(self):
        """Test that numbers are converted to text."""
        assert str(Version(10)) == "10"
        assert str(Version(1.5)) == "1.5"

    def test_repr(self):
        """Test that repr only shows the raw value."""
        assert repr(Version("1.0")) == "Version(raw='1.0')"

    def test_to_json(self):
        """Test that a version serializes as its string."""
        assert Version("2.0rc1").to_json() == "2.0rc1"
        assert Version(None).to_json() == ""


class TestEpoch:
    """Tests for the epoch accessor."""

    def test_epoch(self):
        """Test explicit and implicit epochs."""
        assert Version("").epoch == 0
        assert Version("1.0").epoch == 0
        assert Version("1:1.0").epoch == 1
        assert Version("12:3").epoch == 12

    def test_epoch_must_come_first(self):
        """Test that an epoch token after the first position is ignored."""
        assert Version("1.2:3").epoch == 0
        assert Version("1.2:3").parts == (1, 0, 0)


class TestParts:
    """Tests for major, minor and patch accessors."""

    def test_major(self):
        """Test major version numbers."""
        assert Version(None).major == 0
        assert Version("").major == 0
        assert Version("11").major == 11
        assert Version("11.0.0").major == 11
        assert Version("11.22.33").major == 11
        assert Version("0.1").major == 0

    def test_minor(self):
        """Test minor version numbers."""
        assert Version(None).minor == 0
        assert Version("").minor == 0
        assert Version("11").minor == 0
        assert Version("11.0.0").minor == 0
        assert Version("11.22.33").minor == 22
        assert Version("0.1").minor == 1

    def test_patch(self):
        """Test patch version numbers."""
        assert Version(None).patch == 0
        assert Version("").patch == 0
        assert Version("11").patch == 0
        assert Version("11.0.0").patch == 0
        assert Version("11.22.33").patch == 33
        assert Version("0.0.1.0").patch == 1
        assert Version("19.1R2-S8").patch == 2
        assert Version("KB.16.10.0012").patch == 12

    def test_leading_word_is_skipped(self):
        """Test that the number run starts at the first number."""
        v = Version("KB.16.10.0012")
        assert (v.major, v.minor, v.patch) == (16, 10, 12)

    def test_run_stops_at_first_non_number(self):
        """Test that numbers after a word are not part of the run."""
        assert Version("2.4-1.7").parts == (2, 4, 0)

    def test_epoch_is_skipped(self):
        """Test that the epoch does not count as the major version."""
        assert Version("1:2.3").parts == (2, 3, 0)

    def test_long_run(self):
        """Test that parts keeps every leading number."""
        assert Version("1.2.3.4").parts == (1, 2, 3, 4)


class TestTokens:
    """Tests for the cached token sequence."""

    def test_tokens(self):
        """Test the semantic tokens of a version."""
        assert Version("1:2.3").tokens == (
            Token(TokenKind.EPOCH, 1),
            Token(TokenKind.NUMBER, 2),
            Token(TokenKind.NUMBER, 3),
            Token(TokenKind.EOV),
        )

    def test_tokens_are_cached(self):
        """Test that tokens are computed once."""
        v = Version("1.2.3")
        assert v.tokens is v.tokens
        assert v.parts is v.parts

    def test_sort_key_adds_implicit_epoch(self):
        """Test that the sort key always starts with an epoch."""
        assert Version("1").sort_key[0] == Token(TokenKind.EPOCH, 0)
        assert Version("3:1").sort_key[0] == Token(TokenKind.EPOCH, 3)
        assert Version("3:1").sort_key == Version("3:1").tokens

    def test_concurrent_access(self):
        """Test that concurrent readers all see the same tokens."""
        v = Version("1:2.3.4-beta~rc2")
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: v.tokens, range(32)))
        assert all(tokens == results[0] for tokens in results)
        assert v.parts == (2, 3, 4)


class TestImmutability:
    """Tests for frozen versions."""

    def test_cannot_assign(self):
        """Test that attributes cannot be reassigned."""
        v = Version("1.0")
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.raw = "2.0"


class TestOperators:
    """Tests for rich comparisons."""

    def test_check_versions(self):
        """Test basic ordering between Version objects."""
        assert Version("1.0.0") < Version("1.5.5")
        assert Version("1.5.5") > Version("1.4.8")
        assert Version("1.0.0") < Version("1.10.5")
        assert Version("1.0.0") < Version("1.10")
        assert Version("1.10") < Version("1.10.5")

    def test_sorting(self):
        """Test sorting Version objects."""
        v1, v2, v3, v4, v5 = map(Version, ["1.0.0", "1.5.5", "1.4.8", "1.10.5", "1.10"])
        assert sorted([v1, v2, v3, v4, v5]) == [v1, v3, v2, v5, v4]

    def test_equality(self):
        """Test equality of differently padded versions."""
        v = Version("1.0.0")
        assert v == Version("1.0")
        assert v == Version("1.00")
        assert v == Version("1")
        assert v != Version("1.0.1")

    def test_compare_with_strings_and_numbers(self):
        """Test that plain values are converted on the fly."""
        assert Version("1.0") == "1"
        assert Version("2") > 1
        assert Version("1.5") == 1.5
        assert Version("") == None  # noqa: E711
        assert Version("1:1") >= "2"
        assert Version("1.0alpha") <= "1.0"

    def test_reflected_comparisons(self):
        """Test plain values on the left-hand side."""
        assert "1.0" < Version("2.0")
        assert "2.0" >= Version("2")
        assert "1" == Version("1.0.0")

    def test_caret(self):
        """Test the maximum marker through operators."""
        a = Version("6.0.^")
        assert a > Version("6.0.99999")
        assert a < Version("6.1")

    def test_empty_versions(self):
        """Test that empty and None versions are lower than releases."""
        assert Version("") < Version("1.0.0")
        assert Version(None) < Version("1.0.0")
        assert Version("1.0.0") > Version("")
        assert Version("1.0.0") > Version(None)

    def test_hash(self):
        """Test that equal versions hash alike."""
        assert len({Version("1"), Version("1.0"), Version("1.0.0"), Version("0:1")}) == 1
        lookup = {Version("2.0"): "two"}
        assert lookup[Version("2")] == "two"

    def test_hash_differs_from_plain_value(self):
        """Test that plain values must be converted before hashing."""
        assert Version("1") == "1"
        assert len({Version("1"), "1"}) == 2
        assert len({Version("1"), as_version("1")}) == 1

    def test_eq_with_unrelated_type(self):
        """Test that equality with other types is False."""
        assert not Version("1.0") == ["1", "0"]
        assert Version("1.0") != object()

    def test_ordering_with_unrelated_type(self):
        """Test that ordering with other types fails at conversion."""
        with pytest.raises(VersionTypeError):
            Version("1.0") < object()
        with pytest.raises(TypeError):
            Version("1.0") >= {"major": 1}


class TestAsVersion:
    """Tests for as_version function."""

    def test_converts_argument(self):
        """Test that strings become versions."""
        assert isinstance(as_version("1.0"), Version)
        assert isinstance(as_version(None), Version)
        assert isinstance(as_version(3), Version)

    def test_identity(self):
        """Test that versions are returned as they are."""
        v = Version("1.0")
        assert as_version(v) is v

    def test_alias(self):
        """Test the module level conversion alias."""
        assert isinstance(software_version("1.0"), Version)
        v = Version("1.0")
        assert software_version(v) is v

    def test_rejects_other_types(self):
        """Test that unsupported values raise VersionTypeError."""
        for value in (object(), ["1"], True, b"1.0"):
            with pytest.raises(VersionTypeError) as exc_info:
                as_version(value)
            assert exc_info.value.value is value

    def test_error_hierarchy(self):
        """Test that the error is both a VersionError and a TypeError."""
        with pytest.raises(VersionError) as exc_info:
            as_version([1, 0])
        assert isinstance(exc_info.value, TypeError)
        assert "list" in str(exc_info.value)
