"""
Tests for verparts.versioning.version module.

Tests whole-version behavior including:
- Parsing and round-trip display
- Positional accessors and the sequence protocol
- Ordering (numeric, prerelease, missing parts)
- Equality/ordering/hash consistency
- Conversion to the fixed 4-number form
"""

from __future__ import annotations

from datetime import date
from itertools import permutations, product

import pytest

from verparts.exceptions import ConversionError, EmptyVersionError
from verparts.versioning import Component, FixedVersion, Version

LARGE_INT = "9999999999999999999999999999999999"


class TestParsing:
    """Tests for constructing versions."""

    @pytest.mark.parametrize(
        "value",
        ["1.2.3", "v2021.03.01", " 1.0.0-beta.4 ", "10.0.19044.1", "Beta"],
    )
    def test_original_round_trip(self, value):
        """Test that the input string is kept verbatim."""
        v = Version.parse(value)
        assert v.original == value
        assert str(v) == value

    def test_parse_and_constructor_agree(self):
        """Test that parse() is the constructor."""
        assert Version.parse("1.2.3").parts == Version("1.2.3").parts

    @pytest.mark.parametrize("value", ["", "...", " - "])
    def test_empty_raises(self, value):
        """Test that strings without parts are rejected."""
        with pytest.raises(EmptyVersionError):
            Version.parse(value)

    def test_non_string_raises(self):
        """Test that only strings are accepted."""
        with pytest.raises(TypeError):
            Version(123)  # type: ignore

    def test_repr(self):
        """Test the debug representation."""
        assert repr(Version("1.0-rc")) == "Version('1.0-rc')"

    def test_part_values(self):
        """Test part tokens of a plain dotted version."""
        v = Version("1.2.3.4.5")
        assert [p.value for p in v] == ["1", "2", "3", "4", "5"]

    def test_integer_widths(self):
        """Test narrow readings next to an oversized part."""
        v = Version("1.2.3.4." + LARGE_INT)
        assert [p.value_int for p in v] == [1, 2, 3, 4, None]
        assert [p.value_long for p in v] == [1, 2, 3, 4, None]
        assert [p.value_big for p in v] == [1, 2, 3, 4, int(LARGE_INT)]

    def test_date_part(self):
        """Test that a date-shaped part gets a date reading."""
        v = Version("17.5.0-preview-20221221-03")
        assert v[4].value_date == date(2022, 12, 21)
        assert v[0].value_date is None


class TestSequence:
    """Tests for positional access."""

    def test_accessors(self):
        """Test major/minor/build/revision on a 4-part version."""
        v = Version("10.0.19044.1")
        assert v.major.value == "10"
        assert v.minor.value == "0"
        assert v.build.value == "19044"
        assert v.revision.value == "1"

    def test_missing_accessors(self):
        """Test that absent positions are None."""
        v = Version("1.2")
        assert v.build is None
        assert v.revision is None
        assert v.part_at(10) is None
        assert v.part_at(-1) is None

    def test_sequence_protocol(self):
        """Test len, indexing, slicing and iteration."""
        v = Version("1.0.0-beta.4")
        assert len(v) == 5
        assert v[3].value == "beta"
        assert v[-1].value == "4"
        assert [p.value for p in v[1:3]] == ["0", "0"]
        assert [p.value for p in v] == ["1", "0", "0", "beta", "4"]


class TestPrerelease:
    """Tests for is_prerelease."""

    @pytest.mark.parametrize("value", ["Beta", "BETA", "17.5.0-preview-20221221-03", "1.0rc1"])
    def test_prerelease(self, value):
        """Test that any text part marks a prerelease."""
        assert Version(value).is_prerelease

    @pytest.mark.parametrize("value", ["1.2.3", "10.0.19044.1", LARGE_INT])
    def test_release(self, value):
        """Test that all-numeric versions are releases."""
        assert not Version(value).is_prerelease


class TestOrdering:
    """Tests for version ordering."""

    def test_numeric(self):
        """Test numeric comparison of parts."""
        assert Version("1.2.3") < Version("1.2.4")
        assert Version("1.9.0") < Version("1.10.0")
        assert Version("2.0") > Version("1.99.99")

    def test_prerelease_before_release(self):
        """Test that a text part sorts before a numeric part."""
        assert Version("1.0.alpha") < Version("1.0.0")
        assert Version("1.0.0-rc.1") < Version("1.0.0")

    def test_extra_zero_parts(self):
        """Test that '1.0' and '1.0.0' compare equal both ways."""
        a, b = Version("1.0"), Version("1.0.0")
        assert a == b
        assert a.compare_to(b) == 0
        assert not a < b
        assert not b < a
        assert a <= b and a >= b
        assert hash(a) == hash(b)

    def test_extra_nonzero_part(self):
        """Test that a trailing non-zero part is newer."""
        assert Version("1.0") < Version("1.0.1")

    @pytest.mark.parametrize(
        "expected",
        [
            ("1", "2", "3", "4", "5"),
            ("1.0", "2.8", "3.4", "4.9", "5.3"),
            ("1.6", "2.beta", "2", "2.1", "3.2"),
            ("1.6", "2.beta.3", "2.beta.4", "2.pre.1", "2"),
            ("1.6", "2.beta.3", "2.beta.4", "2.pre.1", "2.0.0"),
        ],
    )
    def test_sort_every_permutation(self, expected):
        """Test that every input order sorts to the same result."""
        versions = [Version(v) for v in expected]
        for perm in permutations(versions):
            assert [v.original for v in sorted(perm)] == list(expected)

    def test_compare_with_other_type_raises(self):
        """Test that ordering against a string is a TypeError."""
        with pytest.raises(TypeError):
            Version("1") < "2"  # noqa: B015


class TestEquality:
    """Tests for version equality and hashing."""

    @pytest.mark.parametrize(
        "a, b",
        [
            ("1", "1"),
            ("1", "1.0"),
            ("1.0", "1.0.0.0.0"),
            ("Beta", "BETA"),
            ("Beta", "BETA.0.0.0"),
            ("1.2.Beta", "1.2.BETA.0.0.0"),
            ("1.2.Beta.1.2.0", "1.2.BETA.1.2.0"),
            ("17.5.0-preview-20221221-03", "17.5.0-PREVIEW.--20221221-03"),
            ("v1.2", "V1.2.0"),
        ],
    )
    def test_equal(self, a, b):
        """Test equal pairs agree on ==, compare_to and hash."""
        v1, v2 = Version(a), Version(b)
        assert v1 == v2
        assert v2 == v1
        assert v1.compare_to(v2) == 0
        assert hash(v1) == hash(v2)

    @pytest.mark.parametrize(
        "a, b",
        [
            ("1", "2"),
            ("1.1", "1.2"),
            ("1.2", "2.1"),
            ("Beta", "Alpha"),
            ("1.2.Beta", "1.2.Alpha"),
            ("1.2.Beta.1.2", "1.2.Beta.1.3"),
            ("17.5.0-preview-20221221-03", "17.5.1-preview-20221221-03"),
            ("17.5.0-preview-20221221-03", "17.5.0-preview-20221221-04"),
            ("1.0", "1.0.beta"),
        ],
    )
    def test_not_equal(self, a, b):
        """Test unequal pairs agree on != and compare_to."""
        v1, v2 = Version(a), Version(b)
        assert v1 != v2
        assert v2 != v1
        assert v1.compare_to(v2) != 0

    def test_compare_zero_iff_equal(self):
        """Test the equality/ordering law over a mixed pool."""
        pool = ["1", "1.0", "1.0.0", "1.00", "1.0.beta", "1.beta", "1.1", "Beta", "BETA.0", "2021.03.01"]
        for a, b in product(pool, repeat=2):
            v1, v2 = Version(a), Version(b)
            assert (v1.compare_to(v2) == 0) == (v1 == v2), (a, b)
            if v1 == v2:
                assert hash(v1) == hash(v2), (a, b)

    def test_set_deduplicates(self):
        """Test that equal versions collapse in a set."""
        assert len({Version("1"), Version("1.0"), Version("1.0.0")}) == 1

    def test_not_equal_to_string(self):
        """Test that a Version never equals a plain string."""
        assert Version("1.0") != "1.0"


class TestFixed4:
    """Tests for to_fixed4."""

    def test_four_parts(self):
        """Test a full 4-part version."""
        assert Version("10.0.19044.1").to_fixed4() == (10, 0, 19044, 1)

    def test_missing_parts_are_zero(self):
        """Test that absent parts default to 0."""
        fixed = Version("1.2").to_fixed4()
        assert fixed == FixedVersion(1, 2, 0, 0)
        assert fixed.build == 0
        assert str(fixed) == "1.2.0.0"

    def test_extra_parts_ignored(self):
        """Test that parts past the fourth are dropped."""
        assert Version("1.2.3.4.5").to_fixed4() == (1, 2, 3, 4)

    def test_text_part_fails(self):
        """Test that a text part names its component and literal."""
        with pytest.raises(ConversionError) as exc_info:
            Version("1.x.3").to_fixed4()
        assert exc_info.value.component is Component.MINOR
        assert exc_info.value.literal == "x"
        assert "Minor" in str(exc_info.value)
        assert "'x'" in str(exc_info.value)

    def test_oversized_part_fails(self):
        """Test that a part beyond 32 bits cannot be converted."""
        with pytest.raises(ConversionError) as exc_info:
            Version("1.2.3000000000").to_fixed4()
        assert exc_info.value.component is Component.BUILD
        assert exc_info.value.literal == "3000000000"

    def test_text_past_fourth_part_ok(self):
        """Test that text after the fourth part is ignored."""
        assert Version("1.2.3.4.beta").to_fixed4() == (1, 2, 3, 4)
