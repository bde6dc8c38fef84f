"""
Tests for verparts.versioning.tokenizer module.

Tests tokenizing including:
- Character classification
- Splitting on class changes and separators
- Empty and separator-only input
"""

from __future__ import annotations

import pytest

from verparts.exceptions import EmptyVersionError
from verparts.versioning.tokenizer import CharClass, classify, tokenize


class TestClassify:
    """Tests for character classification."""

    def test_ascii_letters(self):
        """Test that ASCII letters of both cases are letters."""
        assert classify("a") is CharClass.LETTER
        assert classify("Z") is CharClass.LETTER

    def test_ascii_digits(self):
        """Test that ASCII digits are digits."""
        assert classify("0") is CharClass.DIGIT
        assert classify("9") is CharClass.DIGIT

    @pytest.mark.parametrize("ch", [".", "-", "_", " ", "+", "é", "٣"])
    def test_everything_else_is_other(self, ch):
        """Test that separators and non-ASCII characters are OTHER."""
        assert classify(ch) is CharClass.OTHER


class TestTokenize:
    """Tests for tokenize."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("1.2.3", ["1", "2", "3"]),
            ("v2021.03.01", ["v", "2021", "03", "01"]),
            ("1.0.0-beta.4", ["1", "0", "0", "beta", "4"]),
            ("10.0.19044.1", ["10", "0", "19044", "1"]),
            ("2rc1", ["2", "rc", "1"]),
            ("1..2", ["1", "2"]),
            (".1.2.", ["1", "2"]),
            ("  1 _ 2  ", ["1", "2"]),
            ("Beta", ["Beta"]),
            ("café1", ["caf", "1"]),
        ],
    )
    def test_tokenize(self, value, expected):
        """Test splitting into letter and digit runs."""
        assert tokenize(value) == expected

    def test_leading_zeros_kept(self):
        """Test that tokens keep their exact spelling."""
        assert tokenize("007.00") == ["007", "00"]

    @pytest.mark.parametrize("value", ["", "...", "-_- ", "   "])
    def test_no_tokens_raises(self, value):
        """Test that input without letters or digits is rejected."""
        with pytest.raises(EmptyVersionError) as exc_info:
            tokenize(value)
        assert exc_info.value.value == value

    def test_empty_error_is_value_error(self):
        """Test that EmptyVersionError can be caught as ValueError."""
        with pytest.raises(ValueError):
            tokenize("")
