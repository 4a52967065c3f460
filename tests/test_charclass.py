# =============================================================================
# test_charclass.py - Character Classification Tests
# =============================================================================
# Tests for the pure predicates in minilex.scanner.charclass.
#
# Test coverage includes:
#   - Whitespace, digit, and letter sets (ASCII only)
#   - The ten single-character operators
#   - Keyword matching (exact, case-sensitive, closed set)
#   - Totality: sentinel, None, and multi-character arguments
# =============================================================================

import string

import pytest

from minilex.scanner import (
    KEYWORDS,
    OPERATORS,
    is_digit,
    is_keyword,
    is_letter,
    is_operator,
    is_whitespace,
)


class TestWhitespace:
    """Test the whitespace predicate."""

    @pytest.mark.parametrize("char", [" ", "\t", "\r", "\n"])
    def test_whitespace_chars(self, char):
        assert is_whitespace(char)

    @pytest.mark.parametrize("char", ["a", "0", "+", "\f", "\v", "\0"])
    def test_non_whitespace(self, char):
        """Form feed and vertical tab are not whitespace in this language."""
        assert not is_whitespace(char)


class TestDigitsAndLetters:
    """Test ASCII digit and letter recognition."""

    def test_all_ascii_digits(self):
        assert all(is_digit(c) for c in string.digits)

    def test_all_ascii_letters(self):
        assert all(is_letter(c) for c in string.ascii_letters)

    def test_underscore_is_not_letter(self):
        """Underscore starts identifiers but is not a letter."""
        assert not is_letter("_")

    def test_digits_are_not_letters(self):
        assert not any(is_letter(c) for c in string.digits)

    def test_letters_are_not_digits(self):
        assert not any(is_digit(c) for c in string.ascii_letters)

    @pytest.mark.parametrize("char", ["é", "ß", "\xaa"])
    def test_non_ascii_letters_rejected(self, char):
        assert not is_letter(char)

    @pytest.mark.parametrize("char", ["٣", "²"])
    def test_non_ascii_digits_rejected(self, char):
        assert not is_digit(char)


class TestOperators:
    """Test the operator set."""

    def test_operator_set_is_fixed(self):
        assert OPERATORS == frozenset("+-*/=<>!&|")

    @pytest.mark.parametrize("char", list("+-*/=<>!&|"))
    def test_operators(self, char):
        assert is_operator(char)

    @pytest.mark.parametrize("char", list("()[]{};,.%^~?:#\"'"))
    def test_punctuation_is_not_operator(self, char):
        assert not is_operator(char)

    @pytest.mark.parametrize("text", ["==", "<=", "&&", "||"])
    def test_multi_char_operators_rejected(self, text):
        assert not is_operator(text)


class TestKeywords:
    """Test keyword matching."""

    @pytest.mark.parametrize("word", ["if", "else", "while", "return", "int", "float"])
    def test_keywords(self, word):
        assert is_keyword(word)

    def test_keyword_set_is_closed(self):
        assert len(KEYWORDS) == 6

    @pytest.mark.parametrize("word", ["If", "WHILE", "Return", "INT"])
    def test_case_sensitive(self, word):
        assert not is_keyword(word)

    @pytest.mark.parametrize("word", ["for", "char", "void", "iff", "whilex", "in"])
    def test_non_keywords(self, word):
        assert not is_keyword(word)

    def test_digits_never_keywords(self):
        assert not is_keyword("42")

    def test_empty_and_none_rejected(self):
        assert not is_keyword("")
        assert not is_keyword(None)


class TestTotality:
    """Every predicate accepts the end sentinel and None without raising."""

    @pytest.mark.parametrize(
        "predicate", [is_whitespace, is_digit, is_letter, is_operator, is_keyword]
    )
    def test_sentinel(self, predicate):
        assert predicate("") is False

    @pytest.mark.parametrize(
        "predicate", [is_whitespace, is_digit, is_letter, is_operator, is_keyword]
    )
    def test_none(self, predicate):
        assert predicate(None) is False

    @pytest.mark.parametrize(
        "predicate", [is_whitespace, is_digit, is_letter, is_operator, is_keyword]
    )
    @pytest.mark.parametrize("value", [[], {}, set(), 5, b"a", [" "]])
    def test_non_string_values(self, predicate, value):
        """Unhashable and non-string arguments are rejected, not raised on."""
        assert predicate(value) is False

    @pytest.mark.parametrize("predicate", [is_whitespace, is_digit, is_letter, is_operator])
    def test_multi_char_strings(self, predicate):
        assert predicate("ab") is False
        assert predicate("12") is False
        assert predicate("  ") is False
