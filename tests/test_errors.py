# =============================================================================
# test_errors.py - Error Hierarchy Tests
# =============================================================================
# Tests for exception formatting and the hierarchy in minilex.errors.
# =============================================================================

import pytest

from minilex.errors import (
    InvalidCharacterError,
    MinilexError,
    OverlongLexemeError,
    ScanError,
    SourceLocation,
    SourceUnavailableError,
)
from minilex.scanner import tokenize_string


class TestHierarchy:
    """All errors derive from MinilexError."""

    @pytest.mark.parametrize("cls", [
        SourceUnavailableError,
        ScanError,
        InvalidCharacterError,
        OverlongLexemeError,
    ])
    def test_subclasses(self, cls):
        assert issubclass(cls, MinilexError)

    def test_scan_errors(self):
        assert issubclass(InvalidCharacterError, ScanError)
        assert issubclass(OverlongLexemeError, ScanError)
        assert not issubclass(SourceUnavailableError, ScanError)


class TestFormatting:
    """Test diagnostic message layout."""

    def test_location_str(self):
        assert str(SourceLocation("a.src", 3, 0)) == "a.src:3:0"

    def test_message_without_location(self):
        assert str(ScanError("bad thing")) == "error: bad thing"

    def test_message_with_location_and_hint(self):
        error = ScanError("bad thing", SourceLocation("a.src", 2, 5), hint="fix it")
        assert str(error) == "a.src:2:5: error: bad thing\nhint: fix it"

    def test_caret_under_zero_based_column(self):
        error = ScanError("oops", SourceLocation("a.src", 1, 2), source_line="ab(cd")
        lines = str(error).split("\n")
        assert lines[1] == "    ab(cd"
        assert lines[2] == "      ^"
        assert lines[1][lines[2].index("^")] == "("

    def test_caret_keeps_leading_tabs(self):
        """Tabs before the column are copied so the caret lines up in a terminal."""
        error = ScanError("oops", SourceLocation("a.src", 1, 3), source_line="\t\tx(")
        lines = str(error).split("\n")
        assert lines[1] == "    \t\tx("
        assert lines[2] == "    \t\t ^"
        assert lines[1].expandtabs()[lines[2].expandtabs().index("^")] == "("

    def test_caret_past_end_of_line(self):
        error = ScanError("oops", SourceLocation("a.src", 1, 4), source_line="ab")
        assert str(error).split("\n")[2] == "        ^"

    def test_source_unavailable_message(self):
        error = SourceUnavailableError("missing.src", "No such file or directory")
        assert str(error) == "cannot open source 'missing.src': No such file or directory"
        assert error.path == "missing.src"

    def test_source_unavailable_without_reason(self):
        assert str(SourceUnavailableError("x")) == "cannot open source 'x'"


class TestInvalidCharacterError:
    """Test conversion of INVALID tokens into diagnostics."""

    def test_from_token(self):
        token = tokenize_string("x = (y)", "prog.src")[2]
        assert token.is_invalid
        error = InvalidCharacterError.from_token(token, "x = (y)")
        assert error.char == "("
        assert error.location == SourceLocation("prog.src", 1, 4)
        assert str(error).startswith("prog.src:1:4: error: invalid character '(' (0x28)")

    def test_overlong_attributes(self):
        error = OverlongLexemeError(300, 255, SourceLocation("<input>", 1, 0))
        assert error.length == 300
        assert error.limit == 255
        assert "exceeds the limit of 255" in str(error)
