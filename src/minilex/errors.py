"""
Minilex Error Hierarchy
=======================

This module defines the exception hierarchy for the minilex scanner.
All exceptions inherit from MinilexError, allowing callers to catch all
scanner-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
MinilexError (base)
├── SourceUnavailableError - the source file cannot be opened
└── ScanError - diagnostics tied to a position in the source
    ├── InvalidCharacterError - character outside the language
    └── OverlongLexemeError - lexeme longer than the configured bound

Scan-Time Policy
----------------
The scanner itself never raises for unrecognized input: such characters
become INVALID tokens. The ScanError family exists for drivers that want
to turn those tokens into hard diagnostics, and for the optional strict
lexeme length policy.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)

Columns are 0-based, matching the positions carried by tokens.
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class MinilexError(Exception):
    """
    Base exception for all minilex errors.

        try:
            tokens = tokenize_file("program.src")
        except MinilexError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (0-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Construction-Time Errors
# =============================================================================

class SourceUnavailableError(MinilexError):
    """
    The source could not be opened for reading.

    This is the only failure a scanner can report while being constructed.
    The underlying OSError is chained as __cause__.

    Attributes:
        path: The path that was requested
        reason: Short description of why opening failed
    """

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = f"cannot open source '{path}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


# =============================================================================
# Scan-Time Diagnostics
# =============================================================================

class ScanError(MinilexError):
    """
    Base exception for diagnostics that point into the source text.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            prog.src:3:8: error: invalid character '(' (0x28)
                while(x)
                     ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Caret sits under the 0-based column; tabs are kept so it lines up
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            prefix = self.source_line[:self.location.column]
            padding = "".join("\t" if char == "\t" else " " for char in prefix)
            padding += " " * (self.location.column - len(prefix))
            parts.append(f"    {padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class InvalidCharacterError(ScanError):
    """
    Character that does not belong to the language.

    The scanner reports these as INVALID tokens; strict drivers convert
    the token into this exception with from_token().
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"invalid character {char!r} (0x{ord(char):02X})",
            location=location,
            source_line=source_line,
        )

    @classmethod
    def from_token(cls, token, source_line: Optional[str] = None) -> "InvalidCharacterError":
        """Build the diagnostic for an INVALID token."""
        return cls(token.text, token.location, source_line)


class OverlongLexemeError(ScanError):
    """
    Identifier or number longer than the configured maximum.

    Only raised when the scanner runs with overlong="error"; the default
    policy truncates instead.
    """

    def __init__(
        self,
        length: int,
        limit: int,
        location: Optional[SourceLocation] = None,
    ):
        self.length = length
        self.limit = limit
        super().__init__(
            f"lexeme of {length} characters exceeds the limit of {limit}",
            location=location,
            hint="raise --max-length or use --unbounded",
        )
