"""
Minilex - Scanner for a Small Procedural Language
=================================================

This package turns source files into classified tokens: keywords,
identifiers, digit runs, and single-character operators, each tagged
with the line and column of its first character.

Main Components
---------------
- **scanner**: the Scanner state machine, tokens, and character
  classification predicates
- **errors**: exception hierarchy and source locations
- **cli**: the mlscan command-line driver

Quick Start
-----------
    >>> from minilex import Scanner
    >>> with Scanner("program.src") as scanner:
    ...     for token in scanner:
    ...         print(token)

Or from the terminal:
    $ mlscan program.src
"""

__version__ = "1.0.0"

from minilex.errors import (
    MinilexError,
    SourceLocation,
    SourceUnavailableError,
    ScanError,
    InvalidCharacterError,
    OverlongLexemeError,
)
from minilex.scanner import (
    Scanner,
    ScannerOptions,
    Token,
    TokenKind,
    KEYWORDS,
    OPERATORS,
    tokenize_file,
    tokenize_string,
    is_whitespace,
    is_digit,
    is_letter,
    is_operator,
    is_keyword,
)

__all__ = [
    "__version__",
    # Scanner
    "Scanner",
    "ScannerOptions",
    "Token",
    "TokenKind",
    "KEYWORDS",
    "OPERATORS",
    "tokenize_file",
    "tokenize_string",
    # Predicates
    "is_whitespace",
    "is_digit",
    "is_letter",
    "is_operator",
    "is_keyword",
    # Exception hierarchy
    "MinilexError",
    "SourceLocation",
    "SourceUnavailableError",
    "ScanError",
    "InvalidCharacterError",
    "OverlongLexemeError",
]
