"""
Minilex Scanner
===============

Lexical analysis for a small procedural language with keywords,
identifiers, digit runs, and single-character operators.

Pipeline
--------
    Source file → Scanner (one character of lookahead) → Token, Token, ..., END

The scanner is pull-based: callers ask for one token at a time with
next_token() and stop once they receive the END token.

Usage
-----
>>> from minilex.scanner import tokenize_string
>>> [t.text for t in tokenize_string("x = y")]
['x', '=', 'y', 'EOF']
"""

from minilex.scanner.charclass import (
    is_digit,
    is_keyword,
    is_letter,
    is_operator,
    is_whitespace,
)
from minilex.scanner.scanner import (
    Scanner,
    ScannerOptions,
    tokenize_file,
    tokenize_string,
)
from minilex.scanner.tokens import (
    END_TEXT,
    KEYWORDS,
    MAX_LEXEME_LENGTH,
    OPERATORS,
    Token,
    TokenKind,
)

__all__ = [
    # Scanner
    "Scanner",
    "ScannerOptions",
    "tokenize_file",
    "tokenize_string",
    # Tokens
    "Token",
    "TokenKind",
    "KEYWORDS",
    "OPERATORS",
    "END_TEXT",
    "MAX_LEXEME_LENGTH",
    # Classification predicates
    "is_whitespace",
    "is_digit",
    "is_letter",
    "is_operator",
    "is_keyword",
]
