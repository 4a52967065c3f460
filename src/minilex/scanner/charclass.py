"""
Character Classification
========================

Pure predicates used by the scanner to classify the lookahead character.
All of them are total: any argument, including the end-of-input sentinel
(the empty string), multi-character strings, None, and non-string
values, yields a bool.

Only ASCII is recognized; there is no locale awareness.
"""

import string
from typing import Optional

from minilex.scanner.tokens import KEYWORDS, OPERATORS


WHITESPACE = frozenset(" \t\r\n")
DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)

# Characters that can start and continue an identifier
IDENT_START = LETTERS | {"_"}
IDENT_CHARS = IDENT_START | DIGITS


def is_whitespace(c: Optional[str]) -> bool:
    """Space, tab, carriage return, or newline."""
    return isinstance(c, str) and c in WHITESPACE


def is_digit(c: Optional[str]) -> bool:
    """ASCII '0' through '9'."""
    return isinstance(c, str) and c in DIGITS


def is_letter(c: Optional[str]) -> bool:
    """ASCII 'A'-'Z' or 'a'-'z'."""
    return isinstance(c, str) and c in LETTERS


def is_ident_start(c: Optional[str]) -> bool:
    return isinstance(c, str) and c in IDENT_START


def is_ident_char(c: Optional[str]) -> bool:
    return isinstance(c, str) and c in IDENT_CHARS


def is_operator(c: Optional[str]) -> bool:
    """One of the ten single-character operators."""
    return isinstance(c, str) and c in OPERATORS


def is_keyword(text: Optional[str]) -> bool:
    """
    Exact, case-sensitive keyword match.

    Empty strings and None never match.
    """
    return isinstance(text, str) and text in KEYWORDS
