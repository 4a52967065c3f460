"""
Token Definitions
=================

Token kinds, the token value class, and the fixed keyword and operator
sets of the language.

Token Kinds
-----------
- IDENTIFIER: names, and digit runs unless number tokens are enabled
- NUMBER: digit runs (only with ScannerOptions(number_tokens=True))
- KEYWORD: one of if, else, while, return, int, float
- OPERATOR: one of + - * / = < > ! & |
- END: end of input, always the last token
- INVALID: any other single character
- STRING, SEPARATOR: reserved, never produced by the scanner
"""

from dataclasses import dataclass
from enum import Enum, auto

from minilex.errors import SourceLocation


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """Classification of a scanned lexeme."""

    IDENTIFIER = auto()     # Variable or function names
    NUMBER = auto()         # Numeric constants
    STRING = auto()         # Reserved: string literals
    KEYWORD = auto()        # Reserved words
    OPERATOR = auto()       # Single-character operators
    SEPARATOR = auto()      # Reserved: punctuation
    END = auto()            # End of input
    INVALID = auto()        # Unrecognized character


# =============================================================================
# Language Tables
# =============================================================================

KEYWORDS: frozenset[str] = frozenset({
    "if",
    "else",
    "while",
    "return",
    "int",
    "float",
})

OPERATORS: frozenset[str] = frozenset("+-*/=<>!&|")

# Lexeme carried by the END token
END_TEXT = "EOF"

# Longest identifier or number kept verbatim by default
MAX_LEXEME_LENGTH = 255


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token produced by the scanner.

    Tokens are independent values: they hold no reference to the scanner
    that produced them and remain valid after it is closed.

    Attributes:
        kind: The TokenKind classification
        text: The lexeme exactly as captured
        line: Line of the first character (1-indexed)
        column: Column of the first character (0-indexed)
        filename: Name of the source the token came from
    """
    kind: TokenKind
    text: str
    line: int
    column: int
    filename: str = "<input>"

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    @property
    def is_end(self) -> bool:
        return self.kind is TokenKind.END

    @property
    def is_invalid(self) -> bool:
        return self.kind is TokenKind.INVALID
