"""
Scanner
=======

The character-to-token state machine.

A Scanner owns one open text stream and keeps exactly one character of
lookahead. Each call to next_token() skips whitespace, then dispatches on
the lookahead character:

    end of input      -> END
    letter or '_'     -> KEYWORD or IDENTIFIER
    digit             -> IDENTIFIER (or NUMBER with number_tokens=True)
    + - * / = < > ! & | -> OPERATOR
    anything else     -> INVALID

next_token() never raises under the default options, so the scanner is
a total function over its input and diagnostics are left to the caller.

Example Usage
-------------
>>> from minilex.scanner import Scanner
>>> with Scanner.from_string("while x+1") as scanner:
...     for token in scanner:
...         print(token)
Token(KEYWORD, 'while', 1:0)
Token(IDENTIFIER, 'x', 1:6)
Token(OPERATOR, '+', 1:7)
Token(IDENTIFIER, '1', 1:8)
Token(END, 'EOF', 1:9)
"""

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, TextIO, Union

from minilex.errors import OverlongLexemeError, SourceLocation, SourceUnavailableError
from minilex.scanner.charclass import (
    is_digit,
    is_ident_char,
    is_ident_start,
    is_keyword,
    is_operator,
    is_whitespace,
)
from minilex.scanner.tokens import END_TEXT, MAX_LEXEME_LENGTH, Token, TokenKind

logger = logging.getLogger(__name__)

# Lookahead value once the stream is exhausted
SENTINEL = ""

OVERLONG_POLICIES = ("truncate", "error")


# =============================================================================
# Scanner Options
# =============================================================================

@dataclass
class ScannerOptions:
    """
    Scanner configuration options.

    Attributes:
        max_lexeme_length: Longest identifier or number kept. Characters
                           past the bound are consumed but dropped. None
                           means no bound.
        number_tokens: Give digit runs the NUMBER kind. When False (the
                       default) they are classified through the identifier
                       path and come out as IDENTIFIER.
        overlong: "truncate" (default) or "error". With "error" an
                  over-long lexeme raises OverlongLexemeError once it has
                  been fully consumed.
        encoding: Encoding used when the scanner opens a file itself.
                  The single-byte default maps every byte to one character.
    """
    max_lexeme_length: Optional[int] = MAX_LEXEME_LENGTH
    number_tokens: bool = False
    overlong: str = "truncate"
    encoding: str = "latin-1"

    def __post_init__(self):
        if self.max_lexeme_length is not None and self.max_lexeme_length < 1:
            raise ValueError(
                f"max_lexeme_length must be positive, got {self.max_lexeme_length}"
            )
        if self.overlong not in OVERLONG_POLICIES:
            raise ValueError(
                f"overlong must be one of {', '.join(OVERLONG_POLICIES)}, got {self.overlong!r}"
            )


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Pull-based scanner over a single character stream.

    Usage:
        with Scanner("program.src") as scanner:
            token = scanner.next_token()
            while not token.is_end:
                ...
                token = scanner.next_token()

    A scanner is not thread-safe and must not be shared between callers.

    Attributes:
        filename: Name of the source (for token locations)
        options: The ScannerOptions in effect
        line: Current line (1-indexed)
        column: Column of the lookahead character (0-indexed)
        at_end: True once the stream is exhausted
    """

    def __init__(
        self,
        path: Union[str, Path],
        options: Optional[ScannerOptions] = None,
    ):
        """
        Open a source file for scanning.

        Raises:
            SourceUnavailableError: If the file cannot be opened
        """
        options = options or ScannerOptions()
        try:
            # newline="" keeps carriage returns so columns count every byte
            stream = open(path, "r", encoding=options.encoding, newline="")
        except OSError as e:
            logger.debug(f"Failed to open {path}: {e}")
            raise SourceUnavailableError(str(path), e.strerror or str(e)) from e

        self._setup(stream, str(path), options)

    @classmethod
    def from_stream(
        cls,
        stream: TextIO,
        filename: str = "<input>",
        options: Optional[ScannerOptions] = None,
    ) -> "Scanner":
        """
        Create a scanner over an already-open text stream.

        The scanner takes ownership of the stream and closes it on close().
        """
        scanner = cls.__new__(cls)
        scanner._setup(stream, filename, options or ScannerOptions())
        return scanner

    @classmethod
    def from_string(
        cls,
        text: str,
        filename: str = "<input>",
        options: Optional[ScannerOptions] = None,
    ) -> "Scanner":
        """Create a scanner over in-memory source text."""
        return cls.from_stream(io.StringIO(text), filename, options)

    def _setup(self, stream: TextIO, filename: str, options: ScannerOptions) -> None:
        self._stream: Optional[TextIO] = stream
        self.filename = filename
        self.options = options

        self.line = 1
        self.column = 0
        self.at_end = False

        self._lookahead = SENTINEL
        self._read()

        logger.debug(f"Opened {filename} for scanning")

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def close(self) -> None:
        """Release the source stream. Further calls do nothing."""
        if self._stream is None:
            return
        self._stream.close()
        self._stream = None
        logger.debug(f"Closed {self.filename}")

    @property
    def closed(self) -> bool:
        return self._stream is None

    def __enter__(self) -> "Scanner":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    def __repr__(self) -> str:
        return f"Scanner({self.filename!r}, {self.line}:{self.column})"

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    @property
    def lookahead(self) -> str:
        """The next unconsumed character, or "" at end of input."""
        return self._lookahead

    @property
    def location(self) -> SourceLocation:
        """Location of the lookahead character."""
        return SourceLocation(self.filename, self.line, self.column)

    def _read(self) -> None:
        """Load the next character from the stream into the lookahead."""
        char = self._stream.read(1) if self._stream is not None else SENTINEL
        if char == SENTINEL:
            self.at_end = True
        self._lookahead = char

    def _advance(self) -> None:
        """
        Consume the lookahead character.

        Updates line and column for the character being replaced, then
        reads the next one. Does nothing once the end has been reached.
        """
        if self.at_end:
            return

        if self._lookahead == "\n":
            self.line += 1
            self.column = 0
        else:
            self.column += 1

        self._read()

    def _skip_whitespace(self) -> None:
        while not self.at_end and is_whitespace(self._lookahead):
            self._advance()

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Returns END at end of input, and again on every later call.

        Raises:
            OverlongLexemeError: Only with ScannerOptions(overlong="error")
        """
        self._skip_whitespace()

        start_line = self.line
        start_column = self.column

        if self.at_end:
            return self._make_token(TokenKind.END, END_TEXT, start_line, start_column)

        char = self._lookahead

        if is_ident_start(char):
            text = self._accumulate(is_ident_char, start_line, start_column)
            return self._make_token(self._classify(text), text, start_line, start_column)

        if is_digit(char):
            text = self._accumulate(is_digit, start_line, start_column)
            kind = self._classify(text)
            if self.options.number_tokens and kind is TokenKind.IDENTIFIER:
                kind = TokenKind.NUMBER
            return self._make_token(kind, text, start_line, start_column)

        # Single character tokens
        self._advance()
        if is_operator(char):
            return self._make_token(TokenKind.OPERATOR, char, start_line, start_column)
        return self._make_token(TokenKind.INVALID, char, start_line, start_column)

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens up to and including END.

        Yields:
            Token objects in source order
        """
        while True:
            token = self.next_token()
            yield token
            if token.is_end:
                return

    def _accumulate(self, accept, start_line: int, start_column: int) -> str:
        """
        Consume characters while accept() holds and return the kept text.

        Characters past max_lexeme_length are consumed but not kept.
        """
        limit = self.options.max_lexeme_length
        chars = []
        length = 0

        while not self.at_end and accept(self._lookahead):
            if limit is None or length < limit:
                chars.append(self._lookahead)
            length += 1
            self._advance()

        if limit is not None and length > limit:
            location = SourceLocation(self.filename, start_line, start_column)
            if self.options.overlong == "error":
                raise OverlongLexemeError(length, limit, location)
            logger.warning(
                f"{location}: lexeme of {length} characters truncated to {limit}"
            )

        return "".join(chars)

    @staticmethod
    def _classify(text: str) -> TokenKind:
        if is_keyword(text):
            return TokenKind.KEYWORD
        return TokenKind.IDENTIFIER

    def _make_token(
        self,
        kind: TokenKind,
        text: str,
        start_line: int,
        start_column: int,
    ) -> Token:
        return Token(
            kind=kind,
            text=text,
            line=start_line,
            column=start_column,
            filename=self.filename,
        )


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize_file(
    path: Union[str, Path],
    options: Optional[ScannerOptions] = None,
) -> list[Token]:
    """
    Scan a whole file and return its tokens, END included.

    Raises:
        SourceUnavailableError: If the file cannot be opened
    """
    with Scanner(path, options) as scanner:
        return list(scanner.tokenize())


def tokenize_string(
    text: str,
    filename: str = "<input>",
    options: Optional[ScannerOptions] = None,
) -> list[Token]:
    """Scan in-memory source text and return its tokens, END included."""
    with Scanner.from_string(text, filename, options) as scanner:
        return list(scanner.tokenize())
