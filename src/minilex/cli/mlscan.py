"""
mlscan - Scanner Command-Line Interface
=======================================

Drives the minilex scanner over one source file and prints every token
it produces, one per line:

    line:column<TAB>KIND<TAB>'text'

The listing always ends with the END token.

Usage Examples
--------------
Basic listing:
    $ mlscan program.src

Dedicated NUMBER kind for digit runs:
    $ mlscan --numbers program.src

Fail on the first invalid character:
    $ mlscan --strict program.src

Exit Codes
----------
0 - Success
1 - Scan diagnostic (--strict or --strict-length)
2 - Invalid arguments or unreadable input file
3 - Internal error
"""

import logging
from collections import Counter
from pathlib import Path
from typing import Optional

import click

from minilex import __version__
from minilex.cli.errors import handle_cli_exception
from minilex.errors import InvalidCharacterError
from minilex.scanner import MAX_LEXEME_LENGTH, Scanner, ScannerOptions, Token, TokenKind

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def format_token(token: Token) -> str:
    """Render one token as a listing line."""
    return f"{token.line}:{token.column}\t{token.kind.name}\t{token.text!r}"


def read_source_line(path: Path, line: int, encoding: str) -> Optional[str]:
    """Fetch one line of the source for diagnostics, or None if unreadable."""
    try:
        # Split on LF only, the same line breaks the scanner counts
        with open(path, "r", encoding=encoding, newline="\n") as f:
            for number, text in enumerate(f, start=1):
                if number == line:
                    return text.rstrip("\r\n")
    except OSError as e:
        logger.debug(f"Cannot re-read {path} for context: {e}")
    return None


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--max-length",
    type=click.IntRange(min=1),
    default=None,
    help=f"Longest identifier or number kept (default: {MAX_LEXEME_LENGTH})",
)
@click.option(
    "--unbounded",
    is_flag=True,
    help="Keep identifiers and numbers of any length",
)
@click.option(
    "--numbers",
    is_flag=True,
    help="Report digit runs as NUMBER instead of IDENTIFIER",
)
@click.option(
    "--strict-length",
    is_flag=True,
    help="Fail on over-long lexemes instead of truncating them",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail on the first invalid character",
)
@click.option(
    "--summary",
    is_flag=True,
    help="Print token counts per kind after the listing",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="mlscan")
def main(
    input_file: Path,
    max_length: Optional[int],
    unbounded: bool,
    numbers: bool,
    strict_length: bool,
    strict: bool,
    summary: bool,
    verbose: bool,
) -> None:
    """
    Scan a source file and list its tokens.

    INPUT_FILE is the source file to scan.

    \b
    Examples:
        mlscan prog.src               # Token listing
        mlscan --numbers prog.src     # NUMBER kind for digit runs
        mlscan --strict prog.src      # Stop at the first invalid character
        mlscan --summary prog.src     # Listing plus counts per kind
    """
    setup_logging(verbose)

    try:
        if unbounded and max_length is not None:
            raise click.BadParameter(
                "--max-length cannot be combined with --unbounded",
                param_hint="--max-length",
            )

        if unbounded:
            limit = None
        elif max_length is not None:
            limit = max_length
        else:
            limit = MAX_LEXEME_LENGTH

        options = ScannerOptions(
            max_lexeme_length=limit,
            number_tokens=numbers,
            overlong="error" if strict_length else "truncate",
        )

        counts: Counter = Counter()
        with Scanner(input_file, options) as scanner:
            logger.debug(f"Scanning {input_file} (max length: {limit or 'unbounded'})")
            for token in scanner:
                if strict and token.is_invalid:
                    source_line = read_source_line(input_file, token.line, options.encoding)
                    raise InvalidCharacterError.from_token(token, source_line)
                click.echo(format_token(token))
                counts[token.kind] += 1

        if summary:
            click.echo(f"{sum(counts.values())} tokens")
            for kind in TokenKind:
                if counts[kind]:
                    click.echo(f"  {kind.name}: {counts[kind]}")

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
