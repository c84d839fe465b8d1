"""
tclex - Toy-C Scanner Command-Line Interface
============================================

This module implements the command-line interface for the Toy-C
scanner. It reads a source file, scans it, and prints either the token
stream or every lexical error found.

Usage Examples
--------------
Dump tokens:
    $ tclex hello.tc

Count tokens only:
    $ tclex --count hello.tc

Accept unterminated block comments:
    $ tclex --allow-unterminated-comments hello.tc

Verbose mode:
    $ tclex -v hello.tc

Exit Codes
----------
0 - Success
1 - The source contains lexical errors
2 - Invalid arguments or unreadable input file
3 - Internal error
"""

import logging
from pathlib import Path
from typing import Optional

import click

from toyc import __version__
from toyc.cli.errors import handle_cli_exception
from toyc.lexer import ScannerOptions, Token, lex

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def format_token(token: Token) -> str:
    """Format a token as 'TYPE text' for display, one per line."""
    text = token.text
    if not text:
        return token.type.name
    return f"{token.type.name:<12} {text}"


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--allow-unterminated-comments",
    is_flag=True,
    help="Silently drop a block comment that is still open at end of input",
)
@click.option(
    "--no-question-true",
    is_flag=True,
    help="Treat '?' as an invalid character instead of the 'true' token",
)
@click.option(
    "--max-errors",
    type=click.IntRange(min=1),
    default=None,
    help="Stop after this many lexical errors (default: no limit)",
)
@click.option(
    "-c", "--count",
    is_flag=True,
    help="Print only the number of tokens",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="tclex")
def main(
    input_file: Path,
    allow_unterminated_comments: bool,
    no_question_true: bool,
    max_errors: Optional[int],
    count: bool,
    verbose: bool,
) -> None:
    """
    Scan Toy-C source code and print its tokens.

    INPUT_FILE is the Toy-C source file to scan.

    Every lexical error in the file is reported, not just the first.
    The token stream is only printed when the file has no errors.

    \b
    Examples:
        tclex hello.tc               # One token per line
        tclex -c hello.tc            # Token count only
        tclex -v hello.tc            # Debug logging and summary
    """
    setup_logging(verbose)

    options = ScannerOptions(
        report_unterminated_comments=not allow_unterminated_comments,
        question_mark_as_true=not no_question_true,
        max_errors=max_errors,
    )

    try:
        if verbose:
            click.echo(f"Scanning {input_file}...")

        source = input_file.read_text(encoding="utf-8")
        logger.debug(f"Read {len(source)} characters from {input_file}")

        tokens = lex(source, options)

        if count:
            click.echo(str(len(tokens)))
        else:
            for token in tokens:
                click.echo(format_token(token))

        if verbose:
            click.echo(f"Scanned {input_file}: {len(tokens)} tokens")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
