"""
mgolex - MGOL Lexical Analyzer Command-Line Interface
=====================================================

Tokenizes an MGOL source file and prints one token per line. Lexical
errors are written to stderr as they are found, in the fixed format

    2026/10/19 14:03:12 erro na linha 4 coluna 8, palavra $ inexistente na linguagem

Usage Examples
--------------
Print every token:
    $ mgolex programa.alg

Leave comments out:
    $ mgolex --no-comments programa.alg

Verbose mode (scanner debug logging):
    $ mgolex -v programa.alg

Exit status is 0 when the file is lexically valid, 1 when at least one
lexical error was reported and 2 when the file cannot be read or
decoded. An undecodable byte is reported with its line and column.
"""

import logging
import sys
from pathlib import Path

import click

from mgol import __version__
from mgol.cli.errors import ExitCode, handle_cli_exception
from mgol.lexer import (
    RESERVED_WORDS,
    ErrorReporter,
    Scanner,
    ScannerOptions,
    SymbolTable,
)
from mgol.lexer.diagnostics import DIAGNOSTICS_LOGGER


logger = logging.getLogger(__name__)

DIAGNOSTIC_FORMAT = "%(asctime)s %(message)s"
DIAGNOSTIC_DATEFMT = "%Y/%m/%d %H:%M:%S"


# =============================================================================
# Logging Setup
# =============================================================================

def setup_logging(verbose: bool) -> logging.Logger:
    """
    Configure logging and return the logger diagnostics are sent to.

    Diagnostics go to stderr with a timestamp prefix. With ``verbose`` the
    scanner's debug output is shown as well.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")

    diagnostics = logging.getLogger(f"{DIAGNOSTICS_LOGGER}.mgolex")
    for handler in list(diagnostics.handlers):
        diagnostics.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(DIAGNOSTIC_FORMAT, datefmt=DIAGNOSTIC_DATEFMT))
    diagnostics.addHandler(handler)
    diagnostics.setLevel(logging.ERROR)
    diagnostics.propagate = False
    return diagnostics


def format_token_line(token, position) -> str:
    """Format one token as 'line:column  CLASS  lexeme  subtype'."""
    lexeme = token.lexeme.replace("\n", "\\n")
    detail = token.detail or "-"
    return f"{str(position):<8} {token.category:<14} {lexeme}  {detail}"


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--encoding",
    default="utf-8",
    show_default=True,
    help="Source file encoding",
)
@click.option(
    "--no-comments",
    is_flag=True,
    help="Do not print COMMENT tokens",
)
@click.option(
    "--no-cache",
    is_flag=True,
    help="Do not cache identifiers in the symbol table",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="mgolex")
def main(
    input_file: Path,
    encoding: str,
    no_comments: bool,
    no_cache: bool,
    verbose: bool,
) -> None:
    """
    Tokenize an MGOL source file.

    INPUT_FILE is the MGOL program to scan.

    \b
    Examples:
        mgolex programa.alg                # All tokens
        mgolex --no-comments programa.alg  # Without comments
        mgolex -v programa.alg             # Debug logging
    """
    reporter = ErrorReporter(setup_logging(verbose), keep_diagnostics=False)
    options = ScannerOptions(
        cache_identifiers=not no_cache,
        skip_comments=no_comments,
        encoding=encoding,
    )

    try:
        with open(input_file, "rb") as stream, \
                SymbolTable.with_reserved_words(RESERVED_WORDS) as table:
            logger.debug("Scanning %s", input_file)
            scanner = Scanner(stream, table, reporter, options)
            count = 0
            for token, position in scanner.tokens():
                click.echo(format_token_line(token, position))
                count += 1
    except Exception as e:
        handle_cli_exception(e, verbose)

    if verbose:
        click.echo(f"{count} tokens, {reporter.error_count} lexical errors", err=True)

    if reporter.error_count:
        sys.exit(ExitCode.LEXICAL_ERROR)


if __name__ == "__main__":
    main()
