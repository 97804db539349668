"""
CLI Error Handling
==================

Consistent exit codes and error messages for the MGOL command-line tools.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from mgol.errors import MgolError


class ExitCode(IntEnum):
    """Standard exit codes for CLI tools."""
    SUCCESS = 0
    LEXICAL_ERROR = 1    # At least one lexical error was reported
    INVALID_ARGS = 2     # Invalid arguments or unreadable input
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Print ``error`` and exit with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print the full traceback for internal errors
    """
    if isinstance(error, MgolError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, (FileNotFoundError, PermissionError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, LookupError):
        # codecs.lookup failure: --encoding names no known codec
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
