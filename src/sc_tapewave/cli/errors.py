"""
CLI Error Handling
==================

Provides consistent error reporting and exit codes for the CLI.

Copyright (c) 2026 SC-TapeWave Contributors
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from sc_tapewave.errors import TapeWaveError, UsageError


class ExitCode(IntEnum):
    """Exit codes for the CLI."""
    SUCCESS = 0
    ENCODE_ERROR = 1     # Bounds error or unsupported mode
    INVALID_ARGS = 2     # Invalid arguments or unreadable files
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception and exit with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always
    """
    if isinstance(error, UsageError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, TapeWaveError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.ENCODE_ERROR)

    elif isinstance(error, click.BadParameter):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, (FileNotFoundError, PermissionError, IsADirectoryError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, OSError):
        # Disk full, seek failure and similar; output is already removed
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.ENCODE_ERROR)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
