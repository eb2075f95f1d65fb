"""
sctapewave - SC-3000 Tape Audio Generator Command-Line Interface
=================================================================

This module implements the command-line interface for the tape encoder.
It writes a WAVE file that loads a program into a Sega SC-3000 when
played into the cassette port.

Usage Examples
--------------
Machine code program loading at $9000:
    $ sctapewave --machine-code 9000 GAME game.bin game.wav

Address prefixes are accepted:
    $ sctapewave --machine-code 0x9000 GAME game.bin game.wav
    $ sctapewave --machine-code '$9000' GAME game.bin game.wav

Verbose mode:
    $ sctapewave -v --machine-code 9000 GAME game.bin game.wav

Copyright (c) 2026 SC-TapeWave Contributors
"""

from pathlib import Path
from typing import Optional
import logging
import re

import click

from sc_tapewave import __version__
from sc_tapewave.cli.errors import handle_cli_exception
from sc_tapewave.config import get_config
from sc_tapewave.errors import StartAddressError
from sc_tapewave.riff import WaveFormat, validate_wav_filename, write_wav_file
from sc_tapewave.tape import (
    MAX_START_ADDRESS,
    Program,
    TapeMode,
    TapeName,
    encoded_size,
)

logger = logging.getLogger(__name__)

HEX_DIGITS = re.compile(r"[0-9A-Fa-f]+")


# =============================================================================
# Parameter Types
# =============================================================================

class HexAddress(click.ParamType):
    """
    Click parameter type for hexadecimal addresses.

    Accepts: 9000, 0x9000, $9000 (case-insensitive)
    The command checks the range itself so that an out-of-range address
    is reported as a bounds error rather than a usage error.
    """
    name = "address"

    def convert(self, value: str, param: Optional[click.Parameter],
                ctx: Optional[click.Context]) -> int:
        """Convert hex string to integer."""
        if isinstance(value, int):
            return value

        text = value
        if text.startswith("$"):
            text = text[1:]
        elif text.lower().startswith("0x"):
            text = text[2:]

        # int() alone would also take signs, underscores and whitespace
        if not HEX_DIGITS.fullmatch(text):
            self.fail(f"Invalid hexadecimal address '{value}'", param, ctx)
        return int(text, 16)


HEX_ADDRESS = HexAddress()


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.option(
    "--machine-code", "start_address",
    type=HEX_ADDRESS,
    metavar="ADDRESS",
    help="Write a machine code tape with this start address (hex)",
)
@click.option(
    "--basic",
    is_flag=True,
    help="Write a BASIC tape (not yet implemented)",
)
@click.argument("name")
@click.argument(
    "input_file",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.argument(
    "output_file",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(__version__, "--version", "-V", prog_name="sctapewave")
def main(
    start_address: Optional[int],
    basic: bool,
    name: str,
    input_file: Path,
    output_file: Path,
    verbose: bool,
) -> None:
    """
    Generate Sega SC-3000 tape audio from a program file.

    NAME is the name written on tape (up to 16 characters).
    INPUT_FILE is the program to load (at most 65535 bytes).
    OUTPUT_FILE is the WAVE file to create; it must end in '.wav'.

    Exactly one of --machine-code or --basic is required.

    \b
    Examples:
      sctapewave --machine-code 9000 GAME game.bin game.wav
      sctapewave --machine-code 0x8000 TEST test.bin TEST.WAV
    """
    setup_logging(verbose)

    if basic and start_address is not None:
        raise click.UsageError("--machine-code and --basic are mutually exclusive")
    if not basic and start_address is None:
        raise click.UsageError("One of --machine-code ADDRESS or --basic is required")

    mode = TapeMode.BASIC if basic else TapeMode.MACHINE_CODE

    try:
        # Every check runs before the output file is created
        mode.ensure_supported()
        tape_name = TapeName.from_text(name)
        if start_address is not None and start_address > MAX_START_ADDRESS:
            raise StartAddressError(start_address)
        validate_wav_filename(output_file)

        program = Program.from_file(input_file, tape_name, mode, start_address)
        logger.debug(f"Read {len(program)} bytes from {input_file}")

        config = get_config()
        total = write_wav_file(program, output_file, config)

        if verbose:
            data_size = encoded_size(program, config)
            click.echo(f"Tape name:     '{program.name}'")
            click.echo(f"Mode:          {mode.get_description()}")
            click.echo(f"Program:       {len(program)} bytes")
            if mode.has_start_address:
                click.echo(f"Start address: ${program.start_address:04X}")
            click.echo(f"Duration:      {WaveFormat().duration_seconds(data_size):.1f}s")

        click.echo(f"Created {output_file} ({total} bytes)")

    except Exception as e:
        handle_cli_exception(e, verbose)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
