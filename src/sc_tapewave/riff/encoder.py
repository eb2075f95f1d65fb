"""
Program to WAVE Encoding
========================

Entry points that run a whole encode: container prologue, both tape
blocks, size patching.

Usage
-----
Write a file:

    >>> program = Program.machine_code(Path("game.bin").read_bytes(), "GAME", 0x9000)
    >>> write_wav_file(program, "game.wav")

Encode in memory:

    >>> wav_data = encode_to_bytes(program)

Copyright (c) 2026 SC-TapeWave Contributors
"""

from pathlib import Path
from typing import BinaryIO, Optional, Union
import io
import logging

from sc_tapewave.config import TapeConfig, get_config
from sc_tapewave.errors import OutputFormatError
from sc_tapewave.riff.container import WaveContainerWriter
from sc_tapewave.tape.records import Program
from sc_tapewave.tape.writer import TapeBlockWriter

logger = logging.getLogger(__name__)


def validate_wav_filename(filepath: Union[str, Path]) -> None:
    """
    Check that an output path ends in '.wav' (any case).

    Raises:
        OutputFormatError: If the extension is anything else
    """
    # Text after the last dot, so a file named just ".wav" is accepted
    _, dot, extension = Path(filepath).name.rpartition(".")
    if not dot or extension.lower() != "wav":
        raise OutputFormatError(str(filepath))


def encode_program(
    program: Program,
    stream: BinaryIO,
    config: Optional[TapeConfig] = None,
) -> int:
    """
    Encode a program as a WAVE file into a seekable stream.

    Args:
        program: The program to encode
        stream: Seekable binary output stream
        config: Block timing (default: global configuration)

    Returns:
        Total number of bytes in the WAVE file

    Raises:
        UnsupportedModeError: If the program's mode has no encoder
        OSError: If the stream cannot be written or rewritten
    """
    program.mode.ensure_supported()

    container = WaveContainerWriter(stream)
    sink = container.begin()
    TapeBlockWriter(sink, config).write_tape(program)
    return container.finish()


def encode_to_bytes(program: Program, config: Optional[TapeConfig] = None) -> bytes:
    """Encode a program as complete WAVE file bytes."""
    buffer = io.BytesIO()
    encode_program(program, buffer, config)
    return buffer.getvalue()


def write_wav_file(
    program: Program,
    filepath: Union[str, Path],
    config: Optional[TapeConfig] = None,
) -> int:
    """
    Encode a program and write it to a WAVE file.

    The mode and file name are checked before the file is created. If the
    encode fails after that, the partial file is removed unless the
    configuration asks to keep it.

    Args:
        program: The program to encode
        filepath: Output path, must end in '.wav'
        config: Block timing (default: global configuration)

    Returns:
        Number of bytes written

    Raises:
        UnsupportedModeError: If the program's mode has no encoder
        OutputFormatError: If the path does not end in '.wav'
        OSError: If the file cannot be created or written
    """
    config = config or get_config()
    filepath = Path(filepath)

    program.mode.ensure_supported()
    validate_wav_filename(filepath)

    f = filepath.open("wb")
    try:
        with f:
            total = encode_program(program, f, config)
    except BaseException:
        if not config.keep_partial_output:
            logger.debug(f"Removing partial output {filepath}")
            filepath.unlink(missing_ok=True)
        raise

    logger.info(f"Wrote '{program.name}' to {filepath} ({total} bytes)")
    return total
