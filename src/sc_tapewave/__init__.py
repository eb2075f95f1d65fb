"""
SC-TapeWave - Tape Audio Generator for the Sega SC-3000
=======================================================

This package converts a binary program into a WAVE file that, played
into the cassette port of a Sega SC-3000, loads the program through the
machine's own tape loader.

Main Components
---------------
- **tape**: Tape protocol encoding
    Bit modulation, byte framing, checksums and the header/data blocks

- **riff**: Audio container
    8-bit unsigned mono PCM WAVE output at 19.2 kHz

- **cli**: Command-line tool (sctapewave)

Quick Start
-----------
    >>> from sc_tapewave import Program, write_wav_file
    >>> program = Program.from_file("game.bin", "GAME", start_address=0x9000)
    >>> write_wav_file(program, "game.wav")

Or use the command-line tool:
    $ sctapewave --machine-code 9000 GAME game.bin game.wav

Version History
---------------
1.0.0 - Machine code tapes

Copyright (c) 2026 SC-TapeWave Contributors
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from sc_tapewave.errors import (
    TapeWaveError,
    UsageError,
    OutputFormatError,
    TapeNameError,
    BoundsError,
    ProgramSizeError,
    StartAddressError,
    UnsupportedModeError,
)
from sc_tapewave.config import TapeConfig, get_config
from sc_tapewave.tape import (
    TapeMode,
    TapeName,
    Program,
    TapeBlockWriter,
    encoded_size,
)
from sc_tapewave.riff import (
    WaveContainerWriter,
    WaveFormat,
    encode_program,
    encode_to_bytes,
    write_wav_file,
)

__all__ = [
    "__version__",
    # Errors
    "TapeWaveError",
    "UsageError",
    "OutputFormatError",
    "TapeNameError",
    "BoundsError",
    "ProgramSizeError",
    "StartAddressError",
    "UnsupportedModeError",
    # Configuration
    "TapeConfig",
    "get_config",
    # Tape
    "TapeMode",
    "TapeName",
    "Program",
    "TapeBlockWriter",
    "encoded_size",
    # Container
    "WaveContainerWriter",
    "WaveFormat",
    "encode_program",
    "encode_to_bytes",
    "write_wav_file",
]
