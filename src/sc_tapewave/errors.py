"""
SC-TapeWave Error Hierarchy
===========================

This module defines the exception hierarchy for the tape-audio encoder.
All exceptions inherit from TapeWaveError, allowing callers to catch all
encoder-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
TapeWaveError (base)
├── UsageError (bad caller input)
│   ├── OutputFormatError - output file is not a .wav file
│   └── TapeNameError - name cannot be written to tape
├── BoundsError (value does not fit a 16-bit tape field)
│   ├── ProgramSizeError - program longer than 65535 bytes
│   └── StartAddressError - start address outside $0000-$FFFF
└── UnsupportedModeError - recognised tape mode with no encoder

I/O failures are not wrapped: they propagate as the built-in OSError
subclasses so the CLI can report them as resource errors.

Every check that can raise one of these errors runs before the output
file is created. The WAVE size fields can only be patched once the
sample stream reaches a clean end, so nothing is validated mid-stream.

Copyright (c) 2026 SC-TapeWave Contributors
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class TapeWaveError(Exception):
    """
    Base exception for all SC-TapeWave errors.

        try:
            write_wav_file(program, "game.wav")
        except TapeWaveError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Usage Exceptions
# =============================================================================

class UsageError(TapeWaveError):
    """Base exception for invalid caller input."""
    pass


class OutputFormatError(UsageError):
    """
    Output file name does not have a '.wav' extension.

    The check is case-insensitive: 'GAME.WAV' and 'game.Wav' are accepted.
    """

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"Output file '{filename}' must have '.wav' extension")


class TapeNameError(UsageError):
    """
    Tape name cannot be stored in the 16-byte name field.

    The SC-3000 name field holds plain ASCII; characters outside that
    range have no defined representation on tape.
    """
    pass


# =============================================================================
# Bounds Exceptions
# =============================================================================

class BoundsError(TapeWaveError):
    """Base exception for values that overflow a tape header field."""
    pass


class ProgramSizeError(BoundsError):
    """
    Program does not fit in the tape's 16-bit length field.

    Attributes:
        size: The offending program size in bytes
        filename: Where the program was read from (optional)
    """

    def __init__(self, size: int, filename: Optional[str] = None):
        self.size = size
        self.filename = filename
        source = f"'{filename}' " if filename else ""
        super().__init__(
            f"Program {source}is too large ({size} bytes, maximum 65535)"
        )


class StartAddressError(BoundsError):
    """
    Start address is missing or does not fit in 16 bits.

    Attributes:
        address: The offending address, or None if it was missing
    """

    def __init__(self, address: Optional[int], message: Optional[str] = None):
        self.address = address
        if message is None:
            if address is None:
                message = "Machine code tapes require a start address"
            else:
                message = f"Start address '0x{address:x}' is too high"
        super().__init__(message)


# =============================================================================
# Mode Exceptions
# =============================================================================

class UnsupportedModeError(TapeWaveError):
    """
    The requested tape mode is recognised but has no encoder.

    BASIC tapes store each line as a length/line-number record with
    keywords tokenised to one or two bytes. That encoding is not
    implemented, so BASIC mode fails here instead of producing a tape
    the SC-3000 would reject.
    """

    def __init__(self, mode_name: str):
        self.mode_name = mode_name
        super().__init__(f"{mode_name} support not yet implemented")
