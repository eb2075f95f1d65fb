"""
RIFF/WAVE Output
================

- **WaveContainerWriter**: Two-phase writer that patches the size fields
- **encode_program / encode_to_bytes / write_wav_file**: Whole-file encodes

Copyright (c) 2026 SC-TapeWave Contributors
"""

from sc_tapewave.riff.container import (
    WaveFormat,
    WaveContainerWriter,
    parse_wave_header,
    WAVE_HEADER_SIZE,
)
from sc_tapewave.riff.encoder import (
    encode_program,
    encode_to_bytes,
    write_wav_file,
    validate_wav_filename,
)

__all__ = [
    "WaveFormat",
    "WaveContainerWriter",
    "parse_wave_header",
    "WAVE_HEADER_SIZE",
    "encode_program",
    "encode_to_bytes",
    "write_wav_file",
    "validate_wav_filename",
]
