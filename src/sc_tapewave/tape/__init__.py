"""
SC-3000 Tape Encoding
=====================

This module turns a program into the sample stream the SC-3000 reads
from its cassette port.

This module provides:
- **Program / TapeName / TapeMode**: What goes on tape
- **BitModulator**: One tape bit as 16 PCM samples
- **ByteFramer**: One byte as 11 framed bits, with the block checksum
- **TapeBlockWriter**: The header and data blocks with leaders and gaps

Quick Start
-----------
    >>> import io
    >>> from sc_tapewave.tape import Program, SampleSink, TapeBlockWriter
    >>> sink = SampleSink(io.BytesIO())
    >>> TapeBlockWriter(sink).write_tape(Program.machine_code(b"\\xC9", "RET", 0x9000))

Copyright (c) 2026 SC-TapeWave Contributors
"""

from sc_tapewave.tape.records import (
    TapeMode,
    TapeName,
    Program,
    TAPE_NAME_LENGTH,
    MAX_PROGRAM_SIZE,
    MAX_START_ADDRESS,
)
from sc_tapewave.tape.checksum import (
    BlockChecksum,
    calculate_parity,
    verify_block,
)
from sc_tapewave.tape.modulator import (
    SampleSink,
    BitModulator,
    SAMPLE_RATE,
    SAMPLES_PER_BIT,
    WAVE_HIGH,
    WAVE_LOW,
    WAVE_SILENCE,
    BIT_ONE_SAMPLES,
    BIT_ZERO_SAMPLES,
    silence_samples,
)
from sc_tapewave.tape.framer import (
    ByteFramer,
    frame_bits,
    BITS_PER_FRAME,
    SAMPLES_PER_BYTE,
)
from sc_tapewave.tape.writer import (
    TapeBlockWriter,
    encoded_size,
    header_block_bytes,
    data_block_bytes,
)

__all__ = [
    # Records
    "TapeMode",
    "TapeName",
    "Program",
    "TAPE_NAME_LENGTH",
    "MAX_PROGRAM_SIZE",
    "MAX_START_ADDRESS",
    # Checksum
    "BlockChecksum",
    "calculate_parity",
    "verify_block",
    # Modulation
    "SampleSink",
    "BitModulator",
    "SAMPLE_RATE",
    "SAMPLES_PER_BIT",
    "WAVE_HIGH",
    "WAVE_LOW",
    "WAVE_SILENCE",
    "BIT_ONE_SAMPLES",
    "BIT_ZERO_SAMPLES",
    "silence_samples",
    # Framing
    "ByteFramer",
    "frame_bits",
    "BITS_PER_FRAME",
    "SAMPLES_PER_BYTE",
    # Writer
    "TapeBlockWriter",
    "encoded_size",
    "header_block_bytes",
    "data_block_bytes",
]
