"""
RIFF/WAVE Container Writer
==========================

This module wraps the tape sample stream in a minimal RIFF/WAVE file.

File Layout (44-byte prologue)
------------------------------
    Offset  Size  Field
    0       4     "RIFF"
    4       4     riff_size (file size - 8)
    8       4     "WAVE"
    12      4     "fmt "
    16      4     Format length (16)
    20      2     Format type (1 = PCM)
    22      2     Channels (1)
    24      4     Sample rate (19200)
    28      4     Byte rate (19200)
    32      2     Block align (1)
    34      2     Bits per sample (8)
    36      4     "data"
    40      4     data_size (file size - 44)
    44      ...   Samples

All container fields are little-endian.

The two size fields are not known until the tape has been written, so
the writer works in two phases: begin() writes placeholders and records
their offsets, finish() seeks back and fills them in. This needs a
seekable stream; use io.BytesIO when writing somewhere that is not.

Copyright (c) 2026 SC-TapeWave Contributors
"""

from dataclasses import dataclass
from typing import BinaryIO, Final, Optional
import logging
import struct

from sc_tapewave.tape.modulator import SampleSink, SAMPLE_RATE

logger = logging.getLogger(__name__)

# The size arithmetic assumes exactly this prologue length, which holds
# because the format chunk is always the 16-byte PCM layout.
WAVE_HEADER_SIZE: Final[int] = 44

# Bytes of the RIFF chunk not counted by riff_size ("RIFF" + the size itself)
RIFF_PREAMBLE_SIZE: Final[int] = 8

_SIZE_PLACEHOLDER: Final[bytes] = b"\x00\x00\x00\x00"


# =============================================================================
# Format Chunk
# =============================================================================

@dataclass(frozen=True)
class WaveFormat:
    """
    The WAVE 'fmt ' chunk for the tape audio.

    One sample per byte at 19.2 kHz, so one tape bit is exactly 16
    samples. The defaults are the only values the encoder produces.
    """
    format_type: int = 1        # PCM
    channels: int = 1           # Mono
    sample_rate: int = SAMPLE_RATE
    byte_rate: int = SAMPLE_RATE  # One byte per frame
    block_align: int = 1
    bits_per_sample: int = 8

    # Length of the fields below, in bytes
    LENGTH = 16

    def to_bytes(self) -> bytes:
        """Serialize the format chunk, including its 'fmt ' id and length."""
        return b"fmt " + struct.pack(
            "<IHHIIHH",
            self.LENGTH,
            self.format_type,
            self.channels,
            self.sample_rate,
            self.byte_rate,
            self.block_align,
            self.bits_per_sample,
        )

    def duration_seconds(self, data_size: int) -> float:
        """Playing time of a data chunk of the given size."""
        return data_size / self.byte_rate


# =============================================================================
# Container Writer
# =============================================================================

class WaveContainerWriter:
    """
    Two-phase RIFF/WAVE writer over a seekable binary stream.

    Example:
        >>> stream = io.BytesIO()
        >>> container = WaveContainerWriter(stream)
        >>> sink = container.begin()
        >>> TapeBlockWriter(sink).write_tape(program)
        >>> total = container.finish()

    Attributes:
        stream: The output stream (must support tell/seek/write)
        wave_format: The format chunk to write
    """

    def __init__(self, stream: BinaryIO, wave_format: Optional[WaveFormat] = None) -> None:
        self.stream = stream
        self.wave_format = wave_format or WaveFormat()
        self._riff_size_pos: Optional[int] = None
        self._data_size_pos: Optional[int] = None
        self._start: int = 0
        self._finished = False

    def begin(self) -> SampleSink:
        """
        Write the prologue with placeholder size fields.

        Returns:
            A SampleSink positioned at the start of the data chunk

        Raises:
            OSError: If the stream cannot be written
        """
        if self._riff_size_pos is not None:
            raise RuntimeError("WAVE container already started")

        self._start = self.stream.tell()

        self.stream.write(b"RIFF")
        self._riff_size_pos = self.stream.tell()
        self.stream.write(_SIZE_PLACEHOLDER)
        self.stream.write(b"WAVE")

        self.stream.write(self.wave_format.to_bytes())

        self.stream.write(b"data")
        self._data_size_pos = self.stream.tell()
        self.stream.write(_SIZE_PLACEHOLDER)

        return SampleSink(self.stream)

    def finish(self) -> int:
        """
        Fill in the size fields.

        Nothing may be written to the container after this call.

        Returns:
            Total container size in bytes

        Raises:
            OSError: If the stream cannot seek or be rewritten
        """
        if self._riff_size_pos is None or self._data_size_pos is None:
            raise RuntimeError("WAVE container finished before begin()")
        if self._finished:
            raise RuntimeError("WAVE container already finished")

        end = self.stream.tell()
        total = end - self._start
        riff_size = total - RIFF_PREAMBLE_SIZE
        data_size = total - WAVE_HEADER_SIZE

        self.stream.seek(self._riff_size_pos)
        self.stream.write(struct.pack("<I", riff_size))
        self.stream.seek(self._data_size_pos)
        self.stream.write(struct.pack("<I", data_size))
        self.stream.seek(end)

        self._finished = True
        logger.info(
            f"WAVE container: {total} bytes, "
            f"{self.wave_format.duration_seconds(data_size):.1f}s of audio"
        )
        return total


def parse_wave_header(data: bytes) -> tuple[int, int]:
    """
    Read the two size fields back from a container prologue.

    Args:
        data: At least 44 bytes of WAVE file data

    Returns:
        Tuple of (riff_size, data_size)

    Raises:
        ValueError: If the data is not a RIFF/WAVE prologue
    """
    if len(data) < WAVE_HEADER_SIZE or data[0:4] != b"RIFF" or data[8:12] != b"WAVE":
        raise ValueError("Not a RIFF/WAVE file")
    riff_size = struct.unpack_from("<I", data, 4)[0]
    data_size = struct.unpack_from("<I", data, 40)[0]
    return riff_size, data_size
