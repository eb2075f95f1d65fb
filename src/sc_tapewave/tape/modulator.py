"""
Tape Bit Modulation
===================

This module turns logical tape bits into 8-bit unsigned PCM samples.

Bit Encoding
------------
At 19,200 samples/second each tape bit lasts 16 samples (≈833µs). The
two bit values differ in phase, at quarter-bit granularity:

    '1':  HHHH LLLL HHHH LLLL   (two full cycles, 2400 Hz)
    '0':  HHHH HHHH LLLL LLLL   (one full cycle, 1200 Hz)

H is $FF, L is $00. Silence is written as the unsigned mid-level $80.

The SC-3000 measures the time between transitions, so both patterns
must be reproduced sample for sample.

Copyright (c) 2026 SC-TapeWave Contributors
"""

from typing import BinaryIO, Final
import logging

logger = logging.getLogger(__name__)


# =============================================================================
# Sample Constants
# =============================================================================

# 8-bit WAVE data is unsigned
WAVE_HIGH: Final[int] = 0xFF
WAVE_LOW: Final[int] = 0x00
WAVE_SILENCE: Final[int] = 0x80

SAMPLE_RATE: Final[int] = 19200
SAMPLES_PER_BIT: Final[int] = 16

_HIGH_X4: Final[bytes] = bytes([WAVE_HIGH]) * 4
_LOW_X4: Final[bytes] = bytes([WAVE_LOW]) * 4

BIT_ONE_SAMPLES: Final[bytes] = _HIGH_X4 + _LOW_X4 + _HIGH_X4 + _LOW_X4
BIT_ZERO_SAMPLES: Final[bytes] = _HIGH_X4 + _HIGH_X4 + _LOW_X4 + _LOW_X4


def silence_samples(length_ms: int) -> int:
    """
    Number of samples in a silent section.

    19.2 samples per millisecond, rounded down.
    """
    return length_ms * 192 // 10


# =============================================================================
# Sample Sink
# =============================================================================

class SampleSink:
    """
    Append-only destination for audio samples.

    Wraps any binary stream (an open file or io.BytesIO) and counts what
    has been appended to it.

    Attributes:
        stream: The underlying binary stream
        samples_written: Number of sample bytes appended so far
    """

    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream
        self.samples_written = 0

    def append(self, samples: bytes) -> None:
        """Append samples to the stream."""
        self.stream.write(samples)
        self.samples_written += len(samples)


# =============================================================================
# Bit Modulator
# =============================================================================

class BitModulator:
    """
    Writes tape bits, leader tones and silence to a SampleSink.

    Example:
        >>> sink = SampleSink(io.BytesIO())
        >>> modulator = BitModulator(sink)
        >>> modulator.emit(1)
        >>> sink.samples_written
        16
    """

    def __init__(self, sink: SampleSink) -> None:
        self.sink = sink

    def emit(self, bit: int) -> None:
        """Append the 16 samples for one bit."""
        self.sink.append(BIT_ONE_SAMPLES if bit else BIT_ZERO_SAMPLES)

    def emit_leader(self, bit_count: int) -> None:
        """
        Append a leader tone of constant '1' bits.

        The receiver locks onto this tone before the key byte arrives.
        """
        self.sink.append(BIT_ONE_SAMPLES * bit_count)
        logger.debug(f"Leader tone: {bit_count} bits")

    def emit_silence(self, length_ms: int) -> None:
        """Append a silent section of the given length."""
        self.sink.append(bytes([WAVE_SILENCE]) * silence_samples(length_ms))
