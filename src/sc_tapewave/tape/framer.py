"""
Tape Byte Framing
=================

Each byte on tape is sent as 11 bits:

    Bit 0:     Start bit (0)
    Bits 1-8:  Data, least significant bit first
    Bits 9-10: Two stop bits (1)

That is 176 samples per byte at 16 samples per bit.

Copyright (c) 2026 SC-TapeWave Contributors
"""

from typing import Final

from sc_tapewave.tape.checksum import BlockChecksum
from sc_tapewave.tape.modulator import BitModulator, SAMPLES_PER_BIT

BITS_PER_FRAME: Final[int] = 11
SAMPLES_PER_BYTE: Final[int] = BITS_PER_FRAME * SAMPLES_PER_BIT


def frame_bits(value: int) -> list[int]:
    """
    Get the 11 tape bits for one byte.

    Example:
        >>> frame_bits(0x01)
        [0, 1, 0, 0, 0, 0, 0, 0, 0, 1, 1]
    """
    return [0] + [(value >> i) & 1 for i in range(8)] + [1, 1]


class ByteFramer:
    """
    Writes framed bytes and keeps the block checksum up to date.

    Every byte written is added to the checksum, key bytes included.
    The block writer resets the checksum right after the key byte, which
    is what keeps the key byte out of the parity.
    """

    def __init__(self, modulator: BitModulator, checksum: BlockChecksum) -> None:
        self.modulator = modulator
        self.checksum = checksum

    def write_byte(self, value: int) -> None:
        """Write one byte (start bit, 8 data bits, 2 stop bits)."""
        for bit in frame_bits(value):
            self.modulator.emit(bit)
        self.checksum.add(value)

    def write_bytes(self, data: bytes) -> None:
        """Write each byte of data in order."""
        for value in data:
            self.write_byte(value)
