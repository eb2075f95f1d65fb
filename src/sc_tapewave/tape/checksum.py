"""
Tape Block Checksum
===================

Each tape block ends with a parity byte so that the receiver can detect
a misread. There is no retransmission on tape; a bad parity simply makes
the SC-3000 report a load error.

Algorithm
---------
- Reset to 0 right after the block's key byte
- Add every payload byte with 8-bit wrapping addition
- Parity byte = two's-complement negation of the sum

So for any correctly written block:

    (sum(payload) + parity) % 256 == 0

Example
-------
    >>> calculate_parity(bytes([0xAB]))
    85
    >>> verify_block(bytes([0xAB]), 0x55)
    True

Copyright (c) 2026 SC-TapeWave Contributors
"""

from dataclasses import dataclass
from typing import Final, Iterable

BYTE_MASK: Final[int] = 0xFF


@dataclass
class BlockChecksum:
    """
    Running 8-bit sum of the bytes written in the active block.

    Attributes:
        value: Current sum (0-255)
    """
    value: int = 0

    def add(self, byte: int) -> None:
        """Add one byte to the sum, wrapping at 256."""
        self.value = (self.value + byte) & BYTE_MASK

    def reset(self) -> None:
        """Start a new block."""
        self.value = 0

    @property
    def parity(self) -> int:
        """The byte that closes the block (negated sum)."""
        return (-self.value) & BYTE_MASK


def calculate_parity(payload: Iterable[int]) -> int:
    """
    Calculate the parity byte for a block payload.

    Args:
        payload: The block's bytes, excluding the key byte

    Returns:
        8-bit parity value
    """
    return (-sum(payload)) & BYTE_MASK


def verify_block(payload: Iterable[int], parity: int) -> bool:
    """
    Check a block payload against its parity byte.

    Args:
        payload: The block's bytes, excluding the key byte
        parity: The parity byte read after the payload

    Returns:
        True if payload and parity sum to zero modulo 256
    """
    return (sum(payload) + parity) & BYTE_MASK == 0
