"""
SC-3000 Tape Block Writer
=========================

This module provides the TapeBlockWriter class, which writes one program
as the two-block SC-3000 tape layout.

Tape Layout
-----------
    silence     lead_in_ms (10ms)
    leader      leader_bits (3600) '1' bits
    header      key, name(16), length(2), [start address(2)], parity, 00 00
    silence     header_gap_ms (1000ms)
    leader      leader_bits (3600) '1' bits
    data        key, program bytes, parity, 00 00
    silence     lead_out_ms (10ms)

The receiver has no clock of its own: it locks onto the leader tone and
uses the key byte to tell header blocks from data blocks.

Usage
-----
    >>> sink = SampleSink(io.BytesIO())
    >>> writer = TapeBlockWriter(sink)
    >>> writer.write_tape(Program.machine_code(b"\\xAB", "TEST", 0x8000))

Copyright (c) 2026 SC-TapeWave Contributors
"""

from typing import Final, Optional
import logging

from sc_tapewave.config import TapeConfig, get_config
from sc_tapewave.tape.checksum import BlockChecksum
from sc_tapewave.tape.framer import ByteFramer, SAMPLES_PER_BYTE
from sc_tapewave.tape.modulator import (
    BitModulator,
    SampleSink,
    SAMPLES_PER_BIT,
    silence_samples,
)
from sc_tapewave.tape.records import Program, TapeMode, TAPE_NAME_LENGTH

logger = logging.getLogger(__name__)

# Two $00 bytes close every block
BLOCK_TRAILER: Final[bytes] = b"\x00\x00"


def header_block_bytes(mode: TapeMode) -> int:
    """
    Number of framed bytes in a header block.

    Key + name + length + [start address] + parity + trailer.
    """
    address = 2 if mode.has_start_address else 0
    return 1 + TAPE_NAME_LENGTH + 2 + address + 1 + len(BLOCK_TRAILER)


def data_block_bytes(program_length: int) -> int:
    """Number of framed bytes in a data block (key + program + parity + trailer)."""
    return 1 + program_length + 1 + len(BLOCK_TRAILER)


def encoded_size(program: Program, config: Optional[TapeConfig] = None) -> int:
    """
    Calculate the number of samples write_tape() produces for a program.

    Args:
        program: The program to measure
        config: Timing configuration (default: global configuration)

    Returns:
        Sample count, which is also the WAVE data chunk size in bytes
    """
    config = config or get_config()
    leader = config.leader_bits * SAMPLES_PER_BIT

    return (
        silence_samples(config.lead_in_ms)
        + leader
        + header_block_bytes(program.mode) * SAMPLES_PER_BYTE
        + silence_samples(config.header_gap_ms)
        + leader
        + data_block_bytes(len(program)) * SAMPLES_PER_BYTE
        + silence_samples(config.lead_out_ms)
    )


class TapeBlockWriter:
    """
    Writes programs to a SampleSink in SC-3000 tape format.

    One writer holds all encoding state for a run: the modulator, the
    byte framer and the checksum of the block being written.

    Attributes:
        sink: Destination for the samples
        config: Block timing
        checksum: Checksum of the active block
    """

    def __init__(self, sink: SampleSink, config: Optional[TapeConfig] = None) -> None:
        self.sink = sink
        self.config = config or get_config()
        self.checksum = BlockChecksum()
        self.modulator = BitModulator(sink)
        self.framer = ByteFramer(self.modulator, self.checksum)
        self._last_parity = 0

    # =========================================================================
    # Blocks
    # =========================================================================

    def write_header_block(self, program: Program) -> None:
        """
        Write the lead-in silence and the header block.

        Raises:
            UnsupportedModeError: If the program's mode has no encoder
        """
        program.mode.ensure_supported()

        self.modulator.emit_silence(self.config.lead_in_ms)
        self.modulator.emit_leader(self.config.leader_bits)

        self._open_block(program.mode.header_key)
        self.framer.write_bytes(program.header_fields())
        self._close_block()

        logger.debug(
            f"Header block: '{program.name}', {len(program)} bytes, "
            f"parity 0x{self._last_parity:02X}"
        )

        # Gives the SC-3000 time to prepare for the program data
        self.modulator.emit_silence(self.config.header_gap_ms)

    def write_data_block(self, program: Program) -> None:
        """
        Write the data block and the lead-out silence.

        Raises:
            UnsupportedModeError: If the program's mode has no encoder
        """
        program.mode.ensure_supported()

        self.modulator.emit_leader(self.config.leader_bits)

        self._open_block(program.mode.data_key)
        self.framer.write_bytes(program.data)
        self._close_block()

        logger.debug(
            f"Data block: {len(program)} bytes, parity 0x{self._last_parity:02X}"
        )

        self.modulator.emit_silence(self.config.lead_out_ms)

    def write_tape(self, program: Program) -> int:
        """
        Write both blocks for a program.

        Returns:
            Number of samples written by this call
        """
        start = self.sink.samples_written
        self.write_header_block(program)
        self.write_data_block(program)
        return self.sink.samples_written - start

    # =========================================================================
    # Helpers
    # =========================================================================

    def _open_block(self, key: int) -> None:
        """Write the key byte, then start the block checksum from zero."""
        self.framer.write_byte(key)
        self.checksum.reset()

    def _close_block(self) -> None:
        """Write the parity byte and the two dummy bytes."""
        self._last_parity = self.checksum.parity
        self.framer.write_byte(self._last_parity)
        for value in BLOCK_TRAILER:
            self.framer.write_byte(value)
