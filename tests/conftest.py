"""
SC-TapeWave Test Configuration
==============================

Shared fixtures for the tape encoder tests.

It provides:
- A tape decoder that reads the sample stream back into blocks
- Default-timing configuration isolated from the environment
"""

from dataclasses import dataclass
import os

import pytest

from sc_tapewave.config import TapeConfig, reset_config
from sc_tapewave.tape.modulator import (
    BIT_ONE_SAMPLES,
    BIT_ZERO_SAMPLES,
    SAMPLES_PER_BIT,
    WAVE_SILENCE,
)


# =============================================================================
# Tape Decoder
# =============================================================================

class SampleReader:
    """Reads bits, bytes, leaders and silence back from a sample stream."""

    def __init__(self, samples: bytes) -> None:
        self.samples = samples
        self.pos = 0

    def read_silence(self) -> int:
        """Consume silent samples, returning how many there were."""
        start = self.pos
        while self.pos < len(self.samples) and self.samples[self.pos] == WAVE_SILENCE:
            self.pos += 1
        return self.pos - start

    def read_bit(self) -> int:
        chunk = self.samples[self.pos:self.pos + SAMPLES_PER_BIT]
        if chunk == BIT_ONE_SAMPLES:
            bit = 1
        elif chunk == BIT_ZERO_SAMPLES:
            bit = 0
        else:
            raise AssertionError(f"No tape bit at sample {self.pos}: {chunk.hex()}")
        self.pos += SAMPLES_PER_BIT
        return bit

    def read_leader(self) -> int:
        """Consume '1' bits up to the next start bit, returning the count."""
        count = 0
        while self.samples[self.pos:self.pos + SAMPLES_PER_BIT] == BIT_ONE_SAMPLES:
            self.pos += SAMPLES_PER_BIT
            count += 1
        return count

    def read_byte(self) -> int:
        assert self.read_bit() == 0, "missing start bit"
        value = 0
        for i in range(8):
            value |= self.read_bit() << i
        assert self.read_bit() == 1, "missing first stop bit"
        assert self.read_bit() == 1, "missing second stop bit"
        return value

    def read_bytes(self, count: int) -> bytes:
        return bytes(self.read_byte() for _ in range(count))

    @property
    def at_end(self) -> bool:
        return self.pos == len(self.samples)


@dataclass
class DecodedBlock:
    """One tape block read back from samples."""
    leader_bits: int
    key: int
    payload: bytes
    parity: int
    trailer: bytes


@dataclass
class DecodedTape:
    """A two-block tape read back from samples."""
    lead_in: int
    header: DecodedBlock
    gap: int
    data: DecodedBlock
    lead_out: int

    @property
    def name(self) -> bytes:
        return self.header.payload[:16]

    @property
    def length(self) -> int:
        return int.from_bytes(self.header.payload[16:18], "big")

    @property
    def start_address(self) -> int:
        return int.from_bytes(self.header.payload[18:20], "big")


def _read_block(reader: SampleReader, payload_length: int) -> DecodedBlock:
    leader = reader.read_leader()
    key = reader.read_byte()
    payload = reader.read_bytes(payload_length)
    parity = reader.read_byte()
    trailer = reader.read_bytes(2)
    return DecodedBlock(leader, key, payload, parity, trailer)


def decode_tape(samples: bytes, machine_code: bool = True) -> DecodedTape:
    """Decode the samples produced by TapeBlockWriter.write_tape()."""
    reader = SampleReader(samples)

    lead_in = reader.read_silence()
    header = _read_block(reader, 20 if machine_code else 18)
    gap = reader.read_silence()

    length = int.from_bytes(header.payload[16:18], "big")
    data = _read_block(reader, length)
    lead_out = reader.read_silence()

    assert reader.at_end, f"{len(samples) - reader.pos} samples left after tape"
    return DecodedTape(lead_in, header, gap, data, lead_out)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def tape_decoder():
    """Function that decodes a tape sample stream into blocks."""
    return decode_tape


@pytest.fixture
def sample_reader():
    """Factory for SampleReader over a sample stream."""
    return SampleReader


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep SC_TAPEWAVE_* variables and the cached config out of every test."""
    for name in list(os.environ):
        if name.startswith("SC_TAPEWAVE_"):
            monkeypatch.delenv(name)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def default_config() -> TapeConfig:
    """Protocol-default timing."""
    return TapeConfig()
