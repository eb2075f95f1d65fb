"""
SC-TapeWave - Configuration
===========================

Configuration for the tape encoder. Configuration can come from:
- Default values (defined here)
- Environment variables (output handling only)

The timing defaults reproduce the SC-3000 tape layout exactly and are
never taken from the environment: a tape with a shortened or missing
leader tone cannot be loaded. Library callers may still construct a
TapeConfig with other lengths. Bit timing, byte framing, key bytes and
the WAVE format are fixed by the receiver.

At 19.2 kHz with 16 samples per bit:
- 3600 leader bits ≈ 3.0s of tone
- 1000ms gap = 19,200 silent samples
- 10ms = 192 silent samples

Copyright (c) 2026 SC-TapeWave Contributors
"""

from dataclasses import dataclass
from typing import Optional
import os


@dataclass
class TapeConfig:
    """
    Configuration for one tape encode.

    Attributes:
        leader_bits: '1' bits in each leader tone (default: 3600)
        lead_in_ms: Silence before the header block (default: 10)
        header_gap_ms: Silence between header and data blocks (default: 1000)
        lead_out_ms: Silence after the data block (default: 10)
        keep_partial_output: Leave a half-written file behind when an
            encode fails (default: False, the file is removed)
    """

    # ═══════════════════════════════════════════════════════════════════════════
    # BLOCK TIMING
    # ═══════════════════════════════════════════════════════════════════════════

    leader_bits: int = 3600  # clock-recovery tone before each block
    lead_in_ms: int = 10
    header_gap_ms: int = 1000  # receiver prepares for program data
    lead_out_ms: int = 10

    # ═══════════════════════════════════════════════════════════════════════════
    # OUTPUT
    # ═══════════════════════════════════════════════════════════════════════════

    keep_partial_output: bool = False

    def __post_init__(self) -> None:
        """Validate timing values."""
        if self.leader_bits < 1:
            raise ValueError(
                f"Leader tone must have at least 1 bit, got {self.leader_bits}"
            )
        for name in ("lead_in_ms", "header_gap_ms", "lead_out_ms"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative")

    # ═══════════════════════════════════════════════════════════════════════════
    # FACTORY METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    @classmethod
    def from_env(cls) -> "TapeConfig":
        """
        Create TapeConfig from environment variables.

        Environment variables (all optional):
            SC_TAPEWAVE_KEEP_PARTIAL: "1", "true" or "yes" to keep failed output

        Returns:
            TapeConfig with protocol timing and output settings from the
            environment
        """
        config = cls()

        if keep := os.environ.get("SC_TAPEWAVE_KEEP_PARTIAL"):
            config.keep_partial_output = keep.strip().lower() in ("1", "true", "yes")

        return config


# ═══════════════════════════════════════════════════════════════════════════════
# GLOBAL CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════

_config: Optional[TapeConfig] = None


def get_config() -> TapeConfig:
    """
    Get the process-wide configuration.

    Creates from environment variables on first access.
    """
    global _config
    if _config is None:
        _config = TapeConfig.from_env()
    return _config


def reset_config() -> None:
    """Forget the cached configuration (re-read from environment next time)."""
    global _config
    _config = None
