"""
SC-3000 Tape Record Definitions
===============================

This module defines the data structures that describe one program on tape:
the tape mode, the 16-byte name field and the program itself.

Tape Structure Overview
-----------------------
Every program is written as two blocks, each preceded by a leader tone:

**Header block**:
    Byte 0:      Key byte ($26 machine code, $16 BASIC)
    Bytes 1-16:  Name, space padded
    Bytes 17-18: Program length (big-endian)
    Bytes 19-20: Start address (big-endian, machine code only)
    Next:        Parity byte
    Next 2:      Dummy $00 bytes

**Data block**:
    Byte 0:      Key byte ($27 machine code, $17 BASIC)
    Bytes 1-n:   Program bytes
    Next:        Parity byte
    Next 2:      Dummy $00 bytes

The key byte is not part of the block checksum.

Copyright (c) 2026 SC-TapeWave Contributors
"""

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Optional, Union

from sc_tapewave.errors import (
    ProgramSizeError,
    StartAddressError,
    TapeNameError,
    UnsupportedModeError,
)


# =============================================================================
# Field Limits
# =============================================================================

# Length of the name field in the header block
TAPE_NAME_LENGTH = 16

# Padding byte for short names
TAPE_NAME_PAD = 0x20

# Largest program the 16-bit length field can describe
MAX_PROGRAM_SIZE = 0xFFFF

# Largest start address the 16-bit address field can describe
MAX_START_ADDRESS = 0xFFFF


# =============================================================================
# Tape Mode
# =============================================================================

class TapeMode(IntEnum):
    """
    The kind of program stored on tape.

    The mode selects the key bytes of both blocks and whether the header
    carries a start address. BASIC is kept as a member so every dispatch
    on the mode has to handle it, but it has no encoder yet.
    """
    MACHINE_CODE = 1
    BASIC = 2

    @property
    def header_key(self) -> int:
        """Key byte that opens the header block."""
        return 0x26 if self == TapeMode.MACHINE_CODE else 0x16

    @property
    def data_key(self) -> int:
        """Key byte that opens the data block."""
        return 0x27 if self == TapeMode.MACHINE_CODE else 0x17

    @property
    def has_start_address(self) -> bool:
        """True if the header block carries a start address."""
        return self == TapeMode.MACHINE_CODE

    @property
    def is_supported(self) -> bool:
        """True if this mode can be encoded."""
        return self == TapeMode.MACHINE_CODE

    def get_description(self) -> str:
        """Get a human-readable description of the mode."""
        descriptions = {
            TapeMode.MACHINE_CODE: "Machine code",
            TapeMode.BASIC: "BASIC",
        }
        return descriptions[self]

    def ensure_supported(self) -> None:
        """
        Fail if this mode has no encoder.

        Raises:
            UnsupportedModeError: For BASIC mode
        """
        if not self.is_supported:
            raise UnsupportedModeError(self.get_description())


# =============================================================================
# Tape Name
# =============================================================================

@dataclass(frozen=True)
class TapeName:
    """
    The 16-byte name field of a header block.

    Attributes:
        raw: Exactly 16 bytes, left-justified and space padded
    """
    raw: bytes

    def __post_init__(self) -> None:
        if len(self.raw) != TAPE_NAME_LENGTH:
            raise TapeNameError(
                f"Tape name field must be {TAPE_NAME_LENGTH} bytes, got {len(self.raw)}"
            )

    @classmethod
    def from_text(cls, name: Union[str, bytes]) -> "TapeName":
        """
        Build the name field from a label.

        Longer names are cut at 16 bytes; shorter names are padded on the
        right with spaces.

        Args:
            name: The label, as text (ASCII only) or raw bytes

        Returns:
            A TapeName holding exactly 16 bytes

        Raises:
            TapeNameError: If a text name contains non-ASCII characters

        Example:
            >>> TapeName.from_text("TEST").raw
            b'TEST            '
        """
        if isinstance(name, str):
            try:
                name = name.encode("ascii")
            except UnicodeEncodeError:
                raise TapeNameError(f"Tape name '{name}' must be plain ASCII") from None

        field = bytes(name[:TAPE_NAME_LENGTH]).ljust(TAPE_NAME_LENGTH, bytes([TAPE_NAME_PAD]))
        return cls(raw=field)

    @property
    def display(self) -> str:
        """The name with trailing padding removed."""
        return self.raw.rstrip(bytes([TAPE_NAME_PAD])).decode("ascii", errors="replace")

    def __str__(self) -> str:
        return self.display


# =============================================================================
# Program
# =============================================================================

@dataclass(frozen=True)
class Program:
    """
    One program to be written to tape.

    All bounds are checked here, so a Program that exists can always be
    encoded without further validation (apart from the mode check).

    Attributes:
        data: The program bytes (0-65535 bytes)
        name: The tape name field
        mode: Machine code or BASIC
        start_address: Load/execution address (machine code only)

    Example:
        >>> program = Program.machine_code(b"\\xAB", "TEST", 0x8000)
        >>> program.header_fields()
        b'TEST            \\x00\\x01\\x80\\x00'
    """
    data: bytes
    name: TapeName
    mode: TapeMode = TapeMode.MACHINE_CODE
    start_address: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate the 16-bit header fields."""
        if len(self.data) > MAX_PROGRAM_SIZE:
            raise ProgramSizeError(len(self.data))

        if self.mode.has_start_address:
            if self.start_address is None:
                raise StartAddressError(None)
            if not 0 <= self.start_address <= MAX_START_ADDRESS:
                raise StartAddressError(self.start_address)

    @classmethod
    def machine_code(
        cls,
        data: bytes,
        name: Union[str, bytes, TapeName],
        start_address: int,
    ) -> "Program":
        """Create a machine code program."""
        if not isinstance(name, TapeName):
            name = TapeName.from_text(name)
        return cls(bytes(data), name, TapeMode.MACHINE_CODE, start_address)

    @classmethod
    def from_file(
        cls,
        filepath: Union[str, Path],
        name: Union[str, bytes, TapeName],
        mode: TapeMode = TapeMode.MACHINE_CODE,
        start_address: Optional[int] = None,
    ) -> "Program":
        """
        Read a program from a binary file.

        Args:
            filepath: The file to read
            name: Tape name for the program
            mode: Tape mode
            start_address: Start address (machine code only)

        Returns:
            The validated Program

        Raises:
            FileNotFoundError: If the file doesn't exist
            ProgramSizeError: If the file is larger than 65535 bytes
        """
        filepath = Path(filepath)

        # Size is checked before reading so a huge file is never loaded
        size = filepath.stat().st_size
        if size > MAX_PROGRAM_SIZE:
            raise ProgramSizeError(size, str(filepath))

        if not isinstance(name, TapeName):
            name = TapeName.from_text(name)
        return cls(filepath.read_bytes(), name, mode, start_address)

    def header_fields(self) -> bytes:
        """
        Serialize the header block payload (name, length, start address).

        The key byte, parity and dummy bytes are not included.
        """
        result = bytearray(self.name.raw)
        result.extend(len(self.data).to_bytes(2, "big"))
        if self.mode.has_start_address:
            result.extend(self.start_address.to_bytes(2, "big"))
        return bytes(result)

    def __len__(self) -> int:
        return len(self.data)
