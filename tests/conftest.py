"""Test configuration and fixtures for LC-3 disassembler tests."""

import pytest
from lc3dis import ListingConfig


# (word, assembly) pairs covering every opcode
SAMPLE_PROGRAM = [
    (0x0C03, "BRnz   [OFFSET +3]"),
    (0x1042, "ADD    R0 R1 R2"),
    (0x2003, "LD     R0 [OFFSET +3]"),
    (0x3207, "ST     R1 [OFFSET +7]"),
    (0x4840, "JSRR   R1"),
    (0x5020, "AND    R0 R0 #+0"),
    (0x6840, "LDR    R4 R1 #+0"),
    (0x74C2, "STR    R2 R3 #+2"),
    (0x8000, "RTI"),
    (0x94BF, "NOT    R2 R2"),
    (0xABF7, "LDI    R5 [OFFSET -9]"),
    (0xB413, "STI    R2 [OFFSET +19]"),
    (0xC1C0, "RET"),
    (0xD000, "[RESERVED]"),
    (0xE9FE, "LEA    R4 [OFFSET -2]"),
    (0xF025, "TRAP   x25"),
]


@pytest.fixture
def sample_program():
    """Provide words and their expected assembly, one per opcode."""
    return list(SAMPLE_PROGRAM)


@pytest.fixture
def default_config():
    return ListingConfig()


@pytest.fixture
def write_program(tmp_path):
    """Helper to write program text to a file and return its path."""
    def _write(text, name="program.hex"):
        path = tmp_path / name
        path.write_text(text)
        return path
    return _write
