"""Operand formatting shared by the instruction renderers."""

from lc3dis.constants import MNEMONIC_WIDTH


def signed(value: int) -> str:
    """Format a value with an explicit sign: ``+0``, ``+5``, ``-3``."""
    value = int(value)
    if value < 0:
        return f"-{-value}"
    return f"+{value}"


def register(index: int) -> str:
    return f"R{int(index)}"


def immediate(value: int) -> str:
    return f"#{signed(value)}"


def pc_offset(value: int) -> str:
    return f"[OFFSET {signed(value)}]"


def line(mnemonic: str, *operands: str) -> str:
    """Left-justify the mnemonic in its column and append the operands."""
    return mnemonic.ljust(MNEMONIC_WIDTH) + " ".join(operands)
