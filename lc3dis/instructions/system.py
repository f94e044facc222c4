"""LC-3 system instructions and the reserved opcode."""

from lc3dis.decode import DecodedInstruction
from lc3dis.instructions.operands import line


def render_trap(instruction: DecodedInstruction) -> str:
    """1111 0000 trapvect8 - TRAP."""
    return line("TRAP", f"x{int(instruction.trapvect8):X}")


def render_rti(instruction: DecodedInstruction) -> str:
    """1000 - RTI."""
    return "RTI"


def render_reserved(instruction: DecodedInstruction) -> str:
    """1101 - unused opcode."""
    return "[RESERVED]"
