"""LC-3 instruction rendering."""

from chex import dataclass

from lc3dis.constants import WORD_MASK, WORD_BITS
from lc3dis.decode import DecodedInstruction, decode, bits
from lc3dis.instructions.control_flow import render_branch, render_jsr, render_return
from lc3dis.instructions.memory import (
    render_ld, render_ldi, render_st, render_sti, render_lea, render_ldr, render_str
)
from lc3dis.instructions.operate import render_add, render_and, render_not
from lc3dis.instructions.system import render_trap, render_rti, render_reserved


RENDERERS = (
    render_branch,
    render_add,
    render_ld,
    render_st,
    render_jsr,
    render_and,
    render_ldr,
    render_str,
    render_rti,
    render_not,
    render_ldi,
    render_sti,
    render_return,
    render_reserved,
    render_lea,
    render_trap,
)


def render(instruction: DecodedInstruction) -> str:
    """Render a decoded instruction as an assembly-like line."""
    return RENDERERS[int(instruction.opcode)](instruction)


def binary_string(word: int) -> str:
    """16 binary digits, most significant bit first."""
    return format(int(word) & WORD_MASK, f"0{WORD_BITS}b")


def hex_string(word: int) -> str:
    """``x`` followed by 4 uppercase hexadecimal digits."""
    return f"x{int(word) & WORD_MASK:04X}"


def assembly_string(word: int) -> str:
    """Assembly-like line for ``word``; bits above 15 are ignored."""
    return render(decode(int(word) & WORD_MASK))


@dataclass(frozen=True)
class Instruction:
    """A single LC-3 instruction word."""
    raw: int

    @property
    def opcode(self) -> int:
        return bits(self.raw, 15, 12)

    def decode(self) -> DecodedInstruction:
        return decode(self.raw)

    def binary_string(self) -> str:
        return binary_string(self.raw)

    def hex_string(self) -> str:
        return hex_string(self.raw)

    def assembly_string(self) -> str:
        return assembly_string(self.raw)
