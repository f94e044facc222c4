"""LC-3 control flow instructions."""

from lc3dis.decode import DecodedInstruction
from lc3dis.instructions.operands import line, register, pc_offset


def render_branch(instruction: DecodedInstruction) -> str:
    """0000 nzp PCoffset9 - BR[n][z][p].

    Absent condition flags leave their column blank, so the offset always
    starts at the same position.
    """
    flags = "".join(
        flag for flag, is_set in zip("nzp", (instruction.n, instruction.z, instruction.p))
        if is_set
    )
    return line(f"BR{flags}", pc_offset(instruction.pcoffset9))


def render_jsr(instruction: DecodedInstruction) -> str:
    """0100 - JSRR BaseR when bit 11 is set, JSR PCoffset11 otherwise."""
    if instruction.jsrr:
        return line("JSRR", register(instruction.sr1))
    return line("JSR", pc_offset(instruction.pcoffset11))


def render_return(instruction: DecodedInstruction) -> str:
    """1100 - RET."""
    return "RET"
