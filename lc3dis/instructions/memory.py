"""LC-3 load, store and address instructions."""

from lc3dis.decode import DecodedInstruction
from lc3dis.instructions.operands import line, register, immediate, pc_offset


def make_pc_relative(mnemonic: str):
    """Factory for LD/LDI/ST/STI/LEA: register plus 9-bit PC offset."""
    def render_pc_relative(instruction: DecodedInstruction) -> str:
        return line(mnemonic, register(instruction.dr), pc_offset(instruction.pcoffset9))
    return render_pc_relative


def make_base_offset(mnemonic: str):
    """Factory for LDR/STR: register, base register plus 6-bit offset."""
    def render_base_offset(instruction: DecodedInstruction) -> str:
        return line(
            mnemonic,
            register(instruction.dr),
            register(instruction.sr1),
            immediate(instruction.offset6),
        )
    return render_base_offset


render_ld = make_pc_relative("LD")

render_ldi = make_pc_relative("LDI")

render_st = make_pc_relative("ST")

render_sti = make_pc_relative("STI")

render_lea = make_pc_relative("LEA")

render_ldr = make_base_offset("LDR")

render_str = make_base_offset("STR")
