"""LC-3 operate instructions (ADD, AND, NOT)."""

from lc3dis.decode import DecodedInstruction
from lc3dis.instructions.operands import line, register, immediate


def make_binary_operation(mnemonic: str):
    """Factory for ADD/AND, which share the register and immediate forms."""
    def render_binary_operation(instruction: DecodedInstruction) -> str:
        if instruction.imm_mode:
            source = immediate(instruction.imm5)
        else:
            source = register(instruction.sr2)
        return line(mnemonic, register(instruction.dr), register(instruction.sr1), source)
    return render_binary_operation


render_add = make_binary_operation("ADD")

render_and = make_binary_operation("AND")


def render_not(instruction: DecodedInstruction) -> str:
    """1001 DR SR 111111 - NOT DR, SR."""
    return line("NOT", register(instruction.dr), register(instruction.sr1))
