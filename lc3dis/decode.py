"""LC-3 instruction decoding.

The helpers below only use shifts, masks and xor, so they accept plain Python
ints as well as JAX arrays. ``decode`` can therefore be called directly on a
word or mapped over a whole program with ``jax.vmap``.
"""

from chex import dataclass


def bits(word: int, high: int, low: int) -> int:
    """Return bits ``high`` down to ``low`` (inclusive) of ``word``, right-justified."""
    return (word >> low) & ((1 << (high - low + 1)) - 1)


def bit(word: int, n: int) -> bool:
    """Return whether bit ``n`` of ``word`` is set."""
    return bits(word, n, n) != 0


def sign_extend(value: int, width: int) -> int:
    """Interpret a ``width``-bit field as two's complement.

    ``value`` must already be masked to ``width`` bits, which is what ``bits``
    returns. Bit ``width - 1`` is the sign bit.
    """
    sign = 1 << (width - 1)
    return (value ^ sign) - sign


@dataclass(frozen=True)
class DecodedInstruction:
    """Decoded LC-3 instruction with every operand field extracted."""
    raw: int
    opcode: int      # Bits 15:12
    dr: int          # Bits 11:9 (DR, SR for stores)
    sr1: int         # Bits 8:6 (SR1, BaseR)
    sr2: int         # Bits 2:0
    imm_mode: bool   # Bit 5 (ADD/AND immediate form)
    imm5: int        # Bits 4:0, sign-extended
    offset6: int     # Bits 5:0, sign-extended
    pcoffset9: int   # Bits 8:0, sign-extended
    pcoffset11: int  # Bits 10:0, sign-extended
    jsrr: bool       # Bit 11 (JSRR when set, JSR when clear)
    n: bool          # Bit 11
    z: bool          # Bit 10
    p: bool          # Bit 9
    trapvect8: int   # Bits 7:0


def decode(instruction: int) -> DecodedInstruction:
    """Decode a 16-bit word into its fields."""
    return DecodedInstruction(
        raw=instruction,
        opcode=bits(instruction, 15, 12),
        dr=bits(instruction, 11, 9),
        sr1=bits(instruction, 8, 6),
        sr2=bits(instruction, 2, 0),
        imm_mode=bit(instruction, 5),
        imm5=sign_extend(bits(instruction, 4, 0), 5),
        offset6=sign_extend(bits(instruction, 5, 0), 6),
        pcoffset9=sign_extend(bits(instruction, 8, 0), 9),
        pcoffset11=sign_extend(bits(instruction, 10, 0), 11),
        jsrr=bit(instruction, 11),
        n=bit(instruction, 11),
        z=bit(instruction, 10),
        p=bit(instruction, 9),
        trapvect8=bits(instruction, 7, 0),
    )
