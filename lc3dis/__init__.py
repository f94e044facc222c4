"""LC-3 machine code disassembler package."""

__version__ = "0.1.0"

from lc3dis.decode import DecodedInstruction, decode, bits, bit, sign_extend
from lc3dis.disassembler import Instruction, render, binary_string, hex_string, assembly_string
from lc3dis.program import decode_program, unstack, disassemble_program
from lc3dis.listing import (
    ListingConfig, InvalidWordError, parse_word, disassemble_lines, disassemble_text
)
from lc3dis.constants import *

__all__ = [
    "DecodedInstruction",
    "decode",
    "bits",
    "bit",
    "sign_extend",
    "Instruction",
    "render",
    "binary_string",
    "hex_string",
    "assembly_string",
    "decode_program",
    "unstack",
    "disassemble_program",
    "ListingConfig",
    "InvalidWordError",
    "parse_word",
    "disassemble_lines",
    "disassemble_text",
    "DEFAULT_ORIGIN",
    "WORD_MASK",
]
