"""Tests for vectorised program decoding."""

import jax.numpy as jnp
from lc3dis import decode, decode_program, unstack, disassemble_program, assembly_string


def test_matches_scalar_decode(sample_program):
    words = [word for word, _ in sample_program]
    for word, decoded in zip(words, unstack(decode_program(words))):
        assert decoded == decode(word)


def test_field_arrays(sample_program):
    words = [word for word, _ in sample_program]
    program = decode_program(words)
    assert program.opcode.shape == (len(words),)
    assert jnp.array_equal(program.opcode, jnp.arange(16))


def test_sign_extension_in_batch():
    program = decode_program([0x107F, 0x2100, 0x4400, 0x61BF])
    assert int(program.imm5[0]) == -1
    assert int(program.pcoffset9[1]) == -256
    assert int(program.pcoffset11[2]) == -1024
    assert int(program.offset6[3]) == -1


def test_disassemble_program(sample_program):
    words = [word for word, _ in sample_program]
    assert disassemble_program(words) == [expected for _, expected in sample_program]


def test_disassemble_program_matches_scalar_path():
    words = list(range(0, 0x10000, 251))
    assert disassemble_program(words) == [assembly_string(word) for word in words]


def test_high_bits_are_discarded():
    assert disassemble_program([0x1F025]) == ["TRAP   x25"]


def test_words_beyond_int32_are_masked():
    words = [0x1F025, 0x10000F025, (1 << 64) | 0x1042]
    assert disassemble_program(words) == [assembly_string(word) for word in words]
    assert int(decode_program(words).raw[1]) == 0xF025


def test_empty_program():
    assert disassemble_program([]) == []
