"""Tests for operate instructions (ADD, AND, NOT)."""

import pytest
from lc3dis import assembly_string


class TestAdd:
    """Test ADD rendering."""

    def test_register_form(self):
        assert assembly_string(0x1042) == "ADD    R0 R1 R2"

    def test_register_form_ignores_unused_bits(self):
        assert assembly_string(0x105A) == "ADD    R0 R1 R2"

    def test_immediate_negative(self):
        assert assembly_string(0x107F) == "ADD    R0 R1 #-1"
        assert assembly_string(0x127F) == "ADD    R1 R1 #-1"

    def test_immediate_positive(self):
        assert assembly_string(0x1265) == "ADD    R1 R1 #+5"

    @pytest.mark.parametrize("word,expected", [
        (0x14F0, "ADD    R2 R3 #-16"),
        (0x102F, "ADD    R0 R0 #+15"),
        (0x1020, "ADD    R0 R0 #+0"),
    ])
    def test_immediate_range(self, word, expected):
        assert assembly_string(word) == expected

    def test_all_registers(self):
        # ADD R7 R7 R7
        assert assembly_string(0x1FC7) == "ADD    R7 R7 R7"


class TestAnd:
    """Test AND rendering."""

    def test_clear_register(self):
        assert assembly_string(0x5020) == "AND    R0 R0 #+0"

    def test_register_form(self):
        assert assembly_string(0x56C1) == "AND    R3 R3 R1"


class TestNot:
    """Test NOT rendering."""

    def test_same_register(self):
        assert assembly_string(0x94BF) == "NOT    R2 R2"

    def test_different_registers(self):
        assert assembly_string(0x9E3F) == "NOT    R7 R0"
