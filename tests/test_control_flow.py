"""Tests for control flow instructions (BR, JSR, JSRR, RET)."""

import pytest
from lc3dis import assembly_string


class TestBranch:
    """Test BR rendering and flag column alignment."""

    def test_no_flags(self):
        assert assembly_string(0x0000) == "BR     [OFFSET +0]"

    @pytest.mark.parametrize("word,expected", [
        (0x0C03, "BRnz   [OFFSET +3]"),
        (0x03FF, "BRp    [OFFSET -1]"),
        (0x0500, "BRz    [OFFSET -256]"),
        (0x0A05, "BRnp   [OFFSET +5]"),
        (0x0E00, "BRnzp  [OFFSET +0]"),
        (0x0E01, "BRnzp  [OFFSET +1]"),
    ])
    def test_flags(self, word, expected):
        assert assembly_string(word) == expected

    def test_offset_column_is_fixed(self):
        columns = {assembly_string(flags << 9).index("[") for flags in range(8)}
        assert columns == {7}


class TestSubroutine:
    """Test JSR and JSRR rendering."""

    def test_jsrr(self):
        assert assembly_string(0x4840) == "JSRR   R1"

    def test_jsr(self):
        assert assembly_string(0x4003) == "JSR    [OFFSET +3]"
        assert assembly_string(0x47FF) == "JSR    [OFFSET -1]"

    def test_jsr_offset_limits(self):
        assert assembly_string(0x43FF) == "JSR    [OFFSET +1023]"
        assert assembly_string(0x4400) == "JSR    [OFFSET -1024]"


class TestReturn:
    """Test RET rendering."""

    def test_ret(self):
        assert assembly_string(0xC000) == "RET"

    def test_ret_ignores_operands(self):
        assert assembly_string(0xC1C0) == "RET"
