"""
命令デコード/エンコードのテスト。
"""
import pytest

from retro_chip8.core.errors import IllegalOpcodeFault
from retro_chip8.arch.chip8.instructions import decode_opcode, encode_operation
from retro_chip8.arch.chip8.instructions.maps import INSTRUCTION_FORMATS, FIELD_LAYOUT, EXECUTE_MAP

@pytest.mark.parametrize("opcode, mnemonic", [
    (0x00E0, "CLS"),
    (0x00EE, "RET"),
    (0x0123, "SYS"),
    (0x1ABC, "JP"),
    (0x2ABC, "CALL"),
    (0x3A12, "SE_VX_NN"),
    (0x4A12, "SNE_VX_NN"),
    (0x5AB0, "SE_VX_VY"),
    (0x6A12, "LD_VX_NN"),
    (0x7A12, "ADD_VX_NN"),
    (0x8AB0, "LD_VX_VY"),
    (0x8AB4, "ADD_VX_VY"),
    (0x8AB6, "SHR"),
    (0x8ABE, "SHL"),
    (0x9AB0, "SNE_VX_VY"),
    (0xA123, "LD_I_NNN"),
    (0xB123, "JP_V0_NNN"),
    (0xCA0F, "RND"),
    (0xDAB5, "DRW"),
    (0xEA9E, "SKP"),
    (0xEAA1, "SKNP"),
    (0xFA07, "LD_VX_DT"),
    (0xFA0A, "LD_VX_K"),
    (0xFA33, "LD_B_VX"),
    (0xFA65, "LD_VX_MEM"),
])
def test_decode_mnemonic(opcode, mnemonic):
    assert decode_opcode(opcode).mnemonic == mnemonic

def test_decode_fields():
    op = decode_opcode(0xD1A5)
    assert (op.x, op.y, op.n) == (0x1, 0xA, 0x5)
    assert op.nn == 0xA5
    assert op.nnn == 0x1A5
    assert op.operands == ["V1", "VA", "5"]
    assert op.opcode_hex == "D1A5"

@pytest.mark.parametrize("opcode", [
    0x5121,  # 5XY? with non-zero low nibble
    0x912F,
    0x8128,
    0x812D,
    0xE100,
    0xE19F,
    0xF100,
    0xF1FF,
])
def test_unassigned_encodings_fault(opcode):
    with pytest.raises(IllegalOpcodeFault) as excinfo:
        decode_opcode(opcode)
    assert excinfo.value.opcode == opcode

def _sample_words(mnemonic):
    fmt = INSTRUCTION_FORMATS[mnemonic]
    for value in (0x000, 0x5A5, 0xFFF):
        word = fmt.base
        for name in fmt.fields:
            shift, mask = FIELD_LAYOUT[name]
            word |= (value & mask) << shift
        yield word

@pytest.mark.parametrize("mnemonic", sorted(INSTRUCTION_FORMATS))
def test_reencode_reproduces_word(mnemonic):
    for word in _sample_words(mnemonic):
        if mnemonic == "SYS" and word in (0x00E0, 0x00EE):
            continue
        op = decode_opcode(word)
        assert op.mnemonic == mnemonic
        assert encode_operation(op) == word

def test_every_format_has_executor():
    assert set(INSTRUCTION_FORMATS) == set(EXECUTE_MAP)
