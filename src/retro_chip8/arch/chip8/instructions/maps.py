# src/retro_chip8/arch/chip8/instructions/maps.py
"""
命令セットの定義と、デコード/実行のマッピングテーブル。

上位ニブルで16の命令ファミリーを選び、ファミリー 0x0/0x5/0x8/0x9/0xE/0xF は
下位ニブルまたは下位バイトでさらに分岐します。
"""
from typing import Callable, Dict, NamedTuple, Optional, Tuple

from . import control
from . import alu
from . import load
from . import display
from . import keypad
from . import timer
from .base import field_x, field_y, field_n, field_nn, field_nnn

# @intent:data_structure 命令1種類のエンコーディング定義。
#                       base はフィールドを全て0にした命令ワード、fields は使用するフィールド名です。
class InstructionFormat(NamedTuple):
    base: int
    fields: Tuple[str, ...]
    operands: Tuple[str, ...]  # 表示用の書式（str.format形式）

# @intent:map ニーモニックからエンコーディング定義へのマッピングテーブル。
INSTRUCTION_FORMATS: Dict[str, InstructionFormat] = {
    # Family 0x0
    "SYS":       InstructionFormat(0x0000, ("nnn",), ("${nnn:03X}",)),
    "CLS":       InstructionFormat(0x00E0, (), ()),
    "RET":       InstructionFormat(0x00EE, (), ()),
    # Single-instruction families
    "JP":        InstructionFormat(0x1000, ("nnn",), ("${nnn:03X}",)),
    "CALL":      InstructionFormat(0x2000, ("nnn",), ("${nnn:03X}",)),
    "SE_VX_NN":  InstructionFormat(0x3000, ("x", "nn"), ("V{x:X}", "#${nn:02X}")),
    "SNE_VX_NN": InstructionFormat(0x4000, ("x", "nn"), ("V{x:X}", "#${nn:02X}")),
    "SE_VX_VY":  InstructionFormat(0x5000, ("x", "y"), ("V{x:X}", "V{y:X}")),
    "LD_VX_NN":  InstructionFormat(0x6000, ("x", "nn"), ("V{x:X}", "#${nn:02X}")),
    "ADD_VX_NN": InstructionFormat(0x7000, ("x", "nn"), ("V{x:X}", "#${nn:02X}")),
    # Family 0x8
    "LD_VX_VY":  InstructionFormat(0x8000, ("x", "y"), ("V{x:X}", "V{y:X}")),
    "OR":        InstructionFormat(0x8001, ("x", "y"), ("V{x:X}", "V{y:X}")),
    "AND":       InstructionFormat(0x8002, ("x", "y"), ("V{x:X}", "V{y:X}")),
    "XOR":       InstructionFormat(0x8003, ("x", "y"), ("V{x:X}", "V{y:X}")),
    "ADD_VX_VY": InstructionFormat(0x8004, ("x", "y"), ("V{x:X}", "V{y:X}")),
    "SUB":       InstructionFormat(0x8005, ("x", "y"), ("V{x:X}", "V{y:X}")),
    "SHR":       InstructionFormat(0x8006, ("x", "y"), ("V{x:X}",)),
    "SUBN":      InstructionFormat(0x8007, ("x", "y"), ("V{x:X}", "V{y:X}")),
    "SHL":       InstructionFormat(0x800E, ("x", "y"), ("V{x:X}",)),
    "SNE_VX_VY": InstructionFormat(0x9000, ("x", "y"), ("V{x:X}", "V{y:X}")),
    # Families 0xA-0xD
    "LD_I_NNN":  InstructionFormat(0xA000, ("nnn",), ("I", "${nnn:03X}")),
    "JP_V0_NNN": InstructionFormat(0xB000, ("nnn",), ("V0", "${nnn:03X}")),
    "RND":       InstructionFormat(0xC000, ("x", "nn"), ("V{x:X}", "#${nn:02X}")),
    "DRW":       InstructionFormat(0xD000, ("x", "y", "n"), ("V{x:X}", "V{y:X}", "{n}")),
    # Family 0xE
    "SKP":       InstructionFormat(0xE09E, ("x",), ("V{x:X}",)),
    "SKNP":      InstructionFormat(0xE0A1, ("x",), ("V{x:X}",)),
    # Family 0xF
    "LD_VX_DT":  InstructionFormat(0xF007, ("x",), ("V{x:X}", "DT")),
    "LD_VX_K":   InstructionFormat(0xF00A, ("x",), ("V{x:X}", "K")),
    "LD_DT_VX":  InstructionFormat(0xF015, ("x",), ("DT", "V{x:X}")),
    "LD_ST_VX":  InstructionFormat(0xF018, ("x",), ("ST", "V{x:X}")),
    "ADD_I_VX":  InstructionFormat(0xF01E, ("x",), ("I", "V{x:X}")),
    "LD_F_VX":   InstructionFormat(0xF029, ("x",), ("F", "V{x:X}")),
    "LD_B_VX":   InstructionFormat(0xF033, ("x",), ("B", "V{x:X}")),
    "LD_MEM_VX": InstructionFormat(0xF055, ("x",), ("[I]", "V{x:X}")),
    "LD_VX_MEM": InstructionFormat(0xF065, ("x",), ("V{x:X}", "[I]")),
}

# @intent:map フィールド名から抽出関数へのマッピング。
FIELD_EXTRACTORS: Dict[str, Callable[[int], int]] = {
    "x": field_x,
    "y": field_y,
    "n": field_n,
    "nn": field_nn,
    "nnn": field_nnn,
}

# @intent:map フィールド名から (シフト量, マスク) へのマッピング。エンコード時に使用します。
FIELD_LAYOUT: Dict[str, Tuple[int, int]] = {
    "x": (8, 0xF),
    "y": (4, 0xF),
    "n": (0, 0xF),
    "nn": (0, 0xFF),
    "nnn": (0, 0xFFF),
}

# --- ファミリー内のサブテーブル ---

# @intent:map ファミリー0x0: 命令ワード全体で判定し、それ以外はSYS。
FAMILY_0_WORDS = {0x00E0: "CLS", 0x00EE: "RET"}

# @intent:map 単一命令のファミリー: 上位ニブルのみで決まります。
SINGLE_FAMILIES = {
    0x1: "JP", 0x2: "CALL", 0x3: "SE_VX_NN", 0x4: "SNE_VX_NN", 0x6: "LD_VX_NN",
    0x7: "ADD_VX_NN", 0xA: "LD_I_NNN", 0xB: "JP_V0_NNN", 0xC: "RND", 0xD: "DRW",
}

# @intent:map ファミリー0x5/0x8/0x9: 下位ニブルで判定。0x5/0x9は0以外を不正とします。
LOW_NIBBLE_TABLES = {
    0x5: {0x0: "SE_VX_VY"},
    0x8: {0x0: "LD_VX_VY", 0x1: "OR", 0x2: "AND", 0x3: "XOR", 0x4: "ADD_VX_VY",
          0x5: "SUB", 0x6: "SHR", 0x7: "SUBN", 0xE: "SHL"},
    0x9: {0x0: "SNE_VX_VY"},
}

# @intent:map ファミリー0xE/0xF: 下位バイトで判定。
LOW_BYTE_TABLES = {
    0xE: {0x9E: "SKP", 0xA1: "SKNP"},
    0xF: {0x07: "LD_VX_DT", 0x0A: "LD_VX_K", 0x15: "LD_DT_VX", 0x18: "LD_ST_VX",
          0x1E: "ADD_I_VX", 0x29: "LD_F_VX", 0x33: "LD_B_VX", 0x55: "LD_MEM_VX", 0x65: "LD_VX_MEM"},
}

def _decode_family_0(opcode: int) -> Optional[str]:
    return FAMILY_0_WORDS.get(opcode, "SYS")

def _single(family: int) -> Callable[[int], Optional[str]]:
    mnemonic = SINGLE_FAMILIES[family]
    return lambda opcode: mnemonic

def _by_low_nibble(family: int) -> Callable[[int], Optional[str]]:
    table = LOW_NIBBLE_TABLES[family]
    return lambda opcode: table.get(opcode & 0xF)

def _by_low_byte(family: int) -> Callable[[int], Optional[str]]:
    table = LOW_BYTE_TABLES[family]
    return lambda opcode: table.get(opcode & 0xFF)

# @intent:map 上位ニブル（命令ファミリー）からニーモニック判定関数へのマッピングテーブル。
#            判定関数はNoneを返すことで未割り当てのエンコーディングを示します。
DECODE_MAP: Dict[int, Callable[[int], Optional[str]]] = {
    0x0: _decode_family_0,
    0x1: _single(0x1),
    0x2: _single(0x2),
    0x3: _single(0x3),
    0x4: _single(0x4),
    0x5: _by_low_nibble(0x5),
    0x6: _single(0x6),
    0x7: _single(0x7),
    0x8: _by_low_nibble(0x8),
    0x9: _by_low_nibble(0x9),
    0xA: _single(0xA),
    0xB: _single(0xB),
    0xC: _single(0xC),
    0xD: _single(0xD),
    0xE: _by_low_byte(0xE),
    0xF: _by_low_byte(0xF),
}

# @intent:map ニーモニックから実行関数へのマッピングテーブル。
EXECUTE_MAP = {
    # Control
    "SYS": control.execute_sys,
    "RET": control.execute_ret,
    "JP": control.execute_jp,
    "CALL": control.execute_call,
    "SE_VX_NN": control.execute_se_vx_nn,
    "SNE_VX_NN": control.execute_sne_vx_nn,
    "SE_VX_VY": control.execute_se_vx_vy,
    "SNE_VX_VY": control.execute_sne_vx_vy,
    "JP_V0_NNN": control.execute_jp_v0_nnn,

    # ALU
    "LD_VX_NN": alu.execute_ld_vx_nn,
    "ADD_VX_NN": alu.execute_add_vx_nn,
    "LD_VX_VY": alu.execute_ld_vx_vy,
    "OR": alu.execute_or,
    "AND": alu.execute_and,
    "XOR": alu.execute_xor,
    "ADD_VX_VY": alu.execute_add_vx_vy,
    "SUB": alu.execute_sub,
    "SHR": alu.execute_shr,
    "SUBN": alu.execute_subn,
    "SHL": alu.execute_shl,
    "RND": alu.execute_rnd,

    # Index / Memory
    "LD_I_NNN": load.execute_ld_i_nnn,
    "ADD_I_VX": load.execute_add_i_vx,
    "LD_F_VX": load.execute_ld_f_vx,
    "LD_B_VX": load.execute_ld_b_vx,
    "LD_MEM_VX": load.execute_ld_mem_vx,
    "LD_VX_MEM": load.execute_ld_vx_mem,

    # Display
    "CLS": display.execute_cls,
    "DRW": display.execute_drw,

    # Keypad
    "SKP": keypad.execute_skp,
    "SKNP": keypad.execute_sknp,
    "LD_VX_K": keypad.execute_ld_vx_k,

    # Timers
    "LD_VX_DT": timer.execute_ld_vx_dt,
    "LD_DT_VX": timer.execute_ld_dt_vx,
    "LD_ST_VX": timer.execute_ld_st_vx,
}

# @intent:responsibility デコード対象の全ニーモニックに実行関数とエンコーディング定義があることを、起動時に検証します。
# @intent:rationale テーブルの欠落を実行時の暗黙のデフォルトにせず、インポート時のエラーにします。
def verify_tables() -> None:
    decodable = {"SYS"} | set(FAMILY_0_WORDS.values())
    for family in range(0x10):
        if family not in DECODE_MAP:
            raise RuntimeError(f"Instruction family {family:X} has no decoder")
    for table in list(LOW_NIBBLE_TABLES.values()) + list(LOW_BYTE_TABLES.values()):
        decodable |= set(table.values())
    decodable |= set(SINGLE_FAMILIES.values())
    missing_exec = decodable - set(EXECUTE_MAP)
    missing_format = decodable - set(INSTRUCTION_FORMATS)
    if missing_exec or missing_format:
        raise RuntimeError(
            f"Instruction tables incomplete: no executor for {sorted(missing_exec)}, "
            f"no format for {sorted(missing_format)}"
        )

verify_tables()
