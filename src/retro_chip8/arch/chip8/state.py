# src/retro_chip8/arch/chip8/state.py
"""
CHIP-8 CPU固有の状態定義。
"""
from dataclasses import dataclass, field
from typing import List, Optional, Union

from retro_chip8.core.state import CpuState
from retro_chip8.core.errors import Chip8Fault
from retro_chip8.common.types import PROGRAM_START, REGISTER_COUNT

# @intent:constant フラグレジスタ（VF）の番号。
FLAG_REGISTER = 0xF

# --- 実行状態（タグ付きバリアント） ---

# @intent:responsibility 通常どおり命令を実行している状態。
@dataclass(frozen=True)
class Executing:
    pass

# @intent:responsibility FX0Aによりキー入力待ちで停止している状態。
@dataclass(frozen=True)
class WaitingForKey:
    register: int

# @intent:responsibility 実行を停止した状態。faultがNoneならプログラム末尾に到達した正常停止。
@dataclass(frozen=True)
class Halted:
    fault: Optional[Chip8Fault] = None

RunState = Union[Executing, WaitingForKey, Halted]

# @intent:responsibility CHIP-8 CPUの全てのレジスタ（V0-VF, I, PC, スタック）と実行状態を保持します。
@dataclass
class Chip8CpuState(CpuState):
    """
    CHIP-8 CPUのレジスタ状態を保持するデータクラス。
    spはスタックに積まれたエントリ数（0..16）を表します。
    """
    pc: int = PROGRAM_START
    v: List[int] = field(default_factory=lambda: [0] * REGISTER_COUNT)  # V0-VF
    i: int = 0x000    # Index Register
    stack: List[int] = field(default_factory=list)  # 戻りアドレス
    rom_end: int = PROGRAM_START - 1  # ロード済みプログラムの最終バイトのアドレス
    run_state: RunState = field(default_factory=lambda: Halted())

    # @intent:accessor フラグレジスタVFへのアクセスを提供します。
    @property
    def flag(self) -> int:
        return self.v[FLAG_REGISTER]

    @flag.setter
    def flag(self, value: int) -> None:
        self.v[FLAG_REGISTER] = value & 0xFF

    @property
    def is_waiting(self) -> bool:
        return isinstance(self.run_state, WaitingForKey)

    @property
    def is_halted(self) -> bool:
        return isinstance(self.run_state, Halted)
