# retro_chip8/core/snapshot.py
"""
実行結果の不変レコード

デコード済み命令（Operation）と、1命令実行後の記録（Snapshot）を定義します。
"""
from dataclasses import dataclass, field
from typing import List

from retro_chip8.core.state import CpuState

# @intent:responsibility デコードされた命令を、ニーモニックをタグとする不変の値として表現します。
# @intent:rationale 命令ワードの各フィールド（X, Y, N, NN, NNN）を全て保持し、
#                  実行側はニーモニックに応じて必要なフィールドのみ参照します。
@dataclass(frozen=True)
class Operation:
    """
    デコードされた命令。

    mnemonic がバリアントのタグであり、実行テーブルのキーになります。
    """
    opcode: int          # 例: 0x8124
    mnemonic: str        # 例: "ADD_VX_VY"
    operands: List[str] = field(default_factory=list)  # 例: ["V1", "V2"]
    x: int = 0
    y: int = 0
    n: int = 0
    nn: int = 0
    nnn: int = 0
    length: int = 2

    @property
    def opcode_hex(self) -> str:
        return f"{self.opcode:04X}"

# @intent:responsibility 実行に関するメタデータを記録します。
@dataclass(frozen=True)
class Metadata:
    instruction_count: int
    pc: int  # 命令をフェッチしたアドレス

# @intent:responsibility 1命令実行後の状態を記録します。
@dataclass(frozen=True)
class Snapshot:
    """
    1命令を実行した直後の記録。
    stateは実行後の状態への参照であり、コピーではありません。
    """
    state: CpuState
    operation: Operation
    metadata: Metadata
