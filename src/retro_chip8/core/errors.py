# retro_chip8/core/errors.py
"""
エラー階層の定義。

ロード時の構成エラー、命令実行時の致命的フォールト、設定エラーを
呼び出し側が型で区別できるように例外クラスを提供します。
"""
from typing import Optional


# @intent:responsibility 本パッケージが送出する全ての例外の基底クラス。
class Chip8Error(Exception):
    pass


# @intent:responsibility プログラム領域に収まらないROMを、実行開始前に拒否するための例外。
class RomTooLargeError(Chip8Error, ValueError):
    def __init__(self, size: int, capacity: int):
        super().__init__(f"ROM too large: {size} bytes (capacity {capacity} bytes)")
        self.size = size
        self.capacity = capacity


# @intent:responsibility 設定ファイルの内容が不正であることを示します。
class ConfigError(Chip8Error, ValueError):
    pass


# @intent:responsibility 命令実行中に発生し、現在の実行を停止させる致命的フォールトの基底クラス。
# @intent:rationale pc/opcodeはエンジンが捕捉時に補完するため、送出側では省略可能です。
class Chip8Fault(Chip8Error):
    """
    命令レベルの実行時フォールト。
    エンジンは本例外を捕捉すると停止状態に遷移し、呼び出し側へ再送出します。
    """
    def __init__(self, message: str, pc: Optional[int] = None, opcode: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.pc = pc
        self.opcode = opcode

    def __str__(self) -> str:
        location = ""
        if self.pc is not None:
            location += f" at {self.pc:#05x}"
        if self.opcode is not None:
            location += f" (opcode {self.opcode:04X})"
        return f"{self.message}{location}"


class IllegalOpcodeFault(Chip8Fault):
    """未割り当て、または未実装の命令エンコーディング。"""


# @intent:rationale IndexErrorも継承し、範囲外アクセスとして一般的なハンドラでも捕捉できるようにします。
class AddressFault(Chip8Fault, IndexError):
    """アドレス空間 [0, 4095] の外へのアクセス。"""


class StackOverflowFault(Chip8Fault):
    """スタックが16エントリで満杯の状態でのCALL。"""


class StackUnderflowFault(Chip8Fault):
    """空のスタックでのRET。"""


class KeyIndexFault(Chip8Fault):
    """キー判定命令のレジスタ値が 0-15 の範囲外。"""
