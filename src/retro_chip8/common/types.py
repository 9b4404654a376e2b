"""
共通の型定義と定数を提供するモジュール。
プロジェクト全体で使用されるROMカタログの型や、マシンの固定サイズを定義します。
"""
from typing import List, NamedTuple

# @intent:constant マシンの固定パラメータ。
MEMORY_SIZE = 4096
PROGRAM_START = 0x200
REGISTER_COUNT = 16
STACK_SIZE = 16
KEY_COUNT = 16
VIDEO_WIDTH = 64
VIDEO_HEIGHT = 32

# @intent:data_structure ROMカタログの1エントリ（表示名とバイト列）。
class RomEntry(NamedTuple):
    name: str
    data: bytes

# @intent:data_structure 外部ローダーが所有し、ランチャーが参照するROMの順序付きリスト。
RomCatalog = List[RomEntry]
