# retro_chip8/peripherals/framebuffer.py
"""
モノクロのビットマップ表示メモリ。

描画命令（XOR）とランチャーのレンダラ（直接設定）の双方が書き込む共有キャンバスです。
"""
from typing import List, Tuple

from retro_chip8.common.types import VIDEO_WIDTH, VIDEO_HEIGHT

# @intent:data_structure 読み取り専用のフレーム。frame[y][x] でピクセルを参照します。
Frame = Tuple[Tuple[bool, ...], ...]

# @intent:responsibility 幅64×高さ32のブールグリッドを保持し、ピクセル操作を提供します。
class Framebuffer:
    def __init__(self, width: int = VIDEO_WIDTH, height: int = VIDEO_HEIGHT):
        if width <= 0 or height <= 0:
            raise ValueError("Framebuffer dimensions must be positive.")
        self.width = width
        self.height = height
        self._pixels: List[List[bool]] = [[False] * width for _ in range(height)]

    def clear(self) -> None:
        for row in self._pixels:
            for x in range(self.width):
                row[x] = False

    def get_pixel(self, x: int, y: int) -> bool:
        self._check_bounds(x, y)
        return self._pixels[y][x]

    def set_pixel(self, x: int, y: int, value: bool) -> None:
        self._check_bounds(x, y)
        self._pixels[y][x] = value

    # @intent:responsibility ピクセルを反転し、点灯していたピクセルが消灯したかどうかを返します。
    # @intent:pre-condition 座標は呼び出し側で画面サイズに折り返し済みである必要があります。
    def xor_pixel(self, x: int, y: int) -> bool:
        self._check_bounds(x, y)
        was_on = self._pixels[y][x]
        self._pixels[y][x] = not was_on
        return was_on

    # @intent:responsibility 現在の内容を不変のタプルとして返します。
    def snapshot(self) -> Frame:
        return tuple(tuple(row) for row in self._pixels)

    def is_blank(self) -> bool:
        return not any(any(row) for row in self._pixels)

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) out of bounds for {self.width}x{self.height} framebuffer.")
