"""
フレームを表示するウィジェット。
"""
from typing import Optional

from PySide6.QtWidgets import QWidget
from PySide6.QtCore import QSize
from PySide6.QtGui import QPainter, QColor, QPaintEvent

from retro_chip8.common.types import VIDEO_WIDTH, VIDEO_HEIGHT
from retro_chip8.peripherals.framebuffer import Frame

COLOR_BG = "#000000"
COLOR_PIXEL = "#FFFFFF"

# 表示領域の周囲に描く枠の太さ（論理ピクセル単位）
BORDER = 1

# @intent:responsibility フレームを拡大して描画します。
class DisplayView(QWidget):
    def __init__(self, pixel_scale: int = 10, parent=None):
        super().__init__(parent)
        self._scale = pixel_scale
        self._frame: Optional[Frame] = None
        self.setFixedSize(self.sizeHint())

    def sizeHint(self) -> QSize:
        return QSize((VIDEO_WIDTH + BORDER * 2) * self._scale, (VIDEO_HEIGHT + BORDER * 2) * self._scale)

    def set_frame(self, frame: Frame) -> None:
        self._frame = frame
        self.update()

    def get_frame(self) -> Optional[Frame]:
        return self._frame

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        scale = self._scale
        pixel = QColor(COLOR_PIXEL)
        painter.fillRect(self.rect(), QColor(COLOR_BG))

        # 枠
        width = self.width()
        height = self.height()
        painter.fillRect(0, 0, width, scale, pixel)
        painter.fillRect(0, height - scale, width, scale, pixel)
        painter.fillRect(0, 0, scale, height, pixel)
        painter.fillRect(width - scale, 0, scale, height, pixel)

        if self._frame is not None:
            for y, row in enumerate(self._frame):
                for x, on in enumerate(row):
                    if on:
                        painter.fillRect((x + BORDER) * scale, (y + BORDER) * scale, scale, scale, pixel)
        painter.end()
