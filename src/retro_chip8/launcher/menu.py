# retro_chip8/launcher/menu.py
"""
ランチャーメニューの選択状態。
"""
from dataclasses import dataclass

# @intent:constant 1ページに表示するエントリ数。
PAGE_SIZE = 5

# @intent:responsibility 選択位置とスクロール位置を保持し、上下移動を処理します。
@dataclass
class MenuState:
    """
    選択インデックスは [0, カタログ件数-1] に制限され、折り返しません。
    スクロール位置は常に選択位置を含むページの先頭（PAGE_SIZEの倍数）です。
    """
    selected_index: int = 0
    scroll_offset: int = 0
    page_size: int = PAGE_SIZE

    def move_up(self, catalog_size: int) -> None:
        if self.selected_index > 0:
            self.selected_index -= 1
        self._clamp(catalog_size)

    def move_down(self, catalog_size: int) -> None:
        if self.selected_index < catalog_size - 1:
            self.selected_index += 1
        self._clamp(catalog_size)

    # @intent:responsibility 任意のインデックスを選択します（範囲外はクランプ）。
    def select(self, index: int, catalog_size: int) -> None:
        self.selected_index = index
        self._clamp(catalog_size)

    def reset(self) -> None:
        self.selected_index = 0
        self.scroll_offset = 0

    def visible_range(self, catalog_size: int) -> range:
        return range(self.scroll_offset, min(self.scroll_offset + self.page_size, catalog_size))

    def _clamp(self, catalog_size: int) -> None:
        self.selected_index = max(0, min(self.selected_index, catalog_size - 1))
        self.scroll_offset = (self.selected_index // self.page_size) * self.page_size
