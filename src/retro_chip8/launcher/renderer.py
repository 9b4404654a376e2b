# retro_chip8/launcher/renderer.py
"""
ランチャー画面のレンダラ。

描画は毎回フレームバッファ全体をクリアしてから、メニュー状態とカタログのみから
再計算します（差分描画は行いません）。
"""
from retro_chip8.common.types import RomCatalog
from retro_chip8.peripherals.framebuffer import Framebuffer
from retro_chip8.launcher.menu import MenuState
from retro_chip8.launcher.glyphs import GLYPH_WIDTH, GLYPH_HEIGHT, get_glyph

EMPTY_MESSAGE = "NO ROMS FOUND"
EMPTY_MESSAGE_Y = 12

TEXT_X = 2
FIRST_ROW_Y = 2
LINE_STEP = GLYPH_HEIGHT + 1
CHAR_ADVANCE = GLYPH_WIDTH + 1

# @intent:utility_function ROMファイル名から表示名を作ります（拡張子を除去し大文字化）。
def display_name(name: str, extension: str = ".ch8") -> str:
    if extension and name.lower().endswith(extension.lower()):
        name = name[:-len(extension)]
    return name.upper()

# @intent:responsibility メニュー状態とカタログからフレームバッファを描画します。
class MenuRenderer:
    def __init__(self, framebuffer: Framebuffer, rom_extension: str = ".ch8"):
        self._fb = framebuffer
        self._rom_extension = rom_extension

    def render(self, menu: MenuState, catalog: RomCatalog) -> None:
        self._fb.clear()

        if not catalog:
            self.draw_text(EMPTY_MESSAGE, TEXT_X, EMPTY_MESSAGE_Y)
            return

        for line, index in enumerate(menu.visible_range(len(catalog))):
            y = FIRST_ROW_Y + line * LINE_STEP
            selected = index == menu.selected_index
            if selected:
                self.draw_highlight_band(y)
            self.draw_text(display_name(catalog[index].name, self._rom_extension), TEXT_X, y, inverted=selected)

    # @intent:responsibility 文字列を大文字化して描画します。グリフのない文字は送り幅だけ進めます。
    def draw_text(self, text: str, x: int, y: int, inverted: bool = False) -> None:
        for position, char in enumerate(text.upper()):
            self.draw_char(char, x + position * CHAR_ADVANCE, y, inverted)

    # @intent:rationale メニュー文字は画面外をクリップします（スプライト描画と異なり折り返しません）。
    def draw_char(self, char: str, x: int, y: int, inverted: bool = False) -> None:
        glyph = get_glyph(char, inverted)
        if glyph is None:
            return
        for row, bits in enumerate(glyph):
            for col in range(GLYPH_WIDTH):
                px, py = x + col, y + row
                if 0 <= px < self._fb.width and 0 <= py < self._fb.height:
                    self._fb.set_pixel(px, py, bool(bits & (1 << (GLYPH_WIDTH - 1 - col))))

    # @intent:responsibility 選択行の全幅にハイライト帯を描きます。
    def draw_highlight_band(self, y: int) -> None:
        for row in range(GLYPH_HEIGHT):
            py = y + row
            if not 0 <= py < self._fb.height:
                continue
            for px in range(self._fb.width):
                self._fb.set_pixel(px, py, True)
