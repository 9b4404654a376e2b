import unittest

from retro_chip8.common.types import RomEntry
from retro_chip8.peripherals.framebuffer import Framebuffer
from retro_chip8.launcher.menu import MenuState
from retro_chip8.launcher.glyphs import get_glyph, GLYPHS
from retro_chip8.launcher.renderer import MenuRenderer, display_name

class TestDisplayName(unittest.TestCase):
    def test_strips_extension_and_uppercases(self):
        self.assertEqual(display_name("pong.ch8"), "PONG")
        self.assertEqual(display_name("TETRIS.CH8"), "TETRIS")
        self.assertEqual(display_name("readme.txt"), "README.TXT")

class TestGlyphs(unittest.TestCase):
    def test_inverted_glyph(self):
        self.assertEqual(get_glyph("A", inverted=True)[0], 0b10001)

    def test_unknown_character(self):
        self.assertEqual(get_glyph("A"), GLYPHS["A"])
        self.assertIsNone(get_glyph("#"))
        self.assertIsNone(get_glyph("#", inverted=True))

class TestMenuRenderer(unittest.TestCase):
    def setUp(self):
        self.fb = Framebuffer()
        self.renderer = MenuRenderer(self.fb)
        self.menu = MenuState()

    def _catalog(self, *names):
        return [RomEntry(name=name, data=b"\x00\xE0") for name in names]

    def test_empty_catalog_message(self):
        self.renderer.render(self.menu, [])
        # "N" の1行目 10001 が (2,12) から描画される
        self.assertTrue(self.fb.get_pixel(2, 12))
        self.assertFalse(self.fb.get_pixel(3, 12))
        self.assertTrue(self.fb.get_pixel(6, 12))

    def test_selected_row_is_highlighted(self):
        self.renderer.render(self.menu, self._catalog("a.ch8", "b.ch8"))
        # 選択行: 帯は全幅、文字は反転
        self.assertTrue(self.fb.get_pixel(0, 2))
        self.assertTrue(self.fb.get_pixel(63, 6))
        self.assertTrue(self.fb.get_pixel(2, 2))
        self.assertFalse(self.fb.get_pixel(3, 2))
        # 非選択行: 帯なし
        self.assertFalse(self.fb.get_pixel(0, 8))
        self.assertTrue(self.fb.get_pixel(3, 8))

    def test_render_is_recomputed_from_scratch(self):
        self.fb.set_pixel(63, 31, True)
        self.renderer.render(self.menu, self._catalog("a.ch8"))
        self.assertFalse(self.fb.get_pixel(63, 31))

    def test_only_current_page_is_drawn(self):
        catalog = self._catalog(*[f"r{n}.ch8" for n in range(7)])
        self.menu.select(6, len(catalog))
        self.renderer.render(self.menu, catalog)
        # 2ページ目は2件のみ、選択はその2件目
        self.assertFalse(self.fb.get_pixel(0, 2))
        self.assertTrue(self.fb.get_pixel(0, 8))
        self.assertFalse(self.fb.get_pixel(0, 14))
        self.assertFalse(self.fb.get_pixel(2, 14))

    def test_text_is_clipped_at_screen_edge(self):
        self.renderer.draw_text("WWWWWWWWWWWWWW", 2, 2)
        self.renderer.draw_char("A", 62, 30)
        self.assertTrue(self.fb.get_pixel(63, 30))
        self.assertFalse(self.fb.get_pixel(0, 30))

if __name__ == '__main__':
    unittest.main()
