import sys
import unittest
import tempfile
import os

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtTest import QTest

from retro_chip8.config.models import MachineConfig
from retro_chip8.system.machine import Mode
from retro_chip8.ui.main_window import MainWindow, KEY_MAP

class TestMainWindow(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        if not QApplication.instance():
            cls.app = QApplication(sys.argv)
        else:
            cls.app = QApplication.instance()

    def setUp(self):
        self.rom_dir = tempfile.TemporaryDirectory()
        # 6001: V0=1 / F10A: キー待ち / 1204: 無限ループ
        with open(os.path.join(self.rom_dir.name, "loop.ch8"), "wb") as f:
            f.write(bytes([0x60, 0x01, 0xF1, 0x0A, 0x12, 0x04]))
        self.window = MainWindow(MachineConfig(rom_directory=self.rom_dir.name, cycles_per_tick=4))
        self.window.timer.stop()

    def tearDown(self):
        self.window.close()
        self.rom_dir.cleanup()

    def test_key_map_covers_all_keys(self):
        self.assertEqual(sorted(KEY_MAP.values()), list(range(16)))

    def test_select_and_run(self):
        machine = self.window.machine
        self.assertIs(machine.mode, Mode.LAUNCHER)
        QTest.keyClick(self.window, Qt.Key_E)
        self.assertIs(machine.mode, Mode.RUNNING)

        self.window._run_frame()
        state = machine.cpu.get_state()
        self.assertEqual(state.v[0], 1)
        self.assertTrue(state.is_waiting)

        QTest.keyPress(self.window, Qt.Key_V)
        self.assertEqual(state.v[1], 0xF)
        QTest.keyRelease(self.window, Qt.Key_V)

    def test_escape_returns_to_launcher(self):
        QTest.keyClick(self.window, Qt.Key_E)
        QTest.keyClick(self.window, Qt.Key_Escape)
        self.assertIs(self.window.machine.mode, Mode.LAUNCHER)

if __name__ == '__main__':
    unittest.main()
