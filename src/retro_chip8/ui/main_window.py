# src/retro_chip8/ui/main_window.py
"""
メインウィンドウの実装。
マシンを所有し、一定周期のループでサイクルとタイマーを駆動して画面を更新します。
"""
from typing import Dict, Optional

from PySide6.QtWidgets import QMainWindow, QApplication, QLabel
from PySide6.QtCore import Qt, QTimer, Slot
from PySide6.QtGui import QKeyEvent

from retro_chip8.config.models import MachineConfig
from retro_chip8.config.builder import SystemBuilder
from retro_chip8.core.errors import Chip8Error, Chip8Fault
from retro_chip8.core.observer import LoggingObserver
from retro_chip8.system.machine import Chip8Machine, Mode
from .display_view import DisplayView

# @intent:map ホストのキーボードからキー番号(0-F)へのマッピング。
KEY_MAP: Dict[int, int] = {
    Qt.Key_1: 0x1, Qt.Key_2: 0x2, Qt.Key_3: 0x3, Qt.Key_4: 0xC,
    Qt.Key_Q: 0x4, Qt.Key_W: 0x5, Qt.Key_E: 0x6, Qt.Key_R: 0xD,
    Qt.Key_A: 0x7, Qt.Key_S: 0x8, Qt.Key_D: 0x9, Qt.Key_F: 0xE,
    Qt.Key_Z: 0xA, Qt.Key_X: 0x0, Qt.Key_C: 0xB, Qt.Key_V: 0xF,
}

MENU_UP_KEYS = (Qt.Key_W, Qt.Key_Up)
MENU_DOWN_KEYS = (Qt.Key_S, Qt.Key_Down)
MENU_SELECT_KEYS = (Qt.Key_E, Qt.Key_Enter, Qt.Key_Return)

# @intent:responsibility サウンド状態をステータスバーとビープ音で知らせるオブザーバ。
class WindowObserver(LoggingObserver):
    def __init__(self, window: "MainWindow"):
        self._window = window

    def on_sound_state_changed(self, playing: bool) -> None:
        super().on_sound_state_changed(playing)
        if playing:
            QApplication.beep()
        self._window.set_sound_indicator(playing)

# @intent:responsibility アプリケーションのメインウィンドウを定義し、ホストループを駆動します。
class MainWindow(QMainWindow):
    def __init__(self, config: Optional[MachineConfig] = None, parent=None):
        super(MainWindow, self).__init__(parent)
        self.config = config if config is not None else MachineConfig()
        self.setWindowTitle("Retro CHIP-8")

        self.display_view = DisplayView(self.config.pixel_scale)
        self.setCentralWidget(self.display_view)
        self.sound_label = QLabel("")
        self.statusBar().addPermanentWidget(self.sound_label)

        self.machine: Chip8Machine = SystemBuilder().build_system(self.config, WindowObserver(self))
        self.machine.enter_launcher()

        self.timer = QTimer(self)
        self.timer.setInterval(self.config.tick_interval_ms)
        self.timer.timeout.connect(self._run_frame)
        self.timer.start()
        self._refresh_display()

    # @intent:responsibility 1フレーム分（cycles_per_tick命令 + タイマー1tick）を進めます。
    @Slot()
    def _run_frame(self):
        try:
            for _ in range(self.config.cycles_per_tick):
                self.machine.cycle()
        except Chip8Fault as fault:
            self.statusBar().showMessage(f"Fault: {fault}")
            self.machine.enter_launcher()
        self.machine.tick()
        self._refresh_display()

    def _refresh_display(self):
        self.display_view.set_frame(self.machine.get_frame())

    def set_sound_indicator(self, playing: bool) -> None:
        self.sound_label.setText("SOUND" if playing else "")

    def keyPressEvent(self, event: QKeyEvent):
        if event.isAutoRepeat():
            return
        key = event.key()

        if key == Qt.Key_Escape:
            self.machine.enter_launcher()
            self.statusBar().clearMessage()
            return

        if self.machine.mode is Mode.LAUNCHER:
            self._handle_launcher_key(key)
            return

        if key in KEY_MAP:
            self.machine.set_key(KEY_MAP[key], True)

    def keyReleaseEvent(self, event: QKeyEvent):
        if event.isAutoRepeat():
            return
        if event.key() in KEY_MAP:
            self.machine.set_key(KEY_MAP[event.key()], False)

    def _handle_launcher_key(self, key: int):
        if key in MENU_UP_KEYS:
            self.machine.menu_up()
        elif key in MENU_DOWN_KEYS:
            self.machine.menu_down()
        elif key in MENU_SELECT_KEYS:
            try:
                self.machine.menu_select()
            except Chip8Error as e:
                self.statusBar().showMessage(f"Failed to start ROM: {e}")
        self._refresh_display()

    def closeEvent(self, event):
        self.timer.stop()
        super().closeEvent(event)
