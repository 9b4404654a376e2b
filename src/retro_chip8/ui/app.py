# src/retro_chip8/ui/app.py
"""
Qtアプリケーションのエントリポイント。
設定を読み込み、メインウィンドウを起動します。
"""
import logging
import sys

from PySide6.QtWidgets import QApplication

from retro_chip8.config.loader import ConfigLoader
from retro_chip8.config.models import MachineConfig
from .main_window import MainWindow

# @intent:responsibility アプリケーションを起動し、メインウィンドウを表示します。
def main():
    """
    第1引数にYAML設定ファイルのパスを指定できます。
    """
    loader = ConfigLoader()
    config = loader.load_from_file(sys.argv[1]) if len(sys.argv) > 1 else MachineConfig()
    logging.basicConfig(level=ConfigLoader.log_level_value(config),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    app = QApplication(sys.argv)
    main_win = MainWindow(config)
    main_win.show()
    sys.exit(app.exec())

if __name__ == '__main__':
    main()
