# retro_chip8/loader/rom_loader.py
"""
ROMローダーモジュール。
ディレクトリからROMファイルを列挙し、ランチャー用のカタログを構築します。
"""
import logging
import os

from retro_chip8.common.types import RomCatalog, RomEntry

logger = logging.getLogger(__name__)

class RomDirectoryLoader:
    """
    指定された拡張子（大文字小文字を区別しない）のファイルを、ファイル名順に読み込むローダー。
    """
    def __init__(self, extension: str = ".ch8"):
        self._extension = extension.lower()

    def load_catalog(self, directory: str) -> RomCatalog:
        if not os.path.isdir(directory):
            logger.warning("ROM directory not found: %s", directory)
            return []

        catalog: RomCatalog = []
        for name in sorted(os.listdir(directory)):
            path = os.path.join(directory, name)
            if not os.path.isfile(path) or not name.lower().endswith(self._extension):
                continue
            with open(path, 'rb') as f:
                catalog.append(RomEntry(name=name, data=f.read()))

        logger.info("Loaded %d ROMs from %s", len(catalog), directory)
        return catalog
