import random
from typing import Optional

from retro_chip8.core.observer import MachineObserver
from retro_chip8.system.machine import Chip8Machine
from retro_chip8.loader.rom_loader import RomDirectoryLoader
from .models import MachineConfig

# @intent:responsibility 設定（Config）に基づいてマシンを生成し、ROMカタログを読み込みます。
class SystemBuilder:
    def build_system(self, config: MachineConfig, observer: Optional[MachineObserver] = None) -> Chip8Machine:
        rng = random.Random(config.seed) if config.seed is not None else None
        machine = Chip8Machine(observer=observer, rng=rng, rom_extension=config.rom_extension)

        loader = RomDirectoryLoader(extension=config.rom_extension)
        machine.load_catalog(loader.load_catalog(config.rom_directory))
        return machine
