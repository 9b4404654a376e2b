# retro_chip8/system/machine.py
"""
マシン全体のコンテキスト。

エンジン、アドレス空間、フレームバッファ、タイマー、入力ラッチ、ランチャーを1つに所有し、
ランチャー/実行中のモード切り替えに応じて入力とサイクルの送り先を決めます。
"""
import logging
import random
from enum import Enum
from typing import List, Optional

from retro_chip8.common.types import MEMORY_SIZE, RomCatalog, RomEntry
from retro_chip8.core.errors import Chip8Fault
from retro_chip8.core.observer import MachineObserver, LoggingObserver
from retro_chip8.core.snapshot import Snapshot
from retro_chip8.transport.bus import Bus, RAM
from retro_chip8.peripherals.framebuffer import Framebuffer, Frame
from retro_chip8.peripherals.timers import Timers
from retro_chip8.peripherals.keypad import Keypad
from retro_chip8.arch.chip8.cpu import Chip8Cpu
from retro_chip8.arch.chip8.state import Halted
from retro_chip8.launcher.menu import MenuState
from retro_chip8.launcher.renderer import MenuRenderer

logger = logging.getLogger(__name__)

# @intent:responsibility 入力とサイクルの送り先を決めるモード。
class Mode(Enum):
    LAUNCHER = "LAUNCHER"
    RUNNING = "RUNNING"

# @intent:responsibility マシンの全状態を所有し、ホストに対する唯一の操作面を提供します。
class Chip8Machine:
    """
    ホストは一定周期で cycle() と tick() を呼び、キーイベントを set_key() で転送します。
    初期モードはランチャーです。
    """
    def __init__(self, observer: Optional[MachineObserver] = None, rng: Optional[random.Random] = None,
                 rom_extension: str = ".ch8"):
        self._observer = observer if observer is not None else LoggingObserver()
        self.bus = Bus()
        self.bus.register_device(0x000, MEMORY_SIZE - 1, RAM(MEMORY_SIZE))
        self.framebuffer = Framebuffer()
        self.timers = Timers(self._observer)
        self.keypad = Keypad(self._observer)
        self.cpu = Chip8Cpu(self.bus, self.framebuffer, self.timers, self.keypad, self._observer, rng)
        self.menu = MenuState()
        self._renderer = MenuRenderer(self.framebuffer, rom_extension)
        self._catalog: RomCatalog = []
        self._mode = Mode.LAUNCHER

    @property
    def mode(self) -> Mode:
        return self._mode

    # --- カタログ ---

    # @intent:responsibility カタログを差し替え、選択位置を先頭に戻します。
    def load_catalog(self, catalog: RomCatalog) -> None:
        self._catalog = catalog
        self.menu.reset()

    def get_catalog(self) -> List[RomEntry]:
        return self._catalog

    def get_selected_index(self) -> int:
        return self.menu.selected_index

    # --- モード遷移 ---

    # @intent:responsibility ROMを読み込んで実行中モードへ遷移します。
    # @intent:pre-condition ROMサイズが上限を超える場合はRomTooLargeErrorとなり、状態は変化しません。
    def start_rom(self, rom: bytes) -> None:
        self.cpu.load_rom(rom)
        self.timers.reset()
        self.keypad.release_all()
        self.framebuffer.clear()
        self._mode = Mode.RUNNING

    # @intent:responsibility リセット要求。実行中の状態を全て破棄してランチャーに戻ります。
    def enter_launcher(self) -> None:
        """
        いつでも呼び出せます。カタログと選択位置は保持します。
        """
        self.cpu.reset()
        self.timers.reset()
        self.keypad.release_all()
        self.framebuffer.clear()
        self._mode = Mode.LAUNCHER

    # --- ナビゲーション（ランチャーモードのみ） ---

    def menu_up(self) -> None:
        if self._mode is Mode.LAUNCHER:
            self.menu.move_up(len(self._catalog))

    def menu_down(self) -> None:
        if self._mode is Mode.LAUNCHER:
            self.menu.move_down(len(self._catalog))

    def menu_select(self) -> None:
        if self._mode is not Mode.LAUNCHER:
            return
        if not self._catalog:
            self._observer.on_log("menu_select: catalog is empty")
            return
        entry = self._catalog[self.menu.selected_index]
        logger.info("Starting ROM %s (%d bytes)", entry.name, len(entry.data))
        self.start_rom(entry.data)

    # --- 実行 ---

    # @intent:responsibility 実行中モードであれば1命令を実行します。
    def cycle(self) -> Optional[Snapshot]:
        """
        ランチャーモード、停止中、キー入力待ちでは何もせずNoneを返します。
        命令の実行でフォールトが起きた場合はChip8Faultが送出され、以降のcycle()は何もしません。
        """
        if self._mode is not Mode.RUNNING:
            return None
        return self.cpu.step()

    def tick(self) -> None:
        self.timers.tick()

    # @intent:responsibility キーイベントを入力ラッチへ転送し、キー入力待ちであれば再開させます。
    def set_key(self, key: int, pressed: bool) -> None:
        if self.keypad.set_key(key, pressed):
            self.cpu.deliver_key(key)

    @property
    def last_fault(self) -> Optional[Chip8Fault]:
        run_state = self.cpu.get_state().run_state
        if isinstance(run_state, Halted):
            return run_state.fault
        return None

    # --- 出力 ---

    # @intent:responsibility 現在のフレームを返します。ランチャーモードでは毎回メニューを描画し直します。
    def get_frame(self) -> Frame:
        if self._mode is Mode.LAUNCHER:
            self._renderer.render(self.menu, self._catalog)
        return self.framebuffer.snapshot()
