# src/retro_chip8/arch/chip8/cpu.py
"""
CHIP-8 CPUエミュレーションの中心モジュール。
"""
import logging
import random
from typing import Dict, Optional

from retro_chip8.core.cpu import AbstractCpu
from retro_chip8.core.snapshot import Operation, Snapshot
from retro_chip8.core.errors import Chip8Fault, RomTooLargeError
from retro_chip8.core.observer import MachineObserver
from retro_chip8.common.types import PROGRAM_START
from retro_chip8.transport.bus import Bus
from retro_chip8.peripherals.framebuffer import Framebuffer
from retro_chip8.peripherals.timers import Timers
from retro_chip8.peripherals.keypad import Keypad
from retro_chip8.arch.chip8.state import Chip8CpuState, Executing, WaitingForKey, Halted
from retro_chip8.arch.chip8.font import FONTSET, FONT_START
from retro_chip8.arch.chip8.instructions import ExecutionContext, decode_opcode, execute_instruction

logger = logging.getLogger(__name__)

# @intent:responsibility CHIP-8 CPUの具体的なエミュレーションロジック（フェッチ、デコード、実行）を提供します。
class Chip8Cpu(AbstractCpu):
    """
    CHIP-8 CPUをエミュレートするクラス。

    命令の実行は Executing 状態でのみ行われます。WaitingForKey と Halted では
    step() は何もせず None を返します。
    """
    def __init__(self, bus: Bus, framebuffer: Framebuffer, timers: Timers, keypad: Keypad,
                 observer: MachineObserver, rng: Optional[random.Random] = None):
        self._context = ExecutionContext(
            bus=bus,
            framebuffer=framebuffer,
            timers=timers,
            keypad=keypad,
            rng=rng if rng is not None else random.Random(),
        )
        self._observer = observer
        self._fetch_pc = PROGRAM_START
        self._fetch_opcode: Optional[int] = None
        super().__init__(bus)
        self._bus.load(FONT_START, FONTSET)

    def _create_initial_state(self) -> Chip8CpuState:
        return Chip8CpuState()

    # @intent:responsibility ROMイメージをプログラム領域(0x200-)にロードし、実行可能状態にします。
    # @intent:pre-condition ROMはアドレス空間の残り(4096 - 0x200バイト)に収まる必要があります。
    def load_rom(self, rom: bytes) -> None:
        """
        ROMをロードしてレジスタ、スタック、PCを初期化します。
        サイズ超過の場合は何も変更せずにRomTooLargeErrorを送出します。
        フォント領域は変更しません。
        """
        capacity = self._bus.get_size() - PROGRAM_START
        if len(rom) > capacity:
            raise RomTooLargeError(len(rom), capacity)

        self._bus.clear(PROGRAM_START, self._bus.get_size())
        self._bus.load(PROGRAM_START, rom)
        self.reset()
        self._state.rom_end = PROGRAM_START + len(rom) - 1
        self._state.run_state = Executing()
        logger.debug("Loaded ROM of %d bytes at %#05x", len(rom), PROGRAM_START)

    def _can_execute(self) -> bool:
        return isinstance(self._state.run_state, Executing)

    # @intent:responsibility PCからビッグエンディアンの命令ワードを読み出します。
    # @intent:rationale プログラム末尾を越えた場合はフォールトではなく正常停止とします。
    def _fetch(self) -> int:
        pc = self._state.pc
        self._fetch_pc = pc
        self._fetch_opcode = None
        if pc > self._state.rom_end:
            self._state.run_state = Halted()
            logger.debug("Program ended at %#05x", pc)
            return 0
        opcode = self._bus.read_word(pc)
        self._fetch_opcode = opcode
        return opcode

    def _decode(self, opcode: int) -> Operation:
        return decode_opcode(opcode)

    def _execute(self, operation: Operation) -> None:
        execute_instruction(operation, self._state, self._context)

    # @intent:responsibility 1命令を実行します。フォールト時は停止状態へ遷移してから例外を再送出します。
    def step(self) -> Optional[Snapshot]:
        try:
            return super().step()
        except Chip8Fault as fault:
            if fault.pc is None:
                fault.pc = self._fetch_pc
            if fault.opcode is None:
                fault.opcode = self._fetch_opcode
            self._state.run_state = Halted(fault)
            self._observer.on_log(f"Engine halted: {fault}")
            raise

    # @intent:responsibility キー入力待ちであれば、押されたキー番号を対象レジスタに格納して実行を再開します。
    def deliver_key(self, key: int) -> bool:
        """
        待機中でなければ何もせずFalseを返します。
        PCは待機命令の次を指したままなので、次のstep()で後続命令が実行されます。
        """
        run_state = self._state.run_state
        if not isinstance(run_state, WaitingForKey):
            return False
        self._state.v[run_state.register] = key
        self._state.run_state = Executing()
        logger.debug("Delivered waiting key %d to V%X", key, run_state.register)
        return True

    def get_state(self) -> Chip8CpuState:
        return self._state

    # @intent:responsibility ホスト表示用に、現在のレジスタ値を辞書形式で提供します。
    def get_register_map(self) -> Dict[str, int]:
        s = self._state
        registers = {f"V{index:X}": value for index, value in enumerate(s.v)}
        registers.update({"I": s.i, "PC": s.pc, "SP": s.sp})
        return registers
