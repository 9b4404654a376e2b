# tests/system/test_machine.py
"""
Chip8Machine のモード遷移と、ROM実行のエンドツーエンド動作を検証します。
"""
import random

import pytest

from retro_chip8.common.types import RomEntry
from retro_chip8.core.errors import IllegalOpcodeFault, RomTooLargeError
from retro_chip8.system.machine import Chip8Machine, Mode
from support import RecordingObserver, words_to_bytes

# @intent:test_suite マシン全体の統合テスト。

@pytest.fixture
def observer():
    return RecordingObserver()

@pytest.fixture
def machine(observer):
    return Chip8Machine(observer=observer, rng=random.Random(0))

def _catalog(*roms):
    return [RomEntry(name=f"rom{n}.ch8", data=data) for n, data in enumerate(roms)]

def test_starts_in_launcher(machine):
    assert machine.mode is Mode.LAUNCHER
    assert machine.cycle() is None

def test_end_to_end_program(machine):
    rom = words_to_bytes(0x6005, 0x6105, 0x8014, 0xF029, 0xD015, 0x00E0)
    machine.load_catalog(_catalog(rom))
    machine.menu_select()
    assert machine.mode is Mode.RUNNING

    for _ in range(6):
        machine.cycle()
    state = machine.cpu.get_state()
    assert state.v[0] == 10
    assert state.v[0xF] == 0
    assert not any(any(row) for row in machine.get_frame())

    assert machine.cycle() is None
    assert state.is_halted
    assert machine.last_fault is None

def test_empty_launcher_frame_shows_message(machine):
    frame = machine.get_frame()
    assert any(any(row) for row in frame)

def test_menu_select_with_empty_catalog(machine, observer):
    machine.menu_select()
    assert machine.mode is Mode.LAUNCHER
    assert observer.logs == ["menu_select: catalog is empty"]

def test_menu_navigation_selects_rom(machine):
    machine.load_catalog(_catalog(words_to_bytes(0x6001), words_to_bytes(0x6002)))
    machine.menu_down()
    machine.menu_down()
    assert machine.get_selected_index() == 1
    machine.menu_up()
    machine.menu_down()
    machine.menu_select()
    machine.cycle()
    assert machine.cpu.get_state().v[0] == 2

def test_navigation_ignored_while_running(machine):
    machine.load_catalog(_catalog(words_to_bytes(0x1200), words_to_bytes(0x1200)))
    machine.menu_select()
    machine.menu_down()
    assert machine.get_selected_index() == 0

def test_enter_launcher_discards_run(machine, observer):
    machine.load_catalog(_catalog(words_to_bytes(0x6007, 0xF018, 0x1204)))
    machine.menu_down()
    machine.menu_select()
    machine.set_key(3, True)
    for _ in range(3):
        machine.cycle()
    assert machine.timers.sound_active

    machine.enter_launcher()
    assert machine.mode is Mode.LAUNCHER
    assert machine.cycle() is None
    assert machine.cpu.get_state().is_halted
    assert not machine.keypad.is_pressed(3)
    assert machine.timers.sound == 0
    assert observer.sound_events == [True, False]
    # カタログと選択位置は保持される
    assert len(machine.get_catalog()) == 1
    assert machine.get_selected_index() == 0

def test_fault_is_raised_and_recorded(machine, observer):
    machine.start_rom(words_to_bytes(0xF0FF))
    with pytest.raises(IllegalOpcodeFault):
        machine.cycle()
    assert isinstance(machine.last_fault, IllegalOpcodeFault)
    assert machine.mode is Mode.RUNNING
    assert machine.cycle() is None
    assert len(observer.logs) == 1

def test_start_rom_too_large_keeps_mode(machine):
    with pytest.raises(RomTooLargeError):
        machine.start_rom(bytes(4000))
    assert machine.mode is Mode.LAUNCHER

def test_set_key_while_in_launcher_only_latches(machine):
    machine.set_key(5, True)
    assert machine.keypad.is_pressed(5)

def test_tick_runs_in_any_mode(machine):
    machine.start_rom(words_to_bytes(0x6004, 0xF015))
    machine.cycle()
    machine.cycle()
    machine.tick()
    assert machine.timers.delay == 3
