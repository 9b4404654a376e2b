# src/retro_chip8/arch/chip8/instructions/base.py
"""
CHIP-8命令実装用の共通ユーティリティ。
"""
import random
from dataclasses import dataclass

from retro_chip8.transport.bus import Bus
from retro_chip8.core.errors import AddressFault, StackOverflowFault, StackUnderflowFault
from retro_chip8.common.types import STACK_SIZE
from retro_chip8.peripherals.framebuffer import Framebuffer
from retro_chip8.peripherals.timers import Timers
from retro_chip8.peripherals.keypad import Keypad
from retro_chip8.arch.chip8.state import Chip8CpuState

# @intent:responsibility 命令実行に必要な周辺機器への参照を1つにまとめます。
# @intent:rationale 共有のグローバル状態を持たず、実行関数へ明示的に渡すためのコンテキストです。
@dataclass
class ExecutionContext:
    bus: Bus
    framebuffer: Framebuffer
    timers: Timers
    keypad: Keypad
    rng: random.Random

# @intent:utility_function 命令ワードの各フィールドを取り出します。
def field_x(opcode: int) -> int:
    return (opcode >> 8) & 0xF

def field_y(opcode: int) -> int:
    return (opcode >> 4) & 0xF

def field_n(opcode: int) -> int:
    return opcode & 0xF

def field_nn(opcode: int) -> int:
    return opcode & 0xFF

def field_nnn(opcode: int) -> int:
    return opcode & 0xFFF

# @intent:utility_function [start, start+count) がアドレス空間に収まることを検査します。
# @intent:rationale 一括転送やBCD書き込みが途中まで書き込んでからフォールトしないよう、事前に検査します。
def check_range(bus: Bus, start: int, count: int) -> None:
    end = start + count - 1
    if start < 0 or end >= bus.get_size():
        raise AddressFault(f"Memory access {start:#05x}-{end:#05x} out of range")

# @intent:utility_function 戻りアドレスをスタックに積みます。
def push_return(state: Chip8CpuState, address: int) -> None:
    if len(state.stack) >= STACK_SIZE:
        raise StackOverflowFault("Stack overflow")
    state.stack.append(address)
    state.sp = len(state.stack)

# @intent:utility_function スタックから戻りアドレスを取り出します。
def pop_return(state: Chip8CpuState) -> int:
    if not state.stack:
        raise StackUnderflowFault("Stack underflow")
    address = state.stack.pop()
    state.sp = len(state.stack)
    return address
