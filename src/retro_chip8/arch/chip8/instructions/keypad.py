# src/retro_chip8/arch/chip8/instructions/keypad.py
"""
キー入力命令の実装。
"""
from retro_chip8.core.snapshot import Operation
from retro_chip8.core.errors import KeyIndexFault
from retro_chip8.common.types import KEY_COUNT
from retro_chip8.arch.chip8.state import Chip8CpuState, WaitingForKey
from .base import ExecutionContext

# @intent:utility_function VXの値をキー番号として検証して返します。
def _key_index(state: Chip8CpuState, op: Operation) -> int:
    key = state.v[op.x]
    if key >= KEY_COUNT:
        raise KeyIndexFault(f"Invalid key index: {key}")
    return key

# --- EX9E ---
def execute_skp(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    if ctx.keypad.is_pressed(_key_index(state, op)):
        state.pc = (state.pc + 2) & 0xFFFF

# --- EXA1 ---
def execute_sknp(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    if not ctx.keypad.is_pressed(_key_index(state, op)):
        state.pc = (state.pc + 2) & 0xFFFF

# --- FX0A ---
# @intent:responsibility キー入力待ち状態へ遷移します。
# @intent:rationale PCは既に次の命令を指しているため、キーが届いた時点でそのまま再開できます。
def execute_ld_vx_k(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    state.run_state = WaitingForKey(register=op.x)
