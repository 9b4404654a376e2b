# src/retro_chip8/arch/chip8/instructions/timer.py
"""
タイマー命令の実装。
"""
from retro_chip8.core.snapshot import Operation
from retro_chip8.arch.chip8.state import Chip8CpuState
from .base import ExecutionContext

# --- FX07 ---
def execute_ld_vx_dt(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    state.v[op.x] = ctx.timers.delay

# --- FX15 ---
def execute_ld_dt_vx(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    ctx.timers.set_delay(state.v[op.x])

# --- FX18 ---
def execute_ld_st_vx(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    ctx.timers.set_sound(state.v[op.x])
