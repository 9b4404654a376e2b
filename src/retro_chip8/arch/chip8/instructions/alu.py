# src/retro_chip8/arch/chip8/instructions/alu.py
"""
算術論理演算命令の実装。

フラグ(VF)を更新する命令では、結果をVXへ書き込んだ後にフラグを書き込みます。
このためX=Fの場合はフラグの値が残ります。
"""
from retro_chip8.core.snapshot import Operation
from retro_chip8.arch.chip8.state import Chip8CpuState
from .base import ExecutionContext

# --- 6XNN ---
def execute_ld_vx_nn(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    state.v[op.x] = op.nn

# --- 7XNN ---
# @intent:responsibility VXに即値を加算します。キャリーはフラグに反映しません。
def execute_add_vx_nn(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    state.v[op.x] = (state.v[op.x] + op.nn) & 0xFF

# --- 8XY0 ---
def execute_ld_vx_vy(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    state.v[op.x] = state.v[op.y]

# --- 8XY1 ---
def execute_or(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    state.v[op.x] |= state.v[op.y]

# --- 8XY2 ---
def execute_and(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    state.v[op.x] &= state.v[op.y]

# --- 8XY3 ---
def execute_xor(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    state.v[op.x] ^= state.v[op.y]

# --- 8XY4 ---
# @intent:responsibility VX += VY。符号なしの和が255を超えた場合にフラグを1にします。
def execute_add_vx_vy(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    total = state.v[op.x] + state.v[op.y]
    state.v[op.x] = total & 0xFF
    state.flag = 1 if total > 0xFF else 0

# --- 8XY5 ---
# @intent:responsibility VX -= VY。ボローが発生しない（VX >= VY）場合にフラグを1にします。
def execute_sub(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    vx, vy = state.v[op.x], state.v[op.y]
    state.v[op.x] = (vx - vy) & 0xFF
    state.flag = 1 if vx >= vy else 0

# --- 8XY6 ---
# @intent:responsibility VXを1ビット右シフトします。VYは参照しません（旧来の単一オペランド仕様）。
def execute_shr(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    vx = state.v[op.x]
    state.v[op.x] = vx >> 1
    state.flag = vx & 0x01

# --- 8XY7 ---
# @intent:responsibility VX = VY - VX。VY >= VX の場合にフラグを1にします。
def execute_subn(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    vx, vy = state.v[op.x], state.v[op.y]
    state.v[op.x] = (vy - vx) & 0xFF
    state.flag = 1 if vy >= vx else 0

# --- 8XYE ---
def execute_shl(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    vx = state.v[op.x]
    state.v[op.x] = (vx << 1) & 0xFF
    state.flag = (vx >> 7) & 0x01

# --- CXNN ---
# @intent:responsibility 一様乱数バイトとNNの論理積をVXに格納します。
def execute_rnd(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    state.v[op.x] = ctx.rng.randint(0, 0xFF) & op.nn
