# src/retro_chip8/arch/chip8/instructions/load.py
"""
インデックスレジスタとメモリ転送命令の実装。
"""
from retro_chip8.core.snapshot import Operation
from retro_chip8.arch.chip8.state import Chip8CpuState
from .base import ExecutionContext, check_range

# @intent:constant フォントグリフ1文字あたりのバイト数。
GLYPH_SIZE = 5

# --- ANNN ---
def execute_ld_i_nnn(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    state.i = op.nnn

# --- FX1E ---
# @intent:responsibility I += VX。結果は12ビットにマスクします。
def execute_add_i_vx(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    state.i = (state.i + state.v[op.x]) & 0xFFF

# --- FX29 ---
# @intent:responsibility VXの値に対応するフォントグリフのアドレスをIに設定します。
def execute_ld_f_vx(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    state.i = state.v[op.x] * GLYPH_SIZE

# --- FX33 ---
# @intent:responsibility VXの10進表現（百の位、十の位、一の位）をI, I+1, I+2に書き込みます。
def execute_ld_b_vx(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    value = state.v[op.x]
    check_range(ctx.bus, state.i, 3)
    ctx.bus.write(state.i, value // 100)
    ctx.bus.write(state.i + 1, (value // 10) % 10)
    ctx.bus.write(state.i + 2, value % 10)

# --- FX55 ---
# @intent:responsibility V0..VXをIから始まるメモリへ転送します。Iは変更しません。
def execute_ld_mem_vx(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    check_range(ctx.bus, state.i, op.x + 1)
    for index in range(op.x + 1):
        ctx.bus.write(state.i + index, state.v[index])

# --- FX65 ---
# @intent:responsibility Iから始まるメモリをV0..VXへ転送します。Iは変更しません。
def execute_ld_vx_mem(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    check_range(ctx.bus, state.i, op.x + 1)
    for index in range(op.x + 1):
        state.v[index] = ctx.bus.read(state.i + index)
