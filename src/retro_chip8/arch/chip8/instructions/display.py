# src/retro_chip8/arch/chip8/instructions/display.py
"""
画面制御命令の実装。
"""
from retro_chip8.core.snapshot import Operation
from retro_chip8.arch.chip8.state import Chip8CpuState
from .base import ExecutionContext, check_range

# --- 00E0 ---
def execute_cls(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    ctx.framebuffer.clear()

# --- DXYN ---
# @intent:responsibility Iから読んだN行のスプライトを(VX, VY)にXOR描画し、衝突をフラグに反映します。
# @intent:rationale 座標は画面サイズで折り返し（トーラス状）、クリップは行いません。
def execute_drw(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    """
    衝突フラグは命令の開始時に0へ戻し、点灯ピクセルが消灯した最初の時点で1になります。
    一度1になった後は、この命令の間は1のままです。
    """
    origin_x = state.v[op.x]
    origin_y = state.v[op.y]
    state.flag = 0

    # 描画前に全行を読み出し、範囲外の読み出しで描画が途中になるのを防ぐ
    check_range(ctx.bus, state.i, op.n)
    rows = [ctx.bus.read(state.i + row) for row in range(op.n)]

    fb = ctx.framebuffer
    for row, sprite_byte in enumerate(rows):
        y = (origin_y + row) % fb.height
        for col in range(8):
            if sprite_byte & (0x80 >> col):
                x = (origin_x + col) % fb.width
                if fb.xor_pixel(x, y):
                    state.flag = 1
