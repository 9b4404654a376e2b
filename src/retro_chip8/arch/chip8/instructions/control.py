# src/retro_chip8/arch/chip8/instructions/control.py
"""
制御命令（ジャンプ、サブルーチン、条件スキップ）の実装。

実行時点でPCは既に次の命令を指しています。
スキップは PC をさらに2進めることで表現します。
"""
from retro_chip8.core.snapshot import Operation
from retro_chip8.core.errors import AddressFault
from retro_chip8.arch.chip8.state import Chip8CpuState
from .base import ExecutionContext, push_return, pop_return

def _skip(state: Chip8CpuState) -> None:
    state.pc = (state.pc + 2) & 0xFFFF

# --- 0NNN ---
# @intent:responsibility SYS命令。機械語ルーチン呼び出しは実装せず、何もしません。
def execute_sys(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    # Intentional: 0NNN is ignored
    pass

# --- 00EE ---
# @intent:responsibility RET命令を実行し、スタックから戻りアドレスをポップしてPCに設定します。
def execute_ret(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    state.pc = pop_return(state)

# --- 1NNN ---
def execute_jp(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    state.pc = op.nnn

# --- 2NNN ---
# @intent:responsibility CALL命令を実行し、戻りアドレス（次の命令）をプッシュしてからジャンプします。
def execute_call(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    push_return(state, state.pc)
    state.pc = op.nnn

# --- 3XNN ---
def execute_se_vx_nn(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    if state.v[op.x] == op.nn:
        _skip(state)

# --- 4XNN ---
def execute_sne_vx_nn(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    if state.v[op.x] != op.nn:
        _skip(state)

# --- 5XY0 ---
def execute_se_vx_vy(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    if state.v[op.x] == state.v[op.y]:
        _skip(state)

# --- 9XY0 ---
def execute_sne_vx_vy(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    if state.v[op.x] != state.v[op.y]:
        _skip(state)

# --- BNNN ---
# @intent:responsibility NNN + V0 へジャンプします。アドレス空間外への飛び先はフォールトです。
def execute_jp_v0_nnn(state: Chip8CpuState, ctx: ExecutionContext, op: Operation) -> None:
    target = op.nnn + state.v[0]
    if target >= ctx.bus.get_size():
        raise AddressFault(f"BNNN jump out of bounds: {target:#05x}")
    state.pc = target
