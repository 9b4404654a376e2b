# src/retro_chip8/arch/chip8/instructions/__init__.py
"""
CHIP-8命令セット実装パッケージ。
"""
from retro_chip8.core.snapshot import Operation
from retro_chip8.core.errors import IllegalOpcodeFault
from retro_chip8.arch.chip8.state import Chip8CpuState
from .base import ExecutionContext
from .maps import DECODE_MAP, EXECUTE_MAP, INSTRUCTION_FORMATS, FIELD_EXTRACTORS, FIELD_LAYOUT

# @intent:responsibility 16bitの命令ワードをデコードし、ニーモニックでタグ付けされたOperationを返します。
def decode_opcode(opcode: int) -> Operation:
    """
    命令ワードをデコードします。
    未割り当てのエンコーディングはIllegalOpcodeFaultになります。
    """
    opcode &= 0xFFFF
    mnemonic = DECODE_MAP[opcode >> 12](opcode)
    if mnemonic is None:
        raise IllegalOpcodeFault(f"Opcode {opcode:04X} not implemented", opcode=opcode)

    fields = {name: extract(opcode) for name, extract in FIELD_EXTRACTORS.items()}
    operands = [template.format(**fields) for template in INSTRUCTION_FORMATS[mnemonic].operands]
    return Operation(opcode=opcode, mnemonic=mnemonic, operands=operands, **fields)

# @intent:responsibility Operationのニーモニックと使用フィールドから命令ワードを再構成します。
def encode_operation(operation: Operation) -> int:
    fmt = INSTRUCTION_FORMATS.get(operation.mnemonic)
    if fmt is None:
        raise ValueError(f"Unknown mnemonic: {operation.mnemonic}")
    word = fmt.base
    for name in fmt.fields:
        shift, mask = FIELD_LAYOUT[name]
        word |= (getattr(operation, name) & mask) << shift
    return word

# @intent:responsibility デコードされた命令を実行します。
def execute_instruction(operation: Operation, state: Chip8CpuState, ctx: ExecutionContext) -> None:
    EXECUTE_MAP[operation.mnemonic](state, ctx, operation)
