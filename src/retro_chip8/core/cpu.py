# retro_chip8/core/cpu.py
"""
Core Layer (抽象CPU)

このモジュールは、CPUの基本的な状態管理と命令サイクルの駆動に関する抽象化を提供します。
具体的な命令の振る舞いはInstruction Layerに移譲されます。
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional

from retro_chip8.transport.bus import Bus
from retro_chip8.core.snapshot import Snapshot, Operation, Metadata
from retro_chip8.core.state import CpuState

# @intent:responsibility 抽象CPUの基本機能とインターフェースを定義します。
class AbstractCpu(ABC):
    """
    CPUエミュレーションの基底となる抽象クラス。
    Busとのインターフェース、基本的な状態管理、命令サイクルの抽象化を提供します。
    """
    # @intent:pre-condition `bus`は有効なBusオブジェクトである必要があります。
    def __init__(self, bus: Bus):
        self._bus = bus
        self._state: CpuState = self._create_initial_state()
        self._instruction_count: int = 0
        # @intent:rationale Stateオブジェクトの直接操作を避けるため、protectedな命名規則を採用。
        #                  外部からのアクセスは`get_state()`メソッドを介して行う。

    # @intent:responsibility 初期状態のCpuStateオブジェクトを生成します。
    @abstractmethod
    def _create_initial_state(self) -> CpuState:
        pass

    # @intent:responsibility CPUをリセットし、初期状態に戻します。
    def reset(self) -> None:
        """
        レジスタ、スタック、PCを初期値に戻します。
        """
        self._state = self._create_initial_state()
        self._instruction_count = 0

    def get_state(self) -> CpuState:
        return self._state

    # @intent:responsibility メモリから次の命令ワードをフェッチします。
    @abstractmethod
    def _fetch(self) -> int:
        """
        現在のPCから次の命令ワードを読み出して返します。
        """
        pass

    @abstractmethod
    def _decode(self, opcode: int) -> Operation:
        pass

    @abstractmethod
    def _execute(self, operation: Operation) -> None:
        pass

    # @intent:responsibility CPUを1命令サイクル進め、その結果のスナップショットを返します。
    # @intent:rationale Template Methodパターンを採用し、共通の実行フロー（停止判定→フェッチ→デコード→PC更新→実行→Snapshot生成）を定義します。
    #                  アーキテクチャ固有の振る舞いはフックメソッドで対応します。
    def step(self) -> Optional[Snapshot]:
        """
        CPUを1命令サイクル進めます。
        実行しなかった場合（停止中など）はNoneを返します。
        """
        # 1. 停止判定 (Hook)
        if not self._can_execute():
            return None

        initial_pc = self._state.pc

        # 2. フェッチ
        opcode = self._fetch()
        if not self._can_execute():
            # フェッチの結果、停止状態へ遷移した
            return None

        # 3. デコード
        operation = self._decode(opcode)

        # 4. PC更新 (Hook)
        self._update_pc(operation)

        # 5. 実行
        self._execute(operation)

        # 6. Snapshot生成
        return self._create_snapshot(initial_pc, operation)

    # @intent:responsibility 命令を実行可能な状態かどうかを返します。
    def _can_execute(self) -> bool:
        """
        デフォルトは常に実行可能。停止状態を持つCPUはオーバーライドします。
        """
        return True

    # @intent:responsibility 命令実行前にPCを更新します。
    def _update_pc(self, operation: Operation) -> None:
        self._state.pc = (self._state.pc + operation.length) & 0xFFFF

    def _create_snapshot(self, initial_pc: int, operation: Operation) -> Snapshot:
        self._instruction_count += 1
        return Snapshot(
            state=self.get_state(),
            operation=operation,
            metadata=Metadata(instruction_count=self._instruction_count, pc=initial_pc)
        )

    @abstractmethod
    def get_register_map(self) -> Dict[str, int]:
        """
        現在のレジスタ値を辞書形式で返す。
        ホストがCPUの内部構造を知らなくても値を表示できるようにするために使用される。
        """
        pass
