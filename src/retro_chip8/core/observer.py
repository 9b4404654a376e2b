# retro_chip8/core/observer.py
"""
ホストへの通知インターフェース。

診断ログとサウンド状態の変化を、注入可能なオブザーバとしてホストに伝えます。
"""
import logging
from abc import ABC, abstractmethod

logger = logging.getLogger("retro_chip8")

# @intent:responsibility コアからホストへの通知口を定義します。
class MachineObserver(ABC):
    @abstractmethod
    def on_log(self, message: str) -> None:
        """無視された入力や実行停止などの異常を通知します。"""
        pass

    @abstractmethod
    def on_sound_state_changed(self, playing: bool) -> None:
        """
        サウンドタイマーの正/ゼロの切り替わり時にのみ呼ばれます。
        同じ状態が続く間は呼ばれません。
        """
        pass

# @intent:responsibility 既定のオブザーバ。通知を標準のloggingに転送します。
class LoggingObserver(MachineObserver):
    def on_log(self, message: str) -> None:
        logger.warning(message)

    def on_sound_state_changed(self, playing: bool) -> None:
        logger.debug("Sound %s", "on" if playing else "off")
