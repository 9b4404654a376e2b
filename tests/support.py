"""
テスト共通の補助クラス。
"""
from typing import List

from retro_chip8.core.observer import MachineObserver


class RecordingObserver(MachineObserver):
    """通知を記録するだけのオブザーバ。"""
    def __init__(self):
        self.logs: List[str] = []
        self.sound_events: List[bool] = []

    def on_log(self, message: str) -> None:
        self.logs.append(message)

    def on_sound_state_changed(self, playing: bool) -> None:
        self.sound_events.append(playing)


def words_to_bytes(*words: int) -> bytes:
    """16bit命令ワード列をビッグエンディアンのROMイメージに変換します。"""
    data = bytearray()
    for word in words:
        data += bytes([(word >> 8) & 0xFF, word & 0xFF])
    return bytes(data)
