# retro_chip8/peripherals/keypad.py
"""
16キーの入力ラッチ。
"""
from typing import List

from retro_chip8.common.types import KEY_COUNT
from retro_chip8.core.observer import MachineObserver

# @intent:responsibility 16個のキーの押下状態を保持します。
class Keypad:
    def __init__(self, observer: MachineObserver):
        self._observer = observer
        self._keys: List[bool] = [False] * KEY_COUNT

    # @intent:responsibility キー状態を更新し、離された状態から押された状態への遷移であればTrueを返します。
    # @intent:rationale 範囲外のキー番号は外部入力の異常であり、致命的ではないため通知して無視します。
    def set_key(self, key: int, pressed: bool) -> bool:
        """
        キーの押下状態を設定します。
        範囲外のkeyはオブザーバへ通知した上で無視し、Falseを返します。
        """
        if not 0 <= key < KEY_COUNT:
            self._observer.on_log(f"set_key: invalid key index {key}")
            return False

        was_pressed = self._keys[key]
        self._keys[key] = pressed
        return pressed and not was_pressed

    # @intent:pre-condition keyは0-15である必要があります（範囲検査は命令側の責務です）。
    def is_pressed(self, key: int) -> bool:
        return self._keys[key]

    def release_all(self) -> None:
        self._keys = [False] * KEY_COUNT
