# retro_chip8/peripherals/timers.py
"""
ディレイタイマーとサウンドタイマー。

外部から一定周期（公称60Hz）で呼ばれるtick()によってのみ減算されます。
サウンドタイマーの正/ゼロの切り替わりは、エッジでのみオブザーバに通知します。
"""
from retro_chip8.core.observer import MachineObserver

# @intent:responsibility 2つの8bitダウンカウンタと、サウンド状態のエッジ検出を管理します。
class Timers:
    def __init__(self, observer: MachineObserver):
        self._observer = observer
        self._delay = 0
        self._sound = 0
        self._sound_active = False

    @property
    def delay(self) -> int:
        return self._delay

    @property
    def sound(self) -> int:
        return self._sound

    @property
    def sound_active(self) -> bool:
        return self._sound_active

    def set_delay(self, value: int) -> None:
        self._delay = value & 0xFF

    def set_sound(self, value: int) -> None:
        self._sound = value & 0xFF
        self._update_sound_state()

    # @intent:responsibility 両カウンタを、正であれば1減算します。0未満にはなりません。
    def tick(self) -> None:
        if self._delay > 0:
            self._delay -= 1
        if self._sound > 0:
            self._sound -= 1
        self._update_sound_state()

    # @intent:responsibility 両カウンタを0に戻します。鳴動中であれば停止を通知します。
    def reset(self) -> None:
        self._delay = 0
        self._sound = 0
        self._update_sound_state()

    # @intent:responsibility サウンドカウンタの正/ゼロが切り替わった瞬間にのみ通知します。
    def _update_sound_state(self) -> None:
        active = self._sound > 0
        if active != self._sound_active:
            self._sound_active = active
            self._observer.on_sound_state_changed(active)
