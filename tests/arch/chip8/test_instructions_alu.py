import random
import unittest

from retro_chip8.system.machine import Chip8Machine
from support import RecordingObserver, words_to_bytes

class TestChip8AluInstructions(unittest.TestCase):
    def setUp(self):
        self.machine = Chip8Machine(observer=RecordingObserver(), rng=random.Random(1234))

    def _load(self, *words):
        self.machine.start_rom(words_to_bytes(*words))
        self.state = self.machine.cpu.get_state()

    def _run(self, x_value, y_value, subcode, x=1, y=2):
        self._load(0x8000 | (x << 8) | (y << 4) | subcode)
        self.state.v[x] = x_value
        self.state.v[y] = y_value
        self.machine.cycle()
        return self.state.v[x], self.state.flag

    def test_ld_vx_nn(self):
        self._load(0x6A42)
        self.machine.cycle()
        self.assertEqual(self.state.v[0xA], 0x42)

    def test_add_vx_nn_wraps_without_flag(self):
        self._load(0x6AFF, 0x7A02)
        self.state.flag = 0
        self.machine.cycle()
        self.machine.cycle()
        self.assertEqual(self.state.v[0xA], 0x01)
        self.assertEqual(self.state.flag, 0)

    def test_logic_ops(self):
        self.assertEqual(self._run(0x0F, 0xAA, 0x0)[0], 0xAA)
        self.assertEqual(self._run(0x0F, 0xF0, 0x1)[0], 0xFF)
        self.assertEqual(self._run(0x3C, 0x0F, 0x2)[0], 0x0C)
        self.assertEqual(self._run(0xFF, 0x0F, 0x3)[0], 0xF0)

    def test_add_with_carry_all_pairs(self):
        self._load(0x8124)
        for a in range(256):
            for b in range(256):
                self.state.pc = 0x200
                self.state.v[1] = a
                self.state.v[2] = b
                self.machine.cycle()
                self.assertEqual(self.state.v[1], (a + b) % 256)
                self.assertEqual(self.state.flag, 1 if a + b > 255 else 0)

    def test_subtract_with_borrow_all_pairs(self):
        self._load(0x8125)
        for a in range(256):
            for b in range(256):
                self.state.pc = 0x200
                self.state.v[1] = a
                self.state.v[2] = b
                self.machine.cycle()
                self.assertEqual(self.state.v[1], (a - b) % 256)
                self.assertEqual(self.state.flag, 1 if a >= b else 0)

    def test_reverse_subtract(self):
        self.assertEqual(self._run(0x10, 0x30, 0x7), (0x20, 1))
        self.assertEqual(self._run(0x30, 0x10, 0x7), (0xE0, 0))
        self.assertEqual(self._run(0x10, 0x10, 0x7), (0x00, 1))

    def test_shift_right_uses_destination_only(self):
        self.assertEqual(self._run(0x05, 0xFF, 0x6), (0x02, 1))
        self.assertEqual(self._run(0x04, 0xFF, 0x6), (0x02, 0))

    def test_shift_left(self):
        self.assertEqual(self._run(0x81, 0x00, 0xE), (0x02, 1))
        self.assertEqual(self._run(0x41, 0x00, 0xE), (0x82, 0))

    def test_flag_wins_when_destination_is_vf(self):
        self._load(0x8F14)
        self.state.v[0xF] = 0xFF
        self.state.v[1] = 0x02
        self.machine.cycle()
        self.assertEqual(self.state.v[0xF], 1)

    def test_rnd_is_masked(self):
        self._load(*([0xC30F] * 20))
        for _ in range(20):
            self.machine.cycle()
            self.assertEqual(self.state.v[3] & 0xF0, 0)

    def test_rnd_zero_mask(self):
        self._load(0xC300)
        self.state.v[3] = 0x55
        self.machine.cycle()
        self.assertEqual(self.state.v[3], 0)

if __name__ == '__main__':
    unittest.main()
