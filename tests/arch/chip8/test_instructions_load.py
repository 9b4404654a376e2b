import unittest

from retro_chip8.system.machine import Chip8Machine
from retro_chip8.core.errors import AddressFault
from support import RecordingObserver, words_to_bytes

class TestChip8LoadInstructions(unittest.TestCase):
    def setUp(self):
        self.machine = Chip8Machine(observer=RecordingObserver())

    def _load(self, *words):
        self.machine.start_rom(words_to_bytes(*words))
        self.state = self.machine.cpu.get_state()

    def test_ld_i_nnn(self):
        self._load(0xA123)
        self.machine.cycle()
        self.assertEqual(self.state.i, 0x123)

    def test_add_i_vx_masks_to_12_bits(self):
        self._load(0xAFFF, 0xF11E)
        self.state.v[1] = 2
        self.machine.cycle()
        self.machine.cycle()
        self.assertEqual(self.state.i, 0x001)

    def test_ld_f_vx_points_at_font_glyph(self):
        self._load(0xF129)
        self.state.v[1] = 0xA
        self.machine.cycle()
        self.assertEqual(self.state.i, 50)
        self.assertEqual(self.machine.bus.read(self.state.i), 0xF0)

    def test_bcd(self):
        self._load(0xA300, 0xF133)
        self.state.v[1] = 255
        self.machine.cycle()
        self.machine.cycle()
        digits = [self.machine.bus.read(0x300 + n) for n in range(3)]
        self.assertEqual(digits, [2, 5, 5])

    def test_bcd_out_of_range_writes_nothing(self):
        self._load(0xAFFE, 0xF133)
        self.state.v[1] = 123
        self.machine.cycle()
        with self.assertRaises(AddressFault):
            self.machine.cycle()
        self.assertEqual(self.machine.bus.read(0xFFE), 0)
        self.assertEqual(self.machine.bus.read(0xFFF), 0)

    def test_store_and_load_registers(self):
        self._load(0xA400, 0xF355, 0x6000, 0x6100, 0x6200, 0x6300, 0xF365)
        for index, value in enumerate((0x11, 0x22, 0x33, 0x44, 0x55)):
            self.state.v[index] = value
        self.machine.cycle()
        self.machine.cycle()

        stored = [self.machine.bus.read(0x400 + n) for n in range(5)]
        self.assertEqual(stored, [0x11, 0x22, 0x33, 0x44, 0])
        self.assertEqual(self.state.i, 0x400)

        for _ in range(5):
            self.machine.cycle()
        self.assertEqual(self.state.v[:5], [0x11, 0x22, 0x33, 0x44, 0x55])
        self.assertEqual(self.state.i, 0x400)

    def test_bulk_transfer_out_of_range(self):
        self._load(0xAFFD, 0xFF65)
        self.machine.cycle()
        with self.assertRaises(AddressFault) as cm:
            self.machine.cycle()
        self.assertEqual(cm.exception.pc, 0x202)
        self.assertEqual(cm.exception.opcode, 0xFF65)

if __name__ == '__main__':
    unittest.main()
