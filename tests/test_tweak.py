import unittest

from nxcrypt import InvalidSectorIndex, nintendo_tweak


class TweakTests(unittest.TestCase):
    def test_sector_index_is_big_endian(self) -> None:
        self.assertEqual(nintendo_tweak(0), bytes(16))
        self.assertEqual(nintendo_tweak(1), bytes(15) + b"\x01")
        self.assertEqual(nintendo_tweak(0x0102), bytes(14) + b"\x01\x02")

    def test_differs_from_little_endian_convention(self) -> None:
        self.assertNotEqual(nintendo_tweak(2), (2).to_bytes(16, "little"))

    def test_full_width_index(self) -> None:
        self.assertEqual(nintendo_tweak((1 << 128) - 1), b"\xff" * 16)

    def test_out_of_range_index(self) -> None:
        with self.assertRaises(InvalidSectorIndex):
            nintendo_tweak(1 << 128)
        with self.assertRaises(InvalidSectorIndex):
            nintendo_tweak(-1)


if __name__ == "__main__":
    unittest.main()
