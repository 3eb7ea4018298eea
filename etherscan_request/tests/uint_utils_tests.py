import unittest

from etherscan_request.constants.etherscan import MAX_UINT256
from etherscan_request.utils.uint_utils import to_decimal, to_hex, to_uint256
from etherscan_request.tests.test_constants import VITALIK_ADDRESS, VITALIK_HEX


class TestUintUtils(unittest.TestCase):
    def test_ints_pass_through(self):
        self.assertEqual(to_uint256(0), 0)
        self.assertEqual(to_uint256(MAX_UINT256), MAX_UINT256)

    def test_hex_text(self):
        self.assertEqual(to_uint256("0xff"), 255)
        self.assertEqual(to_uint256("0XFF"), 255)
        self.assertEqual(to_uint256("ff", hex_text=True), 255)
        self.assertEqual(to_hex(to_uint256(VITALIK_ADDRESS, hex_text=True)), VITALIK_HEX)

    def test_decimal_text(self):
        self.assertEqual(to_uint256("255"), 255)
        self.assertEqual(to_uint256(" 42 "), 42)

    def test_invalid_text(self):
        with self.assertRaises(ValueError):
            to_uint256("twelve")
        with self.assertRaises(ValueError):
            to_uint256("0xZZ")

    def test_out_of_range(self):
        with self.assertRaises(ValueError):
            to_uint256(-1)
        with self.assertRaises(ValueError):
            to_uint256(MAX_UINT256 + 1)
        with self.assertRaises(ValueError):
            to_uint256("0x1" + "0" * 64)

    def test_wrong_types(self):
        for value in (None, 1.0, b"01", False, [1]):
            with self.assertRaises(TypeError):
                to_uint256(value)

    def test_to_hex(self):
        self.assertEqual(to_hex(0), "0x0")
        self.assertEqual(to_hex(0xabcdef), "0xABCDEF")
        self.assertEqual(to_hex(MAX_UINT256), "0x" + "F" * 64)

    def test_to_decimal(self):
        self.assertEqual(to_decimal(0), "0")
        self.assertEqual(to_decimal(1234567), "1234567")


if __name__ == '__main__':
    unittest.main()
