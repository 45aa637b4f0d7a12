import unittest
import random
import basen.BaseNConverter
from basen.BaseNConverter import BaseNConverter, to_base_n, from_base_n
from basen.error import BaseNInvalidInput, BaseNOutOfRange

RADIXES = [2, 3, 7, 10, 16, 32, 64, 128, 256]


def leading_bit_unset(value: int) -> bool:
    return (value & 0x80) == 0


class TestBaseNConverterToBaseN(unittest.TestCase):

    def test_zero_is_empty(self) -> None:
        for radix in RADIXES:
            self.assertEqual([], to_base_n(bytes(3), radix))
            self.assertEqual([], to_base_n(b'', radix))
            self.assertEqual([], to_base_n(0, radix))

    def test_one_is_first_digit(self) -> None:
        for radix in RADIXES:
            self.assertEqual([1], to_base_n(b'\x01', radix))

    def test_value_lesser_than_radix(self) -> None:
        for radix in RADIXES:
            self.assertEqual([radix - 1], to_base_n(bytes([radix - 1]),
                                                    radix))

    def test_radix_in_its_base(self) -> None:
        for radix in RADIXES:
            if radix > 255:
                continue
            self.assertEqual([0, 1], to_base_n(bytes([radix]), radix))

    def test_binary(self) -> None:
        BINARY = {1: "1", 2: "01", 3: "11", 5: "101", 16: "00001",
                  53: "101011"}
        for number, expected in BINARY.items():
            digits = to_base_n(bytes([number]), 2)
            self.assertTrue(set(digits) <= {0, 1})
            self.assertEqual(expected, ''.join(str(d) for d in digits))

    def test_little_endian(self) -> None:
        self.assertEqual([1], to_base_n(b'\x01\x00\x00\x00', 256))
        self.assertEqual([0, 0, 0, 1], to_base_n(b'\x00\x00\x00\x01', 256))
        self.assertLess(len(to_base_n(b'\x01\x00\x00\x00', 10)),
                        len(to_base_n(b'\x00\x00\x00\x01', 10)))

    def test_trailing_zero_bytes(self) -> None:
        self.assertEqual(to_base_n(b'\x05', 2), to_base_n(b'\x05\x00\x00', 2))

    def test_unsigned(self) -> None:
        # high bit of the top byte is not a sign
        self.assertEqual([15, 15], to_base_n(b'\xff', 16))
        self.assertEqual([0, 0, 8], to_base_n(b'\x00\x08', 16))

    def test_radix_256_repacks_bytes(self) -> None:
        self.assertEqual([1, 2, 3], to_base_n(b'\x01\x02\x03', 256))
        self.assertEqual([1, 2], to_base_n(b'\x01\x02\x00', 256))
        self.assertEqual([0x80], to_base_n(b'\x80', 256))

    def test_int(self) -> None:
        self.assertEqual([0, 1], to_base_n(10, 10))
        self.assertEqual([2, 1], to_base_n(62 + 2, 62))
        self.assertEqual([0] * 100 + [1], to_base_n(2**100, 2))

    def test_negative_int_sign_dropped(self) -> None:
        self.assertEqual([0, 1], to_base_n(-10, 10))
        self.assertEqual(to_base_n(2**64, 7), to_base_n(-2**64, 7))

    def test_iterable_bytes(self) -> None:
        self.assertEqual(to_base_n(b'\x01\x02', 3), to_base_n([1, 2], 3))
        self.assertEqual(to_base_n(b'\x01\x02', 3),
                         to_base_n(bytearray(b'\x01\x02'), 3))

    def test_digit_bound(self) -> None:
        rng = random.Random(1)
        for radix in RADIXES:
            buf = bytes(rng.randrange(256) for _ in range(32))
            for d in to_base_n(buf, radix):
                self.assertGreaterEqual(d, 0)
                self.assertLess(d, radix)

    def test_none(self) -> None:
        with self.assertRaises(BaseNInvalidInput):
            to_base_n(None, 2)

    def test_not_bytes(self) -> None:
        with self.assertRaises(BaseNInvalidInput):
            to_base_n("0123", 2)
        with self.assertRaises(BaseNInvalidInput):
            to_base_n([256], 2)
        with self.assertRaises(BaseNInvalidInput):
            to_base_n(1.5, 2)

    def test_radix_lesser_than_2(self) -> None:
        with self.assertRaisesRegex(BaseNOutOfRange, 'radix 1'):
            to_base_n(b'', 1)
        with self.assertRaises(BaseNOutOfRange):
            to_base_n(b'\x01', 0)
        with self.assertRaises(BaseNOutOfRange):
            to_base_n(b'\x01', -2)


class TestBaseNConverterFromBaseN(unittest.TestCase):

    def test_zero_is_single_byte(self) -> None:
        for radix in RADIXES:
            self.assertEqual(b'\x00', from_base_n([0, 0, 0], radix))
            self.assertEqual(b'\x00', from_base_n([], radix))

    def test_one(self) -> None:
        for radix in RADIXES:
            self.assertEqual(b'\x01', from_base_n([1], radix))

    def test_value_lesser_than_radix(self) -> None:
        for radix in RADIXES:
            result = from_base_n([radix - 1], radix)
            if leading_bit_unset(radix - 1):
                self.assertEqual(bytes([radix - 1]), result)
            else:
                # zero byte keeps the value from reading as negative
                self.assertEqual(bytes([radix - 1, 0]), result)

    def test_radix_in_its_base(self) -> None:
        for radix in RADIXES:
            if radix > 255:
                continue
            result = from_base_n([0, 1], radix)
            if leading_bit_unset(radix):
                self.assertEqual(bytes([radix]), result)
            else:
                self.assertEqual(bytes([radix, 0]), result)

    def test_binary(self) -> None:
        BINARY = {1: "1", 2: "01", 3: "11", 5: "101", 16: "00001",
                  53: "101011"}
        for number, base2 in BINARY.items():
            digits = [1 if c == '1' else 0 for c in base2]
            self.assertEqual(bytes([number]), from_base_n(digits, 2))

    def test_minimal_length(self) -> None:
        self.assertEqual(b'\x01\x02', from_base_n([1, 2, 0, 0], 256))
        self.assertEqual(b'\x00\x80\x00', from_base_n([0, 0x80], 256))
        self.assertEqual(b'\xff\x7f', from_base_n([1] * 15, 2))
        self.assertEqual(b'\xff\xff\x00', from_base_n([1] * 16, 2))

    def test_digit_greater_than_radix(self) -> None:
        with self.assertRaisesRegex(BaseNOutOfRange, 'digit 3'):
            from_base_n([3], 2)
        with self.assertRaisesRegex(BaseNOutOfRange, 'position 1'):
            from_base_n([0, 2, 1], 2)
        with self.assertRaises(BaseNOutOfRange):
            from_base_n([256], 256)

    def test_negative_digit(self) -> None:
        with self.assertRaises(BaseNOutOfRange):
            from_base_n([1, -1], 10)

    def test_none(self) -> None:
        with self.assertRaises(BaseNInvalidInput):
            from_base_n(None, 2)
        with self.assertRaises(BaseNInvalidInput):
            from_base_n([1, None], 2)

    def test_radix_lesser_than_2(self) -> None:
        with self.assertRaisesRegex(BaseNOutOfRange, 'radix 1'):
            from_base_n([], 1)

    def test_generator_digits(self) -> None:
        self.assertEqual(b'\x05', from_base_n((d for d in [1, 0, 1]), 2))

    def test_round_trip(self) -> None:
        rng = random.Random(2)
        for length in range(0, 40):
            buf = bytes(rng.randrange(256) for _ in range(length))
            number = int.from_bytes(buf, 'little')
            expected = number.to_bytes(number.bit_length() // 8 + 1, 'little')
            for radix in RADIXES + [5, 58, 95, 255]:
                self.assertEqual(expected,
                                 from_base_n(to_base_n(buf, radix), radix))

    def test_to_int(self) -> None:
        conv = BaseNConverter()
        self.assertEqual(2**100, conv.to_int(conv.to_base_n(2**100, 3), 3))
        self.assertEqual(0, conv.to_int([], 3))

    def test_shared_converter(self) -> None:
        self.assertIsInstance(basen.BaseNConverter.converter, BaseNConverter)


if __name__ == "__main__":
    unittest.main()
