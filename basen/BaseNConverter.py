import collections.abc
from typing import Any
from basen.error import BaseNInvalidInput, BaseNOutOfRange

ByteSource = bytes | bytearray | memoryview | collections.abc.Iterable[int]


def magnitude(value: int | ByteSource) -> int:
    """
    Unsigned magnitude of an int or a little-endian byte buffer.
    The sign of an int is discarded.
    """
    if value is None:
        raise BaseNInvalidInput('value cannot be None')
    if isinstance(value, bool):
        raise BaseNInvalidInput('value cannot be a bool')
    if isinstance(value, int):
        return abs(value)
    if isinstance(value, str):
        raise BaseNInvalidInput('value must be bytes or int, not str')

    try:
        buf = bytes(value)
    except (TypeError, ValueError) as e:
        raise BaseNInvalidInput(f"value is not a byte buffer: {e}") from e

    # bytes are unsigned, no zero byte needed to keep the sign bit clear
    return int.from_bytes(buf, 'little')


def check_radix(radix: Any) -> int:
    if isinstance(radix, bool) or not isinstance(radix, int):
        raise BaseNOutOfRange(f"radix must be an int, not {radix!r}")
    if radix < 2:
        raise BaseNOutOfRange(f"radix {radix} has to be at least 2")
    return radix


class BaseNConverter(object):
    """
    Express an unsigned magnitude in any integer base.

    Digits are always ordered least significant first.
    """

    def to_base_n(self, value: int | ByteSource, radix: int) -> list[int]:
        """
        int or little-endian bytes -> digits in base radix
        ex: to_base_n(b'\\x05', 2) -> [1, 0, 1]
        ex: to_base_n(0, 10) -> []
        """
        number = magnitude(value)
        radix = check_radix(radix)

        digits: list[int] = []
        while number > 0:
            # floor division to remain int type
            number, code = divmod(number, radix)
            digits.append(code)

        return digits

    def from_base_n(self, digits: collections.abc.Iterable[int],
                    radix: int) -> bytes:
        """
        digits in base radix -> minimal little-endian bytes
        A zero byte is appended when the top bit would otherwise be set, so
        the result never reads as negative two's-complement.
        """
        if digits is None:
            raise BaseNInvalidInput('digits cannot be None')
        radix = check_radix(radix)
        try:
            digits = list(digits)
        except TypeError as e:
            raise BaseNInvalidInput(f"digits are not iterable: {e}") from e

        number = 0
        for pos in range(len(digits) - 1, -1, -1):
            digit = digits[pos]
            if isinstance(digit, bool) or not isinstance(digit, int):
                raise BaseNInvalidInput(
                    f"digit {digit!r} at position {pos} is not an int")
            if digit < 0 or digit >= radix:
                raise BaseNOutOfRange(
                    f"digit {digit} at position {pos} out of range for radix {radix}"
                )
            number = number * radix + digit

        return number.to_bytes(number.bit_length() // 8 + 1, 'little')

    def to_int(self, digits: collections.abc.Iterable[int],
               radix: int) -> int:
        return int.from_bytes(self.from_base_n(digits, radix), 'little')


converter = BaseNConverter()


def to_base_n(value: int | ByteSource, radix: int) -> list[int]:
    return converter.to_base_n(value, radix)


def from_base_n(digits: collections.abc.Iterable[int], radix: int) -> bytes:
    return converter.from_base_n(digits, radix)
