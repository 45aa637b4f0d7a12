import logging
from typing import Protocol, runtime_checkable
from basen.BaseNConverter import (BaseNConverter, ByteSource,
                                  converter as default_converter)
from basen.BaseNTrace import BaseNTrace
from basen.error import (BaseNInvalidInput, BaseNOutOfRange,
                         BaseNMalformedAlphabet, BaseNUnknownSymbol)

MIN_RADIX = 2
MAX_RADIX = 256


@runtime_checkable
class BaseNAlphabetInterface(Protocol):
    """
    A digit to symbol mapping that converts bytes to text and back
    """

    @property
    def digits(self) -> str:
        ...

    @property
    def radix(self) -> int:
        ...

    def get_string(self, value: int | ByteSource) -> str:
        ...

    def get_bytes(self, encoding: str) -> bytes:
        ...


class BaseNAlphabet(object):
    """
    digits: symbols, position is the digit value
    radix: use only the first radix symbols of digits

    Strings are written least significant digit first, so the leftmost
    character is the lowest digit. Reverse the string for the usual
    positional notation.
    """

    def __init__(self,
                 digits: str,
                 radix: int | None = None,
                 converter: BaseNConverter | None = None,
                 trace: BaseNTrace | None = None):
        if digits is None:
            raise BaseNInvalidInput('alphabet digits cannot be None')
        if not isinstance(digits, str):
            raise BaseNInvalidInput(
                f"alphabet digits must be str, not {type(digits).__name__}")
        if not converter:
            converter = default_converter

        if radix is not None:
            if isinstance(radix, bool) or not isinstance(radix, int):
                raise BaseNOutOfRange(f"radix must be an int, not {radix!r}")
            if radix < 0 or radix > len(digits):
                raise BaseNOutOfRange(
                    f"radix {radix} exceeds the {len(digits)} digits available"
                )
            digits = digits[:radix]

        if len(digits) < MIN_RADIX:
            raise BaseNMalformedAlphabet(
                f"alphabet needs at least {MIN_RADIX} digits, got {len(digits)}"
            )
        if len(digits) > MAX_RADIX:
            raise BaseNMalformedAlphabet(
                f"alphabet can contain at most {MAX_RADIX} digits, got {len(digits)}"
            )

        table: list[int | None] = [None] * MAX_RADIX
        for i, c in enumerate(digits):
            if not c.isascii():
                raise BaseNMalformedAlphabet(
                    f"digit {c!r} at position {i} is not ascii")
            if table[ord(c)] is not None:
                raise BaseNMalformedAlphabet(
                    f"digit {c!r} occurs more than once")
            table[ord(c)] = i

        self.__digits = digits
        self.__table = tuple(table)
        self.__converter = converter

        # Tracing
        if not trace:
            trace = BaseNTrace(name='basen.alphabet')
        self.trace = trace

        # Logging
        self.log = logging.getLogger('basen.alphabet')
        self.log.debug('alphabet radix %d digits %r', self.radix, digits)

    @property
    def digits(self) -> str:
        return self.__digits

    @property
    def radix(self) -> int:
        return len(self.__digits)

    @property
    def converter(self) -> BaseNConverter:
        return self.__converter

    def __len__(self) -> int:
        return self.radix

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.__digits!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseNAlphabet):
            return NotImplemented
        return self.__digits == other.digits

    def __hash__(self) -> int:
        return hash(self.__digits)

    def digit(self, symbol: str) -> int | None:
        """
        Digit value of a symbol, None when not in the alphabet
        """
        if len(symbol) != 1 or ord(symbol) >= MAX_RADIX:
            return None
        return self.__table[ord(symbol)]

    def get_string(self, value: int | ByteSource) -> str:
        """
        int or little-endian bytes -> text, least significant digit first
        """
        if value is None:
            raise BaseNInvalidInput('get_string value cannot be None')

        with self.trace.span("basen.get_string") as span:
            span.set_attribute("basen.radix", self.radix)
            if not isinstance(value, int):
                # consume iterables once, the length is traced
                try:
                    value = bytes(value)
                except (TypeError, ValueError) as e:
                    raise BaseNInvalidInput(
                        f"value is not a byte buffer: {e}") from e
                span.set_attribute("basen.input_length", len(value))

            digits = self.__converter.to_base_n(value, self.radix)
            encoding = self.join_digits(digits)
            span.set_attribute("basen.output_length", len(encoding))
            return encoding

    def get_bytes(self, encoding: str) -> bytes:
        """
        text -> minimal little-endian bytes
        """
        with self.trace.span("basen.get_bytes") as span:
            span.set_attribute("basen.radix", self.radix)
            digits = self.split_digits(encoding)
            span.set_attribute("basen.input_length", len(encoding))

            result = self.__converter.from_base_n(digits, self.radix)
            span.set_attribute("basen.output_length", len(result))
            return result

    def get_int(self, encoding: str) -> int:
        """
        text -> non-negative int, the inverse of get_string(int)
        """
        return int.from_bytes(self.get_bytes(encoding), 'little')

    def join_digits(self, digits: list[int]) -> str:
        out = []
        for d in digits:
            if d < 0 or d >= self.radix:
                raise BaseNOutOfRange(
                    f"digit {d} too big to represent in base {self.radix}")
            out.append(self.__digits[d])
        return ''.join(out)

    def split_digits(self, encoding: str) -> list[int]:
        if encoding is None:
            raise BaseNInvalidInput('encoding cannot be None')
        if not isinstance(encoding, str):
            raise BaseNInvalidInput(
                f"encoding must be str, not {type(encoding).__name__}")

        digits = []
        for pos, c in enumerate(encoding):
            d = self.digit(c)
            if d is None:
                raise BaseNUnknownSymbol(
                    f"symbol {c!r} at position {pos} not in base {self.radix} alphabet"
                )
            digits.append(d)
        return digits
