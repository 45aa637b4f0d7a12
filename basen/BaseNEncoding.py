import logging
import struct
import sys
import uuid
from basen import alphabets
from basen.BaseNAlphabet import BaseNAlphabetInterface
from basen.BaseNConverter import ByteSource
from basen.BaseNTrace import BaseNTrace
from basen.error import BaseNInvalidInput, BaseNOutOfRange

INT32_WIDTH = 4
INT64_WIDTH = 8
UUID_WIDTH = 16


class BaseNEncoding(object):
    """
    Fixed-width values to text and back through an alphabet.

    Integers are written as two's-complement little-endian buffers, UUIDs as
    their mixed-endian 16 byte layout (uuid.UUID.bytes_le). Decoded buffers
    are zero-filled or truncated to the fixed width.
    """

    def __init__(self,
                 alphabet: BaseNAlphabetInterface,
                 name: str | None = None,
                 trace: BaseNTrace | None = None):
        if alphabet is None:
            raise BaseNInvalidInput('encoding alphabet cannot be None')
        self.alphabet = alphabet
        self.name = name
        if not self.name:
            self.name = f"base{alphabet.radix}"

        # Tracing
        if not trace:
            trace = BaseNTrace(name='basen.encoding')
        self.trace = trace
        self.encoded = self.trace.counter('basen.encoded',
                                          'values encoded to text')
        self.decoded = self.trace.counter('basen.decoded',
                                          'values decoded from text')

        # Logging
        self.log = logging.getLogger('basen.encoding.' + self.name)
        if not self.__log_configured():
            self.logfmt = 'b.encoding ({0}|{1}) %(message)s'.format(
                self.name, alphabet.radix)
            handler = logging.StreamHandler(sys.stdout)
            formatter = logging.Formatter(self.logfmt)
            handler.setFormatter(formatter)
            self.log.addHandler(handler)
            self.log.propagate = False

    def __log_configured(self) -> bool:
        for h in self.log.handlers:
            if isinstance(h, logging.StreamHandler) and h.stream == sys.stdout:
                return True
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.alphabet!r}, name={self.name!r})"

    def get_string(self, value: ByteSource | uuid.UUID) -> str:
        """
        bytes or UUID -> text
        use get_string_int32/get_string_int64 for integers
        """
        if value is None:
            raise BaseNInvalidInput('get_string value cannot be None')
        if isinstance(value, uuid.UUID):
            return self.get_string_uuid(value)
        if isinstance(value, int):
            raise BaseNInvalidInput(
                'get_string needs a width for int, use get_string_int32 or get_string_int64'
            )

        try:
            buf = bytes(value)
        except (TypeError, ValueError) as e:
            raise BaseNInvalidInput(f"value is not a byte buffer: {e}") from e

        self.log.debug('get_string %d bytes', len(buf))
        self.encoded.add(1, {'basen.type': 'bytes'})
        return self.alphabet.get_string(buf)

    def get_string_int32(self, n: int) -> str:
        return self.pack('<i', n, 'int32')

    def get_string_int64(self, n: int) -> str:
        return self.pack('<q', n, 'int64')

    def get_string_uuid(self, u: uuid.UUID) -> str:
        if not isinstance(u, uuid.UUID):
            raise BaseNInvalidInput(f"value {u!r} is not a UUID")
        self.log.debug('get_string uuid %s', u)
        self.encoded.add(1, {'basen.type': 'uuid'})
        return self.alphabet.get_string(u.bytes_le)

    def pack(self, fmt: str, n: int, kind: str) -> str:
        if isinstance(n, bool) or not isinstance(n, int):
            raise BaseNInvalidInput(f"{kind} value {n!r} is not an int")
        try:
            buf = struct.pack(fmt, n)
        except struct.error as e:
            raise BaseNOutOfRange(f"{kind} value {n} out of range") from e

        self.log.debug('get_string %s %d', kind, n)
        self.encoded.add(1, {'basen.type': kind})
        return self.alphabet.get_string(buf)

    def to_bytes(self, s: str, width: int, strict: bool = False) -> bytes:
        """
        Decode s into exactly width bytes.
        Shorter results are zero-filled, longer results are truncated unless
        strict, which raises instead.
        """
        if s is None:
            raise BaseNInvalidInput('to_bytes string cannot be None')
        if width is None or width < 0:
            raise BaseNOutOfRange(f"to_bytes width {width} out of range")

        decoded = bytes(self.alphabet.get_bytes(s))
        if len(decoded) > width:
            if strict:
                raise BaseNOutOfRange(
                    f"decoded {len(decoded)} bytes do not fit in {width}")
            # minimal form may carry a zero sign byte, only warn on data loss
            if any(decoded[width:]):
                self.log.warning('to_bytes truncated %d bytes to %d',
                                 len(decoded), width)

        self.decoded.add(1, {'basen.width': width})
        return decoded[:width].ljust(width, b'\x00')

    def get_int32(self, s: str) -> int:
        return struct.unpack('<i', self.to_bytes(s, INT32_WIDTH))[0]

    def get_int64(self, s: str) -> int:
        return struct.unpack('<q', self.to_bytes(s, INT64_WIDTH))[0]

    def get_uuid(self, s: str) -> uuid.UUID:
        return uuid.UUID(bytes_le=self.to_bytes(s, UUID_WIDTH))


# Known encodings, just a few most useful
DEC = BaseNEncoding(alphabets.BASE10, name='dec')
HEX = BaseNEncoding(alphabets.BASE16, name='hex')
BASE32 = BaseNEncoding(alphabets.BASE32, name='base32')
BASE58 = BaseNEncoding(alphabets.BASE58, name='base58')
BASE64 = BaseNEncoding(alphabets.BASE64, name='base64')
BASE64_SAFE = BaseNEncoding(alphabets.BASE64_SAFE, name='base64-safe')
ASCII_SAFE = BaseNEncoding(alphabets.BASE73_SAFE, name='ascii-safe')
ASCII = BaseNEncoding(alphabets.BASE95, name='ascii')
