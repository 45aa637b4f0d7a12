from basen import known
from basen.BaseNAlphabet import BaseNAlphabet

BASE2 = BaseNAlphabet("01")

BASE10 = BaseNAlphabet(known.FULL_ASCII95, 10)

BASE16 = BaseNAlphabet(known.FULL_ASCII95, 16)

# https://tools.ietf.org/html/rfc4648
BASE32 = BaseNAlphabet(known.BASE32_RFC4648)

BASE_Z32 = BaseNAlphabet(known.Z_BASE32)

# https://en.wikipedia.org/wiki/Base58
BASE58 = BaseNAlphabet(known.BASE58)
BASE58_BITCOIN = BASE58
BASE58_FLICKR = BaseNAlphabet(known.BASE58_FLICKR)
BASE58_RIPPLE = BaseNAlphabet(known.BASE58_RIPPLE)

# digits and letters
BASE62 = BaseNAlphabet(known.FULL_ASCII95, 62)

BASE64 = BaseNAlphabet(known.BASE64)
BASE64_SAFE = BaseNAlphabet(known.BASE64_SAFE)

# url safe
BASE73_SAFE = BaseNAlphabet(known.FULL_ASCII95, 73)

BASE85 = BaseNAlphabet(known.FULL_ASCII95, 85)

BASE95 = BaseNAlphabet(known.FULL_ASCII95)

KNOWN: dict[str, BaseNAlphabet] = {
    'base2': BASE2,
    'base10': BASE10,
    'base16': BASE16,
    'base32': BASE32,
    'base-z32': BASE_Z32,
    'base58': BASE58,
    'base58-flickr': BASE58_FLICKR,
    'base58-ripple': BASE58_RIPPLE,
    'base62': BASE62,
    'base64': BASE64,
    'base64-safe': BASE64_SAFE,
    'base73-safe': BASE73_SAFE,
    'base85': BASE85,
    'base95': BASE95,
}
