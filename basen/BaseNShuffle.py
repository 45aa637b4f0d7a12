import random
from basen.BaseNAlphabet import BaseNAlphabet, BaseNAlphabetInterface
from basen.BaseNConverter import BaseNConverter
from basen.BaseNTrace import BaseNTrace
from basen.error import BaseNInvalidInput
"""
Shuffled alphabets look different but encode the same way. They are an
obfuscation aid and must not be used as a cipher.

Usage:
    alphabet = shuffled_alphabet(BASE62)
    seeded = shuffled_alphabet(BASE62, rng=random.Random(42))
"""


def shuffle_digits(digits: str, rng: random.Random | None = None) -> str:
    """
    Fisher-Yates shuffle
    https://en.wikipedia.org/wiki/Fisher%E2%80%93Yates_shuffle
    """
    if digits is None:
        raise BaseNInvalidInput('shuffle digits cannot be None')
    if not rng:
        rng = random.Random()

    tab = list(digits)
    for i in range(len(tab) - 1, 0, -1):
        j = rng.randint(0, i)
        tab[i], tab[j] = tab[j], tab[i]

    return ''.join(tab)


def shuffled_alphabet(source: str | BaseNAlphabetInterface,
                      rng: random.Random | None = None,
                      converter: BaseNConverter | None = None,
                      trace: BaseNTrace | None = None) -> BaseNAlphabet:
    """
    source: symbol string or an alphabet to take the symbols from
    rng: random source, seed it for a repeatable permutation
    """
    if source is None:
        raise BaseNInvalidInput('shuffle source cannot be None')

    digits = source if isinstance(source, str) else source.digits
    return BaseNAlphabet(shuffle_digits(digits, rng),
                         converter=converter,
                         trace=trace)
