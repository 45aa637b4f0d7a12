from basen.error import (BaseNError, BaseNInvalidInput, BaseNOutOfRange,
                         BaseNMalformedAlphabet, BaseNUnknownSymbol)
from basen.BaseNConverter import BaseNConverter, to_base_n, from_base_n
from basen.BaseNAlphabet import BaseNAlphabet, BaseNAlphabetInterface
from basen.BaseNShuffle import shuffle_digits, shuffled_alphabet
from basen.BaseNEncoding import BaseNEncoding
from basen.BaseNTrace import BaseNTrace
