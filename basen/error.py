class BaseNError(Exception):
    pass


class BaseNInvalidInput(BaseNError):
    pass


class BaseNOutOfRange(BaseNError):
    pass


class BaseNMalformedAlphabet(BaseNError):
    pass


class BaseNUnknownSymbol(BaseNError):
    pass
