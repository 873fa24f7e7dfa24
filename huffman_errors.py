# filename: huffman_errors.py


class HuffmanError(Exception):
    """Base class for every error raised by the Huffman coder."""


class ConfigurationError(HuffmanError, ValueError):
    """Raised when a tree cannot be built from the given alphabet or options."""


class UnknownSymbolError(HuffmanError, KeyError):
    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(symbol)

    def __str__(self):
        return f"symbol {self.symbol!r} does not belong to the alphabet"


class MalformedInputError(HuffmanError, ValueError):
    def __init__(self, message, position):
        self.position = position
        super().__init__(f"{message} (at bit {position})")
