# filename: huffman_config.py

from dataclasses import dataclass

from huffman_errors import ConfigurationError

TIE_BREAK_POLICIES = ("fifo", "lifo")


@dataclass(frozen=True)
class HuffmanConfig:
    """
    Options for building a tree.

    tie_break: which of several equal-weight nodes leaves the heap first.
        "fifo" takes the one inserted earliest, "lifo" the latest.
    single_symbol_bit: the code given to the only symbol of a
        one-symbol alphabet.
    """
    tie_break: str = "fifo"
    single_symbol_bit: str = "0"

    def __post_init__(self):
        if self.tie_break not in TIE_BREAK_POLICIES:
            raise ConfigurationError(
                f"unknown tie_break policy {self.tie_break!r}, "
                f"expected one of {TIE_BREAK_POLICIES}"
            )
        if self.single_symbol_bit not in ("0", "1"):
            raise ConfigurationError(
                f"single_symbol_bit must be '0' or '1', got {self.single_symbol_bit!r}"
            )


DEFAULT_CONFIG = HuffmanConfig()
