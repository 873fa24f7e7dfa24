# filename: huffman_alphabet.py

from collections import Counter
from dataclasses import dataclass
from numbers import Real
from typing import Any, Hashable, Iterable, Mapping, Set

from huffman_errors import ConfigurationError


@dataclass(frozen=True)
class SymbolWeight:
    symbol: Hashable
    weight: float

    def __iter__(self):
        # unpacks like a (symbol, weight) tuple
        yield self.symbol
        yield self.weight

    def __str__(self):
        return f"{self.symbol} {self.weight}"


def build_alphabet(text: Iterable[Hashable]) -> Set[SymbolWeight]:
    """
    Count each distinct symbol of ``text``.

    Strings are counted per code point. The result holds one pair per
    distinct symbol, weighted by its occurrence count; an empty input
    gives an empty set.
    """
    counts = Counter(text)
    return {SymbolWeight(symbol, float(count)) for symbol, count in counts.items()}


def alphabet_from_frequencies(freqs: Mapping[Hashable, Any]) -> Set[SymbolWeight]:
    """Turn an existing ``{symbol: weight}`` table into symbol-weight pairs."""
    alphabet = set()
    for symbol, weight in freqs.items():
        if isinstance(weight, bool) or not isinstance(weight, Real):
            raise ConfigurationError(f"weight of {symbol!r} is not a number: {weight!r}")
        if not weight >= 0:
            raise ConfigurationError(f"weight of {symbol!r} must be non-negative, got {weight}")
        alphabet.add(SymbolWeight(symbol, float(weight)))
    return alphabet
