# filename: huffman_core.py

import heapq
import logging
from itertools import count
from numbers import Real

from huffman_alphabet import SymbolWeight
from huffman_config import DEFAULT_CONFIG
from huffman_errors import ConfigurationError, MalformedInputError, UnknownSymbolError

logger = logging.getLogger(__name__)

LEFT = "0"
RIGHT = "1"


class HuffmanNode:
    __slots__ = ("weight", "symbol", "left", "right", "parent", "side")

    def __init__(self, weight, symbol=None, left=None, right=None):
        self.weight = weight
        self.symbol = symbol
        # children and parent are indexes into the owning tree's node list
        self.left = left
        self.right = right
        self.parent = None
        self.side = None

    @property
    def is_leaf(self):
        return self.left is None


class HuffmanTree:
    """
    Huffman code over a fixed alphabet.

    The tree is built once from symbol-weight pairs and never changes
    afterwards, so one instance can serve any number of concurrent
    ``encode``/``decode`` calls.

    Construction pops the two lightest nodes from a heap; the first one
    popped becomes the right child and the second the left child. Ties
    between equal weights are broken by insertion order (see
    ``HuffmanConfig.tie_break``). Leaves are inserted in the order the
    alphabet iterates.
    """

    def __init__(self, nodes, root, leaves, config=DEFAULT_CONFIG):
        self._nodes = nodes
        self._root = root
        self._leaves = leaves
        self._config = config
        self._codes = {symbol: self._code_of_leaf(index) for symbol, index in leaves.items()}
        self._text_symbols = all(isinstance(s, str) and len(s) == 1 for s in leaves)

    @classmethod
    def build(cls, alphabet, config=None):
        config = config or DEFAULT_CONFIG
        nodes = []
        leaves = {}
        for pair in alphabet:
            symbol, weight = _unpack_pair(pair)
            if symbol in leaves:
                raise ConfigurationError(f"symbol {symbol!r} appears more than once")
            leaves[symbol] = len(nodes)
            nodes.append(HuffmanNode(weight, symbol=symbol))

        if not nodes:
            raise ConfigurationError("cannot build a Huffman tree from an empty alphabet")

        order = count() if config.tie_break == "fifo" else count(0, -1)
        heap = [(node.weight, next(order), index) for index, node in enumerate(nodes)]
        heapq.heapify(heap)

        while len(heap) > 1:
            weight_right, _, right = heapq.heappop(heap)
            weight_left, _, left = heapq.heappop(heap)
            parent = len(nodes)
            nodes.append(HuffmanNode(weight_left + weight_right, left=left, right=right))
            nodes[left].parent, nodes[left].side = parent, LEFT
            nodes[right].parent, nodes[right].side = parent, RIGHT
            heapq.heappush(heap, (nodes[parent].weight, next(order), parent))

        root = heap[0][2]
        logger.debug(
            "built Huffman tree: %d symbols, %d nodes, root weight %s",
            len(leaves), len(nodes), nodes[root].weight,
        )
        return cls(nodes, root, leaves, config)

    def _code_of_leaf(self, index):
        if index == self._root:
            # a lone leaf has no edges; give it a one-bit code instead
            return self._config.single_symbol_bit
        bits = []
        node = self._nodes[index]
        while node.parent is not None:
            bits.append(node.side)
            node = self._nodes[node.parent]
        bits.reverse()
        return "".join(bits)

    def encode(self, text):
        """Concatenate the codes of every symbol in ``text``."""
        codes = self._codes
        out = []
        for symbol in text:
            try:
                out.append(codes[symbol])
            except (KeyError, TypeError):
                raise UnknownSymbolError(symbol) from None
        return "".join(out)

    def decode(self, bits):
        """
        Walk the tree from the root for each bit, emitting a symbol on
        every leaf reached.

        Raises MalformedInputError for characters other than '0'/'1' and
        for input that stops in the middle of a code. Nothing decoded so
        far is returned in that case.

        The return type follows the alphabet, not the input that was
        encoded: a str when every symbol is a one-character string, a
        list of symbols otherwise. Encoding list("ABBA") therefore
        decodes back to "ABBA".
        """
        nodes = self._nodes
        root = nodes[self._root]
        out = []
        if root.is_leaf:
            for position, bit in enumerate(bits):
                if bit != self._config.single_symbol_bit:
                    raise MalformedInputError(f"unexpected bit {bit!r}", position)
                out.append(root.symbol)
            return self._join(out)

        node = root
        for position, bit in enumerate(bits):
            if bit == LEFT:
                node = nodes[node.left]
            elif bit == RIGHT:
                node = nodes[node.right]
            else:
                raise MalformedInputError(f"invalid bit {bit!r}", position)
            if node.is_leaf:
                out.append(node.symbol)
                node = root
        if node is not root:
            raise MalformedInputError("input ends in the middle of a code", len(bits))
        return self._join(out)

    def _join(self, symbols):
        if self._text_symbols:
            return "".join(symbols)
        return symbols

    def code_for(self, symbol):
        try:
            return self._codes[symbol]
        except (KeyError, TypeError):
            raise UnknownSymbolError(symbol) from None

    def code_table(self):
        return dict(self._codes)

    def weighted_path_length(self):
        """Sum of weight times code length over all symbols."""
        return sum(
            self._nodes[index].weight * len(self._codes[symbol])
            for symbol, index in self._leaves.items()
        )

    @property
    def weight(self):
        return self._nodes[self._root].weight

    @property
    def symbols(self):
        return frozenset(self._leaves)

    @property
    def config(self):
        return self._config

    def __len__(self):
        return len(self._leaves)

    def __contains__(self, symbol):
        try:
            return symbol in self._leaves
        except TypeError:
            return False

    def __repr__(self):
        return f"<HuffmanTree symbols={len(self._leaves)} weight={self.weight}>"


def _unpack_pair(pair):
    if isinstance(pair, SymbolWeight):
        symbol, weight = pair.symbol, pair.weight
    else:
        try:
            symbol, weight = pair
        except (TypeError, ValueError):
            raise ConfigurationError(f"expected a (symbol, weight) pair, got {pair!r}") from None
    try:
        hash(symbol)
    except TypeError:
        raise ConfigurationError(f"symbol {symbol!r} is not hashable") from None
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise ConfigurationError(f"weight of {symbol!r} is not a number: {weight!r}")
    if not weight >= 0:
        raise ConfigurationError(f"weight of {symbol!r} must be non-negative, got {weight}")
    return symbol, weight


def build(alphabet, config=None):
    return HuffmanTree.build(alphabet, config)


def encode(tree, text):
    return tree.encode(text)


def decode(tree, bits):
    return tree.decode(bits)
