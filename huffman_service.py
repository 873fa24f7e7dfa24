# filename: huffman_service.py

import logging
from dataclasses import dataclass
from typing import Optional

from huffman_alphabet import build_alphabet
from huffman_config import DEFAULT_CONFIG, HuffmanConfig
from huffman_core import HuffmanTree
from huffman_errors import MalformedInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncodedText:
    tree: Optional[HuffmanTree]
    bits: str

    def __len__(self):
        return len(self.bits)


class HuffmanService:
    def __init__(self, config: Optional[HuffmanConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def build_tree(self, text) -> HuffmanTree:
        return HuffmanTree.build(build_alphabet(text), self.config)

    def encode_text(self, text) -> EncodedText:
        # the text is read twice, once for the alphabet and once to encode
        if not isinstance(text, str):
            text = list(text)
        # an empty text has no alphabet to build a tree from
        if not text:
            return EncodedText(None, "")
        tree = self.build_tree(text)
        bits = tree.encode(text)
        logger.debug("encoded %d symbols into %d bits", len(text), len(bits))
        return EncodedText(tree, bits)

    def decode_text(self, encoded: EncodedText):
        if encoded.tree is None:
            if encoded.bits:
                raise MalformedInputError("bits present without a code tree", 0)
            return ""
        return encoded.tree.decode(encoded.bits)
