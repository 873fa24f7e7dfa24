import random
import string
import time

import pytest

import huffman_service as hs
from huffman_config import HuffmanConfig
from huffman_core import HuffmanTree
from huffman_errors import MalformedInputError, UnknownSymbolError


def _get_service(**kwargs):
	config = HuffmanConfig(**kwargs) if kwargs else None
	return hs.HuffmanService(config)


def _random_text(n, alphabet=string.printable):
	return "".join(random.choice(alphabet) for _ in range(n))


def test_roundtrip_random_10kb():
	svc = _get_service()

	data = _random_text(10 * 1024)
	encoded = svc.encode_text(data)
	assert svc.decode_text(encoded) == data


def test_roundtrip_all_latin1_once():
	svc = _get_service()

	data = "".join(chr(i) for i in range(256))
	encoded = svc.encode_text(data)
	assert svc.decode_text(encoded) == data
	assert len(encoded.tree) == 256
	# 256 equal weights give a complete tree of depth 8
	assert len(encoded) == 256 * 8


def test_roundtrip_code_points_beyond_bmp():
	svc = _get_service()

	data = "héllo wörld 🎉🎉 € ✓"
	encoded = svc.encode_text(data)
	assert svc.decode_text(encoded) == data


def test_empty_input():
	svc = _get_service()

	encoded = svc.encode_text("")
	assert encoded.tree is None
	assert encoded.bits == ""
	assert svc.decode_text(encoded) == ""


def test_bits_without_tree_are_rejected():
	svc = _get_service()
	with pytest.raises(MalformedInputError):
		svc.decode_text(hs.EncodedText(None, "0101"))


def test_single_symbol_repeated():
	svc = _get_service()

	data = "A" * (1024 * 10)
	encoded = svc.encode_text(data)
	assert encoded.bits == "0" * len(data)
	assert svc.decode_text(encoded) == data


def test_single_symbol_with_configured_bit():
	svc = _get_service(single_symbol_bit="1")

	encoded = svc.encode_text("zzz")
	assert encoded.bits == "111"
	assert svc.decode_text(encoded) == "zzz"


def test_generator_input():
	svc = _get_service()

	encoded = svc.encode_text(c for c in "abcab")
	assert encoded.bits == encoded.tree.encode("abcab")
	assert svc.decode_text(encoded) == "abcab"
	assert svc.encode_text(c for c in "").tree is None


def test_small_inputs():
	svc = _get_service()

	for n in (1, 2, 3):
		data = _random_text(n)
		encoded = svc.encode_text(data)
		assert svc.decode_text(encoded) == data


def test_build_tree_uses_service_config():
	svc = _get_service(tie_break="lifo")
	tree = svc.build_tree("xy")
	assert isinstance(tree, HuffmanTree)
	assert tree.config.tie_break == "lifo"


def test_tree_rejects_symbols_outside_text():
	svc = _get_service()
	encoded = svc.encode_text("abc")
	with pytest.raises(UnknownSymbolError):
		encoded.tree.encode("abcd")


def test_truncated_bits_behavior():
	svc = _get_service()

	data = "This is a test" * 100
	encoded = svc.encode_text(data)
	assert len(encoded.tree.code_for(data[-1])) > 1
	truncated = hs.EncodedText(encoded.tree, encoded.bits[:-1])
	with pytest.raises(MalformedInputError):
		svc.decode_text(truncated)


def test_corrupted_bits_behavior():
	svc = _get_service()

	data = "Hello World" * 50
	encoded = svc.encode_text(data)
	corrupted = hs.EncodedText(encoded.tree, encoded.bits[:10] + "2" + encoded.bits[11:])
	with pytest.raises(MalformedInputError) as excinfo:
		svc.decode_text(corrupted)
	assert excinfo.value.position == 10


def test_encode_is_deterministic():
	svc = _get_service()
	a = svc.encode_text("mississippi")
	b = svc.encode_text("mississippi")
	assert a.bits == b.bits
	assert a.tree.code_table() == b.tree.code_table()


def test_compression_beats_fixed_width():
	svc = _get_service()

	data = "a" * 900 + "b" * 60 + "c" * 30 + "d" * 10
	encoded = svc.encode_text(data)
	assert len(encoded) < 2 * len(data)


@pytest.mark.timeout(120)
def test_performance_1mb_baseline():
	svc = _get_service()
	data = _random_text(1024 * 1024, string.ascii_letters)
	t0 = time.time()
	encoded = svc.encode_text(data)
	out = svc.decode_text(encoded)
	dur = time.time() - t0
	assert out == data
	assert dur > 0
	print(f"Round trip time for 1MB: {dur:.4f}s")
