import pytest

from huffcodec import build_coder
from huffcodec.metrics import average_code_length, compression_stats, entropy


def test_entropy_uniform():
    assert entropy({"a": 1, "b": 1, "c": 1, "d": 1}) == pytest.approx(2.0)
    assert entropy({"a": 10}) == pytest.approx(0.0)
    assert entropy({}) == 0.0


def test_average_code_length_within_one_bit_of_entropy():
    for text in ("AAAAABBBCCD", "this is an example of huffman encoding", "ab" * 20 + "c"):
        coder = build_coder(text)
        h = entropy(coder.freqs)
        avg = average_code_length(coder.freqs, coder.codes)
        assert h <= avg + 1e-12
        assert avg < h + 1


def test_average_code_length_matches_encoded_size():
    text = "AAAAABBBCCD"
    coder = build_coder(text)
    assert average_code_length(coder.freqs, coder.codes) == pytest.approx(20 / 11)
    assert average_code_length({}, {}) == 0.0


def test_compression_stats_empty():
    stats = compression_stats(0, 0)
    assert stats == dict(original_bits=0, compressed_bits=0, saved_bits=0, ratio=0.0, bits_per_symbol=0.0)


def test_compression_stats_symbol_width():
    stats = compression_stats(4, 4, symbol_bits=16)
    assert stats["original_bits"] == 64
    assert stats["ratio"] == pytest.approx(93.75)
