import pytest

from huffcodec import MalformedBitstreamError, UnknownSymbolError, build_tree, frequency_table, is_prefix_free
from huffcodec.huff_canonical import (
    as_bitstrings,
    canonical_codes_from_lengths,
    code_lengths,
    decode_canonical,
    encode_canonical,
)


def test_code_lengths_follow_tree_depth():
    freqs = frequency_table("AAAAABBBCCD")
    assert code_lengths(build_tree(freqs), order=freqs) == {"A": 1, "B": 2, "C": 3, "D": 3}


def test_code_lengths_single_and_empty():
    assert code_lengths(build_tree({"A": 9})) == {"A": 1}
    assert code_lengths(None) == {}


def test_canonical_codes_are_consecutive_per_length():
    codes = canonical_codes_from_lengths({"x": 2, "y": 1, "z": 3, "w": 3})
    assert codes == {"y": (0, 1), "x": (2, 2), "z": (6, 3), "w": (7, 3)}
    assert as_bitstrings(codes) == {"y": "0", "x": "10", "z": "110", "w": "111"}


def test_canonical_codes_prefix_free():
    text = "this is an example of huffman encoding"
    freqs = frequency_table(text)
    lengths = code_lengths(build_tree(freqs), order=freqs)
    assert is_prefix_free(as_bitstrings(canonical_codes_from_lengths(lengths)))


def test_canonical_round_trip():
    text = "this is an example of huffman encoding"
    freqs = frequency_table(text)
    lengths = code_lengths(build_tree(freqs), order=freqs)
    payload = encode_canonical(text, canonical_codes_from_lengths(lengths))
    assert "".join(decode_canonical(payload, lengths, len(text))) == text


def test_canonical_unknown_symbol():
    codes = canonical_codes_from_lengths({"a": 1})
    with pytest.raises(UnknownSymbolError):
        encode_canonical("ab", codes)


def test_canonical_truncated_payload():
    lengths = {"a": 1, "b": 2, "c": 2}
    payload = encode_canonical("bcbc", canonical_codes_from_lengths(lengths))
    with pytest.raises(MalformedBitstreamError):
        decode_canonical(payload, lengths, 10)


def test_canonical_invalid_code():
    # lengths {a: 2} leave code '1x' unassigned
    with pytest.raises(MalformedBitstreamError):
        decode_canonical(b"\x80", {"a": 2}, 1)


def test_canonical_unhashable_symbol():
    codes = canonical_codes_from_lengths({"a": 1, "b": 1})
    with pytest.raises(UnknownSymbolError):
        encode_canonical(["a", {"b"}], codes)
