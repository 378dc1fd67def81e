from typing import Dict, Tuple

from .bitpack import BitReader, BitWriter
from .errors import MalformedBitstreamError, UnknownSymbolError

def _collect_lengths(node, depth: int, out: Dict):
    if node.is_leaf:
        out[node.sym] = max(1, depth)  # avoid 0-length
        return
    _collect_lengths(node.left, depth + 1, out)
    _collect_lengths(node.right, depth + 1, out)

def code_lengths(root, order=None) -> Dict:
    """
    sym -> code length for every leaf of the tree.
    If order is given (e.g. the frequency table), keys follow it.
    """
    lengths: Dict = {}
    if root is not None:
        _collect_lengths(root, 0, lengths)
    if order is not None:
        lengths = {s: lengths[s] for s in order}
    return lengths

def canonical_codes_from_lengths(lengths: Dict) -> Dict[object, Tuple[int, int]]:
    """
    Return mapping: sym -> (code_int, code_len), canonical Huffman.
    Canonical ordering: sort by (code_len, position in lengths), since
    symbols themselves need not be orderable.
    """
    items = sorted(enumerate(lengths.items()), key=lambda kv: (kv[1][1], kv[0]))
    code = 0
    prev_len = 0
    out: Dict[object, Tuple[int, int]] = {}
    for _, (sym, L) in items:
        code <<= (L - prev_len)
        out[sym] = (code, L)
        code += 1
        prev_len = L
    return out

def as_bitstrings(codes: Dict[object, Tuple[int, int]]) -> Dict[object, str]:
    return {sym: f"{code:0{L}b}" for sym, (code, L) in codes.items()}

def build_decode_trie(codes: Dict[object, Tuple[int, int]]):
    """
    Build a binary trie for decoding bits -> symbol.
    Leaves are stored under the "sym" key as a 1-tuple so None is a valid symbol.
    """
    root = {}
    for sym, (code, L) in codes.items():
        cur = root
        for i in range(L - 1, -1, -1):
            bit = (code >> i) & 1
            cur = cur.setdefault(bit, {})
        cur["sym"] = (sym,)
    return root

def decode_one_symbol(trie, bitreader):
    cur = trie
    while "sym" not in cur:
        b = bitreader.read_bit()
        if b not in cur:
            raise MalformedBitstreamError("Malformed stream: invalid Huffman code")
        cur = cur[b]
    return cur["sym"][0]

def encode_canonical(symbols, codes: Dict[object, Tuple[int, int]]) -> bytes:
    bw = BitWriter()
    for sym in symbols:
        try:
            code, L = codes[sym]
        except (KeyError, TypeError):
            raise UnknownSymbolError(sym) from None
        bw.write_code(code, L)
    return bw.finish()

def decode_canonical(payload: bytes, lengths: Dict, count: int) -> list:
    codes = canonical_codes_from_lengths(lengths)
    trie = build_decode_trie(codes)
    br = BitReader(payload)
    return [decode_one_symbol(trie, br) for _ in range(count)]
