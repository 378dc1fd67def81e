import io
import logging
from types import MappingProxyType

import numpy as np

from .bitpack import as_bits, pack_bits, unpack_bits
from .bitstream import read_header, read_table, write_header, write_table
from .errors import InvalidTreeError, MalformedBitstreamError, UnknownSymbolError
from .huff_canonical import as_bitstrings, canonical_codes_from_lengths, code_lengths
from .huffman import build_codebook, build_tree, frequency_table
from .metrics import compression_stats

log = logging.getLogger(__name__)

def _kind_of(symbols):
    if isinstance(symbols, str):
        return str
    if isinstance(symbols, (bytes, bytearray)):
        return bytes
    return list

class Coder:
    # tables are fixed at construction; nothing is shared between coders
    def __init__(self, freqs, *, kind=list):
        self.freqs = MappingProxyType(dict(freqs))
        self.root = build_tree(self.freqs)
        self.codes = MappingProxyType(build_codebook(self.root))
        self.kind = kind

    def _assemble(self, out):
        if self.kind is str:
            return "".join(out)
        if self.kind is bytes:
            return bytes(out)
        return out

    def encode(self, symbols) -> np.ndarray:
        codes = self.codes
        parts = []
        for sym in symbols:
            try:
                parts.append(codes[sym])
            except (KeyError, TypeError):
                raise UnknownSymbolError(sym) from None
        if not parts:
            return np.zeros(0, dtype=np.uint8)
        bits = np.frombuffer("".join(parts).encode("ascii"), dtype=np.uint8) - ord("0")
        log.debug("[encode] %d symbols -> %d bits", len(parts), bits.size)
        return bits

    def decode(self, bits, count=None):
        """
        Walk the tree bit by bit, emitting a symbol at each leaf.
        Stops once `count` symbols are out (trailing bits are padding);
        with count=None all bits must be consumed.
        """
        bits = as_bits(bits)
        if count is not None and count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        root = self.root
        if root is None:
            if bits.size or count:
                raise InvalidTreeError("Cannot decode: coder has no tree (built from empty input)")
            return self._assemble([])
        if count == 0:
            return self._assemble([])

        out = []
        node = root
        for i, b in enumerate(bits.tolist()):
            if root.is_leaf:
                if b:
                    raise MalformedBitstreamError(f"Malformed stream: bit {i} is not a valid code")
            else:
                node = node.right if b else node.left
            if node.is_leaf:
                out.append(node.sym)
                node = root
                if count is not None and len(out) == count:
                    break
        else:
            if node is not root:
                raise MalformedBitstreamError("Malformed stream: bits end in the middle of a code")
            if count is not None and len(out) < count:
                raise MalformedBitstreamError(
                    f"Malformed stream: expected {count} symbols, bits hold {len(out)}")
        log.debug("[decode] %d bits -> %d symbols", bits.size, len(out))
        return self._assemble(out)

    def verify(self, symbols) -> bool:
        symbols = self._assemble(list(symbols))
        return self.decode(self.encode(symbols), len(symbols)) == symbols

    def encoded_size(self) -> int:
        # bits needed to encode the input this coder was built from
        return sum(self.freqs[s] * len(code) for s, code in self.codes.items())

    def stats(self, symbols, *, symbol_bits: int = 8):
        symbols = list(symbols)
        return compression_stats(len(symbols), self.encode(symbols).size, symbol_bits=symbol_bits)

    def canonical_codes(self):
        lengths = code_lengths(self.root, order=self.freqs)
        return as_bitstrings(canonical_codes_from_lengths(lengths))

def build_coder(symbols) -> Coder:
    freqs = frequency_table(symbols)
    log.debug("[build] %d symbols, %d distinct", sum(freqs.values()), len(freqs))
    return Coder(freqs, kind=_kind_of(symbols))

def write_message(f, symbols, *, sym_width: int = 1, coder=None) -> int:
    # returns the number of bytes written
    if not isinstance(symbols, (str, bytes, bytearray, list, tuple, np.ndarray)):
        symbols = list(symbols)
    if coder is None:
        coder = build_coder(symbols)
    elif dict(coder.freqs) != frequency_table(symbols):
        raise ValueError("coder was not built from these symbols")
    bits = coder.encode(symbols)
    payload = pack_bits(bits)

    buf = io.BytesIO()
    write_header(buf, count=len(symbols), nsyms=len(coder.freqs))
    write_table(buf, coder.freqs, sym_width=sym_width)
    buf.write(payload)
    data = buf.getvalue()
    f.write(data)
    log.debug("[write] %d symbols, %d bits, %d bytes", len(symbols), bits.size, len(data))
    return len(data)

def read_message(f, *, sym_width: int = 1):
    h = read_header(f)
    freqs = read_table(f, h["nsyms"], sym_width=sym_width)
    if sum(freqs.values()) != h["count"]:
        raise MalformedBitstreamError("Malformed stream: frequency table does not match symbol count")

    coder = Coder(freqs, kind=bytes if sym_width == 1 else list)
    nbits = coder.encoded_size()
    payload = f.read((nbits + 7) // 8)
    bits = unpack_bits(payload, nbits)
    log.debug("[read] %d symbols, %d bits", h["count"], nbits)
    return coder.decode(bits, h["count"])

def compress(data, *, sym_width: int = 1) -> bytes:
    buf = io.BytesIO()
    write_message(buf, data, sym_width=sym_width)
    return buf.getvalue()

def decompress(blob: bytes, *, sym_width: int = 1):
    return read_message(io.BytesIO(blob), sym_width=sym_width)
