import numpy as np

from .errors import MalformedBitstreamError

def as_bits(bits) -> np.ndarray:
    """
    Normalise a bit sequence (0/1 ints, numpy array, or a '0'/'1' string)
    into a flat uint8 array.
    """
    if isinstance(bits, str):
        try:
            arr = np.frombuffer(bits.encode("ascii"), dtype=np.uint8).astype(np.int16) - ord("0")
        except UnicodeEncodeError:
            raise MalformedBitstreamError("Malformed stream: bits must be '0' or '1'") from None
    else:
        arr = np.asarray(bits).ravel()
    if arr.size == 0:
        return np.zeros(0, dtype=np.uint8)
    if arr.dtype.kind not in "biu" or not np.isin(arr, (0, 1)).all():
        raise MalformedBitstreamError("Malformed stream: bits must be 0 or 1")
    return arr.astype(np.uint8)

def pack_bits(bits) -> bytes:
    """Pack 0/1 values into bytes, MSB-first, last byte zero-padded."""
    return np.packbits(as_bits(bits)).tobytes()

def unpack_bits(data: bytes, nbits: int) -> np.ndarray:
    if nbits > 8 * len(data):
        raise MalformedBitstreamError(
            f"Malformed stream: payload has {8 * len(data)} bits, need {nbits}")
    return np.unpackbits(np.frombuffer(data, dtype=np.uint8), count=nbits)

class BitWriter:
    def __init__(self):
        self._buf = bytearray()
        self._cur = 0
        self._nbits = 0  # bits currently in _cur (0..7)

    def write_code(self, code: int, length: int):
        """Write 'length' bits of code (MSB-first)."""
        for i in range(length - 1, -1, -1):
            self._cur = (self._cur << 1) | ((code >> i) & 1)
            self._nbits += 1
            if self._nbits == 8:
                self._buf.append(self._cur)
                self._cur = 0
                self._nbits = 0

    def finish(self) -> bytes:
        """Pad remaining bits with zeros."""
        if self._nbits > 0:
            self._buf.append(self._cur << (8 - self._nbits))
            self._cur = 0
            self._nbits = 0
        return bytes(self._buf)

class BitReader:
    def __init__(self, data: bytes):
        self.data = data
        self.i = 0
        self.bit = 0  # bit index in current byte (0..7), MSB-first

    def read_bit(self) -> int:
        if self.i >= len(self.data):
            raise MalformedBitstreamError("Malformed stream: unexpected end of bits")
        b = (self.data[self.i] >> (7 - self.bit)) & 1
        self.bit += 1
        if self.bit == 8:
            self.bit = 0
            self.i += 1
        return b
