import numbers
import struct

from .errors import MalformedBitstreamError

# Message header (little-endian):
# count(u32) nsyms(u16)
HDR_FMT = "<IH"
HDR_SIZE = struct.calcsize(HDR_FMT)

# Frequency table entry:
# symbol(u8|u16|u32 by sym_width) freq(u32)
SYM_FMTS = {1: "B", 2: "H", 4: "I"}
FREQ_FMT = "I"

MAX_COUNT = 0xFFFFFFFF
MAX_NSYMS = 0xFFFF

def entry_fmt(sym_width: int) -> str:
    if sym_width not in SYM_FMTS:
        raise ValueError(f"Unsupported symbol width: {sym_width} (use 1, 2 or 4)")
    return "<" + SYM_FMTS[sym_width] + FREQ_FMT

def write_header(f, *, count: int, nsyms: int):
    if not (0 <= count <= MAX_COUNT):
        raise ValueError("symbol count out of u32 range")
    if not (0 <= nsyms <= MAX_NSYMS):
        raise ValueError(f"too many distinct symbols: {nsyms} (max {MAX_NSYMS})")
    f.write(struct.pack(HDR_FMT, count, nsyms))

def read_header(f):
    data = f.read(HDR_SIZE)
    if len(data) != HDR_SIZE:
        raise MalformedBitstreamError("Malformed stream: header too short")
    count, nsyms = struct.unpack(HDR_FMT, data)
    return dict(count=count, nsyms=nsyms)

def write_table(f, freqs, *, sym_width: int = 1):
    fmt = entry_fmt(sym_width)
    top = (1 << (8 * sym_width)) - 1
    for sym, freq in freqs.items():
        if not isinstance(sym, numbers.Integral) or not (0 <= sym <= top):
            raise ValueError(f"symbol {sym!r} does not fit {sym_width} byte(s)")
        if not (1 <= freq <= MAX_COUNT):
            raise ValueError(f"frequency of {sym!r} out of u32 range")
        f.write(struct.pack(fmt, int(sym), freq))

def read_table(f, nsyms: int, *, sym_width: int = 1):
    fmt = entry_fmt(sym_width)
    size = struct.calcsize(fmt)
    freqs = {}
    for _ in range(nsyms):
        data = f.read(size)
        if len(data) != size:
            raise MalformedBitstreamError("Malformed stream: table truncated")
        sym, freq = struct.unpack(fmt, data)
        if sym in freqs:
            raise MalformedBitstreamError(f"Malformed stream: duplicate symbol {sym}")
        if freq == 0:
            raise MalformedBitstreamError(f"Malformed stream: zero frequency for symbol {sym}")
        freqs[sym] = freq
    return freqs
