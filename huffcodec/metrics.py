import numpy as np

def entropy(freqs) -> float:
    # bits per symbol
    if not freqs:
        return 0.0
    counts = np.fromiter(freqs.values(), dtype=np.float64)
    p = counts / counts.sum()
    return float(-(p * np.log2(p)).sum())

def average_code_length(freqs, codes) -> float:
    if not freqs:
        return 0.0
    counts = np.array([freqs[s] for s in freqs], dtype=np.float64)
    lengths = np.array([len(codes[s]) for s in freqs], dtype=np.float64)
    return float((counts * lengths).sum() / counts.sum())

def compression_stats(n_symbols: int, n_bits: int, *, symbol_bits: int = 8):
    original_bits = n_symbols * symbol_bits
    ratio = (1.0 - n_bits / original_bits) * 100.0 if original_bits else 0.0
    return dict(
        original_bits=original_bits,
        compressed_bits=n_bits,
        saved_bits=original_bits - n_bits,
        ratio=ratio,
        bits_per_symbol=n_bits / n_symbols if n_symbols else 0.0,
    )
