import logging
from collections import Counter

from .pqueue import PriorityQueue

log = logging.getLogger(__name__)

class Node:
    __slots__ = ("sym", "freq", "left", "right")

    def __init__(self, sym=None, freq=0, left=None, right=None):
        self.sym = sym
        self.freq = freq
        self.left = left
        self.right = right

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self):
        label = repr(self.sym) if self.is_leaf else "Internal"
        return f"{label}({self.freq})"

def frequency_table(symbols) -> dict:
    # keys keep first-occurrence order; build_tree relies on it for tie-breaks
    return dict(Counter(symbols))

def build_tree(freqs):
    # None for an empty table; a single symbol leaves its leaf as the root
    if not freqs:
        return None
    for s, f in freqs.items():
        if f < 1:
            raise ValueError(f"frequency of {s!r} must be >= 1, got {f}")

    pq = PriorityQueue(Node(sym=s, freq=f) for s, f in freqs.items())
    while len(pq) > 1:
        a = pq.extract_min()
        b = pq.extract_min()
        pq.insert(Node(freq=a.freq + b.freq, left=a, right=b))
    root = pq.extract_min()
    log.debug("[build] %d distinct, root weight %d", len(freqs), root.freq)
    return root

def build_codebook(node, prefix="", code=None):
    if code is None:
        code = {}
    if node is None:
        return code
    if node.is_leaf:
        # lone-leaf root would otherwise get the empty code
        code[node.sym] = prefix or "0"
    else:
        build_codebook(node.left, prefix + "0", code)
        build_codebook(node.right, prefix + "1", code)
    return code

def is_prefix_free(codes) -> bool:
    # after sorting, a prefix always sits right before one of its extensions
    ordered = sorted(codes.values())
    return all(not b.startswith(a) for a, b in zip(ordered, ordered[1:]))
