import heapq
import itertools

from .errors import EmptyQueueError

class PriorityQueue:
    # min-heap on node.freq; equal weights leave in insertion order
    def __init__(self, nodes=()):
        self._heap = []
        self._seq = itertools.count()
        for node in nodes:
            self.insert(node)

    def insert(self, node):
        heapq.heappush(self._heap, (node.freq, next(self._seq), node))

    def extract_min(self):
        if not self._heap:
            raise EmptyQueueError("extract_min on empty queue")
        return heapq.heappop(self._heap)[2]

    def peek(self):
        if not self._heap:
            raise EmptyQueueError("peek on empty queue")
        return self._heap[0][2]

    def __len__(self):
        return len(self._heap)

    def __repr__(self):
        items = ", ".join(repr(node) for _, _, node in sorted(self._heap, key=lambda e: e[:2]))
        return f"PriorityQueue([{items}])"
