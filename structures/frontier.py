"""
frontier.py — Prim's Edge Frontier
===================================
Min-priority structure over candidate edges that cross from the visited
set to the unvisited set.

Invariant: at most ONE queued edge per target node.  `insert_or_improve`
replaces the queued edge for a target only when the new weight is
strictly lower; an equal-weight alternative never displaces the edge that
got there first.

Implementation: a heapq of [weight, seq, edge, alive] entries with lazy
deletion.  `seq` is a monotonically increasing insertion counter, so
equal weights come out in insertion order and every run is reproducible.
A replacement is a fresh insertion (new seq); the displaced entry is
marked dead and skipped when it surfaces.
"""

import heapq
import itertools
from typing import Dict, List, Optional

from graph import Edge

_WEIGHT, _SEQ, _EDGE, _ALIVE = 0, 1, 2, 3


class EdgeFrontier:

    def __init__(self):
        self._heap: List[list] = []
        self._by_target: Dict[int, list] = {}
        self._counter = itertools.count()

    def insert_or_improve(self, edge: Edge, weight: Optional[int] = None) -> bool:
        """
        Queue `edge` keyed on `edge.target`.  Returns True if the frontier
        changed (new target, or a strictly cheaper edge replaced the old one).
        """
        if weight is None:
            weight = edge.weight
        existing = self._by_target.get(edge.target)
        if existing is not None:
            if weight >= existing[_WEIGHT]:
                return False
            existing[_ALIVE] = False

        entry = [weight, next(self._counter), edge, True]
        self._by_target[edge.target] = entry
        heapq.heappush(self._heap, entry)
        return True

    def extract_min(self) -> Optional[Edge]:
        """Remove and return the cheapest queued edge, or None when empty."""
        while self._heap:
            entry = heapq.heappop(self._heap)
            if entry[_ALIVE]:
                del self._by_target[entry[_EDGE].target]
                return entry[_EDGE]
        return None

    def is_empty(self) -> bool:
        return not self._by_target

    def peek_all(self) -> List[Edge]:
        """Queued edges in extraction order.  Read-only."""
        live = sorted(self._by_target.values(), key=lambda e: (e[_WEIGHT], e[_SEQ]))
        return [e[_EDGE] for e in live]

    def queued_for(self, target: int) -> Optional[Edge]:
        entry = self._by_target.get(target)
        return entry[_EDGE] if entry else None

    def __len__(self) -> int:
        return len(self._by_target)

    def __repr__(self) -> str:
        return "EdgeFrontier([" + ", ".join(e.label() for e in self.peek_all()) + "])"
