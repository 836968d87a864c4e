"""
dsu.py — Disjoint Set Union (Union-Find)
=========================================
Cycle detection for Kruskal's algorithm.

Path compression in `find` + union by rank in `union`.  The set of
node ids is fixed at construction: asking about any other id is a
programming error and raises UnknownNodeError instead of silently
creating a new singleton.

`snapshot()` returns a DSUState value copy so steps can embed it
without ever seeing later unions.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable


class UnknownNodeError(LookupError):
    """Raised when a node id that was never registered reaches find / union."""

    def __init__(self, node_id):
        super().__init__(f"Node {node_id!r} is not part of this disjoint-set forest")
        self.node_id = node_id


@dataclass(frozen=True)
class DSUState:
    """Point-in-time copy of the forest: node id → parent, node id → rank."""

    parent: Dict[int, int] = field(default_factory=dict)
    rank:   Dict[int, int] = field(default_factory=dict)

    def root_of(self, node_id: int) -> int:
        """Follow parent pointers without compressing (the state is read-only)."""
        while self.parent[node_id] != node_id:
            node_id = self.parent[node_id]
        return node_id

    def to_dict(self) -> dict:
        # JSON object keys must be strings
        return {
            "parent": {str(k): v for k, v in self.parent.items()},
            "rank":   {str(k): v for k, v in self.rank.items()},
        }


class DisjointSet:
    """
    Attributes:
        parent : {node_id: parent_id}; a node is a root iff parent[id] == id.
        rank   : {node_id: upper bound on the tree height below it}.
    """

    def __init__(self, node_ids: Iterable[int]):
        self.parent: Dict[int, int] = {}
        self.rank:   Dict[int, int] = {}
        for nid in node_ids:
            self.parent[nid] = nid
            self.rank[nid] = 0

    def find(self, node_id: int) -> int:
        """Root of node_id's set.  Every node on the walked path is re-pointed at the root."""
        if node_id not in self.parent:
            raise UnknownNodeError(node_id)

        root = node_id
        while self.parent[root] != root:
            root = self.parent[root]

        # path compression
        cur = node_id
        while self.parent[cur] != root:
            self.parent[cur], cur = root, self.parent[cur]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of x and y.  Returns False if they already share a root."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False

        # union by rank: attach the shorter tree under the taller one
        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    def set_count(self) -> int:
        return sum(1 for nid, p in self.parent.items() if nid == p)

    def snapshot(self) -> DSUState:
        return DSUState(parent=dict(self.parent), rank=dict(self.rank))

    def __contains__(self, node_id) -> bool:
        return node_id in self.parent

    def __len__(self) -> int:
        return len(self.parent)

    def __repr__(self) -> str:
        return f"DisjointSet(nodes={len(self)}, sets={self.set_count()})"
