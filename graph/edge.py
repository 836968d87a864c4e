"""
edge.py — Graph Edge
====================
Connects two nodes with a positive integer weight.

Design decisions:
  - `source` and `target` are node ids, NOT Node references.
    This keeps edges serialisable and avoids circular references.
  - Edges are undirected.  `source` / `target` order is an artifact of
    how the edge was drawn; `connects()` and `other_end()` ignore it.
    Prim's re-orients edges with `oriented_from()` so that the frontier
    always stores visited → unvisited, but the edge id stays the same.
"""

from typing import Optional


class Edge:
    """
    Attributes:
        id     : Unique (within a graph) string identifier.
        source : One endpoint's node id.
        target : The other endpoint's node id.
        weight : Positive integer cost.
    """

    __slots__ = ("id", "source", "target", "weight")

    def __init__(
        self,
        source: int,
        target: int,
        weight: int = 1,
        edge_id: Optional[str] = None,
    ):
        self.id:     str = edge_id or f"{source}-{target}"
        self.source: int = source
        self.target: int = target
        self.weight: int = weight

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def connects(self, node_a: int, node_b: int) -> bool:
        """True if this edge links node_a ↔ node_b."""
        return {self.source, self.target} == {node_a, node_b}

    def other_end(self, node_id: int) -> Optional[int]:
        """Given one endpoint, return the other. None if node_id isn't an endpoint."""
        if node_id == self.source:
            return self.target
        if node_id == self.target:
            return self.source
        return None

    def oriented_from(self, node_id: int) -> "Edge":
        """Copy of this edge with `node_id` as its source (same id and weight)."""
        other = self.other_end(node_id)
        if other is None:
            raise ValueError(f"Node {node_id} is not an endpoint of edge {self.id}")
        return Edge(source=node_id, target=other, weight=self.weight, edge_id=self.id)

    def copy(self) -> "Edge":
        return Edge(self.source, self.target, self.weight, edge_id=self.id)

    def label(self) -> str:
        """Short form used in step messages, e.g. `0-1(4)`."""
        return f"{self.source}-{self.target}({self.weight})"

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":     self.id,
            "source": self.source,
            "target": self.target,
            "weight": self.weight,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        return cls(
            source=_as_int(data["source"], "source"),
            target=_as_int(data["target"], "target"),
            weight=_as_int(data.get("weight", 1), "weight"),
            edge_id=data.get("id"),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.id}: {self.source} ↔ {self.target}, w={self.weight})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return (
            self.id == other.id
            and self.source == other.source
            and self.target == other.target
            and self.weight == other.weight
        )

    def __hash__(self) -> int:
        return hash(self.id)


def _as_int(raw, what: str) -> int:
    """Whole numbers only: `2.0` and `"2"` pass, `2.7`, `True` and `None` do not."""
    if isinstance(raw, bool) or (isinstance(raw, float) and not raw.is_integer()):
        raise ValueError(f"Edge {what} must be an integer, got {raw!r}")
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"Edge {what} must be an integer, got {raw!r}") from None
