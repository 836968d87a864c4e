"""
node.py — Graph Node
====================
A node is an integer identity plus a canvas position.

Design decisions:
  - `id` is the only thing algorithms look at.  `x` / `y` are purely
    presentational, but every snapshot carries them through unchanged so
    the renderer can draw any step without the live graph.
  - Nodes carry NO visual state.  What a node "looks like" at a given
    instant is described by the step that references it (highlighted
    node ids), never by mutating the node.
"""

from typing import Optional


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class Node:
    """
    Attributes:
        id : Unique, non-negative integer identifier.
        x  : Canvas x coordinate.
        y  : Canvas y coordinate.
    """

    __slots__ = ("id", "x", "y")

    def __init__(self, node_id: int, x: float = 0.0, y: float = 0.0):
        self.id: int  = node_id
        self.x: float = x
        self.y: float = y

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def copy(self) -> "Node":
        return Node(self.id, self.x, self.y)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"id": self.id, "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        return cls(node_id=int(data["id"]), x=float(data.get("x", 0.0)), y=float(data.get("y", 0.0)))

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, pos=({self.x:.2f},{self.y:.2f}))"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.id == other.id and self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash(self.id)


def parse_node_id(value) -> Optional[int]:
    """Coerce an incoming id (JSON number or numeric string) to int, or None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
