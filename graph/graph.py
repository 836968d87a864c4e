"""
graph.py — Graph Container & Generator
=======================================
Single source of truth for the graph.  Steppers read it, the API
builds / imports it, snapshots deep-copy it.

Responsibilities:
  1. CRUD on nodes & edges                  (add / remove / get)
  2. Adjacency queries                      (incident_edges, neighbours, …)
  3. Random graph generation                (connected, seeded)
  4. Import from adjacency-list text        (text → graph)
  5. Serialisation round-trip               (to_dict / from_dict)
  6. Deep copy for step snapshots           (copy)

Design decisions:
  - Nodes & edges stored in plain dicts keyed by id.  Dicts keep
    insertion order, so "the first node" and "graph edge order" are
    well defined — Prim's start-node fallback and Kruskal's stable
    tie-break both rely on it.
  - A separate adjacency dict  `_adj[node_id] → [edge_id, …]`
    is maintained incrementally so incident-edge queries are O(degree).
    A self-loop is listed once.
  - Every edge must reference existing nodes; violations raise GraphError
    at insertion time so steppers never see a malformed graph.
"""

import math
import random
from typing import Dict, List, Optional, Tuple

from graph.node import Node
from graph.edge import Edge


class GraphError(ValueError):
    """Structural violation of the graph model."""


class Graph:
    """
    Attributes:
        nodes : {node_id: Node}
        edges : {edge_id: Edge}
        _adj  : {node_id: [edge_id, …]}
    """

    def __init__(self):
        self.nodes: Dict[int, Node] = {}
        self.edges: Dict[str, Edge] = {}
        self._adj:  Dict[int, List[str]] = {}

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        if node.id in self.nodes:
            raise GraphError(f"Duplicate node id {node.id}")
        if node.id < 0:
            raise GraphError(f"Node ids must be non-negative, got {node.id}")
        self.nodes[node.id] = node
        self._adj.setdefault(node.id, [])
        return node

    def create_node(self, x: float = 0.0, y: float = 0.0, node_id: Optional[int] = None) -> Node:
        """Convenience: create + add in one call.  Picks the next free id if none is given."""
        if node_id is None:
            node_id = max(self.nodes, default=-1) + 1
        return self.add_node(Node(node_id, x, y))

    def remove_node(self, node_id: int) -> None:
        if node_id not in self.nodes:
            return
        # remove every edge touching this node
        for eid in list(self._adj.get(node_id, [])):
            self.remove_edge(eid)
        del self.nodes[node_id]
        self._adj.pop(node_id, None)

    def get_node(self, node_id: int) -> Optional[Node]:
        return self.nodes.get(node_id)

    def has_node(self, node_id) -> bool:
        return node_id in self.nodes

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(self, edge: Edge) -> Edge:
        if edge.source not in self.nodes or edge.target not in self.nodes:
            raise GraphError(
                f"Edge {edge.id} references unknown node(s): {edge.source}, {edge.target}"
            )
        if edge.id in self.edges:
            raise GraphError(f"Duplicate edge id {edge.id!r}")
        if edge.weight <= 0:
            raise GraphError(f"Edge {edge.id} must have a positive weight, got {edge.weight}")
        self.edges[edge.id] = edge
        # maintain adjacency
        self._adj[edge.source].append(edge.id)
        if edge.target != edge.source:
            self._adj[edge.target].append(edge.id)
        return edge

    def create_edge(self, source: int, target: int, weight: int = 1, edge_id: Optional[str] = None) -> Edge:
        """Create + add.  Derives a unique id from the endpoints when none is given."""
        if edge_id is None:
            edge_id = self._free_edge_id(f"{source}-{target}")
        return self.add_edge(Edge(source=source, target=target, weight=weight, edge_id=edge_id))

    def remove_edge(self, edge_id: str) -> None:
        if edge_id not in self.edges:
            return
        e = self.edges.pop(edge_id)
        for end in (e.source, e.target):
            ids = self._adj.get(end, [])
            if edge_id in ids:
                ids.remove(edge_id)

    def get_edge(self, edge_id: str) -> Optional[Edge]:
        return self.edges.get(edge_id)

    def get_edge_between(self, a: int, b: int) -> Optional[Edge]:
        """First edge connecting a and b (either orientation)."""
        for eid in self._adj.get(a, []):
            e = self.edges[eid]
            if e.connects(a, b):
                return e
        return None

    def _free_edge_id(self, base: str) -> str:
        if base not in self.edges:
            return base
        n = 2
        while f"{base}#{n}" in self.edges:
            n += 1
        return f"{base}#{n}"

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def incident_edges(self, node_id: int) -> List[Edge]:
        """Edges touching node_id, in the order they were added to the graph."""
        return [self.edges[eid] for eid in self._adj.get(node_id, [])]

    def neighbours(self, node_id: int) -> List[Tuple[int, Edge]]:
        """Return [(neighbour_id, edge)] for every incident edge."""
        return [(e.other_end(node_id), e) for e in self.incident_edges(node_id)]

    def degree(self, node_id: int) -> int:
        return len(self._adj.get(node_id, []))

    # ==================================================================
    # VALIDATION / COPY
    # ==================================================================
    def validate(self) -> None:
        """Raise GraphError if any edge references a missing node."""
        for e in self.edges.values():
            if e.source not in self.nodes or e.target not in self.nodes:
                raise GraphError(f"Edge {e.id} references unknown node(s): {e.source}, {e.target}")

    def copy(self) -> "Graph":
        """Deep copy: new Node / Edge objects, same ids, same order."""
        g = Graph()
        for node in self.nodes.values():
            g.nodes[node.id] = node.copy()
        for eid, edge in self.edges.items():
            g.edges[eid] = edge.copy()
        g._adj = {nid: list(ids) for nid, ids in self._adj.items()}
        return g

    def clear(self) -> None:
        self.nodes.clear()
        self.edges.clear()
        self._adj.clear()

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes.values()],
            "edges": [e.to_dict() for e in self.edges.values()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        g = cls()
        for nd in data.get("nodes", []):
            g.add_node(Node.from_dict(nd))
        for ed in data.get("edges", []):
            try:
                edge = Edge.from_dict(ed)
            except ValueError as e:
                raise GraphError(str(e)) from None
            if not ed.get("id"):
                edge.id = g._free_edge_id(edge.id)
            g.add_edge(edge)
        return g

    # ==================================================================
    # GENERATORS — Factory class-methods
    # ==================================================================

    # ---------- Random Graph ----------
    @classmethod
    def generate_random(
        cls,
        num_nodes: int = 6,
        edge_probability: float = 0.4,
        weight_range: Tuple[int, int] = (1, 10),
        seed: Optional[int] = None,
        canvas_w: float = 800,
        canvas_h: float = 500,
    ) -> "Graph":
        """
        Erdős–Rényi style random graph.
        Each possible edge is included with probability `edge_probability`,
        then a shuffled backbone path guarantees the graph is connected.
        """
        rng = random.Random(seed)
        g = cls()
        margin = 40

        # place nodes in a circle with jitter so it looks natural
        for i in range(num_nodes):
            angle  = 2 * math.pi * i / num_nodes
            radius = min(canvas_w, canvas_h) * 0.35
            cx, cy = canvas_w / 2, canvas_h / 2
            x = cx + radius * math.cos(angle) + rng.uniform(-30, 30)
            y = cy + radius * math.sin(angle) + rng.uniform(-30, 30)
            x = max(margin, min(canvas_w - margin, x))
            y = max(margin, min(canvas_h - margin, y))
            g.create_node(round(x, 1), round(y, 1), node_id=i)

        for i in range(num_nodes):
            for j in range(i + 1, num_nodes):
                if rng.random() < edge_probability:
                    g.create_edge(i, j, weight=rng.randint(*weight_range))

        # guarantee connectivity: add a spanning-tree backbone
        order = list(range(num_nodes))
        rng.shuffle(order)
        for k in range(1, len(order)):
            if not g.get_edge_between(order[k - 1], order[k]):
                g.create_edge(order[k - 1], order[k], weight=rng.randint(*weight_range))

        return g

    # ---------- Import from Adjacency List (text) ----------
    @classmethod
    def from_adjacency_list(
        cls,
        text: str,
        canvas_w: float = 800,
        canvas_h: float = 500,
    ) -> "Graph":
        """
        Parse a simple text adjacency list with integer node ids.

        Supported formats (one node per line):
            0: 1 2 3            → 0 connects to 1, 2, 3  (weight 1)
            0: 1(3) 2(7)        → 0-1 weight 3, 0-2 weight 7
            0 -> 1(5), 2(3)     → alternate arrow syntax, comma-separated

        Duplicate undirected pairs are kept once.  Nodes are laid out in a circle.
        """
        adjacency: Dict[int, List[Tuple[int, int]]] = {}

        for lineno, raw in enumerate(text.strip().splitlines(), start=1):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue

            if ":" in line:
                parts = line.split(":", 1)
            elif "→" in line:
                parts = line.split("→", 1)
            elif "->" in line:
                parts = line.split("->", 1)
            else:
                raise GraphError(f"Line {lineno}: expected 'node: neighbours', got {raw!r}")

            src = _parse_int(parts[0], lineno)
            adjacency.setdefault(src, [])

            for token in parts[1].replace(",", " ").split():
                # optional weight: "3(7)" or "3"
                if "(" in token and token.endswith(")"):
                    tgt_str, w_str = token[:-1].split("(", 1)
                    tgt, w = _parse_int(tgt_str, lineno), _parse_int(w_str, lineno)
                else:
                    tgt, w = _parse_int(token, lineno), 1
                adjacency.setdefault(tgt, [])
                adjacency[src].append((tgt, w))

        g = cls()
        ids = list(adjacency)
        n = len(ids)
        cx, cy = canvas_w / 2, canvas_h / 2
        radius = min(canvas_w, canvas_h) * 0.35
        for i, nid in enumerate(ids):
            angle = 2 * math.pi * i / n
            g.create_node(
                round(cx + radius * math.cos(angle), 1),
                round(cy + radius * math.sin(angle), 1),
                node_id=nid,
            )

        seen = set()
        for src, targets in adjacency.items():
            for tgt, w in targets:
                key = frozenset((src, tgt))
                if key in seen:
                    continue
                seen.add(key)
                g.create_edge(src, tgt, weight=w)

        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def node_ids(self) -> List[int]:
        return list(self.nodes.keys())

    def edge_list(self) -> List[Edge]:
        return list(self.edges.values())

    def first_node_id(self) -> Optional[int]:
        return next(iter(self.nodes), None)

    def __eq__(self, other) -> bool:
        """Same nodes and edges, added in the same order."""
        if not isinstance(other, Graph):
            return NotImplemented
        return (
            list(self.nodes.items()) == list(other.nodes.items())
            and list(self.edges.items()) == list(other.edges.items())
        )

    # mutable container
    __hash__ = None

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"


def _parse_int(token: str, lineno: int) -> int:
    try:
        return int(token.strip())
    except ValueError:
        raise GraphError(f"Line {lineno}: {token.strip()!r} is not an integer") from None
