"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Node, Edge, GraphError
"""

from graph.node  import Node, parse_node_id
from graph.edge  import Edge
from graph.graph import Graph, GraphError

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "GraphError",
    "parse_node_id",
]
