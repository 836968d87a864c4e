"""
structures/
-----------
Auxiliary data structures the graph steppers own for one run.

    from structures import DisjointSet, DSUState, UnknownNodeError, EdgeFrontier
"""

from structures.dsu      import DisjointSet, DSUState, UnknownNodeError
from structures.frontier import EdgeFrontier

__all__ = [
    "DisjointSet",
    "DSUState",
    "UnknownNodeError",
    "EdgeFrontier",
]
