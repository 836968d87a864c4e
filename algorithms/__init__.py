"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict keyed by URL slug:
    {
        "bubble-sort": AlgoInfo(key, label, category, fn, pseudocode, complexity, …),
        …
    }

`fn` is always the eager stepper: it runs the algorithm to completion
and returns the full list of steps.  The set is closed; there is no
runtime registration.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from algorithms.bubble_sort    import bubble_sort_steps,    PSEUDOCODE as _bubble_pc
from algorithms.selection_sort import selection_sort_steps, PSEUDOCODE as _selection_pc
from algorithms.insertion_sort import insertion_sort_steps, PSEUDOCODE as _insertion_pc
from algorithms.merge_sort     import merge_sort_steps,     PSEUDOCODE as _merge_pc
from algorithms.quick_sort     import quick_sort_steps,     PSEUDOCODE as _quick_pc
from algorithms.linear_search  import linear_search_steps,  PSEUDOCODE as _linear_pc
from algorithms.binary_search  import binary_search_steps,  PSEUDOCODE as _binary_pc
from algorithms.prims          import prims_steps,          PSEUDOCODE as _prims_pc
from algorithms.kruskals       import kruskals_steps,       PSEUDOCODE as _kruskals_pc
from algorithms.step import (
    ArrayStep,
    GraphStep,
    Step,
    StepEvent,
    StepKind,
    is_array_step,
    is_graph_step,
)


CATEGORIES = ("sort", "search", "graph")


# ---------------------------------------------------------------------------
# Metadata cards
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Complexity:
    best:    str
    average: str
    worst:   str
    space:   str = ""

    def to_dict(self) -> dict:
        return {"best": self.best, "average": self.average, "worst": self.worst, "space": self.space}


@dataclass
class AlgoInfo:
    key:                   str                    # registry key, e.g. "bubble-sort"
    label:                 str                    # human label, e.g. "Bubble Sort"
    category:              str                    # "sort" | "search" | "graph"
    fn:                    Callable               # the eager stepper
    pseudocode:            List[str]              # lines for the side-panel
    complexity:            Complexity
    description:           str = ""               # one-liner for the UI card
    needs_target:          bool = False           # search algorithms
    needs_start_node:      bool = False           # Prim's
    requires_sorted_input: bool = False           # binary search: caller presorts
    tags:                  List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "key":                   self.key,
            "label":                 self.label,
            "category":              self.category,
            "pseudocode":            list(self.pseudocode),
            "complexity":            self.complexity.to_dict(),
            "description":           self.description,
            "needs_target":          self.needs_target,
            "needs_start_node":      self.needs_start_node,
            "requires_sorted_input": self.requires_sorted_input,
            "tags":                  list(self.tags),
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble-sort": AlgoInfo(
        key="bubble-sort", label="Bubble Sort", category="sort",
        fn=bubble_sort_steps, pseudocode=_bubble_pc,
        complexity=Complexity("O(n)", "O(n^2)", "O(n^2)", "O(1)"),
        description="Swaps adjacent out-of-order pairs until a pass makes no swaps.",
        tags=["in-place", "stable"],
    ),

    "selection-sort": AlgoInfo(
        key="selection-sort", label="Selection Sort", category="sort",
        fn=selection_sort_steps, pseudocode=_selection_pc,
        complexity=Complexity("O(n^2)", "O(n^2)", "O(n^2)", "O(1)"),
        description="Repeatedly selects the minimum of the unsorted part.",
        tags=["in-place"],
    ),

    "insertion-sort": AlgoInfo(
        key="insertion-sort", label="Insertion Sort", category="sort",
        fn=insertion_sort_steps, pseudocode=_insertion_pc,
        complexity=Complexity("O(n)", "O(n^2)", "O(n^2)", "O(1)"),
        description="Inserts each element into the sorted prefix by shifting larger ones right.",
        tags=["in-place", "stable"],
    ),

    "merge-sort": AlgoInfo(
        key="merge-sort", label="Merge Sort", category="sort",
        fn=merge_sort_steps, pseudocode=_merge_pc,
        complexity=Complexity("O(n log n)", "O(n log n)", "O(n log n)", "O(n)"),
        description="Divide in halves, sort each recursively, merge the results.",
        tags=["divide-and-conquer", "stable"],
    ),

    "quick-sort": AlgoInfo(
        key="quick-sort", label="Quick Sort", category="sort",
        fn=quick_sort_steps, pseudocode=_quick_pc,
        complexity=Complexity("O(n log n)", "O(n log n)", "O(n^2)", "O(log n)"),
        description="Partition around the last element, then sort both sides recursively.",
        tags=["divide-and-conquer", "in-place"],
    ),

    "linear-search": AlgoInfo(
        key="linear-search", label="Linear Search", category="search",
        fn=linear_search_steps, pseudocode=_linear_pc,
        complexity=Complexity("O(1)", "O(n)", "O(n)", "O(1)"),
        description="Checks every element from left to right.",
        needs_target=True,
    ),

    "binary-search": AlgoInfo(
        key="binary-search", label="Binary Search", category="search",
        fn=binary_search_steps, pseudocode=_binary_pc,
        complexity=Complexity("O(1)", "O(log n)", "O(log n)", "O(1)"),
        description="Halves the search range of a sorted array each iteration.",
        needs_target=True, requires_sorted_input=True,
    ),

    "prims-algorithm": AlgoInfo(
        key="prims-algorithm", label="Prim's Algorithm", category="graph",
        fn=prims_steps, pseudocode=_prims_pc,
        complexity=Complexity("O(E + V log V)", "O(E + V log V)", "O(E log V)", "O(V + E)"),
        description="Grows one tree from a start node, always taking the cheapest outgoing edge.",
        needs_start_node=True, tags=["mst", "greedy"],
    ),

    "kruskals-algorithm": AlgoInfo(
        key="kruskals-algorithm", label="Kruskal's Algorithm", category="graph",
        fn=kruskals_steps, pseudocode=_kruskals_pc,
        complexity=Complexity("O(E log E)", "O(E log E)", "O(E log E)", "O(V + E)"),
        description="Takes edges cheapest-first, skipping any that would close a cycle.",
        tags=["mst", "greedy", "union-find"],
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_category(category: str) -> List[AlgoInfo]:
    return [a for a in REGISTRY.values() if a.category == category]


__all__ = [
    "AlgoInfo",
    "Complexity",
    "CATEGORIES",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_category",
    "ArrayStep",
    "GraphStep",
    "Step",
    "StepEvent",
    "StepKind",
    "is_array_step",
    "is_graph_step",
]
