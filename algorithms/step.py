"""
step.py — Algorithm Step Snapshots
===================================
Every stepper produces an ordered list of steps.  A step is a
frozen-in-time picture of everything a renderer needs to draw one frame:

    • The full array / graph at that instant
    • Which indices / nodes / edges are highlighted, and what is sorted
    • Auxiliary state: pivot, search target, MST so far, DSU forest, frontier
    • Which line of pseudocode is executing right now
    • A plain-English description of the instant

Design decisions:
  - Two step shapes, one tag.  ArrayStep and GraphStep both carry
    `kind` so consumers dispatch on it instead of sniffing fields.
  - Steps are frozen dataclasses whose sequence fields are tuples.
    The builders copy the working state on every build(), so mutating
    the working array / graph afterwards can never reach back into an
    already-emitted step.
  - `event` is a semantic role ("compare", "swap", "accept", …), never a
    colour.  Colour mapping belongs to the renderer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Set, Tuple, Union

from graph import Edge, Graph
from structures import DSUState


# ---------------------------------------------------------------------------
# Tags
# ---------------------------------------------------------------------------
class StepKind(Enum):
    ARRAY = "array"
    GRAPH = "graph"


class StepEvent(Enum):
    INIT         = "init"
    # sorting
    COMPARE      = "compare"
    SWAP         = "swap"           # about to swap
    SWAPPED      = "swapped"        # array shown after the swap
    NO_SWAP      = "no_swap"
    MARK_SORTED  = "mark_sorted"
    CHECK        = "check"          # selection sort: start scanning for position i
    NEW_MIN      = "new_min"
    PICK         = "pick"
    SHIFT        = "shift"
    SHIFTED      = "shifted"
    PLACE        = "place"
    DIVIDE       = "divide"
    MERGE        = "merge"
    TAKE         = "take"
    BASE_CASE    = "base_case"
    PIVOT        = "pivot"
    PIVOT_PLACED = "pivot_placed"
    RECURSE      = "recurse"
    # searching
    MATCH        = "match"
    MISMATCH     = "mismatch"
    BOUNDS       = "bounds"
    GO_RIGHT     = "go_right"
    GO_LEFT      = "go_left"
    FOUND        = "found"
    NOT_FOUND    = "not_found"
    # graph
    VISIT        = "visit"
    FRONTIER     = "frontier"
    SELECT       = "select"
    SKIP         = "skip"
    ACCEPT       = "accept"
    SORT_EDGES   = "sort_edges"
    DSU_INIT     = "dsu_init"
    CONSIDER     = "consider"
    CONNECTIVITY = "connectivity"
    REJECT       = "reject"
    ERROR        = "error"
    # terminal
    DONE         = "done"


# ---------------------------------------------------------------------------
# Array step
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ArrayStep:
    """
    Attributes:
        step_number     : 0-based index of this step in the run.
        event           : Semantic role of this instant.
        array           : Full copy of the working array.
        highlight       : Indices under comparison / movement.
        sorted_indices  : Indices known to be in sorted position (ascending).
        pivot           : Quick sort pivot index, if any.
        target          : Value being searched for (search algorithms).
        found_index     : Index where the target was located.
        message         : Human-readable description.
        pseudocode_line : 0-based index into the algorithm's PSEUDOCODE.
        is_final        : True on the very last step of the run.
    """

    step_number:     int                   = 0
    event:           StepEvent             = StepEvent.INIT
    array:           Tuple[int, ...]       = ()
    highlight:       Tuple[int, ...]       = ()
    sorted_indices:  Tuple[int, ...]       = ()
    pivot:           Optional[int]         = None
    target:          Optional[int]         = None
    found_index:     Optional[int]         = None
    message:         str                   = ""
    pseudocode_line: int                   = 0
    is_final:        bool                  = False
    kind:            StepKind              = field(default=StepKind.ARRAY, init=False)

    def to_dict(self) -> dict:
        return {
            "kind":            self.kind.value,
            "step_number":     self.step_number,
            "event":           self.event.value,
            "array":           list(self.array),
            "highlight":       list(self.highlight),
            "sorted_indices":  list(self.sorted_indices),
            "pivot":           self.pivot,
            "target":          self.target,
            "found_index":     self.found_index,
            "message":         self.message,
            "pseudocode_line": self.pseudocode_line,
            "is_final":        self.is_final,
        }


# ---------------------------------------------------------------------------
# Graph step
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class GraphStep:
    """
    Attributes:
        step_number       : 0-based index of this step in the run.
        event             : Semantic role of this instant.
        graph             : Deep copy of the graph (nodes keep their x / y).
        mst_edges         : Edges accepted into the spanning tree so far, in order.
        highlighted_nodes : Node ids to emphasise.
        highlighted_edges : Edge ids to emphasise.
        candidate_edge    : Edge under consideration right now.
        start_node_id     : Prim's start node (persists across the run).
        dsu_state         : Kruskal's union-find forest at this instant.
        frontier          : Prim's queued edges in extraction order.
        mst_cost          : Running sum of accepted edge weights.
        message           : Human-readable description.
        pseudocode_line   : 0-based index into the algorithm's PSEUDOCODE.
        is_final          : True on the very last step of the run.
    """

    step_number:       int                  = 0
    event:             StepEvent            = StepEvent.INIT
    graph:             Graph                = field(default_factory=Graph)
    mst_edges:         Tuple[Edge, ...]     = ()
    highlighted_nodes: Tuple[int, ...]      = ()
    highlighted_edges: Tuple[str, ...]      = ()
    candidate_edge:    Optional[Edge]       = None
    start_node_id:     Optional[int]        = None
    dsu_state:         Optional[DSUState]   = None
    frontier:          Tuple[Edge, ...]     = ()
    mst_cost:          int                  = 0
    message:           str                  = ""
    pseudocode_line:   int                  = 0
    is_final:          bool                 = False
    kind:              StepKind             = field(default=StepKind.GRAPH, init=False)

    def to_dict(self) -> dict:
        return {
            "kind":              self.kind.value,
            "step_number":       self.step_number,
            "event":             self.event.value,
            "graph":             self.graph.to_dict(),
            "mst_edges":         [e.to_dict() for e in self.mst_edges],
            "highlighted_nodes": list(self.highlighted_nodes),
            "highlighted_edges": list(self.highlighted_edges),
            "candidate_edge":    self.candidate_edge.to_dict() if self.candidate_edge else None,
            "start_node_id":     self.start_node_id,
            "dsu_state":         self.dsu_state.to_dict() if self.dsu_state else None,
            "frontier":          [e.to_dict() for e in self.frontier],
            "mst_cost":          self.mst_cost,
            "message":           self.message,
            "pseudocode_line":   self.pseudocode_line,
            "is_final":          self.is_final,
        }


Step = Union[ArrayStep, GraphStep]


def is_array_step(step: Step) -> bool:
    return step.kind is StepKind.ARRAY


def is_graph_step(step: Step) -> bool:
    return step.kind is StepKind.GRAPH


def _unique(items: Iterable) -> tuple:
    """Drop duplicates, keep first-seen order."""
    return tuple(dict.fromkeys(items))


# ---------------------------------------------------------------------------
# Builders — mutable scratch-pads that snapshot on build()
# ---------------------------------------------------------------------------
class ArrayStepBuilder:
    """
    Owns the working array and the sorted-index set for one run.

    Usage inside an algorithm generator:
        sb = ArrayStepBuilder(array)
        arr = sb.array                      # the working copy, mutate freely
        sb.pseudocode_line = 3
        yield sb.build(StepEvent.COMPARE, "Comparing 5 and 3.", highlight=(0, 1))
    """

    def __init__(self, array: Sequence[int], target: Optional[int] = None):
        self.array:           List[int] = list(array)
        self.target:          Optional[int] = target
        self.sorted:          Set[int] = set()
        self.pseudocode_line: int = 0
        self._step_no:        int = 0

    # -- helpers --
    def mark_sorted(self, *indices: int) -> None:
        self.sorted.update(indices)

    def mark_all_sorted(self) -> None:
        self.sorted = set(range(len(self.array)))

    def set_sorted(self, indices: Iterable[int]) -> None:
        self.sorted = set(indices)

    def swap(self, i: int, j: int) -> None:
        self.array[i], self.array[j] = self.array[j], self.array[i]

    def build(
        self,
        event: StepEvent,
        message: str,
        highlight: Iterable[int] = (),
        pivot: Optional[int] = None,
        found_index: Optional[int] = None,
        sorted_indices: Optional[Iterable[int]] = None,
        is_final: bool = False,
    ) -> ArrayStep:
        """Snapshot the working state.  `sorted_indices` overrides the tracked set for this step only."""
        shown = self.sorted if sorted_indices is None else sorted_indices
        step = ArrayStep(
            step_number=self._step_no,
            event=event,
            array=tuple(self.array),
            highlight=_unique(i for i in highlight if 0 <= i < len(self.array)),
            sorted_indices=tuple(sorted(set(shown))),
            pivot=pivot,
            target=self.target,
            found_index=found_index,
            message=message,
            pseudocode_line=self.pseudocode_line,
            is_final=is_final,
        )
        self._step_no += 1
        return step


class GraphStepBuilder:
    """
    Holds the read-only input graph plus the running MST for one run.
    Every build() deep-copies the graph and the edge lists.
    """

    def __init__(self, graph: Graph, start_node_id: Optional[int] = None):
        self.graph:           Graph = graph
        self.start_node_id:   Optional[int] = start_node_id
        self.mst_edges:       List[Edge] = []
        self.mst_cost:        int = 0
        self.pseudocode_line: int = 0
        self._step_no:        int = 0

    def accept(self, edge: Edge) -> None:
        self.mst_edges.append(edge)
        self.mst_cost += edge.weight

    def mst_edge_ids(self) -> List[str]:
        return [e.id for e in self.mst_edges]

    def build(
        self,
        event: StepEvent,
        message: str,
        highlighted_nodes: Iterable[int] = (),
        highlighted_edges: Iterable[str] = (),
        candidate_edge: Optional[Edge] = None,
        dsu_state: Optional[DSUState] = None,
        frontier: Iterable[Edge] = (),
        is_final: bool = False,
    ) -> GraphStep:
        step = GraphStep(
            step_number=self._step_no,
            event=event,
            graph=self.graph.copy(),
            mst_edges=tuple(e.copy() for e in self.mst_edges),
            highlighted_nodes=_unique(highlighted_nodes),
            highlighted_edges=_unique(highlighted_edges),
            candidate_edge=candidate_edge.copy() if candidate_edge else None,
            start_node_id=self.start_node_id,
            dsu_state=dsu_state,
            frontier=tuple(e.copy() for e in frontier),
            mst_cost=self.mst_cost,
            message=message,
            pseudocode_line=self.pseudocode_line,
            is_final=is_final,
        )
        self._step_no += 1
        return step
