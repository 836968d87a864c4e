"""
recorder.py — Run Recorder & Analytics
========================================
Runs one algorithm to completion, keeps every Step, and computes the
metrics the analytics card shows.

Usage:
    rec = Recorder()
    metrics = rec.run("bubble-sort", array=[5, 3, 8, 1, 9])
    rec.stepper.next_step()          # playback over the recorded trace
    rec.export()                     # JSON-ready snapshot for save/replay
"""

import logging
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from algorithms import AlgoInfo, get_algorithm
from algorithms.step import Step, StepEvent, is_array_step, is_graph_step
from engine.inputs import InputError, prepare_search_input
from engine.stepper import Stepper
from graph import Graph

log = logging.getLogger(__name__)

_COMPARISON_EVENTS = (StepEvent.COMPARE, StepEvent.MATCH, StepEvent.MISMATCH)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the analytics card renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:        str             = ""
    algo_label:      str             = ""
    category:        str             = ""
    total_steps:     int             = 0        # number of Steps produced
    wall_time_ms:    float           = 0.0      # wall-clock time to run to completion
    comparisons:     int             = 0        # compare / match / mismatch steps
    swaps:           int             = 0        # swap steps
    input_reordered: bool            = False    # binary search input was presorted
    final_array:     List[int]       = field(default_factory=list)
    target:          Optional[int]   = None
    found_index:     Optional[int]   = None
    start_node_id:   Optional[int]   = None
    mst_cost:        int             = 0
    mst_edge_count:  int             = 0
    spanning:        bool            = False    # accepted edges span every node

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps    : Full list of Steps from the last run.
        metrics  : RunMetrics of the last run (None before run()).
        stepper  : A Stepper loaded with the recorded trace.
    """

    def __init__(self):
        self.steps:   List[Step]           = []
        self.metrics: Optional[RunMetrics] = None
        self.stepper: Stepper              = Stepper()

        self._algo_info: Optional[AlgoInfo] = None
        self._input:     Dict[str, Any]     = {}

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------
    def run(
        self,
        key: str,
        array: Optional[List[int]] = None,
        target: Optional[int] = None,
        graph: Optional[Graph] = None,
        start_node_id: Optional[int] = None,
    ) -> RunMetrics:
        """Invoke the registered stepper for `key` and record its trace."""
        info = get_algorithm(key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {key}")

        reordered = False
        # build positional args based on what the algo accepts
        if info.category == "graph":
            if graph is None:
                raise InputError(f"{info.label} needs a graph.")
            args: List[Any] = [graph]
            if info.needs_start_node:
                if start_node_id is None:
                    start_node_id = graph.first_node_id()
                args.append(start_node_id)
            else:
                start_node_id = None
            self._input = {"graph": graph.to_dict(), "start_node_id": start_node_id}
        else:
            if array is None:
                raise InputError(f"{info.label} needs an input array.")
            if info.needs_target:
                if target is None:
                    raise InputError(f"{info.label} needs a target value.")
                array, reordered = prepare_search_input(key, array)
                args = [array, target]
            else:
                target = None
                args = [array]
            self._input = {"array": list(array), "target": target}

        started = time.perf_counter()
        steps = info.fn(*args)
        wall_ms = (time.perf_counter() - started) * 1000

        self._algo_info = info
        self.steps      = steps
        self.metrics    = self._compute_metrics(wall_ms, target, start_node_id, graph, reordered)
        self.stepper.load(steps)

        log.info("%s: %d steps in %.2f ms", key, len(steps), wall_ms)
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        if self._algo_info is None:
            raise RuntimeError("Call run() first.")
        return {
            "algo_key": self._algo_info.key,
            "input":    dict(self._input),
            "metrics":  self.metrics.to_dict(),
            "steps":    [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(
        self,
        wall_ms: float,
        target: Optional[int],
        start_node_id: Optional[int],
        graph: Optional[Graph],
        reordered: bool,
    ) -> RunMetrics:
        info = self._algo_info
        last = self.steps[-1] if self.steps else None

        metrics = RunMetrics(
            algo_key=info.key,
            algo_label=info.label,
            category=info.category,
            total_steps=len(self.steps),
            wall_time_ms=round(wall_ms, 2),
            comparisons=sum(1 for s in self.steps if s.event in _COMPARISON_EVENTS),
            swaps=sum(1 for s in self.steps if s.event is StepEvent.SWAP),
            input_reordered=reordered,
            target=target,
            start_node_id=start_node_id,
        )

        if last is not None and is_array_step(last):
            metrics.final_array = list(last.array)
            metrics.found_index = last.found_index
        elif last is not None and is_graph_step(last):
            metrics.mst_cost       = last.mst_cost
            metrics.mst_edge_count = len(last.mst_edges)
            n = graph.node_count() if graph is not None else 0
            metrics.spanning       = n > 0 and last.event is StepEvent.DONE and len(last.mst_edges) == n - 1
        return metrics
