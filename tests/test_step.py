"""Tests for step records, builders and the algorithm registry."""

import dataclasses
import json

import pytest

from algorithms import (
    CATEGORIES,
    REGISTRY,
    ArrayStep,
    StepEvent,
    StepKind,
    algorithms_by_category,
    get_algorithm,
    is_array_step,
    is_graph_step,
    list_algorithms,
)
from algorithms.step import ArrayStepBuilder, GraphStepBuilder


class TestArrayStepBuilder:

    def test_build_snapshots_array(self):
        sb = ArrayStepBuilder([3, 1, 2])
        first = sb.build(StepEvent.INIT, "start")
        sb.swap(0, 1)
        second = sb.build(StepEvent.SWAPPED, "after")
        assert first.array == (3, 1, 2)
        assert second.array == (1, 3, 2)
        assert (first.step_number, second.step_number) == (0, 1)

    def test_highlight_dedup_and_bounds(self):
        sb = ArrayStepBuilder([3, 1, 2])
        step = sb.build(StepEvent.COMPARE, "x", highlight=(2, -1, 0, 2, 7))
        assert step.highlight == (2, 0)

    def test_sorted_override_is_one_shot(self):
        sb = ArrayStepBuilder([3, 1, 2])
        sb.mark_sorted(2)
        override = sb.build(StepEvent.MERGE, "x", sorted_indices=[1, 0])
        tracked = sb.build(StepEvent.MARK_SORTED, "y")
        assert override.sorted_indices == (0, 1)
        assert tracked.sorted_indices == (2,)

    def test_steps_are_frozen(self):
        step = ArrayStepBuilder([1]).build(StepEvent.INIT, "x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            step.message = "changed"

    def test_to_dict_is_json_ready(self):
        step = ArrayStepBuilder([1, 2], target=2).build(StepEvent.FOUND, "x", found_index=1, is_final=True)
        data = json.loads(json.dumps(step.to_dict()))
        assert data["kind"] == "array"
        assert data["event"] == "found"
        assert data["array"] == [1, 2]
        assert data["found_index"] == 1


class TestGraphStepBuilder:

    def test_running_cost_and_copies(self, triangle_graph):
        sb = GraphStepBuilder(triangle_graph, start_node_id=0)
        edge = triangle_graph.get_edge("0-1")
        sb.accept(edge)
        step = sb.build(StepEvent.ACCEPT, "x", candidate_edge=edge, highlighted_edges=["0-1", "0-1"])
        assert step.mst_cost == 1
        assert step.highlighted_edges == ("0-1",)
        assert step.mst_edges[0] is not edge
        assert step.graph is not triangle_graph
        assert step.start_node_id == 0

    def test_to_dict_is_json_ready(self, triangle_graph):
        step = GraphStepBuilder(triangle_graph).build(StepEvent.INIT, "x")
        data = json.loads(json.dumps(step.to_dict()))
        assert data["kind"] == "graph"
        assert len(data["graph"]["nodes"]) == 3
        assert data["candidate_edge"] is None


class TestKindDispatch:

    def test_kind_tags(self, triangle_graph):
        array_step = ArrayStep()
        graph_step = GraphStepBuilder(triangle_graph).build(StepEvent.INIT, "x")
        assert array_step.kind is StepKind.ARRAY
        assert is_array_step(array_step) and not is_graph_step(array_step)
        assert is_graph_step(graph_step) and not is_array_step(graph_step)

    def test_kind_is_not_constructor_argument(self):
        with pytest.raises(TypeError):
            ArrayStep(kind=StepKind.GRAPH)


class TestRegistry:

    def test_closed_set_of_slugs(self):
        assert list(REGISTRY) == [
            "bubble-sort", "selection-sort", "insertion-sort", "merge-sort", "quick-sort",
            "linear-search", "binary-search",
            "prims-algorithm", "kruskals-algorithm",
        ]

    def test_lookup(self):
        assert get_algorithm("merge-sort").label == "Merge Sort"
        assert get_algorithm("bogo-sort") is None
        assert len(list_algorithms()) == 9

    @pytest.mark.parametrize("category", CATEGORIES)
    def test_by_category(self, category):
        found = algorithms_by_category(category)
        assert found
        assert all(a.category == category for a in found)

    def test_flags(self):
        assert get_algorithm("binary-search").requires_sorted_input
        assert get_algorithm("linear-search").needs_target
        assert get_algorithm("prims-algorithm").needs_start_node
        assert not get_algorithm("kruskals-algorithm").needs_start_node

    @pytest.mark.parametrize("key", list(REGISTRY))
    def test_pseudocode_lines_in_range(self, key, triangle_graph):
        info = REGISTRY[key]
        if info.category == "graph":
            steps = info.fn(triangle_graph, 0) if info.needs_start_node else info.fn(triangle_graph)
        elif info.needs_target:
            steps = info.fn([1, 3, 5, 7, 9], 7)
        else:
            steps = info.fn([5, 3, 8, 1, 9])
        assert all(0 <= s.pseudocode_line < len(info.pseudocode) for s in steps)

    def test_to_dict_omits_callable(self):
        data = get_algorithm("quick-sort").to_dict()
        json.dumps(data)
        assert "fn" not in data
        assert data["complexity"]["worst"] == "O(n^2)"
