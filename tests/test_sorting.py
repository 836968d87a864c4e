"""Tests for the five sorting steppers.

Properties checked for every sorter: the final array is the sorted
permutation of the input, the last step (and only the last) is final,
step numbers run 0..n-1, the caller's list is untouched, and repeated
runs produce identical traces.
"""

from collections import Counter

import pytest

from algorithms import (
    StepEvent,
    StepKind,
)
from algorithms.bubble_sort import bubble_sort_steps
from algorithms.insertion_sort import insertion_sort_steps
from algorithms.merge_sort import merge_sort_steps
from algorithms.quick_sort import quick_sort_steps
from algorithms.selection_sort import selection_sort_steps

SORTERS = {
    "bubble": bubble_sort_steps,
    "selection": selection_sort_steps,
    "insertion": insertion_sort_steps,
    "merge": merge_sort_steps,
    "quick": quick_sort_steps,
}

INPUTS = [
    [5, 3, 8, 1, 9],
    [1, 2, 3, 4, 5],
    [9, 7, 5, 3, 1],
    [4, 4, 2, 4, 1, 2],
    [42],
    [],
]


def _inversions(values):
    return sum(1 for i in range(len(values)) for j in range(i + 1, len(values)) if values[i] > values[j])


@pytest.mark.parametrize("name", SORTERS)
@pytest.mark.parametrize("values", INPUTS, ids=lambda v: ",".join(map(str, v)) or "empty")
class TestSortProperties:

    def test_final_array_is_sorted_permutation(self, name, values):
        steps = SORTERS[name](values)
        final = list(steps[-1].array)
        assert final == sorted(values)
        assert Counter(final) == Counter(values)

    def test_only_last_step_is_final(self, name, values):
        steps = SORTERS[name](values)
        assert steps[-1].is_final
        assert not any(s.is_final for s in steps[:-1])
        assert steps[-1].event is StepEvent.DONE

    def test_step_numbers_are_consecutive(self, name, values):
        steps = SORTERS[name](values)
        assert [s.step_number for s in steps] == list(range(len(steps)))
        assert all(s.kind is StepKind.ARRAY for s in steps)

    def test_snapshot_length_is_constant(self, name, values):
        """Shifts and merges may duplicate values mid-run, but never resize the array."""
        for step in SORTERS[name](values):
            assert len(step.array) == len(values)

    def test_input_not_mutated(self, name, values):
        original = list(values)
        SORTERS[name](values)
        assert values == original

    def test_deterministic(self, name, values):
        first = [s.to_dict() for s in SORTERS[name](values)]
        second = [s.to_dict() for s in SORTERS[name](values)]
        assert first == second

    def test_final_step_marks_everything_sorted(self, name, values):
        assert SORTERS[name](values)[-1].sorted_indices == tuple(range(len(values)))

    def test_first_step_shows_input(self, name, values):
        first = SORTERS[name](values)[0]
        assert list(first.array) == values
        assert first.event is StepEvent.INIT


class TestBubbleSort:

    def test_example(self):
        steps = bubble_sort_steps([5, 3, 8, 1, 9])
        assert list(steps[-1].array) == [1, 3, 5, 8, 9]

    @pytest.mark.parametrize("values", INPUTS[:4])
    def test_swap_confirmations_equal_inversions(self, values):
        steps = bubble_sort_steps(values)
        swapped = [s for s in steps if s.event is StepEvent.SWAPPED]
        assert len(swapped) == _inversions(values)

    def test_compare_precedes_every_decision(self):
        steps = bubble_sort_steps([3, 1, 2])
        for prev, step in zip(steps, steps[1:]):
            if step.event in (StepEvent.SWAP, StepEvent.NO_SWAP):
                assert prev.event is StepEvent.COMPARE
                assert prev.highlight == step.highlight

    def test_sorted_input_is_single_pass(self):
        steps = bubble_sort_steps([1, 2, 3, 4, 5])
        assert sum(1 for s in steps if s.event is StepEvent.COMPARE) == 4
        assert not any(s.event is StepEvent.SWAP for s in steps)


class TestSelectionSort:

    def test_new_min_tracks_the_minimum(self):
        steps = selection_sort_steps([5, 3, 8, 1, 9])
        first_pass_mins = []
        for s in steps:
            if s.event is StepEvent.MARK_SORTED:
                break
            if s.event is StepEvent.NEW_MIN:
                first_pass_mins.append(s.array[s.highlight[-1]])
        assert first_pass_mins == [3, 1]

    def test_empty_input_message(self):
        steps = selection_sort_steps([])
        assert len(steps) == 2
        assert "empty" in steps[-1].message


class TestInsertionSort:

    def test_shift_pairs(self):
        steps = insertion_sort_steps([2, 1])
        events = [s.event for s in steps]
        assert events == [
            StepEvent.INIT,
            StepEvent.MARK_SORTED,
            StepEvent.PICK,
            StepEvent.SHIFT,
            StepEvent.SHIFTED,
            StepEvent.PLACE,
            StepEvent.DONE,
        ]

    def test_place_marks_prefix_sorted(self):
        steps = insertion_sort_steps([3, 1, 2])
        places = [s for s in steps if s.event is StepEvent.PLACE]
        assert [p.sorted_indices for p in places] == [(0, 1), (0, 1, 2)]


class TestMergeSort:

    def test_divide_then_base_cases_left_first(self):
        steps = merge_sort_steps([2, 1])
        assert [s.event for s in steps] == [
            StepEvent.INIT,
            StepEvent.DIVIDE,
            StepEvent.BASE_CASE,
            StepEvent.BASE_CASE,
            StepEvent.MERGE,
            StepEvent.COMPARE,
            StepEvent.TAKE,
            StepEvent.PLACE,
            StepEvent.TAKE,
            StepEvent.PLACE,
            StepEvent.MERGE,
            StepEvent.DONE,
        ]
        base = [s for s in steps if s.event is StepEvent.BASE_CASE]
        assert [b.highlight for b in base] == [(0,), (1,)]

    def test_merge_is_stable_on_ties(self):
        steps = merge_sort_steps([2, 2])
        takes = [s for s in steps if s.event is StepEvent.TAKE]
        assert "left" in takes[0].message


class TestQuickSort:

    def test_pivot_is_last_element(self):
        steps = quick_sort_steps([5, 3, 8, 1, 9])
        pivot = next(s for s in steps if s.event is StepEvent.PIVOT)
        assert pivot.pivot == 4

    def test_placed_pivot_is_marked_sorted(self):
        steps = quick_sort_steps([3, 1, 2])
        placed = next(s for s in steps if s.event is StepEvent.PIVOT_PLACED)
        # pivot 2 lands at index 1
        assert placed.array[1] == 2
        assert 1 in placed.sorted_indices

    def test_recurse_follows_each_partition(self):
        steps = quick_sort_steps([4, 2, 6, 1, 5, 3])
        placed = sum(1 for s in steps if s.event is StepEvent.PIVOT_PLACED)
        recurse = sum(1 for s in steps if s.event is StepEvent.RECURSE)
        assert placed == recurse
