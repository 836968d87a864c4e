"""
binary_search.py — Binary Search
================================
Assumes the input is already sorted ascending.  The caller presorts
(see engine.inputs.prepare_search_input); this module never re-sorts.

Each iteration emits:
  1. BOUNDS   — current [low, high] and the computed mid
  2. COMPARE  — focus on arr[mid] vs target
  3. FOUND | GO_RIGHT | GO_LEFT
  4. BOUNDS   — the narrowed range, only if the loop continues
A final NOT_FOUND step is emitted once low > high.
"""

from typing import Generator, List, Sequence

from algorithms.step import ArrayStep, ArrayStepBuilder, StepEvent


PSEUDOCODE: List[str] = [
    "def BinarySearch(arr, target):",                # 0
    "    low ← 0;  high ← n - 1",                    # 1
    "    while low ≤ high:",                         # 2
    "        mid ← (low + high) // 2",               # 3
    "        if arr[mid] == target: return mid",     # 4
    "        elif arr[mid] < target: low ← mid + 1", # 5
    "        else: high ← mid - 1",                  # 6
    "    return NOT FOUND",                          # 7
]


def binary_search(sorted_array: Sequence[int], target: int) -> Generator[ArrayStep, None, None]:
    sb = ArrayStepBuilder(sorted_array, target=target)
    arr = sb.array
    low, high = 0, len(arr) - 1

    sb.pseudocode_line = 1
    yield sb.build(
        StepEvent.INIT,
        f"Initial sorted array. Searching for target {target} between index {low} and {high}.",
    )

    while low <= high:
        mid = (low + high) // 2
        sb.pseudocode_line = 3
        yield sb.build(
            StepEvent.BOUNDS,
            f"Current range: [{low}, {high}]. mid = ({low} + {high}) // 2 = {mid}. Value at mid: {arr[mid]}.",
            highlight=(low, mid, high),
        )

        sb.pseudocode_line = 4
        yield sb.build(
            StepEvent.COMPARE,
            f"Comparing target {target} with value at mid index {mid} ({arr[mid]}).",
            highlight=(mid,),
        )

        if arr[mid] == target:
            yield sb.build(
                StepEvent.FOUND,
                f"Target {target} found at index {mid}.",
                highlight=(mid,),
                found_index=mid,
                is_final=True,
            )
            return

        if arr[mid] < target:
            sb.pseudocode_line = 5
            yield sb.build(
                StepEvent.GO_RIGHT,
                f"{arr[mid]} < {target}. Target can only be in the right half. Moving low to {mid + 1}.",
                highlight=(low, mid, high),
            )
            low = mid + 1
        else:
            sb.pseudocode_line = 6
            yield sb.build(
                StepEvent.GO_LEFT,
                f"{arr[mid]} > {target}. Target can only be in the left half. Moving high to {mid - 1}.",
                highlight=(low, mid, high),
            )
            high = mid - 1

        if low <= high:
            sb.pseudocode_line = 2
            yield sb.build(
                StepEvent.BOUNDS,
                f"New search range is from index {low} to {high}.",
                highlight=(low, high),
            )

    sb.pseudocode_line = 7
    yield sb.build(
        StepEvent.NOT_FOUND,
        f"Search range is empty (low={low}, high={high}). Target {target} not found in the array.",
        is_final=True,
    )


def binary_search_steps(sorted_array: Sequence[int], target: int) -> List[ArrayStep]:
    return list(binary_search(sorted_array, target))
