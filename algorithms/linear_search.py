"""
linear_search.py — Linear Search
================================
Scan left to right, one step per index, stop at the first match.
The final step restates the outcome.
"""

from typing import Generator, List, Sequence

from algorithms.step import ArrayStep, ArrayStepBuilder, StepEvent


PSEUDOCODE: List[str] = [
    "def LinearSearch(arr, target):",                # 0
    "    for i in 0 .. n-1:",                        # 1
    "        if arr[i] == target:",                  # 2
    "            return i",                          # 3
    "    return NOT FOUND",                          # 4
]


def linear_search(array: Sequence[int], target: int) -> Generator[ArrayStep, None, None]:
    sb = ArrayStepBuilder(array, target=target)
    arr = sb.array

    yield sb.build(StepEvent.INIT, f"Initial array. Searching for target value: {target}.")

    for i, value in enumerate(arr):
        sb.pseudocode_line = 2
        if value == target:
            yield sb.build(
                StepEvent.MATCH,
                f"Checking index {i} (value: {value}). It matches target {target}.",
                highlight=(i,),
                found_index=i,
            )
            sb.pseudocode_line = 3
            yield sb.build(
                StepEvent.FOUND,
                f"Target {target} found at index {i}.",
                highlight=(i,),
                found_index=i,
                is_final=True,
            )
            return
        yield sb.build(
            StepEvent.MISMATCH,
            f"Checking index {i} (value: {value}). It does not match target {target}.",
            highlight=(i,),
        )

    sb.pseudocode_line = 4
    yield sb.build(StepEvent.NOT_FOUND, f"Target {target} not found in the array.", is_final=True)


def linear_search_steps(array: Sequence[int], target: int) -> List[ArrayStep]:
    return list(linear_search(array, target))
