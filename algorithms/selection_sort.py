"""
selection_sort.py — Selection Sort
==================================
For each position i, scan the unsorted suffix for its minimum and swap
it into place.
"""

from typing import Generator, List, Sequence

from algorithms.step import ArrayStep, ArrayStepBuilder, StepEvent


PSEUDOCODE: List[str] = [
    "def SelectionSort(arr):",                       # 0
    "    for i in 0 .. n-2:",                        # 1
    "        min ← i",                               # 2
    "        for j in i+1 .. n-1:",                  # 3
    "            if arr[j] < arr[min]:",             # 4
    "                min ← j",                       # 5
    "        if min ≠ i: swap(arr[i], arr[min])",    # 6
    "        mark arr[i] sorted",                    # 7
    "    mark arr[n-1] sorted",                      # 8
]


def selection_sort(array: Sequence[int]) -> Generator[ArrayStep, None, None]:
    sb = ArrayStepBuilder(array)
    arr = sb.array
    n = len(arr)

    yield sb.build(StepEvent.INIT, "Initial array.")

    for i in range(n - 1):
        min_index = i
        sb.pseudocode_line = 2
        yield sb.build(
            StepEvent.CHECK,
            f"Finding the minimum of the unsorted part (from index {i}). "
            f"Current minimum guess: {arr[i]} at index {i}.",
            highlight=(i,),
        )

        for j in range(i + 1, n):
            sb.pseudocode_line = 4
            yield sb.build(
                StepEvent.COMPARE,
                f"Comparing element at index {j} ({arr[j]}) with current minimum "
                f"({arr[min_index]} at index {min_index}).",
                highlight=(i, j, min_index),
            )
            if arr[j] < arr[min_index]:
                previous = min_index
                min_index = j
                sb.pseudocode_line = 5
                yield sb.build(
                    StepEvent.NEW_MIN,
                    f"Found new minimum: {arr[min_index]} at index {min_index}. "
                    f"(Previous was {arr[previous]} at index {previous})",
                    highlight=(i, j, min_index),
                )

        sb.pseudocode_line = 6
        if min_index != i:
            yield sb.build(
                StepEvent.SWAP,
                f"Minimum for pass {i} is {arr[min_index]} at index {min_index}. "
                f"Swapping with element at index {i} ({arr[i]}).",
                highlight=(i, min_index),
            )
            sb.swap(i, min_index)
            yield sb.build(
                StepEvent.SWAPPED,
                f"Swapped. Array is now [{', '.join(map(str, arr))}].",
                highlight=(i, min_index),
            )
        else:
            yield sb.build(
                StepEvent.NO_SWAP,
                f"Element at index {i} ({arr[i]}) is already the minimum for this pass. No swap needed.",
                highlight=(i,),
            )

        sb.pseudocode_line = 7
        sb.mark_sorted(i)
        yield sb.build(StepEvent.MARK_SORTED, f"Element {arr[i]} at index {i} is now sorted.")

    sb.pseudocode_line = 8
    sb.mark_all_sorted()
    message = "Array is sorted." if n else "Array is empty, nothing to sort."
    yield sb.build(StepEvent.DONE, message, is_final=True)


def selection_sort_steps(array: Sequence[int]) -> List[ArrayStep]:
    return list(selection_sort(array))
