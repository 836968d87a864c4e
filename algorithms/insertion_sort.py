"""
insertion_sort.py — Insertion Sort
==================================
Grows a sorted prefix one element at a time: pick arr[i], shift every
larger element of the prefix one slot right, drop the picked value into
the gap.

While shifting, the working array briefly holds a duplicate of the
shifted value (the picked value lives in `current` until it is placed).
The steps show exactly that, like the textbook trace.
"""

from typing import Generator, List, Sequence

from algorithms.step import ArrayStep, ArrayStepBuilder, StepEvent


PSEUDOCODE: List[str] = [
    "def InsertionSort(arr):",                       # 0
    "    mark arr[0] sorted",                        # 1
    "    for i in 1 .. n-1:",                        # 2
    "        current ← arr[i];  j ← i - 1",          # 3
    "        while j ≥ 0 and arr[j] > current:",     # 4
    "            arr[j+1] ← arr[j]",                 # 5
    "            j ← j - 1",                         # 6
    "        arr[j+1] ← current",                    # 7
    "        mark arr[0..i] sorted",                 # 8
]


def insertion_sort(array: Sequence[int]) -> Generator[ArrayStep, None, None]:
    sb = ArrayStepBuilder(array)
    arr = sb.array
    n = len(arr)

    yield sb.build(StepEvent.INIT, "Initial array.")

    if n > 0:
        sb.pseudocode_line = 1
        sb.mark_sorted(0)
        yield sb.build(StepEvent.MARK_SORTED, "First element is considered sorted.", highlight=(0,))

    for i in range(1, n):
        current = arr[i]
        j = i - 1
        sb.pseudocode_line = 3
        yield sb.build(
            StepEvent.PICK,
            f"Picking element {current} at index {i} to insert into the sorted part.",
            highlight=(i,),
        )

        while j >= 0 and arr[j] > current:
            sb.pseudocode_line = 4
            yield sb.build(
                StepEvent.SHIFT,
                f"Comparing {current} with {arr[j]} at index {j}. "
                f"Since {arr[j]} > {current}, shift {arr[j]} to the right.",
                highlight=(i, j),
            )
            arr[j + 1] = arr[j]
            sb.pseudocode_line = 5
            yield sb.build(
                StepEvent.SHIFTED,
                f"Shifted {arr[j + 1]} from index {j} to {j + 1}. Array: [{', '.join(map(str, arr))}].",
                highlight=(i, j + 1),
            )
            j -= 1

        arr[j + 1] = current
        sb.pseudocode_line = 7
        sb.set_sorted(range(i + 1))
        if j + 1 == i:
            message = f"{current} is already in its correct position. Elements up to index {i} are now sorted."
        else:
            message = (
                f"Inserted {current} at index {j + 1}. Array: [{', '.join(map(str, arr))}]. "
                f"Elements up to index {i} are now sorted."
            )
        yield sb.build(StepEvent.PLACE, message, highlight=(j + 1,))

    sb.pseudocode_line = 8
    sb.mark_all_sorted()
    yield sb.build(StepEvent.DONE, "Array is sorted.", is_final=True)


def insertion_sort_steps(array: Sequence[int]) -> List[ArrayStep]:
    return list(insertion_sort(array))
