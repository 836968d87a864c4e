"""
bubble_sort.py — Bubble Sort
============================
Repeated passes over the unsorted prefix, swapping adjacent pairs that
are out of order.  Stops after the first pass with zero swaps.

Steps emitted:
  1. Initial array
  2. Each adjacent comparison                      →  COMPARE
  3. Swap decision: SWAP (before) + SWAPPED (after), or NO_SWAP
  4. End of each pass: last unsorted index sorted  →  MARK_SORTED
  5. Everything remaining marked sorted            →  DONE
"""

from typing import Generator, List, Sequence

from algorithms.step import ArrayStep, ArrayStepBuilder, StepEvent


PSEUDOCODE: List[str] = [
    "def BubbleSort(arr):",                          # 0
    "    k ← len(arr)",                              # 1
    "    repeat:",                                   # 2
    "        swapped ← false",                       # 3
    "        for i in 0 .. k-2:",                    # 4
    "            if arr[i] > arr[i+1]:",             # 5
    "                swap(arr[i], arr[i+1])",        # 6
    "                swapped ← true",                # 7
    "        mark arr[k-1] sorted;  k ← k - 1",      # 8
    "    until not swapped",                         # 9
    "    return arr",                                # 10
]


def bubble_sort(array: Sequence[int]) -> Generator[ArrayStep, None, None]:
    sb = ArrayStepBuilder(array)
    arr = sb.array
    n = len(arr)
    k = n

    sb.pseudocode_line = 0
    yield sb.build(StepEvent.INIT, "Initial array.")

    swapped = True
    while swapped:
        swapped = False
        for i in range(k - 1):
            sb.pseudocode_line = 5
            yield sb.build(StepEvent.COMPARE, f"Comparing {arr[i]} and {arr[i + 1]}.", highlight=(i, i + 1))

            if arr[i] > arr[i + 1]:
                sb.pseudocode_line = 6
                yield sb.build(StepEvent.SWAP, f"{arr[i]} > {arr[i + 1]}, swapping.", highlight=(i, i + 1))
                sb.swap(i, i + 1)
                swapped = True
                yield sb.build(
                    StepEvent.SWAPPED,
                    f"Swapped. Array is now [{', '.join(map(str, arr))}].",
                    highlight=(i, i + 1),
                )
            else:
                yield sb.build(StepEvent.NO_SWAP, f"{arr[i]} <= {arr[i + 1]}, no swap needed.", highlight=(i, i + 1))

        if k > 0:
            sb.pseudocode_line = 8
            sb.mark_sorted(k - 1)
            yield sb.build(StepEvent.MARK_SORTED, f"End of pass. {arr[k - 1]} is now in its sorted position.")
        k -= 1

    sb.pseudocode_line = 10
    sb.mark_all_sorted()
    yield sb.build(StepEvent.DONE, "No swaps in the last pass. Array is sorted.", is_final=True)


def bubble_sort_steps(array: Sequence[int]) -> List[ArrayStep]:
    return list(bubble_sort(array))
