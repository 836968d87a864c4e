"""
quick_sort.py — Quick Sort (Lomuto partition)
==============================================
Pivot = last element of the current range.  Elements strictly smaller
than the pivot are swapped into the growing "< pivot" prefix, then the
pivot is swapped into the slot right after it, which is its final
position.

Recursion is linearised with `yield from`: one range's partition trace,
then its left sub-range, then its right sub-range.  Ranges of size 1
emit a BASE_CASE step; empty ranges emit nothing.

Each pivot index joins `sorted_indices` the moment it lands.
"""

from typing import Generator, List, Sequence

from algorithms.step import ArrayStep, ArrayStepBuilder, StepEvent


PSEUDOCODE: List[str] = [
    "def QuickSort(arr, low, high):",                # 0
    "    if low < high:",                            # 1
    "        p ← Partition(arr, low, high)",         # 2
    "        QuickSort(arr, low, p-1)",              # 3
    "        QuickSort(arr, p+1, high)",             # 4
    "def Partition(arr, low, high):",                # 5
    "    pivot ← arr[high];  i ← low - 1",           # 6
    "    for j in low .. high-1:",                   # 7
    "        if arr[j] < pivot:",                    # 8
    "            i ← i + 1;  swap(arr[i], arr[j])",  # 9
    "    swap(arr[i+1], arr[high])",                 # 10
    "    return i + 1",                              # 11
]

Steps = Generator[ArrayStep, None, None]


def quick_sort(array: Sequence[int]) -> Steps:
    sb = ArrayStepBuilder(array)

    yield sb.build(StepEvent.INIT, "Initial array.")

    yield from _sort_range(sb, 0, len(sb.array) - 1)

    sb.pseudocode_line = 0
    sb.mark_all_sorted()
    yield sb.build(StepEvent.DONE, "Array is sorted.", is_final=True)


def _sort_range(sb: ArrayStepBuilder, low: int, high: int) -> Steps:
    arr = sb.array
    if low < high:
        p = yield from _partition(sb, low, high)
        sb.pseudocode_line = 3
        yield sb.build(
            StepEvent.RECURSE,
            f"Recursively sorting left subarray ({low}-{p - 1}) and right subarray ({p + 1}-{high}). "
            f"Pivot {arr[p]} is sorted.",
        )
        yield from _sort_range(sb, low, p - 1)
        yield from _sort_range(sb, p + 1, high)
    elif low == high:
        sb.pseudocode_line = 1
        sb.mark_sorted(low)
        yield sb.build(
            StepEvent.BASE_CASE,
            f"Base case: subarray at index {low} (value {arr[low]}) has size 1, considered sorted.",
            highlight=(low,),
        )


def _partition(sb: ArrayStepBuilder, low: int, high: int) -> Generator[ArrayStep, None, int]:
    """Yields the partition trace; returns the pivot's final index."""
    arr = sb.array
    pivot_value = arr[high]

    sb.pseudocode_line = 6
    yield sb.build(
        StepEvent.PIVOT,
        f"Choosing pivot: {pivot_value} (at index {high}). Partitioning range {low}-{high}.",
        highlight=(high,),
        pivot=high,
    )

    i = low - 1
    for j in range(low, high):
        sb.pseudocode_line = 8
        yield sb.build(
            StepEvent.COMPARE,
            f"Comparing element at index {j} ({arr[j]}) with pivot {pivot_value}. i is at {i}.",
            highlight=(high, i, j),
            pivot=high,
        )

        if arr[j] < pivot_value:
            i += 1
            sb.pseudocode_line = 9
            if i != j:
                yield sb.build(
                    StepEvent.SWAP,
                    f"{arr[j]} < {pivot_value}. Swapping index {i} ({arr[i]}) with index {j} ({arr[j]}).",
                    highlight=(high, i, j),
                    pivot=high,
                )
                sb.swap(i, j)
                yield sb.build(
                    StepEvent.SWAPPED,
                    f"Swapped. i is now {i}. Array: [{', '.join(map(str, arr))}].",
                    highlight=(high, i, j),
                    pivot=high,
                )
            else:
                yield sb.build(
                    StepEvent.NO_SWAP,
                    f"{arr[j]} < {pivot_value}. Incrementing i to {i}. No swap needed as i == j.",
                    highlight=(high, i, j),
                    pivot=high,
                )
        else:
            yield sb.build(
                StepEvent.NO_SWAP,
                f"{arr[j]} >= {pivot_value}. No swap needed. Moving j forward.",
                highlight=(high, i, j),
                pivot=high,
            )

    final = i + 1
    sb.pseudocode_line = 10
    if final != high:
        yield sb.build(
            StepEvent.SWAP,
            f"Partition of {low}-{high} complete. Swapping pivot {arr[high]} (index {high}) "
            f"with {arr[final]} (index {final}).",
            highlight=(final, high),
            pivot=high,
        )
        sb.swap(final, high)
        sb.mark_sorted(final)
        yield sb.build(
            StepEvent.PIVOT_PLACED,
            f"Pivot {arr[final]} is now at its final sorted position (index {final}). "
            f"Array: [{', '.join(map(str, arr))}].",
            highlight=(final,),
            pivot=final,
        )
    else:
        sb.mark_sorted(final)
        yield sb.build(
            StepEvent.PIVOT_PLACED,
            f"Pivot {arr[final]} (at index {final}) was already in its final sorted position.",
            highlight=(final,),
            pivot=final,
        )
    return final


def quick_sort_steps(array: Sequence[int]) -> List[ArrayStep]:
    return list(quick_sort(array))
