"""
merge_sort.py — Merge Sort
==========================
Top-down merge sort.  The recursion is linearised with `yield from`, so
steps come out in true execution order: a range's DIVIDE step, then the
whole left sub-trace, then the whole right sub-trace, then its MERGE.

`sorted_indices` here means "sorted relative to its merged range": a
base case marks its own index, a merge marks the prefix placed so far and
finally the full range.  The very last step marks every index.
"""

from typing import Generator, List, Sequence

from algorithms.step import ArrayStep, ArrayStepBuilder, StepEvent


PSEUDOCODE: List[str] = [
    "def MergeSort(arr, left, right):",              # 0
    "    if left ≥ right: return",                   # 1
    "    mid ← (left + right) // 2",                 # 2
    "    MergeSort(arr, left, mid)",                 # 3
    "    MergeSort(arr, mid+1, right)",              # 4
    "    Merge(arr, left, mid, right)",              # 5
    "def Merge(arr, left, mid, right):",             # 6
    "    L ← arr[left..mid];  R ← arr[mid+1..right]", # 7
    "    while L and R not exhausted:",              # 8
    "        take the smaller head into arr[k]",     # 9
    "    copy what remains of L, then of R",         # 10
]

Steps = Generator[ArrayStep, None, None]


def merge_sort(array: Sequence[int]) -> Steps:
    sb = ArrayStepBuilder(array)
    n = len(sb.array)

    yield sb.build(StepEvent.INIT, "Initial array.")

    if n > 0:
        yield from _sort_range(sb, 0, n - 1)

    sb.mark_all_sorted()
    sb.pseudocode_line = 0
    yield sb.build(StepEvent.DONE, "Array is sorted.", is_final=True)


def _sort_range(sb: ArrayStepBuilder, left: int, right: int) -> Steps:
    arr = sb.array
    if left > right:
        return
    if left == right:
        sb.pseudocode_line = 1
        yield sb.build(
            StepEvent.BASE_CASE,
            f"Base case: subarray [{arr[left]}] at index {left} is trivially sorted.",
            highlight=(left,),
            sorted_indices=(left,),
        )
        return

    mid = (left + right) // 2
    sb.pseudocode_line = 2
    yield sb.build(
        StepEvent.DIVIDE,
        f"Dividing range {left}-{right} into {left}-{mid} and {mid + 1}-{right}.",
        sorted_indices=(),
    )

    yield from _sort_range(sb, left, mid)
    yield from _sort_range(sb, mid + 1, right)
    yield from _merge(sb, left, mid, right)


def _merge(sb: ArrayStepBuilder, left: int, mid: int, right: int) -> Steps:
    arr = sb.array
    left_part = arr[left:mid + 1]
    right_part = arr[mid + 1:right + 1]
    i = j = 0
    k = left

    sb.pseudocode_line = 7
    yield sb.build(
        StepEvent.MERGE,
        f"Merging [{', '.join(map(str, left_part))}] (indices {left}-{mid}) and "
        f"[{', '.join(map(str, right_part))}] (indices {mid + 1}-{right}).",
        highlight=range(left, right + 1),
        sorted_indices=(),
    )

    def placed() -> ArrayStep:
        sb.pseudocode_line = 9
        return sb.build(
            StepEvent.PLACE,
            f"Placed {arr[k]} at index {k}. Merged part: [{', '.join(map(str, arr[left:k + 1]))}].",
            highlight=(k,),
            sorted_indices=range(left, k + 1),
        )

    while i < len(left_part) and j < len(right_part):
        sb.pseudocode_line = 8
        yield sb.build(
            StepEvent.COMPARE,
            f"Comparing {left_part[i]} (left subarray) and {right_part[j]} (right subarray).",
            highlight=(left + i, mid + 1 + j),
            sorted_indices=range(left, k),
        )
        sb.pseudocode_line = 9
        if left_part[i] <= right_part[j]:
            yield sb.build(
                StepEvent.TAKE,
                f"{left_part[i]} <= {right_part[j]}. Taking {left_part[i]} from the left subarray.",
                highlight=(left + i,),
                sorted_indices=range(left, k),
            )
            arr[k] = left_part[i]
            i += 1
        else:
            yield sb.build(
                StepEvent.TAKE,
                f"{left_part[i]} > {right_part[j]}. Taking {right_part[j]} from the right subarray.",
                highlight=(mid + 1 + j,),
                sorted_indices=range(left, k),
            )
            arr[k] = right_part[j]
            j += 1
        yield placed()
        k += 1

    while i < len(left_part):
        sb.pseudocode_line = 10
        yield sb.build(
            StepEvent.TAKE,
            f"Copying remaining element {left_part[i]} from the left subarray.",
            highlight=(left + i,),
            sorted_indices=range(left, k),
        )
        arr[k] = left_part[i]
        yield placed()
        i += 1
        k += 1

    while j < len(right_part):
        sb.pseudocode_line = 10
        yield sb.build(
            StepEvent.TAKE,
            f"Copying remaining element {right_part[j]} from the right subarray.",
            highlight=(mid + 1 + j,),
            sorted_indices=range(left, k),
        )
        arr[k] = right_part[j]
        yield placed()
        j += 1
        k += 1

    sb.pseudocode_line = 5
    yield sb.build(
        StepEvent.MERGE,
        f"Finished merging indices {left}-{right}. Result: [{', '.join(map(str, arr[left:right + 1]))}].",
        sorted_indices=range(left, right + 1),
    )


def merge_sort_steps(array: Sequence[int]) -> List[ArrayStep]:
    return list(merge_sort(array))
