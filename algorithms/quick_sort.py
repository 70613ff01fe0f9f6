"""
quick_sort.py — Quick Sort (Lomuto partition)
==============================================
Pivot is always the last element of the range.

Per partition:
  1. HIGHLIGHT the pivot slot
  2. COMPARE every candidate against the pivot   (indices [j, high])
  3. SWAP a smaller candidate forward — skipped when it is already in place
  4. SWAP the pivot into its final slot

Sub-ranges are handled [low, p−1] first, then [p+1, high], driven by an
explicit stack so a sorted input cannot exhaust Python's recursion limit.
Not stable.
"""

from typing import List, Sequence, Tuple

from structures.element import ArrayElement
from algorithms.step import Step, StepLog, fmt


def quick_sort(elements: Sequence[ArrayElement]) -> Tuple[Step, ...]:
    log  = StepLog()
    work = list(elements)

    stack: List[Tuple[int, int]] = [(0, len(work) - 1)]
    while stack:
        low, high = stack.pop()
        if low >= high:
            continue
        p = _partition(work, low, high, log)
        # pushed in reverse so the left range is finished first
        stack.append((p + 1, high))
        stack.append((low, p - 1))

    return log.freeze()


def _partition(work: List[ArrayElement], low: int, high: int, log: StepLog) -> int:
    pivot = work[high].value
    log.highlight([high], f"Choosing pivot: {fmt(pivot)}")

    i = low - 1
    for j in range(low, high):
        log.compare(j, high, f"Comparing {fmt(work[j].value)} with pivot {fmt(pivot)}")
        if work[j].value < pivot:
            i += 1
            if i != j:
                log.swap(i, j, f"Swapping {fmt(work[i].value)} and {fmt(work[j].value)}")
                work[i], work[j] = work[j], work[i]

    log.swap(i + 1, high, f"Placing pivot {fmt(pivot)} at position {i + 1}")
    work[i + 1], work[high] = work[high], work[i + 1]
    return i + 1
