"""
merge_sort.py — Merge Sort (top-down)
======================================
  • HIGHLIGHT the whole range at every split and again on entering its merge
  • COMPARE each left-run head against each right-run head (original slots)
  • SWAP with a single index for every element written back — a placement;
    the step names the element so replay can write it
  • a final SORT spanning the whole array

Recursion depth is log2(n), so the helper stays recursive.  Stable: ties
take the left-run element first.
"""

from typing import List, Sequence, Tuple

from structures.element import ArrayElement
from algorithms.step import Step, StepLog, fmt


def merge_sort(elements: Sequence[ArrayElement]) -> Tuple[Step, ...]:
    log  = StepLog()
    work = list(elements)
    if not work:
        return log.freeze()

    _sort_range(work, 0, len(work) - 1, log)
    log.mark_sorted(range(len(work)), "Merge sort complete!")
    return log.freeze()


def _sort_range(work: List[ArrayElement], left: int, right: int, log: StepLog) -> None:
    if left >= right:
        return
    mid = (left + right) // 2
    log.highlight(range(left, right + 1), f"Dividing array from {left} to {right}")
    _sort_range(work, left, mid, log)
    _sort_range(work, mid + 1, right, log)
    _merge(work, left, mid, right, log)


def _merge(work: List[ArrayElement], left: int, mid: int, right: int, log: StepLog) -> None:
    left_run  = work[left:mid + 1]
    right_run = work[mid + 1:right + 1]

    log.highlight(
        range(left, right + 1),
        f"Merging subarrays from {left} to {mid} and {mid + 1} to {right}",
    )

    i = j = 0
    k = left
    while i < len(left_run) and j < len(right_run):
        a, b = left_run[i], right_run[j]
        log.compare(left + i, mid + 1 + j, f"Comparing {fmt(a.value)} and {fmt(b.value)}")
        if a.value <= b.value:
            chosen = a
            i += 1
        else:
            chosen = b
            j += 1
        log.place(k, chosen.id, f"Placing {fmt(chosen.value)} at position {k}")
        work[k] = chosen
        k += 1

    # drain whichever run is left over
    for rest in (left_run[i:], right_run[j:]):
        for elem in rest:
            log.place(k, elem.id, f"Placing remaining {fmt(elem.value)} at position {k}")
            work[k] = elem
            k += 1
