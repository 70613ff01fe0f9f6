"""
bubble_sort.py — Bubble Sort
=============================
Emits, per pass:
  1. COMPARE before every adjacent comparison
  2. SWAP only when the pair is inverted
  3. SORT for the slot the pass just finalised (rightmost)
and a closing SORT on index 0 once all n−1 passes are done.

Counts do not depend on input order: n(n−1)/2 compares and n sort steps.
Stable — equal neighbours are never swapped.
"""

from typing import Sequence, Tuple

from structures.element import ArrayElement
from algorithms.step import Step, StepLog, fmt


def bubble_sort(elements: Sequence[ArrayElement]) -> Tuple[Step, ...]:
    log  = StepLog()
    work = list(elements)
    n    = len(work)
    if n == 0:
        return log.freeze()

    for i in range(n - 1):
        for j in range(n - i - 1):
            a, b = work[j], work[j + 1]
            log.compare(j, j + 1, f"Comparing {fmt(a.value)} and {fmt(b.value)} at positions {j} and {j + 1}")
            if a.value > b.value:
                log.swap(j, j + 1, f"Swapping {fmt(a.value)} and {fmt(b.value)} at positions {j} and {j + 1}")
                work[j], work[j + 1] = b, a
        last = n - i - 1
        log.mark_sorted([last], f"Element {fmt(work[last].value)} at position {last} is in its final position")

    log.mark_sorted([0], "Array is completely sorted!")
    return log.freeze()
