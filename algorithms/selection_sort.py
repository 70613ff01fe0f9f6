"""
selection_sort.py — Selection Sort
===================================
For each position i: HIGHLIGHT the scan start, COMPARE every later slot
with the running minimum (HIGHLIGHT again when a new minimum turns up),
SWAP the minimum into i if it is elsewhere, then SORT i.  A trailing SORT
marks the last slot.  Not stable.
"""

from typing import Sequence, Tuple

from structures.element import ArrayElement
from algorithms.step import Step, StepLog, fmt


def selection_sort(elements: Sequence[ArrayElement]) -> Tuple[Step, ...]:
    log  = StepLog()
    work = list(elements)
    n    = len(work)
    if n == 0:
        return log.freeze()

    for i in range(n - 1):
        min_idx = i
        log.highlight([i], f"Starting new pass, current position: {i}")

        for j in range(i + 1, n):
            log.compare(min_idx, j, f"Comparing {fmt(work[min_idx].value)} with {fmt(work[j].value)}")
            if work[j].value < work[min_idx].value:
                min_idx = j
                log.highlight([j], f"New minimum found: {fmt(work[j].value)} at position {j}")

        if min_idx != i:
            log.swap(
                i, min_idx,
                f"Swapping {fmt(work[i].value)} with minimum {fmt(work[min_idx].value)}",
            )
            work[i], work[min_idx] = work[min_idx], work[i]

        log.mark_sorted([i], f"Position {i} is now sorted with value {fmt(work[i].value)}")

    log.mark_sorted([n - 1], "Selection sort complete!")
    return log.freeze()
