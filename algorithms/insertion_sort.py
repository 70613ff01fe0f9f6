"""
insertion_sort.py — Insertion Sort
===================================
Slot 0 is SORT-ed immediately.  For every later key:
  1. HIGHLIGHT the key about to enter the sorted prefix
  2. per larger element on its left: COMPARE, then a placement SWAP that
     shifts it one slot right
  3. a placement SWAP dropping the key into the gap
  4. SORT spanning the prefix [0, i]
Stable: the scan stops at the first element that is not larger.
"""

from typing import Sequence, Tuple

from structures.element import ArrayElement
from algorithms.step import Step, StepLog, fmt


def insertion_sort(elements: Sequence[ArrayElement]) -> Tuple[Step, ...]:
    log  = StepLog()
    work = list(elements)
    n    = len(work)
    if n == 0:
        return log.freeze()

    log.mark_sorted([0], "First element is considered sorted")

    for i in range(1, n):
        key = work[i]
        j = i - 1
        log.highlight([i], f"Inserting {fmt(key.value)} into sorted portion")

        while j >= 0 and work[j].value > key.value:
            moving = work[j]
            log.compare(j, j + 1, f"Comparing {fmt(moving.value)} with {fmt(key.value)}")
            log.place(j + 1, moving.id, f"Moving {fmt(moving.value)} one position right")
            work[j + 1] = moving
            j -= 1

        log.place(j + 1, key.id, f"Placing {fmt(key.value)} at position {j + 1}")
        work[j + 1] = key
        log.mark_sorted(range(i + 1), f"First {i + 1} elements are now sorted")

    return log.freeze()
