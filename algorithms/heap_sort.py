"""
heap_sort.py — Heap Sort
=========================
Phase 1 (build max-heap): one HIGHLIGHT over the whole array, then heapify
every parent from ⌊n/2⌋−1 down to 0.

Phase 2 (extract): SWAP root with the heap boundary, SORT the boundary,
re-heapify the shrunken heap.  A final SORT marks index 0.

Each heapify round emits HIGHLIGHT (current node), up to two COMPAREs
(left / right child against the current largest) and, when a child wins,
a SWAP before sifting on down.  The sift is a loop, not recursion.
"""

from typing import List, Sequence, Tuple

from structures.element import ArrayElement
from algorithms.step import Step, StepLog, fmt


def heap_sort(elements: Sequence[ArrayElement]) -> Tuple[Step, ...]:
    log  = StepLog()
    work = list(elements)
    n    = len(work)
    if n == 0:
        return log.freeze()

    log.highlight(range(n), "Building max heap from array")
    for i in range(n // 2 - 1, -1, -1):
        _heapify(work, n, i, log)

    for end in range(n - 1, 0, -1):
        log.swap(0, end, f"Moving largest element {fmt(work[0].value)} to position {end}")
        work[0], work[end] = work[end], work[0]
        log.mark_sorted([end], f"Element at position {end} is now in final position")
        _heapify(work, end, 0, log)

    log.mark_sorted([0], "Heap sort complete!")
    return log.freeze()


def _heapify(work: List[ArrayElement], size: int, i: int, log: StepLog) -> None:
    while True:
        largest = i
        left, right = 2 * i + 1, 2 * i + 2
        log.highlight([i], f"Heapifying at index {i}")

        if left < size:
            log.compare(
                left, largest,
                f"Comparing left child {fmt(work[left].value)} with parent {fmt(work[largest].value)}",
            )
            if work[left].value > work[largest].value:
                largest = left

        if right < size:
            log.compare(
                right, largest,
                f"Comparing right child {fmt(work[right].value)} with current largest {fmt(work[largest].value)}",
            )
            if work[right].value > work[largest].value:
                largest = right

        if largest == i:
            return

        log.swap(
            i, largest,
            f"Swapping {fmt(work[i].value)} with {fmt(work[largest].value)} to maintain heap property",
        )
        work[i], work[largest] = work[largest], work[i]
        i = largest
