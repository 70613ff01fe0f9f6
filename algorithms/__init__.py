"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every step-generating algorithm.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, fn, family, stable, …),
        …
    }

`family` says which snapshot the function takes:
    "array" → fn(elements)
    "graph" → fn(nodes, edges, start_id)

Tree traversals return id lists rather than Steps and live in their own
table (algorithms.traversals.TRAVERSALS).
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from algorithms.bubble_sort    import bubble_sort    as _bubble
from algorithms.quick_sort     import quick_sort     as _quick
from algorithms.merge_sort     import merge_sort     as _merge
from algorithms.selection_sort import selection_sort as _selection
from algorithms.insertion_sort import insertion_sort as _insertion
from algorithms.heap_sort      import heap_sort      as _heap
from algorithms.bfs            import bfs            as _bfs
from algorithms.dfs            import dfs            as _dfs
from algorithms.dijkstra       import dijkstra       as _dijkstra

ARRAY = "array"
GRAPH = "graph"


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                    # registry key, e.g. "bubble"
    label:            str                    # human label, e.g. "Bubble Sort"
    fn:               Callable               # the step generator
    family:           str                    # ARRAY or GRAPH
    stable:           bool     = False       # sorts only
    weighted:         bool     = False       # reads edge weights?
    tags:             List[str] = field(default_factory=list)
    complexity_time:  str      = ""
    complexity_space: str      = ""
    description:      str      = ""

    def to_dict(self) -> dict:
        return {
            "key":              self.key,
            "label":            self.label,
            "family":           self.family,
            "stable":           self.stable,
            "weighted":         self.weighted,
            "tags":             list(self.tags),
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", fn=_bubble, family=ARRAY, stable=True,
        tags=["comparison", "in-place"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Repeatedly swaps adjacent inversions; the largest value bubbles right each pass.",
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", fn=_quick, family=ARRAY,
        tags=["comparison", "in-place", "divide-and-conquer"],
        complexity_time="O(n log n) avg, O(n²) worst", complexity_space="O(log n)",
        description="Lomuto partition around the last element, then sorts each side.",
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", fn=_merge, family=ARRAY, stable=True,
        tags=["comparison", "divide-and-conquer"],
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Splits in halves, sorts each, merges the sorted runs back.",
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", fn=_selection, family=ARRAY,
        tags=["comparison", "in-place"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Finds the minimum of the unsorted tail and swaps it into place.",
    ),

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", fn=_insertion, family=ARRAY, stable=True,
        tags=["comparison", "in-place", "adaptive"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Grows a sorted prefix, shifting larger values right to make room.",
    ),

    "heap": AlgoInfo(
        key="heap", label="Heap Sort", fn=_heap, family=ARRAY,
        tags=["comparison", "in-place"],
        complexity_time="O(n log n)", complexity_space="O(1)",
        description="Builds a max-heap, then repeatedly moves the root to the end.",
    ),

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=_bfs, family=GRAPH,
        tags=["unweighted", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer by layer from the start node.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", fn=_dfs, family=GRAPH,
        tags=["unweighted", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives as deep as possible before backtracking.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", fn=_dijkstra, family=GRAPH, weighted=True,
        tags=["weighted", "shortest-path"],
        complexity_time="O(V² + E)", complexity_space="O(V)",
        description="Settles the closest unvisited node each round. Non-negative weights only.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_family(family: str) -> List[AlgoInfo]:
    return [a for a in REGISTRY.values() if a.family == family]


__all__ = [
    "ARRAY",
    "GRAPH",
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_family",
]
