"""
recorder.py — Run Recorder & Analytics
========================================
Runs one registered algorithm to completion, keeps its step tuple, and
computes the numbers the analytics panel and comparison mode need.

Usage:
    rec = Recorder()
    rec.start("merge", elements=values)
    metrics = rec.run_to_completion()
    stepper = rec.stepper()          # loaded with steps + display frames
    rec.export()                     # JSON-ready snapshot

    rec.start("dijkstra", graph=g, start_id="A")
    rec.run_to_completion()

Comparison Mode:
    Run two Recorders on the SAME input, then compare(rec1, rec2).
"""

import logging
import sys
import time
from collections import Counter
from dataclasses import dataclass, field, asdict
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from structures import ArrayElement, Graph
from algorithms import ARRAY, GRAPH, AlgoInfo, get_algorithm
from algorithms.errors import InvalidInputError, UnknownAlgorithmError
from algorithms.step import Step, StepType
from engine.replay import array_frames, final_distances, graph_frames, replay_array, visit_order
from engine.stepper import Stepper

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:         str   = ""
    algo_label:       str   = ""
    family:           str   = ""
    input_size:       int   = 0          # elements, or nodes for graphs
    total_steps:      int   = 0
    comparisons:      int   = 0
    swaps:            int   = 0          # two-index exchanges
    placements:       int   = 0          # one-index writes (merge / insertion)
    highlights:       int   = 0
    sort_marks:       int   = 0
    visits:           int   = 0
    distance_updates: int   = 0
    wall_time_ms:     float = 0.0
    memory_bytes:     int   = 0          # approx size of the step buffer


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_steps:       str = ""
    winner_comparisons: str = ""
    winner_writes:      str = ""   # swaps + placements

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps    : Step tuple from the last run.
        metrics  : RunMetrics (available after run_to_completion).
    """

    def __init__(self):
        self.steps:   Tuple[Step, ...]     = ()
        self.metrics: Optional[RunMetrics] = None

        self._algo_info: Optional[AlgoInfo]             = None
        self._elements:  List[ArrayElement]             = []
        self._graph:     Optional[Graph]                = None
        self._start_id:  Optional[str]                  = None
        self._call:      Optional[Callable[[], Tuple[Step, ...]]] = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(
        self,
        algo_key: str,
        elements: Optional[Sequence[ArrayElement]] = None,
        graph: Optional[Graph] = None,
        start_id: Optional[str] = None,
    ) -> None:
        """Bind an algorithm to its input snapshot.  Nothing runs yet."""
        info = get_algorithm(algo_key)
        if info is None:
            raise UnknownAlgorithmError(algo_key)

        self._algo_info = info
        self.steps      = ()
        self.metrics    = None

        if info.family == ARRAY:
            if elements is None:
                raise InvalidInputError(f"{info.label} needs an array of elements")
            self._elements = list(elements)
            self._graph    = None
            self._start_id = None
            snapshot = list(self._elements)
            self._call = lambda: info.fn(snapshot)
        else:
            if graph is None or start_id is None:
                raise InvalidInputError(f"{info.label} needs a graph and a start node")
            self._elements = []
            self._graph    = graph
            self._start_id = start_id
            nodes, edges = graph.snapshot()
            self._call = lambda: info.fn(nodes, edges, start_id)

    def run_to_completion(self) -> RunMetrics:
        """Run the algorithm, keep every step, compute metrics."""
        if self._call is None:
            raise RuntimeError("Call start() first.")

        started = time.monotonic()
        self.steps = self._call()
        wall_ms = (time.monotonic() - started) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        logger.info(
            "%s finished: %d steps (%d compares, %d swaps) in %.2f ms",
            self.metrics.algo_key, self.metrics.total_steps,
            self.metrics.comparisons, self.metrics.swaps, self.metrics.wall_time_ms,
        )
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Playback & results
    # ------------------------------------------------------------------
    def stepper(self, on_step: Optional[Callable[[Any], None]] = None) -> Stepper:
        """A Stepper loaded with this run's steps and display frames."""
        info = self._require_run()
        if info.family == ARRAY:
            frames = array_frames(self._elements, self.steps)
        else:
            frames = graph_frames(self.steps)
        stepper = Stepper(family=info.family, on_step=on_step)
        stepper.start(self.steps, frames)
        return stepper

    def final_order(self) -> List[ArrayElement]:
        """Array runs: the element order after replaying every step."""
        self._require_run()
        return replay_array(self._elements, self.steps)

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        info = self._algo_info
        data: Dict[str, Any] = {
            "algo_key": info.key if info else "",
            "family":   info.family if info else "",
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "steps":    [s.to_dict() for s in self.steps],
        }
        if info is not None and info.family == ARRAY:
            data["input"] = [e.to_dict() for e in self._elements]
            if self.metrics is not None:
                data["final"] = [e.to_dict() for e in self.final_order()]
        elif info is not None and info.family == GRAPH:
            data["graph"] = self._graph.to_dict() if self._graph else {}
            data["start"] = self._start_id
            data["visit_order"] = visit_order(self.steps)
            if info.weighted:
                data["distances"] = final_distances(self.steps)
        return data

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _require_run(self) -> AlgoInfo:
        if self._algo_info is None or self.metrics is None:
            raise RuntimeError("Call start() and run_to_completion() first.")
        return self._algo_info

    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info
        counts = Counter(s.type for s in self.steps)
        placements = sum(1 for s in self.steps if s.is_placement)

        mem = sys.getsizeof(self.steps)
        for s in self.steps:
            mem += sys.getsizeof(s)

        if info.family == ARRAY:
            size = len(self._elements)
        else:
            size = self._graph.node_count() if self._graph else 0

        return RunMetrics(
            algo_key=info.key,
            algo_label=info.label,
            family=info.family,
            input_size=size,
            total_steps=len(self.steps),
            comparisons=counts[StepType.COMPARE],
            swaps=counts[StepType.SWAP] - placements,
            placements=placements,
            highlights=counts[StepType.HIGHLIGHT],
            sort_marks=counts[StepType.SORT],
            visits=counts[StepType.VISIT],
            distance_updates=counts[StepType.DISTANCE],
            wall_time_ms=round(wall_ms, 2),
            memory_bytes=mem,
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        return l.algo_label if l_val < r_val else r.algo_label

    return ComparisonResult(
        left=l,
        right=r,
        winner_steps=winner(l.total_steps, r.total_steps),
        winner_comparisons=winner(l.comparisons, r.comparisons),
        winner_writes=winner(l.swaps + l.placements, r.swaps + r.placements),
    )
