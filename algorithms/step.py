"""
step.py — Visualization Step
=============================
Every algorithm runs to completion up front and returns a tuple of Step
objects.  A Step describes ONE micro-operation the animation should show:

    • compare    – two array slots are being compared
    • swap       – two slots exchange contents, or (one index) an element
                   is written into a slot ("placement")
    • sort       – slots reached their final position
    • highlight  – slots / a node drawn attention to (pivot, queue push, …)
    • visit      – a node is processed
    • distance   – a node's tentative distance improved (Dijkstra)

Design decisions:
  - Step is a frozen dataclass.  The algorithm is the only writer; the
    stepper / replay layer / API are pure readers, and a step tuple can be
    replayed any number of times in either direction.
  - Array steps fill `indices`, graph steps fill `node_ids`, never both.
  - `description` is rendered when the step is created, with the operand
    values as they were BEFORE the operation (a swap reads pre-swap values).
  - A placement also names the element that lands in the slot
    (`element_id`), which is what makes merge / insertion sort replayable.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

Number = Union[int, float]


class StepType(str, Enum):
    COMPARE   = "compare"
    SWAP      = "swap"
    VISIT     = "visit"
    HIGHLIGHT = "highlight"
    SORT      = "sort"
    DISTANCE  = "distance"


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        type        : StepType tag.
        description : Human-readable explanation, values already substituted.
        indices     : Array positions (array algorithms only).
        node_ids    : Node identifiers (graph algorithms only).
        element_id  : ID of the element written by a one-index swap.
        distance    : New tentative distance carried by a DISTANCE step.
    """

    type:        StepType
    description: str                        = ""
    indices:     Optional[Tuple[int, ...]]  = None
    node_ids:    Optional[Tuple[str, ...]]  = None
    element_id:  Optional[str]              = None
    distance:    Optional[Number]           = None

    def __post_init__(self):
        if (self.indices is None) == (self.node_ids is None):
            raise ValueError("A step carries exactly one of indices / node_ids")
        # normalise lists handed in by callers
        object.__setattr__(self, "type", StepType(self.type))
        if self.indices is not None:
            object.__setattr__(self, "indices", tuple(self.indices))
        if self.node_ids is not None:
            object.__setattr__(self, "node_ids", tuple(self.node_ids))

    @property
    def is_placement(self) -> bool:
        return self.type is StepType.SWAP and self.indices is not None and len(self.indices) == 1

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.type.value, "description": self.description}
        if self.indices is not None:
            data["indices"] = list(self.indices)
        if self.node_ids is not None:
            data["node_ids"] = list(self.node_ids)
        if self.element_id is not None:
            data["element_id"] = self.element_id
        if self.distance is not None:
            data["distance"] = self.distance
        return data


def fmt(value: Number) -> str:
    """Render 3.0 as "3" and 2.5 as "2.5" inside descriptions."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# ---------------------------------------------------------------------------
# Append-only log the algorithms write into
# ---------------------------------------------------------------------------
class StepLog:
    """
    Mutable scratch-pad the algorithms append to, frozen once at the end.

    Usage inside an algorithm:
        log = StepLog()
        log.compare(j, j + 1, f"Comparing {a} and {b}")
        ...
        return log.freeze()
    """

    def __init__(self):
        self._steps: List[Step] = []

    # -- array steps --
    def compare(self, i: int, j: int, description: str) -> None:
        self._append(Step(StepType.COMPARE, description, indices=(i, j)))

    def swap(self, i: int, j: int, description: str) -> None:
        self._append(Step(StepType.SWAP, description, indices=(i, j)))

    def place(self, index: int, element_id: str, description: str) -> None:
        self._append(Step(StepType.SWAP, description, indices=(index,), element_id=element_id))

    def highlight(self, indices: Iterable[int], description: str) -> None:
        self._append(Step(StepType.HIGHLIGHT, description, indices=tuple(indices)))

    def mark_sorted(self, indices: Iterable[int], description: str) -> None:
        self._append(Step(StepType.SORT, description, indices=tuple(indices)))

    # -- graph steps --
    def visit(self, node_id: str, description: str) -> None:
        self._append(Step(StepType.VISIT, description, node_ids=(node_id,)))

    def highlight_node(self, node_id: str, description: str) -> None:
        self._append(Step(StepType.HIGHLIGHT, description, node_ids=(node_id,)))

    def distance(self, node_id: str, value: Number, description: str) -> None:
        self._append(Step(StepType.DISTANCE, description, node_ids=(node_id,), distance=value))

    # -- output --
    def freeze(self) -> Tuple[Step, ...]:
        return tuple(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def _append(self, step: Step) -> None:
        self._steps.append(step)
