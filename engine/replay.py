"""
replay.py — Applying Steps to a Display Copy
=============================================
The algorithms never touch caller data; this module is where a step
sequence turns back into something you can draw.

Array side:
  • replay_array()       – just the element order after N steps
  • apply_array_step()   – one step → new ArrayFrame with display flags
  • array_frames()       – frame after every step (what the Stepper seeks in)

Graph side:
  • apply_graph_step()   – visited order, active node, distance labels
  • graph_frames()
  • visit_order(), final_distances()  – summaries for tests and metrics

Mutation rules for arrays:
  SWAP, two indices  →  exchange the two slots
  SWAP, one index    →  write the element named by `element_id` into the slot
  everything else    →  flags only

Frames are never mutated in place; every apply returns a fresh frame, so
the list from array_frames() can be indexed in any order.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from structures.element import ArrayElement, Number
from algorithms.step import Step, StepType


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------
def _apply_order(order: List[ArrayElement], step: Step, by_id: Dict[str, ArrayElement]) -> None:
    if step.type is not StepType.SWAP or step.indices is None:
        return
    if len(step.indices) == 2:
        i, j = step.indices
        order[i], order[j] = order[j], order[i]
    elif len(step.indices) == 1 and step.element_id is not None:
        order[step.indices[0]] = by_id[step.element_id]


def replay_array(
    elements: Sequence[ArrayElement],
    steps: Sequence[Step],
    upto: Optional[int] = None,
) -> List[ArrayElement]:
    """
    Apply steps[:upto] (all of them by default) to a copy of `elements`
    and return the resulting order.  `elements` is not modified.
    """
    order = list(elements)
    by_id = {e.id: e for e in elements}
    for step in steps[:upto]:
        _apply_order(order, step, by_id)
    return order


@dataclass(frozen=True)
class ArrayFrame:
    """What the bar chart shows after some prefix of the steps."""

    elements:    Tuple[ArrayElement, ...]
    step_index:  int = -1
    description: str = ""

    def values(self) -> List[Number]:
        return [e.value for e in self.elements]

    def ids(self) -> List[str]:
        return [e.id for e in self.elements]


def initial_array_frame(elements: Sequence[ArrayElement]) -> ArrayFrame:
    return ArrayFrame(elements=tuple(replace(e, is_comparing=False, is_swapping=False,
                                             is_sorted=False, is_highlighted=False)
                                     for e in elements))


def apply_array_step(frame: ArrayFrame, step: Step, by_id: Dict[str, ArrayElement]) -> ArrayFrame:
    """
    Transient flags (comparing / swapping / highlighted) are cleared on
    every step; `is_sorted` sticks once set.

    `by_id` must cover the ORIGINAL elements: halfway through an insertion
    the key is absent from the frame but still due to be placed.
    """
    # a slot keeps its sorted flag even when a different element moves in
    sorted_slots = {i for i, e in enumerate(frame.elements) if e.is_sorted}
    order = list(frame.elements)
    _apply_order(order, step, by_id)

    touched = set(step.indices or ())
    out = []
    for i, e in enumerate(order):
        out.append(replace(
            e,
            is_comparing=step.type is StepType.COMPARE and i in touched,
            is_swapping=step.type is StepType.SWAP and i in touched,
            is_highlighted=step.type is StepType.HIGHLIGHT and i in touched,
            is_sorted=i in sorted_slots or (step.type is StepType.SORT and i in touched),
        ))
    return ArrayFrame(elements=tuple(out), step_index=frame.step_index + 1, description=step.description)


def array_frames(elements: Sequence[ArrayElement], steps: Sequence[Step]) -> List[ArrayFrame]:
    """
    [initial, after step 0, after step 1, …].  The last frame has every
    element flagged sorted, the way the view finishes a run.
    """
    frame = initial_array_frame(elements)
    by_id = {e.id: e for e in elements}
    frames = [frame]
    for step in steps:
        frame = apply_array_step(frame, step, by_id)
        frames.append(frame)
    if steps:
        last = frames[-1]
        frames[-1] = replace(last, elements=tuple(
            replace(e, is_comparing=False, is_swapping=False, is_highlighted=False, is_sorted=True)
            for e in last.elements
        ))
    return frames


# ---------------------------------------------------------------------------
# Graphs
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class GraphFrame:
    visited:     Tuple[str, ...]        = ()
    active:      Optional[str]          = None
    distances:   Dict[str, Number]      = field(default_factory=dict)
    step_index:  int                    = -1
    description: str                    = ""


def apply_graph_step(frame: GraphFrame, step: Step) -> GraphFrame:
    node_id = step.node_ids[0] if step.node_ids else None
    visited = frame.visited
    distances = frame.distances
    if step.type is StepType.VISIT and node_id is not None and node_id not in visited:
        visited = visited + (node_id,)
    if step.type is StepType.DISTANCE and node_id is not None:
        distances = dict(distances)
        distances[node_id] = step.distance
    return GraphFrame(
        visited=visited,
        active=node_id,
        distances=distances,
        step_index=frame.step_index + 1,
        description=step.description,
    )


def graph_frames(steps: Sequence[Step]) -> List[GraphFrame]:
    frame = GraphFrame()
    frames = [frame]
    for step in steps:
        frame = apply_graph_step(frame, step)
        frames.append(frame)
    return frames


def visit_order(steps: Iterable[Step]) -> List[str]:
    """Node ids in the order VISIT steps name them."""
    return [s.node_ids[0] for s in steps if s.type is StepType.VISIT and s.node_ids]


def final_distances(steps: Iterable[Step]) -> Dict[str, Number]:
    """Last DISTANCE recorded per node — Dijkstra's answer."""
    out: Dict[str, Number] = {}
    for s in steps:
        if s.type is StepType.DISTANCE and s.node_ids:
            out[s.node_ids[0]] = s.distance
    return out
