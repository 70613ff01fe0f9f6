"""
element.py — Array Element
===========================
One bar in the sorting view.

Design decisions:
  - `id` is stable and caller-assigned; sorting moves elements around but
    never creates or destroys one, so ids let the replay layer check that
    the multiset survived.
  - The four `is_*` flags are transient display state.  Only the playback
    layer (engine.replay) sets or clears them; the sort functions read
    `id` and `value` and nothing else.
"""

import random
from dataclasses import dataclass, asdict
from typing import Iterable, List, Optional, Union

Number = Union[int, float]


@dataclass
class ArrayElement:
    id:             str
    value:          Number
    is_comparing:   bool = False
    is_swapping:    bool = False
    is_sorted:      bool = False
    is_highlighted: bool = False

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "ArrayElement":
        return cls(id=str(data["id"]), value=data["value"])


def make_elements(values: Iterable[Number], prefix: str = "elem") -> List[ArrayElement]:
    """Wrap raw numbers, assigning ids `<prefix>-0`, `<prefix>-1`, …"""
    return [ArrayElement(id=f"{prefix}-{i}", value=v) for i, v in enumerate(values)]


def random_elements(
    size: int = 20,
    low: int = 10,
    high: int = 309,
    seed: Optional[int] = None,
) -> List[ArrayElement]:
    """Random bar heights in [low, high], reproducible when `seed` is given."""
    rng = random.Random(seed)
    return make_elements(rng.randint(low, high) for _ in range(size))
