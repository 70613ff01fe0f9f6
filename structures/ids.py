"""
ids.py — Monotonic Id Sequence
===============================
Containers hand out ids from a per-instance counter instead of the wall
clock, so two nodes created in the same millisecond can never collide.
"""

from typing import Iterable


class IdSequence:
    """
    Produces "<prefix>-1", "<prefix>-2", … and can be told about ids that
    already exist (imported snapshots) so it never re-issues one of them.
    """

    def __init__(self, prefix: str = "node", start: int = 1):
        self.prefix:  str = prefix
        self._next:   int = start
        self._taken:  set = set()

    def next_id(self) -> str:
        while True:
            candidate = f"{self.prefix}-{self._next}"
            self._next += 1
            if candidate not in self._taken:
                self._taken.add(candidate)
                return candidate

    def reserve(self, ids: Iterable[str]) -> None:
        """Mark caller-supplied ids as used."""
        self._taken.update(ids)
