"""
node.py — Graph Node
====================
A vertex on the canvas: stable id, display label, position.

Design decisions:
  - `id` is read-only after construction; edges and steps refer to nodes
    by id, so it must never change under them.
  - Equality and hashing go by id alone, so a moved or relabelled node is
    still the same node.
"""

from typing import Optional


# ---------------------------------------------------------------------------
# GraphNode
# ---------------------------------------------------------------------------
class GraphNode:
    """
    Identity (id, label) plus a canvas position the presentation layer owns.

    Attributes:
        id     : Unique identifier, fixed at creation.
        label  : Human-readable name used in step descriptions ("A", "B", …).
        x, y   : Canvas coordinates.  Algorithms never read them.
    """

    __slots__ = ("_id", "label", "x", "y")

    def __init__(
        self,
        node_id: str,
        label: Optional[str] = None,
        x: float = 0.0,
        y: float = 0.0,
    ):
        self._id:   str   = node_id
        self.label: str   = label or node_id
        self.x:     float = x
        self.y:     float = y

    @property
    def id(self) -> str:
        return self._id

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"id": self.id, "label": self.label, "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict) -> "GraphNode":
        return cls(
            node_id=str(data["id"]),
            label=data.get("label"),
            x=float(data.get("x", 0.0)),
            y=float(data.get("y", 0.0)),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"GraphNode(id={self.id}, label={self.label}, pos=({self.x:.2f},{self.y:.2f}))"

    def __eq__(self, other) -> bool:
        return isinstance(other, GraphNode) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
