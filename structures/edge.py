"""
edge.py — Graph Edge
====================
A directed, weighted link between two node ids.

Design decisions:
  - `source` and `target` are node-id strings, NOT node references, so an
    edge can point at an id that does not exist.  Traversals skip such
    edges instead of failing (see Graph.adjacency / build_adjacency).
  - Parallel edges between the same pair are independent and all valid.
  - The presentation may draw edges without arrows; traversal still only
    follows source → target.
"""

from typing import Union

Number = Union[int, float]


class GraphEdge:
    """
    Attributes:
        source : ID of the tail node.
        target : ID of the head node.
        weight : Non-negative cost (default 1).  Dijkstra reads it, BFS / DFS ignore it.
    """

    __slots__ = ("source", "target", "weight")

    def __init__(self, source: str, target: str, weight: Number = 1):
        self.source: str    = source
        self.target: str    = target
        self.weight: Number = weight

    def to_dict(self) -> dict:
        return {"source": self.source, "target": self.target, "weight": self.weight}

    @classmethod
    def from_dict(cls, data: dict) -> "GraphEdge":
        # accept the JS-style "from"/"to" keys as well
        source = data["source"] if "source" in data else data["from"]
        target = data["target"] if "target" in data else data["to"]
        return cls(source=str(source), target=str(target), weight=data.get("weight", 1))

    def __repr__(self) -> str:
        return f"GraphEdge({self.source} → {self.target}, w={self.weight})"
