"""
graph.py — Graph Container
==========================
Single source of truth for the graph the user builds.  The traversal
algorithms never receive this object directly; they get its node and
edge lists (a snapshot) and build their own adjacency.

Responsibilities:
  1. CRUD on nodes & edges                  (create / remove / get)
  2. Outgoing-adjacency queries             (neighbours)
  3. Import from an adjacency-list text     (text → graph)
  4. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - Nodes stored in a dict keyed by id for O(1) lookup; edges kept in a
    list because parallel edges have no identity of their own.
  - Ids come from an IdSequence (node-1, node-2, …) and labels run
    A, B, C, … in creation order, the way the canvas names clicked nodes.
"""

import logging
import math
import string
from typing import Dict, Iterable, List, Optional, Tuple

from structures.edge import GraphEdge, Number
from structures.ids import IdSequence
from structures.node import GraphNode

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Adjacency helper shared by the traversal algorithms
# ---------------------------------------------------------------------------
def build_adjacency(
    nodes: Iterable[GraphNode],
    edges: Iterable[GraphEdge],
) -> Dict[str, List[GraphEdge]]:
    """
    Map every node id to its outgoing edges, in edge order.

    Edges whose source or target is not a known node are dropped: a half-
    drawn edge should not sink the whole traversal.
    """
    adj: Dict[str, List[GraphEdge]] = {n.id: [] for n in nodes}
    for edge in edges:
        if edge.source not in adj or edge.target not in adj:
            logger.debug("Skipping edge %s → %s: unknown endpoint", edge.source, edge.target)
            continue
        adj[edge.source].append(edge)
    return adj


def _label_for(index: int) -> str:
    """0 → A, 25 → Z, 26 → AA, …"""
    letters = string.ascii_uppercase
    label = ""
    index += 1
    while index > 0:
        index, rem = divmod(index - 1, 26)
        label = letters[rem] + label
    return label


class Graph:
    """
    Attributes:
        nodes  : {node_id: GraphNode}
        edges  : [GraphEdge, …] in insertion order
    """

    def __init__(self):
        self.nodes: Dict[str, GraphNode] = {}
        self.edges: List[GraphEdge]      = []
        self._ids:  IdSequence           = IdSequence("node")

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, node: GraphNode) -> GraphNode:
        if node.id in self.nodes:
            raise ValueError(f"Duplicate node id: {node.id}")
        self._ids.reserve([node.id])
        self.nodes[node.id] = node
        return node

    def create_node(
        self,
        x: float = 0.0,
        y: float = 0.0,
        label: Optional[str] = None,
        node_id: Optional[str] = None,
    ) -> GraphNode:
        """Convenience: create + add in one call."""
        nid = node_id or self._ids.next_id()
        return self.add_node(GraphNode(nid, label or _label_for(len(self.nodes)), x, y))

    def remove_node(self, node_id: str) -> None:
        if node_id not in self.nodes:
            return
        self.edges = [e for e in self.edges if e.source != node_id and e.target != node_id]
        del self.nodes[node_id]

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        return self.nodes.get(node_id)

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(self, edge: GraphEdge) -> GraphEdge:
        self.edges.append(edge)
        return edge

    def create_edge(self, source: str, target: str, weight: Number = 1) -> GraphEdge:
        return self.add_edge(GraphEdge(source=source, target=target, weight=weight))

    def remove_edge(self, source: str, target: str) -> bool:
        """Remove the first source → target edge.  Returns False if none existed."""
        for i, e in enumerate(self.edges):
            if e.source == source and e.target == target:
                del self.edges[i]
                return True
        return False

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def adjacency(self) -> Dict[str, List[GraphEdge]]:
        return build_adjacency(self.nodes.values(), self.edges)

    def neighbours(self, node_id: str) -> List[str]:
        """Targets of every outgoing edge, duplicates included."""
        return [e.target for e in self.adjacency().get(node_id, [])]

    # ==================================================================
    # SNAPSHOT / SERIALISATION
    # ==================================================================
    def snapshot(self) -> Tuple[List[GraphNode], List[GraphEdge]]:
        """The (nodes, edges) pair the traversal functions take."""
        return list(self.nodes.values()), list(self.edges)

    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes.values()],
            "edges": [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        g = cls()
        for nd in data.get("nodes", []):
            g.add_node(GraphNode.from_dict(nd))
        for ed in data.get("edges", []):
            g.add_edge(GraphEdge.from_dict(ed))
        return g

    # ---------- Import from Adjacency List (text) ----------
    @classmethod
    def from_adjacency_list(
        cls,
        text: str,
        canvas_w: float = 600,
        canvas_h: float = 400,
    ) -> "Graph":
        """
        Parse a simple text adjacency list.

        Supported formats (one node per line):
            A: B C D            → A→B, A→C, A→D  (weight 1)
            A: B(3) C(7)        → A→B weight 3, A→C weight 7
            A -> B, C           → alternate arrow syntax

        Node ids and labels are the names as written.  Nodes are laid out
        on a circle.
        """
        adjacency: Dict[str, List[Tuple[str, float]]] = {}

        for line in text.strip().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if ":" in line:
                parts = line.split(":", 1)
            elif "->" in line:
                parts = line.split("->", 1)
            elif "→" in line:
                parts = line.split("→", 1)
            else:
                adjacency.setdefault(line, [])
                continue

            src = parts[0].strip()
            adjacency.setdefault(src, [])

            for token in parts[1].replace(",", " ").split():
                if "(" in token and token.endswith(")"):
                    tgt, w_str = token[:-1].split("(", 1)
                    try:
                        w = float(w_str)
                    except ValueError:
                        raise ValueError(f"Bad weight in token {token!r}")
                else:
                    tgt, w = token, 1.0
                adjacency.setdefault(tgt, [])
                adjacency[src].append((tgt, w))

        g = cls()
        n = len(adjacency)
        cx, cy = canvas_w / 2, canvas_h / 2
        radius = min(canvas_w, canvas_h) * 0.35
        for i, name in enumerate(adjacency):
            angle = 2 * math.pi * i / n
            g.create_node(cx + radius * math.cos(angle), cy + radius * math.sin(angle), label=name, node_id=name)

        for src, targets in adjacency.items():
            for tgt, w in targets:
                g.create_edge(src, tgt, weight=int(w) if w.is_integer() else w)
        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def has_negative_edges(self) -> bool:
        return any(e.weight < 0 for e in self.edges)

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"
