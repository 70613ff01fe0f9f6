"""Shared snapshot handling for the graph traversals."""

from typing import Dict, List, Sequence, Tuple

from structures import GraphEdge, GraphNode, build_adjacency
from algorithms.errors import InvalidStartError


def prepare(
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
    start_id: str,
) -> Tuple[Dict[str, str], Dict[str, List[GraphEdge]]]:
    """
    Returns ({node_id: label}, {node_id: [outgoing edges]}).

    Raises InvalidStartError before any step is produced when `start_id`
    is not one of `nodes`.
    """
    labels = {n.id: n.label for n in nodes}
    if start_id not in labels:
        raise InvalidStartError(start_id)
    return labels, build_adjacency(nodes, edges)
