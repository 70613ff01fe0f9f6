"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
=================================================
Array-based selection (no heap), matching how the algorithm is usually
taught on a whiteboard.

Emits:
  1. DISTANCE for the start node (0)
  2. VISIT for the unvisited node with the smallest finite distance
  3. DISTANCE each time relaxing an outgoing edge strictly improves a
     neighbour's tentative distance

Stops when every node is visited or the remaining ones are unreachable.
Ties go to whichever tied node comes first in `nodes`.

Correctness note: weights must be non-negative.  Negative weights are not
rejected; the result is simply not a shortest-path tree.
"""

from typing import Dict, Optional, Sequence, Tuple

from structures import GraphEdge, GraphNode
from algorithms.graph_input import prepare
from algorithms.step import Step, StepLog, fmt

INF = float("inf")


def dijkstra(
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
    start_id: str,
) -> Tuple[Step, ...]:
    labels, adj = prepare(nodes, edges, start_id)
    log = StepLog()

    dist: Dict[str, float] = {nid: INF for nid in labels}
    dist[start_id] = 0
    # dict keys: ordered like `nodes`, O(1) removal
    unvisited: Dict[str, None] = dict.fromkeys(labels)

    log.distance(start_id, 0, f"Starting Dijkstra from node {labels[start_id]} with distance 0")

    while unvisited:
        current: Optional[str] = None
        best = INF
        for nid in unvisited:
            if dist[nid] < best:
                best, current = dist[nid], nid
        if current is None:
            break

        del unvisited[current]
        log.visit(current, f"Visiting node {labels[current]} with distance {fmt(best)}")

        for edge in adj[current]:
            nbr = edge.target
            if nbr not in unvisited:
                continue
            candidate = dist[current] + edge.weight
            if candidate < dist[nbr]:
                dist[nbr] = candidate
                log.distance(
                    nbr, candidate,
                    f"Updated distance to node {labels[nbr]}: {fmt(candidate)} (via {labels[current]})",
                )

    return log.freeze()
