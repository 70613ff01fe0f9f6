"""
bfs.py — Breadth-First Search
==============================
Emits:
  1. HIGHLIGHT the start node as it is seeded into the queue
  2. VISIT a node when it is dequeued (each reachable node exactly once)
  3. HIGHLIGHT each outgoing neighbour at the moment it is enqueued

Only edges leaving the current node count (directed semantics).  A node
already visited or already waiting in the queue is never enqueued again,
and a duplicate that slips through is dropped at dequeue time.
"""

from collections import deque
from typing import Deque, Sequence, Set, Tuple

from structures import GraphEdge, GraphNode
from algorithms.graph_input import prepare
from algorithms.step import Step, StepLog


def bfs(
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
    start_id: str,
) -> Tuple[Step, ...]:
    """
    Args:
        nodes    : Node snapshot.
        edges    : Edge snapshot; edges to unknown nodes are ignored.
        start_id : Node to start from.

    Raises:
        InvalidStartError: `start_id` is not in `nodes`.
    """
    labels, adj = prepare(nodes, edges, start_id)
    log = StepLog()

    queue:   Deque[str] = deque([start_id])
    queued:  Set[str]   = {start_id}
    visited: Set[str]   = set()
    log.highlight_node(start_id, f"Starting BFS from node {labels[start_id]}")

    while queue:
        current = queue.popleft()
        queued.discard(current)
        if current in visited:
            continue

        visited.add(current)
        log.visit(current, f"Visiting node {labels[current]}")

        for edge in adj[current]:
            nbr = edge.target
            if nbr not in visited and nbr not in queued:
                queue.append(nbr)
                queued.add(nbr)
                log.highlight_node(nbr, f"Adding node {labels[nbr]} to queue")

    return log.freeze()
