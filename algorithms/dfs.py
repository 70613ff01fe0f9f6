"""
dfs.py — Depth-First Search
============================
Pre-order walk.  Emits HIGHLIGHT for the start node, then:
  • VISIT on entering a node, before any of its neighbours
  • HIGHLIGHT for a neighbour immediately before descending into it
Neighbours already visited are skipped without a step, which is also what
keeps a self-loop from looping.

Uses an explicit stack of (node, edge-iterator) frames that resumes each
node's neighbour scan exactly where the recursive version would, so the
step order matches recursive DFS without its depth limit.
"""

from typing import Iterator, List, Sequence, Set, Tuple

from structures import GraphEdge, GraphNode
from algorithms.graph_input import prepare
from algorithms.step import Step, StepLog


def dfs(
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
    start_id: str,
) -> Tuple[Step, ...]:
    labels, adj = prepare(nodes, edges, start_id)
    log = StepLog()

    log.highlight_node(start_id, f"Starting DFS from node {labels[start_id]}")
    visited: Set[str] = {start_id}
    log.visit(start_id, f"Visiting node {labels[start_id]}")

    stack: List[Tuple[str, Iterator[GraphEdge]]] = [(start_id, iter(adj[start_id]))]
    while stack:
        _, pending = stack[-1]
        for edge in pending:
            nbr = edge.target
            if nbr in visited:
                continue
            log.highlight_node(nbr, f"Exploring node {labels[nbr]}")
            visited.add(nbr)
            log.visit(nbr, f"Visiting node {labels[nbr]}")
            stack.append((nbr, iter(adj[nbr])))
            break
        else:
            # all neighbours handled: backtrack
            stack.pop()

    return log.freeze()
