"""Tests for BFS, DFS and Dijkstra."""

import heapq
import logging

import pytest

from algorithms.bfs import bfs
from algorithms.dfs import dfs
from algorithms.dijkstra import dijkstra
from algorithms.errors import InvalidStartError, VisualizerError
from algorithms.step import StepType
from engine import final_distances, visit_order
from structures import Graph, GraphEdge, GraphNode


def _reference_distances(graph: Graph, start: str):
    """Heap-based Dijkstra to check the step output against."""
    dist = {start: 0}
    heap = [(0, start)]
    adj = graph.adjacency()
    while heap:
        d, nid = heapq.heappop(heap)
        if d > dist.get(nid, float("inf")):
            continue
        for e in adj[nid]:
            nd = d + e.weight
            if nd < dist.get(e.target, float("inf")):
                dist[e.target] = nd
                heapq.heappush(heap, (nd, e.target))
    return dist


class TestBFS:
    """Test breadth-first search steps."""

    def test_concrete_example(self, abcd_graph):
        """A → B, A → C, B → D from A visits A, B, C, D."""
        steps = bfs(*abcd_graph.snapshot(), "A")
        assert visit_order(steps) == ["A", "B", "C", "D"]

    def test_start_highlight_then_enqueue_highlights(self, abcd_graph):
        steps = bfs(*abcd_graph.snapshot(), "A")
        assert steps[0].type is StepType.HIGHLIGHT
        assert steps[0].description == "Starting BFS from node A"
        assert steps[1].type is StepType.VISIT
        assert [s.description for s in steps[2:4]] == [
            "Adding node B to queue",
            "Adding node C to queue",
        ]

    def test_only_reachable_nodes_once(self, abcd_graph):
        """Edges are directed; D cannot reach anything."""
        abcd_graph.create_node(label="E", node_id="E")
        abcd_graph.create_edge("E", "A")
        steps = bfs(*abcd_graph.snapshot(), "B")
        assert visit_order(steps) == ["B", "D"]

    def test_cycles_and_self_loops(self):
        g = Graph()
        for name in "ABC":
            g.create_node(label=name, node_id=name)
        g.create_edge("A", "A")
        g.create_edge("A", "B")
        g.create_edge("B", "C")
        g.create_edge("C", "A")
        order = visit_order(bfs(*g.snapshot(), "A"))
        assert order == ["A", "B", "C"]

    def test_invalid_start(self, abcd_graph):
        """An unknown start raises before any step is produced."""
        with pytest.raises(InvalidStartError) as exc_info:
            bfs(*abcd_graph.snapshot(), "Z")
        assert isinstance(exc_info.value, VisualizerError)
        assert exc_info.value.node_id == "Z"

    def test_edge_to_unknown_node_is_skipped(self, abcd_graph, caplog):
        nodes, edges = abcd_graph.snapshot()
        edges.append(GraphEdge("A", "ghost"))
        with caplog.at_level(logging.DEBUG, logger="structures.graph"):
            steps = bfs(nodes, edges, "A")
        assert visit_order(steps) == ["A", "B", "C", "D"]
        assert "unknown endpoint" in caplog.text

    def test_isolated_start(self):
        steps = bfs([GraphNode("solo", "S")], [], "solo")
        assert visit_order(steps) == ["solo"]


class TestDFS:
    """Test depth-first search steps."""

    def test_goes_deep_first(self, abcd_graph):
        steps = dfs(*abcd_graph.snapshot(), "A")
        assert visit_order(steps) == ["A", "B", "D", "C"]

    def test_explore_highlight_precedes_visit(self, abcd_graph):
        steps = dfs(*abcd_graph.snapshot(), "A")
        assert steps[0].description == "Starting DFS from node A"
        for before, after in zip(steps, steps[1:]):
            if after.type is StepType.VISIT and after.node_ids != ("A",):
                assert before.type is StepType.HIGHLIGHT
                assert before.node_ids == after.node_ids

    def test_each_node_once_on_cycle(self):
        g = Graph()
        for name in "ABCD":
            g.create_node(label=name, node_id=name)
        for src, dst in [("A", "B"), ("B", "C"), ("C", "A"), ("C", "C"), ("B", "D")]:
            g.create_edge(src, dst)
        order = visit_order(dfs(*g.snapshot(), "A"))
        assert sorted(order) == ["A", "B", "C", "D"]
        assert len(order) == 4

    def test_long_chain_has_no_depth_limit(self):
        g = Graph()
        ids = [f"n{i}" for i in range(3000)]
        for nid in ids:
            g.create_node(node_id=nid, label=nid)
        for a, b in zip(ids, ids[1:]):
            g.create_edge(a, b)
        assert visit_order(dfs(*g.snapshot(), "n0")) == ids

    def test_invalid_start(self, abcd_graph):
        with pytest.raises(InvalidStartError):
            dfs(*abcd_graph.snapshot(), "missing")


class TestDijkstra:
    """Test shortest-path steps."""

    def test_matches_reference(self, weighted_graph):
        steps = dijkstra(*weighted_graph.snapshot(), "A")
        assert final_distances(steps) == _reference_distances(weighted_graph, "A")
        assert final_distances(steps) == {"A": 0, "B": 3, "C": 1, "D": 4, "E": 7}

    def test_first_step_is_start_distance(self, weighted_graph):
        steps = dijkstra(*weighted_graph.snapshot(), "A")
        assert steps[0].type is StepType.DISTANCE
        assert steps[0].node_ids == ("A",)
        assert steps[0].distance == 0

    def test_relaxation_description(self, weighted_graph):
        steps = dijkstra(*weighted_graph.snapshot(), "A")
        descriptions = [s.description for s in steps]
        assert "Updated distance to node B: 3 (via C)" in descriptions
        assert "Visiting node A with distance 0" in descriptions

    def test_unreachable_nodes_not_visited(self, weighted_graph):
        steps = dijkstra(*weighted_graph.snapshot(), "D")
        assert sorted(visit_order(steps)) == ["D", "E"]
        assert final_distances(steps) == {"D": 0, "E": 3}

    def test_every_reachable_node_visited_once(self, weighted_graph):
        order = visit_order(dijkstra(*weighted_graph.snapshot(), "A"))
        assert sorted(order) == ["A", "B", "C", "D", "E"]

    def test_float_weights(self):
        g = Graph()
        for name in "ABC":
            g.create_node(label=name, node_id=name)
        g.create_edge("A", "B", 0.5)
        g.create_edge("B", "C", 0.25)
        g.create_edge("A", "C", 1)
        assert final_distances(dijkstra(*g.snapshot(), "A")) == {"A": 0, "B": 0.5, "C": 0.75}

    def test_invalid_start(self, weighted_graph):
        with pytest.raises(InvalidStartError):
            dijkstra(*weighted_graph.snapshot(), "Q")


class TestGraphContainer:
    """Graph helpers used by the API layer."""

    def test_has_negative_edges(self, weighted_graph):
        assert not weighted_graph.has_negative_edges()
        weighted_graph.create_edge("E", "A", -1)
        assert weighted_graph.has_negative_edges()
