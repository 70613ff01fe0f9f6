"""Tests for the algorithm registry."""

from algorithms import ARRAY, GRAPH, REGISTRY, algorithms_by_family, get_algorithm, list_algorithms


class TestRegistry:

    def test_all_algorithms_registered(self):
        assert list(REGISTRY) == [
            "bubble", "quick", "merge", "selection", "insertion", "heap",
            "bfs", "dfs", "dijkstra",
        ]
        assert len(list_algorithms()) == 9

    def test_families(self):
        assert len(algorithms_by_family(ARRAY)) == 6
        assert [a.key for a in algorithms_by_family(GRAPH)] == ["bfs", "dfs", "dijkstra"]
        assert algorithms_by_family("tree") == []

    def test_lookup(self):
        info = get_algorithm("dijkstra")
        assert info.weighted
        assert info.family == GRAPH
        assert get_algorithm("nope") is None

    def test_to_dict_has_no_callable(self):
        data = get_algorithm("merge").to_dict()
        assert "fn" not in data
        assert data["stable"] is True
        assert data["label"] == "Merge Sort"
