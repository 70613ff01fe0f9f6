"""Pytest configuration and fixtures for the visualizer tests."""

from typing import Callable, List

import pytest

from config import TestingConfig
from main import create_app
from structures import ArrayElement, Graph, make_elements


@pytest.fixture
def elements() -> Callable[..., List[ArrayElement]]:
    """Factory turning raw numbers into id-tagged elements."""
    def _make(*values):
        return make_elements(values)
    return _make


@pytest.fixture
def abcd_graph() -> Graph:
    """A → B, A → C, B → D."""
    g = Graph()
    for name in "ABCD":
        g.create_node(label=name, node_id=name)
    g.create_edge("A", "B")
    g.create_edge("A", "C")
    g.create_edge("B", "D")
    return g


@pytest.fixture
def weighted_graph() -> Graph:
    """Small directed graph where the cheapest route is not the shortest hop count."""
    g = Graph()
    for name in "ABCDE":
        g.create_node(label=name, node_id=name)
    g.create_edge("A", "B", 4)
    g.create_edge("A", "C", 1)
    g.create_edge("C", "B", 2)
    g.create_edge("B", "D", 1)
    g.create_edge("C", "D", 5)
    g.create_edge("D", "E", 3)
    return g


@pytest.fixture
def app():
    return create_app(config_object=TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()
