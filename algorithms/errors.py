"""
errors.py — Exception hierarchy
================================
Everything the engine raises on purpose derives from VisualizerError, so
the web layer can turn the whole family into a 400 with one handler.

Not errors:
  - empty / single-element input  → a trivial (possibly empty) step tuple
  - an edge pointing at an unknown node → skipped during traversal
"""


class VisualizerError(Exception):
    """Base class for all visualizer exceptions."""


class InvalidStartError(VisualizerError):
    """A traversal was asked to start from a node that is not in the graph."""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Start node {node_id!r} is not in the graph")


class UnknownAlgorithmError(VisualizerError, ValueError):
    """No registry entry for the requested key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Unknown algorithm: {key}")


class InvalidInputError(VisualizerError, ValueError):
    """A request payload could not be turned into a data snapshot."""
