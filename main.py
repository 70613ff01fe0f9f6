"""
main.py — Algorithm Visualizer JSON API
=======================================
Flask app that hands finished step sequences to the browser view.  Every
request runs its algorithm to completion and returns the whole sequence;
timing and drawing happen client-side.

Routes:
  GET  /api/algorithms          – registry (optional ?family=array|graph)
  POST /api/array/generate      – random elements
  POST /api/array/sort          – run one sort, return steps + metrics
  POST /api/array/compare       – run two sorts on the same input
  POST /api/graph/run           – run BFS / DFS / Dijkstra
  POST /api/graph/import        – adjacency-list text → graph
  POST /api/tree/insert         – insert one value into a tree snapshot
  POST /api/tree/traverse       – build a BST from values, return a traversal
  POST /api/list/search         – scan path for a value in a linked list

Errors from the engine come back as HTTP 400 {"error": "..."}.

State management:
  None.  Requests are independent; nothing is stored between them.
"""

import logging
import math
from typing import Any, Dict, List, Optional

from flask import Flask, current_app, jsonify, request

from algorithms import ARRAY, GRAPH, algorithms_by_family, get_algorithm, list_algorithms
from algorithms.errors import InvalidInputError, UnknownAlgorithmError, VisualizerError
from algorithms.traversals import get_traversal, insert as tree_insert
from config import Config
from engine import Recorder, compare
from structures import (
    ArrayElement,
    BinarySearchTree,
    Graph,
    LinkedList,
    TreeNode,
    make_elements,
    random_elements,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Payload helpers
# ---------------------------------------------------------------------------
def _payload() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidInputError("Request body must be a JSON object")
    return data


def _check_size(count: int, limit_key: str, what: str) -> None:
    limit = current_app.config[limit_key]
    if count > limit:
        raise InvalidInputError(f"Too many {what}: {count} (limit {limit})")


def _is_number(v: Any) -> bool:
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return False
    return math.isfinite(v)


def _numbers(raw: Any, what: str) -> List[float]:
    if not isinstance(raw, list):
        raise InvalidInputError(f"'{what}' must be a list of numbers")
    for v in raw:
        if not _is_number(v):
            raise InvalidInputError(f"'{what}' must be a list of numbers, got {v!r}")
    return raw


def _elements_from(data: Dict[str, Any]) -> List[ArrayElement]:
    if "elements" in data:
        try:
            elements = [ArrayElement.from_dict(e) for e in data["elements"]]
        except (KeyError, TypeError) as exc:
            raise InvalidInputError(f"Malformed element: {exc}") from exc
        ids = [e.id for e in elements]
        if len(set(ids)) != len(ids):
            raise InvalidInputError("Element ids must be unique")
        _numbers([e.value for e in elements], "elements")
    else:
        elements = make_elements(_numbers(data.get("values", []), "values"))
    _check_size(len(elements), "MAX_ARRAY_SIZE", "elements")
    return elements


def _graph_from(data: Dict[str, Any]) -> Graph:
    try:
        graph = Graph.from_dict(data)
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidInputError(f"Malformed graph: {exc}") from exc
    for edge in graph.edges:
        if not _is_number(edge.weight):
            raise InvalidInputError(
                f"Edge {edge.source} → {edge.target} has a non-numeric weight: {edge.weight!r}"
            )
    if graph.has_negative_edges():
        raise InvalidInputError("Edge weights must be non-negative")
    _check_size(graph.node_count(), "MAX_GRAPH_NODES", "nodes")
    return graph


def _algorithm(key: Optional[str], family: str):
    if not isinstance(key, str):
        raise UnknownAlgorithmError(str(key))
    info = get_algorithm(key)
    if info is None or info.family != family:
        raise UnknownAlgorithmError(str(key))
    return info


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(overrides: Optional[Dict[str, Any]] = None, config_object: Any = Config) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.config.from_prefixed_env("ALGOVIZ")
    if overrides:
        app.config.update(overrides)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @app.errorhandler(VisualizerError)
    def handle_visualizer_error(exc: VisualizerError):
        logger.warning("Rejected %s %s: %s", request.method, request.path, exc)
        return jsonify({"error": str(exc)}), 400

    # -----------------------------------------------------------------------
    # API: Registry
    # -----------------------------------------------------------------------
    @app.route("/api/algorithms")
    def api_algorithms():
        family = request.args.get("family")
        algos = algorithms_by_family(family) if family else list_algorithms()
        return jsonify({"algorithms": [a.to_dict() for a in algos]})

    # -----------------------------------------------------------------------
    # API: Arrays
    # -----------------------------------------------------------------------
    @app.route("/api/array/generate", methods=["POST"])
    def api_array_generate():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            raise InvalidInputError("Request body must be a JSON object")
        size = data.get("size", app.config["DEFAULT_ARRAY_SIZE"])
        if isinstance(size, bool) or not isinstance(size, int) or size < 0:
            raise InvalidInputError("'size' must be a non-negative integer")
        seed = data.get("seed")
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise InvalidInputError("'seed' must be an integer or null")
        _check_size(size, "MAX_ARRAY_SIZE", "elements")
        elements = random_elements(
            size=size,
            low=app.config["ELEMENT_MIN_VALUE"],
            high=app.config["ELEMENT_MAX_VALUE"],
            seed=seed,
        )
        return jsonify({"elements": [e.to_dict() for e in elements]})

    @app.route("/api/array/sort", methods=["POST"])
    def api_array_sort():
        data = _payload()
        info = _algorithm(data.get("algorithm", "bubble"), ARRAY)
        elements = _elements_from(data)

        rec = Recorder()
        rec.start(info.key, elements=elements)
        rec.run_to_completion()
        return jsonify(rec.export())

    @app.route("/api/array/compare", methods=["POST"])
    def api_array_compare():
        data = _payload()
        left_info = _algorithm(data.get("left"), ARRAY)
        right_info = _algorithm(data.get("right"), ARRAY)
        elements = _elements_from(data)

        left, right = Recorder(), Recorder()
        left.start(left_info.key, elements=elements)
        right.start(right_info.key, elements=elements)
        left.run_to_completion()
        right.run_to_completion()
        return jsonify(compare(left, right).to_dict())

    # -----------------------------------------------------------------------
    # API: Graphs
    # -----------------------------------------------------------------------
    @app.route("/api/graph/run", methods=["POST"])
    def api_graph_run():
        data = _payload()
        info = _algorithm(data.get("algorithm", "bfs"), GRAPH)
        graph = _graph_from(data)
        start = data.get("start")
        if start is None:
            raise InvalidInputError("'start' is required")

        rec = Recorder()
        rec.start(info.key, graph=graph, start_id=str(start))
        rec.run_to_completion()
        return jsonify(rec.export())

    @app.route("/api/graph/import", methods=["POST"])
    def api_graph_import():
        data = _payload()
        try:
            graph = Graph.from_adjacency_list(str(data.get("text", "")))
        except ValueError as exc:
            raise InvalidInputError(str(exc)) from exc
        _check_size(graph.node_count(), "MAX_GRAPH_NODES", "nodes")
        return jsonify(graph.to_dict())

    # -----------------------------------------------------------------------
    # API: Trees
    # -----------------------------------------------------------------------
    @app.route("/api/tree/insert", methods=["POST"])
    def api_tree_insert():
        data = _payload()
        try:
            nodes = [TreeNode.from_dict(n) for n in data.get("nodes", [])]
        except (KeyError, TypeError) as exc:
            raise InvalidInputError(f"Malformed tree node: {exc}") from exc
        value = data.get("value")
        _numbers([value], "value")
        _check_size(len(nodes) + 1, "MAX_TREE_NODES", "tree nodes")

        try:
            tree = BinarySearchTree.from_nodes(nodes)
            tree.validate()
        except ValueError as exc:
            raise InvalidInputError(f"Malformed tree: {exc}") from exc

        path = tree.insertion_path(value)
        updated = tree_insert(nodes, value)
        return jsonify({"nodes": [n.to_dict() for n in updated], "path": path})

    @app.route("/api/tree/traverse", methods=["POST"])
    def api_tree_traverse():
        data = _payload()
        values = _numbers(data.get("values", []), "values")
        _check_size(len(values), "MAX_TREE_NODES", "tree nodes")
        order_key = data.get("order", "inorder")
        traversal = get_traversal(order_key) if isinstance(order_key, str) else None
        if traversal is None:
            raise InvalidInputError(f"Unknown traversal: {order_key}")

        tree = BinarySearchTree.from_values(values)
        order = traversal(tree)
        return jsonify({
            "tree": tree.to_dict(),
            "order": order,
            "values": [tree.nodes[nid].value for nid in order],
        })

    # -----------------------------------------------------------------------
    # API: Linked lists
    # -----------------------------------------------------------------------
    @app.route("/api/list/search", methods=["POST"])
    def api_list_search():
        data = _payload()
        values = _numbers(data.get("values", []), "values")
        _check_size(len(values), "MAX_LIST_NODES", "list nodes")
        target = data.get("target")
        _numbers([target], "target")

        lst = LinkedList(values)
        path = lst.search_path(target)
        return jsonify({
            "nodes": [n.to_dict() for n in lst.to_list()],
            "path": path,
            "found": bool(path),
        })

    return app


app = create_app()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logger.info("Algorithm Visualizer API on http://%s:%s", app.config["HOST"], app.config["PORT"])
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])
