"""Loading graph and knapsack documents.

Documents are YAML (JSON is accepted as well, being a YAML subset). A graph
document has exactly one of two sections::

    edges:              # adjacency-map form -> UndirectedGraph
      - [0, 1, 2]
      - [1, 2, 3.5]

    matrix:             # adjacency-matrix form -> MatrixGraph
      - [0, 1, null]    # null or "inf" means no edge
      - [1, 0, 4]
      - [null, 4, 0]

A knapsack document looks like ``{capacity: 10, items: [[5, 10], [4, 40]]}``.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import yaml

from spgraph.algorithms.knapsack import Item
from spgraph.algorithms.spf import ShortestPath
from spgraph.errors import InvalidArgumentError
from spgraph.graph.matrix import UNREACHABLE, MatrixGraph
from spgraph.graph.undirected import UndirectedGraph
from spgraph.logging import get_logger
from spgraph.utils.yaml_utils import normalize_yaml_dict_keys

logger = get_logger(__name__)

AnyGraph = Union[UndirectedGraph, MatrixGraph]

_UNREACHABLE_TOKENS = {"inf", "infinity", "unreachable"}


def _load_mapping(text: str, what: str) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise InvalidArgumentError(f"Invalid {what} document: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidArgumentError(
            f"The {what} document must map to a dictionary at top-level."
        )
    return normalize_yaml_dict_keys(data)


def _matrix_cell(value: Any) -> float:
    if value is None:
        return UNREACHABLE
    if isinstance(value, str) and value.strip().lower() in _UNREACHABLE_TOKENS:
        return UNREACHABLE
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(f"Matrix cell must be a number or null, got {value!r}")
    return float(value)


def load_graph_yaml(yaml_str: str) -> AnyGraph:
    """Build a graph from a YAML graph document.

    Returns:
        UndirectedGraph for an ``edges`` document, MatrixGraph for a
        ``matrix`` document.

    Raises:
        InvalidArgumentError: If the document is malformed.
        EdgeExistsError: If the ``edges`` list repeats a vertex pair.
    """
    data = _load_mapping(yaml_str, "graph")
    sections = [key for key in ("edges", "matrix") if key in data]
    if len(sections) != 1:
        raise InvalidArgumentError(
            "A graph document must contain exactly one of 'edges' or 'matrix'."
        )
    unknown = set(data) - {"edges", "matrix"}
    if unknown:
        raise InvalidArgumentError(
            f"Unrecognized keys in graph document: {sorted(unknown)}"
        )

    if "edges" in data:
        edges = data["edges"] or []
        if not isinstance(edges, list):
            raise InvalidArgumentError("'edges' must be a list")
        graph = UndirectedGraph()
        for entry in edges:
            if not isinstance(entry, (list, tuple)) or len(entry) != 3:
                raise InvalidArgumentError(
                    f"Each edge must be a [u, v, weight] triple, got {entry!r}"
                )
            graph.add_edge(*entry)
        logger.debug(
            f"Loaded edge list: {graph.vertices_count()} vertices, "
            f"{graph.edges_count()} edges"
        )
        return graph

    rows = data["matrix"] or []
    if not isinstance(rows, list) or not all(isinstance(row, list) for row in rows):
        raise InvalidArgumentError("'matrix' must be a list of rows")
    matrix_graph = MatrixGraph([[_matrix_cell(cell) for cell in row] for row in rows])
    logger.debug(f"Loaded adjacency matrix: {matrix_graph!r}")
    return matrix_graph


def _read_document(path: Union[str, Path]) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidArgumentError(f"{path} is not valid UTF-8: {exc}") from exc


def load_graph_file(path: Union[str, Path]) -> AnyGraph:
    """Read a graph document from ``path`` (UTF-8).

    Raises:
        InvalidArgumentError: If the file is not UTF-8 or the document is
            malformed.
        OSError: If the file cannot be read.
    """
    return load_graph_yaml(_read_document(path))


def load_items_yaml(yaml_str: str) -> Tuple[List[Item], int]:
    """Parse a knapsack document into ``(items, capacity)``.

    Raises:
        InvalidArgumentError: If the document is malformed or holds negative
            numbers.
    """
    data = _load_mapping(yaml_str, "knapsack")
    if "capacity" not in data or "items" not in data:
        raise InvalidArgumentError(
            "A knapsack document must contain 'capacity' and 'items'."
        )
    entries = data["items"] or []
    if not isinstance(entries, list):
        raise InvalidArgumentError("'items' must be a list")

    items: List[Item] = []
    for entry in entries:
        if isinstance(entry, dict):
            if "weight" not in entry or "value" not in entry:
                raise InvalidArgumentError(
                    f"Each item must define 'weight' and 'value', got {entry!r}"
                )
            items.append(Item(entry["weight"], entry["value"]))
        elif isinstance(entry, list) and len(entry) == 2:
            items.append(Item(*entry))
        else:
            raise InvalidArgumentError(
                f"Each item must be [weight, value] or a mapping, got {entry!r}"
            )
    return items, data["capacity"]


def load_items_file(path: Union[str, Path]) -> Tuple[List[Item], int]:
    """Read a knapsack document from ``path`` (UTF-8)."""
    return load_items_yaml(_read_document(path))


def result_to_dict(result: ShortestPath) -> Dict[str, Any]:
    """Return a JSON-ready representation of a `ShortestPath`."""
    distance = result.distance
    if isinstance(distance, float) and math.isfinite(distance) and distance.is_integer():
        distance = int(distance)
    return {
        "path": [int(v) for v in result.path],
        "distance": distance,
        "found": result.found,
    }
