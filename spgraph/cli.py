"""Command-line interface for spgraph."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

from spgraph.algorithms import knapsack
from spgraph.algorithms.spf import find_shortest_path
from spgraph.config import SolverConfig
from spgraph.errors import SpGraphError
from spgraph.graph.matrix import MatrixGraph
from spgraph.io import load_graph_file, load_items_file, result_to_dict
from spgraph.logging import cli_log_level, get_logger, set_global_log_level

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _print_json(payload: Dict[str, Any]) -> None:
    print(json.dumps(payload, indent=2))


def _fail(message: str) -> None:
    logger.error(message)
    print(f"ERROR: {message}")
    sys.exit(1)


def _find_path(path: Path, source: int, target: int, stop_at_target: bool) -> None:
    """Load a graph document and print the shortest path as JSON."""
    logger.info(f"Loading graph: {path}")
    try:
        graph = load_graph_file(path)
    except FileNotFoundError:
        _fail(f"Graph file not found: {path}")
        return
    except OSError as e:
        _fail(f"Failed to read graph: {e}")
        return
    except SpGraphError as e:
        _fail(f"Failed to load graph: {type(e).__name__}: {e}")
        return

    started = perf_counter()
    result = find_shortest_path(
        graph, source, target, SolverConfig(stop_at_target=stop_at_target)
    )
    logger.info(
        f"Shortest path search finished in {_format_duration(perf_counter() - started)}"
    )
    _print_json({"source": source, "target": target, **result_to_dict(result)})


def _solve_knapsack(path: Path) -> None:
    """Load a knapsack document and print the optimal value and selection."""
    try:
        items, capacity = load_items_file(path)
        value = knapsack.solve(items, capacity)
        selected = knapsack.select(items, capacity)
    except FileNotFoundError:
        _fail(f"Knapsack file not found: {path}")
        return
    except OSError as e:
        _fail(f"Failed to read knapsack file: {e}")
        return
    except SpGraphError as e:
        _fail(f"Failed to solve knapsack: {type(e).__name__}: {e}")
        return

    _print_json({"capacity": capacity, "value": value, "selected": selected})


def _inspect_graph(path: Path) -> None:
    """Print a short summary of a graph document."""
    try:
        graph = load_graph_file(path)
    except FileNotFoundError:
        _fail(f"Graph file not found: {path}")
        return
    except OSError as e:
        _fail(f"Failed to read graph: {e}")
        return
    except SpGraphError as e:
        _fail(f"Failed to load graph: {type(e).__name__}: {e}")
        return

    representation = "matrix" if isinstance(graph, MatrixGraph) else "edges"
    print(f"Graph: {path}")
    print(f"  representation: {representation}")
    print(f"  vertices: {graph.vertices_count()}")
    print(f"  edges: {graph.edges_count()}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``spgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="spgraph",
        description="Shortest paths and knapsack selection from YAML documents.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{path,knapsack,inspect}",
        help="Available commands",
    )

    path_parser = subparsers.add_parser("path", help="Find a shortest path")
    path_parser.add_argument("graph", type=Path, help="Path to graph YAML")
    path_parser.add_argument(
        "--source", "-s", type=int, required=True, help="Source vertex"
    )
    path_parser.add_argument(
        "--target", "-t", type=int, required=True, help="Target vertex"
    )
    path_parser.add_argument(
        "--stop-at-target",
        action="store_true",
        help="Stop the search once the target distance is final",
    )

    knapsack_parser = subparsers.add_parser("knapsack", help="Solve a 0/1 knapsack")
    knapsack_parser.add_argument("items", type=Path, help="Path to knapsack YAML")

    inspect_parser = subparsers.add_parser("inspect", help="Summarize a graph")
    inspect_parser.add_argument("graph", type=Path, help="Path to graph YAML")

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    set_global_log_level(cli_log_level(args.verbose, args.quiet))
    logger.debug("Debug logging enabled")

    if args.command == "path":
        _find_path(args.graph, args.source, args.target, args.stop_at_target)
    elif args.command == "knapsack":
        _solve_knapsack(args.items)
    elif args.command == "inspect":
        _inspect_graph(args.graph)


if __name__ == "__main__":
    main()
