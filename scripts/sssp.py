#!/usr/bin/env python3
"""
Single-source shortest paths CLI - build a digraph and print its shortest-path tree.

Usage:
    python scripts/sssp.py --vertices 3 --edge 1,2,1 --edge 2,3,1 --edge 1,3,5 --source 1
    python scripts/sssp.py --vertices 4 --edge 1,2 --edge 2,3 --source 1 --algorithm bfs
    python scripts/sssp.py --vertices 3 --edge 1,2,1 --edge 1,3,5 --source 1 --target 3 --strategy heap

Algorithms:
    bfs      - Unweighted shortest paths (edge weights ignored)
    dijkstra - Non-negative weighted shortest paths

Edges are START,END[,WEIGHT]; the weight defaults to 1. Settings such as
DIGRAPH_DIJKSTRA_STRATEGY and LOG_LEVEL may also come from a .env file.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Environment must be loaded before config is imported
load_dotenv(project_root / ".env")

from digraph import Digraph, Edge, GraphError, validate_tree  # noqa: E402
from digraph.config import DIJKSTRA_STRATEGIES, LOG_LEVEL  # noqa: E402
from digraph.report import format_graph, format_path, format_tree  # noqa: E402

logger = logging.getLogger(__name__)


def parse_edge(text: str) -> Edge:
    """Parse START,END[,WEIGHT] into an Edge."""
    try:
        fields = tuple(int(part) for part in text.split(","))
        return Edge.coerce(fields)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid edge '{text}' (expected START,END[,WEIGHT])"
        ) from None


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Compute single-source shortest paths on a directed graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--vertices",
        "-n",
        type=int,
        required=True,
        help="Number of vertices (numbered 1..N)",
    )
    parser.add_argument(
        "--edge",
        "-e",
        type=parse_edge,
        action="append",
        default=[],
        help="Directed edge START,END[,WEIGHT] (repeatable)",
    )
    parser.add_argument(
        "--source",
        "-s",
        type=int,
        required=True,
        help="Source vertex",
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        default="dijkstra",
        choices=["bfs", "dijkstra"],
        help="Shortest-path algorithm (default: dijkstra)",
    )
    parser.add_argument(
        "--strategy",
        type=str,
        default=None,
        choices=list(DIJKSTRA_STRATEGIES),
        help="Dijkstra frontier strategy (default: DIGRAPH_DIJKSTRA_STRATEGY or scan)",
    )
    parser.add_argument(
        "--target",
        "-t",
        type=int,
        action="append",
        default=None,
        help="Target vertex to print a path for (repeatable, default: all)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else logging.getLevelName(LOG_LEVEL.upper())
    if not isinstance(log_level, int):
        print(f"Error: Invalid LOG_LEVEL '{LOG_LEVEL}'", file=sys.stderr)
        return 1
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        graph = Digraph.from_edges(args.edge, args.vertices)
        if args.algorithm == "bfs":
            tree = graph.uwsssp(args.source)
        else:
            tree = graph.pwsssp(args.source, strategy=args.strategy)
        targets = args.target or list(graph.vertices())
        paths = [format_path(tree, t) for t in targets]
    except (GraphError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info(f"{graph!r}, {args.algorithm} from vertex {args.source}")

    print(format_graph(graph))
    print(format_tree(tree))
    for line in paths:
        print(line)

    checks = validate_tree(graph, tree)
    failed = [name for name, ok in checks.items() if not ok]
    if failed:
        logger.error(f"Shortest-path tree failed checks: {', '.join(failed)}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
