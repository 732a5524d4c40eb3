"""
Plain-text reports for graphs, shortest-path trees and paths.

All functions return strings; callers decide where to print them.
"""

from __future__ import annotations

from digraph.config import (
    GRAPH_RULE_WIDTH,
    NO_PREDECESSOR,
    TREE_RULE_WIDTH,
    UNREACHABLE_DISTANCE,
)
from digraph.graph.digraph import Digraph
from digraph.paths.tree import ShortestPathTree


def format_graph(graph: Digraph) -> str:
    """Adjacency list of every vertex as (to, weight) pairs."""
    rule = " " * GRAPH_RULE_WIDTH
    lines = [rule, "Vertex  adjacency lists", rule]

    for v in graph.vertices():
        pairs = "".join(f"({e.end:2}, {e.weight:2}) " for e in graph.edges_from(v))
        lines.append(f"{v:4} : {pairs}")

    lines.append(rule)
    return "\n".join(lines) + "\n"


def format_tree(tree: ShortestPathTree) -> str:
    """Distance and predecessor table; -1 marks an unreached vertex."""
    rule = " " * TREE_RULE_WIDTH
    lines = [rule, "vertex    dist    path", rule]

    for v in range(1, tree.size + 1):
        d = tree.dist[v]
        p = tree.pred[v]
        d_out = UNREACHABLE_DISTANCE if d is None else d
        p_out = NO_PREDECESSOR if p is None else p
        lines.append(f"{v:4} : {d_out:6}{p_out:6}")

    lines.append(rule)
    return "\n".join(lines) + "\n"


def format_path(tree: ShortestPathTree, target: int) -> str:
    """
    One-line description of the shortest path to target.

    Example:
        Shortest path = 1   2   3   (2)
    """
    result = tree.path_to(target)
    if result is None:
        return f"No path to vertex {target}"

    head, *rest = result.vertices
    return f"Shortest path = {head}" + "".join(f"   {v}" for v in rest) + f"   ({result.length})"
