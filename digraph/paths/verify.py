"""
Consistency checks for a shortest-path tree against its graph.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from digraph.graph.digraph import Digraph
    from digraph.paths.tree import ShortestPathTree


def validate_tree(graph: Digraph, tree: ShortestPathTree) -> dict[str, bool]:
    """
    Run validation checks on a tree computed from graph.

    For BFS trees every predecessor link counts 1; for Dijkstra trees it
    counts the edge weight. The graph must not have been mutated since
    the tree was computed.

    Returns:
        Mapping of check name to whether it passed
    """
    n = graph.vertex_count
    size_matches = tree.size == n
    checks = {
        "size_matches": size_matches,
        "source_distance_zero": False,
        "source_has_no_predecessor": False,
        "unreachable_have_no_predecessor": False,
        "predecessors_are_edges": False,
        "chains_reach_source": False,
        "chain_lengths_match": False,
    }
    if not size_matches:
        return checks

    s = tree.source
    checks["source_distance_zero"] = tree.dist[s] == 0
    checks["source_has_no_predecessor"] = tree.pred[s] is None
    checks["unreachable_have_no_predecessor"] = all(
        tree.pred[v] is None for v in range(1, n + 1) if tree.dist[v] is None
    )

    edges_ok = True
    chains_ok = True
    lengths_ok = True

    def is_link(p: int | None, v: int) -> bool:
        in_range = isinstance(p, int) and not isinstance(p, bool) and 1 <= p <= n
        return in_range and graph.has_edge(p, v)

    for v in tree.reachable():
        p = tree.pred[v]
        if p is not None and not is_link(p, v):
            edges_ok = False
            chains_ok = False
            continue

        # Walk back to the source, summing the cost of each link
        total = 0
        steps = 0
        current = v
        while current != s and steps <= n:
            p = tree.pred[current]
            if not is_link(p, current):
                break
            total += 1 if tree.algorithm == "bfs" else graph.weight(p, current)
            current = p
            steps += 1

        if current != s:
            chains_ok = False
        elif total != tree.dist[v]:
            lengths_ok = False

    checks["predecessors_are_edges"] = edges_ok
    checks["chains_reach_source"] = chains_ok
    checks["chain_lengths_match"] = lengths_ok
    return checks
