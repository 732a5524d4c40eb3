"""
Unit tests for ShortestPathTree path reconstruction, array export and validation.
"""

import numpy as np
import pytest

from digraph import Digraph, PathResult, ShortestPathTree, VertexRangeError, validate_tree


class TestPathReconstruction:
    """Test path_to and the graph-level shortest_path."""

    def test_weighted_path(self, triangle):
        tree = triangle.pwsssp(1)
        result = tree.path_to(3)
        assert result == PathResult(vertices=(1, 2, 3), length=2)
        assert result.source == 1
        assert result.target == 3
        assert result.hops == 2

    def test_unweighted_path(self, triangle):
        triangle.uwsssp(1)
        assert triangle.shortest_path(3) == PathResult(vertices=(1, 3), length=1)

    def test_path_to_source(self, triangle):
        """The source's own path is just itself with length 0."""
        result = triangle.pwsssp(2).path_to(2)
        assert result.vertices == (2,)
        assert result.length == 0
        assert result.hops == 0

    def test_unreachable_returns_none(self, with_isolated):
        tree = with_isolated.pwsssp(1)
        assert tree.path_to(4) is None
        assert not tree.is_reachable(4)
        assert with_isolated.shortest_path(4) is None

    def test_target_out_of_range_raises(self, triangle):
        tree = triangle.uwsssp(1)
        with pytest.raises(VertexRangeError):
            tree.path_to(4)

    def test_long_chain_is_stack_safe(self):
        """Paths longer than the recursion limit are rebuilt iteratively."""
        n = 5000
        g = Digraph.from_edges(((v, v + 1) for v in range(1, n)), n)
        result = g.uwsssp(1).path_to(n)
        assert result.vertices == tuple(range(1, n + 1))
        assert result.length == n - 1


class TestTreeAccessors:
    """Test per-vertex accessors."""

    def test_distance_and_predecessor(self, triangle):
        tree = triangle.pwsssp(1)
        assert tree.size == 3
        assert tree.distance(3) == 2
        assert tree.predecessor(3) == 2
        assert tree.predecessor(1) is None

    def test_reachable(self, with_isolated):
        assert with_isolated.uwsssp(2).reachable() == [2, 3]

    def test_accessor_out_of_range_raises(self, triangle):
        tree = triangle.uwsssp(1)
        with pytest.raises(VertexRangeError):
            tree.distance(0)
        with pytest.raises(VertexRangeError):
            tree.predecessor(4)

    def test_tree_is_immutable(self, triangle):
        tree = triangle.uwsssp(1)
        with pytest.raises(AttributeError):
            tree.source = 2

    def test_tree_unaffected_by_later_mutation(self, triangle):
        """A tree keeps describing the graph as it was when computed."""
        tree = triangle.pwsssp(1)
        triangle.remove_edge((2, 3))
        assert tree.path_to(3).vertices == (1, 2, 3)


class TestArrayExport:
    """Test numpy views of the run state."""

    def test_dist_array_uses_sentinel(self, with_isolated):
        arr = with_isolated.pwsssp(1).dist_array()
        assert arr.dtype == np.int64
        np.testing.assert_array_equal(arr, [-1, 0, 1, 2, -1])

    def test_path_array_uses_zero(self, with_isolated):
        arr = with_isolated.pwsssp(1).path_array()
        np.testing.assert_array_equal(arr, [0, 0, 1, 2, 0])


class TestValidateTree:
    """Test consistency checks."""

    def test_valid_trees_pass(self, diamond):
        assert all(validate_tree(diamond, diamond.uwsssp(1)).values())
        assert all(validate_tree(diamond, diamond.pwsssp(1)).values())

    def test_wrong_distance_fails(self, triangle):
        tree = ShortestPathTree(
            source=1, algorithm="dijkstra", dist=(None, 0, 1, 3), pred=(None, None, 1, 2)
        )
        checks = validate_tree(triangle, tree)
        assert checks["chain_lengths_match"] is False
        assert checks["predecessors_are_edges"] is True

    def test_missing_edge_fails(self, triangle):
        tree = triangle.pwsssp(1)
        triangle.remove_edge((2, 3))
        assert validate_tree(triangle, tree)["predecessors_are_edges"] is False

    def test_size_mismatch_fails(self, triangle):
        tree = Digraph(2).uwsssp(1)
        checks = validate_tree(triangle, tree)
        assert checks["size_matches"] is False
        assert not any(checks.values())

    def test_predecessor_out_of_range_fails(self):
        """A predecessor outside [1, n] is reported, not raised."""
        g = Digraph.from_edges([(1, 2), (2, 3)], 3)
        tree = ShortestPathTree(
            source=1, algorithm="bfs", dist=(None, 0, 1, 2), pred=(None, None, 1, 7)
        )
        checks = validate_tree(g, tree)
        assert checks["predecessors_are_edges"] is False
        assert checks["chains_reach_source"] is False
        assert checks["source_distance_zero"] is True

    def test_non_int_vertex_lookup_raises(self, triangle):
        tree = triangle.uwsssp(1)
        with pytest.raises(VertexRangeError):
            tree.path_to(2.0)

    def test_unreached_with_predecessor_fails(self, triangle):
        tree = ShortestPathTree(
            source=1, algorithm="bfs", dist=(None, 0, 1, None), pred=(None, None, 1, 2)
        )
        assert validate_tree(triangle, tree)["unreachable_have_no_predecessor"] is False
