"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import importlib.util
from pathlib import Path

import pytest

from digraph import Digraph


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def triangle() -> Digraph:
    """
    Three vertices where the two-hop route is cheaper than the direct edge.

    1 -> 2 (1), 2 -> 3 (1), 1 -> 3 (5)
    """
    return Digraph.from_edges([(1, 2, 1), (2, 3, 1), (1, 3, 5)], 3)


@pytest.fixture
def diamond() -> Digraph:
    """
    Two equal-cost routes from 1 to 4, with 3 listed before 2 in 1's adjacency.

    1 -> 3 (1), 1 -> 2 (1), 2 -> 4 (1), 3 -> 4 (1)
    """
    return Digraph.from_edges([(1, 3, 1), (1, 2, 1), (2, 4, 1), (3, 4, 1)], 4)


@pytest.fixture
def with_isolated() -> Digraph:
    """Triangle plus a fourth vertex no edge touches."""
    return Digraph.from_edges([(1, 2, 1), (2, 3, 1), (1, 3, 5)], 4)


@pytest.fixture
def sssp_cli(project_root: Path):
    """Load scripts/sssp.py as a module."""
    path = project_root / "scripts" / "sssp.py"
    spec = importlib.util.spec_from_file_location("sssp_cli", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
