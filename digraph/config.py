"""
Configuration constants for the digraph library.

Tunable settings are read from environment variables so scripts can
override them (or load them from a .env file) without code changes.
"""

import os

# =============================================================================
# Shortest Path Configuration
# =============================================================================

# Frontier selection strategies for Dijkstra:
#   scan - linear scan over all vertices, O(V^2 + E)
#   heap - binary heap, O((V + E) log V)
DIJKSTRA_STRATEGIES = ("scan", "heap")

# Strategy used when pwsssp() is called without an explicit one
DIJKSTRA_STRATEGY = os.environ.get("DIGRAPH_DIJKSTRA_STRATEGY", "scan").lower()

# Default weight for edges given without one
DEFAULT_EDGE_WEIGHT = 1

# =============================================================================
# Report Configuration
# =============================================================================

# Width of the blank rule lines around each report
GRAPH_RULE_WIDTH = 66
TREE_RULE_WIDTH = 22

# Values printed for an unreached vertex in the dist/path table
UNREACHABLE_DISTANCE = -1
NO_PREDECESSOR = 0

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_strategy(name: str | None) -> str:
    """Return a known Dijkstra strategy name, falling back to the configured default."""
    strategy = (name or DIJKSTRA_STRATEGY).lower()
    if strategy not in DIJKSTRA_STRATEGIES:
        available = ", ".join(DIJKSTRA_STRATEGIES)
        raise ValueError(f"Unknown Dijkstra strategy '{strategy}'. Available: {available}")
    return strategy
