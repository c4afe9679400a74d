"""Graph module providing the dependency graph store.

This module contains:
- DependencyGraph: an ordered, append-only edge list with a cached adjacency index
"""

from ._dependency_graph import DependencyGraph

__all__ = ["DependencyGraph"]
