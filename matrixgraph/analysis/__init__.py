"""
Traversal and path finding algorithms for matrix graphs.

These classes work on vertex indices; the graph classes translate labels
and raise the typed errors.
"""

from .traversal import GraphTraversal
from .pathfinding import PathFinder

__all__ = ['GraphTraversal', 'PathFinder']
