"""
Core graph data structures and management.

This module contains the adjacency matrix graph and the weighted network
built on top of it.
"""

from .graph import AdjacencyMatrixGraph
from .network import WeightedNetwork

__all__ = ['AdjacencyMatrixGraph', 'WeightedNetwork']
