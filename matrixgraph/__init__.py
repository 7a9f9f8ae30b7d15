"""
PyMatrixGraph - Adjacency Matrix Graph and Weighted Network Library

A Python library for directed graphs stored as adjacency matrices, with
breadth-first and depth-first traversal, connectivity checks and least-cost
path search over non-negative edge weights.

Main Classes:
    AdjacencyMatrixGraph: Directed graph with vertex/edge management and traversal
    WeightedNetwork: Graph with non-negative edge weights and shortest paths
    pypathnode: Back-pointer record produced by path searches

Example:
    >>> from matrixgraph import WeightedNetwork
    >>> network = WeightedNetwork()
    >>> network.add_vertices(["A", "B", "C"])
    >>> network.add_edge("A", "B", 2.0)
    >>> network.add_edge("B", "C", 1.5)
    >>> network.shortest_path_weight("A", "C")
    ['A', 'B', 'C']
"""

__version__ = "0.1.0"

from matrixgraph.classes.exceptions import (
    GraphError,
    EmptyCollectionError,
    ElementNotFoundError,
    InvalidArgumentError,
    UnknownPathError,
)
from matrixgraph.classes.pathnode import pypathnode
from matrixgraph.classes.utils import sentinel_labels
from matrixgraph.core.graph import AdjacencyMatrixGraph, DEFAULT_CAPACITY
from matrixgraph.core.network import WeightedNetwork

__all__ = [
    'AdjacencyMatrixGraph',
    'WeightedNetwork',
    'pypathnode',
    'sentinel_labels',
    'DEFAULT_CAPACITY',
    'GraphError',
    'EmptyCollectionError',
    'ElementNotFoundError',
    'InvalidArgumentError',
    'UnknownPathError',
]
