"""
Utility functions for matrixgraph.

This module provides shared helpers used across the matrixgraph package,
including adjacency extraction from matrices, ordered insertion, component
detection and vertex policies.
"""

import bisect
import logging
from typing import Any, Callable, Dict, Iterable, List

import numpy as np

logger = logging.getLogger(__name__)


def adjacency_from_matrix(adjacency: np.ndarray, nVertex: int) -> Dict[int, List[int]]:
    """
    Convert the live block of a boolean adjacency matrix into an adjacency dict.

    Args:
        adjacency: Square boolean matrix, possibly larger than nVertex
        nVertex: Number of live vertices

    Returns:
        Dictionary mapping vertex index -> successor indices in increasing order
    """
    block = adjacency[:nVertex, :nVertex]
    return {i: np.flatnonzero(block[i]).tolist() for i in range(nVertex)}


def undirected_adjacency(adjacency: np.ndarray, nVertex: int) -> Dict[int, List[int]]:
    """
    Same as adjacency_from_matrix, but edges are followed in both directions.
    """
    block = adjacency[:nVertex, :nVertex]
    symmetric = block | block.T
    return {i: np.flatnonzero(symmetric[i]).tolist() for i in range(nVertex)}


def insert_ordered(aValue: List[Any], value: Any) -> bool:
    """
    Insert value into a sorted list, skipping values already present.

    Args:
        aValue: List kept in natural (ascending) order
        value: Value to insert, must be comparable with the list items

    Returns:
        True if the value was inserted, False if it was already present
    """
    position = bisect.bisect_left(aValue, value)
    if position < len(aValue) and aValue[position] == value:
        return False
    aValue.insert(position, value)
    return True


def find_strongly_connected_components(adjacency_dict: Dict[int, List[int]]) -> List[List[int]]:
    """
    Find strongly connected components with an iterative Tarjan search.

    The depth-first walk keeps its own frame stack of (node, next successor
    position), so path length is not bounded by the interpreter recursion
    limit.

    Args:
        adjacency_dict: Dictionary mapping node_id -> list of successor node_ids

    Returns:
        List of strongly connected components, each a sorted list of node IDs
    """
    discovery: Dict[int, int] = {}
    lowlink: Dict[int, int] = {}
    aPending: List[int] = []
    pending_set = set()
    components = []

    for root in adjacency_dict:
        if root in discovery:
            continue

        frames = [(root, 0)]
        discovery[root] = lowlink[root] = len(discovery)
        aPending.append(root)
        pending_set.add(root)

        while frames:
            node, position = frames[-1]
            successors = adjacency_dict.get(node, [])

            if position < len(successors):
                frames[-1] = (node, position + 1)
                successor = successors[position]
                if successor not in discovery:
                    discovery[successor] = lowlink[successor] = len(discovery)
                    aPending.append(successor)
                    pending_set.add(successor)
                    frames.append((successor, 0))
                elif successor in pending_set:
                    lowlink[node] = min(lowlink[node], discovery[successor])
                continue

            frames.pop()
            if frames:
                parent = frames[-1][0]
                lowlink[parent] = min(lowlink[parent], lowlink[node])

            # node roots a component: everything pending above it belongs to it
            if lowlink[node] == discovery[node]:
                component = []
                while True:
                    member = aPending.pop()
                    pending_set.discard(member)
                    component.append(member)
                    if member == node:
                        break
                components.append(sorted(component))

    logger.debug(f"Found {len(components)} strongly connected components")
    return components


def sentinel_labels(*labels: Any) -> Callable[[Any], bool]:
    """
    Build a free-traversal predicate that matches the given vertex labels.

    Edges touching a matching vertex cost nothing to traverse, e.g. the
    entry and exit points of a modelled building.

    Example:
        >>> free = sentinel_labels("entrance", "exit")
        >>> free("exit"), free("hall")
        (True, False)
    """
    aLabel = list(labels)

    def is_free(vertex: Any) -> bool:
        return any(vertex == label for label in aLabel)

    return is_free


def never_free(vertex: Any) -> bool:
    """Default free-traversal policy: no vertex is special."""
    return False


def ensure_iterable(values: Iterable[Any]) -> List[Any]:
    """Materialize an iterable of vertex labels, rejecting plain strings."""
    if isinstance(values, (str, bytes)):
        logger.debug("String passed where an iterable of vertices was expected")
        raise TypeError("Expected an iterable of vertices, got a single string")
    return list(values)
