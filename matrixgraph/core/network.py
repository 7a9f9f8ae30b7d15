"""
Weighted network built on the adjacency matrix graph.

A WeightedNetwork keeps a float weight matrix in lockstep with the boolean
adjacency matrix and answers least-cost path queries.
"""

import logging
import math
from typing import Any, Callable, List, Optional, TypeVar

import numpy as np

from .graph import AdjacencyMatrixGraph, DEFAULT_CAPACITY, compact_matrix, grow_matrix
from ..analysis.pathfinding import PathFinder
from ..classes.exceptions import InvalidArgumentError, UnknownPathError
from ..classes.pathnode import pypathnode
from ..classes.utils import never_free

logger = logging.getLogger(__name__)

T = TypeVar("T")


class WeightedNetwork(AdjacencyMatrixGraph[T]):
    """
    Directed network with non-negative real edge weights.

    Structural operations are inherited from AdjacencyMatrixGraph; this class
    adds the weight bookkeeping and the shortest path search.

    The free-traversal policy is a predicate over vertex labels. Any weight
    set on an edge touching a vertex it accepts is stored as 0.0. Only the
    requested direction is written; the reverse edge, when it is set, passes
    through the same policy and is zeroed too. The policy runs before either
    matrix is touched, so a predicate that raises leaves the network unchanged.
    """

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY,
                 free_traversal: Optional[Callable[[Any], bool]] = None):
        """
        Create an empty network.

        Args:
            initial_capacity: Initial dimension of the adjacency and weight matrices
            free_traversal: Optional predicate marking vertices whose edges cost nothing
        """
        super().__init__(initial_capacity)
        self.aWeight = np.zeros((self.capacity, self.capacity), dtype=np.float64)
        self.free_traversal = free_traversal if free_traversal is not None else never_free

        self._pathfinder = PathFinder(self)

    # ========================================================================
    # WEIGHTED EDGE OPERATIONS
    # ========================================================================

    def add_edge(self, vertex1: T, vertex2: T, weight: float = 0.0) -> None:
        """
        Add the directed edge vertex1 -> vertex2 with a weight.

        Raises:
            InvalidArgumentError: If the weight is negative or NaN
            EmptyCollectionError: If the network has no vertices
            ElementNotFoundError: If either vertex is absent
        """
        weight = self._check_weight(weight)
        self.add_edge_by_index(self.get_index(vertex1), self.get_index(vertex2), weight)

    def add_edge_by_index(self, index1: int, index2: int, weight: float = 0.0) -> None:
        """Add the directed edge index1 -> index2 with a weight."""
        weight = self._check_weight(weight)
        self._check_index(index1)
        self._check_index(index2)
        weight = self._effective_weight(index1, index2, weight)

        super().add_edge_by_index(index1, index2)
        self.aWeight[index1, index2] = weight

    def remove_edge_by_index(self, index1: int, index2: int) -> None:
        """Remove the directed edge index1 -> index2 and reset its weight."""
        super().remove_edge_by_index(index1, index2)
        self.aWeight[index1, index2] = 0.0

    def set_edge_weight(self, vertex1: T, vertex2: T, weight: float) -> None:
        """
        Set the weight stored for vertex1 -> vertex2.

        The edge itself is not created. When either endpoint is a
        free-traversal vertex the stored weight is 0.0.

        Raises:
            InvalidArgumentError: If the weight is negative or NaN
            EmptyCollectionError: If the network has no vertices
            ElementNotFoundError: If either vertex is absent
        """
        weight = self._check_weight(weight)
        index1 = self.get_index(vertex1)
        index2 = self.get_index(vertex2)
        self.aWeight[index1, index2] = self._effective_weight(index1, index2, weight)

    def get_edge_weight(self, vertex1: T, vertex2: T) -> float:
        """
        Get the weight stored for vertex1 -> vertex2.

        Raises:
            EmptyCollectionError: If the network has no vertices
            ElementNotFoundError: If either vertex is absent
        """
        return float(self.aWeight[self.get_index(vertex1), self.get_index(vertex2)])

    def weight_matrix(self) -> np.ndarray:
        """Copy of the live n x n block of the weight matrix."""
        return self.aWeight[:self.nVertex, :self.nVertex].copy()

    # ========================================================================
    # PATH FINDING
    # ========================================================================

    def shortest_path_weight(self, source: T, target: T) -> List[T]:
        """
        Minimum-cost path from source to target.

        Returns:
            Vertex labels from source to target, both inclusive

        Raises:
            EmptyCollectionError: If the network has no vertices
            ElementNotFoundError: If source or target is absent
            UnknownPathError: If target cannot be reached from source
        """
        return self._find_cheapest(source, target).to_path()

    def shortest_path_cost(self, source: T, target: T) -> float:
        """Total weight of the path returned by shortest_path_weight."""
        return self._find_cheapest(source, target).cost

    # ========================================================================
    # PRIVATE METHODS
    # ========================================================================

    def _find_cheapest(self, source: T, target: T) -> pypathnode:
        source_id = self.get_index(source)
        target_id = self.get_index(target)

        node = self._pathfinder.find_cheapest_path(source_id, target_id)
        if node is None:
            raise UnknownPathError(f"No path from {source!r} to {target!r}")
        return node

    def _check_weight(self, weight: float) -> float:
        try:
            weight = float(weight)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(f"Edge weight must be a number, got {weight!r}") from e

        if math.isnan(weight) or weight < 0.0:
            logger.debug(f"Rejected edge weight {weight}")
            raise InvalidArgumentError(f"Edge weight must be non-negative, got {weight}")
        return weight

    def _effective_weight(self, index1: int, index2: int, weight: float) -> float:
        """Weight to store for index1 -> index2 once the free-traversal policy is applied."""
        if self.free_traversal(self.aVertex[index1]) or self.free_traversal(self.aVertex[index2]):
            return 0.0
        return weight

    def _needs_expansion(self) -> bool:
        # Grow one vertex early so both matrices always have a spare row
        return self.nVertex + 1 >= self.capacity

    def _expand_matrix(self, dimension: int) -> None:
        super()._expand_matrix(dimension)
        self.aWeight = grow_matrix(self.aWeight, dimension, 0.0)

    def _clear_vertex(self, index: int) -> None:
        super()._clear_vertex(index)
        self.aWeight[index, :] = 0.0
        self.aWeight[:, index] = 0.0

    def _compact_matrices(self, index: int) -> None:
        super()._compact_matrices(index)
        compact_matrix(self.aWeight, self.nVertex, index, 0.0)
