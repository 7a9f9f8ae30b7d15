"""
Core graph data structure backed by an adjacency matrix.

This module provides the directed graph used throughout matrixgraph: an
insertion-ordered vertex store plus a square boolean adjacency matrix that
grows by doubling.
"""

import logging
from typing import Any, Generic, Iterable, Iterator, List, TypeVar

import numpy as np

from ..analysis.traversal import GraphTraversal
from ..classes.exceptions import (
    ElementNotFoundError,
    EmptyCollectionError,
    InvalidArgumentError,
    UnknownPathError,
)
from ..classes.utils import (
    adjacency_from_matrix,
    ensure_iterable,
    find_strongly_connected_components,
    insert_ordered,
    undirected_adjacency,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_CAPACITY = 50


def compact_matrix(matrix: np.ndarray, nVertex: int, index: int, fill: Any) -> None:
    """
    Remove row and column `index` from the live block of a square matrix in place.

    Entries after `index` move up/left by one, so vertex i > index becomes
    vertex i - 1. The freed last row and column are reset to `fill`.

    Args:
        matrix: Square matrix, dimension >= nVertex
        nVertex: Number of live vertices before the removal
        index: Index of the vertex being removed
        fill: Value for the cells vacated by the shift
    """
    block = np.delete(np.delete(matrix[:nVertex, :nVertex], index, axis=0), index, axis=1)
    matrix[:nVertex, :nVertex] = fill
    matrix[:nVertex - 1, :nVertex - 1] = block


def grow_matrix(matrix: np.ndarray, dimension: int, fill: Any) -> np.ndarray:
    """Return a copy of a square matrix enlarged to `dimension`, new cells set to `fill`."""
    grown = np.full((dimension, dimension), fill, dtype=matrix.dtype)
    size = matrix.shape[0]
    grown[:size, :size] = matrix
    return grown


class AdjacencyMatrixGraph(Generic[T]):
    """
    Directed graph stored as a boolean adjacency matrix.

    The index of a vertex is its identity: vertices are appended at the next
    free index and removing one shifts every later vertex down by one. Labels
    need not be unique; lookup by value returns the first matching index.

    Edges are always directed. get_neighbours offers the undirected view
    (predecessors and successors together) as a derived query.
    """

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY):
        """
        Create an empty graph.

        Args:
            initial_capacity: Initial dimension of the adjacency matrix
        """
        if initial_capacity < 1:
            raise InvalidArgumentError(f"Initial capacity must be positive, got {initial_capacity}")

        self.nVertex = 0
        self.aVertex: List[T] = []
        self.aAdjacency = np.zeros((initial_capacity, initial_capacity), dtype=bool)

        self._traversal = GraphTraversal(self)

    # ========================================================================
    # VERTEX OPERATIONS
    # ========================================================================

    @property
    def capacity(self) -> int:
        """Current dimension of the adjacency matrix."""
        return self.aAdjacency.shape[0]

    @property
    def vertices(self) -> List[T]:
        """Copy of the vertex labels in index order."""
        return list(self.aVertex)

    def add_vertex(self, vertex: T) -> None:
        """
        Append a vertex at the next free index, growing the matrices if needed.

        Args:
            vertex: Vertex label
        """
        if self._needs_expansion():
            self._expand_matrix(self.capacity * 2)

        index = self.nVertex
        self.aVertex.append(vertex)
        self._clear_vertex(index)
        self.nVertex += 1

    def add_vertices(self, vertices: Iterable[T]) -> None:
        """Append several vertices in order."""
        for vertex in ensure_iterable(vertices):
            self.add_vertex(vertex)

    def remove_vertex(self, vertex: T) -> None:
        """
        Remove the first vertex equal to `vertex`, with all its edges.

        Later vertices shift down one index; the matrices lose the vertex's
        row and column so the remaining edges keep their endpoints.

        Raises:
            EmptyCollectionError: If the graph has no vertices
            ElementNotFoundError: If no vertex equals `vertex`
        """
        index = self.get_index(vertex)

        self._compact_matrices(index)
        del self.aVertex[index]
        self.nVertex -= 1

        logger.debug(f"Removed vertex {vertex!r} at index {index}, {self.nVertex} vertices left")

    def get_index(self, vertex: T) -> int:
        """
        Get the index of the first vertex equal to `vertex`.

        Raises:
            EmptyCollectionError: If the graph has no vertices
            ElementNotFoundError: If no vertex equals `vertex`
        """
        if self.is_empty():
            raise EmptyCollectionError("Cannot look up a vertex in an empty graph")

        for index, candidate in enumerate(self.aVertex):
            if candidate == vertex:
                return index

        raise ElementNotFoundError(f"Vertex {vertex!r} is not in the graph")

    def get_vertex(self, index: int) -> T:
        """Get the vertex label stored at `index`."""
        self._check_index(index)
        return self.aVertex[index]

    def index_is_valid(self, index: int) -> bool:
        """Whether `index` addresses a live vertex."""
        return 0 <= index < self.nVertex

    # ========================================================================
    # EDGE OPERATIONS
    # ========================================================================

    def add_edge(self, vertex1: T, vertex2: T) -> None:
        """
        Add the directed edge vertex1 -> vertex2. The reverse edge is not added.

        Raises:
            EmptyCollectionError: If the graph has no vertices
            ElementNotFoundError: If either vertex is absent
        """
        self.add_edge_by_index(self.get_index(vertex1), self.get_index(vertex2))

    def add_edge_by_index(self, index1: int, index2: int) -> None:
        """Add the directed edge index1 -> index2."""
        self._check_index(index1)
        self._check_index(index2)
        self.aAdjacency[index1, index2] = True

    def remove_edge(self, vertex1: T, vertex2: T) -> None:
        """
        Remove the directed edge vertex1 -> vertex2, if present.

        Raises:
            EmptyCollectionError: If the graph has no vertices
            ElementNotFoundError: If either vertex is absent
        """
        self.remove_edge_by_index(self.get_index(vertex1), self.get_index(vertex2))

    def remove_edge_by_index(self, index1: int, index2: int) -> None:
        """Remove the directed edge index1 -> index2, if present."""
        self._check_index(index1)
        self._check_index(index2)
        self.aAdjacency[index1, index2] = False

    def has_edge(self, vertex1: T, vertex2: T) -> bool:
        """Whether the directed edge vertex1 -> vertex2 exists."""
        return bool(self.aAdjacency[self.get_index(vertex1), self.get_index(vertex2)])

    def get_successors(self, vertex: T) -> List[T]:
        """Targets of the edges leaving `vertex`, in index order."""
        index = self.get_index(vertex)
        return [self.aVertex[j] for j in np.flatnonzero(self.aAdjacency[index, :self.nVertex])]

    def get_predecessors(self, vertex: T) -> List[T]:
        """Sources of the edges entering `vertex`, in index order."""
        index = self.get_index(vertex)
        return [self.aVertex[j] for j in np.flatnonzero(self.aAdjacency[:self.nVertex, index])]

    def get_neighbours(self, vertex: T) -> List[T]:
        """
        Get every vertex joined to `vertex` by an edge in either direction.

        This is the undirected view over the directed edge store. Labels must
        support ordering.

        Returns:
            Sorted list of neighbour labels without duplicates

        Raises:
            EmptyCollectionError: If the graph has no vertices
            ElementNotFoundError: If `vertex` is absent
        """
        index = self.get_index(vertex)
        neighbours: List[T] = []

        for j in np.flatnonzero(self.aAdjacency[:self.nVertex, index]):
            insert_ordered(neighbours, self.aVertex[j])
        for j in np.flatnonzero(self.aAdjacency[index, :self.nVertex]):
            insert_ordered(neighbours, self.aVertex[j])

        return neighbours

    # ========================================================================
    # TRAVERSAL
    # ========================================================================

    def iterator_bfs(self, start_index: int) -> List[T]:
        """Breadth-first order from a start index; empty for an invalid index."""
        return [self.aVertex[i] for i in self._traversal.bfs(start_index)]

    def iterator_dfs(self, start_index: int) -> List[T]:
        """Depth-first discovery order from a start index; empty for an invalid index."""
        return [self.aVertex[i] for i in self._traversal.dfs(start_index)]

    def bfs(self, start_vertex: T) -> List[T]:
        """
        Breadth-first traversal starting at a vertex.

        Raises:
            EmptyCollectionError: If the graph has no vertices
            ElementNotFoundError: If `start_vertex` is absent
        """
        return self.iterator_bfs(self.get_index(start_vertex))

    def dfs(self, start_vertex: T) -> List[T]:
        """
        Depth-first traversal starting at a vertex, in discovery order.

        Raises:
            EmptyCollectionError: If the graph has no vertices
            ElementNotFoundError: If `start_vertex` is absent
        """
        return self.iterator_dfs(self.get_index(start_vertex))

    def shortest_path(self, start_vertex: T, target_vertex: T) -> List[T]:
        """
        Path with the fewest edges from start to target, both inclusive.

        Raises:
            EmptyCollectionError: If the graph has no vertices
            ElementNotFoundError: If either vertex is absent
            UnknownPathError: If the target cannot be reached
        """
        start_id = self.get_index(start_vertex)
        target_id = self.get_index(target_vertex)

        node = self._traversal.find_hop_path(start_id, target_id)
        if node is None:
            raise UnknownPathError(f"No path from {start_vertex!r} to {target_vertex!r}")
        return node.to_path()

    # ========================================================================
    # CONNECTIVITY
    # ========================================================================

    def is_connected(self) -> bool:
        """
        Whether every vertex can be reached from vertex 0 along directed edges.

        Raises:
            EmptyCollectionError: If the graph has no vertices
        """
        if self.is_empty():
            raise EmptyCollectionError("Cannot check connectedness of an empty graph")
        return self._traversal.count_reachable(0) == self.nVertex

    def is_weakly_connected(self) -> bool:
        """
        Whether the graph is connected when edge directions are ignored.

        Raises:
            EmptyCollectionError: If the graph has no vertices
        """
        if self.is_empty():
            raise EmptyCollectionError("Cannot check connectedness of an empty graph")
        components = find_strongly_connected_components(undirected_adjacency(self.aAdjacency, self.nVertex))
        return len(components) == 1

    def is_strongly_connected(self) -> bool:
        """
        Whether every vertex can reach every other vertex.

        Raises:
            EmptyCollectionError: If the graph has no vertices
        """
        if self.is_empty():
            raise EmptyCollectionError("Cannot check connectedness of an empty graph")
        return len(self.strongly_connected_components()) == 1

    def strongly_connected_components(self) -> List[List[T]]:
        """Strongly connected components as lists of labels, each in index order."""
        components = find_strongly_connected_components(adjacency_from_matrix(self.aAdjacency, self.nVertex))
        return [[self.aVertex[i] for i in component] for component in components]

    # ========================================================================
    # BASIC QUERIES
    # ========================================================================

    def size(self) -> int:
        """Number of vertices."""
        return self.nVertex

    def is_empty(self) -> bool:
        return self.nVertex == 0

    def adjacency_matrix(self) -> np.ndarray:
        """Copy of the live n x n block of the adjacency matrix."""
        return self.aAdjacency[:self.nVertex, :self.nVertex].copy()

    def to_string(self) -> str:
        """Vertex list followed by the live adjacency block as 0/1 rows."""
        lines = [f"vertices: {self.aVertex}"]
        for row in self.adjacency_matrix().astype(int):
            lines.append(" ".join(str(cell) for cell in row))
        return "\n".join(lines)

    def __len__(self) -> int:
        return self.nVertex

    def __iter__(self) -> Iterator[T]:
        return iter(list(self.aVertex))

    def __contains__(self, vertex: object) -> bool:
        return any(candidate == vertex for candidate in self.aVertex)

    def __repr__(self) -> str:
        nEdge = int(np.count_nonzero(self.aAdjacency[:self.nVertex, :self.nVertex]))
        return f"{type(self).__name__}(vertices={self.nVertex}, edges={nEdge}, capacity={self.capacity})"

    # ========================================================================
    # PRIVATE METHODS (matrix management, overridden by WeightedNetwork)
    # ========================================================================

    def _check_index(self, index: int) -> None:
        if not self.index_is_valid(index):
            raise ElementNotFoundError(f"No vertex at index {index}")

    def _needs_expansion(self) -> bool:
        """Whether appending one more vertex requires larger matrices."""
        return self.nVertex >= self.capacity

    def _expand_matrix(self, dimension: int) -> None:
        """Grow the adjacency matrix to `dimension`, keeping all edges."""
        logger.debug(f"Expanding adjacency matrix from {self.capacity} to {dimension}")
        self.aAdjacency = grow_matrix(self.aAdjacency, dimension, False)

    def _clear_vertex(self, index: int) -> None:
        """Reset the row and column of a freshly added vertex."""
        self.aAdjacency[index, :] = False
        self.aAdjacency[:, index] = False

    def _compact_matrices(self, index: int) -> None:
        """Drop the row and column of the vertex at `index` from every matrix."""
        compact_matrix(self.aAdjacency, self.nVertex, index, False)
