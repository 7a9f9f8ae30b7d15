"""
Traversal and reachability analysis for adjacency matrix graphs.

This module provides breadth-first and depth-first traversals working on
vertex indices. Validation of vertex labels is left to the graph classes.
"""

import logging
from collections import deque
from typing import List, Optional, TYPE_CHECKING

import numpy as np

from ..classes.pathnode import pypathnode

if TYPE_CHECKING:
    from ..core.graph import AdjacencyMatrixGraph

logger = logging.getLogger(__name__)


class GraphTraversal:
    """
    Traversal algorithms for adjacency matrix graphs.

    This class provides methods for:
    - Breadth-first traversal
    - Depth-first traversal (discovery order)
    - Counting reachable vertices
    - Fewest-hops paths between two vertices
    """

    def __init__(self, graph: "AdjacencyMatrixGraph"):
        """
        Initialize the traversal helper.

        Args:
            graph: AdjacencyMatrixGraph instance to traverse
        """
        self.graph = graph

    def _successors(self, index: int) -> np.ndarray:
        nVertex = self.graph.nVertex
        return np.flatnonzero(self.graph.aAdjacency[index, :nVertex])

    def bfs(self, start_id: int) -> List[int]:
        """
        Breadth-first traversal from a start vertex.

        Vertices are reported in dequeue order; successors are scanned in
        increasing index order.

        Args:
            start_id: Starting vertex index

        Returns:
            Indices of the reachable vertices, each exactly once. Empty if
            start_id is not a valid index.
        """
        nVertex = self.graph.nVertex
        if not 0 <= start_id < nVertex:
            return []

        visited = np.zeros(nVertex, dtype=bool)
        queue = deque([start_id])
        visited[start_id] = True
        order = []

        while queue:
            current_id = queue.popleft()
            order.append(current_id)

            for neighbor_id in self._successors(current_id):
                if not visited[neighbor_id]:
                    visited[neighbor_id] = True
                    queue.append(int(neighbor_id))

        return order

    def dfs(self, start_id: int) -> List[int]:
        """
        Depth-first traversal from a start vertex using an explicit stack.

        A vertex is recorded the moment it is pushed. At each step the stack
        top is inspected and its first unvisited successor (by index) is
        pushed; when it has none, the top is popped.

        Args:
            start_id: Starting vertex index

        Returns:
            Indices in discovery order. Empty if start_id is not a valid index.
        """
        nVertex = self.graph.nVertex
        if not 0 <= start_id < nVertex:
            return []

        visited = np.zeros(nVertex, dtype=bool)
        stack = [start_id]
        visited[start_id] = True
        order = [start_id]

        while stack:
            current_id = stack[-1]
            candidates = np.flatnonzero(self.graph.aAdjacency[current_id, :nVertex] & ~visited)

            if candidates.size:
                neighbor_id = int(candidates[0])
                stack.append(neighbor_id)
                order.append(neighbor_id)
                visited[neighbor_id] = True
            else:
                stack.pop()

        return order

    def count_reachable(self, start_id: int) -> int:
        """Number of vertices reachable from start_id, itself included."""
        return len(self.bfs(start_id))

    def find_hop_path(self, start_id: int, target_id: int) -> Optional[pypathnode]:
        """
        Find a path with the fewest edges using breadth-first search.

        Args:
            start_id: Starting vertex index
            target_id: Target vertex index

        Returns:
            Path node for the target (walk its back-pointers for the path),
            or None if the target is unreachable
        """
        nVertex = self.graph.nVertex
        aVertex = self.graph.aVertex
        if not (0 <= start_id < nVertex and 0 <= target_id < nVertex):
            return None

        visited = np.zeros(nVertex, dtype=bool)
        visited[start_id] = True
        queue = deque([pypathnode(aVertex[start_id], start_id)])

        while queue:
            node = queue.popleft()
            if node.index == target_id:
                logger.debug(f"Hop path {start_id} -> {target_id} found with {len(node) - 1} edges")
                return node

            for neighbor_id in self._successors(node.index):
                if not visited[neighbor_id]:
                    visited[neighbor_id] = True
                    neighbor_id = int(neighbor_id)
                    queue.append(node.extend(aVertex[neighbor_id], neighbor_id, 1.0))

        logger.debug(f"No hop path {start_id} -> {target_id}")
        return None
