"""
Back-pointer record used during path searches.
"""

from dataclasses import dataclass
from typing import Any, List, Optional


@dataclass(frozen=True)
class pypathnode:
    """
    A vertex reached by a search, linked to the node it was reached from.

    Attributes:
        vertex: Vertex label
        index: Vertex index inside the graph at search time
        previous: Node this one was reached from, None at the source
        cost: Cumulative cost from the source
    """

    vertex: Any
    index: int
    previous: Optional["pypathnode"] = None
    cost: float = 0.0

    def extend(self, vertex: Any, index: int, step_cost: float = 0.0) -> "pypathnode":
        """Create the successor node reached from this one over an edge of step_cost."""
        return pypathnode(vertex, index, self, self.cost + step_cost)

    def to_path(self) -> List[Any]:
        """
        Reconstruct the path by walking back-pointers to the source.

        Returns:
            Vertex labels from the source to this node, inclusive
        """
        path = []
        node = self
        while node is not None:
            path.append(node.vertex)
            node = node.previous
        path.reverse()
        return path

    def to_indices(self) -> List[int]:
        """Same as to_path, but returns vertex indices."""
        indices = []
        node = self
        while node is not None:
            indices.append(node.index)
            node = node.previous
        indices.reverse()
        return indices

    def __len__(self) -> int:
        length = 0
        node = self
        while node is not None:
            length += 1
            node = node.previous
        return length
