"""
Tests for AdjacencyMatrixGraph vertex and edge management.

Covered:
- Vertex insertion, lookup and removal (with matrix compaction)
- Directed edge insertion and removal
- Matrix growth
- Neighbour queries
"""

import numpy as np
import pytest

from matrixgraph import (
    AdjacencyMatrixGraph,
    DEFAULT_CAPACITY,
    ElementNotFoundError,
    EmptyCollectionError,
    InvalidArgumentError,
)


# ==================== Vertex tests ====================

class TestVertices:
    """Vertex insertion, lookup and removal"""

    def test_new_graph_is_empty(self, empty_graph):
        assert empty_graph.is_empty()
        assert empty_graph.size() == 0
        assert len(empty_graph) == 0
        assert empty_graph.capacity == DEFAULT_CAPACITY

    def test_add_vertex_increases_size_by_one(self, empty_graph):
        """Every insertion adds exactly one vertex that can be located"""
        for expected_index, label in enumerate(["x", "y", "z"]):
            before = empty_graph.size()
            empty_graph.add_vertex(label)
            assert empty_graph.size() == before + 1
            assert empty_graph.get_index(label) == expected_index
            assert empty_graph.get_vertex(expected_index) == label

    def test_get_index_on_empty_graph(self, empty_graph):
        with pytest.raises(EmptyCollectionError):
            empty_graph.get_index("A")

    def test_get_index_absent_vertex(self, traversal_graph):
        with pytest.raises(ElementNotFoundError):
            traversal_graph.get_index("Z")

    def test_not_found_is_also_key_error(self, traversal_graph):
        with pytest.raises(KeyError):
            traversal_graph.get_index("Z")

    def test_duplicate_labels_resolve_to_first_match(self, empty_graph):
        empty_graph.add_vertices(["X", "Y", "X"])
        assert empty_graph.get_index("X") == 0

        empty_graph.remove_vertex("X")
        assert empty_graph.vertices == ["Y", "X"]
        assert empty_graph.get_index("X") == 1

    def test_remove_absent_vertex_leaves_graph_unchanged(self, traversal_graph):
        vertices_before = traversal_graph.vertices
        matrix_before = traversal_graph.adjacency_matrix()

        with pytest.raises(ElementNotFoundError):
            traversal_graph.remove_vertex("Z")

        assert traversal_graph.vertices == vertices_before
        assert np.array_equal(traversal_graph.adjacency_matrix(), matrix_before)

    def test_remove_vertex_from_empty_graph(self, empty_graph):
        with pytest.raises(EmptyCollectionError):
            empty_graph.remove_vertex("A")

    def test_remove_vertex_compacts_matrix(self, empty_graph):
        """Removing B shifts C and D down and keeps their edges"""
        empty_graph.add_vertices(["A", "B", "C", "D"])
        empty_graph.add_edge("A", "B")
        empty_graph.add_edge("B", "C")
        empty_graph.add_edge("C", "D")
        empty_graph.add_edge("D", "A")
        empty_graph.add_edge("A", "D")

        empty_graph.remove_vertex("B")

        assert empty_graph.vertices == ["A", "C", "D"]
        assert empty_graph.size() == 3
        expected = np.array([
            [False, False, True],
            [False, False, True],
            [True, False, False],
        ])
        assert np.array_equal(empty_graph.adjacency_matrix(), expected)
        assert empty_graph.has_edge("C", "D")
        assert empty_graph.has_edge("D", "A")
        assert not empty_graph.has_edge("A", "C")

    def test_removed_slot_does_not_leak_into_new_vertex(self, empty_graph):
        empty_graph.add_vertices(["A", "B"])
        empty_graph.add_edge("A", "B")
        empty_graph.add_edge("B", "A")
        empty_graph.remove_vertex("B")

        empty_graph.add_vertex("C")
        assert not empty_graph.has_edge("A", "C")
        assert not empty_graph.has_edge("C", "A")

    def test_remove_last_vertex(self, empty_graph):
        empty_graph.add_vertex("A")
        empty_graph.add_edge("A", "A")
        empty_graph.remove_vertex("A")
        assert empty_graph.is_empty()
        assert empty_graph.adjacency_matrix().shape == (0, 0)

    def test_get_vertex_invalid_index(self, traversal_graph):
        with pytest.raises(ElementNotFoundError):
            traversal_graph.get_vertex(6)
        with pytest.raises(ElementNotFoundError):
            traversal_graph.get_vertex(-1)

    def test_index_is_valid(self, traversal_graph):
        assert traversal_graph.index_is_valid(0)
        assert traversal_graph.index_is_valid(5)
        assert not traversal_graph.index_is_valid(6)
        assert not traversal_graph.index_is_valid(-1)

    def test_add_vertices_rejects_single_string(self, empty_graph):
        with pytest.raises(TypeError):
            empty_graph.add_vertices("ABC")

    def test_container_protocol(self, traversal_graph):
        assert "A" in traversal_graph
        assert "Z" not in traversal_graph
        assert list(traversal_graph) == ["A", "B", "C", "D", "E", "F"]
        assert "vertices=6" in repr(traversal_graph)
        assert "edges=6" in repr(traversal_graph)


# ==================== Capacity tests ====================

class TestCapacity:
    """Matrix growth"""

    def test_invalid_initial_capacity(self):
        with pytest.raises(InvalidArgumentError):
            AdjacencyMatrixGraph(initial_capacity=0)

    def test_capacity_doubles(self):
        graph = AdjacencyMatrixGraph(initial_capacity=2)
        graph.add_vertices(["A", "B"])
        assert graph.capacity == 2

        graph.add_vertex("C")
        assert graph.capacity == 4

    def test_growth_preserves_edges(self):
        graph = AdjacencyMatrixGraph(initial_capacity=2)
        graph.add_vertices(["A", "B"])
        graph.add_edge("A", "B")
        graph.add_edge("B", "A")

        graph.add_vertices(["C", "D", "E"])

        assert graph.capacity >= 5
        assert graph.has_edge("A", "B")
        assert graph.has_edge("B", "A")
        assert not graph.has_edge("A", "E")
        assert int(graph.adjacency_matrix().sum()) == 2


# ==================== Edge tests ====================

class TestEdges:
    """Directed edge insertion and removal"""

    def test_edges_are_directed(self, empty_graph):
        empty_graph.add_vertices(["A", "B"])
        empty_graph.add_edge("A", "B")

        assert empty_graph.has_edge("A", "B")
        assert not empty_graph.has_edge("B", "A")

    def test_both_directions_when_added_explicitly(self, empty_graph):
        empty_graph.add_vertices(["A", "B"])
        empty_graph.add_edge("A", "B")
        empty_graph.add_edge("B", "A")

        assert empty_graph.has_edge("A", "B")
        assert empty_graph.has_edge("B", "A")

    def test_add_then_remove_restores_no_edge_state(self, empty_graph):
        empty_graph.add_vertices(["A", "B", "C"])
        before = empty_graph.adjacency_matrix()

        empty_graph.add_edge("A", "C")
        empty_graph.remove_edge("A", "C")

        assert np.array_equal(empty_graph.adjacency_matrix(), before)

    def test_remove_edge_keeps_reverse_edge(self, empty_graph):
        empty_graph.add_vertices(["A", "B"])
        empty_graph.add_edge("A", "B")
        empty_graph.add_edge("B", "A")
        empty_graph.remove_edge("A", "B")

        assert not empty_graph.has_edge("A", "B")
        assert empty_graph.has_edge("B", "A")

    def test_add_edge_with_absent_vertex(self, empty_graph):
        empty_graph.add_vertex("A")
        before = empty_graph.adjacency_matrix()

        with pytest.raises(ElementNotFoundError):
            empty_graph.add_edge("A", "Z")
        with pytest.raises(ElementNotFoundError):
            empty_graph.remove_edge("Z", "A")

        assert np.array_equal(empty_graph.adjacency_matrix(), before)

    def test_add_edge_on_empty_graph(self, empty_graph):
        with pytest.raises(EmptyCollectionError):
            empty_graph.add_edge("A", "B")

    def test_add_edge_by_index(self, empty_graph):
        empty_graph.add_vertices(["A", "B"])
        empty_graph.add_edge_by_index(1, 0)
        assert empty_graph.has_edge("B", "A")

        empty_graph.remove_edge_by_index(1, 0)
        assert not empty_graph.has_edge("B", "A")

    def test_add_edge_by_invalid_index(self, empty_graph):
        empty_graph.add_vertices(["A", "B"])
        with pytest.raises(ElementNotFoundError):
            empty_graph.add_edge_by_index(0, 2)

    def test_self_loop(self, empty_graph):
        empty_graph.add_vertex("A")
        empty_graph.add_edge("A", "A")
        assert empty_graph.has_edge("A", "A")


# ==================== Neighbour tests ====================

class TestNeighbours:
    """Undirected neighbour view and directed successor/predecessor views"""

    @pytest.fixture
    def star_graph(self):
        graph = AdjacencyMatrixGraph()
        graph.add_vertices(["c", "a", "d", "b", "e"])
        graph.add_edge("d", "a")
        graph.add_edge("a", "b")
        graph.add_edge("b", "a")
        graph.add_edge("a", "c")
        return graph

    def test_neighbours_sorted_without_duplicates(self, star_graph):
        assert star_graph.get_neighbours("a") == ["b", "c", "d"]

    def test_neighbours_of_isolated_vertex(self, star_graph):
        assert star_graph.get_neighbours("e") == []

    def test_neighbours_include_predecessors(self, star_graph):
        assert star_graph.get_neighbours("c") == ["a"]

    def test_neighbours_errors(self, star_graph, empty_graph):
        with pytest.raises(ElementNotFoundError):
            star_graph.get_neighbours("z")
        with pytest.raises(EmptyCollectionError):
            empty_graph.get_neighbours("a")

    def test_successors_and_predecessors(self, star_graph):
        # index order: c, a, d, b, e
        assert star_graph.get_successors("a") == ["c", "b"]
        assert star_graph.get_predecessors("a") == ["d", "b"]
        assert star_graph.get_successors("e") == []

    def test_numeric_labels(self):
        graph = AdjacencyMatrixGraph()
        graph.add_vertices([30, 10, 20])
        graph.add_edge(30, 10)
        graph.add_edge(20, 10)
        assert graph.get_neighbours(10) == [20, 30]


# ==================== Formatting tests ====================

def test_to_string(empty_graph):
    empty_graph.add_vertices(["A", "B"])
    empty_graph.add_edge("A", "B")
    assert empty_graph.to_string() == "vertices: ['A', 'B']\n0 1\n0 0"
