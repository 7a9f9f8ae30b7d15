"""
Pytest configuration and shared fixtures for all tests.

This file is loaded automatically by pytest before the tests run.
"""

import pytest

from matrixgraph import AdjacencyMatrixGraph, WeightedNetwork


# ==================== Test markers ====================

def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests that combine several operations"
    )


# ==================== Shared fixtures ====================

@pytest.fixture
def empty_graph():
    """Graph without vertices"""
    return AdjacencyMatrixGraph()


@pytest.fixture
def traversal_graph():
    """
    Directed graph for traversal order checks.

    Structure:
        A --> B --> D --> F
        |           ^
        v           |
        C ----------+
        |
        v
        E
    """
    graph = AdjacencyMatrixGraph()
    graph.add_vertices(["A", "B", "C", "D", "E", "F"])
    graph.add_edge("A", "B")
    graph.add_edge("A", "C")
    graph.add_edge("B", "D")
    graph.add_edge("C", "D")
    graph.add_edge("C", "E")
    graph.add_edge("D", "F")
    return graph


@pytest.fixture
def diamond_network():
    """
    Weighted network with two routes from A to D.

    Structure:
        A --2--> B --1--> D
        |                 ^
        +--5--> C --1-----+
    """
    network = WeightedNetwork()
    network.add_vertices(["A", "B", "C", "D"])
    network.add_edge("A", "B", 2.0)
    network.add_edge("A", "C", 5.0)
    network.add_edge("B", "D", 1.0)
    network.add_edge("C", "D", 1.0)
    return network
