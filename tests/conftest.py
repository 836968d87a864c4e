"""Shared fixtures: small hand-built graphs and a Flask test client."""

import pytest

from graph import Graph
from main import create_app


def build_graph(num_nodes, edges):
    """Nodes 0..num_nodes-1, edges given as (source, target, weight)."""
    g = Graph()
    for nid in range(num_nodes):
        g.create_node(x=float(nid), y=0.0, node_id=nid)
    for source, target, weight in edges:
        g.create_edge(source, target, weight=weight)
    return g


@pytest.fixture
def triangle_graph():
    """0-1 (w1), 1-2 (w2), 0-2 (w3)."""
    return build_graph(3, [(0, 1, 1), (1, 2, 2), (0, 2, 3)])


@pytest.fixture
def four_node_graph():
    """4 nodes, 5 edges; MST is 1-2, 0-3, 0-1 with cost 9."""
    return build_graph(4, [(0, 1, 4), (1, 2, 2), (2, 3, 5), (0, 3, 3), (0, 2, 6)])


@pytest.fixture
def disconnected_graph():
    """Two components: {0, 1} and {2, 3}."""
    return build_graph(4, [(0, 1, 1), (2, 3, 2)])


@pytest.fixture
def app():
    return create_app({"TESTING": True, "SECRET_KEY": "test", "MAX_STORED_RUNS": 4})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_graph():
    return build_graph
