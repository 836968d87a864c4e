"""Tests for the Node / Edge / Graph data model."""

import pytest

from graph import Edge, Graph, GraphError, Node, parse_node_id


class TestNodeAndEdge:

    def test_edge_default_id(self):
        assert Edge(0, 1, weight=4).id == "0-1"

    def test_oriented_from_keeps_id(self):
        edge = Edge(0, 1, weight=4)
        flipped = edge.oriented_from(1)
        assert (flipped.source, flipped.target) == (1, 0)
        assert flipped.id == edge.id
        assert flipped.weight == 4

    def test_oriented_from_rejects_foreign_node(self):
        with pytest.raises(ValueError):
            Edge(0, 1).oriented_from(7)

    def test_other_end(self):
        edge = Edge(2, 5)
        assert edge.other_end(2) == 5
        assert edge.other_end(5) == 2

    def test_node_round_trip(self):
        node = Node(3, 10.5, 20.0)
        assert Node.from_dict(node.to_dict()) == node

    @pytest.mark.parametrize("raw, expected", [(3, 3), ("4", 4), (None, None), ("x", None), (True, None)])
    def test_parse_node_id(self, raw, expected):
        assert parse_node_id(raw) == expected


class TestGraphStructure:

    def test_insertion_order(self, four_node_graph):
        assert four_node_graph.node_ids() == [0, 1, 2, 3]
        assert [e.id for e in four_node_graph.edge_list()] == ["0-1", "1-2", "2-3", "0-3", "0-2"]
        assert four_node_graph.first_node_id() == 0

    def test_incident_edges_in_insertion_order(self, four_node_graph):
        assert [e.id for e in four_node_graph.incident_edges(0)] == ["0-1", "0-3", "0-2"]
        assert four_node_graph.degree(0) == 3

    def test_add_edge_unknown_endpoint(self, triangle_graph):
        with pytest.raises(GraphError):
            triangle_graph.create_edge(0, 99, weight=1)

    def test_add_edge_non_positive_weight(self, triangle_graph):
        with pytest.raises(GraphError):
            triangle_graph.create_edge(0, 1, weight=0)

    def test_duplicate_node_rejected(self, triangle_graph):
        with pytest.raises(GraphError):
            triangle_graph.add_node(Node(0))

    def test_duplicate_edge_id_gets_suffix(self, triangle_graph):
        parallel = triangle_graph.create_edge(0, 1, weight=9)
        assert parallel.id != "0-1"
        assert parallel.id.startswith("0-1")
        assert triangle_graph.edge_count() == 4

    def test_remove_node_drops_incident_edges(self, triangle_graph):
        triangle_graph.remove_node(1)
        assert [e.id for e in triangle_graph.edge_list()] == ["0-2"]

    def test_copy_is_deep(self, triangle_graph):
        clone = triangle_graph.copy()
        clone.get_edge("0-1").weight = 50
        clone.create_node(node_id=7)
        assert triangle_graph.get_edge("0-1").weight == 1
        assert not triangle_graph.has_node(7)

    def test_dict_round_trip(self, four_node_graph):
        again = Graph.from_dict(four_node_graph.to_dict())
        assert again.to_dict() == four_node_graph.to_dict()

    def test_equality_follows_contents_and_order(self, make_graph, triangle_graph):
        assert triangle_graph == triangle_graph.copy()
        assert triangle_graph == Graph.from_dict(triangle_graph.to_dict())
        reordered = make_graph(3, [(1, 2, 2), (0, 1, 1), (0, 2, 3)])
        assert reordered != triangle_graph
        heavier = triangle_graph.copy()
        heavier.get_edge("0-1").weight = 8
        assert heavier != triangle_graph

    def test_graphs_are_unhashable(self, triangle_graph):
        with pytest.raises(TypeError):
            hash(triangle_graph)

    @pytest.mark.parametrize("weight", [2.7, "2.5", True, None, "heavy"])
    def test_from_dict_rejects_non_integer_weight(self, weight):
        data = {"nodes": [{"id": 0}, {"id": 1}], "edges": [{"source": 0, "target": 1, "weight": weight}]}
        with pytest.raises(GraphError, match="weight"):
            Graph.from_dict(data)

    def test_from_dict_accepts_whole_float_weight(self):
        data = {"nodes": [{"id": 0}, {"id": 1}], "edges": [{"source": 0, "target": 1, "weight": 4.0}]}
        assert Graph.from_dict(data).get_edge("0-1").weight == 4

    def test_validate_catches_dangling_edge(self, triangle_graph):
        triangle_graph.edges["ghost"] = Edge(0, 42, edge_id="ghost")
        with pytest.raises(GraphError):
            triangle_graph.validate()


class TestGraphFactories:

    def test_generate_random_is_connected(self):
        g = Graph.generate_random(num_nodes=8, edge_probability=0.0, seed=3)
        assert g.node_count() == 8
        # a backbone path alone has n-1 edges
        assert g.edge_count() == 7

    def test_generate_random_is_seeded(self):
        a = Graph.generate_random(num_nodes=6, seed=11)
        b = Graph.generate_random(num_nodes=6, seed=11)
        assert a.to_dict() == b.to_dict()

    def test_from_adjacency_list(self):
        g = Graph.from_adjacency_list("0: 1(3) 2(5)\n1: 2(4)\n2: 0(5)")
        assert g.node_ids() == [0, 1, 2]
        assert g.edge_count() == 3
        assert g.get_edge_between(0, 2).weight == 5

    def test_from_adjacency_list_rejects_garbage(self):
        with pytest.raises(GraphError):
            Graph.from_adjacency_list("A: B(3)")

    def test_get_edge_between_either_orientation(self, make_graph):
        g = make_graph(2, [(0, 1, 7)])
        assert g.get_edge_between(1, 0).weight == 7
