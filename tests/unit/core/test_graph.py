"""Unit tests for the graph model."""

import pytest

from nodescope.core.exceptions import GraphDataError, InvalidEdgeError, UnknownNodeError
from nodescope.core.graph import GraphModel
from nodescope.core.types import Edge, Node


def _nodes(*ids):
    return [Node(id=i, display_name=i.upper()) for i in ids]


class TestGraphBuild:
    def test_build_counts(self, hub_graph):
        assert hub_graph.node_count == 5
        assert hub_graph.edge_count == 3

    def test_preserves_load_order(self, hub_graph, hub_nodes):
        assert [n.id for n in hub_graph.nodes] == [n.id for n in hub_nodes]

    def test_edge_to_missing_node_raises(self):
        with pytest.raises(InvalidEdgeError) as exc:
            GraphModel.build(_nodes("a", "b"), [Edge(source="a", target="ghost")])

        assert exc.value.missing_id == "ghost"
        assert exc.value.source_id == "a"

    def test_missing_source_is_reported(self):
        with pytest.raises(InvalidEdgeError) as exc:
            GraphModel.build(_nodes("a"), [Edge(source="ghost", target="a")])
        assert exc.value.missing_id == "ghost"

    def test_duplicate_node_ids_rejected(self):
        with pytest.raises(GraphDataError):
            GraphModel.build(_nodes("a", "a"), [])

    def test_empty_graph(self):
        graph = GraphModel.empty()
        assert graph.node_count == 0
        assert graph.get_stats()["components"] == 0


class TestNeighbors:
    def test_adjacency_ignores_direction(self, hub_graph):
        # spoke-b -> hub is stored as source spoke-b, but hub still sees it
        assert hub_graph.neighbors_of("hub") == {"spoke-a", "spoke-b", "fw"}
        assert hub_graph.neighbors_of("spoke-b") == {"hub"}
        assert hub_graph.neighbors_of("spoke-a") == {"hub"}

    def test_adjacency_is_symmetric(self, hub_graph):
        for node in hub_graph.iter_nodes():
            for neighbor in hub_graph.neighbors_of(node.id):
                assert node.id in hub_graph.neighbors_of(neighbor)

    def test_isolated_node_has_no_neighbors(self, hub_graph):
        assert hub_graph.neighbors_of("dns") == frozenset()

    def test_unknown_node_raises(self, hub_graph):
        with pytest.raises(UnknownNodeError) as exc:
            hub_graph.neighbors_of("nope")
        assert exc.value.node_id == "nope"

    def test_parallel_edges_collapse_in_adjacency(self):
        graph = GraphModel.build(
            _nodes("a", "b"),
            [Edge(source="a", target="b"), Edge(source="b", target="a")],
        )
        assert graph.neighbors_of("a") == {"b"}
        assert graph.degree("a") == 1
        assert graph.edge_count == 2

    def test_self_loop_is_own_neighbor(self):
        graph = GraphModel.build(_nodes("a"), [Edge(source="a", target="a")])
        assert graph.neighbors_of("a") == {"a"}


class TestLookups:
    def test_get_node(self, hub_graph):
        assert hub_graph.get_node("fw").display_name == "Azure Firewall"
        assert hub_graph.get_node("nope") is None

    def test_has_edge_is_directional(self, hub_graph):
        assert hub_graph.has_edge("spoke-b", "hub")
        assert not hub_graph.has_edge("hub", "spoke-b")

    def test_sources_of(self, hub_graph):
        assert [n.id for n in hub_graph.sources_of("hub")] == ["spoke-b"]
        assert hub_graph.sources_of("spoke-b") == []

    def test_sources_of_keeps_link_order(self):
        graph = GraphModel.build(
            _nodes("a", "b", "c", "d"),
            [
                Edge(source="c", target="d"),
                Edge(source="a", target="d"),
                Edge(source="b", target="d"),
                Edge(source="a", target="d"),
            ],
        )
        assert [n.id for n in graph.sources_of("d")] == ["c", "a", "b"]

    def test_sources_of_unknown(self, hub_graph):
        with pytest.raises(UnknownNodeError):
            hub_graph.sources_of("nope")

    def test_contains(self, hub_graph):
        assert "hub" in hub_graph
        assert "nope" not in hub_graph

    def test_stats(self, hub_graph):
        stats = hub_graph.get_stats()
        assert stats["total_nodes"] == 5
        assert stats["total_edges"] == 3
        assert stats["orphans"] == 1
        assert stats["components"] == 2

    def test_to_dict_uses_wire_names(self, hub_graph):
        data = hub_graph.to_dict()
        assert data["nodes"][0]["displayName"] == "VNet Hub"
        assert data["edges"][0]["source"] == "hub"
        assert data["edges"][0]["target"] == "spoke-a"
