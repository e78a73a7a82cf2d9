"""Tests for network.py — collections, link degree, networkx import and the build cache."""

from __future__ import annotations

import networkx as nx
import pytest

from arc_layout.layout import ArcLayout
from arc_layout.network import DEFAULT_HEIGHT, DEFAULT_WIDTH, NetworkLayout, compute_link_degrees
from arc_layout.types import Link, MarkStyle, Node

# ─── Collections ──────────────────────────────────────────────────────────────


class TestCollections:
    def test_bare_ids_become_nodes(self):
        """Non-Node values are wrapped; index follows collection order."""
        layout = NetworkLayout(nodes=["a", "b"])
        nodes = layout.nodes()
        assert [n.id for n in nodes] == ["a", "b"]
        assert [n.index for n in nodes] == [0, 1]
        assert [n.label for n in nodes] == ["a", "b"]

    def test_existing_nodes_kept(self):
        n = Node(id=1, label="one")
        layout = NetworkLayout(nodes=[n])
        assert layout.nodes()[0] is n

    def test_links_by_id(self):
        layout = NetworkLayout(nodes=["a", "b"], links=[("a", "b", 2.5)])
        (link,) = layout.links()
        assert link.source_node.id == "a"
        assert link.target_node.id == "b"
        assert link.value == 2.5

    def test_links_by_index(self):
        """Integer endpoints not matching an id fall back to node indices."""
        layout = NetworkLayout(nodes=["a", "b"], links=[(1, 0)])
        (link,) = layout.links()
        assert (link.source_node.id, link.target_node.id) == ("b", "a")

    def test_link_objects_kept(self):
        s, t = Node(id="s"), Node(id="t")
        link = Link(s, t)
        layout = NetworkLayout(nodes=[s, t], links=[link])
        assert layout.links() == [link]

    def test_unknown_endpoint(self):
        """Unknown endpoints raise KeyError naming the endpoint."""
        with pytest.raises(KeyError, match="zz"):
            NetworkLayout(nodes=["a"], links=[("a", "zz")])

    def test_foreign_link_object_rejected(self):
        """Link objects whose endpoints are outside the node set raise KeyError."""
        a, stray = Node(id="a"), Node(id="stray")
        with pytest.raises(KeyError, match="stray"):
            NetworkLayout(nodes=[a], links=[Link(a, stray)])
        assert stray.link_degree == 0.0

    def test_foreign_node_endpoint_rejected(self):
        """Node endpoints in tuples are checked by identity, not id."""
        with pytest.raises(KeyError, match="a"):
            NetworkLayout(nodes=["a"], links=[(Node(id="a"), "a")])

    def test_setters_chain(self):
        layout = NetworkLayout()
        assert layout.nodes(["a"]) is layout
        assert layout.links([]) is layout
        assert layout.width(10) is layout
        assert layout.height(20) is layout
        assert (layout.width(), layout.height()) == (10.0, 20.0)

    def test_default_canvas(self):
        layout = NetworkLayout()
        assert (layout.width(), layout.height()) == (DEFAULT_WIDTH, DEFAULT_HEIGHT)

    def test_defaults_style(self):
        assert NetworkLayout.defaults().style == MarkStyle()


# ─── Link Degree ──────────────────────────────────────────────────────────────


class TestLinkDegree:
    def test_sums_incident_values(self):
        nodes = [Node(id=i) for i in range(3)]
        links = [Link(nodes[0], nodes[1], 2.0), Link(nodes[1], nodes[2])]
        compute_link_degrees(nodes, links)
        assert [n.link_degree for n in nodes] == [2.0, 3.0, 1.0]

    def test_refreshed_on_build(self):
        layout = NetworkLayout(nodes="abc", links=[("a", "b")]).build()
        assert [n.link_degree for n in layout.nodes()] == [1.0, 1.0, 0.0]
        layout.links([("b", "c"), ("c", "a")]).build()
        assert [n.link_degree for n in layout.nodes()] == [1.0, 1.0, 2.0]


# ─── networkx Import ──────────────────────────────────────────────────────────


class TestFromGraph:
    def test_path_graph(self):
        """Node order and edges follow the graph."""
        layout = NetworkLayout.from_graph(nx.path_graph(3)).build()
        assert [n.id for n in layout.nodes()] == [0, 1, 2]
        assert [n.link_degree for n in layout.nodes()] == [1.0, 2.0, 1.0]

    def test_weights_and_labels(self):
        g = nx.Graph()
        g.add_node("x", label="Ex")
        g.add_node("y")
        g.add_edge("x", "y", weight=4)
        layout = NetworkLayout.from_graph(g)
        assert [n.label for n in layout.nodes()] == ["Ex", "y"]
        assert layout.links()[0].value == 4.0

    def test_directed_graph_sets_directed(self):
        """A DiGraph switches on directed rendering for arc layouts."""
        layout = ArcLayout.from_graph(nx.DiGraph([("a", "b")]))
        assert isinstance(layout, ArcLayout)
        assert layout.directed() is True

    def test_undirected_graph_leaves_directed_off(self):
        assert ArcLayout.from_graph(nx.Graph([("a", "b")])).directed() is False


# ─── Build Cache ──────────────────────────────────────────────────────────────


class TestNetworkBuildCache:
    def test_first_build_is_fresh(self):
        layout = NetworkLayout(nodes="ab")
        assert layout.build_implied(layout.spec()) is False
        assert layout.build_implied(layout.spec()) is True

    def test_invalidate(self):
        layout = NetworkLayout(nodes="ab").build()
        layout.invalidate()
        assert layout.build_implied(layout.spec()) is False

    def test_new_nodes_rebuild(self):
        layout = NetworkLayout(nodes="ab").build()
        layout.nodes("ab")
        assert layout.build_implied(layout.spec()) is False
