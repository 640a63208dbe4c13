"""Unit tests for link collection from a family graph."""

import logging

import networkx as nx
import pytest

from famchart import TreeNode, build_paths, collect_links
from famchart.links import add_child, add_person, add_spouse, tree_node


@pytest.fixture
def couple_graph():
    """A couple with one child."""
    graph = nx.DiGraph()
    add_person(graph, "A", 400, 100, person={"name": "A"})
    add_person(graph, "B", 100, 100, person={"name": "B"})
    add_person(graph, "C", 200, 300, person={"name": "C"})
    add_spouse(graph, "A", "B")
    add_child(graph, "A", "C", spouse="B")
    return graph


class TestTreeNode:
    """Tests for tree_node()."""

    def test_attributes(self, couple_graph):
        """Node attributes are carried over."""
        assert tree_node(couple_graph, "A") == TreeNode(
            400, 100, family=0, person={"name": "A"}, node_id="A"
        )

    def test_missing_attributes(self):
        """Unpositioned nodes have no coordinates."""
        graph = nx.DiGraph()
        graph.add_node(7)
        node = tree_node(graph, 7)
        assert node.x is None
        assert node.node_id == "7"
        assert node.is_placeholder

    def test_unknown_node(self, couple_graph):
        """Unknown nodes raise KeyError."""
        with pytest.raises(KeyError, match="Z"):
            tree_node(couple_graph, "Z")


class TestCollectLinks:
    """Tests for collect_links()."""

    def test_spouse_links_first(self, couple_graph):
        """Spouse links come before child links."""
        links = list(collect_links(couple_graph))
        assert [link.is_spouse_link for link in links] == [True, False]

    def test_spouse_link(self, couple_graph):
        """The spouse edge becomes a link without target."""
        spouse_link = next(collect_links(couple_graph))
        assert spouse_link.source.node_id == "A"
        assert spouse_link.spouse.node_id == "B"
        assert spouse_link.coords is None

    def test_child_link(self, couple_graph):
        """The child edge carries the co-parent."""
        child_link = list(collect_links(couple_graph))[1]
        assert child_link.source.node_id == "A"
        assert child_link.target.node_id == "C"
        assert child_link.spouse.node_id == "B"

    def test_between_becomes_coords(self):
        """Intermediate partners are resolved in order."""
        graph = nx.DiGraph()
        for name, x in [("A", 1000), ("B", 100), ("C", 400), ("D", 700)]:
            add_person(graph, name, x, 100, person={})
        add_spouse(graph, "A", "B", between=["C", "D"])
        link = next(collect_links(graph))
        assert [node.node_id for node in link.coords] == ["C", "D"]

    def test_edges_default_to_child(self):
        """Edges without kind are child edges."""
        graph = nx.DiGraph()
        graph.add_edge("P", "C")
        link = next(collect_links(graph))
        assert link.target.node_id == "C"
        assert link.spouse is None

    def test_unknown_kind(self):
        """Unknown edge kinds are rejected."""
        graph = nx.DiGraph()
        graph.add_edge("P", "C", kind="sibling")
        with pytest.raises(ValueError, match="sibling"):
            list(collect_links(graph))

    def test_cycle_falls_back_to_insertion_order(self, caplog):
        """Cyclic graphs still produce links, with a warning."""
        graph = nx.DiGraph()
        add_person(graph, "A", 400, 100, person={})
        add_person(graph, "B", 100, 100, person={})
        add_spouse(graph, "A", "B")
        add_spouse(graph, "B", "A")

        with caplog.at_level(logging.WARNING, logger="famchart.links"):
            links = list(collect_links(graph))

        assert [link.source.node_id for link in links] == ["A", "B"]
        assert "cycle" in caplog.text

    def test_topological_order(self):
        """Parents are visited before their children."""
        graph = nx.DiGraph()
        add_person(graph, "C", 0, 200, person={})
        add_person(graph, "G", 0, 300, person={})
        add_person(graph, "P", 0, 100, person={})
        add_child(graph, "C", "G")
        add_child(graph, "P", "C")
        sources = [link.source.node_id for link in collect_links(graph)]
        assert sources == ["P", "C"]


class TestBuildPaths:
    """Tests for build_paths()."""

    def test_paths(self, couple_graph, top_bottom):
        """Every link is paired with its connector."""
        result = build_paths(couple_graph, top_bottom)
        assert [path for _, path in result] == [
            "M200,100L300,100",
            "M250,100L250,250L200,250L200,260",
        ]
