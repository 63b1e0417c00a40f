"""Unit tests for dotwriter.convert."""

import networkx as nx
import pytest

from dotwriter.convert import from_networkx, to_networkx
from dotwriter.exporters.dot import export_dot
from dotwriter.graph import Graph
from dotwriter.models import EdgeDescription, VertexDescription


class TestFromNetworkx:
    def test_directed(self) -> None:
        nxg = nx.DiGraph()
        nxg.add_node("a", label="A", fontcolor="red", weight=3)
        nxg.add_node("b", font_name="Courier", peripheries=2)
        nxg.add_edge("a", "b", style="bold")

        g = from_networkx(nxg, name="Deps")
        assert export_dot(g) == (
            'digraph Deps {\n'
            'a [label="A" fontcolor="red" ]\n'
            'b [fontname="Courier" peripheries="2" ]\n'
            'a -> b [ style="bold" ]\n'
            '}'
        )

    def test_undirected(self) -> None:
        nxg = nx.Graph()
        nxg.add_edge(1, 2)
        g = from_networkx(nxg)
        edges = [e for e in g.body if isinstance(e, EdgeDescription)]
        assert len(edges) == 1
        assert edges[0].directed is False
        assert export_dot(g).endswith("1 -- 2\n}")

    def test_custom_style_key(self) -> None:
        nxg = nx.DiGraph()
        nxg.add_edge("a", "b", kind="dashed")
        g = from_networkx(nxg, style_key="kind")
        assert 'a -> b [ style="dashed" ]' in export_dot(g)

    def test_bad_peripheries(self) -> None:
        nxg = nx.Graph()
        nxg.add_node("a", peripheries="2")
        with pytest.raises(TypeError, match="peripheries"):
            from_networkx(nxg)


class TestToNetworkx:
    def test_converts(self) -> None:
        a = VertexDescription("a", shape="box")
        b = VertexDescription("b")
        g = Graph("G")
        g.add_vertex(a)
        g.add_vertex(b)
        g.add_edge(a, b, directed=True, style="dotted")

        nxg = to_networkx(g)
        assert isinstance(nxg, nx.DiGraph)
        assert nxg.nodes["a"] == {"shape": "box"}
        assert nxg.has_edge("a", "b")
        assert nxg.edges["a", "b"] == {"style": "dotted"}

    def test_undirected(self) -> None:
        a, b = VertexDescription("a"), VertexDescription("b")
        g = Graph("G")
        g.add_edge(a, b)
        nxg = to_networkx(g)
        assert not nxg.is_directed()
        assert set(nxg.nodes) == {"a", "b"}

    def test_mixed_directedness_keeps_undirected_edges(self) -> None:
        a, b, c = VertexDescription("a"), VertexDescription("b"), VertexDescription("c")
        g = Graph("G")
        g.add_edge(a, b, style="bold")
        g.add_edge(b, c, directed=True)
        nxg = to_networkx(g)
        assert isinstance(nxg, nx.DiGraph)
        assert nxg.has_edge("a", "b")
        assert nxg.has_edge("b", "a")
        assert nxg.edges["b", "a"] == {"style": "bold"}
        assert nxg.has_edge("b", "c")
        assert not nxg.has_edge("c", "b")

    def test_descends_into_subgraphs(self, nested_graph) -> None:
        nxg = to_networkx(nested_graph)
        assert "a" in nxg.nodes

    def test_ignores_literals(self) -> None:
        g = Graph("G")
        g.add_comment("note")
        g.add_new_line()
        assert len(to_networkx(g).nodes) == 0
