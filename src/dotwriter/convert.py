"""Conversion between dotwriter graphs and NetworkX graphs."""

from __future__ import annotations

from collections.abc import Iterator

import networkx as nx

from dotwriter.graph import Graph
from dotwriter.models import (
    INT_ATTRIBUTES,
    STRING_ATTRIBUTES,
    EdgeDescription,
    VertexDescription,
)

# DOT names and field names both map to the field name
_FIELD_NAMES: dict[str, str] = {}
for _dot_name, _field_name in STRING_ATTRIBUTES + INT_ATTRIBUTES:
    _FIELD_NAMES[_dot_name] = _field_name
    _FIELD_NAMES[_field_name] = _field_name
_INT_FIELDS = {field_name for _, field_name in INT_ATTRIBUTES}


def from_networkx(nxg: nx.Graph, name: str = "G", style_key: str = "style") -> Graph:
    """Build a Graph from a NetworkX graph.

    Every node becomes a vertex (node data keys naming a vertex attribute
    are copied onto it, other keys are ignored), followed by one edge per
    NetworkX edge. Edges are directed when ``nxg`` is.
    """
    graph = Graph(name)
    vertices: dict[object, VertexDescription] = {}

    for node, data in nxg.nodes(data=True):
        vertex = _vertex_from_node(node, data)
        vertices[node] = vertex
        graph.add_vertex(vertex)

    directed = nxg.is_directed()
    for u, v, data in nxg.edges(data=True):
        graph.add_edge(
            vertices[u], vertices[v], directed=directed, style=str(data.get(style_key, ""))
        )

    return graph


def to_networkx(graph: Graph) -> nx.Graph:
    """Convert a Graph, including its subgraphs, to a NetworkX graph.

    Returns a DiGraph when any edge is directed or there are no edges,
    otherwise an undirected Graph. In a DiGraph, undirected edges are
    added in both directions.
    """
    vertices = list(_iter_elements(graph, VertexDescription))
    edges = list(_iter_elements(graph, EdgeDescription))

    directed = not edges or any(e.directed for e in edges)
    g: nx.Graph = nx.DiGraph() if directed else nx.Graph()

    for vertex in vertices:
        g.add_node(vertex.id, **dict(vertex.attributes()))
    for edge in edges:
        attrs = {"style": edge.style} if edge.style else {}
        g.add_edge(edge.from_vertex.id, edge.to_vertex.id, **attrs)
        if directed and not edge.directed:
            g.add_edge(edge.to_vertex.id, edge.from_vertex.id, **attrs)
    return g


def _vertex_from_node(node: object, data: dict) -> VertexDescription:
    """Create a VertexDescription from a NetworkX node and its data."""
    vertex = VertexDescription(str(node))
    for key, value in data.items():
        field_name = _FIELD_NAMES.get(key)
        if field_name is None:
            continue
        if field_name in _INT_FIELDS:
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(
                    f"Node {node!r}: {key} must be an int, got {type(value).__name__}"
                )
            setattr(vertex, field_name, value)
        else:
            setattr(vertex, field_name, str(value))
    return vertex


def _iter_elements(graph: Graph, kind: type) -> Iterator:
    """Yield body elements of the given type, descending into subgraphs."""
    for element in graph.body:
        if isinstance(element, Graph):
            yield from _iter_elements(element, kind)
        elif isinstance(element, kind):
            yield element
