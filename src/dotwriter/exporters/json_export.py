"""JSON export of the in-memory graph model."""

from __future__ import annotations

import json

from dotwriter.graph import Graph
from dotwriter.models import EdgeDescription, Element, Literal, VertexDescription


def graph_to_json(graph: Graph) -> dict:
    """Export a Graph as a JSON-serializable dictionary."""
    return {
        "name": graph.name,
        "is_subgraph": graph.is_subgraph,
        "rank": graph.rank,
        "body": [_element_to_json(element) for element in graph.body],
    }


def export_json(graph: Graph, indent: int = 2) -> str:
    """Export a Graph as a JSON string."""
    return json.dumps(graph_to_json(graph), indent=indent)


def _vertex_to_json(vertex: VertexDescription) -> dict:
    return {"id": vertex.id, "attributes": dict(vertex.attributes())}


def _element_to_json(element: Element) -> dict:
    if isinstance(element, Graph):
        return {"kind": "subgraph", **graph_to_json(element)}
    if isinstance(element, VertexDescription):
        return {"kind": "vertex", **_vertex_to_json(element)}
    if isinstance(element, EdgeDescription):
        return {
            "kind": "edge",
            "from": element.from_vertex.id,
            "to": element.to_vertex.id,
            "directed": element.directed,
            "style": element.style,
        }
    if isinstance(element, Literal):
        return {"kind": "literal", "line": element.line}
    raise TypeError(f"Unsupported element type: {type(element).__name__}")
