"""dotwriter: build graphs in memory and write them as Graphviz DOT text."""

from dotwriter.graph import Graph
from dotwriter.models import EdgeDescription, Element, Literal, VertexDescription

__version__ = "0.1.0"

__all__ = [
    "EdgeDescription",
    "Element",
    "Graph",
    "Literal",
    "VertexDescription",
    "__version__",
]
