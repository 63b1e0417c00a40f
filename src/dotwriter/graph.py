"""Graph assembly and serialization to DOT text."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TextIO

from dotwriter.config import GRAPH_KEYWORD, SUBGRAPH_KEYWORD
from dotwriter.models import EdgeDescription, Element, Literal, VertexDescription

logger = logging.getLogger(__name__)


@dataclass
class Graph(Element):
    """A DOT graph: a header, an optional rank and an ordered body.

    Body elements are written in the order they were added. A Graph can be
    nested inside another one with :meth:`add_subgraph`; set ``is_subgraph``
    so it is written with a ``subgraph`` header.
    """

    name: str
    body: list[Element] = field(default_factory=list)
    is_subgraph: bool = False
    rank: str = ""

    def add_comment(self, text: str) -> None:
        """Append a ``/* text */`` comment line."""
        self.body.append(Literal(f"/* {text} */"))

    def add_new_line(self) -> None:
        """Append an empty line."""
        # the writer already ends every element with a line break
        self.body.append(Literal(""))

    def add_vertex(self, vertex: VertexDescription) -> None:
        """Append a snapshot of ``vertex``.

        Later changes to ``vertex`` are not reflected in this graph.
        """
        self.body.append(vertex.copy())

    def add_edge(
        self,
        v1: VertexDescription,
        v2: VertexDescription,
        directed: bool = False,
        style: str = "",
    ) -> EdgeDescription:
        """Append an edge between snapshots of ``v1`` and ``v2``."""
        edge = EdgeDescription(
            from_vertex=v1.copy(),
            to_vertex=v2.copy(),
            directed=directed,
            style=style,
        )
        self.body.append(edge)
        return edge

    def add_subgraph(self, subgraph: Graph) -> None:
        """Append a nested graph.

        The subgraph is kept by reference, so elements added to it later
        are written too. It must not contain this graph.
        """
        self.body.append(subgraph)

    def write(self, stream: TextIO) -> None:
        """Write the graph as DOT text to ``stream``.

        The stream is neither flushed nor closed. If a write fails, the
        exception propagates immediately and the stream is left partially
        written.
        """
        logger.debug("Writing graph %s with %d element(s)", self.name, len(self.body))
        keyword = SUBGRAPH_KEYWORD if self.is_subgraph else GRAPH_KEYWORD
        stream.write(f"{keyword} {self.name} {{\n")

        if self.rank:
            stream.write(f'rank="{self.rank}"\n')

        for element in self.body:
            element.write(stream)
            stream.write("\n")

        stream.write("}")
