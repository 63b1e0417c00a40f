"""Default settings for dotwriter output."""

from __future__ import annotations

DEFAULT_ENCODING = "utf-8"
DOT_SUFFIX = ".dot"

DIRECTED_CONNECTOR = "->"
UNDIRECTED_CONNECTOR = "--"

GRAPH_KEYWORD = "digraph"
SUBGRAPH_KEYWORD = "subgraph"
