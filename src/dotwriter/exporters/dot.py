"""Graphviz DOT export for dotwriter graphs."""

from __future__ import annotations

import io
import logging
from pathlib import Path

from dotwriter.config import DEFAULT_ENCODING, DOT_SUFFIX
from dotwriter.graph import Graph

logger = logging.getLogger(__name__)


def export_dot(graph: Graph) -> str:
    """Export a Graph as a DOT string."""
    buffer = io.StringIO()
    graph.write(buffer)
    return buffer.getvalue()


def save_dot(graph: Graph, path: Path, encoding: str = DEFAULT_ENCODING) -> Path:
    """Write a Graph to a DOT file, creating parent directories. Returns the path.

    A path without a suffix gets ``.dot`` appended.
    """
    path = Path(path)
    if not path.suffix:
        path = path.with_suffix(DOT_SUFFIX)
    path.parent.mkdir(parents=True, exist_ok=True)
    logger.info("Saving graph %s to %s", graph.name, path)
    with path.open("w", encoding=encoding) as stream:
        graph.write(stream)
    return path
