"""Shared test fixtures for dotwriter."""

import pytest

from dotwriter.graph import Graph
from dotwriter.models import VertexDescription


class FailingStream:
    """A text stream whose writes start failing after ``fail_after`` calls."""

    def __init__(self, fail_after: int = 0) -> None:
        self.fail_after = fail_after
        self.writes: list[str] = []

    def write(self, text: str) -> int:
        if len(self.writes) >= self.fail_after:
            raise OSError("disk full")
        self.writes.append(text)
        return len(text)

    def getvalue(self) -> str:
        return "".join(self.writes)


@pytest.fixture
def failing_stream() -> FailingStream:
    """Return a stream that fails on its first write."""
    return FailingStream()


@pytest.fixture
def styled_vertex() -> VertexDescription:
    """Return a vertex with several attributes set."""
    return VertexDescription(
        "build",
        label="Build",
        color="blue",
        shape="box",
        peripheries=2,
    )


@pytest.fixture
def nested_graph() -> Graph:
    """Return graph G with rank "same" holding subgraph S with vertex a."""
    sub = Graph("S", is_subgraph=True)
    sub.add_vertex(VertexDescription("a"))
    graph = Graph("G", rank="same")
    graph.add_subgraph(sub)
    return graph


@pytest.fixture
def make_stream() -> type[FailingStream]:
    """Return a factory for streams that fail after ``fail_after`` writes."""
    return FailingStream
