"""Core data models for dotwriter: the elements of a DOT graph body."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import FrozenInstanceError, dataclass
from typing import TextIO

from dotwriter.config import DIRECTED_CONNECTOR, UNDIRECTED_CONNECTOR


class Element(ABC):
    """Anything that can be written as one entry of a graph body."""

    @abstractmethod
    def write(self, stream: TextIO) -> None:
        """Write this element to a text stream.

        Errors raised by the stream propagate unchanged.
        """


@dataclass
class Literal(Element):
    """A line of text written verbatim, e.g. a comment or an empty line."""

    line: str = ""

    def write(self, stream: TextIO) -> None:
        stream.write(self.line)


# (DOT name, field name) in output order
STRING_ATTRIBUTES: tuple[tuple[str, str], ...] = (
    ("label", "label"),
    ("group", "group"),
    ("color", "color"),
    ("style", "style"),
    ("colorscheme", "color_scheme"),
    ("fontcolor", "font_color"),
    ("fontname", "font_name"),
    ("shape", "shape"),
)
INT_ATTRIBUTES: tuple[tuple[str, str], ...] = (
    ("peripheries", "peripheries"),
)


@dataclass
class VertexDescription(Element):
    """A DOT node: an identifier plus a fixed set of display attributes.

    Empty strings and a zero ``peripheries`` mean "unset" and are not
    written. The identifier cannot be changed after construction.
    """

    id: str
    label: str = ""
    group: str = ""
    color: str = ""
    style: str = ""
    color_scheme: str = ""
    font_color: str = ""
    font_name: str = ""
    shape: str = ""
    peripheries: int = 0

    def __setattr__(self, name: str, value: object) -> None:
        if name == "id" and "id" in self.__dict__:
            raise FrozenInstanceError("cannot assign to field 'id'")
        super().__setattr__(name, value)

    def attributes(self) -> list[tuple[str, str | int]]:
        """Return the set attributes as (DOT name, value) pairs, in output order."""
        attrs: list[tuple[str, str | int]] = []
        for dot_name, field_name in STRING_ATTRIBUTES:
            value = getattr(self, field_name)
            if value != "":
                attrs.append((dot_name, value))
        for dot_name, field_name in INT_ATTRIBUTES:
            value = getattr(self, field_name)
            if value != 0:
                attrs.append((dot_name, int(value)))
        return attrs

    def copy(self) -> VertexDescription:
        """Return an independent snapshot of this vertex."""
        return copy.copy(self)

    def write(self, stream: TextIO) -> None:
        parts = [f"{self.id} ["]
        for name, value in self.attributes():
            if isinstance(value, str) and value.startswith("<"):
                # HTML-like labels are not quoted
                parts.append(f"{name}={value} ")
            else:
                parts.append(f'{name}="{value}" ')
        parts.append("]")
        stream.write("".join(parts))


@dataclass
class EdgeDescription(Element):
    """A connection between two vertex snapshots."""

    from_vertex: VertexDescription
    to_vertex: VertexDescription
    directed: bool = False
    style: str = ""

    @property
    def connector(self) -> str:
        return DIRECTED_CONNECTOR if self.directed else UNDIRECTED_CONNECTOR

    def write(self, stream: TextIO) -> None:
        line = f"{self.from_vertex.id} {self.connector} {self.to_vertex.id}"
        if self.style:
            line += f' [ style="{self.style}" ]'
        stream.write(line)
