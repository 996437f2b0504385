"""Nodes of a mind map and the edges that join them."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass, field
from typing import Protocol

from .palette import Color

Point = tuple[float, float]
Size = tuple[float, float]


class ArrowMode(enum.IntEnum):
    """How arrowheads are drawn on an edge; values are the stored integers."""

    SINGLE = 0
    DOUBLE = 1
    HIDDEN = 2


@dataclass(eq=False)
class Node:
    """A box in the mind map holding text, colours and an optional image."""

    index: int = -1
    location: Point = (0.0, 0.0)
    size: Size = (200.0, 75.0)
    text: str = ""
    color: Color = field(default_factory=lambda: Color(255, 255, 255))
    text_color: Color = field(default_factory=lambda: Color(0, 0, 0))
    image_ref: int = 0
    corner_radius: int = 0

    def copy(self) -> "Node":
        """Return an independent node with the same data, index included."""
        return dataclasses.replace(self)


class _NodeSource(Protocol):
    def get_node(self, index: int) -> Node: ...


@dataclass(eq=False)
class Edge:
    """A connection from a source node to a target node."""

    source_node: Node | None = None
    target_node: Node | None = None
    arrow_mode: ArrowMode = ArrowMode.SINGLE
    dashed_line: bool = False
    reversed: bool = False
    text: str = ""
    width: float = 2.0
    color: Color = field(default_factory=lambda: Color(0, 0, 0))

    def __post_init__(self) -> None:
        self.arrow_mode = ArrowMode(self.arrow_mode)

    def _copy_data_to(self, other: "Edge") -> "Edge":
        other.arrow_mode = self.arrow_mode
        other.dashed_line = self.dashed_line
        other.reversed = self.reversed
        other.text = self.text
        return other

    def copy(self) -> "Edge":
        """Copy arrow mode, dash, direction and text; leave both nodes unset."""
        return self._copy_data_to(Edge())

    def copy_into(self, graph: _NodeSource) -> "Edge":
        """Copy the edge's data and attach it to the nodes of ``graph`` with the same indices."""
        if self.source_node is None or self.target_node is None:
            raise ValueError("Edge has no source or target node to look up")
        edge = Edge(
            graph.get_node(self.source_node.index),
            graph.get_node(self.target_node.index),
        )
        return self._copy_data_to(edge)