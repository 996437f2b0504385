"""Copied nodes and the edges between them, kept for pasting."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from itertools import combinations

from .edge import Edge, Node
from .graph import Graph

_log = logging.getLogger(__name__)

Point = tuple[float, float]


@dataclass
class EdgeMetadata:
    """A copied edge with the indices of the nodes it joined.

    The copied edge refers to no nodes; the indices say which copies to join.
    """

    edge: Edge
    source_node_index: int = -1
    target_node_index: int = -1


@dataclass
class CopiedData:
    """Copied nodes and edges with the mean location of the nodes."""

    copy_reference_point: Point = (0.0, 0.0)
    edges: list[EdgeMetadata] = field(default_factory=list)
    nodes: list[Node] = field(default_factory=list)


class CopyContext:
    """The copy stack used for copy and paste of nodes."""

    def __init__(self) -> None:
        self._data = CopiedData()

    def clear(self) -> None:
        """Empty the copy stack."""
        self._data = CopiedData()

    def copy_stack_size(self) -> int:
        """Return the number of copied nodes."""
        return len(self._data.nodes)

    def _push_edges(self, nodes: list[Node], graph: Graph) -> None:
        for first, second in combinations(nodes, 2):
            for i0, i1 in ((first.index, second.index), (second.index, first.index)):
                edge = graph.get_edge(i0, i1)
                if edge is not None:
                    self._data.edges.append(EdgeMetadata(edge.copy(), i0, i1))

    def push_nodes(self, nodes: Iterable[Node], graph: Graph) -> None:
        """Copy ``nodes`` and every edge of ``graph`` that joins two of them."""
        nodes = list(nodes)
        self._push_edges(nodes, graph)
        for node in nodes:
            self.push_node(node)
        _log.debug("%d edge(s) in copy stack", len(self._data.edges))
        _log.debug("%d node(s) in copy stack", len(self._data.nodes))

    def push_node(self, node: Node) -> None:
        """Copy ``node`` and update the mean location of the copies."""
        self._data.nodes.append(node.copy())
        count = len(self._data.nodes)
        x, y = self._data.copy_reference_point
        px, py = node.location
        self._data.copy_reference_point = (
            (x * (count - 1) + px) / count,
            (y * (count - 1) + py) / count,
        )

    def copied_data(self) -> CopiedData:
        """Return a snapshot of the copy stack."""
        return CopiedData(
            self._data.copy_reference_point,
            list(self._data.edges),
            list(self._data.nodes),
        )