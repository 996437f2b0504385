"""The graph of nodes and directed edges that makes up a mind map."""

from __future__ import annotations

import logging

from .edge import Edge, Node

_log = logging.getLogger(__name__)


class InvalidNodeIndexError(LookupError):
    """Raised when a node index does not belong to the graph."""

    def __init__(self, index: int) -> None:
        super().__init__(f"Invalid node index: {index}")
        self.index = index


class Graph:
    """Nodes keyed by index and edges keyed by (source index, target index).

    Deleting a node or an edge is a soft delete: the object is kept in the
    graph's deleted lists so that references held elsewhere stay valid.
    """

    def __init__(self) -> None:
        self._nodes: dict[int, Node] = {}
        self._edges: dict[tuple[int, int], Edge] = {}
        self._deleted_nodes: list[Node] = []
        self._deleted_edges: list[Edge] = []
        self._count = 0

    def clear(self) -> None:
        """Remove all nodes and edges."""
        self._edges.clear()
        self._nodes.clear()

    def add_node(self, node: Node) -> None:
        """Add ``node``; an index of -1 is replaced by the next free index."""
        if node.index == -1:
            node.index = self._count
            self._count += 1
        elif node.index >= self._count:
            self._count = node.index + 1
        self._nodes[node.index] = node

    def delete_node(self, index: int) -> tuple[Node | None, list[Edge]]:
        """Remove the node at ``index`` with every edge touching it.

        Returns the removed node (None if there was none) and the removed edges.
        """
        node = self._nodes.pop(index, None)
        if node is None:
            return None, []
        removed = [
            key
            for key, edge in self._edges.items()
            if edge.source_node.index == index or edge.target_node.index == index
        ]
        deleted_edges = [self._edges.pop(key) for key in removed]
        self._deleted_edges.extend(deleted_edges)
        self._deleted_nodes.append(node)
        return node, deleted_edges

    def add_edge(self, edge: Edge) -> None:
        """Add ``edge`` unless an edge between the same nodes in the same direction exists."""
        key = (edge.source_node.index, edge.target_node.index)
        self._edges.setdefault(key, edge)

    def delete_edge(self, index0: int, index1: int) -> Edge | None:
        """Remove and return the edge from ``index0`` to ``index1``, if any."""
        edge = self._edges.pop((index0, index1), None)
        if edge is not None:
            self._deleted_edges.append(edge)
        return edge

    def are_directly_connected(self, index0: int, index1: int) -> bool:
        """True if an edge joins the two nodes in either direction."""
        return (index0, index1) in self._edges or (index1, index0) in self._edges

    def num_nodes(self) -> int:
        """Return the number of nodes."""
        return len(self._nodes)

    def get_edge(self, index0: int, index1: int) -> Edge | None:
        """Return the edge from ``index0`` to ``index1``, or None."""
        return self._edges.get((index0, index1))

    def get_edges(self) -> list[Edge]:
        """Return all edges in the order they were added."""
        return list(self._edges.values())

    def get_edges_from_node(self, node: Node) -> list[Edge]:
        """Return the edges whose source is ``node``."""
        return [edge for edge in self._edges.values() if edge.source_node.index == node.index]

    def get_edges_to_node(self, node: Node) -> list[Edge]:
        """Return the edges whose target is ``node``."""
        return [edge for edge in self._edges.values() if edge.target_node.index == node.index]

    def get_node(self, index: int) -> Node:
        """Return the node at ``index``; raise InvalidNodeIndexError if absent."""
        try:
            return self._nodes[index]
        except KeyError:
            raise InvalidNodeIndexError(index) from None

    def get_nodes(self) -> list[Node]:
        """Return all nodes ordered by index."""
        return [self._nodes[index] for index in sorted(self._nodes)]

    def get_nodes_connected_to_node(self, node: Node) -> list[Node]:
        """Return the sources of incoming edges followed by the targets of outgoing ones."""
        incoming = [self.get_node(edge.source_node.index) for edge in self.get_edges_to_node(node)]
        outgoing = [self.get_node(edge.target_node.index) for edge in self.get_edges_from_node(node)]
        return incoming + outgoing