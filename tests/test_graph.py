import pytest

from mindweave.edge import Edge, Node
from mindweave.graph import Graph, InvalidNodeIndexError


def _graph_with(count):
    graph = Graph()
    nodes = [Node() for _ in range(count)]
    for node in nodes:
        graph.add_node(node)
    return graph, nodes


def test_add_node_assigns_sequential_indices():
    graph, nodes = _graph_with(3)
    assert [node.index for node in nodes] == [0, 1, 2]
    assert graph.num_nodes() == 3


def test_explicit_index_moves_counter_forward():
    graph = Graph()
    graph.add_node(Node(index=5))
    fresh = Node()
    graph.add_node(fresh)
    assert fresh.index == 6
    assert graph.get_node(5).index == 5


def test_get_node_invalid_index_raises():
    graph, _ = _graph_with(1)
    with pytest.raises(InvalidNodeIndexError) as info:
        graph.get_node(42)
    assert info.value.index == 42


def test_get_nodes_ordered_by_index():
    graph = Graph()
    for index in (3, 1, 2):
        graph.add_node(Node(index=index))
    assert [node.index for node in graph.get_nodes()] == [1, 2, 3]


def test_add_edge_ignores_duplicate():
    graph, (a, b) = _graph_with(2)
    first = Edge(a, b)
    graph.add_edge(first)
    graph.add_edge(Edge(a, b))
    assert graph.get_edges() == [first]
    assert graph.get_edge(a.index, b.index) is first


def test_direction_matters_for_get_edge_not_for_connection():
    graph, (a, b) = _graph_with(2)
    graph.add_edge(Edge(a, b))
    assert graph.get_edge(b.index, a.index) is None
    assert graph.are_directly_connected(a.index, b.index)
    assert graph.are_directly_connected(b.index, a.index)


def test_delete_edge():
    graph, (a, b) = _graph_with(2)
    edge = Edge(a, b)
    graph.add_edge(edge)
    assert graph.delete_edge(a.index, b.index) is edge
    assert graph.get_edges() == []
    assert graph.delete_edge(a.index, b.index) is None
    assert not graph.are_directly_connected(a.index, b.index)


def test_delete_node_removes_connected_edges():
    graph, (a, b, c) = _graph_with(3)
    ab = Edge(a, b)
    cb = Edge(c, b)
    ac = Edge(a, c)
    for edge in (ab, cb, ac):
        graph.add_edge(edge)
    node, edges = graph.delete_node(b.index)
    assert node is b
    assert set(map(id, edges)) == {id(ab), id(cb)}
    assert graph.get_edges() == [ac]
    assert graph.num_nodes() == 2


def test_delete_missing_node():
    graph, _ = _graph_with(1)
    assert graph.delete_node(7) == (None, [])
    assert graph.num_nodes() == 1


def test_edges_from_and_to_node():
    graph, (a, b, c) = _graph_with(3)
    ab = Edge(a, b)
    ca = Edge(c, a)
    graph.add_edge(ab)
    graph.add_edge(ca)
    assert graph.get_edges_from_node(a) == [ab]
    assert graph.get_edges_to_node(a) == [ca]
    assert graph.get_edges_from_node(b) == []


def test_nodes_connected_to_node_incoming_first():
    graph, (a, b, c) = _graph_with(3)
    graph.add_edge(Edge(a, b))
    graph.add_edge(Edge(c, a))
    connected = graph.get_nodes_connected_to_node(a)
    assert connected == [c, b]


def test_clear():
    graph, (a, b) = _graph_with(2)
    graph.add_edge(Edge(a, b))
    graph.clear()
    assert graph.num_nodes() == 0
    assert graph.get_edges() == []