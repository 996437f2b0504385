# mindweave

A small library with no dependencies for building mind maps in memory and
saving them as `.alz` XML documents. It provides:

- a graph of nodes and directed edges. It assigns indices, deletes nodes and
  edges, and answers connectivity queries.
- an image store that keeps attached images, as raw bytes, by id.
- a copy buffer that holds copied nodes and the edges between them.
- a grid that snaps points.
- the colour palettes offered when a colour is picked.
- a reader and a writer for the `heimer-mind-map` XML format.

## Installation

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `mindweave.grid` | `Grid` and its `snap_to_grid` method |
| `mindweave.palette` | `Color` (`from_hex`, `to_hex`), `ColorRole`, `standard_palette()`, `custom_palette()` |
| `mindweave.images` | `Image`, `ImageManager` |
| `mindweave.edge` | `ArrowMode`, `Node`, `Edge` |
| `mindweave.graph` | `Graph`, `InvalidNodeIndexError` |
| `mindweave.copy_context` | `CopyContext`, `CopiedData`, `EdgeMetadata` |
| `mindweave.model` | `MindMapData`, `Font` |
| `mindweave.alz_writer` | `to_xml(data)`, `write_file(data, path)` |
| `mindweave.alz_reader` | `from_xml(text)`, `read_file(path)` |

## Building and saving a mind map

```python
from mindweave.edge import Edge, Node
from mindweave.model import MindMapData
from mindweave.alz_writer import write_file
from mindweave.alz_reader import read_file

data = MindMapData()
root = Node(text="Ideas")
child = Node(text="Python")
data.graph.add_node(root)
data.graph.add_node(child)
data.graph.add_edge(Edge(root, child))

write_file(data, "ideas.alz")

loaded = read_file("ideas.alz")
print([node.text for node in loaded.graph.get_nodes()])
```

`to_xml(data)` returns the document as a string. `from_xml(text)` accepts a
string or bytes and returns a new `MindMapData`.

## Graph

- `Graph.add_node` gives a node a new index when the node's index is `-1`. A
  node that already has an index keeps it, and any index assigned later is
  higher than every index the graph has seen.
- `Graph.add_edge` ignores an edge when the graph already has an edge between
  the same source and target in the same direction.
- `delete_node` returns the removed node and every edge that touched it.
- `delete_edge` returns the removed edge, or `None` if there was no such edge.
- `get_nodes` returns the nodes ordered by index.
- `get_node` raises `InvalidNodeIndexError` for an unknown index.

## Images

`ImageManager.add_image` stores a copy of the image under the next free id and
returns that id. `set_image` stores the image under its own id. That id must be
positive, otherwise `ValueError` is raised. `get_image` returns `None` for an
unknown id.

## Copy buffer

`CopyContext.push_nodes(nodes, graph)` copies the given nodes, together with
every edge of `graph` that joins two of them. `copied_data().copy_reference_point`
is the mean location of the copied nodes. The copied edges do not refer to any
nodes: each `EdgeMetadata` records the source and target node indices instead.

## Grid snapping

```python
from mindweave.grid import Grid

grid = Grid(size=10)
grid.snap_to_grid((14.0, 26.0))   # (10.0, 30.0)
```

Halves are rounded away from zero. A grid of size 0 returns points unchanged.

## Format notes

- Positions, sizes, edge width, text size and corner radius are multiplied by
  1000 and truncated to integers when written.
- The layout-optimizer aspect ratio and minimum edge length are also written
  multiplied by 1000. When read back, `MindMapData` clamps them into their
  allowed ranges.
- The writer stores images as base64 text in `image` elements. It raises
  `LookupError` if a node refers to an image that the map does not hold.
- The reader logs a warning for each element it does not recognise and skips
  that element. It removes carriage returns from text content. An edge that
  refers to a missing node raises `InvalidNodeIndexError`.

## What it does not do

This package holds only the data. It has no editor, no window or other user
interface and no command-line program. It does not draw or lay out the map, and
it cannot export the map as PNG or SVG. Images are kept as the raw bytes of
their files and are never decoded.