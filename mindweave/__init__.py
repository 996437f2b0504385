"""Mind map data model: graph, image store, copy buffer, grid, palettes and .alz XML reading and writing."""

__version__ = "0.1.0"

__all__ = [
    "alz_reader",
    "alz_writer",
    "copy_context",
    "edge",
    "graph",
    "grid",
    "images",
    "model",
    "palette",
]