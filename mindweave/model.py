"""The mind map document: its graph, images and design settings."""

from __future__ import annotations

from dataclasses import dataclass, field

from .graph import Graph
from .images import ImageManager
from .palette import Color

MIN_ASPECT_RATIO = 0.1
MAX_ASPECT_RATIO = 10.0
DEFAULT_ASPECT_RATIO = 1.0

MIN_EDGE_LENGTH = 10.0
MAX_EDGE_LENGTH = 250.0
DEFAULT_MIN_EDGE_LENGTH = 100.0


@dataclass
class Font:
    """Font family and style used for node and edge text."""

    family: str = ""
    bold: bool = False
    italic: bool = False
    overline: bool = False
    underline: bool = False
    strike_out: bool = False
    weight: int = 50


@dataclass(eq=False)
class MindMapData:
    """A whole mind map: the graph, attached images and design settings."""

    version: str = ""
    background_color: Color = field(default_factory=lambda: Color(0xBA, 0xBD, 0xB6))
    edge_color: Color = field(default_factory=lambda: Color(0, 0, 0))
    grid_color: Color = field(default_factory=lambda: Color(0xAA, 0xAA, 0xAA))
    edge_width: float = 2.0
    font: Font = field(default_factory=Font)
    text_size: int = 11
    corner_radius: int = 5
    aspect_ratio: float = DEFAULT_ASPECT_RATIO
    min_edge_length: float = DEFAULT_MIN_EDGE_LENGTH
    graph: Graph = field(default_factory=Graph)
    image_manager: ImageManager = field(default_factory=ImageManager)

    def __post_init__(self) -> None:
        self.set_aspect_ratio(self.aspect_ratio)
        self.set_min_edge_length(self.min_edge_length)

    def set_aspect_ratio(self, value: float) -> None:
        """Set the layout aspect ratio, clamped to the allowed range."""
        self.aspect_ratio = max(min(value, MAX_ASPECT_RATIO), MIN_ASPECT_RATIO)

    def set_min_edge_length(self, value: float) -> None:
        """Set the layout minimum edge length, clamped to the allowed range."""
        self.min_edge_length = max(min(value, MAX_EDGE_LENGTH), MIN_EDGE_LENGTH)