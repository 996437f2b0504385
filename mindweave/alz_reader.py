"""Deserialisation of a mind map from the ALZ XML format."""

from __future__ import annotations

import base64
import binascii
import logging
import os
import xml.etree.ElementTree as ET
from collections.abc import Callable, Mapping

from .edge import ArrowMode, Edge, Node
from .images import Image
from .model import Font, MindMapData
from .palette import Color

_log = logging.getLogger(__name__)

SCALE = 1000
"""Factor by which real numbers were multiplied before being stored."""

UNDEFINED_VERSION = "UNDEFINED"

_Handler = Callable[[ET.Element], None]


def _to_int(text: str | None) -> int:
    """Parse an integer the lenient way: anything unparsable gives 0."""
    if text is None:
        return 0
    try:
        return int(text.strip())
    except ValueError:
        return 0


def _to_uint(text: str | None) -> int:
    """Parse a non-negative integer; negative or unparsable text gives 0."""
    value = _to_int(text)
    return value if value >= 0 else 0


def _to_double(text: str | None) -> float:
    """Parse a real number; anything unparsable gives 0.0."""
    if text is None:
        return 0.0
    try:
        return float(text.strip())
    except ValueError:
        return 0.0


def _first_text(element: ET.Element) -> str:
    """Return the first non-blank text piece directly inside ``element``.

    Carriage returns are dropped from the result.
    """
    pieces = [element.text, *(child.tail for child in element)]
    for piece in pieces:
        if piece is not None and piece.strip():
            return piece.replace("\r", "")
    return ""


def _read_children(element: ET.Element, handlers: Mapping[str, _Handler]) -> None:
    for child in element:
        if not isinstance(child.tag, str):
            continue  # comments and processing instructions
        handler = handlers.get(child.tag)
        if handler is None:
            _log.warning("Unknown element '%s'", child.tag)
        else:
            handler(child)


def _read_color(element: ET.Element) -> Color:
    return Color(
        _to_int(element.get("r", "255")),
        _to_int(element.get("g", "255")),
        _to_int(element.get("b", "255")),
    )


def _read_node(element: ET.Element) -> Node:
    node = Node()
    node.index = _to_int(element.get("index", "-1"))
    node.location = (
        _to_int(element.get("x", "0")) / SCALE,
        _to_int(element.get("y", "0")) / SCALE,
    )
    if "w" in element.attrib and "h" in element.attrib:
        node.size = (
            _to_int(element.get("w")) / SCALE,
            _to_int(element.get("h")) / SCALE,
        )

    def set_text(e: ET.Element) -> None:
        node.text = _first_text(e)

    def set_color(e: ET.Element) -> None:
        node.color = _read_color(e)

    def set_text_color(e: ET.Element) -> None:
        node.text_color = _read_color(e)

    def set_image(e: ET.Element) -> None:
        node.image_ref = _to_uint(e.get("ref", "0"))

    _read_children(
        element,
        {"text": set_text, "color": set_color, "text-color": set_text_color, "image": set_image},
    )
    return node


def _read_edge(element: ET.Element, data: MindMapData) -> Edge:
    arrow_mode = _to_int(element.get("arrow-mode", "0"))
    dashed_line = bool(_to_int(element.get("dashed-line", "0")))
    index0 = _to_int(element.get("index0", "-1"))
    index1 = _to_int(element.get("index1", "-1"))
    reversed_ = bool(_to_int(element.get("reversed", "0")))

    edge = Edge(
        data.graph.get_node(index0),
        data.graph.get_node(index1),
        arrow_mode=ArrowMode(arrow_mode),
        dashed_line=dashed_line,
        reversed=reversed_,
    )

    def set_text(e: ET.Element) -> None:
        edge.text = _first_text(e)

    _read_children(element, {"text": set_text})
    return edge


def _read_graph(element: ET.Element, data: MindMapData) -> None:
    _read_children(
        element,
        {
            "node": lambda e: data.graph.add_node(_read_node(e)),
            "edge": lambda e: data.graph.add_edge(_read_edge(e, data)),
        },
    )


def _read_layout_optimizer(element: ET.Element, data: MindMapData) -> None:
    data.set_aspect_ratio(_to_double(element.get("aspect-ratio", "-1")) / SCALE)
    data.set_min_edge_length(_to_double(element.get("min-edge-length", "-1")) / SCALE)


def _read_font(element: ET.Element) -> Font:
    return Font(
        family=_first_text(element),
        bold=bool(_to_int(element.get("bold"))),
        italic=bool(_to_uint(element.get("italic"))),
        overline=bool(_to_int(element.get("overline"))),
        underline=bool(_to_int(element.get("underline"))),
        strike_out=bool(_to_int(element.get("strike-out"))),
        weight=_to_int(element.get("weight")),
    )


def _decode_base64(text: str) -> bytes:
    cleaned = "".join(text.split())
    cleaned += "=" * (-len(cleaned) % 4)
    try:
        return base64.b64decode(cleaned)
    except binascii.Error as error:
        raise ValueError(f"Invalid embedded image data: {error}") from None


def _read_image(element: ET.Element, data: MindMapData) -> None:
    image_id = _to_uint(element.get("id"))
    path = element.get("path", "")
    _log.info("Reading embedded image id=%d, path='%s'", image_id, path)
    image = Image(data=_decode_base64(_first_text(element)), path=path, id=image_id)
    data.image_manager.set_image(image)


def from_xml(text: str | bytes) -> MindMapData:
    """Build a mind map from an ALZ XML document.

    Raises xml.etree.ElementTree.ParseError for malformed XML,
    InvalidNodeIndexError for an edge to a missing node and ValueError
    for an image without id, bad image data or an out-of-range colour.
    """
    root = ET.fromstring(text)
    data = MindMapData()
    data.version = root.get("version", UNDEFINED_VERSION)

    def set_background(e: ET.Element) -> None:
        data.background_color = _read_color(e)

    def set_edge_color(e: ET.Element) -> None:
        data.edge_color = _read_color(e)

    def set_grid_color(e: ET.Element) -> None:
        data.grid_color = _read_color(e)

    def set_font(e: ET.Element) -> None:
        data.font = _read_font(e)

    def set_edge_width(e: ET.Element) -> None:
        data.edge_width = _to_double(_first_text(e)) / SCALE

    def set_text_size(e: ET.Element) -> None:
        data.text_size = int(_to_double(_first_text(e)) / SCALE)

    def set_corner_radius(e: ET.Element) -> None:
        data.corner_radius = int(_to_double(_first_text(e)) / SCALE)

    _read_children(
        root,
        {
            "graph": lambda e: _read_graph(e, data),
            "color": set_background,
            "edge-color": set_edge_color,
            "font-family": set_font,
            "grid-color": set_grid_color,
            "edge-width": set_edge_width,
            "image": lambda e: _read_image(e, data),
            "text-size": set_text_size,
            "corner-radius": set_corner_radius,
            "layout-optimizer": lambda e: _read_layout_optimizer(e, data),
        },
    )
    return data


def read_file(path: str | os.PathLike[str]) -> MindMapData:
    """Read an ALZ XML file and return the mind map it holds."""
    with open(path, "rb") as stream:
        content = stream.read()
    return from_xml(content)