"""Serialisation of a mind map to the ALZ XML format."""

from __future__ import annotations

import base64
import logging
import os
import xml.etree.ElementTree as ET

from .model import MindMapData
from .palette import Color

_log = logging.getLogger(__name__)

APPLICATION_VERSION = "1.0.0"

SCALE = 1000
"""Factor applied to real numbers so they can be stored as integers."""

XML_DECLARATION = "<?xml version='1.0' encoding='UTF-8'?>"


def _scaled(value: float) -> str:
    return str(int(value * SCALE))


def _format_double(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


def _flag(value: bool) -> str:
    return "1" if value else "0"


def _add_text_child(parent: ET.Element, tag: str, text: str) -> ET.Element:
    element = ET.SubElement(parent, tag)
    element.text = text
    return element


def _write_color(parent: ET.Element, tag: str, color: Color) -> None:
    ET.SubElement(parent, tag, {"r": str(color.r), "g": str(color.g), "b": str(color.b)})


def _write_nodes(data: MindMapData, graph_element: ET.Element) -> None:
    for node in data.graph.get_nodes():
        x, y = node.location
        w, h = node.size
        element = ET.SubElement(
            graph_element,
            "node",
            {
                "index": str(node.index),
                "x": _scaled(x),
                "y": _scaled(y),
                "w": _scaled(w),
                "h": _scaled(h),
            },
        )
        if node.text:
            _add_text_child(element, "text", node.text)
        _write_color(element, "color", node.color)
        _write_color(element, "text-color", node.text_color)
        if node.image_ref:
            ET.SubElement(element, "image", {"ref": str(node.image_ref)})


def _write_edges(data: MindMapData, graph_element: ET.Element) -> None:
    for node in data.graph.get_nodes():
        for edge in data.graph.get_edges_from_node(node):
            attributes = {"arrow-mode": str(int(edge.arrow_mode))}
            if edge.dashed_line:
                attributes["dashed-line"] = "1"
            attributes["index0"] = str(edge.source_node.index)
            attributes["index1"] = str(edge.target_node.index)
            if edge.reversed:
                attributes["reversed"] = "1"
            element = ET.SubElement(graph_element, "edge", attributes)
            if edge.text:
                _add_text_child(element, "text", edge.text)


def _write_images(data: MindMapData, root: ET.Element) -> None:
    written: set[int] = set()
    for node in data.graph.get_nodes():
        ref = node.image_ref
        if not ref:
            continue
        if ref in written:
            _log.info("Image id=%d already written", ref)
            continue
        image = data.image_manager.get_image(ref)
        if image is None:
            raise LookupError(f"Image id={ref} doesn't exist!")
        element = ET.SubElement(root, "image", {"id": str(image.id), "path": image.path})
        element.text = base64.b64encode(image.data).decode("ascii")
        written.add(image.id)


def _write_layout_optimizer(data: MindMapData, root: ET.Element) -> None:
    ET.SubElement(
        root,
        "layout-optimizer",
        {
            "aspect-ratio": _format_double(data.aspect_ratio * SCALE),
            "min-edge-length": _format_double(data.min_edge_length * SCALE),
        },
    )


def to_xml(data: MindMapData) -> str:
    """Return the mind map as an ALZ XML document.

    Raises LookupError if a node refers to an image the map does not hold.
    """
    root = ET.Element("heimer-mind-map", {"version": APPLICATION_VERSION})

    _write_color(root, "color", data.background_color)
    _write_color(root, "edge-color", data.edge_color)
    _write_color(root, "grid-color", data.grid_color)

    _add_text_child(root, "edge-width", _scaled(data.edge_width))

    font = data.font
    font_element = ET.SubElement(
        root,
        "font-family",
        {
            "bold": _flag(font.bold),
            "italic": _flag(font.italic),
            "overline": _flag(font.overline),
            "strike-out": _flag(font.strike_out),
            "underline": _flag(font.underline),
            "weight": str(font.weight),
        },
    )
    font_element.text = font.family

    _add_text_child(root, "text-size", _scaled(data.text_size))
    _add_text_child(root, "corner-radius", _scaled(data.corner_radius))

    graph_element = ET.SubElement(root, "graph")
    _write_nodes(data, graph_element)
    _write_edges(data, graph_element)

    _write_images(data, root)
    _write_layout_optimizer(data, root)

    ET.indent(root, space=" ")
    return XML_DECLARATION + "\n" + ET.tostring(root, encoding="unicode") + "\n"


def write_file(data: MindMapData, path: str | os.PathLike[str]) -> None:
    """Write the mind map to ``path`` as UTF-8 ALZ XML."""
    text = to_xml(data)
    with open(path, "w", encoding="utf-8", newline="") as stream:
        stream.write(text)