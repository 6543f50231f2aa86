"""Scene: an SVG element tree onto which graph elements are appended."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from enum import Enum

from layout_svg.geometry.types import Rect, fmt

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"
EV_NS = "http://www.w3.org/2001/xml-events"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


class Primitive(Enum):
    Group = "g"
    Rect = "rect"
    Path = "path"
    Polygon = "polygon"
    Text = "text"
    Line = "line"
    Style = "style"


class Scene:
    """A fresh SVG document; primitives are appended once and never revisited."""

    def __init__(self, view_box: Rect, width: str = "", height: str = "") -> None:
        attrs = {
            "xmlns": SVG_NS,
            "xmlns:xlink": XLINK_NS,
            "xmlns:ev": EV_NS,
            "version": "1.1",
            "baseProfile": "full",
        }
        if width:
            attrs["width"] = width
        if height:
            attrs["height"] = height
        attrs["viewBox"] = " ".join(fmt(v) for v in (view_box.x, view_box.y, view_box.width, view_box.height))
        self.root = ET.Element("svg", attrib=attrs)

    def add(
        self,
        parent: ET.Element,
        kind: Primitive,
        attrs: dict[str, str] | None = None,
        text: str | None = None,
    ) -> ET.Element:
        el = ET.SubElement(parent, kind.value, attrib=dict(attrs or {}))
        if text is not None:
            el.text = text
        return el

    def group(self, parent: ET.Element, attrs: dict[str, str] | None = None) -> ET.Element:
        return self.add(parent, Primitive.Group, attrs)

    def style(self, css: str) -> ET.Element:
        return self.add(self.root, Primitive.Style, text=css)

    def polygon(self, parent: ET.Element, coords: list[float], attrs: dict[str, str] | None = None) -> ET.Element:
        assert len(coords) % 2 == 0, "polygon needs an even number of coordinates"
        points = " ".join(f"{fmt(coords[i])},{fmt(coords[i + 1])}" for i in range(0, len(coords), 2))
        return self.add(parent, Primitive.Polygon, {"points": points, **(attrs or {})})

    def to_string(self) -> str:
        ET.indent(self.root)
        return XML_DECLARATION + ET.tostring(self.root, encoding="unicode") + "\n"
