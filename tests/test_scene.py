"""Tests for renderers/scene.py: the SVG element tree."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from layout_svg.geometry.types import Rect
from layout_svg.renderers.scene import SVG_NS, Primitive, Scene


class TestSceneHeader:
    def test_root_attributes(self):
        scene = Scene(Rect(-51, -21, 402, 42))
        assert scene.root.tag == "svg"
        assert scene.root.get("xmlns") == SVG_NS
        assert scene.root.get("version") == "1.1"
        assert scene.root.get("viewBox") == "-51 -21 402 42"
        assert scene.root.get("width") is None

    def test_explicit_size(self):
        scene = Scene(Rect(0, 0, 10, 10), width="20cm", height="10cm")
        assert scene.root.get("width") == "20cm"
        assert scene.root.get("height") == "10cm"


class TestPrimitives:
    def test_add_with_text(self):
        scene = Scene(Rect(0, 0, 1, 1))
        el = scene.add(scene.root, Primitive.Text, {"x": "1"}, text="hi")
        assert el.tag == "text"
        assert el.text == "hi"
        assert el.get("x") == "1"

    def test_polygon_points(self):
        scene = Scene(Rect(0, 0, 1, 1))
        el = scene.polygon(scene.root, [0, 0, 1, 2.5, 3, 4], {"fill": "red"})
        assert el.get("points") == "0,0 1,2.5 3,4"
        assert el.get("fill") == "red"

    def test_polygon_with_odd_coordinates_is_a_contract_violation(self):
        scene = Scene(Rect(0, 0, 1, 1))
        with pytest.raises(AssertionError):
            scene.polygon(scene.root, [0, 0, 1])


class TestSerialization:
    def test_to_string_parses(self):
        scene = Scene(Rect(0, 0, 1, 1))
        scene.style(".font_style {font: 10px monospace;}")
        scene.group(scene.root, {"class": "x"})
        out = scene.to_string()
        assert out.startswith("<?xml")
        parsed = ET.fromstring(out)
        assert parsed.tag == f"{{{SVG_NS}}}svg"
        assert len(list(parsed)) == 2
