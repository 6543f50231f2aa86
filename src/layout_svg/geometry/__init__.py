"""Plane geometry for edges: clipping, arrowheads, and curves."""

from layout_svg.geometry.types import Point, Rect

__all__ = [
    "Point",
    "Rect",
]
