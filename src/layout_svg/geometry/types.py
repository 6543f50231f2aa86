"""Geometry value types shared by the clipper, curve builder, and renderers."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A 2D point in drawing coordinates."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def norm(self) -> float:
        return math.hypot(self.x, self.y)

    def midpoint(self, other: Point) -> Point:
        return 0.5 * (self + other)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    def right(self) -> float:
        return self.x + self.width

    def bottom(self) -> float:
        return self.y + self.height


def fmt(value: float) -> str:
    """Format a coordinate compactly: integers without a fraction, at most 6 decimals otherwise."""
    if value == int(value):
        return str(int(value))
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text
