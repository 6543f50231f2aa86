"""Arrowheads and boundary endpoints for clipped edges.

Nodes are axis-aligned rectangles, so the point where an approach line meets
a node is found against the vertical side first and, when that lands past a
corner, against the horizontal side.
"""

from __future__ import annotations

from dataclasses import dataclass

from layout_svg.geometry.clip import covered
from layout_svg.geometry.types import Point
from layout_svg.ir.graph import NodeGeometry
from layout_svg.types import ArrowType

ARROW_HALF_WIDTH: float = 0.25  # base half-width as a fraction of the arrow size


@dataclass(frozen=True)
class Arrowhead:
    tip: Point
    left: Point
    right: Point

    def coords(self) -> list[float]:
        return [self.tip.x, self.tip.y, self.left.x, self.left.y, self.right.x, self.right.y]


def arrow_ends(arrow: ArrowType, directed: bool) -> tuple[bool, bool]:
    """(source arrow, target arrow) for an edge's arrow type."""
    match arrow:
        case ArrowType.Undefined:
            return (False, directed)
        case ArrowType.Last:
            return (False, True)
        case ArrowType.First:
            return (True, False)
        case ArrowType.Both:
            return (True, True)
        case _:
            return (False, False)


def boundary_point(start: Point, end: Point, node: NodeGeometry) -> Point:
    """Where the line from ``start`` (outside) towards ``end`` meets ``node``'s border.

    An ``end`` outside the rectangle is replaced by the node center, so the
    result always lies on the border.
    """
    if not covered(end, node):
        end = node.center
    dx = end.x - start.x
    dy = end.y - start.y

    if dx == 0:
        sign = 1 if dy > 0 else -1
        return Point(end.x, node.center.y - node.height / 2 * sign)

    slope = dy / dx
    sign = 1 if dx > 0 else -1
    x = node.center.x - node.width / 2 * sign
    y = start.y + (x - start.x) * slope

    if not covered(Point(x, y), node) and dy != 0:
        sign = 1 if dy > 0 else -1
        y = node.center.y - node.height / 2 * sign
        x = start.x + (y - start.y) / slope

    return Point(x, y)


def place_arrowhead(start: Point, end: Point, node: NodeGeometry, size: float) -> tuple[Point, Arrowhead]:
    """Clip the segment ``start``→``end`` at ``node`` and build an arrowhead there.

    Returns the corrected endpoint and the arrowhead whose tip sits on it.
    The base is ``size`` back along the approach direction and ``size / 2``
    wide.
    """
    tip = boundary_point(start, end, node)
    direction = tip - start
    length = direction.norm()
    ux, uy = direction.x / length, direction.y / length

    base = Point(tip.x - size * ux, tip.y - size * uy)
    half = size * ARROW_HALF_WIDTH
    left = Point(base.x - half * uy, base.y + half * ux)
    right = Point(base.x + half * uy, base.y - half * ux)
    return tip, Arrowhead(tip=tip, left=left, right=right)
