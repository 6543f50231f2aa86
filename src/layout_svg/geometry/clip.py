"""Edge clipping against node rectangles.

An edge is routed center-to-center through its bend points. Only the part
outside both endpoint nodes is drawn; around a node that receives an
arrowhead the rectangle is inflated by the arrow size so the head has room.
"""

from __future__ import annotations

from layout_svg.geometry.types import Point
from layout_svg.ir.graph import EdgeGeometry, NodeGeometry

MIN_ARROW_STROKES: float = 3.0
ARROW_SIZE_DIVISOR: float = 16.0


def covered(point: Point, node: NodeGeometry, margin: float = 0.0) -> bool:
    """True iff ``point`` lies inside ``node`` inflated by ``margin`` on every side."""
    return (
        node.left() - margin <= point.x <= node.right() + margin
        and node.top() - margin <= point.y <= node.bottom() + margin
    )


def arrow_size(edge: EdgeGeometry, node: NodeGeometry, opposite: NodeGeometry) -> float:
    """Arrowhead length at ``node``: scales with both endpoints, never below three stroke widths."""
    width = edge.stroke.width if edge.stroke is not None else 1.0
    spread = (node.width + node.height + opposite.width + opposite.height) / ARROW_SIZE_DIVISOR
    return max(MIN_ARROW_STROKES * width, spread)


def full_path(edge: EdgeGeometry, source: NodeGeometry, target: NodeGeometry) -> list[Point]:
    return [source.center, *edge.bends, target.center]


def visible_points(
    points: list[Point],
    source: NodeGeometry,
    target: NodeGeometry,
    source_margin: float = 0.0,
    target_margin: float = 0.0,
) -> list[Point]:
    """The run of ``points`` from where the path leaves ``source`` to where it enters ``target``.

    The first point returned is the last one still covered by the source, the
    last point is the first one covered by the target. Fewer than two points
    means the path never got clear of the source before reaching the target;
    a path that never enters the target from outside yields no points.
    """
    visible: list[Point] = []
    drawing = False
    for p1, p2 in zip(points, points[1:]):
        if covered(p1, source, source_margin) and not covered(p2, source, source_margin):
            drawing = True
        entering = not covered(p1, target, target_margin) and covered(p2, target, target_margin)
        if drawing:
            visible.append(p1)
        if entering:
            visible.append(p2)
            return visible
    return []
