"""Path construction through an edge's visible points.

Three interchangeable strategies share one interface: straight polylines,
tangent-continuous cubic Bezier chains, and polylines whose corners are
replaced by circular fillets. ``curve_for`` picks one per render.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Protocol

from layout_svg.geometry.types import Point, fmt
from layout_svg.types import Interpolation


@dataclass
class PathData:
    """An SVG path description as an ordered list of commands."""

    commands: list[tuple[str, tuple[float, ...]]] = field(default_factory=list)

    def move_to(self, p: Point) -> None:
        self.commands.append(("M", (p.x, p.y)))

    def line_to(self, p: Point) -> None:
        self.commands.append(("L", (p.x, p.y)))

    def curve_to(self, c1: Point, c2: Point, p: Point) -> None:
        self.commands.append(("C", (c1.x, c1.y, c2.x, c2.y, p.x, p.y)))

    def arc_to(self, radius: float, sweep: bool, p: Point) -> None:
        self.commands.append(("A", (radius, radius, 0, 0, 1 if sweep else 0, p.x, p.y)))

    def line(self, p1: Point, p2: Point) -> None:
        self.move_to(p1)
        self.line_to(p2)

    def ops(self) -> list[str]:
        return [op for op, _ in self.commands]

    def __str__(self) -> str:
        parts: list[str] = []
        for op, args in self.commands:
            if op == "A":
                rx, ry, rotation, large, sweep, x, y = args
                parts.append(f"A{fmt(rx)},{fmt(ry)} {fmt(rotation)} {fmt(large)} {fmt(sweep)} {fmt(x)},{fmt(y)}")
            else:
                pairs = [f"{fmt(args[i])},{fmt(args[i + 1])}" for i in range(0, len(args), 2)]
                parts.append(op + " ".join(pairs))
        return " ".join(parts)


class CurveStrategy(Protocol):
    """Protocol that all curve strategies must implement."""

    def build(self, points: list[Point]) -> PathData:
        """Build a path through ``points`` (at least two)."""
        ...


def _path_through(points: list[Point], chain: Callable[[PathData, list[Point]], None]) -> PathData:
    """Two points always give one straight segment; longer runs go to ``chain``."""
    assert len(points) >= 2, "a curve needs at least two points"
    path = PathData()
    if len(points) == 2:
        path.line(points[0], points[1])
    else:
        chain(path, points)
    return path


class StraightCurve:
    def build(self, points: list[Point]) -> PathData:
        return _path_through(points, self._chain)

    def _chain(self, path: PathData, points: list[Point]) -> None:
        for p1, p2 in zip(points, points[1:]):
            path.line(p1, p2)


class BezierCurve:
    """Cubic segments whose control points are pulled towards each bend.

    Each segment starts with the control point the previous segment ended
    with, so tangents stay continuous across bends.
    """

    def __init__(self, curviness: float) -> None:
        self.curviness = curviness

    def build(self, points: list[Point]) -> PathData:
        return _path_through(points, self._chain)

    def _chain(self, path: PathData, points: list[Point]) -> None:
        c = self.curviness
        c_last = points[0].midpoint(points[1])

        for p1, p2, p3 in zip(points, points[1:], points[2:]):
            delta = p2 - p1.midpoint(p3)
            c1 = p1 + c * delta + (1 - c) * (p2 - p1)
            c2 = p3 + c * delta + (1 - c) * (p2 - p3)
            path.move_to(p1)
            path.curve_to(c_last, c1, p2)
            c_last = c2

        p1, p2 = points[-2], points[-1]
        path.move_to(p1)
        path.curve_to(c_last, p1.midpoint(p2), p2)


class RoundedCurve:
    """Straight runs joined by circular fillets of radius ``curviness / 2`` times the shorter leg."""

    def __init__(self, curviness: float) -> None:
        self.curviness = curviness

    def build(self, points: list[Point]) -> PathData:
        return _path_through(points, self._chain)

    def _chain(self, path: PathData, points: list[Point]) -> None:
        c = self.curviness

        first, second = points[0], points[1]
        path.line(first, 0.5 * ((first + second) + (1 - c) * (second - first)))

        for p1, p2, p3 in zip(points, points[1:], points[2:]):
            v1 = p1 - p2
            v2 = p3 - p2
            n1, n2 = v1.norm(), v2.norm()
            if n1 == 0 or n2 == 0:
                path.line(p1.midpoint(p2), p2)
                path.line(p3.midpoint(p2), p2)
                continue

            radius = min(n1, n2) * c / 2
            pa = p2 + v1 * (radius / n1)
            pb = p2 + v2 * (radius / n2)

            path.line(p1.midpoint(p2), pa)
            path.line(p3.midpoint(p2), pb)

            va = p2 - p1
            vb = p3 - p1
            sweep = va.x * vb.y - va.y * vb.x > 0
            path.move_to(pa)
            path.arc_to(radius, sweep, pb)

        before, last = points[-2], points[-1]
        path.line(last, 0.5 * ((before + last) + (1 - c) * (before - last)))


def curve_for(curviness: float, interpolation: Interpolation) -> CurveStrategy:
    """Pick the curve strategy for a render; zero curviness is always straight."""
    if curviness == 0:
        return StraightCurve()
    if interpolation == Interpolation.Bezier:
        return BezierCurve(curviness)
    return RoundedCurve(curviness)
