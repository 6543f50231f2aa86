"""Stroke kinds to SVG stroke attributes and dash patterns."""

from __future__ import annotations

from layout_svg.geometry.types import fmt
from layout_svg.types import StrokeKind, StrokeStyle

# Dash and gap lengths as multiples of the stroke width.
DASH_PATTERNS: dict[StrokeKind, tuple[int, ...]] = {
    StrokeKind.Dash: (4, 2),
    StrokeKind.Dot: (1, 2),
    StrokeKind.Dashdot: (4, 2, 1, 2),
    StrokeKind.Dashdotdot: (4, 2, 1, 2, 1, 2),
}

DEFAULT_STROKE_COLOR = "#000000"


def dash_pattern(kind: StrokeKind, width: float) -> list[float] | None:
    """Dash lengths for ``kind`` at ``width``; None for solid and hidden strokes."""
    pattern = DASH_PATTERNS.get(kind)
    if pattern is None:
        return None
    return [n * width for n in pattern]


def dash_array(kind: StrokeKind, width: float) -> str | None:
    pattern = dash_pattern(kind, width)
    if pattern is None:
        return None
    return ",".join(fmt(v) for v in pattern)


def stroke_width(width: float) -> str:
    return f"{fmt(width)}px"


def apply_dash(attrs: dict[str, str], stroke: StrokeStyle) -> dict[str, str]:
    dashes = dash_array(stroke.kind, stroke.width)
    if dashes is not None:
        attrs["stroke-dasharray"] = dashes
    return attrs


def line_style_attrs(stroke: StrokeStyle | None) -> dict[str, str]:
    """Stroke attributes for an edge path or arrowhead.

    Without a style the line is plain black; a hidden stroke yields no
    attributes at all.
    """
    if stroke is None:
        return {"stroke": DEFAULT_STROKE_COLOR}
    if stroke.kind == StrokeKind.Hidden:
        return {}
    attrs = {"stroke": stroke.color, "stroke-width": stroke_width(stroke.width)}
    return apply_dash(attrs, stroke)


def shape_style_attrs(fill: str | None, stroke: StrokeStyle | None) -> dict[str, str]:
    """Fill and stroke attributes for a node rectangle.

    A missing stroke falls back to the default solid black outline; a hidden
    stroke leaves out every stroke attribute.
    """
    attrs: dict[str, str] = {}
    if fill is not None:
        attrs["fill"] = fill
    if stroke is None:
        stroke = StrokeStyle()
    if stroke.kind == StrokeKind.Hidden:
        return attrs
    attrs["stroke"] = stroke.color
    attrs["stroke-width"] = stroke_width(stroke.width)
    return apply_dash(attrs, stroke)
