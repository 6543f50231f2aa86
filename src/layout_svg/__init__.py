"""layout-svg: laid-out attributed graphs to SVG documents."""

import json

from layout_svg.config import RenderConfig
from layout_svg.ir.graph import LayoutGraph
from layout_svg.renderers.base import Renderer
from layout_svg.renderers.svg import SvgRenderer, render_scene

__all__ = [
    "LayoutGraph",
    "RenderConfig",
    "SvgRenderer",
    "render_json",
    "render_layout",
    "render_scene",
]


def render_layout(graph: LayoutGraph, config: RenderConfig | None = None) -> str:
    """Render a LayoutGraph to an SVG document string.

    Args:
        graph: The laid-out graph (positions, sizes, bends, styles).
        config: Render settings; defaults to RenderConfig().

    Returns:
        The serialized SVG document.
    """
    renderer: Renderer = SvgRenderer(config)
    return renderer.render(graph)


def render_json(src: str, config: RenderConfig | None = None) -> str:
    """Parse a JSON layout snapshot and render it to SVG.

    Args:
        src: JSON text of the layout snapshot.
        config: Render settings; defaults to RenderConfig().

    Returns:
        The serialized SVG document.

    Raises:
        ValueError: If the input is not valid JSON or not a valid snapshot.
    """
    try:
        data = json.loads(src)
    except json.JSONDecodeError as e:
        raise ValueError(f"invalid JSON: {e}") from e
    return render_layout(LayoutGraph.from_dict(data), config)
