"""SVG renderer: emits clusters, nodes, and edges of a laid-out graph."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from layout_svg.config import RenderConfig
from layout_svg.geometry.arrows import Arrowhead, arrow_ends, boundary_point, place_arrowhead
from layout_svg.geometry.clip import arrow_size, covered, full_path, visible_points
from layout_svg.geometry.curves import CurveStrategy, curve_for
from layout_svg.geometry.types import Rect, fmt
from layout_svg.ir.graph import ClusterTree, EdgeGeometry, LayoutGraph, NodeGeometry
from layout_svg.renderers.labels import TEXT_INDENT, layout_label
from layout_svg.renderers.scene import Primitive, Scene
from layout_svg.renderers.strokes import DEFAULT_STROKE_COLOR, line_style_attrs, shape_style_attrs, stroke_width
from layout_svg.types import StrokeKind

logger = logging.getLogger(__name__)

FONT_STYLE_CLASS = "font_style"
DIVIDER_COLOR = "black"
DIVIDER_WIDTH = "2px"


def _em(value: float) -> str:
    return f"{fmt(value)}em"


# ─── Header ──────────────────────────────────────────────────────────────────


def _open_scene(graph: LayoutGraph, config: RenderConfig) -> Scene:
    box = graph.bounding_box()
    m = config.margin
    view_box = Rect(box.x - m, box.y - m, box.width + 2 * m, box.height + 2 * m)
    scene = Scene(view_box, width=config.width, height=config.height)
    scene.style(f".{FONT_STYLE_CLASS} {{font: {config.font_size}px monospace;}}")
    return scene


# ─── Cluster Rendering ───────────────────────────────────────────────────────


def _paint_clusters(scene: Scene, clusters: ClusterTree | None) -> None:
    assert clusters is not None, "cluster rendering requires cluster attributes"

    for index in clusters.breadth_first():
        cluster = clusters.clusters[index]
        group = scene.group(scene.root)
        if cluster.is_root:
            continue
        stroke = cluster.stroke
        hidden = stroke is None or stroke.kind == StrokeKind.Hidden
        scene.add(
            group,
            Primitive.Rect,
            {
                "x": fmt(cluster.rect.x),
                "y": fmt(cluster.rect.y),
                "width": fmt(cluster.rect.width),
                "height": fmt(cluster.rect.height),
                "fill": cluster.fill if cluster.fill is not None else "none",
                "stroke": "none" if hidden else stroke.color,
                "stroke-width": stroke_width(stroke.width if stroke is not None else 1.0),
            },
        )


# ─── Node Rendering ──────────────────────────────────────────────────────────


def _paint_node(scene: Scene, parent: ET.Element, node: NodeGeometry, config: RenderConfig) -> None:
    group = scene.group(
        parent,
        {
            "class": FONT_STYLE_CLASS,
            "transform": f"translate({fmt(node.left())}, {fmt(node.top())})",
        },
    )
    box = layout_label(node.label)

    rect_attrs = shape_style_attrs(node.fill, node.stroke) if node.has_style() else {}
    rect_attrs["width"] = _em(box.width_em)
    rect_attrs["height"] = _em(box.height_em)
    scene.add(group, Primitive.Rect, rect_attrs)

    for segment in box.segments:
        scene.add(
            group,
            Primitive.Text,
            {
                "dy": _em(segment.baseline),
                "dx": _em(TEXT_INDENT),
                "text-anchor": "start",
                "fill": config.font_color,
                "textLength": _em(segment.text_length()),
                "lengthAdjust": "spacingAndGlyphs",
            },
            text=segment.text,
        )
        if segment.divider:
            y = _em(segment.divider_y())
            scene.add(
                group,
                Primitive.Line,
                {
                    "x1": "0",
                    "y1": y,
                    "x2": _em(box.width_em),
                    "y2": y,
                    "stroke": DIVIDER_COLOR,
                    "stroke-width": DIVIDER_WIDTH,
                },
            )


def _paint_nodes(scene: Scene, graph: LayoutGraph, config: RenderConfig) -> None:
    nodes = graph.nodes()
    if graph.has_depth():
        nodes.sort(key=lambda n: n.z if n.z is not None else 0.0)
    for node in nodes:
        _paint_node(scene, scene.root, node, config)


# ─── Edge Rendering ──────────────────────────────────────────────────────────


def _paint_edge(
    scene: Scene,
    parent: ET.Element,
    graph: LayoutGraph,
    edge: EdgeGeometry,
    curve: CurveStrategy,
    config: RenderConfig,
) -> bool:
    """Paint one edge; returns False when the endpoint nodes leave nothing visible."""
    source = graph.node(edge.source)
    target = graph.node(edge.target)
    source_arrow, target_arrow = arrow_ends(edge.arrow, graph.directed)
    source_size = arrow_size(edge, source, target) if source_arrow else 0.0
    target_size = arrow_size(edge, target, source) if target_arrow else 0.0

    points = visible_points(full_path(edge, source, target), source, target, source_size, target_size)
    if len(points) < 2:
        logger.warning("Could not draw edge since nodes are overlapping: %s", edge.id)
        return False

    # a run may end on a bend inside the arrow clearance but outside the box
    if not covered(points[0], source):
        points = [source.center, *points]
    if not covered(points[-1], target):
        points = [*points, target.center]

    arrowheads: list[Arrowhead] = []
    if source_arrow:
        start, head = place_arrowhead(points[1], points[0], source, source_size)
        arrowheads.append(head)
    else:
        start = boundary_point(points[1], points[0], source)
    if target_arrow:
        end, head = place_arrowhead(points[-2], points[-1], target, target_size)
        arrowheads.append(head)
    else:
        end = boundary_point(points[-2], points[-1], target)
    points = [start, *points[1:-1], end]

    group = scene.group(parent)

    if edge.label:
        mid = points[0].midpoint(points[1])
        scene.add(
            group,
            Primitive.Text,
            {
                "text-anchor": "middle",
                "dominant-baseline": "middle",
                "font-family": config.font_family,
                "font-size": str(config.font_size),
                "fill": config.font_color,
                "x": fmt(mid.x),
                "y": fmt(mid.y),
            },
            text=edge.label,
        )

    style = line_style_attrs(edge.stroke)
    fill = edge.stroke.color if edge.stroke is not None else DEFAULT_STROKE_COLOR
    for head in arrowheads:
        scene.polygon(group, head.coords(), {"fill": fill, **style})

    scene.add(group, Primitive.Path, {"fill": "none", "d": str(curve.build(points)), **style})
    return True


def _paint_edges(scene: Scene, graph: LayoutGraph, config: RenderConfig) -> int:
    group = scene.group(scene.root)
    curve = curve_for(config.curviness, config.interpolation)
    drawn = 0
    for edge in graph.edges():
        if _paint_edge(scene, group, graph, edge, curve, config):
            drawn += 1
    return drawn


# ─── Public Renderer ─────────────────────────────────────────────────────────


def render_scene(graph: LayoutGraph, config: RenderConfig | None = None) -> Scene:
    """Build the SVG scene for ``graph`` without serializing it."""
    config = config if config is not None else RenderConfig()
    scene = _open_scene(graph, config)

    if graph.clusters is not None:
        _paint_clusters(scene, graph.clusters)

    _paint_nodes(scene, graph, config)

    if graph.edge_graphics:
        drawn = _paint_edges(scene, graph, config)
        logger.debug("Rendered %d nodes and %d of %d edges", graph.node_count(), drawn, graph.edge_count())
    return scene


class SvgRenderer:
    """SVG document renderer."""

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config if config is not None else RenderConfig()

    def render(self, graph: LayoutGraph) -> str:
        return render_scene(graph, self.config).to_string()
