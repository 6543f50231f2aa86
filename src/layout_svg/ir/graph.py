"""Layout snapshot: the attributed geometry consumed by the renderers.

This module owns the read-only graph data produced by the external layout
collaborator. Nodes and edges live in a networkx MultiDiGraph (parallel edges
are legal); clusters live in an index-addressed arena whose slot 0 is the
root. ``LayoutGraph.from_dict`` builds a snapshot from its JSON form.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any

import networkx as nx

from layout_svg.geometry.types import Point, Rect
from layout_svg.ir import uml
from layout_svg.types import ArrowType, RelationshipKind, StrokeKind, StrokeStyle


@dataclass(frozen=True)
class NodeGeometry:
    id: str
    center: Point
    width: float
    height: float
    label: str = ""
    z: float | None = None
    fill: str | None = None
    stroke: StrokeStyle | None = None

    def has_style(self) -> bool:
        return self.fill is not None or self.stroke is not None

    def left(self) -> float:
        return self.center.x - self.width / 2

    def top(self) -> float:
        return self.center.y - self.height / 2

    def right(self) -> float:
        return self.center.x + self.width / 2

    def bottom(self) -> float:
        return self.center.y + self.height / 2


@dataclass(frozen=True)
class EdgeGeometry:
    id: str
    source: str
    target: str
    bends: tuple[Point, ...] = ()
    arrow: ArrowType = ArrowType.Undefined
    stroke: StrokeStyle | None = None
    label: str | None = None


@dataclass(frozen=True)
class ClusterNode:
    rect: Rect
    fill: str | None = None
    stroke: StrokeStyle | None = None
    children: tuple[int, ...] = ()
    is_root: bool = False


@dataclass
class ClusterTree:
    """Arena of clusters; ``clusters[0]`` is the root."""

    clusters: list[ClusterNode] = field(default_factory=list)

    def root(self) -> int:
        return 0

    def breadth_first(self) -> list[int]:
        """Cluster indices in breadth-first order starting at the root."""
        if not self.clusters:
            return []
        order: list[int] = []
        queue: deque[int] = deque([self.root()])
        while queue:
            index = queue.popleft()
            order.append(index)
            queue.extend(self.clusters[index].children)
        return order


class LayoutGraph:
    """The laid-out graph handed to the renderers.

    Wraps a networkx MultiDiGraph whose node and edge ``data`` attributes hold
    NodeGeometry and EdgeGeometry values.
    """

    def __init__(
        self,
        digraph: nx.MultiDiGraph | None = None,
        directed: bool = False,
        edge_graphics: bool = True,
        clusters: ClusterTree | None = None,
    ) -> None:
        self.digraph = digraph if digraph is not None else nx.MultiDiGraph()
        self.directed = directed
        self.edge_graphics = edge_graphics
        self.clusters = clusters

    def add_node(self, node: NodeGeometry) -> None:
        if node.id in self.digraph:
            raise ValueError(f"duplicate node id '{node.id}'")
        self.digraph.add_node(node.id, data=node)

    def add_edge(self, edge: EdgeGeometry) -> None:
        for end in (edge.source, edge.target):
            if end not in self.digraph:
                raise ValueError(f"edge '{edge.id}' refers to unknown node '{end}'")
        if self.digraph.has_edge(edge.source, edge.target, key=edge.id):
            raise ValueError(f"duplicate edge id '{edge.id}'")
        self.digraph.add_edge(edge.source, edge.target, key=edge.id, data=edge)

    def node(self, node_id: str) -> NodeGeometry:
        return self.digraph.nodes[node_id]["data"]

    def nodes(self) -> list[NodeGeometry]:
        return [attrs["data"] for _, attrs in self.digraph.nodes(data=True)]

    def edges(self) -> list[EdgeGeometry]:
        return [attrs["data"] for _, _, attrs in self.digraph.edges(data=True)]

    def node_count(self) -> int:
        return self.digraph.number_of_nodes()

    def edge_count(self) -> int:
        return self.digraph.number_of_edges()

    def has_depth(self) -> bool:
        return any(n.z is not None for n in self.nodes())

    def bounding_box(self) -> Rect:
        """Smallest rectangle covering every node, bend point, and cluster."""
        xs: list[float] = []
        ys: list[float] = []
        for n in self.nodes():
            xs.extend((n.left(), n.right()))
            ys.extend((n.top(), n.bottom()))
        for e in self.edges():
            for p in e.bends:
                xs.append(p.x)
                ys.append(p.y)
        if self.clusters is not None:
            for c in self.clusters.clusters:
                if c.is_root:
                    continue
                xs.extend((c.rect.x, c.rect.right()))
                ys.extend((c.rect.y, c.rect.bottom()))
        if not xs:
            return Rect(0.0, 0.0, 0.0, 0.0)
        return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LayoutGraph:
        """Build a LayoutGraph from a JSON layout snapshot."""
        if not isinstance(data, dict):
            raise ValueError("layout snapshot must be a JSON object")
        graph = cls(
            directed=bool(data.get("directed", False)),
            edge_graphics=bool(data.get("edge_graphics", True)),
        )
        class_diagram = bool(data.get("class_diagram", False))
        try:
            for raw in data.get("nodes", []):
                graph.add_node(_parse_node(raw, class_diagram))
            raw_edges = data.get("edges", [])
            if class_diagram:
                raw_edges = _merge_class_edges(raw_edges)
            for raw in raw_edges:
                graph.add_edge(_parse_edge(raw))
            if data.get("clusters") is not None:
                graph.clusters = _parse_clusters(data["clusters"])
        except (TypeError, AttributeError) as e:
            raise ValueError(f"malformed layout snapshot: {e}") from e
        return graph


# ─── Snapshot parsing ────────────────────────────────────────────────────────


def _require(raw: dict[str, Any], key: str, what: str) -> Any:
    if key not in raw:
        raise ValueError(f"{what} is missing required field '{key}'")
    return raw[key]


def _parse_enum(enum_cls, value: str, what: str):
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValueError(f"unknown {what} '{value}'; use one of: {allowed}") from None


def _parse_point(raw: Any) -> Point:
    try:
        if isinstance(raw, dict):
            return Point(float(raw["x"]), float(raw["y"]))
        x, y = raw
        return Point(float(x), float(y))
    except (KeyError, TypeError, ValueError):
        raise ValueError(f"bend point must be [x, y] or {{'x': .., 'y': ..}}, got {raw!r}") from None


def _parse_stroke(raw: dict[str, Any] | None) -> StrokeStyle | None:
    if raw is None:
        return None
    return StrokeStyle(
        kind=_parse_enum(StrokeKind, raw.get("kind", "solid"), "stroke kind"),
        width=float(raw.get("width", 1.0)),
        color=str(raw.get("color", "#000000")),
    )


def _parse_node(raw: dict[str, Any], class_diagram: bool) -> NodeGeometry:
    node_id = str(_require(raw, "id", "node"))
    what = f"node '{node_id}'"
    label = str(raw.get("label", ""))
    if "width" in raw and "height" in raw:
        width, height = float(raw["width"]), float(raw["height"])
    else:
        width, height = uml.class_box_size(label)
    fill = raw.get("fill")
    if fill is None and class_diagram:
        fill = uml.CLASS_FILL
    z = raw.get("z")
    return NodeGeometry(
        id=node_id,
        center=Point(float(_require(raw, "x", what)), float(_require(raw, "y", what))),
        width=width,
        height=height,
        label=label,
        z=float(z) if z is not None else None,
        fill=fill,
        stroke=_parse_stroke(raw.get("stroke")),
    )


def _parse_edge(raw: dict[str, Any]) -> EdgeGeometry:
    source = str(_require(raw, "source", "edge"))
    target = str(_require(raw, "target", "edge"))
    stroke = _parse_stroke(raw.get("stroke"))
    if stroke is None and raw.get("relationship") is not None:
        kind = _parse_enum(RelationshipKind, raw["relationship"], "relationship")
        stroke = uml.relationship_stroke(kind)
    label = raw.get("label")
    return EdgeGeometry(
        id=str(raw.get("id", f"{source}->{target}")),
        source=source,
        target=target,
        bends=tuple(_parse_point(p) for p in raw.get("bends", [])),
        arrow=_parse_enum(ArrowType, raw.get("arrow", "undefined"), "arrow type"),
        stroke=stroke,
        label=str(label) if label is not None else None,
    )


def _parse_clusters(raw_root: dict[str, Any]) -> ClusterTree:
    tree = ClusterTree()
    # (raw cluster, arena slot) pairs; children slots are filled in order
    pending: deque[tuple[dict[str, Any], int]] = deque([(raw_root, 0)])
    slots: list[ClusterNode | None] = [None]
    while pending:
        raw, index = pending.popleft()
        child_indices: list[int] = []
        for child in raw.get("children", []):
            slots.append(None)
            child_indices.append(len(slots) - 1)
            pending.append((child, len(slots) - 1))
        slots[index] = ClusterNode(
            rect=Rect(
                float(raw.get("x", 0.0)),
                float(raw.get("y", 0.0)),
                float(raw.get("width", 0.0)),
                float(raw.get("height", 0.0)),
            ),
            fill=raw.get("fill"),
            stroke=_parse_stroke(raw.get("stroke")),
            children=tuple(child_indices),
            is_root=index == 0,
        )
    tree.clusters = [c for c in slots if c is not None]
    return tree


def _merge_class_edges(raw_edges: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Collapse repeated relationships between one class pair into the first such edge."""
    related = [
        (
            str(raw.get("source")),
            str(raw.get("target")),
            _parse_enum(RelationshipKind, raw["relationship"], "relationship"),
        )
        for raw in raw_edges
        if raw.get("relationship") is not None
    ]
    merged = uml.merge_relationships(related)
    seen: set[tuple[str, str]] = set()
    edges: list[dict[str, Any]] = []
    for raw in raw_edges:
        if raw.get("relationship") is None:
            edges.append(raw)
            continue
        pair = (str(raw.get("source")), str(raw.get("target")))
        if pair in seen:
            continue
        seen.add(pair)
        edges.append({**raw, "relationship": merged[pair].value})
    return edges
