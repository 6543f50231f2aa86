"""UML class-diagram conventions applied when building a layout snapshot.

Relationship kinds decide edge strokes, duplicate relationships between the
same pair of classes collapse to the strongest kind, and class boxes are
sized from their labels.
"""

from __future__ import annotations

from typing import Iterable

from layout_svg.renderers.labels import layout_label
from layout_svg.types import RelationshipKind, StrokeKind, StrokeStyle

CLASS_FILL = "#faebd7"  # antique white
RELATIONSHIP_STROKE_WIDTH = 2.0

_DASHED = {RelationshipKind.Dependency, RelationshipKind.Generalization, RelationshipKind.Realization}

# Later entries override earlier ones when the same class pair repeats.
_STRENGTH = [
    RelationshipKind.Association,
    RelationshipKind.Bidirectional,
    RelationshipKind.Aggregation,
    RelationshipKind.Composition,
]


def relationship_stroke(kind: RelationshipKind) -> StrokeStyle:
    stroke_kind = StrokeKind.Dash if kind in _DASHED else StrokeKind.Solid
    return StrokeStyle(kind=stroke_kind, width=RELATIONSHIP_STROKE_WIDTH)


def merge_relationships(
    relationships: Iterable[tuple[str, str, RelationshipKind]],
) -> dict[tuple[str, str], RelationshipKind]:
    """Collapse repeated (source, target) relationships to a single kind.

    Association, bidirectional, aggregation, and composition upgrade one
    another in that order; any other combination keeps the kind seen first.
    """
    merged: dict[tuple[str, str], RelationshipKind] = {}
    for source, target, kind in relationships:
        key = (source, target)
        current = merged.get(key)
        if current is None:
            merged[key] = kind
        elif current in _STRENGTH and kind in _STRENGTH and _STRENGTH.index(kind) > _STRENGTH.index(current):
            merged[key] = kind
    return merged


def class_box_size(label: str, font_size: float = 10) -> tuple[float, float]:
    """Node (width, height) that fits the rendered label box at ``font_size`` units per em."""
    box = layout_label(label)
    return (box.width_em * font_size, box.height_em * font_size)
