"""Shared type definitions for layout-svg.

Enums used across the layout snapshot, geometry helpers, and renderers.
Values double as the spellings accepted in JSON layout snapshots.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StrokeKind(Enum):
    Hidden = "none"  # no stroke at all
    Solid = "solid"
    Dash = "dash"
    Dot = "dot"
    Dashdot = "dashdot"
    Dashdotdot = "dashdotdot"

    @classmethod
    def default(cls) -> StrokeKind:
        return cls.Solid


class ArrowType(Enum):
    Neither = "none"
    First = "first"  # arrowhead at the source end
    Last = "last"  # arrowhead at the target end
    Both = "both"
    Undefined = "undefined"  # target arrowhead iff the graph is directed

    @classmethod
    def default(cls) -> ArrowType:
        return cls.Undefined


class Interpolation(Enum):
    Rounded = "rounded"
    Bezier = "bezier"

    @classmethod
    def default(cls) -> Interpolation:
        return cls.Rounded


class RelationshipKind(Enum):
    Dependency = "dependency"
    Association = "association"
    Bidirectional = "bidirectional"
    Aggregation = "aggregation"
    Composition = "composition"
    Generalization = "generalization"
    Realization = "realization"


@dataclass(frozen=True)
class StrokeStyle:
    kind: StrokeKind = StrokeKind.Solid
    width: float = 1.0
    color: str = "#000000"
