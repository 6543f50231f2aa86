"""Centralized configuration for layout-svg."""

from __future__ import annotations

from dataclasses import dataclass, field

from layout_svg.types import Interpolation


@dataclass
class RenderConfig:
    """Configuration for the rendering pipeline."""

    margin: float = 1.0
    curviness: float = 0.0
    interpolation: Interpolation = field(default_factory=Interpolation.default)
    font_size: int = 10
    font_color: str = "#000000"
    font_family: str = "Courier"
    width: str = ""
    height: str = ""

    def __post_init__(self) -> None:
        if not 0.0 <= self.curviness <= 1.0:
            raise ValueError(f"curviness must be within [0, 1], got {self.curviness}")
        if self.margin < 0:
            raise ValueError(f"margin must not be negative, got {self.margin}")
        if self.font_size <= 0:
            raise ValueError(f"font size must be positive, got {self.font_size}")
