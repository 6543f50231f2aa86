"""Base renderer protocol."""

from __future__ import annotations

from typing import Protocol

from layout_svg.ir.graph import LayoutGraph


class Renderer(Protocol):
    """Protocol that all renderers must implement."""

    def render(self, graph: LayoutGraph) -> str:
        """Render a laid-out graph to an output string."""
        ...
