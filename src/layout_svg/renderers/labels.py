"""Node label layout: marker-delimited lines, separator rules, and box size.

Labels arrive from the layout collaborator with two inline markers:

  <svg_new_line>    ends the current display line
  <svg_box_divide>  ends the current display line and draws a rule beneath it

All offsets are in em units of the node's font.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

NEW_LINE = "<svg_new_line>"
BOX_DIVIDE = "<svg_box_divide>"

_MARKER_RE = re.compile(f"({re.escape(NEW_LINE)}|{re.escape(BOX_DIVIDE)})")

# ─── Metrics (em) ────────────────────────────────────────────────────────────

FIRST_BASELINE: float = 0.83
LINE_ADVANCE: float = 1.1
TEXT_INDENT: float = 0.17
GLYPH_ADVANCE: float = 0.67  # textLength per character
DIVIDER_DROP: float = 0.34  # separator distance below its line's baseline
BOX_CHAR_WIDTH: float = 0.75
BOX_LINE_HEIGHT: float = 1.3


@dataclass(frozen=True)
class LabelSegment:
    text: str
    baseline: float
    divider: bool = False

    def text_length(self) -> float:
        return len(self.text) * GLYPH_ADVANCE

    def divider_y(self) -> float:
        return self.baseline + DIVIDER_DROP


@dataclass(frozen=True)
class LabelLayout:
    segments: tuple[LabelSegment, ...]
    largest_line: int

    @property
    def width_em(self) -> float:
        return self.largest_line * BOX_CHAR_WIDTH

    @property
    def height_em(self) -> float:
        return len(self.segments) * BOX_LINE_HEIGHT

    def lines(self) -> list[str]:
        return [s.text for s in self.segments]


def _split(label: str) -> list[tuple[str, bool]]:
    """Split a label into (text, divider) pieces, one per display line."""
    pieces: list[tuple[str, bool]] = []
    prev = 0
    for m in _MARKER_RE.finditer(label):
        pieces.append((label[prev : m.start()], m.group(1) == BOX_DIVIDE))
        prev = m.end()
    tail = label[prev:]
    if tail:
        pieces.append((tail, False))
    return pieces


def layout_label(label: str) -> LabelLayout:
    """Lay out a raw label into display segments and a box size.

    Each marker closes the text since the previous one. Text after the last
    marker (or the whole label, when it has no markers) forms a final line.
    """
    pieces = _split(label)
    largest_line = max((len(text) for text, _ in pieces), default=0)
    segments = tuple(
        LabelSegment(text=text, baseline=FIRST_BASELINE + i * LINE_ADVANCE, divider=divider)
        for i, (text, divider) in enumerate(pieces)
    )
    return LabelLayout(segments=segments, largest_line=largest_line)
