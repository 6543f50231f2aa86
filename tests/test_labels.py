"""Tests for renderers/labels.py: marker parsing, offsets, and box size."""

from __future__ import annotations

import pytest

from layout_svg.renderers.labels import BOX_DIVIDE, NEW_LINE, layout_label


class TestLabelSegments:
    def test_mixed_markers(self):
        box = layout_label(f"foo{NEW_LINE}bar{BOX_DIVIDE}baz")
        assert box.lines() == ["foo", "bar", "baz"]
        assert [s.divider for s in box.segments] == [False, True, False]

    def test_box_size(self):
        box = layout_label(f"foo{NEW_LINE}bar{BOX_DIVIDE}baz")
        assert box.largest_line == 3
        assert box.width_em == pytest.approx(3 * 0.75)
        assert box.height_em == pytest.approx(3 * 1.3)

    def test_no_markers_is_one_full_line(self):
        box = layout_label("just a class")
        assert box.lines() == ["just a class"]
        assert box.largest_line == len("just a class")

    def test_empty_label_has_no_lines(self):
        box = layout_label("")
        assert box.segments == ()
        assert box.width_em == 0
        assert box.height_em == 0

    def test_trailing_marker_adds_no_empty_line(self):
        box = layout_label(f"Widget{NEW_LINE}")
        assert box.lines() == ["Widget"]

    def test_consecutive_markers_keep_blank_line(self):
        box = layout_label(f"a{NEW_LINE}{NEW_LINE}b")
        assert box.lines() == ["a", "", "b"]

    def test_longest_line_sets_width(self):
        box = layout_label(f"Name{BOX_DIVIDE}+ attribute: int{NEW_LINE}- x{NEW_LINE}")
        assert box.lines() == ["Name", "+ attribute: int", "- x"]
        assert box.largest_line == 16


class TestLabelOffsets:
    def test_baselines_advance_by_line(self):
        box = layout_label(f"a{NEW_LINE}b{NEW_LINE}c")
        assert [s.baseline for s in box.segments] == pytest.approx([0.83, 1.93, 3.03])

    def test_divider_sits_below_baseline(self):
        box = layout_label(f"foo{NEW_LINE}bar{BOX_DIVIDE}baz")
        assert box.segments[1].divider_y() == pytest.approx(1.93 + 0.34)

    def test_text_length_per_character(self):
        box = layout_label("abcd")
        assert box.segments[0].text_length() == pytest.approx(4 * 0.67)
