"""Tests for geometry/clip.py and geometry/arrows.py: coverage, clipping, arrowheads."""

from __future__ import annotations

import pytest

from layout_svg.geometry.arrows import arrow_ends, boundary_point, place_arrowhead
from layout_svg.geometry.clip import arrow_size, covered, full_path, visible_points
from layout_svg.geometry.types import Point, fmt
from layout_svg.ir.graph import EdgeGeometry, NodeGeometry
from layout_svg.types import ArrowType, StrokeStyle

# ─── Helpers ──────────────────────────────────────────────────────────────────


def make_node(node_id: str, x: float, y: float, width: float = 100, height: float = 40) -> NodeGeometry:
    return NodeGeometry(id=node_id, center=Point(x, y), width=width, height=height)


A = make_node("A", 0, 0)
B = make_node("B", 300, 0)


def on_border(p: Point, node: NodeGeometry) -> bool:
    on_vertical = p.x == pytest.approx(node.left()) or p.x == pytest.approx(node.right())
    on_horizontal = p.y == pytest.approx(node.top()) or p.y == pytest.approx(node.bottom())
    return covered(p, node, 1e-9) and (on_vertical or on_horizontal)


# ─── Point / formatting ───────────────────────────────────────────────────────


class TestPoint:
    def test_vector_arithmetic(self):
        p = Point(1, 2) + Point(3, 4)
        assert p == Point(4, 6)
        assert Point(4, 6) - Point(1, 1) == Point(3, 5)
        assert 2 * Point(1.5, -1) == Point(3, -2)
        assert Point(3, 4).norm() == 5

    def test_fmt(self):
        assert fmt(250.0) == "250"
        assert fmt(-0.0) == "0"
        assert fmt(93.3333333333) == "93.333333"
        assert fmt(2.27) == "2.27"


# ─── Coverage ─────────────────────────────────────────────────────────────────


class TestCovered:
    def test_border_is_covered(self):
        assert covered(Point(50, 0), A)
        assert covered(Point(-50, 20), A)

    def test_outside_is_not_covered(self):
        assert not covered(Point(51, 0), A)
        assert not covered(Point(0, -21), A)

    def test_margin_inflates_every_side(self):
        assert covered(Point(51, 0), A, 1)
        assert covered(Point(-55, 25), A, 5)
        assert not covered(Point(-55, 26), A, 5)

    @pytest.mark.parametrize("point", [Point(0, 0), Point(52, 3), Point(-60, 0), Point(49, 25), Point(80, 80)])
    def test_monotonic_in_margin(self, point: Point):
        margins = [0, 1, 2.5, 10, 40]
        results = [covered(point, A, m) for m in margins]
        first = results.index(True) if True in results else len(results)
        assert all(results[first:])


class TestArrowSize:
    def test_scales_with_node_sizes(self):
        edge = EdgeGeometry(id="e", source="A", target="B")
        assert arrow_size(edge, B, A) == pytest.approx(17.5)

    def test_minimum_is_three_stroke_widths(self):
        small = make_node("s", 0, 0, 10, 10)
        edge = EdgeGeometry(id="e", source="s", target="s", stroke=StrokeStyle(width=2))
        assert arrow_size(edge, small, small) == pytest.approx(6)

    def test_default_stroke_width_is_one(self):
        tiny = make_node("t", 0, 0, 4, 4)
        edge = EdgeGeometry(id="e", source="t", target="t")
        assert arrow_size(edge, tiny, tiny) == pytest.approx(3)


# ─── Visible points ───────────────────────────────────────────────────────────


class TestVisiblePoints:
    def test_straight_edge_keeps_both_centers(self):
        edge = EdgeGeometry(id="e", source="A", target="B")
        assert visible_points(full_path(edge, A, B), A, B) == [Point(0, 0), Point(300, 0)]

    def test_bend_point_kept(self):
        edge = EdgeGeometry(id="e", source="A", target="B", bends=(Point(150, 100),))
        points = visible_points(full_path(edge, A, B), A, B)
        assert points == [Point(0, 0), Point(150, 100), Point(300, 0)]

    def test_overlapping_nodes_leave_nothing(self):
        c = make_node("C", 30, 0)
        assert len(visible_points([A.center, c.center], A, c)) < 2

    def test_target_margin_stops_early(self):
        points = [Point(0, 0), Point(245, 0), Point(300, 0)]
        assert visible_points(points, A, B) == points
        assert visible_points(points, A, B, target_margin=10) == [Point(0, 0), Point(245, 0)]

    def test_bends_inside_source_are_skipped(self):
        points = [Point(0, 0), Point(40, 10), Point(150, 10), Point(300, 0)]
        assert visible_points(points, A, B) == [Point(40, 10), Point(150, 10), Point(300, 0)]


# ─── Boundary points and arrowheads ───────────────────────────────────────────


class TestBoundaryPoint:
    def test_horizontal_approach(self):
        assert boundary_point(Point(0, 0), Point(300, 0), B) == Point(250, 0)
        assert boundary_point(Point(300, 0), Point(0, 0), A) == Point(50, 0)

    def test_vertical_approach_from_above(self):
        d = make_node("D", 0, 200)
        assert boundary_point(Point(0, 0), Point(0, 200), d) == Point(0, 180)

    def test_vertical_approach_from_below(self):
        d = make_node("D", 0, 200)
        assert boundary_point(Point(0, 400), Point(0, 200), d) == Point(0, 220)

    def test_steep_approach_falls_back_to_horizontal_side(self):
        e = make_node("E", 100, 300)
        p = boundary_point(Point(0, 0), Point(100, 300), e)
        assert p.y == pytest.approx(280)
        assert p.x == pytest.approx(280 / 3)
        assert on_border(p, e)

    def test_diagonal_bend_lands_on_border(self):
        start = Point(150, 100)
        p = boundary_point(start, B.center, B)
        assert on_border(p, B)

    def test_end_outside_box_aims_at_center(self):
        # (260, 30) lies in B's arrow clearance but below its rectangle
        p = boundary_point(Point(200, 30), Point(260, 30), B)
        assert p.x == 250
        assert p.y == pytest.approx(15)
        assert on_border(p, B)

    def test_end_in_clearance_never_lands_past_source(self):
        p = boundary_point(Point(50, 5.769231), Point(260, 30), B)
        assert on_border(p, B)
        assert p.x >= B.left()


class TestPlaceArrowhead:
    def test_horizontal_arrowhead(self):
        end, head = place_arrowhead(Point(0, 0), Point(300, 0), B, 17.5)
        assert end == Point(250, 0)
        assert head.tip == Point(250, 0)
        assert head.left == Point(232.5, 4.375)
        assert head.right == Point(232.5, -4.375)

    def test_vertical_arrowhead_base_is_horizontal(self):
        d = make_node("D", 0, 200)
        end, head = place_arrowhead(Point(0, 0), Point(0, 200), d, 8)
        assert end == Point(0, 180)
        assert head.left.y == pytest.approx(172)
        assert head.right.y == pytest.approx(172)
        assert sorted([head.left.x, head.right.x]) == pytest.approx([-2, 2])

    def test_bend_in_clearance_keeps_tip_on_target(self):
        end, head = place_arrowhead(Point(200, 30), Point(260, 30), B, 17.5)
        assert on_border(end, B)
        assert head.tip == end

    def test_coords_are_flat_pairs(self):
        _, head = place_arrowhead(Point(0, 0), Point(300, 0), B, 17.5)
        assert head.coords() == [250, 0, 232.5, 4.375, 232.5, -4.375]


class TestArrowEnds:
    @pytest.mark.parametrize(
        "arrow,directed,expected",
        [
            (ArrowType.Undefined, False, (False, False)),
            (ArrowType.Undefined, True, (False, True)),
            (ArrowType.Last, False, (False, True)),
            (ArrowType.First, False, (True, False)),
            (ArrowType.Both, False, (True, True)),
            (ArrowType.Neither, True, (False, False)),
        ],
    )
    def test_arrow_ends(self, arrow: ArrowType, directed: bool, expected: tuple[bool, bool]):
        assert arrow_ends(arrow, directed) == expected
