"""
Unit tests for GeometryOps - orientation and segment predicates.
"""

import math
import pytest
from planegeom.components.geometry import GeometryOps, Point2D
from planegeom.core import Orientation


class TestOrientation:
    """Test three point orientation classification."""

    def test_counter_clockwise_turn(self):
        assert GeometryOps.orientation(Point2D(0, 0), Point2D(1, 0), Point2D(1, 1)) == Orientation.COUNTER_CLOCKWISE

    def test_clockwise_turn(self):
        assert GeometryOps.orientation(Point2D(0, 0), Point2D(0, 1), Point2D(1, 1)) == Orientation.CLOCKWISE

    def test_collinear(self):
        assert GeometryOps.orientation(Point2D(0, 0), Point2D(1, 1), Point2D(3, 3)) == Orientation.COLLINEAR

    def test_zero_is_tested_exactly(self):
        """A cross product of 1e-300 is still a turn, no tolerance is applied."""
        result = GeometryOps.orientation(Point2D(0, 0), Point2D(1, 0), Point2D(2, 1e-300))
        assert result == Orientation.COUNTER_CLOCKWISE


class TestOnSegment:
    """Test the bounding rectangle check used for collinear cases."""

    def test_point_inside_rectangle(self):
        assert GeometryOps.on_segment(Point2D(0, 0), Point2D(1, 1), Point2D(2, 2))

    def test_end_point_counts(self):
        assert GeometryOps.on_segment(Point2D(0, 0), Point2D(2, 2), Point2D(2, 2))

    def test_point_outside_rectangle(self):
        assert not GeometryOps.on_segment(Point2D(0, 0), Point2D(3, 1), Point2D(2, 2))


class TestSegmentsIntersect:
    """Test bounded segment intersection."""

    def test_does_not_intersect(self):
        assert not GeometryOps.segments_intersect(Point2D(0, 0), Point2D(1, 1), Point2D(1, 0), Point2D(2, 1))

    def test_does_intersect(self):
        assert GeometryOps.segments_intersect(Point2D(0, 0), Point2D(1, 1), Point2D(1, 0), Point2D(0, 1))

    def test_lines_crossing_only_when_extended(self):
        assert not GeometryOps.segments_intersect(Point2D(1, 0), Point2D(1, 2), Point2D(0, 3), Point2D(2, 3))

    def test_touching_at_end_point(self):
        assert GeometryOps.segments_intersect(Point2D(0, 0), Point2D(1, 1), Point2D(1, 1), Point2D(2, 0))

    def test_collinear_overlap(self):
        assert GeometryOps.segments_intersect(Point2D(0, 0), Point2D(2, 0), Point2D(1, 0), Point2D(3, 0))

    def test_collinear_disjoint(self):
        assert not GeometryOps.segments_intersect(Point2D(0, 0), Point2D(1, 0), Point2D(2, 0), Point2D(3, 0))

    def test_parallel_offset(self):
        assert not GeometryOps.segments_intersect(Point2D(0, 0), Point2D(2, 0), Point2D(0, 1), Point2D(2, 1))


class TestIntersectionPoint:
    """Test intersection point computation."""

    def test_perpendicular_bisecting_segments(self):
        result = GeometryOps.intersection_point(Point2D(1, 0), Point2D(1, 2), Point2D(0, 1), Point2D(2, 1))

        assert result is not None
        assert result.x == 1.0
        assert result.y == 1.0

    def test_crossing_outside_segments(self):
        result = GeometryOps.intersection_point(Point2D(1, 0), Point2D(1, 2), Point2D(0, 3), Point2D(2, 3))
        assert result is None

    def test_diagonal_crossing(self):
        result = GeometryOps.intersection_point(Point2D(0, 0), Point2D(2, 2), Point2D(0, 2), Point2D(2, 0))
        assert result == Point2D(1, 1)

    def test_crossing_at_shared_end_point(self):
        result = GeometryOps.intersection_point(Point2D(0, 0), Point2D(1, 1), Point2D(1, 1), Point2D(2, 0))
        assert result == Point2D(1, 1)

    def test_parallel_segments_without_overlap(self):
        result = GeometryOps.intersection_point(Point2D(0, 0), Point2D(2, 0), Point2D(0, 1), Point2D(2, 1))
        assert result is None

    def test_collinear_overlap_returns_an_end_point(self):
        """
        Parallel fallback only reports one end of the overlap.

        Segment cd starts inside ab, so c is returned even though the whole
        range [1, 2] is shared.
        """
        result = GeometryOps.intersection_point(Point2D(0, 0), Point2D(2, 0), Point2D(1, 0), Point2D(3, 0))
        assert result == Point2D(1, 0)

    def test_collinear_overlap_prefers_other_segment_end_points(self):
        """d lies on ab and is tried before the end points of ab."""
        result = GeometryOps.intersection_point(Point2D(1, 0), Point2D(5, 0), Point2D(0, 0), Point2D(2, 0))
        assert result == Point2D(2, 0)

    def test_collinear_overlap_checks_own_end_points(self):
        """Neither c nor d lies on ab, but a lies on cd."""
        result = GeometryOps.intersection_point(Point2D(1, 0), Point2D(2, 0), Point2D(0, 0), Point2D(5, 0))
        assert result == Point2D(1, 0)

    def test_collinear_vertical_overlap(self):
        result = GeometryOps.intersection_point(Point2D(0, 0), Point2D(0, 2), Point2D(0, 1), Point2D(0, 4))
        assert result == Point2D(0, 1)

    def test_collinear_disjoint_segments(self):
        result = GeometryOps.intersection_point(Point2D(0, 0), Point2D(1, 0), Point2D(2, 0), Point2D(3, 0))
        assert result is None


class TestFirstIntersectingSide:
    """Test linear side scan."""

    @pytest.fixture
    def square_sides(self):
        points = [Point2D(0, 0), Point2D(0, 1), Point2D(1, 1), Point2D(1, 0)]
        return [(points[i], points[(i + 1) % 4]) for i in range(4)]

    def test_returns_first_match(self, square_sides):
        side = (Point2D(0.5, 0.5), Point2D(0.5, 1.5))
        assert GeometryOps.first_intersecting_side(side, square_sides) == 1

    def test_returns_none_without_match(self, square_sides):
        side = (Point2D(5, 5), Point2D(6, 6))
        assert GeometryOps.first_intersecting_side(side, square_sides) is None

    def test_scan_wraps_from_start(self, square_sides):
        # Horizontal line through the square crosses sides 0 and 2
        side = (Point2D(-1, 0.5), Point2D(2, 0.5))
        assert GeometryOps.first_intersecting_side(side, square_sides) == 0
        assert GeometryOps.first_intersecting_side(side, square_sides, start=1) == 2
        assert GeometryOps.first_intersecting_side(side, square_sides, start=3) == 0


class TestAngles:
    """Test angle helpers."""

    def test_normalize_angle(self):
        assert GeometryOps.normalize_angle(-math.pi / 2) == pytest.approx(3 * math.pi / 2)
        assert GeometryOps.normalize_angle(5 * math.pi) == pytest.approx(math.pi)

    def test_angular_step_plain(self):
        assert GeometryOps.angular_step(0.5, 1.0) == pytest.approx(0.5)

    def test_angular_step_across_zero_going_clockwise(self):
        step = GeometryOps.angular_step(0.1, 2 * math.pi - 0.1)
        assert step == pytest.approx(-0.2)

    def test_angular_step_across_zero_going_counter_clockwise(self):
        step = GeometryOps.angular_step(2 * math.pi - 0.1, 0.1)
        assert step == pytest.approx(0.2)

    def test_triangle_area_sign(self):
        assert GeometryOps.triangle_area(Point2D(0, 0), Point2D(1, 0), Point2D(0, 1)) == pytest.approx(0.5)
        assert GeometryOps.triangle_area(Point2D(0, 0), Point2D(0, 1), Point2D(1, 0)) == pytest.approx(-0.5)
