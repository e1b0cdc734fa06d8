import math
from typing import Optional, Sequence, Tuple
from planegeom.components.geometry.point_2d import Point2D
from planegeom.core import Orientation, get_constants

Segment = Tuple[Point2D, Point2D]


class GeometryOps:
    """
    Orientation and segment predicates shared by the polygon components

    All predicates compare against zero exactly; only the parameter range
    check of ``intersection_point`` is widened by POINT_TOLERANCE.
    """

    @classmethod
    def orientation(cls, a: Point2D, b: Point2D, c: Point2D) -> Orientation:
        """Sign of the cross product of (b - a) and (c - b)"""
        v = (b.x - a.x) * (c.y - b.y) - (b.y - a.y) * (c.x - b.x)

        if v == 0.0:
            return Orientation.COLLINEAR
        if v > 0.0:
            return Orientation.COUNTER_CLOCKWISE
        return Orientation.CLOCKWISE

    @classmethod
    def on_segment(cls, a: Point2D, b: Point2D, c: Point2D) -> bool:
        """True if b lies in the axis-aligned rectangle spanned by a and c"""
        return (min(a.x, c.x) <= b.x <= max(a.x, c.x)
                and min(a.y, c.y) <= b.y <= max(a.y, c.y))

    @classmethod
    def segments_intersect(cls, a: Point2D, b: Point2D, c: Point2D, d: Point2D) -> bool:
        """
        Check whether segment ab touches or crosses segment cd

        Lines that would only cross when extended past their end points are
        reported as non-intersecting.
        """
        o1 = cls.orientation(a, b, c)
        o2 = cls.orientation(a, b, d)
        o3 = cls.orientation(c, d, a)
        o4 = cls.orientation(c, d, b)

        if o1 != o2 and o3 != o4:
            return True

        # Collinear special cases
        if o1 == Orientation.COLLINEAR and cls.on_segment(a, c, b):
            return True
        if o2 == Orientation.COLLINEAR and cls.on_segment(a, d, b):
            return True
        if o3 == Orientation.COLLINEAR and cls.on_segment(c, a, d):
            return True
        if o4 == Orientation.COLLINEAR and cls.on_segment(c, b, d):
            return True

        return False

    @classmethod
    def intersection_point(cls, a: Point2D, b: Point2D, c: Point2D, d: Point2D) -> Optional[Point2D]:
        """
        Compute where segment ab meets segment cd

        Solves the general forms A*x + B*y = C of both lines with Cramer's rule.
        When the determinant is exactly zero the lines are parallel and the
        result falls back to ``_parallel_overlap_point``, which only ever
        returns an end point of one of the segments.

        Returns:
            The intersection point, or None when the segments do not meet
        """
        a1 = b.y - a.y
        b1 = a.x - b.x
        c1 = a1 * a.x + b1 * a.y

        a2 = d.y - c.y
        b2 = c.x - d.x
        c2 = a2 * c.x + b2 * c.y

        det = a1 * b2 - a2 * b1
        if det == 0.0:
            return cls._parallel_overlap_point(a, b, c, d)

        x = (b2 * c1 - b1 * c2) / det
        y = (a1 * c2 - a2 * c1) / det
        point = Point2D(x, y)

        tolerance = get_constants().POINT_TOLERANCE
        for start, end in ((a, b), (c, d)):
            t = cls._ratio_along(start, end, point)
            if t is None or t < -tolerance or t > 1.0 + tolerance:
                return None

        return point

    @classmethod
    def _parallel_overlap_point(cls, a: Point2D, b: Point2D, c: Point2D, d: Point2D) -> Optional[Point2D]:
        """
        Estimate an intersection for parallel segments

        Returns the first end point (c, d against ab, then a, b against cd) whose
        coordinate ratio along the other segment lies in [0, 1] on both axes.
        For collinear overlapping segments this is one end of the overlap, not
        the overlap itself.
        """
        tolerance = get_constants().POINT_TOLERANCE
        candidates = ((c, a, b), (d, a, b), (a, c, d), (b, c, d))
        for point, start, end in candidates:
            t = cls._ratio_along(start, end, point)
            if t is None or t < -tolerance or t > 1.0 + tolerance:
                continue
            expected = Point2D(start.x + t * (end.x - start.x), start.y + t * (end.y - start.y))
            if expected == point:
                return point
        return None

    @classmethod
    def _ratio_along(cls, start: Point2D, end: Point2D, point: Point2D) -> Optional[float]:
        # Use the dominant axis span so near-vertical and near-horizontal
        # segments do not divide by a tiny number
        dx = end.x - start.x
        dy = end.y - start.y
        if dx == 0.0 and dy == 0.0:
            return 0.0 if point == start else None
        if abs(dx) >= abs(dy):
            return (point.x - start.x) / dx
        return (point.y - start.y) / dy

    @classmethod
    def first_intersecting_side(
        cls,
        side: Segment,
        candidate_sides: Sequence[Segment],
        start: int = 0
    ) -> Optional[int]:
        """
        Find the first candidate side that intersects ``side``

        Args:
            side: Segment to test
            candidate_sides: Ordered segments to scan
            start: Index to start scanning from; the scan wraps around

        Returns:
            Index into ``candidate_sides``, or None if nothing intersects
        """
        count = len(candidate_sides)
        for offset in range(count):
            index = (start + offset) % count
            c, d = candidate_sides[index]
            if cls.segments_intersect(side[0], side[1], c, d):
                return index
        return None

    @classmethod
    def normalize_angle(cls, angle: float) -> float:
        # Normalize to [0, 2π)
        while angle < 0:
            angle += 2 * math.pi
        while angle >= 2 * math.pi:
            angle -= 2 * math.pi
        return angle

    @classmethod
    def angular_step(cls, from_angle: float, to_angle: float) -> float:
        """
        Signed rotation from one direction to another

        The raw difference is corrected across the 0/2π boundary so the step
        always takes the short way round, giving a value in [-π, π].
        """
        step = to_angle - from_angle
        if step > math.pi:
            step = -((2 * math.pi - to_angle) + from_angle)
        elif step < -math.pi:
            step = (2 * math.pi - from_angle) + to_angle
        return step

    @classmethod
    def triangle_area(cls, a: Point2D, b: Point2D, c: Point2D) -> float:
        """Signed area of triangle abc (positive when counter-clockwise)"""
        return ((b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y)) / 2.0
