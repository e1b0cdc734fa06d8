from typing import Any, Iterable, List, Optional, Tuple, Union
import math
import numpy as np
from planegeom.components.geometry.point_2d import Point2D
from planegeom.components.geometry.bounding_box import BoundingBox
from planegeom.components.geometry.geometry_ops import GeometryOps, Segment
from planegeom.components.geometry.polygon_parser import PolygonParserFactory
from planegeom.core import InvalidPolygonError, SelfIntersectingPolygonError, get_constants

PointLike = Union[Point2D, Tuple[float, float]]


class Polygon:
    """
    Simple polygon described by its ordered boundary points

    The boundary is implicitly closed: the side from the last point back to
    the first is part of the polygon. Instances are immutable; every transform
    returns a new, independently validated polygon.

    Equality is positional. Starting at a different vertex or reversing the
    winding order gives an unequal polygon even if both describe the same
    shape.
    """

    def __init__(self, points: Iterable[PointLike]):
        """
        Initialize polygon

        Args:
            points: Boundary points as Point2D or (x, y) pairs

        Raises:
            InvalidPolygonError: If fewer than MIN_POLYGON_VERTICES points are given
        """
        points = tuple(p if isinstance(p, Point2D) else Point2D.from_tuple(p) for p in points)

        min_vertices = get_constants().MIN_POLYGON_VERTICES
        if len(points) < min_vertices:
            raise InvalidPolygonError(len(points), min_vertices)

        self._points = points
        self._bounds = BoundingBox.from_points(points)

    @classmethod
    def from_bounding_box(cls, bounds: BoundingBox) -> 'Polygon':
        return bounds.to_polygon()

    @classmethod
    def from_dict(cls, data: Any) -> 'Polygon':
        """
        Create polygon from raw coordinate data

        Args:
            data: List of dicts like [{"x": 0, "y": 0}, ...], list of
                  lists/tuples like [[0, 0], [3, 0], ...], or an (N, 2) array

        Returns:
            Polygon instance

        Raises:
            ParameterValidationError: If data format is invalid, fewer than
                MIN_POLYGON_VERTICES points are given or a coordinate is not finite
        """
        if isinstance(data, cls):
            return data

        return cls(PolygonParserFactory.parse(data))

    @property
    def points(self) -> Tuple[Point2D, ...]:
        """Get polygon boundary points"""
        return self._points

    @property
    def bounds(self) -> BoundingBox:
        return self._bounds

    def __len__(self) -> int:
        return len(self._points)

    def get_coords(self) -> List[Tuple[float, float]]:
        return [p.to_tuple() for p in self._points]

    def to_array(self) -> np.ndarray:
        """Boundary points as an (N, 2) float array"""
        return np.array(self.get_coords(), dtype=float)

    def side_at(self, i: int) -> Segment:
        """Return the two points describing side ``i``, wrapping back to the start"""
        return (self._points[i], self._points[(i + 1) % len(self._points)])

    def sides(self) -> List[Segment]:
        return [self.side_at(i) for i in range(len(self._points))]

    def is_self_intersecting(self) -> bool:
        """
        Check whether any two sides of this polygon cross

        Sides that share an end point touch by construction and are skipped.
        """
        sides = self.sides()
        for i, (p1, p2) in enumerate(sides):
            for p3, p4 in sides[i + 1:]:
                if p1 == p3 or p1 == p4 or p2 == p3 or p2 == p4:
                    continue
                if GeometryOps.segments_intersect(p1, p2, p3, p4):
                    return True

        return False

    def contains(self, p: Point2D, tolerance: Optional[float] = None) -> bool:
        """
        Angle-sum point-in-polygon test

        Sums the signed rotation seen from ``p`` while walking every side; a
        total of ±2π means the boundary winds around the point. Results are
        undefined for self-intersecting polygons and for points lying exactly
        on the boundary.

        Args:
            p: Point to test
            tolerance: Allowed deviation from 2π (default: WINDING_TOLERANCE)
        """
        # Fast path: outside the bounding box can never be inside the polygon
        if not self._bounds.contains(p):
            return False

        if tolerance is None:
            tolerance = get_constants().WINDING_TOLERANCE

        total = 0.0
        for p1, p2 in self.sides():
            total += GeometryOps.angular_step(p.angle_to(p1), p.angle_to(p2))

        return abs(abs(total) - 2 * math.pi) <= tolerance

    def area(self) -> float:
        """
        Signed area (positive for counter-clockwise winding)

        Sums the triangles spanned by the origin and every side; the parts
        outside the polygon cancel, so the position of the polygon does not
        matter.

        Raises:
            SelfIntersectingPolygonError: If any two sides cross
        """
        if self.is_self_intersecting():
            raise SelfIntersectingPolygonError("area", len(self._points))

        origin = Point2D.zero()
        return sum(GeometryOps.triangle_area(origin, p1, p2) for p1, p2 in self.sides())

    def center(self) -> Point2D:
        """Vertex average, a cheap stand-in for the area centroid"""
        return Point2D.from_tuple(self.to_array().mean(axis=0))

    def translate(self, by: Point2D) -> 'Polygon':
        return Polygon([p.translate(by) for p in self._points])

    def rotate_around_origin(self, angle: float) -> 'Polygon':
        """
        Rotate polygon around (0, 0)

        Args:
            angle: Rotation angle in radians (positive = counter-clockwise)

        Returns:
            New Polygon with rotated points
        """
        return Polygon([p.rotate(angle) for p in self._points])

    def rotate_around_center(self, angle: float) -> 'Polygon':
        """Rotate polygon in place around its vertex average, returning a new polygon"""
        center = self.center()
        return self.translate(center.invert()).rotate_around_origin(angle).translate(center)

    def intersects(self, other: 'Polygon') -> bool:
        """
        Check whether two polygons overlap

        Bounding boxes reject far apart shapes first, then every side pair is
        tested. When no sides cross, one polygon may still sit entirely inside
        the other, which is caught by testing a vertex of each.
        """
        if not self._bounds.intersects(other.bounds):
            return False

        for p1, p2 in self.sides():
            for p3, p4 in other.sides():
                if GeometryOps.segments_intersect(p1, p2, p3, p4):
                    return True

        return other.contains(self._points[0]) or self.contains(other.points[0])

    def union(self, other: 'Polygon') -> 'Polygon':
        """
        Outline of this polygon merged with an overlapping one

        See ``PolygonUnion.trace`` for the preconditions.
        """
        from planegeom.components.geometry.polygon_union import PolygonUnion  # Local import to avoid cycles

        return PolygonUnion.trace(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return len(self._points) == len(other.points) and all(
            a == b for a, b in zip(self._points, other.points)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Polygon([{', '.join(str(p) for p in self._points)}])"
