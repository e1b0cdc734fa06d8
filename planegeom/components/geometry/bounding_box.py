from typing import Iterable, List
from dataclasses import dataclass
import math
from planegeom.components.geometry.point_2d import Point2D


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned rectangle used for fast rejection

    Normally derived from a point set with ``from_points``; ``min_point`` holds
    the smallest x and y, ``max_point`` the largest.
    """
    min_point: Point2D
    max_point: Point2D

    @classmethod
    def from_points(cls, points: Iterable[Point2D]) -> 'BoundingBox':
        """
        Tightest box around a point set

        Args:
            points: Points to enclose

        Returns:
            BoundingBox spanning the component-wise min and max
        """
        lower = Point2D(math.inf, math.inf)
        upper = Point2D(-math.inf, -math.inf)

        for p in points:
            lower = p.min(lower)
            upper = p.max(upper)

        return cls(lower, upper)

    @property
    def width(self) -> float:
        return self.max_point.x - self.min_point.x

    @property
    def height(self) -> float:
        return self.max_point.y - self.min_point.y

    def corners(self) -> List[Point2D]:
        """Corners in the winding order used by ``to_polygon``"""
        return [
            Point2D(self.min_point.x, self.min_point.y),
            Point2D(self.min_point.x, self.max_point.y),
            Point2D(self.max_point.x, self.max_point.y),
            Point2D(self.max_point.x, self.min_point.y),
        ]

    def contains(self, p: Point2D) -> bool:
        """Inclusive range test on both axes"""
        return (self.min_point.x <= p.x <= self.max_point.x
                and self.min_point.y <= p.y <= self.max_point.y)

    def intersects(self, other: 'BoundingBox') -> bool:
        """
        Check whether two boxes overlap or touch

        Besides corner containment in either direction, this covers the cross
        configuration where one box is wider and the other taller, so no
        corner of either lies inside the other.
        """
        if any(other.contains(corner) for corner in self.corners()):
            return True
        if any(self.contains(corner) for corner in other.corners()):
            return True

        if (other.min_point.x >= self.min_point.x and other.max_point.x <= self.max_point.x
                and self.min_point.y >= other.min_point.y and self.max_point.y <= other.max_point.y):
            return True
        if (other.min_point.y >= self.min_point.y and other.max_point.y <= self.max_point.y
                and self.min_point.x >= other.min_point.x and self.max_point.x <= other.max_point.x):
            return True

        return False

    def to_polygon(self):
        """Return the four corners as a rectangular Polygon"""
        from planegeom.components.geometry.polygon import Polygon  # Local import to avoid cycles

        return Polygon(self.corners())

    def __str__(self) -> str:
        return f"BoundingBox({self.min_point}, {self.max_point})"
