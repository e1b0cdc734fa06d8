from typing import Iterator, Optional, Tuple
from dataclasses import dataclass
import math
from planegeom.core import get_constants


@dataclass(frozen=True, eq=False)
class Point2D:
    """
    Represents an immutable 2D point

    Equality is tolerant: two points are equal when both coordinates differ by
    no more than the active POINT_TOLERANCE. Bit-exact equality does not
    survive rotation, translation or intersection arithmetic, so callers must
    not rely on it.
    """
    x: float
    y: float

    # Tolerant equality cannot be hashed consistently
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self):
        # Ints and numpy scalars are stored as plain floats
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def zero(cls) -> 'Point2D':
        return cls(0.0, 0.0)

    @classmethod
    def from_tuple(cls, coords) -> 'Point2D':
        """Build a point from any (x, y) pair, including numpy rows"""
        return cls(coords[0], coords[1])

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def min(self, other: 'Point2D') -> 'Point2D':
        """Component-wise minimum"""
        return Point2D(min(self.x, other.x), min(self.y, other.y))

    def max(self, other: 'Point2D') -> 'Point2D':
        """Component-wise maximum"""
        return Point2D(max(self.x, other.x), max(self.y, other.y))

    def invert(self) -> 'Point2D':
        return Point2D(-self.x, -self.y)

    def translate(self, by: 'Point2D') -> 'Point2D':
        """Offset this point by another one"""
        return Point2D(self.x + by.x, self.y + by.y)

    def rotate(self, angle: float) -> 'Point2D':
        """
        Rotate around the origin

        Args:
            angle: Rotation in radians (positive = counter-clockwise)

        Returns:
            New rotated point
        """
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Point2D(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)

    def angle_to(self, other: 'Point2D') -> float:
        """
        Direction from this point to another one

        Returns:
            Angle in radians in [0, 2*pi), measured counter-clockwise from +x
        """
        translated = other.translate(self.invert())
        return math.atan2(translated.y, translated.x) % (2 * math.pi)

    def almost_equals(self, other: 'Point2D', tolerance: Optional[float] = None) -> bool:
        if tolerance is None:
            tolerance = get_constants().POINT_TOLERANCE
        return abs(self.x - other.x) <= tolerance and abs(self.y - other.y) <= tolerance

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return self.almost_equals(other)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
