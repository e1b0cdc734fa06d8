"""
Custom exceptions for the planar geometry package.

This module defines custom exception classes for the error conditions that
can occur while building polygons and running polygon operations.
"""

from typing import Optional


class PlanarGeometryException(Exception):
    """Base exception class for all planar geometry errors"""
    pass


class GeometryValidationError(PlanarGeometryException):
    """Base exception for geometry validation errors"""
    pass


class InvalidPolygonError(GeometryValidationError, ValueError):
    """
    Exception raised when a polygon is built from too few points.

    A polygon needs at least ``min_vertices`` boundary points to enclose an
    area; anything shorter is rejected at construction time.
    """

    def __init__(self, point_count: int, min_vertices: int = 3):
        """
        Initialize InvalidPolygonError.

        Args:
            point_count: Number of points that were supplied
            min_vertices: Minimum number of points required
        """
        self.point_count = point_count
        self.min_vertices = min_vertices

        message = (
            f"Trying to create a polygon with {point_count} points. "
            f"You need at least {min_vertices}"
        )
        super().__init__(message)


class SelfIntersectingPolygonError(GeometryValidationError):
    """
    Exception raised when an operation requires a simple polygon.

    Area and union are only defined for polygons whose sides do not cross.
    """

    def __init__(self, operation: str, side_count: Optional[int] = None):
        """
        Initialize SelfIntersectingPolygonError.

        Args:
            operation: Name of the operation that was refused
            side_count: Number of sides of the offending polygon (optional)
        """
        self.operation = operation
        self.side_count = side_count

        message = f"Can not calculate the {operation} of a self intersecting polygon"
        if side_count is not None:
            message += f" ({side_count} sides)"

        super().__init__(message)


class UnionTraceError(PlanarGeometryException):
    """Exception raised when the union boundary trace does not terminate"""

    def __init__(self, steps: int, emitted: int):
        """
        Initialize UnionTraceError.

        Args:
            steps: Number of trace steps taken before giving up
            emitted: Number of boundary points emitted so far
        """
        self.steps = steps
        self.emitted = emitted

        message = (
            f"Union trace did not close after {steps} steps "
            f"({emitted} points emitted). Inputs must overlap in a single region."
        )
        super().__init__(message)


class ParameterValidationError(PlanarGeometryException):
    """Exception raised when raw input data is missing or invalid"""

    def __init__(self, parameter_name: str, details: Optional[str] = None):
        """
        Initialize ParameterValidationError.

        Args:
            parameter_name: Name of the invalid/missing parameter
            details: Additional details about the validation error
        """
        self.parameter_name = parameter_name
        self.details = details

        message = f"Parameter validation failed for '{parameter_name}'"
        if details:
            message += f": {details}"

        super().__init__(message)


class UnionOutlineError(PlanarGeometryException):
    """
    Exception raised when the traced union outline crosses itself.

    This happens when a side of one input crosses the boundary of the other
    more than once, which the single-crossing trace can not follow.
    """

    def __init__(self, point_count: int):
        """
        Initialize UnionOutlineError.

        Args:
            point_count: Number of points in the rejected outline
        """
        self.point_count = point_count

        message = (
            f"Union trace produced a self intersecting outline of {point_count} points. "
            f"No side may cross the boundary of the other polygon twice."
        )
        super().__init__(message)
