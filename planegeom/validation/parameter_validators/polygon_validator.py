"""Validator for raw polygon coordinate data (SRP: validates only polygon structures)"""
import math
from typing import Any
from planegeom.validation.base import BaseValidator, ValidationResult, ValidationError
from planegeom.validation.enums import ValidationErrorType
from planegeom.core import GEOMETRY_CONSTANTS


class PolygonValidator(BaseValidator):
    """
    Validates polygon structures (list of [x, y] coordinate pairs)

    Collects every problem instead of stopping at the first one, so callers
    can report all bad vertices at once. With ``require_simple`` the
    coordinates are also built into a Polygon and checked for crossing sides.
    """

    def __init__(
        self,
        parameter_name: str = "polygon",
        min_vertices: int = GEOMETRY_CONSTANTS.MIN_POLYGON_VERTICES,
        require_simple: bool = False
    ):
        """
        Initialize polygon validator.

        Args:
            parameter_name: Name of the parameter being validated
            min_vertices: Minimum number of vertices required (default: 3)
            require_simple: Reject self intersecting outlines
        """
        self._parameter_name = parameter_name
        self._min_vertices = min_vertices
        self._require_simple = require_simple

    def validate(self, value: Any) -> ValidationResult:
        """
        Validate polygon structure.

        Args:
            value: Value to validate (should be List[List[float]])

        Returns:
            ValidationResult with validation status
        """
        result = ValidationResult()

        if not isinstance(value, (list, tuple)):
            result.add_error(ValidationError(
                error_type=ValidationErrorType.INVALID_TYPE,
                message=f"{self._parameter_name} must be a list, got {type(value).__name__}",
                parameter_name=self._parameter_name
            ))
            return result

        if len(value) < self._min_vertices:
            result.add_error(ValidationError(
                error_type=ValidationErrorType.INVALID_LENGTH,
                message=f"{self._parameter_name} must have at least {self._min_vertices} vertices, got {len(value)}",
                parameter_name=self._parameter_name
            ))
            return result

        for i, vertex in enumerate(value):
            self._validate_vertex(i, vertex, result)

        if result.is_valid and self._require_simple and self._is_self_intersecting(value):
            result.add_error(ValidationError(
                error_type=ValidationErrorType.INVALID_POLYGON,
                message=f"{self._parameter_name} sides must not cross each other",
                parameter_name=self._parameter_name
            ))

        return result

    @staticmethod
    def _is_self_intersecting(value: Any) -> bool:
        from planegeom.components.geometry.polygon import Polygon  # Local import to avoid cycles

        return Polygon(value).is_self_intersecting()

    def _validate_vertex(self, i: int, vertex: Any, result: ValidationResult) -> None:
        if not isinstance(vertex, (list, tuple)):
            result.add_error(ValidationError(
                error_type=ValidationErrorType.INVALID_FORMAT,
                message=f"{self._parameter_name}[{i}] must be a list or tuple, got {type(vertex).__name__}",
                parameter_name=self._parameter_name
            ))
            return

        if len(vertex) != 2:
            result.add_error(ValidationError(
                error_type=ValidationErrorType.INVALID_FORMAT,
                message=f"{self._parameter_name}[{i}] must have exactly 2 coordinates [x, y], got {len(vertex)}",
                parameter_name=self._parameter_name
            ))
            return

        for j, coord in enumerate(vertex):
            if isinstance(coord, bool) or not isinstance(coord, (int, float)):
                result.add_error(ValidationError(
                    error_type=ValidationErrorType.INVALID_TYPE,
                    message=f"{self._parameter_name}[{i}][{j}] must be a number, got {type(coord).__name__}",
                    parameter_name=self._parameter_name
                ))
            elif not math.isfinite(coord):
                result.add_error(ValidationError(
                    error_type=ValidationErrorType.INVALID_VALUE,
                    message=f"{self._parameter_name}[{i}][{j}] must be finite, got {coord}",
                    parameter_name=self._parameter_name
                ))
