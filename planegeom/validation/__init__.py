"""Validation module for raw polygon input"""
from planegeom.validation.base import BaseValidator, ValidationResult, ValidationError
from planegeom.validation.enums import ValidationErrorType
from planegeom.validation.parameter_validators import PolygonValidator

__all__ = [
    "BaseValidator",
    "ValidationResult",
    "ValidationError",
    "ValidationErrorType",
    "PolygonValidator",
]
