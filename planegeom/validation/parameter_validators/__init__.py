from planegeom.validation.parameter_validators.polygon_validator import PolygonValidator

__all__ = ["PolygonValidator"]
