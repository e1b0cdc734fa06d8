"""Planar geometry primitives: points, bounding boxes and simple polygons"""
from planegeom.core import (
    Orientation,
    PlanarGeometryException,
    InvalidPolygonError,
    SelfIntersectingPolygonError,
    UnionTraceError,
    UnionOutlineError,
    GEOMETRY_CONSTANTS,
    override_constants,
)
from planegeom.components.geometry import Point2D, BoundingBox, Polygon, GeometryOps, PolygonUnion

__version__ = "0.1.0"

__all__ = [
    'Orientation',
    'PlanarGeometryException',
    'InvalidPolygonError',
    'SelfIntersectingPolygonError',
    'UnionTraceError',
    'UnionOutlineError',
    'GEOMETRY_CONSTANTS',
    'override_constants',
    'Point2D',
    'BoundingBox',
    'Polygon',
    'GeometryOps',
    'PolygonUnion',
]
