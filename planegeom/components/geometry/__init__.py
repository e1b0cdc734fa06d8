"""
Geometry module for planar polygon operations.

This module provides the value types (points, bounding boxes, polygons), the
segment predicates they are built on, the polygon union trace and adapters
for raw coordinate data and Shapely geometries.
"""

from planegeom.components.geometry.point_2d import Point2D
from planegeom.components.geometry.geometry_ops import GeometryOps, Segment
from planegeom.components.geometry.bounding_box import BoundingBox
from planegeom.components.geometry.polygon_parser import (
    IPolygonDataParser,
    DictPolygonParser,
    ListPolygonParser,
    ArrayPolygonParser,
    PolygonParserFactory
)
from planegeom.components.geometry.polygon import Polygon
from planegeom.components.geometry.polygon_union import PolygonUnion, TraceState
from planegeom.components.geometry.geometry_adapter import GeometryAdapter

__all__ = [
    'Point2D',
    'GeometryOps',
    'Segment',
    'BoundingBox',
    'IPolygonDataParser',
    'DictPolygonParser',
    'ListPolygonParser',
    'ArrayPolygonParser',
    'PolygonParserFactory',
    'Polygon',
    'PolygonUnion',
    'TraceState',
    'GeometryAdapter',
]
