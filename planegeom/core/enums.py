from enum import Enum


class Orientation(Enum):
    """Rotational sense of three ordered points"""
    COLLINEAR = "collinear"
    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"


class TraversalRole(Enum):
    """Role a polygon plays while its boundary is being traced"""
    ACTIVE = 0
    PASSIVE = 1


class CoordinateKey(str, Enum):
    """Keys used by dictionary-based point formats"""
    X = "x"
    Y = "y"


class GeometryType(str, Enum):
    """Shapely geometry type enumeration (Enumerator Pattern)"""
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"
    POINT = "Point"
    LINE_STRING = "LineString"
