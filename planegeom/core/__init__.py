from planegeom.core.enums import Orientation, TraversalRole, CoordinateKey, GeometryType
from planegeom.core.exceptions import (
    PlanarGeometryException,
    GeometryValidationError,
    InvalidPolygonError,
    SelfIntersectingPolygonError,
    UnionTraceError,
    UnionOutlineError,
    ParameterValidationError,
)
from planegeom.core.geometry_constants import (
    GeometryConstants,
    GEOMETRY_CONSTANTS,
    get_constants,
    configure_constants,
    override_constants,
)

__all__ = [
    'Orientation',
    'TraversalRole',
    'CoordinateKey',
    'GeometryType',
    'PlanarGeometryException',
    'GeometryValidationError',
    'InvalidPolygonError',
    'SelfIntersectingPolygonError',
    'UnionTraceError',
    'UnionOutlineError',
    'ParameterValidationError',
    'GeometryConstants',
    'GEOMETRY_CONSTANTS',
    'get_constants',
    'configure_constants',
    'override_constants',
]
