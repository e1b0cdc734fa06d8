from typing import List, Tuple, Any, Dict, Callable
import logging
import numpy as np
from shapely.geometry import Polygon as ShapelyPolygon
from planegeom.components.geometry.polygon import Polygon
from planegeom.core import GeometryType, ParameterValidationError

logger = logging.getLogger(__name__)


class GeometryAdapter:
    """
    Adapter between planegeom polygons and Shapely / numpy representations (Adapter Pattern)

    Shapely results of set operations may come back as multi-part geometries;
    those are reduced to their largest polygon since a planegeom Polygon has a
    single outline.
    """

    @staticmethod
    def _extract_polygon_coords(geometry: Any) -> List[Tuple[float, float]]:
        """Extract coordinates from a Polygon geometry"""
        return list(geometry.exterior.coords)[:-1]  # Remove duplicate last point

    @staticmethod
    def _extract_multi_polygon_coords(geometry: Any) -> List[Tuple[float, float]]:
        """Extract coordinates from MultiPolygon by taking the largest polygon"""
        largest = max(geometry.geoms, key=lambda p: p.area)
        return list(largest.exterior.coords)[:-1]

    @staticmethod
    def _extract_geometry_collection_coords(geometry: Any) -> List[Tuple[float, float]]:
        """Extract coordinates from GeometryCollection by finding polygons"""
        polygons = [g for g in geometry.geoms if g.geom_type == GeometryType.POLYGON.value]
        if not polygons:
            return []
        largest = max(polygons, key=lambda p: p.area)
        return list(largest.exterior.coords)[:-1]

    # Strategy map: GeometryType -> extraction function (Strategy Pattern)
    GEOMETRY_HANDLERS: Dict[GeometryType, Callable] = {
        GeometryType.POLYGON: _extract_polygon_coords.__func__, # type: ignore
        GeometryType.MULTI_POLYGON: _extract_multi_polygon_coords.__func__, # type: ignore
        GeometryType.GEOMETRY_COLLECTION: _extract_geometry_collection_coords.__func__, # type: ignore
    }

    @classmethod
    def to_shapely(cls, polygon: Polygon) -> ShapelyPolygon:
        return ShapelyPolygon(polygon.get_coords())

    @classmethod
    def from_shapely(cls, geometry: Any) -> Polygon:
        """
        Convert a Shapely geometry into a Polygon

        Args:
            geometry: Shapely Polygon, MultiPolygon or GeometryCollection

        Returns:
            Polygon built from the (largest) exterior ring

        Raises:
            ParameterValidationError: If the geometry holds no polygon
        """
        if geometry.is_empty:
            raise ParameterValidationError("geometry", "geometry is empty")

        geom_type_str = geometry.geom_type
        for geom_type, handler in cls.GEOMETRY_HANDLERS.items():
            if geom_type_str == geom_type.value:
                if geom_type is not GeometryType.POLYGON:
                    logger.info(f"[GEOMETRY ADAPTER]: Reducing {geom_type_str} to its largest polygon")
                coords = handler(geometry)
                if coords:
                    return Polygon(coords)
                break

        raise ParameterValidationError(
            "geometry",
            f"no polygon found in geometry of type {geom_type_str}"
        )

    @classmethod
    def to_array(cls, polygon: Polygon) -> np.ndarray:
        return polygon.to_array()

    @classmethod
    def from_array(cls, coords: np.ndarray) -> Polygon:
        """Build a Polygon from an (N, 2) coordinate array"""
        return Polygon.from_dict(np.asarray(coords, dtype=float))
