"""
Unit tests for GeometryAdapter - Shapely and numpy interop.
"""

import numpy as np
import pytest
from shapely.geometry import MultiPolygon, GeometryCollection, LineString, Polygon as ShapelyPolygon
from planegeom.components.geometry import GeometryAdapter, Polygon
from planegeom.core import ParameterValidationError

UNIT_SQUARE = [(0, 0), (0, 1), (1, 1), (1, 0)]


class TestGeometryAdapter:
    """Test conversions in both directions."""

    def test_to_shapely(self):
        shapely_polygon = GeometryAdapter.to_shapely(Polygon(UNIT_SQUARE))
        assert shapely_polygon.area == pytest.approx(1.0)
        assert list(shapely_polygon.exterior.coords)[:-1] == [(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)]

    def test_from_shapely_round_trip(self):
        polygon = Polygon(UNIT_SQUARE)
        assert GeometryAdapter.from_shapely(GeometryAdapter.to_shapely(polygon)) == polygon

    def test_from_multi_polygon_takes_largest(self):
        small = ShapelyPolygon([(5, 5), (5, 6), (6, 6)])
        large = ShapelyPolygon([(0, 0), (0, 3), (3, 3), (3, 0)])

        result = GeometryAdapter.from_shapely(MultiPolygon([small, large]))

        assert result == Polygon([(0, 0), (0, 3), (3, 3), (3, 0)])

    def test_from_geometry_collection(self):
        collection = GeometryCollection([LineString([(0, 0), (1, 1)]), ShapelyPolygon(UNIT_SQUARE)])
        assert GeometryAdapter.from_shapely(collection) == Polygon(UNIT_SQUARE)

    def test_collection_without_polygon(self):
        with pytest.raises(ParameterValidationError):
            GeometryAdapter.from_shapely(GeometryCollection([LineString([(0, 0), (1, 1)])]))

    def test_empty_geometry(self):
        with pytest.raises(ParameterValidationError):
            GeometryAdapter.from_shapely(ShapelyPolygon())

    def test_array_round_trip(self):
        array = GeometryAdapter.to_array(Polygon(UNIT_SQUARE))
        assert array.shape == (4, 2)
        assert GeometryAdapter.from_array(array) == Polygon(UNIT_SQUARE)

    def test_from_array_accepts_integer_arrays(self):
        assert GeometryAdapter.from_array(np.array(UNIT_SQUARE)) == Polygon(UNIT_SQUARE)
