"""
Unit tests for Point2D value type.
"""

import math
import numpy as np
import pytest
from planegeom.components.geometry import Point2D
from planegeom.core import override_constants


class TestPoint2D:
    """Test point arithmetic and tolerant equality."""

    def test_angle_to(self):
        result = Point2D(2.0, 1.0).angle_to(Point2D(3.0, 2.0))
        assert result == pytest.approx(math.pi / 4)

    def test_angle_to_is_in_positive_range(self):
        result = Point2D(0, 0).angle_to(Point2D(0, -1))
        assert result == pytest.approx(3 * math.pi / 2)

    def test_min_max_are_component_wise(self):
        a = Point2D(1, 5)
        b = Point2D(3, 2)
        assert a.min(b) == Point2D(1, 2)
        assert a.max(b) == Point2D(3, 5)

    def test_translate_and_invert(self):
        p = Point2D(1, 2)
        assert p.translate(Point2D(0.5, -1)) == Point2D(1.5, 1)
        assert p.translate(p.invert()) == Point2D.zero()

    def test_rotate_counter_clockwise(self):
        rotated = Point2D(1, 0).rotate(math.pi / 2)
        assert rotated == Point2D(0, 1)

    def test_equality_tolerates_rounding(self):
        assert Point2D(0.1 + 0.2, 0) == Point2D(0.3, 0)

    def test_equality_rejects_distant_points(self):
        assert Point2D(0, 0) != Point2D(1e-6, 0)

    def test_tolerance_can_be_loosened(self):
        with override_constants(POINT_TOLERANCE=1e-3):
            assert Point2D(0, 0) == Point2D(1e-6, 0)
        assert Point2D(0, 0) != Point2D(1e-6, 0)

    def test_almost_equals_explicit_tolerance(self):
        assert Point2D(0, 0).almost_equals(Point2D(0.05, 0.05), tolerance=0.1)

    def test_not_equal_to_tuple(self):
        assert Point2D(1, 2) != (1, 2)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Point2D(1, 2))

    def test_tuple_conversion(self):
        p = Point2D.from_tuple([3, 4])
        assert p.to_tuple() == (3.0, 4.0)
        assert tuple(p) == (3.0, 4.0)

    def test_str(self):
        assert str(Point2D(1.5, 2)) == "(1.5, 2.0)"

    def test_coordinates_are_stored_as_floats(self):
        p = Point2D(0, 3)
        assert type(p.x) is float
        assert type(p.y) is float
        assert p.to_tuple() == (0.0, 3.0)

    def test_numpy_scalars_are_stored_as_floats(self):
        p = Point2D(np.int64(2), np.float32(0.5))
        assert type(p.x) is float
        assert type(p.y) is float
