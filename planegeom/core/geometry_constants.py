"""
Geometry Constants for planar computations

Centralized location for every tolerance used by the geometry components.
Floating-point comparisons throughout the package read these values instead
of burying literals in the code.
"""
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator


@dataclass(frozen=True)
class GeometryConstants:
    """
    Immutable tolerance settings (Immutable Object Pattern)

    - POINT_TOLERANCE: absolute per-coordinate tolerance for point equality
      and for the segment parameter range check of intersection points
    - WINDING_TOLERANCE: allowed deviation of the angle sum from 2*pi in the
      point-in-polygon test
    """

    POINT_TOLERANCE: float = 1e-9
    WINDING_TOLERANCE: float = 1e-6

    MIN_POLYGON_VERTICES: int = 3


# Singleton instance for easy access
GEOMETRY_CONSTANTS = GeometryConstants()

_active_constants = GEOMETRY_CONSTANTS


def get_constants() -> GeometryConstants:
    """Return the constants currently in effect"""
    return _active_constants


def configure_constants(**overrides) -> GeometryConstants:
    """
    Replace the active constants

    Args:
        **overrides: Field values to change, e.g. POINT_TOLERANCE=1e-6

    Returns:
        The previously active constants
    """
    global _active_constants
    previous = _active_constants
    _active_constants = replace(previous, **overrides)
    return previous


@contextmanager
def override_constants(**overrides) -> Iterator[GeometryConstants]:
    """Temporarily tighten or loosen tolerances inside a ``with`` block"""
    global _active_constants
    previous = configure_constants(**overrides)
    try:
        yield _active_constants
    finally:
        _active_constants = previous
