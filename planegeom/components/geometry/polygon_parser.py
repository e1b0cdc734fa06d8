from typing import List, Tuple, Any
from abc import ABC, abstractmethod
import numpy as np

from planegeom.core import CoordinateKey, ParameterValidationError, get_constants
from planegeom.validation import PolygonValidator

PARAMETER_NAME = "polygon"


class IPolygonDataParser(ABC):
    """
    Abstract base class for polygon data parsers (Strategy Pattern)

    Each parser handles a specific input format and converts it to
    a list of (x, y) vertex tuples. Sequence based formats only describe how
    to pull the raw coordinates out of one item; the loop and the float
    conversion are shared.
    """

    @abstractmethod
    def can_parse(self, data: Any) -> bool:
        """
        Check if this parser can handle the given data format

        Args:
            data: Input data to check

        Returns:
            True if parser can handle this format
        """
        pass

    def parse(self, data: Any) -> List[Tuple[float, float]]:
        """
        Parse data into list of vertex tuples

        Args:
            data: Input data to parse

        Returns:
            List of (x, y) vertex tuples

        Raises:
            ParameterValidationError: If data format is invalid
        """
        return [self._to_vertex(i, point) for i, point in enumerate(data)]

    @abstractmethod
    def _raw_coordinates(self, i: int, point: Any) -> Tuple[Any, Any]:
        """Return the unconverted x and y of one item, or raise if it is malformed"""
        pass

    def _to_vertex(self, i: int, point: Any) -> Tuple[float, float]:
        raw_x, raw_y = self._raw_coordinates(i, point)
        try:
            return float(raw_x), float(raw_y)
        except (TypeError, ValueError) as e:
            raise ParameterValidationError(
                PARAMETER_NAME,
                f"point at index {i} has invalid coordinate values. "
                f"Error: {type(e).__name__}: {str(e)}. Point: {point}"
            ) from e


class DictPolygonParser(IPolygonDataParser):
    """
    Parser for dictionary-based polygon format: [{"x": 0, "y": 0}, ...]
    """

    def can_parse(self, data: Any) -> bool:
        """Check if data is a list of dictionaries"""
        if not isinstance(data, list) or not data:
            return False
        return isinstance(data[0], dict)

    def _raw_coordinates(self, i: int, point: Any) -> Tuple[Any, Any]:
        if not isinstance(point, dict):
            raise ParameterValidationError(
                PARAMETER_NAME,
                f"point at index {i} is not a dict. Got type: {type(point).__name__}, value: {point}"
            )

        if CoordinateKey.X.value not in point or CoordinateKey.Y.value not in point:
            raise ParameterValidationError(
                PARAMETER_NAME,
                f"point at index {i} missing 'x' or 'y' key. "
                f"Got: {point}. Expected format: {{'x': value, 'y': value}}"
            )

        return point[CoordinateKey.X.value], point[CoordinateKey.Y.value]


class ListPolygonParser(IPolygonDataParser):
    """
    Parser for list-based polygon format: [[0, 0], [3, 0], ...] or [(0, 0), ...]
    """

    def can_parse(self, data: Any) -> bool:
        """Check if data is a list or tuple of lists/tuples"""
        if not isinstance(data, (list, tuple)) or not data:
            return False
        return isinstance(data[0], (list, tuple))

    def _raw_coordinates(self, i: int, point: Any) -> Tuple[Any, Any]:
        if not isinstance(point, (list, tuple)):
            raise ParameterValidationError(
                PARAMETER_NAME,
                f"point at index {i} is not a list or tuple. Got type: {type(point).__name__}, value: {point}"
            )

        if len(point) != 2:
            raise ParameterValidationError(
                PARAMETER_NAME,
                f"point at index {i} must have exactly 2 elements. Got: {point}. Expected format: [x, y]"
            )

        return point[0], point[1]


class ArrayPolygonParser(IPolygonDataParser):
    """
    Parser for numpy arrays of shape (N, 2)
    """

    def can_parse(self, data: Any) -> bool:
        return isinstance(data, np.ndarray)

    def parse(self, data: np.ndarray) -> List[Tuple[float, float]]:
        if data.ndim != 2 or data.shape[1] != 2:
            raise ParameterValidationError(
                PARAMETER_NAME,
                f"array must have shape (N, 2), got {data.shape}"
            )
        return super().parse(data.astype(float))

    def _raw_coordinates(self, i: int, point: np.ndarray) -> Tuple[Any, Any]:
        return point[0], point[1]


class PolygonParserFactory:
    """
    Factory for creating appropriate polygon parsers (Factory Pattern)

    Uses Strategy Pattern to select the right parser based on data format.
    """

    # Available parsers in priority order
    _PARSERS = [
        ArrayPolygonParser(),
        DictPolygonParser(),
        ListPolygonParser(),
    ]

    @classmethod
    def get_parser(cls, data: Any) -> IPolygonDataParser:
        """
        Get appropriate parser for the given data format

        Args:
            data: Input data to parse

        Returns:
            Parser instance that can handle this data

        Raises:
            ParameterValidationError: If no parser can handle the data format
        """
        for parser in cls._PARSERS:
            if parser.can_parse(data):
                return parser

        raise ParameterValidationError(
            PARAMETER_NAME,
            f"unsupported format. Got type: {type(data).__name__}, value: {data}. "
            f"Expected formats: [{{'x': val, 'y': val}}, ...], [[x, y], ...] or an (N, 2) array"
        )

    @classmethod
    def parse(cls, data: Any) -> List[Tuple[float, float]]:
        """
        Parse data with the matching parser and validate the vertices

        Raises:
            ParameterValidationError: If the format is unsupported, a point is
                malformed, there are too few vertices or a coordinate is not finite
        """
        vertices = cls.get_parser(data).parse(data)

        validator = PolygonValidator(PARAMETER_NAME, min_vertices=get_constants().MIN_POLYGON_VERTICES)
        validator.validate(vertices).raise_for_errors(PARAMETER_NAME)
        return vertices
