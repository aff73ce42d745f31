"""
Shared utilities for stroke recognition and capture.

This module provides the point type and the geometry, conversion and
validation helpers used by the resampler, normalizer and capture layers.
"""

import math
from typing import Any, Iterable, List, Sequence, Tuple

from ..errors import InvalidStroke


class Point:
    """Represents a 2D point. Two points are equal when their coordinates are."""

    __slots__ = ('x', 'y')

    def __init__(self, x: float, y: float):
        self.x = float(x)
        self.y = float(y)

    def __repr__(self):
        return f"Point({self.x:.3f}, {self.y:.3f})"

    def __eq__(self, other):
        if not isinstance(other, Point):
            return False
        return abs(self.x - other.x) < 1e-10 and abs(self.y - other.y) < 1e-10

    def __iter__(self):
        yield self.x
        yield self.y

    def distance_to(self, other: 'Point') -> float:
        """Calculate Euclidean distance to another point."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)


class GeometryUtils:
    """Utility class for geometric calculations."""

    @staticmethod
    def calculate_distance(p1: Point, p2: Point) -> float:
        """Calculate Euclidean distance between two points."""
        return math.sqrt((p1.x - p2.x) ** 2 + (p1.y - p2.y) ** 2)

    @staticmethod
    def calculate_path_length(points: Sequence[Point]) -> float:
        """Calculate total path length."""
        if len(points) < 2:
            return 0.0

        length = 0.0
        for i in range(1, len(points)):
            length += GeometryUtils.calculate_distance(points[i-1], points[i])
        return length

    @staticmethod
    def interpolate(p1: Point, p2: Point, ratio: float) -> Point:
        """Point at `ratio` of the way from p1 to p2."""
        return Point(p1.x + ratio * (p2.x - p1.x), p1.y + ratio * (p2.y - p1.y))


class PathUtils:
    """Utility class for path processing."""

    @staticmethod
    def to_point(item: Any) -> Point:
        """Convert a Point, an (x, y) pair or an {'x', 'y'} dict to a Point."""
        if isinstance(item, Point):
            return item
        if isinstance(item, dict):
            return Point(item['x'], item['y'])
        x, y = item
        return Point(x, y)

    @staticmethod
    def to_points(path: Iterable[Any]) -> List[Point]:
        """
        Convert a stroke to a list of Points.

        Raises:
            InvalidStroke: if any item is not a numeric 2D point
        """
        points = []
        for i, item in enumerate(path):
            try:
                point = PathUtils.to_point(item)
            except (KeyError, TypeError, ValueError) as e:
                raise InvalidStroke(f"point {i} is not a 2D coordinate: {item!r}") from e
            if not (math.isfinite(point.x) and math.isfinite(point.y)):
                raise InvalidStroke(f"point {i} has a non-finite coordinate: {point!r}")
            points.append(point)
        return points

    @staticmethod
    def get_path_bounds(points: Sequence[Point]) -> Tuple[float, float, float, float]:
        """Get bounding box of a path as (min_x, min_y, max_x, max_y)."""
        if not points:
            return 0.0, 0.0, 0.0, 0.0

        min_x = min(p.x for p in points)
        max_x = max(p.x for p in points)
        min_y = min(p.y for p in points)
        max_y = max(p.y for p in points)

        return min_x, min_y, max_x, max_y


class DataValidator:
    """Utility class for validating stroke data."""

    @staticmethod
    def validate_stroke(path: Iterable[Any], min_points: int = 2) -> List[Point]:
        """
        Convert and validate a stroke for recognition.

        Raises:
            InvalidStroke: if the stroke is malformed or too short
        """
        points = PathUtils.to_points(path)
        if len(points) < min_points:
            raise InvalidStroke(
                f"stroke needs at least {min_points} points, got {len(points)}"
            )
        return points
