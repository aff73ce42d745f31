"""
Stroke normalization into the unit square.
"""

from typing import Any, List, Sequence, Tuple

from ..config.settings import RecognitionConfig
from ..utils.gesture_utils import Point, PathUtils


def bounding_box(points: Sequence[Point]) -> Tuple[float, float, float, float]:
    """Axis-aligned bounding box as (min_x, min_y, max_x, max_y)."""
    return PathUtils.get_path_bounds(points)


def normalize(stroke: Sequence[Any],
              degenerate_value: float = RecognitionConfig.DEGENERATE_AXIS_VALUE) -> List[Point]:
    """
    Scale and translate a stroke so its bounding box becomes [0,1] x [0,1].

    Each axis is scaled independently. An axis with zero extent (a vertical
    or horizontal line, or a single repeated point) has every coordinate
    mapped to `degenerate_value`.
    """
    points = PathUtils.to_points(stroke)
    if not points:
        return []

    min_x, min_y, max_x, max_y = bounding_box(points)
    width = max_x - min_x
    height = max_y - min_y

    normalized = []
    for point in points:
        new_x = (point.x - min_x) / width if width > 0 else degenerate_value
        new_y = (point.y - min_y) / height if height > 0 else degenerate_value
        normalized.append(Point(new_x, new_y))

    return normalized
