"""
Stroke resampling.

Converts a raw stroke of any length into a fixed number of points spaced
equally by distance along the original path. This removes the influence of
pointer sampling rate and drawing speed before strokes are compared.
"""

from typing import Any, List, Sequence

from ..config.settings import RecognitionConfig
from ..utils.gesture_utils import Point, GeometryUtils, DataValidator


def resample(stroke: Sequence[Any], n: int = RecognitionConfig.RESAMPLE_POINTS) -> List[Point]:
    """
    Resample a stroke to exactly n points equally spaced along its path.

    The first output point is the stroke's first point. Points that fall
    inside a segment are linearly interpolated and then take the place of
    the segment start, so spacing is always measured from the last emitted
    point. If rounding leaves the output short, it is padded with the last
    input point. A stroke whose points all coincide yields n copies of that
    point.

    Resampling an already resampled stroke returns the same points only when
    every corner of the path falls on a sample. A corner between two samples is
    cut short by the first pass, so a second pass walks a slightly shorter
    path and its points shift by less than one interval.

    Args:
        stroke: Points, (x, y) pairs or {'x', 'y'} dicts; not modified
        n: Number of output points, at least 2

    Returns:
        List of exactly n Points

    Raises:
        InvalidStroke: if the stroke has fewer than 2 points
        ValueError: if n < 2
    """
    if n < 2:
        raise ValueError(f"resample count must be at least 2, got {n}")

    points = DataValidator.validate_stroke(stroke, RecognitionConfig.MIN_STROKE_POINTS)

    total_length = GeometryUtils.calculate_path_length(points)
    if total_length == 0:
        return [points[0]] * n

    interval = total_length / (n - 1)
    accumulated = 0.0
    working = list(points)
    resampled = [working[0]]

    i = 1
    while i < len(working) and len(resampled) < n:
        prev_point = working[i-1]
        curr_point = working[i]
        d = GeometryUtils.calculate_distance(prev_point, curr_point)
        if d > 0 and accumulated + d >= interval:
            q = GeometryUtils.interpolate(prev_point, curr_point, (interval - accumulated) / d)
            resampled.append(q)
            working.insert(i, q)  # next segment starts at q
            accumulated = 0.0
        else:
            accumulated += d
        i += 1

    # Rounding can leave the last interval unfilled
    while len(resampled) < n:
        resampled.append(points[-1])

    return resampled
