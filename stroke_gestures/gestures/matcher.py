"""
Direction-angle matching of normalized strokes.

A stroke is described by the direction of each segment between consecutive
points. Two strokes of equal length are compared by summing the absolute
differences of their segment directions; the template with the smallest
sum is the best match.
"""

import logging
from typing import Any, Iterable, Mapping, Sequence, Tuple

import numpy as np

from ..config.settings import RecognitionConfig
from ..utils.gesture_utils import Point
from .normalizer import normalize
from .resampler import resample

logger = logging.getLogger(__name__)


def angle_sequence(points: Sequence[Point]) -> np.ndarray:
    """Direction in radians of each segment, len(points) - 1 values in (-pi, pi]."""
    coords = np.array([(p.x, p.y) for p in points], dtype=float).reshape(-1, 2)
    if len(coords) < 2:
        return np.empty(0)
    dx = np.diff(coords[:, 0])
    dy = np.diff(coords[:, 1])
    return np.arctan2(dy, dx)


def angular_difference(a: np.ndarray, b: np.ndarray, wrap: bool = True) -> np.ndarray:
    """
    Element-wise absolute difference between two angle arrays.

    With wrap=False the raw difference is used, so directions either side
    of +/-pi (e.g. pi - 0.01 and -pi + 0.01) differ by almost 2*pi.
    """
    diff = a - b
    if wrap:
        diff = np.arctan2(np.sin(diff), np.cos(diff))
    return np.abs(diff)


def distance(candidate: Sequence[Point], template: Sequence[Point],
             wrap_angles: bool = RecognitionConfig.WRAP_ANGLES) -> float:
    """
    Direction-angle distance between two normalized strokes.

    Raises:
        ValueError: if the strokes do not have the same number of points
    """
    if len(candidate) != len(template):
        raise ValueError(
            f"strokes must have equal length, got {len(candidate)} and {len(template)}"
        )
    diffs = angular_difference(angle_sequence(candidate), angle_sequence(template), wrap_angles)
    return float(np.sum(diffs))


def best_match(candidate: Sequence[Point], prepared: Iterable[Tuple[str, Sequence[Point]]],
               wrap_angles: bool = RecognitionConfig.WRAP_ANGLES) -> Tuple[str, float]:
    """
    Find the prepared template closest to a normalized candidate.

    Args:
        candidate: Resampled and normalized stroke
        prepared: (label, resampled and normalized template) pairs

    Returns:
        (label, score); the first template wins a tie, and
        (RecognitionConfig.UNRECOGNIZED, inf) is returned when there are none
    """
    best_label = RecognitionConfig.UNRECOGNIZED
    best_score = float('inf')

    for label, template_points in prepared:
        score = distance(candidate, template_points, wrap_angles)
        logger.debug(f"Template {label}: distance {score:.4f}")
        if score < best_score:
            best_score = score
            best_label = label

    logger.debug(f"Best template: {best_label} with distance {best_score:.4f}")
    return best_label, best_score


def prepare(stroke: Sequence[Any], n: int = RecognitionConfig.RESAMPLE_POINTS,
            degenerate_value: float = RecognitionConfig.DEGENERATE_AXIS_VALUE) -> list:
    """Resample then normalize a stroke."""
    return normalize(resample(stroke, n), degenerate_value)


def classify(candidate: Sequence[Any], templates: Mapping[str, Sequence[Any]],
             n: int = RecognitionConfig.RESAMPLE_POINTS,
             wrap_angles: bool = RecognitionConfig.WRAP_ANGLES) -> Tuple[str, float]:
    """
    Classify a raw stroke against a label -> raw template stroke mapping.

    Templates are prepared on every call; use Recognizer to prepare them
    once. An empty mapping gives (RecognitionConfig.UNRECOGNIZED, inf).

    Raises:
        InvalidStroke: if the candidate has fewer than 2 points
    """
    normalized = prepare(candidate, n)
    prepared = ((label, prepare(_template_points(points), n)) for label, points in templates.items())
    return best_match(normalized, prepared, wrap_angles)


def _template_points(template: Any) -> Sequence[Any]:
    # Accept GestureTemplate objects as well as bare point sequences
    return getattr(template, 'points', template)
