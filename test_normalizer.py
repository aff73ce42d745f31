"""Tests for stroke normalization."""

import math

import pytest

from stroke_gestures.gestures.normalizer import bounding_box, normalize
from stroke_gestures.gestures.resampler import resample
from stroke_gestures.utils.gesture_utils import Point


STROKE = [(12, 40), (30, 5), (55, 62), (70, 18), (41, 44)]


def test_bounding_box():
    points = [Point(x, y) for x, y in STROKE]
    assert bounding_box(points) == (12, 5, 70, 62)


def test_normalize_fits_unit_square():
    normalized = normalize(STROKE)
    xs = [p.x for p in normalized]
    ys = [p.y for p in normalized]
    assert min(xs) == 0 and max(xs) == 1
    assert min(ys) == 0 and max(ys) == 1
    assert all(0 <= v <= 1 for v in xs + ys)


def test_normalize_is_invariant_to_translation_and_scale():
    moved = [(x * 3.5 + 100, y * 3.5 - 250) for x, y in STROKE]
    for a, b in zip(normalize(STROKE), normalize(moved)):
        assert a.x == pytest.approx(b.x)
        assert a.y == pytest.approx(b.y)


def test_normalize_scales_axes_independently():
    normalized = normalize([(0, 0), (200, 10)])
    assert normalized == [Point(0, 0), Point(1, 1)]


def test_normalize_identical_points_maps_to_midpoint():
    normalized = normalize([(50, 50)] * 5)
    assert normalized == [Point(0.5, 0.5)] * 5


def test_normalize_resampled_identical_points():
    normalized = normalize(resample([(50, 50)] * 5, 64))
    assert len(normalized) == 64
    assert all(not math.isnan(p.x) and not math.isnan(p.y) for p in normalized)
    assert all(p == Point(0.5, 0.5) for p in normalized)


def test_normalize_vertical_line():
    normalized = normalize([(10, 0), (10, 25), (10, 100)])
    assert [p.x for p in normalized] == [0.5, 0.5, 0.5]
    assert [p.y for p in normalized] == pytest.approx([0, 0.25, 1])


def test_normalize_horizontal_line_with_custom_constant():
    normalized = normalize([(0, 7), (4, 7)], degenerate_value=0.0)
    assert normalized == [Point(0, 0), Point(1, 0)]


def test_normalize_empty_stroke():
    assert normalize([]) == []
