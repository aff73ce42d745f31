"""Tests for the Recognizer facade."""

import json
import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from stroke_gestures import InvalidStroke, MatchResult, Recognizer, TemplateRegistry
from stroke_gestures.config.settings import RecognitionConfig
from stroke_gestures.gestures.matcher import classify
from stroke_gestures.gestures.recognizer import classify_path, classify_path_with_score


LESS_THAN = [(80, 20), (40, 50), (80, 80)]

STROKES = [
    LESS_THAN,
    [(10, 10), (50, 90), (90, 12)],
    [(5, 5), (200, 5)],
    [(40, 0), (40, 300)],
    [(0, 0), (30, 80), (55, 3), (90, 70), (100, 0)],
    [(50, 50)] * 5,
    [(0, 0), (50, 0), (50, 50), (0, 50), (0, 0)],
]


@pytest.fixture(scope="module")
def recognizer():
    return Recognizer()


def test_default_labels(recognizer):
    assert recognizer.labels == ['<', '>', 'V', '^']


def test_recognize_less_than(recognizer):
    result = recognizer.recognize(LESS_THAN)
    assert isinstance(result, MatchResult)
    assert result.name == '<'
    assert result.recognized
    assert result.score == pytest.approx(0, abs=1e-6)
    assert result.time_ms >= 0


def test_recognize_accepts_capture_dicts(recognizer):
    path = [{'x': x, 'y': y, 't': i} for i, (x, y) in enumerate(LESS_THAN)]
    assert recognizer.classify(path) == '<'


@pytest.mark.parametrize("stroke", STROKES)
def test_classify_returns_registered_label(recognizer, stroke):
    label, score = recognizer.classify_with_score(stroke)
    assert label in recognizer.registry
    assert math.isfinite(score)


@pytest.mark.parametrize("stroke", STROKES)
def test_prepared_templates_match_per_call_preparation(recognizer, stroke):
    label, score = recognizer.classify_with_score(stroke)
    expected_label, expected_score = classify(stroke, recognizer.registry)
    assert label == expected_label
    assert score == pytest.approx(expected_score)


def test_identical_points_are_not_an_error(recognizer):
    assert recognizer.classify([(50, 50)] * 5) in recognizer.registry


def test_empty_registry_is_unrecognized():
    result = Recognizer(TemplateRegistry()).recognize(LESS_THAN)
    assert result.name == RecognitionConfig.UNRECOGNIZED == 'unrecognized'
    assert not result.recognized
    assert result.score == float('inf')


def test_single_point_stroke_fails(recognizer):
    with pytest.raises(InvalidStroke):
        recognizer.recognize([(10, 10)])


def test_invalid_stroke_is_a_value_error(recognizer):
    with pytest.raises(ValueError):
        recognizer.classify([])


def test_raw_angle_difference_config():
    recognizer = Recognizer(config=RecognitionConfig(wrap_angles=False))
    assert recognizer.classify(LESS_THAN) == '<'


def test_resample_points_config():
    recognizer = Recognizer(config=RecognitionConfig(resample_points=16))
    assert recognizer.classify(LESS_THAN) == '<'
    assert all(len(points) == 16 for _, points in recognizer._prepared)


def test_config_rejects_small_resample_count():
    with pytest.raises(ValueError):
        RecognitionConfig(resample_points=1)


def test_custom_registry():
    registry = TemplateRegistry({
        'down': [(0, 0), (0, 1)],
        'right': [(0, 0), (1, 0)],
    })
    recognizer = Recognizer(registry)
    assert recognizer.classify([(300, 10), (300, 400)]) == 'down'
    assert recognizer.classify([(10, 300), (400, 300)]) == 'right'



def test_recognizer_accepts_mapping_and_template_file(tmp_path):
    templates = {
        'down': [(0, 0), (0, 1)],
        'right': [(0, 0), (1, 0)],
    }
    template_file = tmp_path / "templates.json"
    template_file.write_text(json.dumps([
        {'name': name, 'points': [{'x': x, 'y': y} for x, y in points]}
        for name, points in templates.items()
    ]))

    for source in (templates, str(template_file)):
        recognizer = Recognizer(source)
        assert recognizer.labels == ['down', 'right']
        assert recognizer.classify([(300, 10), (300, 400)]) == 'down'


def test_module_level_classification():
    assert classify_path(LESS_THAN) == '<'
    label, score = classify_path_with_score([(20, 20), (60, 50), (20, 80)])
    assert label == '>'
    assert score == pytest.approx(0, abs=1e-6)


def test_concurrent_classification(recognizer):
    expected = [recognizer.classify(s) for s in STROKES]
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(recognizer.classify, STROKES * 10))
    assert results == expected * 10
