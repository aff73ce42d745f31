"""
Single-stroke gesture recognition.

This module provides the recognition pipeline: resampling, normalization,
direction-angle matching, the template registry and the recognizer that
composes them.
"""

from .resampler import resample
from .normalizer import normalize, bounding_box
from .matcher import angle_sequence, distance, best_match, classify
from .templates import GestureTemplate, TemplateRegistry, load_registry
from .recognizer import (
    MatchResult,
    Recognizer,
    classify_path,
    classify_path_with_score
)

__all__ = [
    'resample',
    'normalize',
    'bounding_box',
    'angle_sequence',
    'distance',
    'best_match',
    'classify',
    'GestureTemplate',
    'TemplateRegistry',
    'load_registry',
    'MatchResult',
    'Recognizer',
    'classify_path',
    'classify_path_with_score'
]
