"""
Utilities package for stroke recognition and capture.

This package provides the shared point type and helpers used by the
recognition pipeline and by the capture collaborators.
"""

from .gesture_utils import (
    Point,
    GeometryUtils,
    PathUtils,
    DataValidator
)

__all__ = [
    'Point',
    'GeometryUtils',
    'PathUtils',
    'DataValidator'
]
