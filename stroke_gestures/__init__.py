"""
Stroke Gestures Package
Single-stroke gesture recognition with pluggable capture and actions.
"""

from .errors import GestureError, InvalidStroke, TemplateError
from .gestures.recognizer import MatchResult, Recognizer, classify_path, classify_path_with_score
from .gestures.templates import GestureTemplate, TemplateRegistry
from .core.dispatcher import ActionDispatcher

__version__ = "1.0.0"
__all__ = [
    "Recognizer",
    "MatchResult",
    "TemplateRegistry",
    "GestureTemplate",
    "ActionDispatcher",
    "classify_path",
    "classify_path_with_score",
    "GestureError",
    "InvalidStroke",
    "TemplateError"
]
