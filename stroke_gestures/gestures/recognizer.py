"""
Single-stroke gesture recognizer.

Composes resampling, normalization and direction-angle matching into one
classify operation. Templates are prepared once when the recognizer is
built; a recognizer holds no other state and can be shared between threads.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple, Union

from ..config.settings import RecognitionConfig
from .matcher import best_match, prepare
from .templates import TemplateSource, load_registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    """Result of recognition with name, score, and timing."""
    name: str
    score: float
    time_ms: float = 0.0

    @property
    def recognized(self) -> bool:
        return self.name != RecognitionConfig.UNRECOGNIZED


class Recognizer:
    """Classifies complete strokes against a fixed template registry."""

    def __init__(self, registry: Optional[Union[str, TemplateSource]] = None,
                 config: Optional[RecognitionConfig] = None):
        """
        Args:
            registry: TemplateRegistry, label -> stroke mapping, JSON template
                file path, or None for the reference templates
            config: Recognition settings, defaults when None
        """
        self.registry = load_registry(registry)
        self.config = config or RecognitionConfig()
        self._prepared: List[Tuple[str, list]] = [
            (label, prepare(template.points, self.config.resample_points,
                            self.config.degenerate_axis_value))
            for label, template in self.registry.items()
        ]
        if not self._prepared:
            logger.warning("Recognizer has no templates; every stroke will be unrecognized")

    @property
    def labels(self) -> List[str]:
        return [label for label, _ in self._prepared]

    def recognize(self, stroke: Sequence[Any]) -> MatchResult:
        """
        Recognize a complete stroke.

        Args:
            stroke: Points, (x, y) pairs or {'x', 'y'} dicts in capture order

        Returns:
            MatchResult with the best template name and its distance, or the
            unrecognized sentinel when the registry is empty

        Raises:
            InvalidStroke: if the stroke has fewer than 2 points or bad coordinates
        """
        t0 = time.perf_counter()
        candidate = prepare(stroke, self.config.resample_points, self.config.degenerate_axis_value)
        name, score = best_match(candidate, self._prepared, self.config.wrap_angles)
        t1 = time.perf_counter()
        return MatchResult(name, score, (t1 - t0) * 1000)

    def classify(self, stroke: Sequence[Any]) -> str:
        """Classify a stroke and return only the label."""
        return self.recognize(stroke).name

    def classify_with_score(self, stroke: Sequence[Any]) -> Tuple[str, float]:
        """Classify a stroke and return both label and distance."""
        result = self.recognize(stroke)
        return result.name, result.score


# Convenience functions
_default_recognizer: Optional[Recognizer] = None


def get_default_recognizer() -> Recognizer:
    """Recognizer over the reference templates, built on first use."""
    global _default_recognizer
    if _default_recognizer is None:
        _default_recognizer = Recognizer()
    return _default_recognizer


def classify_path(path: Sequence[Any]) -> str:
    """Classify a path using the reference templates."""
    return get_default_recognizer().classify(path)


def classify_path_with_score(path: Sequence[Any]) -> Tuple[str, float]:
    """Classify a path and return both label and distance."""
    return get_default_recognizer().classify_with_score(path)
