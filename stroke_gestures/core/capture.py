"""
Single-stroke accumulation from touch samples.
"""

import math
from typing import List, Optional

from ..config.settings import CaptureConfig
from ..utils.gesture_utils import Point


class StrokeCapture:
    """
    Collects the samples of one finger from touch-down to release.

    Only single-finger gestures are recognized: if another finger touches
    while a stroke is in progress, the whole gesture is marked multi-touch
    and discarded when the last finger lifts.
    """

    def __init__(self, min_sample_distance: float = CaptureConfig.MIN_SAMPLE_DISTANCE):
        self.min_sample_distance = min_sample_distance
        self.reset()

    def reset(self):
        self.slot: Optional[int] = None
        self.points: List[Point] = []
        self.active_slots = set()
        self.multi_touch = False

    @property
    def in_progress(self) -> bool:
        return bool(self.active_slots)

    def begin(self, slot: int):
        """A finger touched down in `slot`."""
        if self.active_slots:
            self.multi_touch = True
        else:
            self.slot = slot
            self.points = []
            self.multi_touch = False
        self.active_slots.add(slot)

    def add_point(self, slot: int, x: float, y: float) -> bool:
        """Record a sample for the tracked finger; returns True if it was kept."""
        if slot != self.slot or self.multi_touch:
            return False
        point = Point(x, y)
        if not (math.isfinite(point.x) and math.isfinite(point.y)):
            return False
        if self.points and self.points[-1].distance_to(point) < self.min_sample_distance:
            return False
        self.points.append(point)
        return True

    def end(self, slot: int) -> Optional[List[Point]]:
        """
        A finger lifted from `slot`.

        Returns:
            The completed stroke once the last finger lifts, or None while
            fingers remain down or when the gesture was multi-touch
        """
        self.active_slots.discard(slot)
        if self.active_slots:
            return None

        stroke = None if self.multi_touch or self.slot is None else list(self.points)
        self.reset()
        return stroke
