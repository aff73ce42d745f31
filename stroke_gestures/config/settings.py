"""
Configuration settings for stroke recognition and capture.
"""


class RecognitionConfig:
    """Configuration for the recognition pipeline."""

    # Number of equidistant points every stroke is resampled to
    RESAMPLE_POINTS = 64

    # Normalized coordinate used for an axis with zero extent
    DEGENERATE_AXIS_VALUE = 0.5

    # Compare directions with the wrapped difference atan2(sin d, cos d)
    WRAP_ANGLES = True

    MIN_STROKE_POINTS = 2

    # Label returned when no template is registered
    UNRECOGNIZED = 'unrecognized'

    def __init__(self, resample_points: int = None, degenerate_axis_value: float = None,
                 wrap_angles: bool = None):
        self.resample_points = self.RESAMPLE_POINTS
        self.degenerate_axis_value = self.DEGENERATE_AXIS_VALUE
        self.wrap_angles = self.WRAP_ANGLES

        if resample_points is not None:
            self.set_resample_points(resample_points)
        if degenerate_axis_value is not None:
            self.degenerate_axis_value = float(degenerate_axis_value)
        if wrap_angles is not None:
            self.wrap_angles = bool(wrap_angles)

    def set_resample_points(self, n: int):
        """Set the resample count (at least 2)."""
        n = int(n)
        if n < 2:
            raise ValueError(f"resample count must be at least 2, got {n}")
        self.resample_points = n

    def __repr__(self):
        return (f"RecognitionConfig(resample_points={self.resample_points}, "
                f"degenerate_axis_value={self.degenerate_axis_value}, "
                f"wrap_angles={self.wrap_angles})")


class CaptureConfig:
    """Configuration constants for touchscreen stroke capture."""

    # Samples closer than this to the previous sample are dropped (pixels)
    MIN_SAMPLE_DISTANCE = 1.0

    DEBUG_LOG_FILE = 'stroke_debug.log'

    # Seconds to wait for the event thread on shutdown
    THREAD_JOIN_TIMEOUT = 1.0
