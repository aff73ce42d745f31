"""
Exceptions raised by the recognition pipeline.

Degenerate geometry (zero-length paths, zero-extent bounding boxes) is not
an error and has no exception here. An empty template set is not an error
either: recognition returns the unrecognized sentinel.
"""


class GestureError(Exception):
    """Base class for stroke recognition errors."""


class InvalidStroke(GestureError, ValueError):
    """A stroke that cannot be recognized: too few points or bad coordinates."""


class TemplateError(GestureError, ValueError):
    """A template or template file that cannot be registered."""
