"""
Gesture template registry.

Templates are named reference strokes. A registry is built once at start-up,
either from the built-in reference set or from a JSON template file, and is
read-only afterwards so recognizers can share it across threads.
"""

import json
import logging
import os
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from ..config.settings import RecognitionConfig
from ..errors import InvalidStroke, TemplateError
from ..utils.gesture_utils import Point, DataValidator

logger = logging.getLogger(__name__)


# Reference shapes in unit coordinates, y grows downwards
REFERENCE_TEMPLATES = (
    ('<', [(0.8, 0.2), (0.4, 0.5), (0.8, 0.8)]),
    ('>', [(0.2, 0.2), (0.6, 0.5), (0.2, 0.8)]),
    ('V', [(0.2, 0.1), (0.5, 0.8), (0.8, 0.1)]),
    ('^', [(0.5, 0.8), (0.3, 0.3), (0.7, 0.3), (0.5, 0.8)]),
)


class GestureTemplate:
    """Represents a gesture template with name and raw points."""

    __slots__ = ('_name', '_points')

    def __init__(self, name: str, points: Iterable[Any]):
        name = str(name).strip()
        if not name:
            raise TemplateError("template name must not be empty")
        if name == RecognitionConfig.UNRECOGNIZED:
            raise TemplateError(f"'{name}' is reserved for strokes that match no template")
        try:
            validated = DataValidator.validate_stroke(points, RecognitionConfig.MIN_STROKE_POINTS)
        except InvalidStroke as e:
            raise TemplateError(f"template '{name}': {e}") from e

        self._name = name
        self._points = tuple(validated)

    @property
    def name(self) -> str:
        return self._name

    @property
    def points(self) -> Tuple[Point, ...]:
        return self._points

    def __len__(self):
        return len(self._points)

    def __repr__(self):
        return f"GestureTemplate({self._name!r}, {len(self._points)} points)"


TemplateSource = Union[Mapping[str, Iterable[Any]], Iterable[Union[GestureTemplate, Tuple[str, Iterable[Any]]]]]


class TemplateRegistry:
    """
    Ordered, read-only collection of gesture templates keyed by label.

    Iteration yields labels in registration order, which is also the order
    used to break ties between equally good matches.
    """

    def __init__(self, templates: Optional[TemplateSource] = None):
        entries: Dict[str, GestureTemplate] = {}
        if templates is None:
            templates = ()
        items = templates.items() if isinstance(templates, Mapping) else templates

        for item in items:
            template = item if isinstance(item, GestureTemplate) else GestureTemplate(*item)
            if template.name in entries:
                logger.warning(f"Template '{template.name}' registered twice, keeping the last one")
            entries[template.name] = template

        self._templates = entries

    @classmethod
    def default(cls) -> 'TemplateRegistry':
        """The four reference templates: '<', '>', 'V' and '^'."""
        return cls(REFERENCE_TEMPLATES)

    @classmethod
    def from_json(cls, filename: str) -> 'TemplateRegistry':
        """
        Load templates from a JSON file.

        The file holds a list of {"name": ..., "points": [{"x": .., "y": ..}, ...]}
        objects, or a dict with that list under "templates". Malformed entries
        are skipped with a warning. A later entry with the same name replaces
        the earlier one in place.

        Raises:
            TemplateError: if the file cannot be read or holds no valid template
        """
        if not os.path.exists(filename):
            raise TemplateError(f"Template file '{filename}' not found")

        try:
            with open(filename, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            raise TemplateError(f"Error loading templates from '{filename}': {e}") from e

        # Handle both formats: a bare list, or a dict with a 'templates' key
        templates_data = data.get('templates', data) if isinstance(data, dict) else data

        if not isinstance(templates_data, list):
            raise TemplateError(f"Invalid template format in '{filename}'. Expected list of templates.")

        loaded: Dict[str, GestureTemplate] = {}
        for i, item in enumerate(templates_data):
            template = cls._parse_entry(i, item)
            if template is not None:
                loaded[template.name] = template

        if not loaded:
            raise TemplateError(f"No valid templates found in '{filename}'")

        logger.info(f"Loaded {len(loaded)} templates from '{filename}'")
        return cls(loaded.values())

    @staticmethod
    def _parse_entry(index: int, item: Any) -> Optional[GestureTemplate]:
        """Build one template from a JSON entry, or None if it is malformed."""
        if not isinstance(item, dict):
            logger.warning(f"Skipping template {index}: not a dictionary")
            return None

        if 'name' not in item:
            logger.warning(f"Skipping template {index}: missing 'name' field")
            return None

        if 'points' not in item:
            logger.warning(f"Skipping template {index}: missing 'points' field")
            return None

        points_data = item['points']
        if not isinstance(points_data, list):
            logger.warning(f"Skipping template '{item['name']}': 'points' must be a list")
            return None

        if not all(isinstance(p, dict) for p in points_data):
            logger.warning(f"Skipping template '{item['name']}': every point must be a dictionary")
            return None

        try:
            return GestureTemplate(item['name'], points_data)
        except TemplateError as e:
            logger.warning(f"Skipping template {index}: {e}")
            return None

    def labels(self) -> List[str]:
        return list(self._templates)

    def get(self, label: str) -> Optional[GestureTemplate]:
        return self._templates.get(label)

    def items(self) -> Iterator[Tuple[str, GestureTemplate]]:
        return iter(self._templates.items())

    def __getitem__(self, label: str) -> GestureTemplate:
        return self._templates[label]

    def __contains__(self, label: object) -> bool:
        return label in self._templates

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def __repr__(self):
        return f"TemplateRegistry({self.labels()!r})"


def load_registry(source: Optional[Union[str, TemplateSource]] = None) -> TemplateRegistry:
    """Registry from a JSON path, a template collection, or the reference set when None."""
    if source is None:
        return TemplateRegistry.default()
    if isinstance(source, TemplateRegistry):
        return source
    if isinstance(source, (str, os.PathLike)):
        return TemplateRegistry.from_json(os.fspath(source))
    return TemplateRegistry(source)
