"""
Scene description language parser.

Supports a YAML or JSON scene description with:
- Render settings (image size, viewport, recursion depth)
- Background color
- Objects (spheres and planes with shading parameters)
- Lights (ambient, point, directional)

Example scene file:
```yaml
render:
  width: 500
  height: 500
  viewport_distance: 1
  recursion_depth: 4

background: [0, 0, 0]

objects:
  - type: sphere
    center: [0, -1, 3]
    radius: 1
    color: [255, 0, 0]
    reflection: 500
    specular: 0.2

  - type: plane
    point: [0, -1, 0]
    normal: [0, 1, 0]
    color: "#ffff00"
    reflection: 1000
    specular: 0.5

lights:
  - type: ambient
    intensity: 0.2
  - type: point
    intensity: 0.6
    position: [2, 1, 0]
  - type: directional
    intensity: 0.2
    direction: [1, 4, 4]
```
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Dict, Any, List, Tuple

import yaml

from .vec3 import Vec3
from .color import Color
from .scene import Scene
from .shapes import Intersectable, Sphere, Plane, Background, NO_HIGHLIGHT
from .lights import Light, AmbientLight, PointLight, DirectionalLight
from .renderer import RenderSettings

logger = logging.getLogger(__name__)


class SceneParseError(Exception):
    """Error during scene parsing."""
    pass


class SceneParser:
    """Parser for scene description files."""

    def __init__(self):
        self.objects: List[Intersectable] = []
        self.lights: List[Light] = []
        self.settings: RenderSettings = RenderSettings()

    def parse_file(self, filepath: str) -> Tuple[Scene, List[Light], RenderSettings]:
        """Parse a scene file.

        Args:
            filepath: Path to the scene file (YAML or JSON)

        Returns:
            Tuple of (scene, lights, settings)
        """
        path = Path(filepath)
        if not path.exists():
            raise SceneParseError(f"Scene file not found: {filepath}")

        try:
            content = path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise SceneParseError(f"Cannot read scene file {filepath}: {e}") from e

        try:
            if path.suffix == '.json':
                data = json.loads(content)
            else:
                data = yaml.safe_load(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SceneParseError(f"Cannot read scene file {filepath}: {e}") from e

        if not isinstance(data, dict):
            raise SceneParseError(f"Scene file {filepath} must contain a mapping")

        logger.debug("Loaded scene description from %s", path)
        return self.parse_dict(data)

    def parse_dict(self, data: Dict[str, Any]) -> Tuple[Scene, List[Light], RenderSettings]:
        """Parse a scene from a dictionary.

        Args:
            data: Scene description dictionary

        Returns:
            Tuple of (scene, lights, settings)
        """
        try:
            # The background goes first so it seeds the nearest-hit search
            if 'background' in data:
                self.objects.append(Background(self._parse_color(data['background'])))

            if 'objects' in data:
                self._parse_objects(data['objects'])

            if 'lights' in data:
                self._parse_lights(data['lights'])

            if 'render' in data:
                self._parse_settings(data['render'])
        except (ValueError, TypeError, KeyError) as e:
            raise SceneParseError(f"Invalid scene description: {e}") from e

        logger.debug("Parsed %d objects and %d lights", len(self.objects), len(self.lights))
        return Scene(self.objects), self.lights, self.settings

    def _parse_vec3(self, data: Any) -> Vec3:
        """Parse a Vec3 from various formats."""
        if isinstance(data, (list, tuple)):
            if len(data) != 3:
                raise SceneParseError(f"Vec3 must have 3 components, got {len(data)}")
            return Vec3(float(data[0]), float(data[1]), float(data[2]))
        elif isinstance(data, dict):
            return Vec3(
                float(data.get('x', 0)),
                float(data.get('y', 0)),
                float(data.get('z', 0))
            )
        else:
            raise SceneParseError(f"Cannot parse Vec3 from: {data}")

    def _parse_color(self, data: Any) -> Color:
        """Parse an 8-bit Color from various formats."""
        if isinstance(data, (list, tuple)):
            if len(data) != 3:
                raise SceneParseError(f"Color must have 3 components, got {len(data)}")
            return Color(int(data[0]), int(data[1]), int(data[2]))
        elif isinstance(data, dict):
            return Color(
                int(data.get('r', 0)),
                int(data.get('g', 0)),
                int(data.get('b', 0))
            )
        elif isinstance(data, str):
            # Handle hex colors
            if data.startswith('#'):
                hex_color = data[1:]
                if len(hex_color) == 6:
                    return Color(
                        int(hex_color[0:2], 16),
                        int(hex_color[2:4], 16),
                        int(hex_color[4:6], 16)
                    )
            raise SceneParseError(f"Cannot parse color from string: {data}")
        else:
            raise SceneParseError(f"Cannot parse Color from: {data}")

    def _parse_shading(self, obj_data: Dict[str, Any]) -> Dict[str, Any]:
        return {
            'color': self._parse_color(obj_data.get('color', [255, 255, 255])),
            'reflection': int(obj_data.get('reflection', NO_HIGHLIGHT)),
            'specular': float(obj_data.get('specular', 0.0)),
        }

    def _entries(self, section: str, data: Any) -> List[Dict[str, Any]]:
        """Check that a section is a list of mappings."""
        if not isinstance(data, list):
            raise SceneParseError(f"'{section}' must be a list, got: {data!r}")
        for entry in data:
            if not isinstance(entry, dict):
                raise SceneParseError(f"Each entry in '{section}' must be a mapping, got: {entry!r}")
        return data

    def _entry_type(self, entry: Dict[str, Any], default: str) -> str:
        entry_type = entry.get('type', default)
        if not isinstance(entry_type, str):
            raise SceneParseError(f"Entry type must be a string, got: {entry_type!r}")
        return entry_type.lower()

    def _parse_objects(self, objects_data: list) -> None:
        """Parse objects section."""
        for obj_data in self._entries('objects', objects_data):
            obj_type = self._entry_type(obj_data, 'sphere')

            if obj_type == 'sphere':
                center = self._parse_vec3(obj_data.get('center', [0, 0, 0]))
                radius = float(obj_data.get('radius', 1.0))
                self.objects.append(Sphere(center, radius, **self._parse_shading(obj_data)))

            elif obj_type == 'plane':
                point = self._parse_vec3(obj_data.get('point', [0, 0, 0]))
                normal = self._parse_vec3(obj_data.get('normal', [0, 1, 0]))
                self.objects.append(Plane(point, normal, **self._parse_shading(obj_data)))

            else:
                raise SceneParseError(f"Unknown object type: {obj_type}")

    def _parse_lights(self, lights_data: list) -> None:
        """Parse lights section."""
        for light_data in self._entries('lights', lights_data):
            light_type = self._entry_type(light_data, 'point')
            intensity = float(light_data.get('intensity', 1.0))

            if light_type == 'ambient':
                self.lights.append(AmbientLight(intensity))

            elif light_type == 'point':
                position = self._parse_vec3(light_data.get('position', [0, 0, 0]))
                self.lights.append(PointLight(intensity, position))

            elif light_type == 'directional':
                direction = self._parse_vec3(light_data.get('direction', [0, 1, 0]))
                self.lights.append(DirectionalLight(intensity, direction))

            else:
                raise SceneParseError(f"Unknown light type: {light_type}")

    def _parse_settings(self, settings_data: Dict[str, Any]) -> None:
        """Parse render settings section."""
        if not isinstance(settings_data, dict):
            raise SceneParseError(f"'render' must be a mapping, got: {settings_data!r}")
        defaults = RenderSettings()
        self.settings = RenderSettings(
            width=int(settings_data.get('width', defaults.width)),
            height=int(settings_data.get('height', defaults.height)),
            viewport_width=float(settings_data.get('viewport_width', defaults.viewport_width)),
            viewport_height=float(settings_data.get('viewport_height', defaults.viewport_height)),
            viewport_distance=float(settings_data.get('viewport_distance', defaults.viewport_distance)),
            eye=self._parse_vec3(settings_data.get('eye', [0, 0, 0])),
            recursion_depth=int(settings_data.get('recursion_depth', defaults.recursion_depth)),
            near_plane=float(settings_data.get('near_plane', defaults.near_plane))
        )


def load_scene(filepath: str) -> Tuple[Scene, List[Light], RenderSettings]:
    """Convenience function to load a scene file.

    Args:
        filepath: Path to the scene file

    Returns:
        Tuple of (scene, lights, settings)
    """
    parser = SceneParser()
    return parser.parse_file(filepath)


def parse_scene(data: Dict[str, Any]) -> Tuple[Scene, List[Light], RenderSettings]:
    """Convenience function to parse a scene from a dictionary.

    Args:
        data: Scene description dictionary

    Returns:
        Tuple of (scene, lights, settings)
    """
    parser = SceneParser()
    return parser.parse_dict(data)
