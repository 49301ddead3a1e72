"""
raycaster - A Python Whitted-style Ray Tracer

A small recursive ray caster with support for:
- Spheres and planes over a background color
- Ambient, point and directional lights with hard shadows
- Phong highlights and bounded mirror reflections
- Rotated-grid 4-sample anti-aliasing
- YAML/JSON scene descriptions and PNG output
"""

__version__ = "0.1.0"
__author__ = "raycaster Team"

from .vec3 import Vec3, Point3
from .color import Color, average_colors, clamp_channel
from .ray import Ray
from .shapes import Intersectable, Sphere, Plane, Background, EPSILON, NO_HIGHLIGHT
from .scene import Scene, HitRecord
from .lights import Light, AmbientLight, PointLight, DirectionalLight, compute_lighting, is_in_shadow
from .tracer import trace_ray
from .camera import Camera
from .renderer import Renderer, RenderSettings, ROTATED_GRID_JITTER
from .scene_parser import SceneParser, SceneParseError, load_scene, parse_scene
