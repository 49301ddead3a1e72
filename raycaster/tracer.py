"""
Recursive Whitted-style ray tracing.

A ray is shaded from its nearest hit and, for mirror-like surfaces,
blended with the color seen along the reflected ray. The depth counter
is a hard cap on the number of reflections.
"""

from __future__ import annotations
from typing import Sequence

from .ray import Ray
from .color import Color
from .scene import Scene
from .lights import Light, compute_lighting
from .shapes import EPSILON

DEFAULT_RECURSION_DEPTH = 4


def trace_ray(
    scene: Scene,
    lights: Sequence[Light],
    ray: Ray,
    depth: int = DEFAULT_RECURSION_DEPTH,
    t_min: float = EPSILON
) -> Color:
    """Compute the color seen along a ray.

    Args:
        scene: The objects to trace against
        lights: Light sources
        ray: The ray to trace
        depth: Remaining number of reflections
        t_min: Near bound for the first hit (the camera's near plane)

    Returns:
        The 8-bit color for this ray
    """
    hit = scene.closest_hit(ray, t_min)
    obj = hit.obj

    local_color = obj.color.scaled(compute_lighting(scene, lights, ray, hit))

    if obj.specular <= 0 or depth <= 0:
        return local_color

    point = ray.at(hit.t)
    reflected_dir = ray.direction.reflect(obj.normal(point))
    reflected_color = trace_ray(scene, lights, Ray(point, reflected_dir), depth - 1)

    return local_color.blend(reflected_color, obj.specular)
