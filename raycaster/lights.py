"""
Light sources and the lighting/shadow model.

Implements the light types:
- Ambient lights (constant contribution everywhere)
- Point lights (hard shadows, no falloff)
- Directional lights (sun)

Intensities are scalar weights that are summed, never renormalized.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional, Sequence
import math

from .vec3 import Vec3, Point3
from .ray import Ray
from .scene import Scene, HitRecord
from .shapes import EPSILON


class Light(ABC):
    """Abstract base class for light sources."""

    def __init__(self, intensity: float):
        if intensity < 0:
            raise ValueError(f"Light intensity must be non-negative, got {intensity}")
        self.intensity = float(intensity)

    @abstractmethod
    def direction_from(self, point: Point3) -> Optional[Vec3]:
        """Vector from a surface point toward the light.

        Returns:
            None for lights without a direction (ambient)
        """

    # Upper bound on t for the shadow ray along direction_from()
    shadow_t_max: float = math.inf


class AmbientLight(Light):
    """Constant light added to every surface, shadowed or not."""

    def direction_from(self, point: Point3) -> Optional[Vec3]:
        return None

    def __repr__(self) -> str:
        return f"AmbientLight(intensity={self.intensity})"


class PointLight(Light):
    """A point light source.

    The light direction is left un-normalized: it spans exactly the
    distance to the light, so the shadow ray stops at t = 1.0.
    """

    shadow_t_max = 1.0

    def __init__(self, intensity: float, position: Point3):
        """Create a point light.

        Args:
            intensity: Contribution weight
            position: Position of the light
        """
        super().__init__(intensity)
        self.position = position

    def direction_from(self, point: Point3) -> Optional[Vec3]:
        return self.position - point

    def __repr__(self) -> str:
        return f"PointLight(intensity={self.intensity}, position={self.position})"


class DirectionalLight(Light):
    """A directional light (like the sun).

    ``direction`` points from the surface toward the light.
    """

    shadow_t_max = math.inf

    def __init__(self, intensity: float, direction: Vec3):
        """Create a directional light.

        Args:
            intensity: Contribution weight
            direction: Direction toward the light
        """
        super().__init__(intensity)
        if direction.near_zero():
            raise ValueError("Directional light needs a non-zero direction")
        self.direction = direction

    def direction_from(self, point: Point3) -> Optional[Vec3]:
        return self.direction

    def __repr__(self) -> str:
        return f"DirectionalLight(intensity={self.intensity}, direction={self.direction})"


def is_in_shadow(scene: Scene, point: Point3, direction: Vec3, t_max: float) -> bool:
    """Check whether anything blocks the path from point along direction.

    Args:
        scene: Objects that may cast shadows
        point: Surface point being lit
        direction: Vector toward the light
        t_max: Exclusive upper bound in units of ``direction``
    """
    return scene.any_hit(Ray(point, direction), EPSILON, t_max)


def compute_lighting(scene: Scene, lights: Sequence[Light], ray: Ray, hit: HitRecord) -> float:
    """Compute the scalar light intensity at a hit point.

    Args:
        scene: Scene used for shadow tests
        lights: Light sources to sum
        ray: The ray that produced the hit
        hit: Nearest-hit result for the ray

    Returns:
        Sum of ambient, diffuse and specular contributions (unclamped)
    """
    obj = hit.obj
    point = ray.at(hit.t)
    normal = obj.normal(point)
    normal_length = normal.length()
    view = -ray.direction

    total = 0.0
    for light in lights:
        light_dir = light.direction_from(point)
        if light_dir is None:
            total += light.intensity
            continue

        # Lights behind the surface contribute nothing
        n_dot_l = normal.dot(light_dir)
        if not n_dot_l > 0:
            continue

        if is_in_shadow(scene, point, light_dir, light.shadow_t_max):
            continue

        total += light.intensity * n_dot_l / (normal_length * light_dir.length())

        if obj.has_highlight:
            reflected = (-light_dir).reflect(normal)
            r_dot_v = reflected.dot(view)
            if r_dot_v > 0:
                cosine = r_dot_v / (reflected.length() * view.length())
                total += light.intensity * cosine ** obj.reflection

    return total
