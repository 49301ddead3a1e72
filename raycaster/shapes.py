"""
Geometric primitives for the ray tracer.

Each primitive implements the Intersectable protocol: an ``intersect``
test returning ``(hit, t)``, a surface ``normal``, and the shading
parameters used by the lighting model and the recursive tracer.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Tuple
import math

from .vec3 import Vec3, Point3
from .ray import Ray
from .color import Color

# Smallest ray parameter accepted by default, prevents shadow acne.
EPSILON = 0.001

# Rays closer than this to parallel with a plane never hit it.
PARALLEL_EPSILON = 1e-4

# Reflection exponent meaning "no specular highlight".
NO_HIGHLIGHT = -1

MISS: Tuple[bool, float] = (False, 0.0)


class Intersectable(ABC):
    """Abstract base class for everything a ray can hit.

    Attributes:
        color: Base color of the surface
        reflection: Phong exponent, or NO_HIGHLIGHT for a matte surface
        specular: Fraction of the final color taken from the mirror reflection
    """

    def __init__(self, color: Color, reflection: int = NO_HIGHLIGHT, specular: float = 0.0):
        if reflection < NO_HIGHLIGHT:
            raise ValueError(f"reflection must be >= {NO_HIGHLIGHT}, got {reflection}")
        if not 0.0 <= specular <= 1.0:
            raise ValueError(f"specular must be within [0, 1], got {specular}")
        self.color = color
        self.reflection = int(reflection)
        self.specular = float(specular)

    @abstractmethod
    def intersect(self, ray: Ray, t_min: float = EPSILON, t_max: float = math.inf) -> Tuple[bool, float]:
        """Test if ray intersects this object.

        Args:
            ray: The ray to test
            t_min: Exclusive lower bound on t (avoids self-intersection)
            t_max: Exclusive upper bound on t

        Returns:
            ``(True, t)`` for the nearest t inside the window,
            ``(False, 0.0)`` otherwise
        """

    @abstractmethod
    def normal(self, point: Point3) -> Vec3:
        """Surface normal at a point on the surface."""

    @property
    def has_highlight(self) -> bool:
        return self.reflection != NO_HIGHLIGHT


class Sphere(Intersectable):
    """A sphere defined by center and radius."""

    def __init__(
        self,
        center: Point3,
        radius: float,
        color: Color,
        reflection: int = NO_HIGHLIGHT,
        specular: float = 0.0
    ):
        """Create a sphere.

        Args:
            center: Center point of the sphere
            radius: Radius of the sphere
            color: Base color
            reflection: Phong exponent (NO_HIGHLIGHT disables highlights)
            specular: Mirror reflectivity in [0, 1]
        """
        super().__init__(color, reflection, specular)
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = radius

    def intersect(self, ray: Ray, t_min: float = EPSILON, t_max: float = math.inf) -> Tuple[bool, float]:
        """Test ray-sphere intersection using the quadratic formula.

        The equation (P-C)·(P-C) = r² where P = ray.at(t)
        expands to: t²(d·d) + 2t(d·(O-C)) + (O-C)·(O-C) - r² = 0.
        The direction is not assumed to be unit length.
        """
        oc = ray.origin - self.center
        k1 = ray.direction.dot(ray.direction)
        k2 = 2.0 * oc.dot(ray.direction)
        k3 = oc.dot(oc) - self.radius * self.radius

        discriminant = k2 * k2 - 4.0 * k1 * k3
        if discriminant < 0 or k1 == 0:
            return MISS

        sqrtd = math.sqrt(discriminant)

        # Nearest root first, then the far one
        for root in ((-k2 - sqrtd) / (2.0 * k1), (-k2 + sqrtd) / (2.0 * k1)):
            if t_min < root < t_max:
                return True, root

        return MISS

    def normal(self, point: Point3) -> Vec3:
        return (point - self.center).normalize()

    def __repr__(self) -> str:
        return f"Sphere(center={self.center}, radius={self.radius})"


class Plane(Intersectable):
    """An infinite plane defined by a point and normal."""

    def __init__(
        self,
        point: Point3,
        normal: Vec3,
        color: Color,
        reflection: int = NO_HIGHLIGHT,
        specular: float = 0.0
    ):
        """Create a plane.

        Args:
            point: Any point on the plane
            normal: The plane's normal vector (will be normalized)
            color: Base color
            reflection: Phong exponent (NO_HIGHLIGHT disables highlights)
            specular: Mirror reflectivity in [0, 1]
        """
        super().__init__(color, reflection, specular)
        if normal.near_zero():
            raise ValueError("Plane normal must be non-zero")
        self.point = point
        self._normal = normal.normalize()

    def intersect(self, ray: Ray, t_min: float = EPSILON, t_max: float = math.inf) -> Tuple[bool, float]:
        """Test ray-plane intersection."""
        denom = self._normal.dot(ray.direction)

        # Ray is (nearly) parallel to plane
        if abs(denom) <= PARALLEL_EPSILON:
            return MISS

        t = (self.point - ray.origin).dot(self._normal) / denom

        if t_min < t < t_max:
            return True, t
        return MISS

    def normal(self, point: Point3) -> Vec3:
        return self._normal

    def __repr__(self) -> str:
        return f"Plane(point={self.point}, normal={self._normal})"


class Background(Intersectable):
    """The far-field sentinel: never hit, only supplies the clear color."""

    def __init__(self, color: Color, reflection: int = 0, specular: float = 0.0):
        if specular != 0.0:
            raise ValueError(f"Background cannot be reflective, got specular={specular}")
        super().__init__(color, reflection, specular)

    def intersect(self, ray: Ray, t_min: float = EPSILON, t_max: float = math.inf) -> Tuple[bool, float]:
        return MISS

    def normal(self, point: Point3) -> Vec3:
        return Vec3(0, 0, 0)

    def __repr__(self) -> str:
        return f"Background(color={self.color})"
