"""
Rays cast from the eye, toward lights and off mirrors.

Ray(t) = origin + t * direction
"""

from __future__ import annotations
from dataclasses import dataclass

from .vec3 import Vec3, Point3


@dataclass(frozen=True)
class Ray:
    """A half-line from origin along direction.

    The direction is not normalized: t counts multiples of its length, so a
    shadow ray aimed straight at a point light reaches the light at t = 1.

    A ray only holds references to its vectors. Vec3 is immutable, so the
    camera and tracer share the eye point and hit points between rays
    without copying. A ray is built for one query and dropped once the
    trace that made it returns.
    """

    origin: Point3
    direction: Vec3

    def at(self, t: float) -> Point3:
        """Point at parameter t along the ray."""
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin}, direction={self.direction})"
