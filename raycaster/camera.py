"""
Camera module for generating primary rays.

The eye sits at a fixed point looking along +z. A rectangular viewport
of the configured size is placed at the viewport distance, and every
image pixel maps onto a point of that viewport.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from .vec3 import Vec3, Point3
from .ray import Ray

if TYPE_CHECKING:
    from .renderer import RenderSettings


class Camera:
    """A pinhole camera with an axis-aligned viewport."""

    def __init__(
        self,
        image_width: int,
        image_height: int,
        viewport_width: float = 1.0,
        viewport_height: float = 1.0,
        viewport_distance: float = 1.0,
        eye: Point3 = Point3(0, 0, 0)
    ):
        """Create a camera.

        Args:
            image_width: Image width in pixels
            image_height: Image height in pixels
            viewport_width: Width of the viewport in scene units
            viewport_height: Height of the viewport in scene units
            viewport_distance: Distance from the eye to the viewport
            eye: Camera position in world space
        """
        self.image_width = image_width
        self.image_height = image_height
        self.viewport_width = viewport_width
        self.viewport_height = viewport_height
        self.viewport_distance = viewport_distance
        self.eye = eye

    @classmethod
    def from_settings(cls, settings: RenderSettings) -> Camera:
        return cls(
            image_width=settings.width,
            image_height=settings.height,
            viewport_width=settings.viewport_width,
            viewport_height=settings.viewport_height,
            viewport_distance=settings.viewport_distance,
            eye=settings.eye
        )

    def to_viewport(self, x: float, y: float) -> Vec3:
        """Map image coordinates to a point on the viewport.

        Args:
            x: Column, 0 at the left edge
            y: Row, 0 at the top edge

        Returns:
            Viewport point relative to the eye
        """
        canvas_x = x - self.image_width / 2
        canvas_y = self.image_height / 2 - y
        return Vec3(
            canvas_x * self.viewport_width / self.image_width,
            canvas_y * self.viewport_height / self.image_height,
            self.viewport_distance
        )

    def get_ray(self, x: float, y: float) -> Ray:
        """Generate a ray through image coordinates (x, y).

        The direction is left un-normalized, so t = 1 lies on the viewport.
        """
        return Ray(self.eye, self.to_viewport(x, y))

    def __repr__(self) -> str:
        return (f"Camera(eye={self.eye}, viewport={self.viewport_width}x{self.viewport_height}"
                f"@{self.viewport_distance})")
