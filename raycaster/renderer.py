"""
Renderer module - the pixel loop of the ray tracer.

Implements:
- Rotated-grid 4-sample anti-aliasing
- Row-by-row rendering with progress reporting
- PNG output through Pillow
"""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass, field
from typing import Optional, Callable, Sequence, Tuple
import numpy as np

from .vec3 import Point3
from .color import Color, average_colors
from .camera import Camera
from .scene import Scene
from .lights import Light
from .shapes import EPSILON
from .tracer import trace_ray, DEFAULT_RECURSION_DEPTH

logger = logging.getLogger(__name__)

# Sub-pixel offsets in pixel units (rotated grid)
ROTATED_GRID_JITTER: Tuple[Tuple[float, float], ...] = (
    (0.125, 0.375),
    (0.375, -0.125),
    (-0.125, -0.375),
    (-0.375, 0.125),
)


@dataclass(frozen=True)
class RenderSettings:
    """Configuration for the renderer."""
    width: int = 500
    height: int = 500
    viewport_width: float = 1.0
    viewport_height: float = 1.0
    viewport_distance: float = 1.0
    eye: Point3 = field(default_factory=lambda: Point3(0, 0, 0))
    recursion_depth: int = DEFAULT_RECURSION_DEPTH
    near_plane: float = EPSILON
    jitter: Tuple[Tuple[float, float], ...] = ROTATED_GRID_JITTER

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if self.viewport_width <= 0 or self.viewport_height <= 0 or self.viewport_distance <= 0:
            raise ValueError("Viewport dimensions and distance must be positive")
        if self.recursion_depth < 0:
            raise ValueError(f"recursion_depth must be non-negative, got {self.recursion_depth}")
        if self.near_plane < 0:
            raise ValueError(f"near_plane must be non-negative, got {self.near_plane}")
        if not self.jitter:
            raise ValueError("At least one jitter offset is required")


class Renderer:
    """Single-threaded supersampling renderer."""

    def __init__(self, scene: Scene, lights: Sequence[Light], settings: Optional[RenderSettings] = None):
        """Create a renderer.

        Args:
            scene: The objects to render
            lights: Light sources
            settings: Render configuration (uses defaults if None)
        """
        self.scene = scene
        self.lights = tuple(lights)
        self.settings = settings if settings else RenderSettings()
        self.camera = Camera.from_settings(self.settings)
        self._progress_callback: Optional[Callable[[float], None]] = None

    def set_progress_callback(self, callback: Callable[[float], None]) -> None:
        """Set a callback function for progress updates.

        Args:
            callback: Function that takes progress as float (0.0 to 1.0)
        """
        self._progress_callback = callback

    def render_pixel(self, x: int, y: int) -> Color:
        """Trace one jittered ray per sub-pixel offset and average them.

        Args:
            x: Column, 0 at the left edge
            y: Row, 0 at the top edge
        """
        settings = self.settings
        samples = []
        for dx, dy in settings.jitter:
            ray = self.camera.get_ray(x + dx, y + dy)
            samples.append(trace_ray(
                self.scene, self.lights, ray, settings.recursion_depth, settings.near_plane
            ))
        return average_colors(samples)

    def render(self) -> np.ndarray:
        """Render every pixel and return the image.

        Returns:
            uint8 image array of shape (height, width, 3)
        """
        width = self.settings.width
        height = self.settings.height
        image = np.zeros((height, width, 3), dtype=np.uint8)

        logger.info("Rendering %dx%d, %d objects, %d lights",
                    width, height, len(self.scene), len(self.lights))
        start = time.perf_counter()

        for y in range(height):
            for x in range(width):
                image[y, x] = self.render_pixel(x, y).to_tuple()

            if self._progress_callback:
                self._progress_callback((y + 1) / height)

        logger.info("Rendered in %.2f s", time.perf_counter() - start)
        return image

    def save_image(self, image: np.ndarray, filename: str) -> None:
        """Save image to file.

        Args:
            image: uint8 image array
            filename: Output filename (extension determines format)
        """
        from PIL import Image as PILImage

        pil_image = PILImage.fromarray(np.ascontiguousarray(image, dtype=np.uint8))
        pil_image.save(filename)
        logger.info("Saved %s", filename)
