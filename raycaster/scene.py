"""
Scene container and the nearest-hit search.

The scene is an ordered, read-only list of intersectable objects. The
first Background in the list supplies the clear color and is the default
result of the nearest-hit search.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional
import math

from .ray import Ray
from .color import BLACK
from .shapes import Intersectable, Background, EPSILON


@dataclass(frozen=True)
class HitRecord:
    """The closest object hit so far and the ray parameter of the hit.

    When ``found`` is False the object is the scene's Background and
    ``t`` is 0.0.
    """
    obj: Intersectable
    t: float
    found: bool = True


class Scene:
    """A linear-scan collection of intersectable objects."""

    def __init__(self, objects: Optional[Iterable[Intersectable]] = None):
        self._objects: tuple[Intersectable, ...] = tuple(objects) if objects is not None else ()
        backgrounds = [obj for obj in self._objects if isinstance(obj, Background)]
        self.background: Background = backgrounds[0] if backgrounds else Background(BLACK)

    @property
    def objects(self) -> tuple[Intersectable, ...]:
        return self._objects

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[Intersectable]:
        return iter(self._objects)

    def closest_hit(self, ray: Ray, t_min: float = EPSILON, t_max: float = math.inf) -> HitRecord:
        """Find the object with the smallest t inside ``(t_min, t_max)``.

        Returns the Background with ``found=False`` when nothing is hit.
        """
        closest: Optional[Intersectable] = None
        closest_t = t_max

        for obj in self._objects:
            hit, t = obj.intersect(ray, t_min, closest_t)
            if hit and t < closest_t:
                closest = obj
                closest_t = t

        if closest is None:
            return HitRecord(self.background, 0.0, found=False)
        return HitRecord(closest, closest_t)

    def any_hit(self, ray: Ray, t_min: float = EPSILON, t_max: float = math.inf) -> bool:
        """Return True as soon as any object is hit inside the window."""
        return any(obj.intersect(ray, t_min, t_max)[0] for obj in self._objects)

    def __repr__(self) -> str:
        return f"Scene({len(self._objects)} objects, background={self.background.color})"
