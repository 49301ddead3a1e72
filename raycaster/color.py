"""
8-bit RGB colors.

Colors are produced by scaling an object's base color by a light
intensity. Channel values are always clamped to [0, 255], never wrapped.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator

CHANNEL_MAX = 255


def clamp_channel(value: float) -> int:
    """Truncate a channel value to an int and clamp it to [0, 255]."""
    if value != value:  # NaN
        return 0
    if value >= CHANNEL_MAX:
        return CHANNEL_MAX
    if value <= 0:
        return 0
    return int(value)


@dataclass(frozen=True)
class Color:
    """An RGB color with 8-bit channels."""
    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self):
        for name in ('r', 'g', 'b'):
            value = getattr(self, name)
            if not 0 <= value <= CHANNEL_MAX:
                raise ValueError(f"Color channel {name}={value} outside [0, {CHANNEL_MAX}]")

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b))

    @classmethod
    def from_floats(cls, r: float, g: float, b: float) -> Color:
        """Build a color from arbitrary channel values, clamping each."""
        return cls(clamp_channel(r), clamp_channel(g), clamp_channel(b))

    def scaled(self, intensity: float) -> Color:
        """Scale every channel by a light intensity.

        The intensity is unbounded, so channels saturate at 255.
        """
        return Color.from_floats(self.r * intensity, self.g * intensity, self.b * intensity)

    def blend(self, other: Color, weight: float) -> Color:
        """Mix ``self * (1 - weight) + other * weight`` per channel.

        Args:
            other: The color being mixed in (the reflected color)
            weight: Fraction of the result taken from ``other``
        """
        keep = 1.0 - weight
        return Color.from_floats(
            self.r * keep + other.r * weight,
            self.g * keep + other.g * weight,
            self.b * keep + other.b * weight,
        )

    def to_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


def average_colors(colors: Iterable[Color]) -> Color:
    """Average colors channel-wise with integer floor division.

    Channels are summed as plain ints, so the sum cannot overflow.
    """
    colors = list(colors)
    if not colors:
        raise ValueError("Cannot average an empty sequence of colors")
    count = len(colors)
    r = sum(c.r for c in colors) // count
    g = sum(c.g for c in colors) // count
    b = sum(c.b for c in colors) // count
    return Color.from_floats(r, g, b)


BLACK = Color(0, 0, 0)
