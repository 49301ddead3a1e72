"""
Vector3 class for 3D math operations.

Vec3 is the fundamental building block of the ray tracer, used for:
- Points in 3D space
- Direction vectors (not necessarily unit length)

Vectors are immutable: every operation returns a new value.
"""

from __future__ import annotations
from typing import Iterator, Union
import numpy as np


class Vec3:
    """An immutable 3D vector.

    Uses numpy internally for the arithmetic while providing
    a clean, Pythonic API.
    """

    __slots__ = ('_data',)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._data = np.array([x, y, z], dtype=np.float64)
        self._data.flags.writeable = False

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vec3:
        """Create Vec3 from numpy array."""
        v = cls.__new__(cls)
        v._data = np.array(arr, dtype=np.float64)
        v._data.flags.writeable = False
        return v

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    def __repr__(self) -> str:
        return f"Vec3({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.allclose(self._data, other._data))

    # Equality is approximate, so no hash can agree with it
    __hash__ = None

    def __iter__(self) -> Iterator[float]:
        return (float(c) for c in self._data)

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __neg__(self) -> Vec3:
        return Vec3.from_array(-self._data)

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3.from_array(self._data + other._data)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3.from_array(self._data - other._data)

    def __mul__(self, k: float) -> Vec3:
        return Vec3.from_array(self._data * k)

    def __rmul__(self, k: float) -> Vec3:
        return Vec3.from_array(k * self._data)

    def __truediv__(self, k: Union[float, int]) -> Vec3:
        # Division by zero is the caller's responsibility.
        return Vec3.from_array(self._data / k)

    def length(self) -> float:
        """Return the magnitude (length) of the vector."""
        return float(np.sqrt(self.dot(self)))

    def length_squared(self) -> float:
        """Return the squared magnitude (avoids sqrt for comparisons)."""
        return self.dot(self)

    def normalize(self) -> Vec3:
        """Return a unit vector in the same direction."""
        length = self.length()
        if length == 0:
            return Vec3(0, 0, 0)
        return self / length

    def dot(self, other: Vec3) -> float:
        """Compute dot product with another vector."""
        return float(np.dot(self._data, other._data))

    def reflect(self, normal: Vec3) -> Vec3:
        """Reflect this vector around the given unit normal.

        For an incoming direction D this is ``2*dot(N, -D)*N - (-D)``.
        """
        return self - normal * (2 * self.dot(normal))

    def near_zero(self, epsilon: float = 1e-8) -> bool:
        """Check if vector is close to zero in all dimensions."""
        return bool(np.all(np.abs(self._data) < epsilon))

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()


# Convenience type alias
Point3 = Vec3
