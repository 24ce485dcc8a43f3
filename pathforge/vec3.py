"""
Vector3 class for 3D math operations.

This is the fundamental building block of the path tracer, used for:
- Points in 3D space
- Direction vectors
- RGB color values

Random sampling helpers take an optional ``rng`` (a numpy Generator). When
none is given the module-level generator is used, see ``default_rng``.
"""

from __future__ import annotations
import math
from typing import Optional, Union
import numpy as np

NEAR_ZERO_EPSILON = 1e-8

_default_rng: np.random.Generator = np.random.default_rng()


def default_rng() -> np.random.Generator:
    """Return the process-wide random source."""
    return _default_rng


def seed(value: Optional[int]) -> None:
    """Reseed the process-wide random source."""
    global _default_rng
    _default_rng = np.random.default_rng(value)


def _resolve(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else _default_rng


def random_double(
    rng: Optional[np.random.Generator] = None,
    min_val: float = 0.0,
    max_val: float = 1.0
) -> float:
    """Uniform draw in [min_val, max_val)."""
    r = _resolve(rng)
    if min_val == 0.0 and max_val == 1.0:
        return float(r.random())
    return float(r.uniform(min_val, max_val))


class Vec3:
    """A 3D vector class supporting common vector operations.

    Uses numpy internally for efficient computation while providing
    a clean, Pythonic API. All operators return new vectors.
    """

    __slots__ = ('_data',)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._data = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vec3:
        """Create Vec3 from numpy array."""
        v = cls.__new__(cls)
        v._data = np.asarray(arr, dtype=np.float64)
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

    # Aliases for color operations
    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def __repr__(self) -> str:
        return f"Vec3({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"

    def __str__(self) -> str:
        return f"{self.x} {self.y} {self.z}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.allclose(self._data, other._data))

    def __hash__(self) -> int:
        return hash(tuple(self._data))

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __neg__(self) -> Vec3:
        return Vec3.from_array(-self._data)

    def __add__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3.from_array(self._data + other._data)
        return Vec3.from_array(self._data + other)

    def __radd__(self, other: float) -> Vec3:
        return Vec3.from_array(other + self._data)

    def __sub__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3.from_array(self._data - other._data)
        return Vec3.from_array(self._data - other)

    def __rsub__(self, other: float) -> Vec3:
        return Vec3.from_array(other - self._data)

    def __mul__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3.from_array(self._data * other._data)
        return Vec3.from_array(self._data * other)

    def __rmul__(self, other: float) -> Vec3:
        return Vec3.from_array(other * self._data)

    def __truediv__(self, other: float) -> Vec3:
        with np.errstate(divide='ignore', invalid='ignore'):
            return Vec3.from_array(self._data / other)

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def length(self) -> float:
        """Return the magnitude (length) of the vector."""
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        """Return the squared magnitude (avoids sqrt for comparisons)."""
        return float(np.dot(self._data, self._data))

    def normalize(self) -> Vec3:
        """Return a unit vector in the same direction.

        The vector must have non-zero length. A zero vector yields NaN
        components; no error is raised.
        """
        return self / self.length()

    def dot(self, other: Vec3) -> float:
        """Compute dot product with another vector."""
        return float(np.dot(self._data, other._data))

    def cross(self, other: Vec3) -> Vec3:
        """Compute cross product with another vector."""
        a = self._data
        b = other._data
        return Vec3(
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0]
        )

    def reflect(self, normal: Vec3) -> Vec3:
        """Reflect this vector around the given normal."""
        return self - normal * 2 * self.dot(normal)

    def refract(self, normal: Vec3, eta_ratio: float) -> Vec3:
        """Refract this vector through a surface using Snell's law.

        This vector must be unit length and ``normal`` must point against
        it. Total internal reflection is not detected here; callers check
        ``eta_ratio * sin_theta > 1`` before refracting.

        Args:
            normal: Unit surface normal facing the incoming vector
            eta_ratio: Ratio of refractive indices (n1/n2)

        Returns:
            Refracted direction vector
        """
        cos_theta = min(-self.dot(normal), 1.0)
        r_out_perp = (self + normal * cos_theta) * eta_ratio
        r_out_parallel = normal * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
        return r_out_perp + r_out_parallel

    def near_zero(self, epsilon: float = NEAR_ZERO_EPSILON) -> bool:
        """Check if vector is close to zero in all dimensions."""
        return bool(np.all(np.abs(self._data) < epsilon))

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()

    @staticmethod
    def random(
        min_val: float = 0.0,
        max_val: float = 1.0,
        rng: Optional[np.random.Generator] = None
    ) -> Vec3:
        """Generate a random vector with components in [min_val, max_val)."""
        return Vec3.from_array(_resolve(rng).uniform(min_val, max_val, 3))

    @staticmethod
    def random_in_unit_sphere(rng: Optional[np.random.Generator] = None) -> Vec3:
        """Generate a random point inside the unit sphere."""
        while True:
            p = Vec3.random(-1, 1, rng)
            if p.length_squared() < 1:
                return p

    @staticmethod
    def random_unit_vector(rng: Optional[np.random.Generator] = None) -> Vec3:
        """Generate a random unit vector (uniform on sphere surface)."""
        while True:
            p = Vec3.random(-1, 1, rng)
            len_sq = p.length_squared()
            # Reject tiny vectors that would normalize badly
            if 1e-160 < len_sq < 1:
                return p / math.sqrt(len_sq)

    @staticmethod
    def random_in_unit_disk(rng: Optional[np.random.Generator] = None) -> Vec3:
        """Generate a random point inside the unit disk (z=0)."""
        r = _resolve(rng)
        while True:
            x, y = r.uniform(-1, 1, 2)
            if x * x + y * y < 1:
                return Vec3(x, y, 0)


# Convenience type aliases
Point3 = Vec3
Color = Vec3
