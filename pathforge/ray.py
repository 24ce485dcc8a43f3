"""
Ray class for representing rays in 3D space.

A ray is defined by an origin point and a direction vector.
Ray(t) = origin + t * direction
"""

from __future__ import annotations
from .vec3 import Vec3, Point3


class Ray:
    """A half-line with origin and direction.

    The parametric form is: P(t) = origin + t * direction
    where t >= 0 represents points along the ray. Rays are immutable.
    """

    __slots__ = ('_origin', '_direction')

    def __init__(self, origin: Point3, direction: Vec3):
        """Create a ray with given origin and direction.

        Args:
            origin: The starting point of the ray
            direction: The direction vector (need not be normalized)
        """
        object.__setattr__(self, '_origin', origin)
        object.__setattr__(self, '_direction', direction)

    @property
    def origin(self) -> Point3:
        return self._origin

    @property
    def direction(self) -> Vec3:
        return self._direction

    def __setattr__(self, name, value):
        raise AttributeError(f"Ray is immutable, cannot set {name!r}")

    def at(self, t: float) -> Point3:
        """Get the point along the ray at parameter t.

        Args:
            t: The parameter value (distance if direction is normalized)

        Returns:
            The point at origin + t * direction
        """
        return self._origin + self._direction * t

    def __repr__(self) -> str:
        return f"Ray(origin={self._origin}, direction={self._direction})"
