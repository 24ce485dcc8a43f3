"""
Path integrator.

Follows a camera ray through the scene, multiplying in the attenuation of
every surface it scatters off, until it escapes to the sky, is absorbed, or
runs out of bounces.
"""

from __future__ import annotations
from typing import Optional

import numpy as np

from .vec3 import Color
from .ray import Ray
from .shapes import Hittable
from .materials import scatter

# Offset that keeps scattered rays from re-hitting their own surface
T_MIN = 0.001

BLACK = Color(0.0, 0.0, 0.0)
SKY_BOTTOM = Color(1.0, 1.0, 1.0)
SKY_TOP = Color(0.5, 0.7, 1.0)


def sky_color(ray: Ray) -> Color:
    """Generate a sky gradient background.

    White when looking straight down, sky blue straight up, linear in the
    normalized direction's y component.
    """
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return SKY_BOTTOM * (1.0 - t) + SKY_TOP * t


def trace(
    scene: Hittable,
    ray: Ray,
    depth: int,
    rng: Optional[np.random.Generator] = None
) -> Color:
    """Compute the colour carried back along a ray.

    Args:
        scene: The scene to trace against
        ray: The ray to trace
        depth: Maximum number of surface interactions
        rng: Random source for scattering

    Returns:
        The computed color for this ray
    """
    throughput = Color(1.0, 1.0, 1.0)

    while depth > 0:
        hit_record = scene.hit(ray, T_MIN, float('inf'))

        if hit_record is None:
            return throughput * sky_color(ray)

        result = scatter(hit_record.material, ray, hit_record, rng)
        if result is None:
            return BLACK

        throughput = throughput * result.attenuation
        ray = result.scattered_ray
        depth -= 1

    return BLACK
