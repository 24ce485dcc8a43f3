"""
Materials system.

The material set is closed: diffuse (Lambertian), metal and dielectric.
A Material is a small frozen value tagged with its kind, and a single
``scatter`` function dispatches on that tag.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TYPE_CHECKING
import math

import numpy as np

from .vec3 import Vec3, Color, random_double
from .ray import Ray

if TYPE_CHECKING:
    from .shapes import HitRecord


class MaterialKind(Enum):
    """Surface response variants."""
    DIFFUSE = "diffuse"
    METAL = "metal"
    DIELECTRIC = "dielectric"


@dataclass(frozen=True)
class Material:
    """A stateless scattering policy.

    Attributes:
        kind: Which scattering model applies
        albedo: Fractional colour reflectance (diffuse and metal)
        fuzz: Metal roughness, expected in [0, 1]
        refraction_index: Index of refraction (dielectric)
    """
    kind: MaterialKind
    albedo: Color = Color(1.0, 1.0, 1.0)
    fuzz: float = 0.0
    refraction_index: float = 1.0

    @classmethod
    def diffuse(cls, albedo: Color) -> Material:
        """Create a Lambertian (ideal matte) material."""
        return cls(MaterialKind.DIFFUSE, albedo=albedo)

    @classmethod
    def metal(cls, albedo: Color, fuzz: float = 0.0) -> Material:
        """Create a metal material.

        Args:
            albedo: The reflection color
            fuzz: Surface roughness (0 = mirror, 1 = very rough). Expected
                in [0, 1]; stored as given.
        """
        return cls(MaterialKind.METAL, albedo=albedo, fuzz=fuzz)

    @classmethod
    def dielectric(cls, refraction_index: float = 1.5) -> Material:
        """Create a dielectric material.

        Args:
            refraction_index: 1.0 = air, 1.5 = glass, 2.4 = diamond
        """
        return cls(MaterialKind.DIELECTRIC, refraction_index=refraction_index)

    def __repr__(self) -> str:
        if self.kind is MaterialKind.DIFFUSE:
            return f"Material.diffuse({self.albedo!r})"
        if self.kind is MaterialKind.METAL:
            return f"Material.metal({self.albedo!r}, fuzz={self.fuzz})"
        return f"Material.dielectric({self.refraction_index})"


@dataclass
class ScatterResult:
    """Result of a material scatter operation."""
    scattered_ray: Ray
    attenuation: Color


WHITE = Color(1.0, 1.0, 1.0)


def reflectance(cosine: float, ref_idx: float) -> float:
    """Schlick's approximation for reflectance."""
    r0 = (1 - ref_idx) / (1 + ref_idx)
    r0 = r0 * r0
    return r0 + (1 - r0) * pow(1 - cosine, 5)


def scatter(
    material: Material,
    ray_in: Ray,
    hit: HitRecord,
    rng: Optional[np.random.Generator] = None
) -> Optional[ScatterResult]:
    """Compute the scattered ray and attenuation for a surface hit.

    Args:
        material: The material of the struck surface
        ray_in: The incoming ray
        hit: The intersection record
        rng: Random source

    Returns:
        ScatterResult if the ray scatters, None if it is absorbed
    """
    kind = material.kind
    if kind is MaterialKind.DIFFUSE:
        return _scatter_diffuse(material, hit, rng)
    elif kind is MaterialKind.METAL:
        return _scatter_metal(material, ray_in, hit, rng)
    elif kind is MaterialKind.DIELECTRIC:
        return _scatter_dielectric(material, ray_in, hit, rng)
    raise ValueError(f"Unknown material kind: {kind}")


def _scatter_diffuse(material: Material, hit: HitRecord, rng) -> ScatterResult:
    scatter_direction = hit.normal + Vec3.random_unit_vector(rng)

    # Catch degenerate scatter direction
    if scatter_direction.near_zero():
        scatter_direction = hit.normal

    return ScatterResult(
        scattered_ray=Ray(hit.point, scatter_direction),
        attenuation=material.albedo
    )


def _scatter_metal(material: Material, ray_in: Ray, hit: HitRecord, rng) -> Optional[ScatterResult]:
    reflected = ray_in.direction.reflect(hit.normal.normalize())

    if material.fuzz != 0:
        reflected = reflected + Vec3.random_in_unit_sphere(rng) * material.fuzz

    # Only scatter if reflection is in the correct hemisphere
    if reflected.dot(hit.normal) > 0:
        return ScatterResult(
            scattered_ray=Ray(hit.point, reflected),
            attenuation=material.albedo
        )
    return None


def _scatter_dielectric(material: Material, ray_in: Ray, hit: HitRecord, rng) -> ScatterResult:
    # Determine refraction ratio based on whether we're entering or exiting
    ior = material.refraction_index
    refraction_ratio = 1.0 / ior if hit.front_face else ior

    unit_direction = ray_in.direction.normalize()
    cos_theta = min(-unit_direction.dot(hit.normal), 1.0)
    sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

    cannot_refract = refraction_ratio * sin_theta > 1.0

    if cannot_refract or reflectance(cos_theta, ior) > random_double(rng):
        direction = unit_direction.reflect(hit.normal)
    else:
        direction = unit_direction.refract(hit.normal, refraction_ratio)

    return ScatterResult(
        scattered_ray=Ray(hit.point, direction),
        attenuation=WHITE
    )
