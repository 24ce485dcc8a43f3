"""
Geometric shapes for the path tracer.

Spheres are the only primitive. A Scene is a flat list of spheres plus the
table of materials they refer to; every query scans all spheres.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Optional, Union
import math

from .vec3 import Vec3, Point3
from .ray import Ray
from .materials import Material


@dataclass
class HitRecord:
    """Stores information about a ray-object intersection.

    Attributes:
        point: The intersection point in world space
        normal: The surface normal at the intersection (always points against ray)
        t: The ray parameter at intersection
        front_face: True if ray hit from outside the object
        material_index: Index into the owning scene's material table, or -1
        material: The material at the hit point, when resolved
    """
    point: Point3
    normal: Vec3
    t: float
    front_face: bool
    material_index: int = -1
    material: Optional[Material] = None

    def set_face_normal(self, ray: Ray, outward_normal: Vec3) -> None:
        """Set the normal to always point against the ray direction.

        Args:
            ray: The incoming ray
            outward_normal: The geometric normal pointing outward from surface
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Abstract base class for all objects that can be hit by rays."""

    @abstractmethod
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Test if ray intersects this object.

        Args:
            ray: The ray to test
            t_min: Minimum t value to consider (avoid self-intersection)
            t_max: Maximum t value to consider

        Returns:
            HitRecord if intersection found, None otherwise
        """
        pass


class Sphere(Hittable):
    """A sphere defined by center and radius.

    ``material`` is either a Material or an index into a scene's material
    table. Scene.add_sphere converts the former into the latter.
    """

    def __init__(self, center: Point3, radius: float, material: Union[Material, int]):
        """Create a sphere.

        Args:
            center: Center point of the sphere
            radius: Radius of the sphere
            material: Material for shading, or its index in a scene
        """
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Test ray-sphere intersection using the quadratic formula.

        The equation (P-C)·(P-C) = r² where P = ray.at(t)
        expands to: t²(d·d) + 2t(d·(O-C)) + (O-C)·(O-C) - r² = 0
        which is the quadratic at² + bt + c = 0.
        """
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = half_b * half_b - a * c
        if discriminant < 0:
            return None

        sqrtd = math.sqrt(discriminant)

        # Find the nearest root in the acceptable range
        root = (-half_b - sqrtd) / a
        if root < t_min or root > t_max:
            root = (-half_b + sqrtd) / a
            if root < t_min or root > t_max:
                return None

        point = ray.at(root)
        outward_normal = (point - self.center) / self.radius

        if isinstance(self.material, int):
            material_index, material = self.material, None
        else:
            material_index, material = -1, self.material

        hit_record = HitRecord(
            point=point,
            normal=outward_normal,
            t=root,
            front_face=True,
            material_index=material_index,
            material=material
        )
        hit_record.set_face_normal(ray, outward_normal)

        return hit_record

    def __repr__(self) -> str:
        return f"Sphere(center={self.center}, radius={self.radius})"


class Scene(Hittable):
    """An ordered collection of spheres and the materials they share."""

    def __init__(self, objects: Optional[list[Sphere]] = None, materials: Optional[list[Material]] = None):
        self.objects: list[Sphere] = objects if objects else []
        self.materials: list[Material] = materials if materials else []

    def add_material(self, material: Material) -> int:
        """Register a material and return its index.

        Adding the same material object again returns the existing index.
        """
        for index, existing in enumerate(self.materials):
            if existing is material:
                return index
        self.materials.append(material)
        return len(self.materials) - 1

    def add(self, obj: Sphere) -> None:
        """Add a sphere, moving an attached Material into the table."""
        if isinstance(obj.material, Material):
            obj.material = self.add_material(obj.material)
        self.objects.append(obj)

    def add_sphere(self, center: Point3, radius: float, material: Material) -> Sphere:
        """Create a sphere with the given material and add it to the scene."""
        sphere = Sphere(center, radius, self.add_material(material))
        self.objects.append(sphere)
        return sphere

    def clear(self) -> None:
        """Remove all objects and materials."""
        self.objects = []
        self.materials = []

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Find the closest intersection among all objects."""
        closest_so_far = t_max
        hit_record = None

        for obj in self.objects:
            record = obj.hit(ray, t_min, closest_so_far)
            if record is not None:
                closest_so_far = record.t
                hit_record = record

        if hit_record is not None and hit_record.material is None and hit_record.material_index >= 0:
            hit_record.material = self.materials[hit_record.material_index]

        return hit_record

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Sphere]:
        return iter(self.objects)

    def __repr__(self) -> str:
        return f"Scene({len(self.objects)} objects, {len(self.materials)} materials)"
