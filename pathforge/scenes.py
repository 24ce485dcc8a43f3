"""
Built-in scenes.

- ``random``: the ground plane of many small random spheres around three
  large ones (glass, diffuse, metal)
- ``four``: ground, a diffuse sphere flanked by glass and metal
- ``two``: ground and a single diffuse sphere
"""

from __future__ import annotations
from typing import Callable, Dict, Optional, Tuple

import numpy as np

from .vec3 import Vec3, Point3, Color, default_rng
from .camera import Camera
from .shapes import Scene
from .materials import Material


def random_scene(rng: Optional[np.random.Generator] = None) -> Scene:
    """Create the scene of many small random spheres."""
    rng = rng if rng is not None else default_rng()
    world = Scene()

    ground_material = Material.diffuse(Color(0.5, 0.5, 0.5))
    world.add_sphere(Point3(0, -1000, 0), 1000, ground_material)

    glass = Material.dielectric(1.5)
    clearing = Point3(4, 0.2, 0)

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())

            if (center - clearing).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = Color.random(rng=rng) * Color.random(rng=rng)
                sphere_material = Material.diffuse(albedo)
            elif choose_mat < 0.95:
                albedo = Color.random(0.5, 1, rng)
                fuzz = float(rng.uniform(0, 0.5))
                sphere_material = Material.metal(albedo, fuzz)
            else:
                sphere_material = glass

            world.add_sphere(center, 0.2, sphere_material)

    world.add_sphere(Point3(0, 1, 0), 1.0, glass)
    world.add_sphere(Point3(-4, 1, 0), 1.0, Material.diffuse(Color(0.4, 0.2, 0.1)))
    world.add_sphere(Point3(4, 1, 0), 1.0, Material.metal(Color(0.7, 0.6, 0.5), 0.0))

    return world


def four_sphere_scene(rng: Optional[np.random.Generator] = None) -> Scene:
    """Create the ground / diffuse / glass / metal scene."""
    world = Scene()

    world.add_sphere(Point3(0, -100.5, -1), 100, Material.diffuse(Color(0.8, 0.8, 0.0)))
    world.add_sphere(Point3(0, 0, -1), 0.5, Material.diffuse(Color(0.7, 0.3, 0.3)))
    world.add_sphere(Point3(-1, 0, -1), 0.5, Material.dielectric(1.5))
    world.add_sphere(Point3(1, 0, -1), 0.5, Material.metal(Color(0.8, 0.6, 0.2), 0.3))

    return world


def two_sphere_scene(rng: Optional[np.random.Generator] = None) -> Scene:
    """Create a scene of one diffuse sphere resting on a large ground sphere."""
    world = Scene()

    world.add_sphere(Point3(0, -100.5, -1), 100, Material.diffuse(Color(0.8, 0.8, 0.0)))
    world.add_sphere(Point3(0, 0, -1), 0.5, Material.diffuse(Color(0.7, 0.3, 0.3)))

    return world


def random_scene_camera(aspect_ratio: float) -> Camera:
    """Camera for the random scene: low angle, slight depth of field."""
    return Camera(
        look_from=Point3(13, 2, 3),
        look_at=Point3(0, 0, 0),
        vup=Vec3(0, 1, 0),
        vfov=20,
        aspect_ratio=aspect_ratio,
        aperture=0.1,
        focus_dist=10.0
    )


def simple_camera(aspect_ratio: float) -> Camera:
    """Pinhole camera at the origin looking down -Z."""
    return Camera(
        look_from=Point3(0, 0, 0),
        look_at=Point3(0, 0, -1),
        vup=Vec3(0, 1, 0),
        vfov=90,
        aspect_ratio=aspect_ratio,
        aperture=0.0,
        focus_dist=1.0
    )


SceneBuilder = Callable[[Optional[np.random.Generator]], Scene]
CameraBuilder = Callable[[float], Camera]

SCENES: Dict[str, Tuple[SceneBuilder, CameraBuilder]] = {
    'random': (random_scene, random_scene_camera),
    'four': (four_sphere_scene, simple_camera),
    'two': (two_sphere_scene, simple_camera),
}


def build_scene(
    name: str,
    aspect_ratio: float,
    rng: Optional[np.random.Generator] = None
) -> Tuple[Scene, Camera]:
    """Build a registered scene and its camera.

    Raises:
        KeyError: If no scene is registered under ``name``
    """
    if name not in SCENES:
        raise KeyError(f"Unknown scene: {name} (choose from {', '.join(SCENES)})")
    scene_builder, camera_builder = SCENES[name]
    return scene_builder(rng), camera_builder(aspect_ratio)
