"""
PathForge - A Python Monte Carlo Path Tracer

Renders scenes of spheres with:
- Diffuse (Lambertian), metal and dielectric materials
- Thin-lens camera with depth of field
- Antialiasing by jittered supersampling
- Plain-text PPM output (other formats via Pillow)
"""

__version__ = "0.1.0"
__author__ = "PathForge Team"

from .vec3 import Vec3, Point3, Color, default_rng, seed
from .ray import Ray
from .shapes import Sphere, Scene, HitRecord, Hittable
from .materials import Material, MaterialKind, ScatterResult, scatter, reflectance
from .camera import Camera
from .integrator import trace, sky_color
from .image import gamma_correct, quantize, pixel_string, to_ldr, write_ppm, save_image
from .renderer import Renderer, RenderSettings
from .scenes import random_scene, four_sphere_scene, two_sphere_scene, build_scene, SCENES
from .scene_parser import SceneParser, SceneParseError, load_scene, parse_scene

__all__ = [
    # Core
    'Vec3', 'Point3', 'Color', 'default_rng', 'seed', 'Ray',
    # Geometry
    'Sphere', 'Scene', 'HitRecord', 'Hittable',
    # Materials
    'Material', 'MaterialKind', 'ScatterResult', 'scatter', 'reflectance',
    # Camera
    'Camera',
    # Integrator
    'trace', 'sky_color',
    # Image output
    'gamma_correct', 'quantize', 'pixel_string', 'to_ldr', 'write_ppm', 'save_image',
    # Rendering
    'Renderer', 'RenderSettings',
    # Scenes
    'random_scene', 'four_sphere_scene', 'two_sphere_scene', 'build_scene', 'SCENES',
    'SceneParser', 'SceneParseError', 'load_scene', 'parse_scene',
]
