"""
Scene description language parser.

Supports a YAML (or JSON) scene description format with:
- Camera configuration
- Render settings
- Materials library
- Objects (spheres with materials)

Example scene file:
```yaml
camera:
  look_from: [13, 2, 3]
  look_at: [0, 0, 0]
  vfov: 20
  aperture: 0.1
  focus_dist: 10

render:
  width: 400
  aspect_ratio: 1.5
  samples: 100
  max_depth: 50

materials:
  ground:
    type: diffuse
    albedo: [0.5, 0.5, 0.5]

  glass:
    type: dielectric
    ior: 1.5

objects:
  - type: sphere
    center: [0, -1000, 0]
    radius: 1000
    material: ground

  - type: sphere
    center: [0, 1, 0]
    radius: 1
    material: glass
```
"""

from __future__ import annotations
from pathlib import Path
from typing import Dict, Any, Optional, Tuple, Union
import json
import logging

import yaml

from .vec3 import Vec3, Point3, Color
from .camera import Camera
from .shapes import Scene
from .materials import Material
from .renderer import RenderSettings

logger = logging.getLogger(__name__)


class SceneParseError(Exception):
    """Error during scene parsing."""
    pass


class SceneParser:
    """Parser for scene description files."""

    def __init__(self):
        self.materials: Dict[str, Material] = {}
        self.scene: Scene = Scene()
        self.camera: Optional[Camera] = None
        self.settings: Optional[RenderSettings] = None

    def parse_file(self, filepath: Union[str, Path]) -> Tuple[Scene, Camera, RenderSettings]:
        """Parse a scene file.

        Args:
            filepath: Path to the scene file (YAML or JSON)

        Returns:
            Tuple of (scene, camera, settings)
        """
        path = Path(filepath)
        if not path.exists():
            raise SceneParseError(f"Scene file not found: {filepath}")

        content = path.read_text()

        try:
            if path.suffix == '.json':
                data = json.loads(content)
            else:
                # YAML is a superset of JSON
                data = yaml.safe_load(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SceneParseError(f"Cannot parse {filepath}: {e}") from e

        if not isinstance(data, dict):
            raise SceneParseError(f"Scene file must contain a mapping: {filepath}")

        return self.parse_dict(data)

    def parse_dict(self, data: Dict[str, Any]) -> Tuple[Scene, Camera, RenderSettings]:
        """Parse a scene from a dictionary.

        Args:
            data: Scene description dictionary

        Returns:
            Tuple of (scene, camera, settings)
        """
        # Parse materials first (objects reference them)
        if 'materials' in data:
            self._parse_materials(data['materials'])

        if 'objects' in data:
            self._parse_objects(data['objects'])

        # Settings before camera, the camera defaults to the image aspect
        if 'render' in data:
            self._parse_settings(data['render'])
        else:
            self.settings = RenderSettings()

        if 'camera' in data:
            self._parse_camera(data['camera'])
        else:
            # Default camera
            self.camera = Camera(
                look_from=Point3(0, 0, 0),
                look_at=Point3(0, 0, -1),
                vfov=90,
                aspect_ratio=self.settings.width / self.settings.height
            )

        logger.debug(
            "Parsed scene: %d objects, %d materials",
            len(self.scene), len(self.scene.materials)
        )
        return self.scene, self.camera, self.settings

    def _parse_vec3(self, data: Any) -> Vec3:
        """Parse a Vec3 from various formats."""
        if isinstance(data, (list, tuple)):
            if len(data) != 3:
                raise SceneParseError(f"Vec3 must have 3 components, got {len(data)}")
            return Vec3(float(data[0]), float(data[1]), float(data[2]))
        elif isinstance(data, dict):
            return Vec3(
                float(data.get('x', 0)),
                float(data.get('y', 0)),
                float(data.get('z', 0))
            )
        else:
            raise SceneParseError(f"Cannot parse Vec3 from: {data}")

    def _parse_color(self, data: Any) -> Color:
        """Parse a Color from various formats."""
        if isinstance(data, (list, tuple)):
            if len(data) != 3:
                raise SceneParseError(f"Color must have 3 components, got {len(data)}")
            return Color(float(data[0]), float(data[1]), float(data[2]))
        elif isinstance(data, dict):
            return Color(
                float(data.get('r', 0)),
                float(data.get('g', 0)),
                float(data.get('b', 0))
            )
        elif isinstance(data, str):
            # Handle hex colors
            if data.startswith('#'):
                hex_color = data[1:]
                if len(hex_color) == 6:
                    r = int(hex_color[0:2], 16) / 255.0
                    g = int(hex_color[2:4], 16) / 255.0
                    b = int(hex_color[4:6], 16) / 255.0
                    return Color(r, g, b)
            raise SceneParseError(f"Cannot parse color from string: {data}")
        else:
            raise SceneParseError(f"Cannot parse Color from: {data}")

    def _parse_material(self, name: str, mat_data: Dict[str, Any]) -> Material:
        if not isinstance(mat_data, dict):
            raise SceneParseError(f"Material {name!r} must be a mapping, got: {mat_data!r}")
        mat_type = str(mat_data.get('type', 'diffuse')).lower()

        if mat_type in ('diffuse', 'lambertian'):
            albedo = self._parse_color(mat_data.get('albedo', [0.5, 0.5, 0.5]))
            return Material.diffuse(albedo)

        elif mat_type == 'metal':
            albedo = self._parse_color(mat_data.get('albedo', [0.8, 0.8, 0.8]))
            fuzz = float(mat_data.get('fuzz', 0.0))
            return Material.metal(albedo, fuzz)

        elif mat_type == 'dielectric':
            ior = float(mat_data.get('ior', mat_data.get('refraction_index', 1.5)))
            return Material.dielectric(ior)

        raise SceneParseError(f"Unknown material type for {name!r}: {mat_type}")

    def _parse_materials(self, materials_data: Dict[str, Any]) -> None:
        """Parse materials section."""
        if not isinstance(materials_data, dict):
            raise SceneParseError("'materials' must be a mapping of name to material")
        for name, mat_data in materials_data.items():
            self.materials[name] = self._parse_material(name, mat_data)

    def _get_material(self, mat_ref: Any) -> Material:
        """Get a material by name or inline definition."""
        if isinstance(mat_ref, str):
            if mat_ref not in self.materials:
                raise SceneParseError(f"Unknown material: {mat_ref}")
            return self.materials[mat_ref]
        elif isinstance(mat_ref, dict):
            return self._parse_material('<inline>', mat_ref)
        else:
            raise SceneParseError(f"Invalid material reference: {mat_ref}")

    def _parse_objects(self, objects_data: list) -> None:
        """Parse objects section."""
        if not isinstance(objects_data, list):
            raise SceneParseError("'objects' must be a list of objects")
        for obj_data in objects_data:
            if not isinstance(obj_data, dict):
                raise SceneParseError(f"Object must be a mapping, got: {obj_data!r}")
            obj_type = str(obj_data.get('type', 'sphere')).lower()
            if obj_type != 'sphere':
                raise SceneParseError(f"Unknown object type: {obj_type}")

            if 'material' not in obj_data:
                raise SceneParseError(f"Sphere has no material: {obj_data}")
            material = self._get_material(obj_data['material'])

            center = self._parse_vec3(obj_data.get('center', [0, 0, 0]))
            radius = float(obj_data.get('radius', 1.0))
            self.scene.add_sphere(center, radius, material)

    def _parse_camera(self, camera_data: Dict[str, Any]) -> None:
        """Parse camera section."""
        if not isinstance(camera_data, dict):
            raise SceneParseError("'camera' must be a mapping")
        look_from = self._parse_vec3(camera_data.get('look_from', [0, 0, 0]))
        look_at = self._parse_vec3(camera_data.get('look_at', [0, 0, -1]))
        vup = self._parse_vec3(camera_data.get('vup', [0, 1, 0]))
        vfov = float(camera_data.get('vfov', 90))
        aspect_ratio = float(camera_data.get(
            'aspect_ratio', self.settings.width / self.settings.height
        ))
        aperture = float(camera_data.get('aperture', 0.0))
        focus_dist = float(camera_data.get('focus_dist', 1.0))

        self.camera = Camera(
            look_from=look_from,
            look_at=look_at,
            vup=vup,
            vfov=vfov,
            aspect_ratio=aspect_ratio,
            aperture=aperture,
            focus_dist=focus_dist
        )

    def _parse_settings(self, settings_data: Dict[str, Any]) -> None:
        """Parse render settings section."""
        if not isinstance(settings_data, dict):
            raise SceneParseError("'render' must be a mapping")
        height = settings_data.get('height')
        seed = settings_data.get('seed')
        try:
            self.settings = RenderSettings(
                width=int(settings_data.get('width', 400)),
                aspect_ratio=float(settings_data.get('aspect_ratio', 16 / 9)),
                height=int(height) if height is not None else None,
                samples_per_pixel=int(settings_data.get('samples', 100)),
                max_depth=int(settings_data.get('max_depth', 50)),
                seed=int(seed) if seed is not None else None
            )
        except ValueError as e:
            raise SceneParseError(f"Invalid render settings: {e}") from e


def load_scene(filepath: Union[str, Path]) -> Tuple[Scene, Camera, RenderSettings]:
    """Convenience function to load a scene file.

    Args:
        filepath: Path to the scene file

    Returns:
        Tuple of (scene, camera, settings)
    """
    parser = SceneParser()
    return parser.parse_file(filepath)


def parse_scene(data: Dict[str, Any]) -> Tuple[Scene, Camera, RenderSettings]:
    """Convenience function to parse a scene from a dictionary.

    Args:
        data: Scene description dictionary

    Returns:
        Tuple of (scene, camera, settings)
    """
    parser = SceneParser()
    return parser.parse_dict(data)
