"""Tests for built-in scenes."""

import pytest
import numpy as np

from pathforge.vec3 import Vec3, Point3, Color
from pathforge.camera import Camera
from pathforge.materials import MaterialKind
from pathforge.shapes import Scene
from pathforge.scenes import (
    random_scene, four_sphere_scene, two_sphere_scene,
    random_scene_camera, simple_camera, build_scene, SCENES
)


class TestRandomScene:
    """Test the random many-sphere scene."""

    @pytest.fixture(scope="class")
    def scene(self):
        return random_scene(np.random.default_rng(2024))

    def test_ground_first(self, scene):
        ground = scene.objects[0]
        assert ground.center == Point3(0, -1000, 0)
        assert ground.radius == 1000
        assert scene.materials[ground.material].albedo == Color(0.5, 0.5, 0.5)

    def test_three_large_spheres_last(self, scene):
        glass, diffuse, metal = scene.objects[-3:]
        assert glass.center == Point3(0, 1, 0)
        assert scene.materials[glass.material].kind is MaterialKind.DIELECTRIC
        assert diffuse.center == Point3(-4, 1, 0)
        assert scene.materials[diffuse.material].albedo == Color(0.4, 0.2, 0.1)
        assert metal.center == Point3(4, 1, 0)
        assert scene.materials[metal.material].fuzz == 0.0

    def test_small_spheres(self, scene):
        small = scene.objects[1:-3]
        assert 300 < len(small) <= 22 * 22
        for sphere in small:
            assert sphere.radius == 0.2
            assert sphere.center.y == 0.2
            assert (sphere.center - Point3(4, 0.2, 0)).length() > 0.9

    def test_small_sphere_materials(self, scene):
        kinds = {scene.materials[s.material].kind for s in scene.objects[1:-3]}
        assert kinds == {MaterialKind.DIFFUSE, MaterialKind.METAL, MaterialKind.DIELECTRIC}
        for sphere in scene.objects[1:-3]:
            mat = scene.materials[sphere.material]
            if mat.kind is MaterialKind.METAL:
                assert 0.0 <= mat.fuzz < 0.5
                assert all(0.5 <= c < 1.0 for c in mat.albedo)

    def test_glass_is_shared(self, scene):
        glass_indices = {
            s.material for s in scene.objects
            if scene.materials[s.material].kind is MaterialKind.DIELECTRIC
        }
        assert len(glass_indices) == 1

    def test_reproducible(self):
        a = random_scene(np.random.default_rng(9))
        b = random_scene(np.random.default_rng(9))
        assert len(a) == len(b)
        assert all(x.center == y.center for x, y in zip(a, b))


class TestFixedScenes:
    """Test the four- and two-sphere scenes."""

    def test_four_sphere_scene(self):
        scene = four_sphere_scene()
        assert len(scene) == 4
        kinds = [scene.materials[s.material].kind for s in scene]
        assert kinds == [
            MaterialKind.DIFFUSE, MaterialKind.DIFFUSE,
            MaterialKind.DIELECTRIC, MaterialKind.METAL,
        ]

    def test_two_sphere_scene(self):
        scene = two_sphere_scene()
        ground, sphere = scene.objects
        assert ground.center == Point3(0, -100.5, -1)
        assert ground.radius == 100
        assert sphere.center == Point3(0, 0, -1)
        assert sphere.radius == 0.5
        assert scene.materials[sphere.material].albedo == Color(0.7, 0.3, 0.3)


class TestCameras:
    """Test scene cameras."""

    def test_random_scene_camera(self):
        cam = random_scene_camera(1.5)
        assert cam.origin == Point3(13, 2, 3)
        assert cam.lens_radius == 0.05

    def test_simple_camera(self):
        cam = simple_camera(2.0)
        assert cam.origin == Point3(0, 0, 0)
        assert cam.lens_radius == 0.0
        assert cam.get_ray(0.5, 0.5).direction == Vec3(0, 0, -1)


class TestRegistry:
    """Test the scene registry."""

    def test_names(self):
        assert set(SCENES) == {'random', 'four', 'two'}

    def test_build_scene(self):
        scene, camera = build_scene('four', 16 / 9)
        assert isinstance(scene, Scene)
        assert isinstance(camera, Camera)
        assert len(scene) == 4

    def test_unknown_scene(self):
        with pytest.raises(KeyError):
            build_scene('cornell', 1.0)
