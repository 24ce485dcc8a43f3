"""Tests for Vec3 class."""

import pytest
import math
import numpy as np

from pathforge.vec3 import Vec3, Point3, Color, random_double, seed, default_rng


class TestVec3Creation:
    """Test Vec3 construction."""

    def test_default_constructor(self):
        v = Vec3()
        assert v.x == 0.0
        assert v.y == 0.0
        assert v.z == 0.0

    def test_value_constructor(self):
        v = Vec3(1.0, 2.0, 3.0)
        assert v.x == 1.0
        assert v.y == 2.0
        assert v.z == 3.0

    def test_from_array(self):
        arr = np.array([1.0, 2.0, 3.0])
        v = Vec3.from_array(arr)
        assert v.x == 1.0
        assert v.y == 2.0
        assert v.z == 3.0

    def test_color_aliases(self):
        c = Color(0.5, 0.6, 0.7)
        assert c.r == 0.5
        assert c.g == 0.6
        assert c.b == 0.7

    def test_unpacking(self):
        x, y, z = Vec3(1, 2, 3)
        assert (x, y, z) == (1, 2, 3)


class TestVec3Arithmetic:
    """Test Vec3 arithmetic operations."""

    def test_negation(self):
        neg = -Vec3(1, 2, 3)
        assert neg == Vec3(-1, -2, -3)

    def test_addition(self):
        result = Vec3(1, 2, 3) + Vec3(4, 5, 6)
        assert result == Vec3(5, 7, 9)

    def test_subtraction(self):
        result = Vec3(4, 5, 6) - Vec3(1, 2, 3)
        assert result == Vec3(3, 3, 3)

    def test_scale(self):
        assert Vec3(1, 2, 3) * 2 == Vec3(2, 4, 6)
        assert 2 * Vec3(1, 2, 3) == Vec3(2, 4, 6)

    def test_componentwise_multiplication(self):
        result = Vec3(1, 2, 3) * Vec3(2, 3, 4)
        assert result == Vec3(2, 6, 12)

    def test_division(self):
        assert Vec3(2, 4, 6) / 2 == Vec3(1, 2, 3)

    def test_operations_are_pure(self):
        a = Vec3(1, 2, 3)
        b = Vec3(4, 5, 6)
        _ = a + b
        _ = a * 3
        _ = a.normalize()
        _ = a.cross(b)
        assert a == Vec3(1, 2, 3)
        assert b == Vec3(4, 5, 6)


class TestVec3VectorOps:
    """Test Vec3 vector operations."""

    def test_length(self):
        assert Vec3(3, 4, 0).length() == 5.0

    def test_length_squared(self):
        assert Vec3(3, 4, 0).length_squared() == 25.0

    def test_normalize(self):
        n = Vec3(3, 4, 0).normalize()
        assert abs(n.length() - 1.0) < 1e-10
        assert abs(n.x - 0.6) < 1e-12

    def test_normalize_zero_vector_is_nan(self):
        n = Vec3(0, 0, 0).normalize()
        assert all(math.isnan(c) for c in n)

    def test_dot_product(self):
        assert Vec3(1, 0, 0).dot(Vec3(0, 1, 0)) == 0.0
        assert Vec3(1, 2, 3).dot(Vec3(4, 5, 6)) == 32.0  # 1*4 + 2*5 + 3*6

    def test_cross_product(self):
        assert Vec3(1, 0, 0).cross(Vec3(0, 1, 0)) == Vec3(0, 0, 1)
        assert Vec3(0, 1, 0).cross(Vec3(1, 0, 0)) == Vec3(0, 0, -1)

    def test_cross_is_perpendicular(self):
        a = Vec3(1, 2, 3)
        b = Vec3(-2, 0.5, 4)
        c = a.cross(b)
        assert abs(c.dot(a)) < 1e-12
        assert abs(c.dot(b)) < 1e-12


class TestVec3Reflect:
    """Test Vec3 reflection."""

    def test_reflect(self):
        # Ray coming in at 45 degrees
        incoming = Vec3(1, -1, 0).normalize()
        reflected = incoming.reflect(Vec3(0, 1, 0))
        assert reflected == Vec3(1, 1, 0).normalize()

    def test_reflect_flips_normal_component(self):
        rng = np.random.default_rng(7)
        for _ in range(50):
            n = Vec3.random_unit_vector(rng)
            v = Vec3.random(-3, 3, rng)
            r = v.reflect(n)
            assert abs(r.dot(n) + v.dot(n)) < 1e-9
            # Tangential component is preserved
            assert (r - n * r.dot(n)) == (v - n * v.dot(n))
            assert abs(r.length() - v.length()) < 1e-9


class TestVec3Refract:
    """Test Vec3 refraction."""

    def test_refract_straight_through(self):
        refracted = Vec3(0, -1, 0).refract(Vec3(0, 1, 0), 1.0 / 1.5)
        assert refracted == Vec3(0, -1, 0)

    def test_refract_air_to_glass_bends_toward_normal(self):
        incoming = Vec3(1, -1, 0).normalize()
        normal = Vec3(0, 1, 0)
        refracted = incoming.refract(normal, 1.0 / 1.5)
        assert refracted.y < 0
        assert abs(refracted.length() - 1.0) < 1e-9
        # sin(theta_t) = sin(theta_i) / 1.5
        assert abs(refracted.x - math.sin(math.pi / 4) / 1.5) < 1e-9

    def test_refract_ratio_one_is_identity(self):
        incoming = Vec3(0.3, -0.8, 0.1).normalize()
        refracted = incoming.refract(Vec3(0, 1, 0), 1.0)
        assert refracted == incoming


class TestVec3Utility:
    """Test Vec3 utility methods."""

    def test_near_zero(self):
        assert Vec3(1e-10, 1e-10, 1e-10).near_zero()
        assert not Vec3(1, 0, 0).near_zero()
        assert not Vec3(1e-10, 1e-10, 1e-7).near_zero()

    def test_to_array(self):
        arr = Vec3(1, 2, 3).to_array()
        assert isinstance(arr, np.ndarray)
        assert list(arr) == [1, 2, 3]

    def test_str(self):
        assert str(Vec3(1, 2.5, 3)) == "1.0 2.5 3.0"


class TestVec3Random:
    """Test Vec3 random generation."""

    def test_random(self):
        v = Vec3.random(0, 1)
        assert 0 <= v.x < 1
        assert 0 <= v.y < 1
        assert 0 <= v.z < 1

    def test_random_range(self):
        rng = np.random.default_rng(3)
        for _ in range(100):
            v = Vec3.random(0.5, 1.0, rng)
            assert all(0.5 <= c < 1.0 for c in v)

    def test_random_in_unit_sphere(self):
        for _ in range(100):
            assert Vec3.random_in_unit_sphere().length_squared() < 1

    def test_random_unit_vector(self):
        for _ in range(100):
            v = Vec3.random_unit_vector()
            assert abs(v.length() - 1.0) < 1e-10

    def test_random_in_unit_disk(self):
        rng = np.random.default_rng(11)
        points = [Vec3.random_in_unit_disk(rng) for _ in range(200)]
        for v in points:
            assert v.z == 0
            assert v.length_squared() < 1
        # Covers all four quadrants
        assert any(p.x < 0 and p.y < 0 for p in points)
        assert any(p.x > 0 and p.y > 0 for p in points)

    def test_seeded_generator_is_reproducible(self):
        a = Vec3.random_unit_vector(np.random.default_rng(42))
        b = Vec3.random_unit_vector(np.random.default_rng(42))
        assert a == b

    def test_random_double(self):
        rng = np.random.default_rng(5)
        for _ in range(100):
            assert 0.0 <= random_double(rng) < 1.0
            assert -2.0 <= random_double(rng, -2.0, 3.0) < 3.0

    def test_module_seed(self):
        seed(123)
        first = random_double()
        seed(123)
        assert random_double() == first
        assert isinstance(default_rng(), np.random.Generator)


class TestVec3Comparison:
    """Test Vec3 comparison operations."""

    def test_equality(self):
        assert Vec3(1, 2, 3) == Vec3(1, 2, 3)

    def test_inequality(self):
        assert Vec3(1, 2, 3) != Vec3(1, 2, 4)

    def test_approximate_equality(self):
        assert Vec3(1, 2, 3) == Vec3(1 + 1e-12, 2, 3)

    def test_aliases_are_vec3(self):
        assert Point3 is Vec3
        assert Color is Vec3


class TestVec3Indexing:
    """Test Vec3 indexing."""

    def test_getitem(self):
        v = Vec3(1, 2, 3)
        assert v[0] == 1
        assert v[1] == 2
        assert v[2] == 3
