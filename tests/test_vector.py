"""Tests for the vector algebra and sampling helpers."""

import math

import pytest

from core.vector import Vector3
from core.utils import (random_vector, random_in_unit_sphere, random_unit_vector,
                        random_in_unit_disk, reflect, refract)


class TestVector3:

    def test_arithmetic(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)
        assert -a == Vector3(-1, -2, -3)
        assert a * 2 == Vector3(2, 4, 6)
        assert 2 * a == Vector3(2, 4, 6)
        assert a * b == Vector3(4, 10, 18)
        assert b / 2 == Vector3(2, 2.5, 3)

    def test_dot_and_cross(self):
        x = Vector3(1, 0, 0)
        y = Vector3(0, 1, 0)
        assert x.dot(y) == 0
        assert x.cross(y) == Vector3(0, 0, 1)
        assert y.cross(x) == Vector3(0, 0, -1)
        assert Vector3(1, 2, 3).dot(Vector3(4, 5, 6)) == 32

    def test_length_and_normalize(self):
        v = Vector3(3, 4, 0)
        assert v.length_squared() == 25
        assert v.length() == 5
        assert v.normalize() == Vector3(0.6, 0.8, 0)
        assert v.unit_vector() == v.normalize()

    def test_zero_vector_normalizes_without_error(self):
        assert Vector3(0, 0, 0).normalize() == Vector3(0, 0, 0)

    def test_indexing(self):
        v = Vector3(7, 8, 9)
        assert (v[0], v[1], v[2]) == (7, 8, 9)
        assert list(v) == [7, 8, 9]
        with pytest.raises(IndexError):
            v[3]
        with pytest.raises(IndexError):
            v[-1]

    def test_near_zero(self):
        assert Vector3(1e-9, -1e-9, 0).near_zero()
        assert not Vector3(1e-9, 1e-7, 0).near_zero()


class TestSampling:

    def test_random_vector_range(self, rng):
        for _ in range(100):
            v = random_vector(rng, 0.5, 1.0)
            assert all(0.5 <= c < 1.0 for c in v)

    def test_random_in_unit_sphere(self, rng):
        for _ in range(200):
            assert random_in_unit_sphere(rng).length_squared() < 1.0

    def test_random_unit_vector(self, rng):
        for _ in range(200):
            assert random_unit_vector(rng).length() == pytest.approx(1.0)

    def test_random_in_unit_disk(self, rng):
        for _ in range(200):
            p = random_in_unit_disk(rng)
            assert p.z == 0
            assert p.length_squared() < 1.0

    def test_rejection_sampling_retries(self, scripted_rng):
        # The first candidate is a cube corner and must be rejected.
        source = scripted_rng(uniforms=[0.9, 0.9, 0.9, 0.1, 0.2, 0.3])
        assert random_in_unit_sphere(source) == Vector3(0.1, 0.2, 0.3)


class TestOptics:

    def test_reflect(self):
        v = Vector3(1, -1, 0)
        n = Vector3(0, 1, 0)
        assert reflect(v, n) == Vector3(1, 1, 0)

    def test_refract_normal_incidence_goes_straight_through(self):
        out = refract(Vector3(0, 0, -1), Vector3(0, 0, 1), 1.0 / 1.5)
        assert out == Vector3(0, 0, -1)

    def test_refract_obeys_snell(self):
        theta_i = math.radians(30)
        uv = Vector3(math.sin(theta_i), -math.cos(theta_i), 0)
        n = Vector3(0, 1, 0)
        eta = 1.0 / 1.5
        out = refract(uv, n, eta)
        assert out.length() == pytest.approx(1.0)
        sin_t = out.x / out.length()
        assert sin_t == pytest.approx(eta * math.sin(theta_i))
        assert out.y < 0
