"""Tests for the thin-lens camera."""

import pytest

from camera.camera import Camera
from core.vector import Vector3


def approx_vector(v, expected, abs_tol=1e-9):
    return all(a == pytest.approx(b, abs=abs_tol) for a, b in zip(v, expected))


@pytest.fixture
def pinhole():
    return Camera(look_from=Vector3(0, 0, 0), look_at=Vector3(0, 0, -1), vup=Vector3(0, 1, 0),
                  vfov=90.0, aspect_ratio=2.0, aperture=0.0, focus_dist=1.0)


class TestCamera:

    def test_orthonormal_basis(self, pinhole):
        assert approx_vector(pinhole.w, (0, 0, 1))
        assert approx_vector(pinhole.u, (1, 0, 0))
        assert approx_vector(pinhole.v, (0, 1, 0))

    def test_viewport_from_field_of_view(self, pinhole):
        assert pinhole.vertical.length() == pytest.approx(2.0)
        assert pinhole.horizontal.length() == pytest.approx(4.0)

    def test_center_ray_points_at_target(self, pinhole, rng):
        ray = pinhole.get_ray(0.5, 0.5, rng)
        assert approx_vector(ray.origin, (0, 0, 0))
        assert approx_vector(ray.direction, (0, 0, -1))

    def test_corner_rays(self, pinhole, rng):
        assert approx_vector(pinhole.get_ray(0.0, 0.0, rng).direction, (-2, -1, -1))
        assert approx_vector(pinhole.get_ray(1.0, 1.0, rng).direction, (2, 1, -1))

    def test_pinhole_ray_time_is_shutter_open(self, pinhole, rng):
        assert pinhole.get_ray(0.3, 0.3, rng).time == 0.0

    def test_ray_times_cover_shutter(self, rng):
        camera = Camera(Vector3(13, 2, 3), Vector3(0, 0, 0), Vector3(0, 1, 0), 20.0, 1.5,
                        aperture=0.1, focus_dist=10.0, time0=0.25, time1=0.75)
        times = [camera.get_ray(0.5, 0.5, rng).time for _ in range(200)]
        assert all(0.25 <= t < 0.75 for t in times)
        assert max(times) - min(times) > 0.25

    def test_lens_jitter_stays_on_disk_and_converges_on_focus_plane(self, rng):
        camera = Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), Vector3(0, 1, 0), 90.0, 2.0,
                        aperture=2.0, focus_dist=5.0)
        focus_points = []
        for _ in range(50):
            ray = camera.get_ray(0.2, 0.7, rng)
            assert ray.origin.z == pytest.approx(0.0)
            assert ray.origin.length() < 1.0
            focus_points.append(ray.at(1.0))
        first = focus_points[0]
        for p in focus_points[1:]:
            assert approx_vector(p, first)
