"""Unit tests for the pinhole camera.

Tests cover:
- Screen ray generation at corners, center and interior points
- Screen coordinate validation
- The kernel-side get_screen_ray agreeing with Camera.screen_ray
"""

import math

import pytest
import taichi as ti


@pytest.fixture
def wide_camera():
    """Camera at the origin looking down -z with a 2:1 aspect and 90 degree FOV."""
    from spheretrace.camera.pinhole import Camera
    from spheretrace.core.vector import UNIT_Y, UNIT_Z, Vector

    return Camera.from_degrees(Vector.zero(), -UNIT_Z, UNIT_Y, 2.0, 90.0)


class TestCamera:
    """Tests for Camera construction."""

    def test_from_degrees(self, wide_camera):
        assert math.isclose(wide_camera.fovx, math.pi / 2.0)

    def test_right_is_forward_cross_up(self, wide_camera):
        from spheretrace.core.vector import Vector
        from spheretrace.testing import almost_equal

        assert almost_equal(wide_camera.right, Vector(1.0, 0.0, 0.0))


class TestScreenRay:
    """Tests for Camera.screen_ray."""

    def test_top_left_corner(self, wide_camera):
        from spheretrace.core.vector import Vector
        from spheretrace.testing import almost_equal

        ray = wide_camera.screen_ray(0.0, 0.0)
        assert almost_equal(ray.position, Vector.zero())
        assert almost_equal(ray.direction, Vector(-1.0, 0.5, -1.0).normalized())

    def test_bottom_right_corner(self, wide_camera):
        from spheretrace.core.vector import Vector
        from spheretrace.testing import almost_equal

        ray = wide_camera.screen_ray(1.0, 1.0)
        assert almost_equal(ray.direction, Vector(1.0, -0.5, -1.0).normalized())

    def test_center_looks_forward(self, wide_camera):
        from spheretrace.core.vector import UNIT_Z
        from spheretrace.testing import almost_equal

        assert almost_equal(wide_camera.screen_ray(0.5, 0.5).direction, -UNIT_Z)

    def test_interior_point(self, wide_camera):
        from spheretrace.camera.pinhole import screen_ray
        from spheretrace.core.vector import Vector
        from spheretrace.testing import almost_equal

        ray = screen_ray(wide_camera, 0.25, 0.25)
        assert almost_equal(ray.direction, Vector(-0.5, 0.25, -1.0).normalized())

    def test_ray_starts_at_camera_position(self):
        from spheretrace.camera.pinhole import Camera
        from spheretrace.core.vector import UNIT_X, UNIT_Y, Vector
        from spheretrace.testing import almost_equal

        position = Vector(3.0, -2.0, 7.0)
        camera = Camera.from_degrees(position, UNIT_X, UNIT_Y, 1.0, 60.0)
        ray = camera.screen_ray(0.5, 0.5)
        assert almost_equal(ray.position, position)
        assert almost_equal(ray.direction, UNIT_X)

    @pytest.mark.parametrize("x, y", [(-0.1, 0.5), (0.5, 1.1), (2.0, 2.0), (math.nan, 0.5)])
    def test_rejects_coordinates_outside_screen(self, wide_camera, x, y):
        with pytest.raises(ValueError, match="Screen coordinates"):
            wide_camera.screen_ray(x, y)


class TestKernelScreenRay:
    """Tests for the Taichi get_screen_ray function."""

    @pytest.mark.parametrize("x, y", [(0.0, 0.0), (0.5, 0.5), (0.25, 0.75), (1.0, 0.3)])
    def test_matches_python_screen_ray(self, wide_camera, x, y):
        from spheretrace.camera.pinhole import ScreenGeometry, get_screen_ray
        from spheretrace.core.ray import vec3

        geometry = ScreenGeometry.from_camera(wide_camera)
        origin = ti.field(dtype=vec3, shape=())
        direction = ti.field(dtype=vec3, shape=())

        @ti.kernel
        def test_kernel(
            o: vec3, f: vec3, hr: vec3, hu: vec3, sx: ti.f64, sy: ti.f64
        ):
            ray = get_screen_ray(o, f, hr, hu, sx, sy)
            origin[None] = ray.origin
            direction[None] = ray.direction

        test_kernel(
            vec3(*geometry.origin.as_tuple()),
            vec3(*geometry.forward.as_tuple()),
            vec3(*geometry.half_right.as_tuple()),
            vec3(*geometry.half_up.as_tuple()),
            x,
            y,
        )

        expected = wide_camera.screen_ray(x, y)
        d = direction[None]
        for got, want in zip(d, expected.direction.as_tuple()):
            assert math.isclose(got, want, abs_tol=1e-12)
        assert tuple(origin[None]) == (0.0, 0.0, 0.0)
