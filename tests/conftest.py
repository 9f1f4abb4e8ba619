"""Pytest configuration for spheretrace tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls, which would
    invalidate fields declared by already-imported modules. Double precision
    matches the Python reference tracer; fast math is off so kernels round
    the same way on every run.
    """
    ti.init(arch=ti.cpu, default_fp=ti.f64, fast_math=False, random_seed=42)
    yield


@pytest.fixture(autouse=True)
def clear_scene_data():
    """Clear uploaded spheres before and after each test.

    This ensures kernel tests are isolated from each other.
    """
    # Import here so the fields are declared after ti.init()
    from spheretrace.scene.intersection import clear_scene

    clear_scene()
    yield
    clear_scene()


@pytest.fixture
def unit_sphere():
    """A red unit sphere at the origin."""
    from spheretrace.core.color import Color
    from spheretrace.core.vector import Vector
    from spheretrace.geometry.sphere import Sphere

    return Sphere(Vector.zero(), 1.0, Color.red())


@pytest.fixture
def two_spheres():
    """Two unit spheres on the x axis, at the origin and at x = 10."""
    from spheretrace.core.color import Color
    from spheretrace.core.vector import Vector
    from spheretrace.geometry.sphere import Sphere

    return [
        Sphere(Vector.zero(), 1.0, Color.black()),
        Sphere(Vector(10.0, 0.0, 0.0), 1.0, Color.black()),
    ]


@pytest.fixture
def red_green_scene():
    """A red sphere at (2, 1, 1), a green one at (4, 4, 1), and a ray that
    hits red at 45 degrees and bounces straight into green."""
    from spheretrace.core.color import Color
    from spheretrace.core.ray import Ray
    from spheretrace.core.vector import Vector
    from spheretrace.geometry.sphere import Sphere

    spheres = [
        Sphere(Vector(2.0, 1.0, 1.0), 1.0, Color.red()),
        Sphere(Vector(4.0, 4.0, 1.0), 1.0, Color.green()),
    ]
    ray = Ray(Vector(1.0, 3.0, 1.0), Vector(1.0, -1.0, 0.0).normalized())
    return spheres, ray
