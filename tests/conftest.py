"""Pytest configuration for enlight tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import matplotlib
import pytest

matplotlib.use("Agg")


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents repeated ti.init() calls, which reset the
    Taichi runtime.
    """
    from enlight.camera.primary import init_taichi

    init_taichi("cpu")
    yield


@pytest.fixture
def unit_sphere():
    """A unit sphere at the origin with the default (white) colour."""
    from enlight.geometry.sphere import sphere

    return sphere()


@pytest.fixture
def sphere_scene(unit_sphere):
    """Scene with a unit sphere viewed from z=-5 looking along +z."""
    return [
        "camera", {"position": (0.0, 0.0, -5.0), "direction": (0.0, 0.0, 1.0)},
        "root", unit_sphere,
    ]
