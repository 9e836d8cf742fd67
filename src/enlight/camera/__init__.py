"""Camera module for camera compilation and primary ray generation.

Components:
    camera: Camera record and compile_camera (defaults + warnings)
    primary: Taichi kernel generating one primary ray direction per pixel

Screen offsets for pixel (ix, iy) run from -0.5 (left/top) towards +0.5:
    xp = ix / width - 0.5, yp = iy / height - 0.5
"""

from .camera import (
    CAMERA_KEYS,
    DEFAULT_DIRECTION,
    DEFAULT_POSITION,
    DEFAULT_RIGHT,
    DEFAULT_UP,
    Camera,
    compile_camera,
)
from .primary import generate_primary_directions, init_taichi, primary_direction

__all__ = [
    "Camera",
    "compile_camera",
    "CAMERA_KEYS",
    "DEFAULT_POSITION",
    "DEFAULT_DIRECTION",
    "DEFAULT_UP",
    "DEFAULT_RIGHT",
    "init_taichi",
    "generate_primary_directions",
    "primary_direction",
]
