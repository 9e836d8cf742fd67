"""Image renderer casting one primary ray per pixel.

The renderer compiles a scene description, checks it has a root object and
a camera, generates the primary ray directions for all pixels and traces
each one, packing the resulting colour into a 32-bit ARGB pixel.

Images are NumPy ``uint32`` arrays of shape (height, width); the pixel at
column ``ix`` and row ``iy`` is ``image[iy, ix]``.

Example:
    >>> from enlight.core.renderer import render
    >>> from enlight.geometry.sphere import sphere
    >>> scene = ["camera", {"position": (0, 0, -5), "direction": (0, 0, 1)},
    ...          "root", sphere()]
    >>> image = render(scene, width=64, height=64)
    >>> image.shape
    (64, 64)
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Mapping
from typing import Any

import numpy as np
import numpy.typing as npt

from enlight.camera.primary import generate_primary_directions, init_taichi
from enlight.core.config import DEFAULT_CONFIG, RenderConfig
from enlight.core.errors import InvalidRootError, MissingCameraError, MissingRootError
from enlight.core.tracer import trace_ray
from enlight.core.vector import vec4
from enlight.geometry.colours import argb_from_vector4
from enlight.geometry.intersection import IntersectionInfo
from enlight.geometry.primitive import Primitive
from enlight.scene.compiler import Keyword, compile_scene

logger = logging.getLogger(__name__)

# Default output size in pixels
DEFAULT_WIDTH = 256
DEFAULT_HEIGHT = 256

# Colour buffer contents before the first pixel is traced (RGBA)
INITIAL_COLOUR = (0.5, 0.0, 0.8, 1.0)

Image = npt.NDArray[np.uint32]


def new_image(width: int, height: int) -> Image:
    """Create a blank ARGB image of the given size.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        A zeroed ``uint32`` array of shape (height, width).

    Raises:
        ValueError: If either dimension is not a positive integer.
    """
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
            raise ValueError(f"Image {name} must be a positive integer, got {value!r}")
    return np.zeros((int(height), int(width)), dtype=np.uint32)


def render(
    scene: Iterable[Any] | Mapping[Any, Any] | None,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    config: RenderConfig = DEFAULT_CONFIG,
) -> Image:
    """Render a scene to a new ARGB image.

    Args:
        scene: A scene description (see ``enlight.scene.compiler``).
        width: Image width in pixels (default 256).
        height: Image height in pixels (default 256).
        config: Render configuration.

    Returns:
        A ``uint32`` array of shape (height, width) of packed ARGB pixels.

    Raises:
        SceneCompileError: If the scene description does not compile.
        MissingRootError: If the compiled scene has no root object.
        InvalidRootError: If the root object is not a Primitive.
        MissingCameraError: If the compiled scene has no camera.
        ValueError: If width or height is not a positive integer.
    """
    graph = compile_scene(scene, config)
    root = graph.get(Keyword.ROOT)
    if root is None:
        raise MissingRootError([str(k) for k in graph])
    if not isinstance(root, Primitive):
        raise InvalidRootError(root)
    camera = graph.get(Keyword.CAMERA)
    if camera is None:
        raise MissingCameraError([str(k) for k in graph])

    image = new_image(width, height)
    start_time = time.perf_counter()

    init_taichi(config.arch)
    directions = generate_primary_directions(camera, int(width), int(height))

    colour_result = vec4(INITIAL_COLOUR)
    camera_pos = camera.position
    scratch = IntersectionInfo()
    for ix in range(width):
        for iy in range(height):
            trace_ray(root, camera_pos, directions[ix, iy], colour_result, scratch, config)
            image[iy, ix] = argb_from_vector4(colour_result)

    logger.debug(
        "Rendered %dx%d image in %.3fs",
        width,
        height,
        time.perf_counter() - start_time,
    )
    return image
