"""Primary ray generation for the image renderer.

Primary ray directions for every pixel are computed in a single Taichi
kernel. For pixel (ix, iy) of a width x height image the screen offsets are

    xp = ix / width - 0.5
    yp = iy / height - 0.5

and the ray direction is ``normalise(direction + right * xp - up * yp)``.
Pixels are independent, so the kernel's outer loop runs in parallel.

Example:
    >>> from enlight.camera.primary import init_taichi, generate_primary_directions
    >>> init_taichi("cpu")
    >>> dirs = generate_primary_directions(camera, 256, 256)
    >>> dirs.shape
    (256, 256, 3)
"""

import numpy as np
import numpy.typing as npt
import taichi as ti
import taichi.math as tm

from enlight.camera.camera import Camera
from enlight.core.config import SUPPORTED_ARCHS

# Double precision vector, matching the float64 host vectors
vec3d = ti.types.vector(3, ti.f64)

# Arch passed to the last successful ti.init, or None if not yet initialised
_initialized_arch: str | None = None


def init_taichi(arch: str = "cpu") -> None:
    """Initialise the Taichi runtime once per process and backend.

    Repeated calls with the same arch are no-ops; a different arch
    re-initialises the runtime.

    Args:
        arch: One of "cpu", "gpu", "cuda" or "vulkan" (backends with float64 support).

    Raises:
        ValueError: If ``arch`` is not a supported backend name.
    """
    global _initialized_arch

    if arch not in SUPPORTED_ARCHS:
        raise ValueError(f"Unknown Taichi arch: {arch!r} (expected one of {SUPPORTED_ARCHS})")
    if _initialized_arch == arch:
        return
    ti.init(arch=getattr(ti, arch), default_fp=ti.f64)
    _initialized_arch = arch


@ti.kernel
def _fill_primary_directions(
    out: ti.types.ndarray(dtype=ti.f64, ndim=3),
    direction: vec3d,
    right: vec3d,
    up: vec3d,
):
    width = out.shape[0]
    height = out.shape[1]
    for ix, iy in ti.ndrange(width, height):
        xp = ti.cast(ix, ti.f64) / ti.cast(width, ti.f64) - 0.5
        yp = ti.cast(iy, ti.f64) / ti.cast(height, ti.f64) - 0.5
        d = tm.normalize(direction + right * xp - up * yp)
        for k in ti.static(range(3)):
            out[ix, iy, k] = d[k]


def generate_primary_directions(camera: Camera, width: int, height: int) -> npt.NDArray[np.float64]:
    """Compute unit primary ray directions for every pixel.

    Requires the Taichi runtime to be initialised (see ``init_taichi``).

    Args:
        camera: The compiled camera.
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        Array of shape (width, height, 3); ``result[ix, iy]`` is the
        direction for pixel (ix, iy).
    """
    out = np.zeros((width, height, 3), dtype=np.float64)
    _fill_primary_directions(
        out,
        vec3d(*camera.direction.tolist()),
        vec3d(*camera.right.tolist()),
        vec3d(*camera.up.tolist()),
    )
    return out


def primary_direction(camera: Camera, ix: int, iy: int, width: int, height: int) -> npt.NDArray[np.float64]:
    """Compute the primary ray direction for a single pixel on the host.

    Matches ``generate_primary_directions`` to float64 rounding.
    """
    xp = ix / width - 0.5
    yp = iy / height - 0.5
    d = camera.direction + camera.right * xp - camera.up * yp
    n = np.linalg.norm(d)
    return d / n if n > 0.0 else d
