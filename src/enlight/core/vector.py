"""Vector utilities for the ray tracing core.

Vectors are NumPy float64 arrays: shape (3,) for positions, directions and
RGB colours, shape (4,) for RGBA colours. The in-place helpers
(``normalise``, ``add_multiple``, ``copy_to``) mutate their target in
place and return it, so scratch vectors can be reused across pixels.

Example:
    >>> from enlight.core.vector import vec3, add_multiple, normalise
    >>> d = vec3(0.0, 0.0, 1.0)
    >>> add_multiple(d, vec3(1.0, 0.0, 0.0), 0.5)
    >>> normalise(d)
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

Vector = npt.NDArray[np.float64]

# Vectors shorter than this are treated as zero length
EPSILON = 1e-12


def vec3(x: float | Sequence[float] | Vector = 0.0, y: float = 0.0, z: float = 0.0) -> Vector:
    """Create a new 3D vector.

    Accepts either three scalar components or a single 3-component
    sequence, which is copied.

    Args:
        x: X component, or a sequence of three components.
        y: Y component.
        z: Z component.

    Returns:
        A new float64 array of shape (3,).

    Raises:
        ValueError: If a sequence without exactly three components is given.
    """
    if np.ndim(x) > 0:
        result = np.array(x, dtype=np.float64)
        if result.shape != (3,):
            raise ValueError(f"Expected 3 components, got shape {result.shape}")
        return result
    return np.array([x, y, z], dtype=np.float64)


def vec4(
    x: float | Sequence[float] | Vector = 0.0,
    y: float = 0.0,
    z: float = 0.0,
    w: float = 0.0,
) -> Vector:
    """Create a new 4D vector (typically an RGBA colour).

    Raises:
        ValueError: If a sequence without exactly four components is given.
    """
    if np.ndim(x) > 0:
        result = np.array(x, dtype=np.float64)
        if result.shape != (4,):
            raise ValueError(f"Expected 4 components, got shape {result.shape}")
        return result
    return np.array([x, y, z, w], dtype=np.float64)


def dot(a: Vector, b: Vector) -> float:
    """Compute the dot product of two vectors."""
    return float(np.dot(a, b))


def length(v: Vector) -> float:
    """Compute the Euclidean length of a vector."""
    return float(np.sqrt(np.dot(v, v)))


def length_squared(v: Vector) -> float:
    """Compute the squared length of a vector (avoids the square root)."""
    return float(np.dot(v, v))


def normalise(v: Vector) -> Vector:
    """Normalise a vector to unit length in place.

    Zero-length vectors are left unchanged.

    Args:
        v: The vector to normalise. Modified in place.

    Returns:
        The same array, now unit length.
    """
    n = length(v)
    if n > EPSILON:
        v /= n
    return v


def normalised(v: Vector) -> Vector:
    """Return a unit-length copy of a vector, leaving the input untouched."""
    return normalise(np.array(v, dtype=np.float64))


def add_multiple(target: Vector, v: Vector, factor: float) -> Vector:
    """Add ``v * factor`` to ``target`` in place.

    Args:
        target: The vector to accumulate into. Modified in place.
        v: The vector to scale and add.
        factor: The scale applied to ``v``.

    Returns:
        The updated ``target``.
    """
    target += v * factor
    return target


def copy_to(source: Vector, dest: Vector, offset: int = 0) -> Vector:
    """Copy the components of ``source`` into ``dest`` starting at ``offset``.

    Used to copy an RGB triple into the first three components of an RGBA
    colour without touching alpha.

    Returns:
        The updated ``dest``.
    """
    n = len(source)
    dest[offset : offset + n] = source
    return dest
