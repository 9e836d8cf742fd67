"""Colour functions and colour packing.

A colour function maps a 3D position to an RGB colour. Every primitive owns
exactly one colour function; ``get_ambient_colour`` evaluates it.

Components:
    ColourFunction: Abstract position -> RGB mapping
    ConstantColour: The same colour everywhere
    PositionColour: Affine mapping ``offset + scale * position``
    argb_from_vector4: Pack an RGBA colour into a 32-bit ARGB pixel
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Sequence

import numpy as np

from enlight.core.vector import Vector, vec3


class ColourFunction(ABC):
    """Mapping from a 3D position to an RGB colour."""

    @abstractmethod
    def transform(self, position: Vector, colour_out: Vector) -> None:
        """Write the colour at ``position`` into ``colour_out[:3]``.

        Args:
            position: The position to evaluate at. Not modified.
            colour_out: A 3- or 4-component vector. Only the first three
                components are written.
        """

    def copy(self) -> ColourFunction:
        """Return an independent copy of this colour function."""
        return copy.deepcopy(self)

    def __call__(self, position: Vector) -> Vector:
        result = vec3()
        self.transform(position, result)
        return result


class ConstantColour(ColourFunction):
    """A colour function returning the same RGB colour at every position.

    Attributes:
        colour: The RGB colour as a float64 array.
    """

    def __init__(self, colour: Sequence[float] | Vector = (1.0, 1.0, 1.0)) -> None:
        self.colour = vec3(colour)

    def transform(self, position: Vector, colour_out: Vector) -> None:
        colour_out[:3] = self.colour

    def __repr__(self) -> str:
        return f"ConstantColour({self.colour.tolist()})"


class PositionColour(ColourFunction):
    """Procedural colour computed as ``offset + scale * position``.

    With the defaults this maps the cube [-1, 1]^3 onto the RGB cube.
    """

    def __init__(
        self,
        scale: Sequence[float] | Vector = (0.5, 0.5, 0.5),
        offset: Sequence[float] | Vector = (0.5, 0.5, 0.5),
    ) -> None:
        self.scale = vec3(scale)
        self.offset = vec3(offset)

    def transform(self, position: Vector, colour_out: Vector) -> None:
        colour_out[:3] = self.offset + self.scale * position

    def __repr__(self) -> str:
        return f"PositionColour(scale={self.scale.tolist()}, offset={self.offset.tolist()})"


# Colour function used by primitives constructed without one (copied per primitive)
DEFAULT_RGB_FUNCTION = ConstantColour((1.0, 1.0, 1.0))


def _channel(value: float) -> int:
    """Convert a colour component to an 8-bit channel, clamping to [0, 1]."""
    if not np.isfinite(value):
        value = 1.0 if value > 0 else 0.0
    return int(round(min(max(float(value), 0.0), 1.0) * 255.0))


def argb_from_vector4(colour: Vector) -> int:
    """Pack an RGBA colour vector into a 32-bit ARGB integer.

    Each component is clamped to [0, 1] and scaled to [0, 255].
    NaN components are treated as 0.

    Args:
        colour: RGBA colour with components (r, g, b, a).

    Returns:
        The pixel value ``a << 24 | r << 16 | g << 8 | b``.
    """
    r, g, b, a = (_channel(c) for c in colour[:4])
    return (a << 24) | (r << 16) | (g << 8) | b


def vector4_from_argb(argb: int) -> Vector:
    """Unpack a 32-bit ARGB integer into an RGBA colour in [0, 1]."""
    argb = int(argb)
    a = (argb >> 24) & 0xFF
    r = (argb >> 16) & 0xFF
    g = (argb >> 8) & 0xFF
    b = argb & 0xFF
    return np.array([r, g, b, a], dtype=np.float64) / 255.0
