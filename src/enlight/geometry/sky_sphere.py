"""Infinite sky-sphere background primitive.

A sky sphere surrounds the whole scene at infinite distance. Every ray hits
it, so it is typically combined with finite primitives in a ``Union`` to
give rays that miss everything else a colour.
"""

from __future__ import annotations

import math

import numpy as np

from enlight.core.vector import Vector, normalised
from enlight.geometry.colours import ColourFunction
from enlight.geometry.intersection import IntersectionInfo
from enlight.geometry.primitive import Primitive

# Distance at which hit and support points are placed
FAR_DISTANCE = 1e10


class SkySphere(Primitive):
    """An unbounded sphere at infinity.

    Hits are reported at distance ``inf``; the hit point is placed
    ``far_distance`` along the ray so that it stays finite and usable as a
    colour-function input.
    """

    def __init__(
        self,
        colour_function: ColourFunction | None = None,
        far_distance: float = FAR_DISTANCE,
    ) -> None:
        super().__init__(colour_function)
        self.far_distance = float(far_distance)

    def is_finite(self) -> bool:
        return False

    def get_support(self, normal: Vector, result_out: IntersectionInfo) -> None:
        n = normalised(normal)
        result_out.set_hit(np.inf, n * self.far_distance, n, self)

    def get_intersection(
        self,
        start: Vector,
        direction: Vector,
        start_dist: float,
        result: IntersectionInfo,
    ) -> None:
        if math.isinf(start_dist) and start_dist > 0:
            result.hit = False
            return
        point = start + direction * self.far_distance
        # Inward facing: the ray always meets the sky from inside
        result.set_hit(np.inf, point, -direction, self)

    def __repr__(self) -> str:
        return f"SkySphere(colour_function={self.colour_function!r})"
