"""Sphere primitive with robust ray-sphere intersection.

This module provides the Sphere primitive and the ``sphere`` convenience
constructor. Intersection uses the robust quadratic formula from Ray
Tracing Gems to avoid catastrophic cancellation when b^2 is nearly equal
to 4ac.

Example:
    >>> from enlight.geometry.sphere import sphere
    >>> from enlight.geometry.intersection import IntersectionInfo
    >>> s = sphere((0.0, 0.0, 0.0), 1.0)
    >>> info = IntersectionInfo()
    >>> s.get_intersection(vec3(0, 0, 5), vec3(0, 0, -1), 0.0, info)
    >>> info.distance
    4.0
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from enlight.core.vector import Vector, dot, normalised, vec3
from enlight.geometry.colours import ColourFunction
from enlight.geometry.intersection import IntersectionInfo
from enlight.geometry.primitive import Primitive


def solve_quadratic_robust(h: float, a: float, c: float, sqrt_d: float) -> tuple[float, float]:
    """Solve ``a*t^2 + 2*h*t + c = 0`` using a numerically stable method.

    Args:
        h: Half of the linear coefficient.
        a: Quadratic coefficient.
        c: Constant term.
        sqrt_d: Square root of the discriminant (h^2 - a*c).

    Returns:
        Tuple of (t0, t1) where t0 <= t1.
    """
    # q = -(h + sign(h) * sqrt(discriminant))
    sign_h = -1.0 if h < 0.0 else 1.0
    q = -(h + sign_h * sqrt_d)

    # Tangent ray through the centre plane: fall back to the standard formula
    if abs(q) < 1e-12:
        t0 = (-h - sqrt_d) / a
        t1 = (-h + sqrt_d) / a
    else:
        t0 = q / a
        t1 = c / q

    if t0 > t1:
        t0, t1 = t1, t0
    return t0, t1


class Sphere(Primitive):
    """A sphere defined by centre point and radius.

    Attributes:
        centre: The centre point of the sphere.
        radius: The radius of the sphere (positive).
        colour_function: The colour function owned by this sphere.
    """

    def __init__(
        self,
        centre: Sequence[float] | Vector = (0.0, 0.0, 0.0),
        radius: float = 1.0,
        colour_function: ColourFunction | None = None,
    ) -> None:
        super().__init__(colour_function)
        if not radius > 0.0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.centre = vec3(centre)
        self.radius = float(radius)

    def is_finite(self) -> bool:
        return True

    def get_support(self, normal: Vector, result_out: IntersectionInfo) -> None:
        n = normalised(normal)
        point = self.centre + n * self.radius
        result_out.set_hit(dot(point, n), point, n, self)

    def get_intersection(
        self,
        start: Vector,
        direction: Vector,
        start_dist: float,
        result: IntersectionInfo,
    ) -> None:
        """Test for ray-sphere intersection.

        The intersection is found by solving:
            |start + t * direction - centre|^2 = radius^2

        which expands to the quadratic a*t^2 + 2*h*t + c = 0 where:
            a = dot(direction, direction)
            h = dot(direction, oc)  (half of the traditional b)
            c = dot(oc, oc) - radius^2
            oc = start - centre

        The nearer root wins when both satisfy ``t >= start_dist``. When the
        ray starts inside the sphere only the far root qualifies and is
        returned.
        """
        oc = start - self.centre
        a = dot(direction, direction)
        h = dot(direction, oc)
        c = dot(oc, oc) - self.radius * self.radius

        discriminant = h * h - a * c
        if discriminant < 0.0 or a == 0.0:
            result.hit = False
            return

        t0, t1 = solve_quadratic_robust(h, a, c, math.sqrt(discriminant))
        if t0 >= start_dist:
            t = t0
        elif t1 >= start_dist:
            t = t1
        else:
            result.hit = False
            return

        point = start + direction * t
        # Outward normal: points from centre to hit point
        normal = (point - self.centre) / self.radius
        result.set_hit(t, point, normal, self)

    def __repr__(self) -> str:
        return f"Sphere(centre={self.centre.tolist()}, radius={self.radius})"


def sphere(
    centre: Sequence[float] | Vector | None = None,
    radius: float = 1.0,
    colour_function: ColourFunction | None = None,
) -> Sphere:
    """Create a sphere primitive.

    With no arguments this is a unit sphere at the origin.

    Args:
        centre: The centre point (default origin).
        radius: The radius (default 1.0).
        colour_function: Optional colour function (default constant white).

    Returns:
        A new Sphere.
    """
    if centre is None:
        centre = vec3()
    return Sphere(centre, radius, colour_function)
