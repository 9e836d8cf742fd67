"""Scene object and primitive base classes.

Every object that can appear in a scene graph is a ``SceneObject``. A
``Primitive`` is a scene object that rays can hit. It supports four
queries:

- ``is_finite()``: whether the shape is spatially bounded
- ``get_support(normal, out)``: the point of the shape extremal along ``normal``
- ``get_intersection(start, direction, start_dist, result)``: nearest ray hit
- ``get_ambient_colour(position, colour_out)``: evaluate the colour function

Example:
    >>> from enlight.geometry.sphere import Sphere
    >>> from enlight.geometry.intersection import IntersectionInfo
    >>> s = Sphere(centre=(0, 0, 0), radius=1.0)
    >>> info = IntersectionInfo()
    >>> s.get_intersection(vec3(0, 0, -5), vec3(0, 0, 1), 0.0, info)
    >>> info.hit, info.distance
    (True, 4.0)
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from enlight.core.vector import Vector
from enlight.geometry.colours import DEFAULT_RGB_FUNCTION, ColourFunction
from enlight.geometry.intersection import IntersectionInfo


class SceneObject:
    """Base class for anything that can appear in a scene graph."""


class Primitive(SceneObject, ABC):
    """Abstract base class for objects that can be hit by rays.

    Attributes:
        colour_function: The colour function owned by this primitive.
    """

    def __init__(self, colour_function: ColourFunction | None = None) -> None:
        # Each primitive owns its colour function; the default is never shared
        if colour_function is None:
            colour_function = DEFAULT_RGB_FUNCTION.copy()
        self.colour_function = colour_function

    @abstractmethod
    def is_finite(self) -> bool:
        """Return True if the shape is spatially bounded."""

    @abstractmethod
    def get_support(self, normal: Vector, result_out: IntersectionInfo) -> None:
        """Compute the support point of the shape in direction ``normal``.

        Args:
            normal: The query direction. Need not be unit length.
            result_out: Receives the support point in ``point``, the unit
                query direction in ``normal`` and the support value
                ``dot(point, normal)`` in ``distance``.
        """

    @abstractmethod
    def get_intersection(
        self,
        start: Vector,
        direction: Vector,
        start_dist: float,
        result: IntersectionInfo,
    ) -> None:
        """Find the nearest intersection of ``start + t * direction``, ``t >= start_dist``.

        Args:
            start: The ray origin.
            direction: The ray direction. Must be unit length: distances are
                measured in units of ``direction``.
            start_dist: The minimum accepted ray parameter.
            result: Receives the hit. On a miss only ``result.hit`` is set
                (to False); other fields are left untouched.
        """

    def get_ambient_colour(self, position: Vector, colour_out: Vector) -> None:
        """Evaluate this primitive's colour function at ``position``.

        Writes RGB into ``colour_out[:3]``; a fourth component is untouched.
        """
        self.colour_function.transform(position, colour_out)
