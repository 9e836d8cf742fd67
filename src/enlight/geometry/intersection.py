"""Intersection record filled in by primitive queries.

An ``IntersectionInfo`` is a mutable scratch record passed into
``Primitive.get_intersection`` and ``Primitive.get_support``. The caller
reads it immediately after the call and may reuse it for the next ray.

Example:
    >>> from enlight.geometry.intersection import IntersectionInfo
    >>> info = IntersectionInfo()
    >>> sphere.get_intersection(origin, direction, 0.0, info)
    >>> if info.hit:
    ...     print(info.distance, info.point)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from enlight.core.vector import Vector, vec3

if TYPE_CHECKING:
    from enlight.geometry.primitive import Primitive


@dataclass
class IntersectionInfo:
    """Result of a ray intersection or support query.

    A single record must not be shared between concurrent ray evaluations,
    since queries overwrite its fields in place.

    Attributes:
        hit: Whether the query produced a result. When False, every other
            field is undefined and must not be read.
        distance: The ray parameter t of the hit. Only valid if hit is True.
        point: The hit point (or support point). Only valid if hit is True.
        normal: The outward surface normal at ``point`` (unit length).
            Only valid if hit is True.
        obj: The primitive that produced the result. For composite objects
            this is the leaf primitive that was actually struck.
            Only valid if hit is True.
    """

    hit: bool = False
    distance: float = np.inf
    point: Vector = field(default_factory=vec3)
    normal: Vector = field(default_factory=vec3)
    obj: Primitive | None = None

    def reset(self) -> None:
        """Mark the record as holding no result."""
        self.hit = False

    def set_hit(self, distance: float, point: Vector, normal: Vector, obj: Primitive) -> None:
        """Record a result, copying ``point`` and ``normal`` into owned storage."""
        self.hit = True
        self.distance = float(distance)
        self.point[:] = point
        self.normal[:] = normal
        self.obj = obj

    def copy_from(self, other: IntersectionInfo) -> None:
        """Overwrite this record with the contents of ``other``."""
        self.hit = other.hit
        self.distance = other.distance
        self.point[:] = other.point
        self.normal[:] = other.normal
        self.obj = other.obj
