"""Composite primitive holding several child primitives.

A ``Union`` reports the closest hit among its children and records the
struck child (not the union) in ``IntersectionInfo.obj`` so that the tracer
shades the leaf primitive.
"""

from __future__ import annotations

from collections.abc import Iterable

from enlight.core.vector import Vector, dot
from enlight.geometry.colours import ColourFunction
from enlight.geometry.intersection import IntersectionInfo
from enlight.geometry.primitive import Primitive


class Union(Primitive):
    """Closest-hit union of child primitives.

    Attributes:
        children: The child primitives, tested in order.
    """

    def __init__(
        self,
        children: Iterable[Primitive] = (),
        colour_function: ColourFunction | None = None,
    ) -> None:
        super().__init__(colour_function)
        self.children: list[Primitive] = []
        for child in children:
            self.add(child)

    def add(self, child: Primitive) -> Union:
        """Append a child primitive and return the union."""
        if not isinstance(child, Primitive):
            raise TypeError(f"Union children must be primitives, got {type(child).__name__}")
        self.children.append(child)
        return self

    def is_finite(self) -> bool:
        return all(child.is_finite() for child in self.children)

    def get_support(self, normal: Vector, result_out: IntersectionInfo) -> None:
        """Support point of the child extending furthest along ``normal``."""
        best = IntersectionInfo()
        candidate = IntersectionInfo()
        for child in self.children:
            child.get_support(normal, candidate)
            if not candidate.hit:
                continue
            if not best.hit or dot(candidate.point, candidate.normal) > dot(best.point, best.normal):
                best.copy_from(candidate)
        if best.hit:
            result_out.copy_from(best)
        else:
            result_out.hit = False

    def get_intersection(
        self,
        start: Vector,
        direction: Vector,
        start_dist: float,
        result: IntersectionInfo,
    ) -> None:
        # Track the closest hit so far
        closest = IntersectionInfo()
        candidate = IntersectionInfo()
        for child in self.children:
            child.get_intersection(start, direction, start_dist, candidate)
            if candidate.hit and (not closest.hit or candidate.distance < closest.distance):
                closest.copy_from(candidate)
        if closest.hit:
            result.copy_from(closest)
        else:
            result.hit = False

    def __len__(self) -> int:
        return len(self.children)

    def __repr__(self) -> str:
        return f"Union({self.children!r})"
