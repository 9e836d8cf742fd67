"""Geometry module for primitives and intersection queries.

Components:
    intersection: IntersectionInfo scratch record filled by queries
    colours: Colour functions and ARGB packing
    primitive: SceneObject and the Primitive contract
    sphere: Sphere primitive with robust ray-sphere intersection
    sky_sphere: Infinite background primitive
    union: Closest-hit composite of child primitives

Ray-object intersection follows the pattern:
    primitive.get_intersection(start, direction, start_dist, info)
    if info.hit: ... info.distance, info.point, info.normal, info.obj
"""

from .colours import (
    DEFAULT_RGB_FUNCTION,
    ColourFunction,
    ConstantColour,
    PositionColour,
    argb_from_vector4,
    vector4_from_argb,
)
from .intersection import IntersectionInfo
from .primitive import Primitive, SceneObject
from .sky_sphere import SkySphere
from .sphere import Sphere, solve_quadratic_robust, sphere
from .union import Union

__all__ = [
    "IntersectionInfo",
    "SceneObject",
    "Primitive",
    "Sphere",
    "sphere",
    "solve_quadratic_robust",
    "SkySphere",
    "Union",
    "ColourFunction",
    "ConstantColour",
    "PositionColour",
    "DEFAULT_RGB_FUNCTION",
    "argb_from_vector4",
    "vector4_from_argb",
]
