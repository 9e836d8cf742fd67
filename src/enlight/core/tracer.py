"""Single-bounce ray tracer.

``trace_ray`` performs one intersection query against a root object and one
colour lookup:

- On a hit, the struck primitive's colour function is evaluated at the ray
  origin (or at the hit point when ``RenderConfig.sample_colour_at_hit`` is
  set) and written into the first three components of the output colour.
- On a miss, the ray direction itself is written into the first three
  components of the output colour as a placeholder background.

There are no secondary rays (shadows, reflections) and no retries.

Example:
    >>> from enlight.core.tracer import trace_ray
    >>> colour = vec4(0.5, 0.0, 0.8, 1.0)
    >>> trace_ray(sphere(), vec3(0, 0, -5), vec3(0, 0, 1), colour)
"""

from __future__ import annotations

from enlight.core.config import DEFAULT_CONFIG, RenderConfig
from enlight.core.vector import Vector, copy_to, vec3
from enlight.geometry.intersection import IntersectionInfo
from enlight.geometry.primitive import Primitive


def trace_ray(
    scene_object: Primitive,
    pos: Vector,
    direction: Vector,
    colour_result: Vector,
    result: IntersectionInfo | None = None,
    config: RenderConfig = DEFAULT_CONFIG,
) -> bool:
    """Trace a single ray and write its colour.

    Args:
        scene_object: The root object to intersect.
        pos: The ray origin.
        direction: The unit ray direction.
        colour_result: RGB or RGBA colour receiving the result. Only the
            first three components are written.
        result: Scratch intersection record to reuse. A new one is
            allocated when None. Must not be shared with concurrent calls.
        config: Render configuration.

    Returns:
        True if the ray hit the object.
    """
    if result is None:
        result = IntersectionInfo()

    scene_object.get_intersection(pos, direction, 0.0, result)
    if result.hit:
        hit_object = result.obj if result.obj is not None else scene_object
        sample_at = result.point if config.sample_colour_at_hit else pos
        temp = vec3()
        hit_object.get_ambient_colour(sample_at, temp)
        copy_to(temp, colour_result)
        return True

    copy_to(direction, colour_result)
    return False
