"""Render configuration.

A ``RenderConfig`` is passed explicitly into the scene compiler, tracer and
renderer. It replaces process-wide flags: diagnostics stay suppressed
unless a config with ``show_warnings=True`` is supplied.

Example:
    >>> from enlight.core.config import RenderConfig
    >>> from enlight.core.renderer import render
    >>> image = render(scene, width=64, height=64,
    ...                config=RenderConfig(show_warnings=True))
"""

from dataclasses import dataclass

# Taichi backends accepted by RenderConfig.arch
SUPPORTED_ARCHS = ("cpu", "gpu", "cuda", "vulkan")


@dataclass(frozen=True)
class RenderConfig:
    """Options controlling scene compilation and rendering.

    Attributes:
        show_warnings: Emit non-fatal diagnostics (e.g. a camera missing its
            position) through the ``enlight`` loggers. Off by default.
        sample_colour_at_hit: Evaluate a primitive's colour function at the
            intersection point instead of the ray origin. Off by default,
            which samples at the ray origin.
        arch: Taichi backend used for primary ray generation.
    """

    show_warnings: bool = False
    sample_colour_at_hit: bool = False
    arch: str = "cpu"


DEFAULT_CONFIG = RenderConfig()
