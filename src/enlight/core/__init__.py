"""Core rendering module.

Components:
    vector: NumPy vector helpers (creation, normalisation, in-place updates)
    config: RenderConfig options passed through compilation and rendering
    errors: Exception hierarchy for compilation and render preconditions
    tracer: Single-bounce ray tracing with ambient colour lookup
    renderer: Per-pixel render loop producing a packed ARGB image
"""

from .config import DEFAULT_CONFIG, SUPPORTED_ARCHS, RenderConfig
from .errors import (
    EnlightError,
    InvalidRootError,
    KeywordNotImplementedError,
    MissingCameraError,
    MissingRootError,
    RenderPreconditionError,
    SceneCompileError,
    UnrecognisedKeywordError,
)
from .vector import (
    add_multiple,
    copy_to,
    dot,
    length,
    length_squared,
    normalise,
    normalised,
    vec3,
    vec4,
)

# Note: tracer and renderer are NOT imported here to avoid circular imports.
# Import directly from enlight.core.tracer or enlight.core.renderer.

__all__ = [
    "RenderConfig",
    "DEFAULT_CONFIG",
    "SUPPORTED_ARCHS",
    "EnlightError",
    "SceneCompileError",
    "UnrecognisedKeywordError",
    "KeywordNotImplementedError",
    "RenderPreconditionError",
    "MissingRootError",
    "MissingCameraError",
    "InvalidRootError",
    "vec3",
    "vec4",
    "dot",
    "length",
    "length_squared",
    "normalise",
    "normalised",
    "add_multiple",
    "copy_to",
]
