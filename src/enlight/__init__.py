"""Enlight: a minimal ray-tracing core.

This package turns a declarative scene description (a camera plus a root
object) into a raster image by casting one primary ray per pixel, with:
- A primitive/intersection contract shared by all hittable objects
- A scene graph compiler normalising flat keyword/argument sequences
- A single-bounce tracer shading hits with an ambient colour lookup
- Taichi-vectorised primary ray generation

Subpackages:
    core: Vector helpers, configuration, errors, tracer and renderer
    geometry: Primitive contract, intersection records, colour functions, shapes
    camera: Camera compilation and primary ray generation
    scene: Scene graph compilation
    preview: PNG export and Matplotlib display
"""

__version__ = "0.1.0"

from enlight.core.config import DEFAULT_CONFIG, RenderConfig
from enlight.core.errors import (
    EnlightError,
    InvalidRootError,
    KeywordNotImplementedError,
    MissingCameraError,
    MissingRootError,
    RenderPreconditionError,
    SceneCompileError,
    UnrecognisedKeywordError,
)
from enlight.core.renderer import new_image, render
from enlight.core.tracer import trace_ray
from enlight.geometry import (
    ConstantColour,
    IntersectionInfo,
    PositionColour,
    Primitive,
    SceneObject,
    SkySphere,
    Sphere,
    Union,
    sphere,
)
from enlight.scene.compiler import Keyword, compile_scene

__all__ = [
    "RenderConfig",
    "DEFAULT_CONFIG",
    "EnlightError",
    "SceneCompileError",
    "UnrecognisedKeywordError",
    "KeywordNotImplementedError",
    "RenderPreconditionError",
    "MissingRootError",
    "MissingCameraError",
    "InvalidRootError",
    "render",
    "new_image",
    "trace_ray",
    "SceneObject",
    "Primitive",
    "IntersectionInfo",
    "Sphere",
    "SkySphere",
    "Union",
    "sphere",
    "ConstantColour",
    "PositionColour",
    "Keyword",
    "compile_scene",
]
