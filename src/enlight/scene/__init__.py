"""Scene module for scene graph compilation.

Components:
    compiler: Keyword set, scene list walker and per-keyword compilers

A compiled scene graph maps Keyword.CAMERA to a Camera, Keyword.ROOT to
the root Primitive and Keyword.TAG to opaque user data.
"""

from .compiler import (
    ELEMENT_COMPILERS,
    ENLIGHT_KEYWORDS,
    Keyword,
    SceneGraph,
    as_keyword,
    compile_element,
    compile_object,
    compile_scene,
    compile_scene_list,
    is_keyword,
    update_graph,
)

__all__ = [
    "Keyword",
    "ENLIGHT_KEYWORDS",
    "ELEMENT_COMPILERS",
    "SceneGraph",
    "as_keyword",
    "is_keyword",
    "compile_object",
    "compile_element",
    "update_graph",
    "compile_scene_list",
    "compile_scene",
]
