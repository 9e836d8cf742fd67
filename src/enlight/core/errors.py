"""Exception types raised by scene compilation and rendering.

All errors are fatal: compilation aborts without returning a partial graph,
and rendering aborts before any pixel is computed.
"""

from __future__ import annotations

from typing import Any


class EnlightError(RuntimeError):
    """Base class for all errors raised by the ray tracing core."""


class SceneCompileError(EnlightError, ValueError):
    """A scene description could not be compiled into a scene graph.

    Attributes:
        keyword: The offending item from the scene description.
    """

    def __init__(self, message: str, keyword: Any = None) -> None:
        super().__init__(message)
        self.keyword = keyword


class UnrecognisedKeywordError(SceneCompileError):
    """An item in keyword position is not one of the recognised keywords."""

    def __init__(self, keyword: Any) -> None:
        super().__init__(f"Not a valid enlight keyword! [{keyword}]", keyword)


class KeywordNotImplementedError(SceneCompileError):
    """A recognised keyword has no compiler."""

    def __init__(self, keyword: Any) -> None:
        super().__init__(f"Enlight keyword not implemented! [{keyword}]", keyword)


class RenderPreconditionError(EnlightError):
    """A compiled scene graph is missing a component required for rendering."""


class MissingRootError(RenderPreconditionError):
    """The scene graph has no root object."""

    def __init__(self, graph_keys: Any = None) -> None:
        super().__init__(f"Scene has no root object! [keys: {graph_keys!r}]")


class MissingCameraError(RenderPreconditionError):
    """The scene graph has no camera."""

    def __init__(self, graph_keys: Any = None) -> None:
        super().__init__(f"Scene has no camera! [keys: {graph_keys!r}]")


class InvalidRootError(RenderPreconditionError):
    """The scene graph's root object cannot be intersected by rays."""

    def __init__(self, root: Any) -> None:
        super().__init__(f"Scene root is not a primitive! [{root}]")
        self.root = root
