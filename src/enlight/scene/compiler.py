"""Scene graph compiler.

A scene description is a flat sequence of keyword markers, each optionally
followed by one argument:

    ["camera", {"position": (0, 0, -5), "direction": (0, 0, 1)},
     "root", sphere(),
     "tag", "my-scene"]

Compilation walks the sequence and produces a scene graph: a dict mapping
each ``Keyword`` to its compiled value. A keyword followed directly by
another keyword (or by the end of the sequence) receives ``None`` as its
argument. Compiling the same keyword twice keeps only the last value.

Example:
    >>> from enlight.scene.compiler import Keyword, compile_scene
    >>> graph = compile_scene(["camera", "root", sphere()])
    >>> sorted(graph)
    [<Keyword.CAMERA: 'camera'>, <Keyword.ROOT: 'root'>]
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from enum import Enum
from typing import Any

from enlight.camera.camera import compile_camera
from enlight.core.config import DEFAULT_CONFIG, RenderConfig
from enlight.core.errors import KeywordNotImplementedError, UnrecognisedKeywordError

logger = logging.getLogger(__name__)


class Keyword(str, Enum):
    """Keywords recognised in a scene description."""

    CAMERA = "camera"
    ROOT = "root"
    TAG = "tag"

    def __str__(self) -> str:
        return self.value


# Closed set of keywords that may start a binding
ENLIGHT_KEYWORDS = frozenset(Keyword)

SceneGraph = dict[Keyword, Any]

_MISSING = object()


def as_keyword(item: Any) -> Keyword | None:
    """Return the Keyword for ``item``, or None if it is not a keyword.

    Accepts Keyword members and strings equal to a keyword's value.
    """
    if isinstance(item, Keyword):
        return item
    if isinstance(item, str):
        try:
            return Keyword(item)
        except ValueError:
            return None
    return None


def is_keyword(item: Any) -> bool:
    """Check whether ``item`` is a recognised scene keyword."""
    return as_keyword(item) is not None


def compile_object(obj: Any) -> Any:
    """Compile a scene object. Objects are used as given."""
    return obj


def _compile_root(args: Any, config: RenderConfig) -> Any:
    return compile_object(args)


def _compile_tag(args: Any, config: RenderConfig) -> Any:
    return args


# Per-keyword compilers, called as compiler(args, config)
ELEMENT_COMPILERS: dict[Keyword, Callable[[Any, RenderConfig], Any]] = {
    Keyword.CAMERA: compile_camera,
    Keyword.ROOT: _compile_root,
    Keyword.TAG: _compile_tag,
}


def compile_element(key: Any, args: Any, config: RenderConfig = DEFAULT_CONFIG) -> Any:
    """Compile a single scene graph element.

    Args:
        key: The keyword (must be recognised).
        args: The keyword's argument; may be None.
        config: Render configuration passed to sub-compilers.

    Returns:
        The compiled value for the keyword.

    Raises:
        UnrecognisedKeywordError: If ``key`` is not a scene keyword.
        KeywordNotImplementedError: If ``key`` has no compiler.
    """
    keyword = as_keyword(key)
    if keyword is None:
        raise UnrecognisedKeywordError(key)

    compiler = ELEMENT_COMPILERS.get(keyword)
    if compiler is None:
        raise KeywordNotImplementedError(keyword)
    return compiler(args, config)


def update_graph(graph: SceneGraph, key: Any, args: Any, config: RenderConfig = DEFAULT_CONFIG) -> SceneGraph:
    """Compile ``key``/``args`` and store the result, replacing any previous value."""
    value = compile_element(key, args, config)
    graph[as_keyword(key)] = value
    return graph


def _flatten(scene: Mapping[Any, Any]) -> Iterator[Any]:
    for key, value in scene.items():
        yield key
        yield value


def compile_scene_list(
    scene: Iterable[Any] | None,
    config: RenderConfig = DEFAULT_CONFIG,
    graph: SceneGraph | None = None,
) -> SceneGraph:
    """Compile a flat scene description into a scene graph.

    The first item must be a keyword. Each keyword takes the following item
    as its argument unless that item is itself a keyword, in which case
    the keyword's argument is None. After an argument the next item must be
    a keyword again.

    Args:
        scene: The scene description, or None for an empty scene.
        config: Render configuration passed to sub-compilers.
        graph: Existing graph to extend (a new empty graph by default).
            It is not modified if compilation fails.

    Returns:
        The compiled scene graph.

    Raises:
        UnrecognisedKeywordError: If an item in keyword position is not a
            recognised keyword.
        KeywordNotImplementedError: If a recognised keyword has no compiler.
    """
    result: SceneGraph = dict(graph) if graph else {}
    if scene is None:
        return result

    items = iter(scene)
    key = next(items, _MISSING)
    if key is _MISSING:
        return result

    while True:
        # Validate before consuming the argument
        if not is_keyword(key):
            raise UnrecognisedKeywordError(key)
        item = next(items, _MISSING)
        if item is _MISSING:
            update_graph(result, key, None, config)
            break
        if is_keyword(item):
            update_graph(result, key, None, config)
            key = item
            continue
        update_graph(result, key, item, config)
        key = next(items, _MISSING)
        if key is _MISSING:
            break

    logger.debug("Compiled scene graph with keys %s", [str(k) for k in result])
    return result


def compile_scene(scene: Iterable[Any] | Mapping[Any, Any] | None, config: RenderConfig = DEFAULT_CONFIG) -> SceneGraph:
    """Compile a scene for rendering.

    Accepts a flat keyword/argument sequence, a mapping of keyword to
    argument (walked in insertion order), or None. An empty description
    compiles to an empty graph; missing components are only reported at
    render time.

    Args:
        scene: The scene description.
        config: Render configuration controlling diagnostics.

    Returns:
        The compiled scene graph.
    """
    if isinstance(scene, Mapping):
        scene = _flatten(scene)
    elif isinstance(scene, (str, bytes)):
        scene = [scene]
    return compile_scene_list(scene, config)
