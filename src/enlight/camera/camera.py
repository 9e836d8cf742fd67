"""Camera record and camera compilation.

A camera is four vectors: position, direction, up and right. Compilation
fills in any that are missing and takes owned copies of the rest. The
direction/up/right basis is not orthonormalised here; primary ray
directions are normalised when they are generated.

Example:
    >>> from enlight.camera.camera import compile_camera
    >>> camera = compile_camera({"position": (0, 0, -5), "direction": (0, 0, 1)})
    >>> camera.up
    array([0., 1., 0.])
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from enlight.core.config import DEFAULT_CONFIG, RenderConfig
from enlight.core.vector import Vector, vec3

logger = logging.getLogger(__name__)

# Default basis for cameras that do not specify one
DEFAULT_POSITION = (0.0, 0.0, 0.0)
DEFAULT_DIRECTION = (0.0, 0.0, 1.0)
DEFAULT_UP = (0.0, 1.0, 0.0)
DEFAULT_RIGHT = (1.0, 0.0, 0.0)

# Sub-keys with a meaning to the camera compiler
CAMERA_KEYS = ("position", "direction", "up", "right")


@dataclass
class Camera:
    """A compiled camera.

    Attributes:
        position: Camera position in world space.
        direction: View direction (the ray through the image centre).
        up: Up vector; spans the image vertically.
        right: Right vector; spans the image horizontally.
        extras: Any other sub-keys supplied with the camera, passed through
            uninterpreted.
    """

    position: Vector = field(default_factory=lambda: vec3(DEFAULT_POSITION))
    direction: Vector = field(default_factory=lambda: vec3(DEFAULT_DIRECTION))
    up: Vector = field(default_factory=lambda: vec3(DEFAULT_UP))
    right: Vector = field(default_factory=lambda: vec3(DEFAULT_RIGHT))
    extras: dict[str, Any] = field(default_factory=dict)


def _warn(config: RenderConfig, message: str) -> None:
    if config.show_warnings:
        logger.warning(message)


def compile_camera(args: Mapping[str, Any] | Camera | None, config: RenderConfig = DEFAULT_CONFIG) -> Camera:
    """Compile camera arguments into a Camera with all four vectors present.

    Missing ``up`` defaults to (0, 1, 0) and missing ``right`` to (1, 0, 0).
    Missing ``position`` defaults to the origin and missing ``direction`` to
    (0, 0, 1); both of these also emit a warning when
    ``config.show_warnings`` is enabled. Warnings never abort compilation.

    Args:
        args: A mapping of camera sub-keys, an existing Camera, or None.
        config: Render configuration controlling diagnostics.

    Returns:
        A new Camera whose vectors are copies, never aliases of the input.

    Raises:
        ValueError: If a supplied vector does not have three components.
        TypeError: If ``args`` is neither a mapping, a Camera nor None.
    """
    if isinstance(args, Camera):
        args = {
            "position": args.position,
            "direction": args.direction,
            "up": args.up,
            "right": args.right,
            **args.extras,
        }
    elif args is None:
        args = {}
    elif not isinstance(args, Mapping):
        raise TypeError(f"Camera arguments must be a mapping, got {type(args).__name__}")

    up = args.get("up")
    if up is None:
        up = DEFAULT_UP
    right = args.get("right")
    if right is None:
        right = DEFAULT_RIGHT

    position = args.get("position")
    if position is None:
        _warn(config, "Camera has no position!")
        position = DEFAULT_POSITION

    direction = args.get("direction")
    if direction is None:
        _warn(config, "Camera has no direction!")
        direction = DEFAULT_DIRECTION

    extras = {key: value for key, value in args.items() if key not in CAMERA_KEYS}

    return Camera(
        position=vec3(position),
        direction=vec3(direction),
        up=vec3(up),
        right=vec3(right),
        extras=extras,
    )
