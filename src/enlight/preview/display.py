"""Matplotlib-based display for rendered images.

Example:
    >>> from enlight.preview.display import show
    >>> show(scene, width=256, height=256, title="Sphere")
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import numpy as np
import numpy.typing as npt

from enlight.core.config import DEFAULT_CONFIG, RenderConfig
from enlight.core.renderer import DEFAULT_HEIGHT, DEFAULT_WIDTH, render
from enlight.preview.export import argb_to_rgba

DEFAULT_TITLE = "Enlight Render"


def display(
    image: npt.NDArray[np.uint32],
    *,
    title: str | None = None,
    figsize: tuple[float, float] = (6, 6),
    block: bool = True,
):
    """Display an ARGB image in a new Matplotlib figure.

    Args:
        image: Packed ARGB image of shape (H, W).
        title: Figure title (default "Enlight Render").
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until the figure is closed.

    Returns:
        The Matplotlib figure.
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(argb_to_rgba(image), interpolation="nearest")
    ax.axis("off")
    ax.set_title(title or DEFAULT_TITLE)

    plt.tight_layout()
    plt.show(block=block)
    return fig


def show(
    scene: Iterable[Any] | Mapping[Any, Any] | None,
    *,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    title: str | None = None,
    config: RenderConfig = DEFAULT_CONFIG,
    block: bool = True,
) -> npt.NDArray[np.uint32]:
    """Render a scene and display it in a new figure.

    Returns:
        The rendered ARGB image.
    """
    image = render(scene, width=width, height=height, config=config)
    display(image, title=title, block=block)
    return image
