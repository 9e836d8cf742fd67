"""Preview module for output and visualization.

Components:
    export: ARGB unpacking and PNG export (Pillow)
    display: Matplotlib display of rendered images, and render-and-show

Example:
    >>> from enlight.preview import save_png, show
    >>> image = show(scene, width=256, height=256)
    >>> save_png(image, "output.png")
"""

from enlight.preview.display import DEFAULT_TITLE, display, show
from enlight.preview.export import argb_to_rgba, image_to_float, image_to_pil, save_png

__all__ = [
    "display",
    "show",
    "DEFAULT_TITLE",
    "argb_to_rgba",
    "image_to_float",
    "image_to_pil",
    "save_png",
]
