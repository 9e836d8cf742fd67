"""Image export utilities for rendered images.

Rendered images are packed ARGB ``uint32`` arrays of shape (H, W). This
module unpacks them into 8-bit RGBA arrays and writes PNG files.

Supported formats:
    - PNG (8-bit RGBA via Pillow)

Example:
    >>> from enlight.core.renderer import render
    >>> from enlight.preview.export import save_png
    >>> image = render(scene, width=256, height=256)
    >>> save_png(image, "output.png")
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage


def argb_to_rgba(image: npt.NDArray[np.uint32]) -> npt.NDArray[np.uint8]:
    """Unpack an ARGB image into an 8-bit RGBA array.

    Args:
        image: Packed ARGB image of shape (H, W).

    Returns:
        Array of shape (H, W, 4) with dtype uint8 in RGBA channel order.

    Raises:
        ValueError: If the image is not two-dimensional.
    """
    if image.ndim != 2:
        raise ValueError(f"Expected a 2D ARGB image, got shape {image.shape}")

    packed = image.astype(np.uint32)
    rgba = np.empty(image.shape + (4,), dtype=np.uint8)
    rgba[..., 0] = (packed >> 16) & 0xFF
    rgba[..., 1] = (packed >> 8) & 0xFF
    rgba[..., 2] = packed & 0xFF
    rgba[..., 3] = (packed >> 24) & 0xFF
    return rgba


def image_to_float(image: npt.NDArray[np.uint32]) -> npt.NDArray[np.float32]:
    """Convert an ARGB image to a float32 RGBA array in [0, 1]."""
    return argb_to_rgba(image).astype(np.float32) / 255.0


def image_to_pil(image: npt.NDArray[np.uint32]) -> PILImage.Image:
    """Convert an ARGB image to a Pillow RGBA image."""
    return PILImage.fromarray(argb_to_rgba(image))


def save_png(image: npt.NDArray[np.uint32], filepath: str | Path) -> Path:
    """Save an ARGB image as a PNG file.

    Args:
        image: Packed ARGB image of shape (H, W).
        filepath: Output file path (should end in .png).

    Returns:
        The path written to.
    """
    path = Path(filepath)
    image_to_pil(image).save(path, format="PNG")
    return path
