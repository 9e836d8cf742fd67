#!/usr/bin/env python3
"""Render a sphere scene.

This script demonstrates end-to-end rendering with the Enlight ray tracing
core. It builds a scene description with a camera and a root object,
renders one primary ray per pixel and saves the result as a PNG.

Usage:
    python examples/render_sphere.py [options]

Options:
    --width WIDTH       Image width in pixels (default: 256)
    --height HEIGHT     Image height in pixels (default: 256)
    --radius RADIUS     Sphere radius (default: 1.0)
    --sky               Add a sky sphere behind the sphere
    --output OUTPUT     Output file path (default: sphere.png)
    --arch ARCH         Taichi backend for ray generation (default: cpu)
    --warnings          Show scene compilation warnings
    --show              Display the result in a Matplotlib window
    --quiet             Suppress progress output

Example:
    python examples/render_sphere.py --width 128 --height 128 --sky
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a sphere scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=256,
        help="Image width in pixels (default: 256)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=256,
        help="Image height in pixels (default: 256)",
    )
    parser.add_argument(
        "--radius",
        type=float,
        default=1.0,
        help="Sphere radius (default: 1.0)",
    )
    parser.add_argument(
        "--sky",
        action="store_true",
        help="Add a sky sphere behind the sphere",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="sphere.png",
        help="Output file path (default: sphere.png)",
    )
    parser.add_argument(
        "--arch",
        type=str,
        default="cpu",
        choices=["cpu", "gpu", "cuda", "vulkan"],
        help="Taichi backend for ray generation (default: cpu)",
    )
    parser.add_argument(
        "--warnings",
        action="store_true",
        help="Show scene compilation warnings",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Display the result in a Matplotlib window",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def build_scene(radius: float = 1.0, sky: bool = False) -> list:
    """Build a scene description with a camera looking at a sphere."""
    from enlight.geometry import ConstantColour, PositionColour, SkySphere, Union, sphere

    ball = sphere((0.0, 0.0, 0.0), radius, PositionColour())
    root = ball
    if sky:
        root = Union([ball, SkySphere(ConstantColour((0.2, 0.3, 0.6)))])

    return [
        "camera", {"position": (0.0, 0.0, -5.0), "direction": (0.0, 0.0, 1.0)},
        "root", root,
        "tag", {"name": "sphere-demo"},
    ]


def render_sphere(
    width: int = 256,
    height: int = 256,
    radius: float = 1.0,
    sky: bool = False,
    output_path: str = "sphere.png",
    arch: str = "cpu",
    show_warnings: bool = False,
    show: bool = False,
    quiet: bool = False,
) -> Path:
    """Render the sphere scene and save to file.

    Returns:
        Path to the saved image file.
    """
    from enlight.core.config import RenderConfig
    from enlight.core.renderer import render
    from enlight.preview.export import save_png

    config = RenderConfig(show_warnings=show_warnings, arch=arch)
    scene = build_scene(radius, sky)

    if not quiet:
        print(f"Rendering sphere scene ({width}x{height}) on {arch}...")

    start_time = time.time()
    image = render(scene, width=width, height=height, config=config)

    output_file = save_png(image, output_path)

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    if show:
        from enlight.preview.display import display

        display(image, title=f"Sphere (r={radius})")

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    try:
        render_sphere(
            width=args.width,
            height=args.height,
            radius=args.radius,
            sky=args.sky,
            output_path=args.output,
            arch=args.arch,
            show_warnings=args.warnings,
            show=args.show,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
