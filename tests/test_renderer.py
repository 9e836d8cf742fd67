"""Integration tests for the image renderer.

Tests cover:
- End-to-end rendering of a unit sphere
- Pixel layout and the (-0.5, -0.5) first-pixel offset
- Render precondition errors (missing root, missing camera, invalid root)
- Compilation errors surfacing through render
"""

import logging

import numpy as np
import pytest

WHITE = 0xFFFFFFFF


def _background(camera_direction, ix, iy, width, height):
    """Expected ARGB channels for a pixel whose ray misses everything."""
    from enlight.camera.camera import compile_camera
    from enlight.camera.primary import primary_direction

    camera = compile_camera({"position": (0, 0, -5), "direction": camera_direction})
    d = primary_direction(camera, ix, iy, width, height)
    rgb = [int(round(min(max(c, 0.0), 1.0) * 255)) for c in d]
    return np.array(rgb + [255])


def _channels(pixel):
    from enlight.geometry.colours import vector4_from_argb

    rgba = vector4_from_argb(int(pixel))
    return np.round(rgba * 255).astype(int)


class TestRenderSphere:
    """End-to-end tests rendering a unit sphere."""

    def test_image_shape_and_dtype(self, sphere_scene):
        """Test images are (height, width) uint32 arrays."""
        from enlight.core.renderer import render

        image = render(sphere_scene, width=3, height=2)
        assert image.shape == (2, 3)
        assert image.dtype == np.uint32

    def test_default_size(self, sphere_scene):
        """Test the default output size is 256x256."""
        from enlight.core.renderer import render

        image = render(sphere_scene)
        assert image.shape == (256, 256)
        assert image[128, 128] == WHITE

    def test_centre_hit_and_corners_background(self, sphere_scene):
        """Test the centre ray hits and the corner rays miss."""
        from enlight.core.renderer import render

        image = render(sphere_scene, width=4, height=4)

        # Pixel (2, 2) has screen offset (0, 0): straight at the sphere
        assert image[2, 2] == WHITE

        for ix, iy in [(0, 0), (3, 0), (0, 3), (3, 3)]:
            assert image[iy, ix] != WHITE
            expected = _background((0, 0, 1), ix, iy, 4, 4)
            assert np.all(np.abs(_channels(image[iy, ix]) - expected) <= 1)

    def test_hit_pattern_matches_geometry(self):
        """Test each pixel is a hit exactly when its ray meets the sphere."""
        from enlight.camera.camera import compile_camera
        from enlight.camera.primary import primary_direction
        from enlight.core.renderer import render
        from enlight.geometry.sphere import sphere

        radius = 1.5
        scene = ["camera", {"position": (0, 0, -5), "direction": (0, 0, 1)}, "root", sphere(None, radius)]
        camera = compile_camera(scene[1])
        width, height = 8, 6
        image = render(scene, width=width, height=height)

        for ix in range(width):
            for iy in range(height):
                d = primary_direction(camera, ix, iy, width, height)
                # Perpendicular distance from the sphere centre to the ray
                oc = -camera.position
                miss_distance = np.linalg.norm(oc - np.dot(oc, d) * d)
                if abs(miss_distance - radius) < 1e-4:
                    continue
                assert (image[iy, ix] == WHITE) == (miss_distance < radius)

    def test_single_pixel(self, sphere_scene):
        """Test a 1x1 render uses screen offset (-0.5, -0.5)."""
        from enlight.core.renderer import render

        image = render(sphere_scene, width=1, height=1)
        assert image.shape == (1, 1)

        # Direction normalise(-0.5, 0.5, 1) misses the sphere
        expected = _background((0, 0, 1), 0, 0, 1, 1)
        assert np.all(np.abs(_channels(image[0, 0]) - expected) <= 1)
        assert _channels(image[0, 0])[0] == 0

    def test_colour_from_leaf_primitive(self):
        """Test pixels take the colour of the primitive they hit."""
        from enlight.core.renderer import render
        from enlight.geometry.colours import ConstantColour
        from enlight.geometry.sky_sphere import SkySphere
        from enlight.geometry.sphere import sphere
        from enlight.geometry.union import Union

        root = Union(
            [
                sphere(None, 1.0, ConstantColour((1.0, 0.0, 0.0))),
                SkySphere(ConstantColour((0.0, 0.0, 1.0))),
            ]
        )
        scene = ["camera", {"position": (0, 0, -5), "direction": (0, 0, 1)}, "root", root]
        image = render(scene, width=4, height=4)

        assert image[2, 2] == 0xFFFF0000
        assert image[0, 0] == 0xFF0000FF

    def test_tag_is_ignored_by_renderer(self, sphere_scene):
        """Test tag entries do not affect the image."""
        from enlight.core.renderer import render

        plain = render(sphere_scene, width=4, height=4)
        tagged = render(sphere_scene + ["tag", {"author": "someone"}], width=4, height=4)
        assert np.array_equal(plain, tagged)

    def test_render_warnings(self, unit_sphere, caplog):
        """Test camera warnings surface through render when enabled."""
        from enlight.core.config import RenderConfig
        from enlight.core.renderer import render

        with caplog.at_level(logging.WARNING, logger="enlight"):
            render(["camera", "root", unit_sphere], width=2, height=2, config=RenderConfig(show_warnings=True))
        messages = [record.getMessage() for record in caplog.records]
        assert messages.count("Camera has no position!") == 1
        assert messages.count("Camera has no direction!") == 1

    def test_camera_inside_sphere(self, unit_sphere):
        """Test a camera inside the sphere sees it in every pixel."""
        from enlight.core.renderer import render

        image = render(["camera", "root", unit_sphere], width=3, height=3)
        assert np.all(image == WHITE)


class TestRenderErrors:
    """Tests for render preconditions and argument validation."""

    def test_empty_scene_has_no_root(self):
        """Test rendering an empty scene fails before any pixel work."""
        from enlight.core import renderer
        from enlight.core.errors import MissingRootError, RenderPreconditionError

        with pytest.raises(MissingRootError, match="no root") as excinfo:
            renderer.render([])
        assert isinstance(excinfo.value, RenderPreconditionError)

    def test_no_pixel_work_before_precondition_errors(self, monkeypatch, unit_sphere):
        """Test ray generation is never reached when the camera is missing."""
        from enlight.core import renderer
        from enlight.core.errors import MissingCameraError

        def fail(*args, **kwargs):
            raise AssertionError("primary rays generated")

        monkeypatch.setattr(renderer, "generate_primary_directions", fail)
        with pytest.raises(MissingCameraError, match="no camera"):
            renderer.render(["root", unit_sphere])
        with pytest.raises(renderer.MissingRootError):
            renderer.render(["camera", {}])

    def test_root_must_be_a_primitive(self, monkeypatch):
        """Test a non-primitive root fails before any pixel work."""
        from enlight.core import renderer
        from enlight.core.errors import InvalidRootError, RenderPreconditionError

        def fail(*args, **kwargs):
            raise AssertionError("primary rays generated")

        monkeypatch.setattr(renderer, "generate_primary_directions", fail)
        with pytest.raises(InvalidRootError) as excinfo:
            renderer.render(["camera", {}, "root", "not-a-primitive"], 2, 2)

        assert "not-a-primitive" in str(excinfo.value)
        assert excinfo.value.root == "not-a-primitive"
        assert isinstance(excinfo.value, RenderPreconditionError)

    def test_root_checked_before_camera(self):
        """Test a scene missing both reports the missing root."""
        from enlight.core.errors import MissingRootError
        from enlight.core.renderer import render

        with pytest.raises(MissingRootError):
            render(["tag", "nothing here"])

    def test_compile_errors_propagate(self):
        """Test unrecognised keywords abort rendering."""
        from enlight.core.errors import UnrecognisedKeywordError
        from enlight.core.renderer import render

        with pytest.raises(UnrecognisedKeywordError, match="light"):
            render(["camera", {}, "light", (0, 1, 0)])

    @pytest.mark.parametrize("width,height", [(0, 4), (4, 0), (-1, 4), (2.5, 4), (True, 4)])
    def test_invalid_dimensions(self, sphere_scene, width, height):
        """Test non-positive or non-integer sizes are rejected."""
        from enlight.core.renderer import render

        with pytest.raises(ValueError, match="positive integer"):
            render(sphere_scene, width=width, height=height)

    def test_new_image_is_blank(self):
        """Test new_image allocates a zeroed buffer."""
        from enlight.core.renderer import new_image

        image = new_image(5, 2)
        assert image.shape == (2, 5)
        assert not image.any()
