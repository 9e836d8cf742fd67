"""Unit tests for the scene graph compiler.

Tests cover:
- Keyword recognition and the unrecognised-keyword error
- The walking rules (arguments, implicit None arguments)
- Per-keyword compilation (camera, root, tag)
- Last-write-wins merging
- Empty scenes
"""

import numpy as np
import pytest


class TestKeywords:
    """Tests for keyword recognition."""

    def test_strings_and_members_are_keywords(self):
        """Test keyword values and enum members are recognised."""
        from enlight.scene.compiler import Keyword, is_keyword

        assert is_keyword("camera")
        assert is_keyword(Keyword.ROOT)
        assert is_keyword("tag")
        assert not is_keyword("Camera")
        assert not is_keyword(None)
        assert not is_keyword({"camera": 1})

    def test_keyword_set_is_closed(self):
        """Test the recognised keywords are exactly camera, root and tag."""
        from enlight.scene.compiler import ENLIGHT_KEYWORDS

        assert {str(k) for k in ENLIGHT_KEYWORDS} == {"camera", "root", "tag"}


class TestCompileScene:
    """Tests for compile_scene walking and merging."""

    @pytest.mark.parametrize("scene", [None, [], (), {}])
    def test_empty_scene(self, scene):
        """Test empty descriptions compile to an empty graph."""
        from enlight.scene.compiler import compile_scene

        assert compile_scene(scene) == {}

    def test_camera_and_root(self, unit_sphere):
        """Test a typical scene compiles to camera and root entries."""
        from enlight.camera.camera import Camera
        from enlight.scene.compiler import Keyword, compile_scene

        graph = compile_scene(
            ["camera", {"position": (0, 0, -5), "direction": (0, 0, 1)}, "root", unit_sphere]
        )
        assert set(graph) == {Keyword.CAMERA, Keyword.ROOT}
        assert isinstance(graph[Keyword.CAMERA], Camera)
        assert graph[Keyword.CAMERA].position.tolist() == [0.0, 0.0, -5.0]
        assert graph[Keyword.ROOT] is unit_sphere

    def test_keyword_without_argument(self, unit_sphere):
        """Test a keyword followed by another keyword gets a None argument."""
        from enlight.scene.compiler import Keyword, compile_scene

        graph = compile_scene(["camera", "root", unit_sphere])
        assert graph[Keyword.CAMERA].direction.tolist() == [0.0, 0.0, 1.0]
        assert graph[Keyword.ROOT] is unit_sphere

    def test_trailing_keyword_without_argument(self):
        """Test a keyword at the end of the sequence gets a None argument."""
        from enlight.scene.compiler import Keyword, compile_scene

        graph = compile_scene(["tag", "first", "root"])
        assert graph[Keyword.TAG] == "first"
        assert Keyword.ROOT in graph
        assert graph[Keyword.ROOT] is None

    def test_tag_is_uninterpreted(self):
        """Test tag payloads are stored as given."""
        from enlight.scene.compiler import Keyword, compile_scene

        payload = {"anything": [1, 2, 3]}
        graph = compile_scene(["tag", payload])
        assert graph[Keyword.TAG] is payload

    def test_enum_keywords_accepted(self, unit_sphere):
        """Test Keyword members work in place of strings."""
        from enlight.scene.compiler import Keyword, compile_scene

        graph = compile_scene([Keyword.ROOT, unit_sphere, Keyword.CAMERA])
        assert graph[Keyword.ROOT] is unit_sphere
        assert Keyword.CAMERA in graph

    def test_last_write_wins(self, unit_sphere):
        """Test compiling the same keyword twice keeps only the second value."""
        from enlight.scene.compiler import Keyword, compile_scene

        graph = compile_scene(
            [
                "camera", {"position": (0, 0, 0)},
                "root", unit_sphere,
                "camera", {"position": (1, 2, 3), "direction": (0, 1, 0)},
            ]
        )
        camera = graph[Keyword.CAMERA]
        assert camera.position.tolist() == [1.0, 2.0, 3.0]
        assert camera.direction.tolist() == [0.0, 1.0, 0.0]
        assert len(graph) == 2

    def test_mapping_description(self, unit_sphere):
        """Test a mapping is walked as keyword/argument pairs."""
        from enlight.scene.compiler import Keyword, compile_scene

        graph = compile_scene({"camera": None, "root": unit_sphere})
        assert graph[Keyword.ROOT] is unit_sphere
        assert graph[Keyword.CAMERA].position.tolist() == [0.0, 0.0, 0.0]

    def test_generator_description(self, unit_sphere):
        """Test any iterable can be compiled."""
        from enlight.scene.compiler import Keyword, compile_scene

        graph = compile_scene(item for item in ["root", unit_sphere])
        assert graph[Keyword.ROOT] is unit_sphere

    def test_extends_existing_graph(self, unit_sphere):
        """Test compile_scene_list merges into a copy of an existing graph."""
        from enlight.scene.compiler import Keyword, compile_scene_list

        base = {Keyword.TAG: "base"}
        graph = compile_scene_list(["root", unit_sphere], graph=base)
        assert graph[Keyword.TAG] == "base"
        assert graph[Keyword.ROOT] is unit_sphere
        assert base == {Keyword.TAG: "base"}


class TestCompileErrors:
    """Tests for fatal compilation errors."""

    def test_unrecognised_keyword(self):
        """Test an unknown symbol fails and names the symbol."""
        from enlight.core.errors import SceneCompileError, UnrecognisedKeywordError
        from enlight.scene.compiler import compile_scene

        with pytest.raises(UnrecognisedKeywordError) as excinfo:
            compile_scene(["lights", [1, 2, 3]])

        assert "lights" in str(excinfo.value)
        assert excinfo.value.keyword == "lights"
        assert isinstance(excinfo.value, SceneCompileError)
        assert isinstance(excinfo.value, ValueError)

    def test_unrecognised_keyword_named_verbatim(self):
        """Test the message contains the symbol exactly, quotes and newlines included."""
        from enlight.core.errors import UnrecognisedKeywordError
        from enlight.scene.compiler import compile_scene

        symbol = "light's \"key\"\n"
        with pytest.raises(UnrecognisedKeywordError) as excinfo:
            compile_scene([symbol])

        assert symbol in str(excinfo.value)

    def test_unrecognised_keyword_after_valid_bindings(self, unit_sphere):
        """Test an unknown symbol later in the sequence still fails."""
        from enlight.core.errors import UnrecognisedKeywordError
        from enlight.scene.compiler import compile_scene

        with pytest.raises(UnrecognisedKeywordError, match="bogus"):
            compile_scene(["camera", {}, "root", unit_sphere, "bogus"])

    def test_second_argument_is_not_a_keyword(self, unit_sphere):
        """Test a keyword takes at most one argument."""
        from enlight.core.errors import UnrecognisedKeywordError
        from enlight.scene.compiler import compile_scene

        other = {"not": "a keyword"}
        with pytest.raises(UnrecognisedKeywordError) as excinfo:
            compile_scene(["root", unit_sphere, other])
        assert excinfo.value.keyword is other

    def test_leading_argument_fails(self):
        """Test the first item must be a keyword."""
        from enlight.core.errors import UnrecognisedKeywordError
        from enlight.scene.compiler import compile_scene

        with pytest.raises(UnrecognisedKeywordError, match="None"):
            compile_scene([None, "root"])

    def test_bare_string_scene(self):
        """Test a lone string is treated as a one-item description."""
        from enlight.core.errors import UnrecognisedKeywordError
        from enlight.scene.compiler import Keyword, compile_scene

        assert Keyword.CAMERA in compile_scene("camera")
        with pytest.raises(UnrecognisedKeywordError, match="cam"):
            compile_scene("cam")

    def test_keyword_not_implemented(self, monkeypatch):
        """Test a recognised keyword without a compiler fails."""
        from enlight.core.errors import KeywordNotImplementedError
        from enlight.scene import compiler

        monkeypatch.delitem(compiler.ELEMENT_COMPILERS, compiler.Keyword.TAG)
        with pytest.raises(KeywordNotImplementedError, match="tag"):
            compiler.compile_scene(["tag", "payload"])

    def test_camera_errors_propagate(self):
        """Test camera compilation errors abort scene compilation."""
        from enlight.scene.compiler import compile_scene

        with pytest.raises(ValueError):
            compile_scene(["camera", {"position": (1.0,)}])


class TestCompileElement:
    """Tests for single-element compilation."""

    def test_camera_element_copies_vectors(self):
        """Test the camera compiler output does not alias input vectors."""
        from enlight.scene.compiler import compile_element

        position = np.array([1.0, 2.0, 3.0])
        camera = compile_element("camera", {"position": position})
        position[0] = 0.0
        assert camera.position[0] == 1.0

    def test_root_element_identity(self, unit_sphere):
        """Test the object compiler returns its argument."""
        from enlight.scene.compiler import compile_element

        assert compile_element("root", unit_sphere) is unit_sphere
