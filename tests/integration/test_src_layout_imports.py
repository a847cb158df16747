from __future__ import annotations

import importlib

import pytest


@pytest.mark.smoke
@pytest.mark.parametrize(
    "name",
    [
        "api",
        "common.logging",
        "engine.core",
        "engine.render",
        "face",
        "glyphs",
        "util.color",
        "util.utils",
    ],
)
def test_packages_import_from_src(name: str) -> None:
    assert importlib.import_module(name) is not None


@pytest.mark.smoke
def test_api_reexports_render_pipeline(three_oclock, clean_env) -> None:
    import api

    shapes = api.render(api.FaceState(), api.get_theme("submariner"), three_oclock)
    assert shapes and all(isinstance(s, (api.Line, api.Circle)) for s in shapes)
    assert "submariner" in api.list_themes()
