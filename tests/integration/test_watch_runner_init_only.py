from __future__ import annotations

import pytest

from api.watch_runner.utils import (
    DEFAULT_FPS,
    resolve_background,
    resolve_fps,
    resolve_run_config,
    resolve_window_size,
)
from common.settings import get as get_settings


@pytest.mark.integration
# - run_watch(init_only=True) は pyglet を import せずに状態とテーマを返す
def test_run_watch_init_only_headless(clean_env: pytest.MonkeyPatch) -> None:
    """`init_only=True` なら Window 作成前に早期 return する。"""
    from api import run

    result = run(theme="hulk", stars=True, lume=False, init_only=True)
    assert result is not None
    state, theme = result
    assert theme.name == "hulk"
    assert state.stars_enabled is True
    assert state.lume_mode is False
    assert len(state.stars) == 50


@pytest.mark.integration
def test_run_watch_init_only_rejects_unknown_theme(clean_env: pytest.MonkeyPatch) -> None:
    from api import run

    with pytest.raises(ValueError, match="invalid theme"):
        run(theme="daytona", init_only=True)


def test_fps_precedence(clean_env: pytest.MonkeyPatch) -> None:
    section = {"fps": 24}
    assert resolve_fps(None, {}) == DEFAULT_FPS
    assert resolve_fps(None, section) == 24
    clean_env.setattr(get_settings(), "FPS", 50)
    assert resolve_fps(None, section) == 50
    assert resolve_fps(12, section) == 12
    assert resolve_fps(0, section) == 1
    with pytest.raises(ValueError):
        resolve_fps("fast", section)  # type: ignore[arg-type]


def test_window_size_and_background() -> None:
    assert resolve_window_size(None, {}) == 640
    assert resolve_window_size(10, {}) == 64
    with pytest.raises(ValueError):
        resolve_window_size(None, {"window_size": "big"})
    assert resolve_background(None, {"background": "white"}) == (1.0, 1.0, 1.0, 1.0)
    assert resolve_background("#000000", {"background": "white"}) == (0.0, 0.0, 0.0, 1.0)


def test_run_config_bundle(clean_env: pytest.MonkeyPatch) -> None:
    cfg = resolve_run_config({"fps": 15, "window_size": 320}, background="navy")
    assert (cfg.fps, cfg.window_size) == (15, 320)
    assert cfg.background[3] == 1.0
