from __future__ import annotations

from pathlib import Path

import pytest

from common.env import env_bool, env_int, env_str
from common.settings import get as get_settings
from common.settings import reload_from_env
from util.utils import load_config, watch_section


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_root_config_overrides_default(tmp_path: Path) -> None:
    _write(tmp_path / "configs" / "default.yaml", "watch:\n  theme: submariner\n  fps: 30\n")
    _write(tmp_path / "config.yaml", "watch:\n  theme: hulk\n")
    cfg = load_config(tmp_path)
    # トップレベルのみ上書き（ネストはマージしない）
    assert cfg["watch"] == {"theme": "hulk"}


def test_missing_or_broken_files_yield_empty(tmp_path: Path) -> None:
    assert load_config(tmp_path) == {}
    _write(tmp_path / "configs" / "default.yaml", "watch: [unclosed\n")
    assert load_config(tmp_path) == {}


def test_watch_section_shapes() -> None:
    assert watch_section({"watch": {"fps": 12}}) == {"fps": 12}
    assert watch_section({"watch": 3}) == {}
    assert watch_section({}) == {}


def test_repository_default_config_has_watch_section() -> None:
    section = watch_section()
    assert section.get("theme") == "submariner"
    assert section.get("fps") == 30


def test_env_helpers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PXW_X_INT", "0")
    assert env_int("PXW_X_INT", None, min_value=1) == 1
    monkeypatch.setenv("PXW_X_INT", "abc")
    assert env_int("PXW_X_INT", 7) == 7
    monkeypatch.setenv("PXW_X_BOOL", "on")
    assert env_bool("PXW_X_BOOL") is True
    monkeypatch.setenv("PXW_X_STR", "   ")
    assert env_str("PXW_X_STR", "fallback") == "fallback"


def test_settings_reload_from_env(clean_env: pytest.MonkeyPatch) -> None:
    assert get_settings().THEME is None
    clean_env.setenv("PXW_THEME", "hulk")
    clean_env.setenv("PXW_LOG_LEVEL", "debug")
    clean_env.setenv("PXW_FPS", "60")
    clean_env.setenv("PXW_DEBUG_FRAMES", "1")
    reload_from_env()
    s = get_settings()
    assert (s.THEME, s.LOG_LEVEL, s.FPS, s.DEBUG_FRAMES) == ("hulk", "DEBUG", 60, True)
