"""
どこで: `api.watch_runner.utils`（純粋関数/小ヘルパ）。
何を: FPS・ウィンドウサイズ・背景色・初期モードの解決（引数 > 環境変数 > YAML > 既定）。
なぜ: `api.watch` を薄くし、設定の優先順位をテスト可能な形で一箇所に置くため。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from common.settings import get as _get_settings
from common.types import RGBA
from util.color import normalize_color

DEFAULT_FPS = 30
DEFAULT_WINDOW_SIZE = 640
MIN_WINDOW_SIZE = 64


def resolve_fps(
    requested_fps: int | None, section: Mapping[str, Any], *, default: int = DEFAULT_FPS
) -> int:
    """FPS を解決して 1 以上の int を返す。数値化できない値は `ValueError`。"""
    raw: Any = requested_fps
    if raw is None:
        raw = _get_settings().FPS
    if raw is None:
        raw = section.get("fps", default)
    try:
        v = int(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid fps: {raw!r}") from e
    return max(1, v)


def resolve_window_size(requested: int | None, section: Mapping[str, Any]) -> int:
    raw: Any = requested
    if raw is None:
        raw = section.get("window_size", DEFAULT_WINDOW_SIZE)
    try:
        v = int(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid window_size: {raw!r}") from e
    return max(MIN_WINDOW_SIZE, v)


def resolve_background(requested: object | None, section: Mapping[str, Any]) -> RGBA:
    src = requested if requested is not None else section.get("background", "#000000")
    return normalize_color(src)


@dataclass(frozen=True)
class RunConfig:
    """ランナー起動時に 1 度だけ確定する値。"""

    fps: int
    window_size: int
    background: RGBA


def resolve_run_config(
    section: Mapping[str, Any],
    *,
    fps: int | None = None,
    window_size: int | None = None,
    background: object | None = None,
) -> RunConfig:
    return RunConfig(
        fps=resolve_fps(fps, section),
        window_size=resolve_window_size(window_size, section),
        background=resolve_background(background, section),
    )


__all__ = [
    "DEFAULT_FPS",
    "DEFAULT_WINDOW_SIZE",
    "RunConfig",
    "resolve_background",
    "resolve_fps",
    "resolve_run_config",
    "resolve_window_size",
]
