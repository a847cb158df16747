"""
どこで: `api` 入口（高レベル公開 API）。
何を: ランナー `run`・コンポジタ・状態・テーマ・描画プリミティブを再輸出。
なぜ: 利用者が単一名前空間から文字盤の生成 → 描画 → 実行まで完結できるようにするため。

Usage:
    from datetime import datetime
    from api import FaceState, get_theme, render

    shapes = render(FaceState(), get_theme("submariner"), datetime.now())
"""

from engine.core.drawable import Circle, Drawable, Line
from engine.render.surface import RenderSurface, emit
from face import (
    FaceState,
    ThemeProfile,
    WatchFaceCompositor,
    get_theme,
    list_themes,
    render,
    render_layers,
)

from .watch import run_watch as run
from .watch import run_watch as run_watch

__all__ = [
    "Circle",
    "Drawable",
    "FaceState",
    "Line",
    "RenderSurface",
    "ThemeProfile",
    "WatchFaceCompositor",
    "emit",
    "get_theme",
    "list_themes",
    "render",
    "render_layers",
    "run",
    "run_watch",
]

__version__ = "2026.10"
