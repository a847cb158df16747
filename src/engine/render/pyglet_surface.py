"""
どこで: `engine.render.pyglet_surface`。
何を: `RenderSurface` を pyglet の `shapes.Line` / `shapes.Arc` バッチで実装する。
なぜ: 対話ランナーで 1 フレーム分の形状をまとめて描くため（保持型シーングラフは持たない）。
"""

from __future__ import annotations

from typing import Any

import pyglet

from common.types import RGBA
from util.color import to_u8_rgba

from .layout import Viewport


class PygletSurface:
    """フレームごとに作り直すバッチ描画サーフェス。

    `begin(viewport)` → `draw_line` / `draw_circle` → `flush()` の順に呼ぶ。
    """

    def __init__(self, *, line_width: float = 1.5) -> None:
        self._line_width = float(line_width)
        self._batch: Any = None
        self._shapes: list[Any] = []
        self._viewport: Viewport | None = None

    def begin(self, viewport: Viewport) -> None:
        self._viewport = viewport
        self._batch = pyglet.graphics.Batch()
        self._shapes = []

    def _require_viewport(self) -> Viewport:
        if self._viewport is None:
            raise RuntimeError("PygletSurface.begin() must be called before drawing")
        return self._viewport

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, color: RGBA) -> None:
        vp = self._require_viewport()
        dx1, dy1 = vp.to_device(x1, y1)
        dx2, dy2 = vp.to_device(x2, y2)
        # 5 番目の位置引数は線幅（pyglet 2.0: width / 2.1: thickness）
        self._shapes.append(
            pyglet.shapes.Line(
                dx1, dy1, dx2, dy2, self._line_width, color=to_u8_rgba(color), batch=self._batch
            )
        )

    def draw_circle(self, x: float, y: float, radius: float, color: RGBA) -> None:
        vp = self._require_viewport()
        dx, dy = vp.to_device(x, y)
        r = max(1.0, vp.scale_length(radius))
        self._shapes.append(
            pyglet.shapes.Arc(dx, dy, r, color=to_u8_rgba(color), batch=self._batch)
        )

    def flush(self) -> int:
        """バッチを描画し、描画した図形数を返す。"""
        n = len(self._shapes)
        if self._batch is not None:
            self._batch.draw()
        self._batch = None
        self._shapes = []
        return n


__all__ = ["PygletSurface"]
