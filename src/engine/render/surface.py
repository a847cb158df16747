"""
どこで: `engine.render.surface`。
何を: 描画サーフェスの最小契約 `RenderSurface` と、Drawable 列をそこへ流す `emit`。
なぜ: コアはキャンバス座標 `[-100, 100]²` までの変換だけを行い、デバイス投影はサーフェスに任せるため。
"""

from __future__ import annotations

from typing import Iterable, Protocol

from common.types import RGBA
from engine.core.drawable import Circle, Drawable, Line


class RenderSurface(Protocol):
    """線分と円だけを描ける描画先。座標はキャンバス論理座標。"""

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, color: RGBA) -> None: ...

    def draw_circle(self, x: float, y: float, radius: float, color: RGBA) -> None: ...


def emit(drawables: Iterable[Drawable], surface: RenderSurface) -> int:
    """`drawables` を順にサーフェスへ描画し、描画数を返す。

    順序は入力のまま（= z 順）。未知の型は `TypeError`。
    """
    count = 0
    for d in drawables:
        if isinstance(d, Line):
            surface.draw_line(d.x1, d.y1, d.x2, d.y2, d.color)
        elif isinstance(d, Circle):
            surface.draw_circle(d.x, d.y, d.radius, d.color)
        else:
            raise TypeError(f"unsupported drawable: {d!r}")
        count += 1
    return count


__all__ = ["RenderSurface", "emit"]
