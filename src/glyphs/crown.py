"""
どこで: `glyphs.crown`。
何を: 5 本爪の王冠（13 線分 + 爪先 3 点、12×10 ローカル箱・底辺中央原点）とその描画。
なぜ: ロゴ上部の紋章を固定表として持ち、描画は一様スケールと平行移動だけにするため。
"""

from __future__ import annotations

import numpy as np

from common.types import RGBA, Segment, Vec2
from engine.core.drawable import Circle, Drawable, Line

CROWN_SEGMENTS: tuple[Segment, ...] = (
    # 底辺と左右の壁
    (-6.0, 0.0, 6.0, 0.0),
    (-6.0, 0.0, -6.0, 2.0),
    (6.0, 0.0, 6.0, 2.0),
    # 爪（左 → 右のジグザグ、中央が最も高い）
    (-6.0, 2.0, -5.0, 8.0),
    (-5.0, 8.0, -3.5, 3.0),
    (-3.5, 3.0, -2.0, 7.0),
    (-2.0, 7.0, -0.5, 3.0),
    (-0.5, 3.0, 0.0, 9.0),
    (0.0, 9.0, 0.5, 3.0),
    (0.5, 3.0, 2.0, 7.0),
    (2.0, 7.0, 3.5, 3.0),
    (3.5, 3.0, 5.0, 8.0),
    (5.0, 8.0, 6.0, 2.0),
)

# 爪 1・3・5 の先端
CROWN_DOTS: tuple[Vec2, ...] = ((-5.0, 8.0), (0.0, 9.0), (5.0, 8.0))


def draw_crown(
    origin: Vec2, scale: float, color: RGBA, *, dot_radius: float = 0.6
) -> list[Drawable]:
    """王冠の 13 線分と 3 点を `scale` 倍して `origin` に置く（線分 → 点の順）。"""
    s = float(scale)
    ox, oy = float(origin[0]), float(origin[1])
    segs = np.asarray(CROWN_SEGMENTS, dtype=np.float64) * s + np.array([ox, oy, ox, oy])
    out: list[Drawable] = [
        Line(float(a), float(b), float(c), float(d), color) for a, b, c, d in segs
    ]
    for dx, dy in CROWN_DOTS:
        out.append(Circle(ox + dx * s, oy + dy * s, float(dot_radius), color))
    return out


__all__ = ["CROWN_SEGMENTS", "CROWN_DOTS", "draw_crown"]
