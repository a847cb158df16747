"""
どこで: `glyphs.digits`。
何を: 7 セグメント数字の点灯表と、軸平行/回転つきの数字描画。
なぜ: 日付窓（軸平行）とベゼル数字（ベゼル回転に追従）で同じ字形を共有するため。

セグメント順: (top, top-left, top-right, middle, bottom-left, bottom-right, bottom)
"""

from __future__ import annotations

import numpy as np

from common.types import RGBA, Vec2
from engine.core.drawable import Line
from engine.core.geometry import rotate_local

DIGIT_SEGMENTS: tuple[tuple[bool, ...], ...] = (
    (True, True, True, False, True, True, True),  # 0
    (False, False, True, False, False, True, False),  # 1
    (True, False, True, True, True, False, True),  # 2
    (True, False, True, True, False, True, True),  # 3
    (False, True, True, True, False, True, False),  # 4
    (True, True, False, True, False, True, True),  # 5
    (True, True, False, True, True, True, True),  # 6
    (True, False, True, False, False, True, False),  # 7
    (True, True, True, True, True, True, True),  # 8
    (True, True, True, True, False, True, True),  # 9
)

# 単位箱 (0..1, 0..1) 上の各セグメント (x1, y1, x2, y2)
_UNIT_SEGMENTS = np.array(
    [
        [0.0, 1.0, 1.0, 1.0],  # top
        [0.0, 1.0, 0.0, 0.5],  # top-left
        [1.0, 1.0, 1.0, 0.5],  # top-right
        [0.0, 0.5, 1.0, 0.5],  # middle
        [0.0, 0.5, 0.0, 0.0],  # bottom-left
        [1.0, 0.5, 1.0, 0.0],  # bottom-right
        [0.0, 0.0, 1.0, 0.0],  # bottom
    ],
    dtype=np.float64,
)


def _lit_segments(value: int, origin: Vec2, width: float, height: float) -> np.ndarray | None:
    """点灯セグメントを `origin` 基準・`width × height` の箱へ配置した `(K, 4)` 配列。"""
    if not 0 <= value <= 9:
        return None
    mask = np.array(DIGIT_SEGMENTS[value], dtype=bool)
    segs = _UNIT_SEGMENTS[mask] * np.array([width, height, width, height], dtype=np.float64)
    segs += np.array([origin[0], origin[1], origin[0], origin[1]], dtype=np.float64)
    return segs


def draw_digit(
    value: int, origin: Vec2, width: float, height: float, color: RGBA
) -> list[Line]:
    """軸平行の 7 セグメント数字。`origin` は箱の左下。範囲外（0–9 以外）は空リスト。"""
    segs = _lit_segments(int(value), origin, width, height)
    if segs is None:
        return []
    return [Line(float(a), float(b), float(c), float(d), color) for a, b, c, d in segs]


def draw_digit_rotated(
    value: int,
    local_offset: Vec2,
    size: Vec2,
    center: Vec2,
    center_angle: float,
    color: RGBA,
) -> list[Line]:
    """ローカル座標で組んだ数字を時計角 `center_angle` へ回し、`center` へ平行移動する。

    `local_offset` は数字箱の左下（`center` 基準のローカル座標）、`size` は `(w, h)`。
    ローカル +Y は外向きなので、ベゼル上で数字は常にベゼルに対して正立する。
    """
    segs = _lit_segments(int(value), local_offset, size[0], size[1])
    if segs is None:
        return []
    x1, y1 = rotate_local(segs[:, 0], segs[:, 1], center_angle)
    x2, y2 = rotate_local(segs[:, 2], segs[:, 3], center_angle)
    cx, cy = float(center[0]), float(center[1])
    return [
        Line(float(x1[i] + cx), float(y1[i] + cy), float(x2[i] + cx), float(y2[i] + cy), color)
        for i in range(segs.shape[0])
    ]


__all__ = ["DIGIT_SEGMENTS", "draw_digit", "draw_digit_rotated"]
