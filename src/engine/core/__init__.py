"""
どこで: `engine.core` サブパッケージ。
何を: ジオメトリカーネル・描画プリミティブ・針角モデル・フレーム駆動（Tickable/FrameClock）を提供。
なぜ: 文字盤の計算基盤を GUI から独立させ、上位層（glyphs/face/render）から再利用するため。

`render_window` は pyglet を import するため、ここでは再輸出しない。
"""

from .clock import HandAngles, hand_angles
from .drawable import Circle, Drawable, Line
from .geometry import (
    BOUNDS,
    TAU,
    normalize_angle,
    project,
    rotate_local,
    rotated_rect,
)

__all__ = [
    "BOUNDS",
    "TAU",
    "Circle",
    "Drawable",
    "HandAngles",
    "Line",
    "hand_angles",
    "normalize_angle",
    "project",
    "rotate_local",
    "rotated_rect",
]
