"""
どこで: `glyphs.letters`。
何を: ロゴ "PYTHLEX" の 7 字形（6×10 ローカル箱の線分列）と、その拡大・配置描画。
なぜ: フォント依存なしに文字盤のロゴを線分だけで描くため。
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from common.types import RGBA, Segment, Vec2
from engine.core.drawable import Line

from .registry import get_letter, letter

LETTER_BOX: Vec2 = (6.0, 10.0)

LETTER_P = letter(
    "P",
    [
        (0.0, 0.0, 0.0, 10.0),
        (0.0, 10.0, 6.0, 10.0),
        (6.0, 10.0, 6.0, 5.0),
        (6.0, 5.0, 0.0, 5.0),
    ],
)
LETTER_Y = letter(
    "Y",
    [
        (0.0, 10.0, 3.0, 5.0),
        (6.0, 10.0, 3.0, 5.0),
        (3.0, 5.0, 3.0, 0.0),
    ],
)
LETTER_T = letter(
    "T",
    [
        (0.0, 10.0, 6.0, 10.0),
        (3.0, 10.0, 3.0, 0.0),
    ],
)
LETTER_H = letter(
    "H",
    [
        (0.0, 0.0, 0.0, 10.0),
        (6.0, 0.0, 6.0, 10.0),
        (0.0, 5.0, 6.0, 5.0),
    ],
)
LETTER_L = letter(
    "L",
    [
        (0.0, 10.0, 0.0, 0.0),
        (0.0, 0.0, 6.0, 0.0),
    ],
)
LETTER_E = letter(
    "E",
    [
        (0.0, 0.0, 0.0, 10.0),
        (0.0, 10.0, 6.0, 10.0),
        (0.0, 5.0, 4.0, 5.0),
        (0.0, 0.0, 6.0, 0.0),
    ],
)
LETTER_X = letter(
    "X",
    [
        (0.0, 10.0, 6.0, 0.0),
        (0.0, 0.0, 6.0, 10.0),
    ],
)

LOGO_TEXT = "PYTHLEX"


def logo_letters(text: str = LOGO_TEXT) -> tuple[tuple[Segment, ...], ...]:
    """`text` の各文字の字形を順に返す（未登録文字は KeyError）。"""
    return tuple(get_letter(ch) for ch in text)


def draw_letter(
    segments: Sequence[Segment],
    origin: Vec2,
    scale: float | Vec2,
    color: RGBA,
) -> list[Line]:
    """字形の線分を `scale` 倍して `origin`（字形箱の左下）へ置く。

    `scale` は一様倍率、または `(sx, sy)`。
    """
    if not segments:
        return []
    if isinstance(scale, (int, float)):
        sx = sy = float(scale)
    else:
        sx, sy = float(scale[0]), float(scale[1])
    segs = np.asarray(segments, dtype=np.float64) * np.array([sx, sy, sx, sy])
    segs += np.array([origin[0], origin[1], origin[0], origin[1]], dtype=np.float64)
    return [Line(float(a), float(b), float(c), float(d), color) for a, b, c, d in segs]


__all__ = ["LETTER_BOX", "LOGO_TEXT", "draw_letter", "logo_letters"]
