"""
どこで: `engine.core.drawable`。
何を: コンポジタが出力する唯一の 2 種類のプリミティブ `Line` / `Circle`（タグ付き共用体）。
なぜ: 描画バックエンドに依存しない不変値として 1 フレーム分の形状列を受け渡すため。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from common.types import RGBA


@dataclass(frozen=True)
class Line:
    """色付き線分（キャンバス座標）。"""

    x1: float
    y1: float
    x2: float
    y2: float
    color: RGBA

    @classmethod
    def between(cls, p, q, color: RGBA) -> "Line":
        """2 点 `p`, `q`（タプル/ndarray 可）から生成する。座標は float に揃える。"""
        return cls(float(p[0]), float(p[1]), float(q[0]), float(q[1]), color)


@dataclass(frozen=True)
class Circle:
    """色付き円（中心と半径、キャンバス座標）。"""

    x: float
    y: float
    radius: float
    color: RGBA

    @classmethod
    def at(cls, p, radius: float, color: RGBA) -> "Circle":
        return cls(float(p[0]), float(p[1]), float(radius), color)


Drawable = Union[Line, Circle]


__all__ = ["Line", "Circle", "Drawable"]
