"""
文字盤ジオメトリカーネル（プロジェクト中核モジュール）

本モジュールは、文字盤のすべての要素（ベゼル目盛り・インデックス・針・数字）が共有する
極座標 → 直交座標の投影と、ローカル座標系の回転を提供する。

座標系（不変条件）:
- キャンバスは `[-BOUNDS, BOUNDS]` の正方形。+X 右、+Y 上。
- 角度は「時計角」: 0 が 12 時方向、値が増えると時計回り。単位はラジアン。
- ローカル座標は「+Y = 中心から外向き」。`rotate_local` はこれを指定の時計角へ向ける。

直感図（3 時方向 = π/2 に置いた幅 w・高さ h の矩形）:

    # ローカル           キャンバス
    #   +y (外向き)        +y
    #   ┌──┐               │  ┌────┐  ← 高さ h が +X 方向へ
    #   │  │ h             │  └────┘
    #   └──┘               └───────── +x
    #    w

API 方針:
- すべて純関数（副作用なし）。スカラーでも numpy 配列でも同じ式で評価できる。
- 退化入力（幅/高さ 0）は例外にせず、面積 0 の四角形を返す。
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

import numpy as np

from common.types import RGBA, Vec2

from .drawable import Line

BOUNDS = 100.0
TAU = 2.0 * math.pi

# 矩形のローカル角（単位幅/高さ、中心原点）。(-w/2,-h/2) から反時計回り。
_UNIT_RECT = np.array(
    [
        [-0.5, -0.5],
        [0.5, -0.5],
        [0.5, 0.5],
        [-0.5, 0.5],
    ],
    dtype=np.float64,
)


def normalize_angle(angle: float) -> float:
    """角度を `[0, 2π)` に正規化する。

    `-1e-20 % TAU` は丸めで `TAU` になるため、その場合は 0 に畳む。
    """
    a = float(angle) % TAU
    if a >= TAU:
        a = 0.0
    return a


def project(angle, length):
    """時計角 `angle` と長さ `length` からキャンバス座標 `(x, y)` を返す。

    `x = length·sin(angle)`, `y = length·cos(angle)`。12 時 (0) は真上、3 時 (π/2) は右。
    numpy 配列を渡すと要素ごとに評価する。
    """
    return length * np.sin(angle), length * np.cos(angle)


def rotate_local(x, y, angle):
    """ローカル（+Y = 外向き）の点を、時計角 `angle` の向きへ回転する。

    `x' = x·cos + y·sin`, `y' = -x·sin + y·cos`。原点周りの回転のみで平行移動はしない。
    """
    c = np.cos(angle)
    s = np.sin(angle)
    return x * c + y * s, -x * s + y * c


def rotated_rect(
    center_angle: float, center_radius: float, width: float, height: float
) -> np.ndarray:
    """時計角方向に向けた矩形の 4 頂点を `(4, 2)` 配列で返す。

    Parameters
    ----------
    center_angle : float
        矩形中心の時計角。矩形の「高さ」方向はこの角度の外向きに揃う。
    center_radius : float
        原点から矩形中心までの距離。
    width : float
        接線方向の幅。
    height : float
        半径方向の長さ。

    Returns
    -------
    np.ndarray
        `float64 (4, 2)`。頂点は辺順（閉路にするには先頭へ戻る）。
    """
    local = _UNIT_RECT * np.array([float(width), float(height)], dtype=np.float64)
    rx, ry = rotate_local(local[:, 0], local[:, 1], float(center_angle))
    cx, cy = project(float(center_angle), float(center_radius))
    return np.stack([rx + cx, ry + cy], axis=1)


def polygon_lines(
    points: Sequence[Vec2] | np.ndarray, color: RGBA, *, closed: bool = True
) -> list[Line]:
    """頂点列を辺ごとの `Line` に展開する（`closed=True` で末尾→先頭も結ぶ）。"""
    pts = np.asarray(points, dtype=np.float64)
    n = pts.shape[0]
    if n < 2:
        return []
    count = n if closed else n - 1
    lines: list[Line] = []
    for i in range(count):
        j = (i + 1) % n
        lines.append(Line.between(pts[i], pts[j], color))
    return lines


def radial_line(angle: float, inner: float, outer: float, color: RGBA) -> Line:
    """時計角 `angle` に沿って半径 `inner` から `outer` まで伸びる線分。"""
    return Line.between(project(angle, inner), project(angle, outer), color)


def radial_lines(
    angles: Iterable[float] | np.ndarray,
    inner: float | np.ndarray,
    outer: float | np.ndarray,
    color: RGBA,
) -> list[Line]:
    """`radial_line` の一括版（角度・半径は numpy でブロードキャスト）。"""
    a = np.asarray(angles if isinstance(angles, np.ndarray) else list(angles), dtype=np.float64)
    x1, y1 = project(a, np.asarray(inner, dtype=np.float64))
    x2, y2 = project(a, np.asarray(outer, dtype=np.float64))
    return [
        Line(float(x1[i]), float(y1[i]), float(x2[i]), float(y2[i]), color) for i in range(a.size)
    ]


__all__ = [
    "BOUNDS",
    "TAU",
    "normalize_angle",
    "project",
    "rotate_local",
    "rotated_rect",
    "polygon_lines",
    "radial_line",
    "radial_lines",
]
