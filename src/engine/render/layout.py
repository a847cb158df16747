"""
どこで: `engine.render.layout`（純粋関数）。
何を: 任意サイズの出力領域に収まる最大の正方形と、論理座標 → デバイス座標の写像。
なぜ: ウィンドウのリサイズや非正方ピクセル（端末セル等）でも文字盤を真円に保つため。
"""

from __future__ import annotations

from dataclasses import dataclass

from engine.core.geometry import BOUNDS


@dataclass(frozen=True)
class Viewport:
    """デバイス座標上の正方形領域（左下原点・+Y 上）。

    `width` / `height` はデバイス単位。`cell_aspect != 1` のとき両者は一致しない。
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2.0, self.y + self.height / 2.0)

    def to_device(self, x: float, y: float) -> tuple[float, float]:
        """キャンバス座標 `[-BOUNDS, BOUNDS]` をデバイス座標へ。"""
        cx, cy = self.center
        return (
            cx + x / BOUNDS * (self.width / 2.0),
            cy + y / BOUNDS * (self.height / 2.0),
        )

    def scale_length(self, length: float) -> float:
        """キャンバス上の長さ（半径など）を水平方向のデバイス長へ。"""
        return length / BOUNDS * (self.width / 2.0)


def fit_square(width: float, height: float, *, cell_aspect: float = 1.0) -> Viewport:
    """出力領域 `width × height` の中央に、見た目が正方形になる最大領域を返す。

    Parameters
    ----------
    width, height : float
        出力領域のサイズ（デバイス単位）。負値は 0 として扱う。
    cell_aspect : float, default 1.0
        デバイス 1 単位の「高さ / 幅」。ピクセルは 1.0、端末セルはおよそ 2.0。
        見た目を正方形にするにはデバイス幅 = デバイス高さ × cell_aspect とする。
    """
    if cell_aspect <= 0.0:
        raise ValueError(f"cell_aspect must be > 0, got {cell_aspect}")
    w = max(0.0, float(width))
    h = max(0.0, float(height))
    if w >= h * cell_aspect:
        fh = h
        fw = h * cell_aspect
    else:
        fw = w
        fh = w / cell_aspect
    return Viewport(x=(w - fw) / 2.0, y=(h - fh) / 2.0, width=fw, height=fh)


__all__ = ["Viewport", "fit_square"]
