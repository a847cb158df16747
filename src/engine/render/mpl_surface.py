"""
どこで: `engine.render.mpl_surface`。
何を: `RenderSurface` を matplotlib（Agg）で実装し、PNG として保存する。
なぜ: ウィンドウの無い環境でも文字盤のスナップショットを確認・比較できるようにするため。
"""

from __future__ import annotations

import os
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.patches import Circle as _CirclePatch  # noqa: E402

from common.types import RGBA  # noqa: E402
from engine.core.geometry import BOUNDS  # noqa: E402


class MatplotlibSurface:
    """正方形 Figure にキャンバス座標のまま描くサーフェス。"""

    def __init__(
        self,
        *,
        size_px: int = 800,
        background: RGBA = (0.0, 0.0, 0.0, 1.0),
        linewidth: float = 1.2,
    ) -> None:
        dpi = 100
        self._fig = plt.figure(figsize=(size_px / dpi, size_px / dpi), dpi=dpi)
        self._fig.patch.set_facecolor(background)
        self._ax = self._fig.add_axes([0, 0, 1, 1])
        self._ax.set_xlim(-BOUNDS, BOUNDS)
        self._ax.set_ylim(-BOUNDS, BOUNDS)
        self._ax.set_aspect("equal", adjustable="box")
        self._ax.set_facecolor(background)
        self._ax.axis("off")
        self._linewidth = float(linewidth)
        self._background = background

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, color: RGBA) -> None:
        self._ax.plot(
            [x1, x2], [y1, y2], color=color, linewidth=self._linewidth, solid_capstyle="round"
        )

    def draw_circle(self, x: float, y: float, radius: float, color: RGBA) -> None:
        self._ax.add_patch(
            _CirclePatch((x, y), radius, fill=False, edgecolor=color, linewidth=self._linewidth)
        )

    def save(self, out_path: str | os.PathLike[str]) -> Path:
        """PNG を保存して Figure を閉じる。"""
        path = Path(out_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self._fig.savefig(path, dpi=self._fig.dpi, facecolor=self._background)
        plt.close(self._fig)
        return path


__all__ = ["MatplotlibSurface"]
