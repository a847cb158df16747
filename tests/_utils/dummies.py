"""テスト用の記録サーフェス（描画呼び出しをそのまま溜める）。"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from common.types import RGBA


@dataclass
class RecordingSurface:
    """`RenderSurface` 契約を満たし、呼び出し順を `calls` に保存する。"""

    calls: list[tuple[str, tuple[Any, ...]]] = field(default_factory=list)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, color: RGBA) -> None:
        self.calls.append(("line", (x1, y1, x2, y2, color)))

    def draw_circle(self, x: float, y: float, radius: float, color: RGBA) -> None:
        self.calls.append(("circle", (x, y, radius, color)))

    @property
    def kinds(self) -> list[str]:
        return [k for k, _ in self.calls]
