"""
どこで: `engine.render` 型定義。
何を: 1 レイヤー分の形状列を名前付きで保持する軽量データクラス `Layer`。
なぜ: z 順の各層（ベゼル・針など）へ形状を帰属させ、抑制判定やテストで参照できるようにするため。
"""

from __future__ import annotations

from dataclasses import dataclass

from engine.core.drawable import Drawable


@dataclass(frozen=True)
class Layer:
    """名前付きの描画レイヤー（背面 → 前面の 1 段）。"""

    name: str
    shapes: tuple[Drawable, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.shapes

    def __len__(self) -> int:
        return len(self.shapes)


__all__ = ["Layer"]
