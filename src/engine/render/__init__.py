"""
どこで: `engine.render` サブパッケージ。
何を: 描画サーフェス契約（線/円）と Drawable の発行、論理座標 → デバイス座標のビューポート。
なぜ: コンポジタ（形状列の生成）とバックエンド（pyglet/matplotlib）の責務を分離するため。

バックエンド実装（`pyglet_surface`, `mpl_surface`）は重依存のため、ここでは再輸出しない。
"""

from .layout import Viewport, fit_square
from .surface import RenderSurface, emit
from .types import Layer

__all__ = ["Layer", "RenderSurface", "Viewport", "emit", "fit_square"]
