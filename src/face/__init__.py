"""
どこで: `face` パッケージ。
何を: テーマ・星空・文字盤状態・入力操作・コンポジタを束ねる文字盤ドメイン層。
なぜ: engine（幾何/描画契約）と glyphs（字形）の上に、ダイバーズウォッチ固有の構成を載せるため。
"""

from .compositor import LAYER_ORDER, WatchFaceCompositor, render, render_layers
from .controls import Action, action_for_key, apply_action, bezel_clicks_from_scroll
from .starfield import Star, generate_stars
from .state import FaceState
from .theme import ThemeProfile, get_theme, list_themes, register_theme, resolve_theme

__all__ = [
    "Action",
    "FaceState",
    "LAYER_ORDER",
    "Star",
    "ThemeProfile",
    "WatchFaceCompositor",
    "action_for_key",
    "apply_action",
    "bezel_clicks_from_scroll",
    "generate_stars",
    "get_theme",
    "list_themes",
    "register_theme",
    "render",
    "render_layers",
    "resolve_theme",
]
