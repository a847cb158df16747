"""
どこで: `face.controls`。
何を: 離散入力（終了・星・夜光・スムース秒）とベゼル回転を `FaceState` への操作に写像する。
なぜ: GUI のキーコードやスクロール量を知らない純粋な層にして、ランナーを薄く保つため。
"""

from __future__ import annotations

import logging
import math
from enum import Enum

from .state import FaceState

logger = logging.getLogger(__name__)


class Action(Enum):
    QUIT = "quit"
    TOGGLE_STARS = "toggle_stars"
    TOGGLE_LUME = "toggle_lume"
    TOGGLE_SMOOTH = "toggle_smooth"


# キー名（小文字）→ 操作
KEY_BINDINGS: dict[str, Action] = {
    "q": Action.QUIT,
    "escape": Action.QUIT,
    "s": Action.TOGGLE_STARS,
    "l": Action.TOGGLE_LUME,
    "m": Action.TOGGLE_SMOOTH,
}


# Ctrl 併用時に優先するキー
CTRL_BINDINGS: dict[str, Action] = {
    "c": Action.QUIT,
}


def action_for_key(name: str, *, ctrl: bool = False) -> Action | None:
    """キー名（例: pyglet の `symbol_string`）から操作を引く。未割り当ては None。

    `ctrl=True` では `CTRL_BINDINGS` を先に引き、無ければ通常の割り当てに落とす。
    """
    k = name.strip().lower()
    if ctrl and k in CTRL_BINDINGS:
        return CTRL_BINDINGS[k]
    return KEY_BINDINGS.get(k)


def apply_action(state: FaceState, action: Action) -> bool:
    """操作を状態へ適用する。戻り値 False は終了要求。"""
    if action is Action.QUIT:
        return False
    if action is Action.TOGGLE_STARS:
        logger.debug("stars: %s", state.toggle_stars())
    elif action is Action.TOGGLE_LUME:
        logger.debug("lume: %s", state.toggle_lume())
    elif action is Action.TOGGLE_SMOOTH:
        logger.debug("smooth seconds: %s", state.toggle_smooth())
    return True


def bezel_clicks_from_scroll(scroll_y: float) -> int:
    """ホイール量をベゼルのクリック数へ。上（正）は反時計回り、下（負）は時計回り。

    1 ノッチ未満の入力（トラックパッド等）も最低 1 クリックとして扱う。
    """
    if scroll_y == 0:
        return 0
    notches = max(1, int(round(abs(scroll_y))))
    return -int(math.copysign(notches, scroll_y))


__all__ = [
    "Action",
    "CTRL_BINDINGS",
    "KEY_BINDINGS",
    "action_for_key",
    "apply_action",
    "bezel_clicks_from_scroll",
]
