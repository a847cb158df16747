"""
どこで: `face.theme`。
何を: 文字盤テーマ（7 色・3 本の針長比・日付窓の有無）の不変レコードと、その登録簿。
なぜ: コンポジタがテーマの種類を知らずに、毎フレーム有効テーマから寸法/色を引き直せるようにするため。

テーマは起動時に 1 つ選ばれ、セッション中に変更・書き換えはされない。
針長比は「インデックス内径（65）」に対する割合（目安 0.4–1.0）。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from common.base_registry import BaseRegistry
from common.types import RGBA
from util.color import normalize_color

logger = logging.getLogger(__name__)

_COLOR_FIELDS = (
    "bezel_color",
    "hour_hand_color",
    "minute_hand_color",
    "second_hand_color",
    "marker_color",
    "logo_color",
    "date_color",
)

DEFAULT_THEME = "submariner"


@dataclass(frozen=True)
class ThemeProfile:
    """1 つの見た目を表す不変プロファイル。色は生成時に RGBA(0–1) へ正規化される。"""

    name: str
    bezel_color: RGBA
    hour_hand_color: RGBA
    minute_hand_color: RGBA
    second_hand_color: RGBA
    marker_color: RGBA
    logo_color: RGBA
    date_color: RGBA
    hour_hand_length: float = 0.50
    minute_hand_length: float = 0.85
    second_hand_length: float = 0.95
    has_date_window: bool = False

    def __post_init__(self) -> None:
        for fname in _COLOR_FIELDS:
            raw = getattr(self, fname)
            try:
                rgba = normalize_color(raw)
            except ValueError as e:
                raise ValueError(f"theme {self.name!r}: invalid {fname}: {raw!r}") from e
            object.__setattr__(self, fname, rgba)
        for fname in ("hour_hand_length", "minute_hand_length", "second_hand_length"):
            ratio = float(getattr(self, fname))
            if ratio <= 0.0:
                raise ValueError(f"theme {self.name!r}: {fname} must be > 0, got {ratio}")
            object.__setattr__(self, fname, ratio)
        object.__setattr__(self, "has_date_window", bool(self.has_date_window))


_theme_registry = BaseRegistry(kind="theme")


def register_theme(profile: ThemeProfile) -> ThemeProfile:
    """プロファイルを `profile.name` で登録して返す。"""
    return _theme_registry.add(profile.name, profile)


def get_theme(name: str) -> ThemeProfile:
    """登録済みテーマを取得（未登録は KeyError）。"""
    return _theme_registry.get(name)


def list_themes() -> list[str]:
    return sorted(_theme_registry.list_all())


def resolve_theme(name: str | ThemeProfile | None = None) -> ThemeProfile:
    """テーマを解決する。

    優先順: 引数 > `PXW_THEME` > `configs/*.yaml` の `watch.theme` > `submariner`。
    未知の名前は許容値つきの `ValueError`。
    """
    if isinstance(name, ThemeProfile):
        return name
    if name is None:
        from common.settings import get as _get_settings

        name = _get_settings().THEME
    if name is None:
        from util.utils import watch_section

        name = str(watch_section().get("theme", DEFAULT_THEME))
    try:
        profile = get_theme(name)
    except KeyError:
        allowed = ", ".join(list_themes())
        raise ValueError(f"invalid theme: {name}; allowed={allowed}") from None
    logger.info("theme: %s", profile.name)
    return profile


SUBMARINER = register_theme(
    ThemeProfile(
        name="submariner",
        bezel_color="dark_gray",
        hour_hand_color="white",
        minute_hand_color="white",
        second_hand_color="red",
        marker_color="green",
        logo_color="dark_gray",
        date_color="white",
        hour_hand_length=0.50,
        minute_hand_length=1.0,
        second_hand_length=0.95,
        has_date_window=True,
    )
)

SUBMARINER_NO_DATE = register_theme(
    ThemeProfile(
        name="submariner_no_date",
        bezel_color="dark_gray",
        hour_hand_color="white",
        minute_hand_color="white",
        second_hand_color="red",
        marker_color="green",
        logo_color="dark_gray",
        date_color="white",
    )
)

HULK = register_theme(
    ThemeProfile(
        name="hulk",
        bezel_color="green",
        hour_hand_color="white",
        minute_hand_color="white",
        second_hand_color="white",
        marker_color="light_green",
        logo_color="green",
        date_color="white",
        hour_hand_length=0.50,
        minute_hand_length=1.0,
        second_hand_length=0.95,
        has_date_window=True,
    )
)


__all__ = [
    "DEFAULT_THEME",
    "HULK",
    "SUBMARINER",
    "SUBMARINER_NO_DATE",
    "ThemeProfile",
    "get_theme",
    "list_themes",
    "register_theme",
    "resolve_theme",
]
