"""
文字盤コンポジタ（WatchFaceCompositor）

本モジュールは、`FaceState` + `ThemeProfile` + 時刻から 1 フレーム分の Drawable 列を組み立てる。
保持型のシーングラフは持たず、毎フレームすべてをゼロから作り直して捨てる。

z 順（背面 → 前面）と抑制条件:

    | レイヤー      | 抑制される条件                          |
    |---------------|-----------------------------------------|
    | stars         | not stars_enabled                       |
    | bezel         | lume_mode                               |
    | chapter_ring  | lume_mode                               |
    | hour_markers  | （なし。lume_mode では夜光色に切替）    |
    | crown         | lume_mode                               |
    | logo          | lume_mode                               |
    | date_window   | lume_mode or not theme.has_date_window  |
    | hands         | （なし）                                |
    | center_dot    | （なし。lume_mode では夜光色）          |

半径レイアウト（外 → 内）:
- ケース縁 99 / ベゼル外 97 / ベゼル数字 88 / ベゼル内 80
- チャプターリング 80 → 77（5 分ごとは 74.5 まで）
- インデックス 74 → 65（丸インデックス中心 69.5）。針長比はインデックス内径 65 が基準。

ベゼルは `bezel_offset` だけ回るが、チャプターリングは文字盤に固定で回らない
（回転ベゼルと固定ダイヤルの関係をそのまま写している）。
"""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Callable

import numpy as np

from common.types import RGBA
from engine.core.clock import HandAngles, hand_angles
from engine.core.drawable import Circle, Drawable, Line
from engine.core.geometry import (
    TAU,
    polygon_lines,
    project,
    radial_line,
    radial_lines,
    rotated_rect,
)
from engine.render.surface import RenderSurface, emit
from engine.render.types import Layer
from glyphs import LETTER_BOX, LOGO_TEXT, draw_crown, draw_digit, draw_digit_rotated, draw_letter
from glyphs.letters import logo_letters
from util.color import normalize_color

from .starfield import CASE_EDGE, TWINKLE_COLORS, twinkle_levels
from .state import FaceState
from .theme import ThemeProfile

logger = logging.getLogger(__name__)

# ── 半径レイアウト ──
BEZEL_OUTER = 97.0
BEZEL_NUM_R = 88.0
BEZEL_INNER = 80.0
BEZEL_TICK_INNER = 84.0
BEZEL_BOLD_INNER = 82.0
CHAPTER_OUTER = 80.0
CHAPTER_INNER = 77.0
MARKER_OUTER = 74.0
MARKER_INNER = 65.0
MARKER_CENTER = 69.5

LUME_COLOR: RGBA = normalize_color("light_green")

LAYER_ORDER: tuple[str, ...] = (
    "stars",
    "bezel",
    "chapter_ring",
    "hour_markers",
    "crown",
    "logo",
    "date_window",
    "hands",
    "center_dot",
)


# ══════════════════════════════════════════════════════════════
# STARS
# ══════════════════════════════════════════════════════════════
def paint_stars(state: FaceState) -> list[Drawable]:
    if not state.stars_enabled:
        return []
    levels = twinkle_levels(state.stars, state.elapsed)
    return [
        Circle(s.x, s.y, s.size, TWINKLE_COLORS[level]) for s, level in zip(state.stars, levels)
    ]


# ══════════════════════════════════════════════════════════════
# BEZEL: 回転ベゼル（リング・三角マーカー・目盛り・数字）
# ══════════════════════════════════════════════════════════════
def _bezel_triangle(offset: float, color: RGBA) -> list[Drawable]:
    spread = 0.04
    tip = project(offset, 94.0)
    left = project(offset - spread, 83.0)
    right = project(offset + spread, 83.0)
    out: list[Drawable] = [
        Line.between(left, tip, color),
        Line.between(right, tip, color),
        Line.between(left, right, color),
    ]
    # 三角の中の夜光ドット
    out.append(Circle.at(project(offset, 88.0), 1.5, color))
    return out


def _bezel_number(number: int, angle: float, color: RGBA) -> list[Line]:
    """2 桁の数字をベゼル上に、ベゼルに対して正立させて描く。"""
    dw, dh, gap = 4.5, 7.0, 2.0
    total_w = 2.0 * dw + gap
    center = project(angle, BEZEL_NUM_R)
    tens, ones = divmod(int(number), 10)
    return draw_digit_rotated(
        tens, (-total_w / 2.0, -dh / 2.0), (dw, dh), center, angle, color
    ) + draw_digit_rotated(ones, (gap / 2.0, -dh / 2.0), (dw, dh), center, angle, color)


def paint_bezel(state: FaceState, theme: ThemeProfile) -> list[Drawable]:
    if state.lume_mode:
        return []
    bc = theme.bezel_color
    mc = theme.marker_color
    bo = state.bezel_offset

    # リングは回転しても形が変わらない
    out: list[Drawable] = [
        Circle(0.0, 0.0, CASE_EDGE, bc),
        Circle(0.0, 0.0, BEZEL_OUTER, bc),
        Circle(0.0, 0.0, BEZEL_INNER, bc),
    ]
    out.extend(_bezel_triangle(bo, mc))

    # 目盛り: 0–15 分は 1 分刻み、以降は 5 分刻みのみ。0 分は三角マーカー。
    bold_h = BEZEL_OUTER - BEZEL_BOLD_INNER
    bold_r = (BEZEL_OUTER + BEZEL_BOLD_INNER) / 2.0
    for i in range(1, 60):
        is_five = i % 5 == 0
        if not is_five and i > 15:
            continue
        angle = bo + i * TAU / 60.0
        if is_five:
            out.extend(polygon_lines(rotated_rect(angle, bold_r, 2.5, bold_h), mc))
        else:
            out.append(radial_line(angle, BEZEL_TICK_INNER, BEZEL_OUTER, bc))

    for n in (10, 20, 30, 40, 50):
        out.extend(_bezel_number(n, bo + n / 60.0 * TAU, mc))
    return out


# ══════════════════════════════════════════════════════════════
# CHAPTER RING: 文字盤に固定の分目盛り（ベゼル回転の影響を受けない）
# ══════════════════════════════════════════════════════════════
def paint_chapter_ring(state: FaceState, theme: ThemeProfile) -> list[Drawable]:
    if state.lume_mode:
        return []
    idx = np.arange(60)
    angles = idx * TAU / 60.0
    inner = np.where(idx % 5 == 0, CHAPTER_INNER - 2.5, CHAPTER_INNER)
    return list(radial_lines(angles, inner, CHAPTER_OUTER, theme.bezel_color))


# ══════════════════════════════════════════════════════════════
# HOUR MARKERS: 12 時の逆三角・3/6/9 のバトン・その他は丸
# ══════════════════════════════════════════════════════════════
def paint_hour_markers(state: FaceState, theme: ThemeProfile) -> list[Drawable]:
    color = LUME_COLOR if state.lume_mode else theme.marker_color
    out: list[Drawable] = []
    for h in range(1, 13):
        angle = (h % 12) * TAU / 12.0
        if h == 12:
            spread = 0.075
            left = project(angle - spread, MARKER_INNER)
            right = project(angle + spread, MARKER_INNER)
            tip = project(angle, MARKER_OUTER)
            out.extend(polygon_lines([left, tip, right], color))
        elif h in (3, 6, 9):
            # 既定スパンより少し長いバトン
            height = (MARKER_OUTER - MARKER_INNER) + 2.0
            center_r = (MARKER_OUTER + MARKER_INNER) / 2.0
            out.extend(polygon_lines(rotated_rect(angle, center_r, 4.0, height), color))
        else:
            out.append(Circle.at(project(angle, MARKER_CENTER), 3.8, color))
    return out


# ══════════════════════════════════════════════════════════════
# CROWN / LOGO
# ══════════════════════════════════════════════════════════════
def paint_crown(state: FaceState, theme: ThemeProfile) -> list[Drawable]:
    if state.lume_mode:
        return []
    return draw_crown((0.0, 54.0), 0.7, theme.logo_color)


def paint_logo(state: FaceState, theme: ThemeProfile, text: str = LOGO_TEXT) -> list[Drawable]:
    if state.lume_mode:
        return []
    letter_w = 5.0
    gap = 2.5
    # 高さはやや潰して収める
    scale = (letter_w / LETTER_BOX[0], 0.8)
    letters = logo_letters(text)
    total_w = len(letters) * letter_w + max(0, len(letters) - 1) * gap
    start_x = -total_w / 2.0
    out: list[Drawable] = []
    for i, segments in enumerate(letters):
        origin = (start_x + i * (letter_w + gap), 42.0)
        out.extend(draw_letter(segments, origin, scale, theme.logo_color))
    return out


# ══════════════════════════════════════════════════════════════
# DATE WINDOW: 3 時位置の枠と 7 セグメントの日付
# ══════════════════════════════════════════════════════════════
def paint_date_window(state: FaceState, theme: ThemeProfile, day: int) -> list[Drawable]:
    if state.lume_mode or not theme.has_date_window:
        return []
    cx, cy = 50.0, 0.0
    hw, hh = 10.0, 8.0
    c = theme.date_color
    box = [(cx - hw, cy - hh), (cx + hw, cy - hh), (cx + hw, cy + hh), (cx - hw, cy + hh)]
    out: list[Drawable] = list(polygon_lines(box, c))

    tens, ones = divmod(int(day), 10)
    dw, dh, dgap = 6.0, 10.0, 2.0
    dx = cx - (dw * 2.0 + dgap) / 2.0
    dy = cy - dh / 2.0
    if tens > 0:
        out.extend(draw_digit(tens, (dx, dy), dw, dh, c))
    out.extend(draw_digit(ones, (dx + dw + dgap, dy), dw, dh, c))
    return out


# ══════════════════════════════════════════════════════════════
# HANDS: メルセデス時針・ソード分針・ロリポップ秒針
# ══════════════════════════════════════════════════════════════
def _hour_hand(angle: float, length: float, color: RGBA) -> list[Drawable]:
    width = 3.5
    shaft_len = length * 0.65
    out: list[Drawable] = list(
        polygon_lines(rotated_rect(angle, shaft_len / 2.0, width, shaft_len), color)
    )
    pip = project(angle, length * 0.82)
    out.append(Circle.at(pip, 2.5, color))
    # 軸の先端 → ピップ → 針先を細線でつなぐ
    out.append(Line.between(project(angle, shaft_len), pip, color))
    out.append(Line.between(pip, project(angle, length), color))
    out.extend(polygon_lines(rotated_rect(angle + math.pi, 4.0, width, 8.0), color))
    return out


def _minute_hand(angle: float, length: float, color: RGBA) -> list[Drawable]:
    width = 2.2
    out: list[Drawable] = list(
        polygon_lines(rotated_rect(angle, length / 2.0, width, length), color)
    )
    tip_len = length * 0.15
    out.append(Line.between(project(angle, length), project(angle, length + tip_len), color))
    out.extend(polygon_lines(rotated_rect(angle + math.pi, 4.0, width, 8.0), color))
    return out


def _second_hand(angle: float, length: float, tail_len: float, color: RGBA) -> list[Drawable]:
    out: list[Drawable] = [
        Line.between((0.0, 0.0), project(angle, length), color),
        Circle.at(project(angle, length * 0.85), 1.8, color),
    ]
    back = angle + math.pi
    out.append(Line.between((0.0, 0.0), project(back, tail_len), color))
    out.append(Circle.at(project(back, tail_len * 0.7), 1.2, color))
    return out


def paint_hands(state: FaceState, theme: ThemeProfile, hands: HandAngles) -> list[Drawable]:
    r = MARKER_INNER
    hc = LUME_COLOR if state.lume_mode else theme.hour_hand_color
    mc = LUME_COLOR if state.lume_mode else theme.minute_hand_color
    # 秒針は夜光なし
    sc = theme.second_hand_color
    out: list[Drawable] = []
    out.extend(_hour_hand(hands.hour, theme.hour_hand_length * r, hc))
    out.extend(_minute_hand(hands.minute, theme.minute_hand_length * r, mc))
    out.extend(_second_hand(hands.second, theme.second_hand_length * r, 0.20 * r, sc))
    return out


def paint_center_dot(state: FaceState, theme: ThemeProfile) -> list[Drawable]:
    color = LUME_COLOR if state.lume_mode else theme.hour_hand_color
    return [Circle(0.0, 0.0, 2.5, color)]


# ══════════════════════════════════════════════════════════════
# 合成
# ══════════════════════════════════════════════════════════════
def render_layers(state: FaceState, theme: ThemeProfile, now: datetime) -> tuple[Layer, ...]:
    """1 フレーム分を z 順のレイヤー列として返す（抑制されたレイヤーは空）。"""
    hands = hand_angles(now, state.smooth_seconds)
    painters: dict[str, Callable[[], list[Drawable]]] = {
        "stars": lambda: paint_stars(state),
        "bezel": lambda: paint_bezel(state, theme),
        "chapter_ring": lambda: paint_chapter_ring(state, theme),
        "hour_markers": lambda: paint_hour_markers(state, theme),
        "crown": lambda: paint_crown(state, theme),
        "logo": lambda: paint_logo(state, theme),
        "date_window": lambda: paint_date_window(state, theme, hands.date_day),
        "hands": lambda: paint_hands(state, theme, hands),
        "center_dot": lambda: paint_center_dot(state, theme),
    }
    return tuple(Layer(name, tuple(painters[name]())) for name in LAYER_ORDER)


def render(state: FaceState, theme: ThemeProfile, now: datetime) -> list[Drawable]:
    """1 フレーム分の Drawable 列（背面 → 前面）。"""
    return [shape for layer in render_layers(state, theme, now) for shape in layer.shapes]


class WatchFaceCompositor:
    """サーフェスへの 1 パス描画をまとめる薄いファサード。

    有効テーマは毎フレーム引数で受け取り、寸法/色をキャッシュしない。
    """

    def __init__(self, *, debug_frames: bool | None = None) -> None:
        if debug_frames is None:
            from common.settings import get as _get_settings

            debug_frames = _get_settings().DEBUG_FRAMES
        self._debug_frames = bool(debug_frames)

    def render(self, state: FaceState, theme: ThemeProfile, now: datetime) -> list[Drawable]:
        return render(state, theme, now)

    def render_layers(
        self, state: FaceState, theme: ThemeProfile, now: datetime
    ) -> tuple[Layer, ...]:
        return render_layers(state, theme, now)

    def draw(
        self, surface: RenderSurface, state: FaceState, theme: ThemeProfile, now: datetime
    ) -> int:
        """1 フレームを `surface` へ描き、描画したプリミティブ数を返す。"""
        layers = render_layers(state, theme, now)
        count = 0
        for layer in layers:
            count += emit(layer.shapes, surface)
        if self._debug_frames:
            logger.debug(
                "frame: %d shapes (%s)",
                count,
                ", ".join(f"{layer.name}={len(layer)}" for layer in layers if not layer.is_empty),
            )
        return count


__all__ = [
    "LAYER_ORDER",
    "LUME_COLOR",
    "MARKER_INNER",
    "WatchFaceCompositor",
    "paint_bezel",
    "paint_center_dot",
    "paint_chapter_ring",
    "paint_crown",
    "paint_date_window",
    "paint_hands",
    "paint_hour_markers",
    "paint_logo",
    "paint_stars",
    "render",
    "render_layers",
]
