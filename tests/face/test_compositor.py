from __future__ import annotations

import math
from datetime import datetime

import pytest

from engine.core.drawable import Circle, Line
from face.compositor import (
    LAYER_ORDER,
    LUME_COLOR,
    WatchFaceCompositor,
    paint_bezel,
    paint_chapter_ring,
    paint_date_window,
    render,
    render_layers,
)
from face.state import FaceState
from face.theme import ThemeProfile, get_theme
from tests._utils.dummies import RecordingSurface


def _layers(state: FaceState, theme: ThemeProfile, now: datetime) -> dict[str, tuple]:
    return {layer.name: layer.shapes for layer in render_layers(state, theme, now)}


def test_layers_follow_z_order(face_state, submariner, three_oclock) -> None:
    layers = render_layers(face_state, submariner, three_oclock)
    assert tuple(layer.name for layer in layers) == LAYER_ORDER
    flat = render(face_state, submariner, three_oclock)
    assert flat == [s for layer in layers for s in layer.shapes]


def test_default_frame_composition(face_state, submariner, three_oclock) -> None:
    shapes = _layers(face_state, submariner, three_oclock)
    assert shapes["stars"] == ()
    # 3 リング + 三角 4 + 太目盛り 11×4 + 細目盛り 12 + 数字 51
    assert len(shapes["bezel"]) == 114
    assert len(shapes["chapter_ring"]) == 60
    # 12 時の三角 3 + バトン 3×4 + 丸 8
    assert len(shapes["hour_markers"]) == 23
    assert len(shapes["crown"]) == 16
    assert shapes["logo"]
    # 時針 11 + 分針 9 + 秒針 4
    assert len(shapes["hands"]) == 24
    assert len(shapes["center_dot"]) == 1


def test_stars_layer_when_enabled(submariner, three_oclock) -> None:
    state = FaceState(stars_enabled=True)
    stars = _layers(state, submariner, three_oclock)["stars"]
    assert len(stars) == 50
    assert all(isinstance(s, Circle) for s in stars)


def test_lume_mode_keeps_only_luminous_parts(submariner, three_oclock) -> None:
    state = FaceState(lume_mode=True)
    shapes = _layers(state, submariner, three_oclock)
    non_empty = [name for name in LAYER_ORDER if shapes[name]]
    assert non_empty == ["hour_markers", "hands", "center_dot"]
    assert all(s.color == LUME_COLOR for s in shapes["hour_markers"])
    assert shapes["center_dot"][0].color == LUME_COLOR
    hands = shapes["hands"]
    assert all(s.color == LUME_COLOR for s in hands[:-4])
    # 秒針は夜光にならない
    assert all(s.color == submariner.second_hand_color for s in hands[-4:])


def test_second_hand_color_is_theme_color(face_state, three_oclock) -> None:
    hulk = get_theme("hulk")
    hands = _layers(face_state, hulk, three_oclock)["hands"]
    assert all(s.color == hulk.second_hand_color for s in hands[-4:])


def test_chapter_ring_ignores_bezel_rotation(submariner) -> None:
    still = paint_chapter_ring(FaceState(), submariner)
    turned_state = FaceState()
    turned_state.rotate_bezel(17)
    assert paint_chapter_ring(turned_state, submariner) == still
    assert paint_bezel(turned_state, submariner) != paint_bezel(FaceState(), submariner)


def test_bezel_triangle_follows_offset(submariner) -> None:
    state = FaceState()
    state.rotate_bezel(30)  # 90°
    pip = [s for s in paint_bezel(state, submariner) if isinstance(s, Circle) and s.radius == 1.5]
    assert len(pip) == 1
    assert (pip[0].x, pip[0].y) == pytest.approx((88.0, 0.0), abs=1e-9)


@pytest.mark.parametrize(
    "day, count", [(7, 4 + 3), (27, 4 + 5 + 3), (10, 4 + 2 + 6), (31, 4 + 5 + 2)]
)
def test_date_window_digit_lines(face_state, submariner, day: int, count: int) -> None:
    shapes = paint_date_window(face_state, submariner, day)
    assert len(shapes) == count
    assert all(isinstance(s, Line) for s in shapes)
    assert all(s.color == submariner.date_color for s in shapes)


def test_no_date_theme_has_empty_date_window(face_state, three_oclock) -> None:
    shapes = _layers(face_state, get_theme("submariner_no_date"), three_oclock)
    assert shapes["date_window"] == ()


def test_hand_lengths_follow_theme(face_state, three_oclock) -> None:
    short = get_theme("submariner_no_date")
    long_ = get_theme("submariner")
    minute_short = _layers(face_state, short, three_oclock)["hands"]
    minute_long = _layers(face_state, long_, three_oclock)["hands"]
    # 分針は 12 時方向。先端線（分針の 5 本目）の y 座標が針長に比例する
    tip_short = minute_short[11 + 4]
    tip_long = minute_long[11 + 4]
    assert tip_short.y1 == pytest.approx(0.85 * 65.0)
    assert tip_long.y1 == pytest.approx(1.0 * 65.0)


def test_compositor_draws_every_shape(face_state, submariner, ten_past_ten) -> None:
    surface = RecordingSurface()
    comp = WatchFaceCompositor(debug_frames=True)
    count = comp.draw(surface, face_state, submariner, ten_past_ten)
    expected = render(face_state, submariner, ten_past_ten)
    assert count == len(expected) == len(surface.calls)
    assert surface.kinds == ["circle" if isinstance(s, Circle) else "line" for s in expected]


def test_frames_are_rebuilt_from_the_current_theme(face_state, three_oclock) -> None:
    comp = WatchFaceCompositor(debug_frames=False)
    a = comp.render(face_state, get_theme("submariner"), three_oclock)
    b = comp.render(face_state, get_theme("hulk"), three_oclock)
    assert a != b
    assert comp.render(face_state, get_theme("submariner"), three_oclock) == a


def test_fine_bezel_ticks_are_radial(submariner) -> None:
    bezel = paint_bezel(FaceState(), submariner)
    # 3 リング + 三角 4 の後、1 分目盛り（細線）は 84 → 97 の放射線
    fine = [
        s
        for s in bezel
        if isinstance(s, Line)
        and s.color == submariner.bezel_color
        and math.hypot(s.x1, s.y1) == pytest.approx(84.0)
    ]
    assert len(fine) == 12
    for ln in fine:
        assert math.hypot(ln.x2, ln.y2) == pytest.approx(97.0)
        assert math.atan2(ln.x1, ln.y1) == pytest.approx(math.atan2(ln.x2, ln.y2))
