from __future__ import annotations

import math

import pytest

from engine.core.geometry import TAU
from face.state import BEZEL_DETENTS, CLICK_ANGLE, FaceState


def _circular_diff(a: float, b: float) -> float:
    d = abs(a - b) % TAU
    return min(d, TAU - d)


def test_defaults(face_state: FaceState) -> None:
    assert face_state.bezel_offset == 0.0
    assert not face_state.stars_enabled
    assert not face_state.lume_mode
    assert not face_state.smooth_seconds
    assert len(face_state.stars) == 50


def test_rotate_zero_clicks_keeps_offset(face_state: FaceState) -> None:
    face_state.rotate_bezel(7)
    before = face_state.bezel_offset
    assert face_state.rotate_bezel(0) == before


def test_full_turn_returns_to_start(face_state: FaceState) -> None:
    face_state.rotate_bezel(13)
    start = face_state.bezel_offset
    for _ in range(BEZEL_DETENTS):
        face_state.rotate_bezel(1)
    assert _circular_diff(face_state.bezel_offset, start) < 1e-9
    assert 0.0 <= face_state.bezel_offset < TAU


def test_counter_clockwise_click_wraps(face_state: FaceState) -> None:
    offset = face_state.rotate_bezel(-1)
    assert offset == pytest.approx(TAU - CLICK_ANGLE)
    assert CLICK_ANGLE == pytest.approx(math.radians(3.0))


def test_toggles_return_new_value(face_state: FaceState) -> None:
    assert face_state.toggle_stars() is True
    assert face_state.toggle_stars() is False
    assert face_state.toggle_lume() is True
    assert face_state.toggle_smooth() is True
    assert face_state.lume_mode and face_state.smooth_seconds


def test_tick_accumulates_elapsed_and_ignores_negative(face_state: FaceState) -> None:
    face_state.tick(0.5)
    face_state.tick(-3.0)
    face_state.tick(0.25)
    assert face_state.elapsed == pytest.approx(0.75)


def test_offset_is_normalized_on_construction() -> None:
    assert FaceState(bezel_offset=-CLICK_ANGLE).bezel_offset == pytest.approx(TAU - CLICK_ANGLE)


def test_from_config_overrides_win_and_none_is_ignored() -> None:
    section = {"stars_enabled": True, "lume_mode": True}
    st = FaceState.from_config(section, lume_mode=False, smooth_seconds=None)
    assert st.stars_enabled is True
    assert st.lume_mode is False
    assert st.smooth_seconds is False


@pytest.mark.parametrize("start", [0, 1, 7, 13, 59, 60, 119])
@pytest.mark.parametrize("clicks", [BEZEL_DETENTS, -BEZEL_DETENTS])
def test_single_full_turn_call_restores_offset(start: int, clicks: int) -> None:
    state = FaceState()
    before = state.rotate_bezel(start)
    after = state.rotate_bezel(clicks)
    assert _circular_diff(after, before) < 1e-9
    assert 0.0 <= after < TAU
