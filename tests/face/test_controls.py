from __future__ import annotations

import pytest

from face.controls import Action, action_for_key, apply_action, bezel_clicks_from_scroll
from face.state import FaceState


@pytest.mark.parametrize(
    "name, action",
    [
        ("Q", Action.QUIT),
        ("ESCAPE", Action.QUIT),
        ("S", Action.TOGGLE_STARS),
        ("L", Action.TOGGLE_LUME),
        ("M", Action.TOGGLE_SMOOTH),
    ],
)
def test_key_bindings(name: str, action: Action) -> None:
    assert action_for_key(name) is action


def test_unbound_key() -> None:
    assert action_for_key("X") is None


def test_apply_action(face_state: FaceState) -> None:
    assert apply_action(face_state, Action.TOGGLE_STARS) is True
    assert face_state.stars_enabled
    assert apply_action(face_state, Action.TOGGLE_LUME) is True
    assert face_state.lume_mode
    assert apply_action(face_state, Action.TOGGLE_SMOOTH) is True
    assert face_state.smooth_seconds
    assert apply_action(face_state, Action.QUIT) is False


@pytest.mark.parametrize(
    "scroll, clicks", [(0.0, 0), (1.0, -1), (-1.0, 1), (3.0, -3), (-2.4, 2), (0.2, -1)]
)
def test_scroll_to_bezel_clicks(scroll: float, clicks: int) -> None:
    assert bezel_clicks_from_scroll(scroll) == clicks


def test_ctrl_c_quits() -> None:
    assert action_for_key("C", ctrl=True) is Action.QUIT
    assert action_for_key("C") is None


def test_ctrl_falls_back_to_plain_bindings() -> None:
    assert action_for_key("S", ctrl=True) is Action.TOGGLE_STARS
    assert action_for_key("X", ctrl=True) is None
