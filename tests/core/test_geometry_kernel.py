from __future__ import annotations

import math

import numpy as np
import pytest

from engine.core.geometry import (
    TAU,
    normalize_angle,
    polygon_lines,
    project,
    radial_line,
    radial_lines,
    rotate_local,
    rotated_rect,
)


def test_project_cardinal_directions() -> None:
    x, y = project(0.0, 10.0)
    assert (x, y) == pytest.approx((0.0, 10.0))
    x, y = project(math.pi / 2, 10.0)
    assert (x, y) == pytest.approx((10.0, 0.0), abs=1e-12)
    x, y = project(math.pi, 10.0)
    assert (x, y) == pytest.approx((0.0, -10.0), abs=1e-12)
    x, y = project(3 * math.pi / 2, 10.0)
    assert (x, y) == pytest.approx((-10.0, 0.0), abs=1e-12)


def test_project_broadcasts_numpy_arrays() -> None:
    angles = np.array([0.0, math.pi / 2])
    x, y = project(angles, 5.0)
    np.testing.assert_allclose(x, [0.0, 5.0], atol=1e-12)
    np.testing.assert_allclose(y, [5.0, 0.0], atol=1e-12)


def test_rotate_local_points_outward_at_three_oclock() -> None:
    # ローカル +Y（外向き）は 3 時方向で +X になる
    x, y = rotate_local(0.0, 1.0, math.pi / 2)
    assert (x, y) == pytest.approx((1.0, 0.0), abs=1e-12)


def test_rotate_local_zero_angle_is_identity() -> None:
    assert rotate_local(2.5, -1.0, 0.0) == pytest.approx((2.5, -1.0))


def test_rotate_local_preserves_length() -> None:
    x, y = rotate_local(3.0, 4.0, 1.234)
    assert math.hypot(x, y) == pytest.approx(5.0)


def test_rotated_rect_at_three_oclock_lies_along_x() -> None:
    pts = rotated_rect(math.pi / 2, 50.0, 2.0, 10.0)
    assert pts.shape == (4, 2)
    np.testing.assert_allclose(sorted(set(np.round(pts[:, 0], 9))), [45.0, 55.0])
    np.testing.assert_allclose(sorted(set(np.round(pts[:, 1], 9))), [-1.0, 1.0])


def test_rotated_rect_degenerate_collapses_to_center() -> None:
    pts = rotated_rect(1.0, 30.0, 0.0, 0.0)
    cx, cy = project(1.0, 30.0)
    np.testing.assert_allclose(pts, np.tile([cx, cy], (4, 1)))


@pytest.mark.parametrize(
    "angle, expected",
    [
        (0.0, 0.0),
        (TAU, 0.0),
        (-math.pi / 2, 3 * math.pi / 2),
        (5 * math.pi, math.pi),
        (-1e-20, 0.0),
    ],
)
def test_normalize_angle_range(angle: float, expected: float) -> None:
    a = normalize_angle(angle)
    assert 0.0 <= a < TAU
    assert a == pytest.approx(expected)


def test_polygon_lines_closed_and_open() -> None:
    square = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
    color = (1.0, 1.0, 1.0, 1.0)
    closed = polygon_lines(square, color)
    assert len(closed) == 4
    assert (closed[-1].x2, closed[-1].y2) == (0.0, 0.0)
    assert len(polygon_lines(square, color, closed=False)) == 3
    assert polygon_lines([(0.0, 0.0)], color) == []


def test_radial_lines_matches_single_version() -> None:
    color = (1.0, 0.0, 0.0, 1.0)
    angles = [0.0, 0.7, 2.0]
    batch = radial_lines(angles, 80.0, 97.0, color)
    for a, line in zip(angles, batch):
        single = radial_line(a, 80.0, 97.0, color)
        assert math.hypot(line.x2 - line.x1, line.y2 - line.y1) == pytest.approx(17.0)
        assert (line.x1, line.y1, line.x2, line.y2) == pytest.approx(
            (single.x1, single.y1, single.x2, single.y2)
        )
