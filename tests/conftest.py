"""共通フィクスチャ。

- 固定時刻（日付窓/針角の検証用）
- 既定の FaceState / テーマ
- 環境変数由来の設定を各テスト後に元へ戻す
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterator

import pytest

from common.settings import reload_from_env
from face.state import FaceState
from face.theme import ThemeProfile, get_theme


@pytest.fixture()
def three_oclock() -> datetime:
    return datetime(2026, 10, 19, 3, 0, 0)


@pytest.fixture()
def ten_past_ten() -> datetime:
    return datetime(2026, 10, 27, 10, 8, 37, 250_000)


@pytest.fixture()
def face_state() -> FaceState:
    return FaceState()


@pytest.fixture()
def submariner() -> ThemeProfile:
    return get_theme("submariner")


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """PXW_* を消した状態で設定を再読込し、終了後にも再読込する。"""
    for name in ("PXW_LOG_LEVEL", "PXW_DEBUG_FRAMES", "PXW_FPS", "PXW_THEME"):
        monkeypatch.delenv(name, raising=False)
    reload_from_env()
    yield monkeypatch
    monkeypatch.undo()
    reload_from_env()
