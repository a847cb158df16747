"""
どこで: `engine.core.clock`。
何を: 壁時計の 1 サンプルから時針/分針/秒針の角度と日付を導く（AngleModel）。
なぜ: 4 つの値を同一時刻のスナップショットとして整合させ、描画層を時刻取得から切り離すため。

角度はすべて時計角（0 = 12 時、時計回り、ラジアン）で `[0, 2π)` に収まる。
- 時針: `(h mod 12 + m/60) · 2π/12`
- 分針: `(m + s/60) · 2π/60`
- 秒針: 既定は 1 秒ごとに跳ぶ `s · 2π/60`。`smooth_seconds=True` ではマイクロ秒まで含めて連続運針。
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .geometry import TAU

HOUR_STEP = TAU / 12.0
MINUTE_STEP = TAU / 60.0


@dataclass(frozen=True)
class HandAngles:
    hour: float
    minute: float
    second: float
    date_day: int


def hand_angles(now: datetime, smooth_seconds: bool = False) -> HandAngles:
    """`now` から針角と日付を計算する（副作用なし）。"""
    h = now.hour % 12
    m = now.minute
    s = now.second

    if smooth_seconds:
        second = (s + now.microsecond / 1_000_000.0) * MINUTE_STEP
    else:
        second = s * MINUTE_STEP
    minute = (m + s / 60.0) * MINUTE_STEP
    hour = (h + m / 60.0) * HOUR_STEP
    return HandAngles(hour=hour, minute=minute, second=second, date_day=now.day)


def local_now() -> datetime:
    """ローカルタイムゾーンの現在時刻（ランナー用の時刻ソース）。"""
    return datetime.now()


__all__ = ["HandAngles", "hand_angles", "local_now", "HOUR_STEP", "MINUTE_STEP"]
