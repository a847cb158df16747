"""
どこで: `face.state`。
何を: 描画パスが読む可変状態（ベゼル回転・表示モード・経過時間・星）を保持する `FaceState`。
なぜ: 入力（キー/スクロール）と時間経過による変更を描画パスの外側に閉じ込め、描画を純関数に保つため。

ベゼルは 120 クリックで 1 周する単純なアキュムレータ。更新のたびに `[0, 2π)` へ正規化する。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from engine.core.geometry import TAU, normalize_angle

from .starfield import Star, generate_stars

BEZEL_DETENTS = 120
CLICK_ANGLE = TAU / BEZEL_DETENTS


@dataclass
class FaceState:
    bezel_offset: float = 0.0
    stars_enabled: bool = False
    lume_mode: bool = False
    smooth_seconds: bool = False
    # 起動からの経過秒（星の瞬き用）
    elapsed: float = 0.0
    stars: tuple[Star, ...] = field(default_factory=generate_stars)

    def __post_init__(self) -> None:
        self.bezel_offset = normalize_angle(self.bezel_offset)
        self.stars = tuple(self.stars)

    @classmethod
    def from_config(cls, section: Mapping[str, Any] | None = None, **overrides: Any) -> "FaceState":
        """YAML の `watch:` セクションから初期モードを取り込む（`overrides` が優先、None は無視）。"""
        src = dict(section or {})
        for k, v in overrides.items():
            if v is not None:
                src[k] = v
        return cls(
            stars_enabled=bool(src.get("stars_enabled", False)),
            lume_mode=bool(src.get("lume_mode", False)),
            smooth_seconds=bool(src.get("smooth_seconds", False)),
        )

    # ---- 入力による変更 ----
    def toggle_stars(self) -> bool:
        self.stars_enabled = not self.stars_enabled
        return self.stars_enabled

    def toggle_lume(self) -> bool:
        self.lume_mode = not self.lume_mode
        return self.lume_mode

    def toggle_smooth(self) -> bool:
        self.smooth_seconds = not self.smooth_seconds
        return self.smooth_seconds

    def rotate_bezel(self, clicks: int) -> float:
        """ベゼルを `clicks` クリック回す（正 = 時計回り）。正規化後の角度を返す。"""
        self.bezel_offset = normalize_angle(self.bezel_offset + int(clicks) * CLICK_ANGLE)
        return self.bezel_offset

    # ---- Tickable ----
    def tick(self, dt: float) -> None:
        """経過時間を `dt` 秒進める。"""
        self.elapsed += max(0.0, float(dt))


__all__ = ["BEZEL_DETENTS", "CLICK_ANGLE", "FaceState"]
