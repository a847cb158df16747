"""
どこで: `face.starfield`。
何を: ケース外側の四隅に散らす背景の星（固定 50 個）の決定的生成と、毎フレームの瞬き強度。
なぜ: 同じシードなら実行環境に依らず同じ星空になり、位置は不変のまま明るさだけが揺らぐようにするため。

生成:
- 64bit LCG（整数演算のみ）で `[-100, 100)²` を一様サンプルし、`hypot(x, y) > 99` のみ採用。
- 採用点ごとに size `[0.3, 1.2)`・phase `[0, 2π)`・speed `[0.5, 2.0)` を続けて引く。
- ちょうど `STAR_COUNT` 個で停止。

瞬き:
- `sin(elapsed · speed + phase)` が 0.5 超で明、-0.3 超で中、それ以外は暗。
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence

import numpy as np

from common.types import RGBA
from engine.core.geometry import BOUNDS, TAU
from util.color import normalize_color

logger = logging.getLogger(__name__)

STAR_SEED = 0xDEAD_BEEF_CAFE
STAR_COUNT = 50
# ケース外縁の半径。これより外側の点だけを星にする
CASE_EDGE = 99.0

_MASK64 = (1 << 64) - 1
_LCG_MUL = 6364136223846793005
_LCG_INC = 1442695040888963407


class StarRng:
    """64bit 線形合同法（Knuth MMIX 定数）。浮動小数は上位 53bit から作る。"""

    __slots__ = ("state",)

    def __init__(self, seed: int) -> None:
        self.state = int(seed) & _MASK64

    def next_u64(self) -> int:
        self.state = (self.state * _LCG_MUL + _LCG_INC) & _MASK64
        return self.state

    def next_float(self) -> float:
        """`[0.0, 1.0)` の一様乱数。"""
        return (self.next_u64() >> 11) / float(1 << 53)

    def uniform(self, lo: float, hi: float) -> float:
        """`[lo, hi)` の一様乱数。"""
        return lo + self.next_float() * (hi - lo)


@dataclass(frozen=True)
class Star:
    x: float
    y: float
    size: float
    phase: float
    speed: float


class Twinkle(IntEnum):
    DIM = 0
    MEDIUM = 1
    BRIGHT = 2


TWINKLE_COLORS: dict[Twinkle, RGBA] = {
    Twinkle.DIM: normalize_color("dark_gray"),
    Twinkle.MEDIUM: normalize_color("gray"),
    Twinkle.BRIGHT: normalize_color("white"),
}


def generate_stars(seed: int = STAR_SEED, count: int = STAR_COUNT) -> tuple[Star, ...]:
    """決定的に `count` 個の星を生成する（同じ seed → ビット同一の列）。"""
    rng = StarRng(seed)
    stars: list[Star] = []
    samples = 0
    while len(stars) < count:
        x = rng.uniform(-BOUNDS, BOUNDS)
        y = rng.uniform(-BOUNDS, BOUNDS)
        samples += 1
        if math.sqrt(x * x + y * y) > CASE_EDGE:
            stars.append(
                Star(
                    x=x,
                    y=y,
                    size=rng.uniform(0.3, 1.2),
                    phase=rng.uniform(0.0, TAU),
                    speed=rng.uniform(0.5, 2.0),
                )
            )
    logger.debug("generated %d stars from %d samples (seed=%#x)", len(stars), samples, seed)
    return tuple(stars)


def twinkle_level(signal: float) -> Twinkle:
    """瞬き信号 `[-1, 1]` を 3 段階の強度へ。"""
    if signal > 0.5:
        return Twinkle.BRIGHT
    if signal > -0.3:
        return Twinkle.MEDIUM
    return Twinkle.DIM


def twinkle_levels(stars: Sequence[Star], elapsed: float) -> list[Twinkle]:
    """全星の強度を一括評価する（numpy ベクトル化）。"""
    if not stars:
        return []
    speed = np.fromiter((s.speed for s in stars), dtype=np.float64, count=len(stars))
    phase = np.fromiter((s.phase for s in stars), dtype=np.float64, count=len(stars))
    signal = np.sin(float(elapsed) * speed + phase)
    levels = np.full(signal.shape, int(Twinkle.DIM), dtype=np.int8)
    levels[signal > -0.3] = int(Twinkle.MEDIUM)
    levels[signal > 0.5] = int(Twinkle.BRIGHT)
    return [Twinkle(int(v)) for v in levels]


__all__ = [
    "CASE_EDGE",
    "STAR_COUNT",
    "STAR_SEED",
    "Star",
    "StarRng",
    "TWINKLE_COLORS",
    "Twinkle",
    "generate_stars",
    "twinkle_level",
    "twinkle_levels",
]
