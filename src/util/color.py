"""
どこで: `util.color`。
何を: 色指定の正規化/変換（名前付き色, Hex, RGBA 0–1, RGBA 0–255）を一元化。
なぜ: テーマ定義・YAML 設定・描画サーフェスで同一の受理仕様とエラーメッセージを使うため。
"""

from __future__ import annotations

from typing import Sequence

from common.types import RGBA

# ダイヤル用の基本パレット（端末 16 色の見た目に寄せた値）
NAMED_COLORS: dict[str, str] = {
    "black": "#000000",
    "white": "#FFFFFF",
    "gray": "#A8A8A8",
    "dark_gray": "#5A5A5A",
    "red": "#E03C31",
    "green": "#2E9E4F",
    "light_green": "#8CFF9E",
    "gold": "#D4AF37",
    "navy": "#1B2A4A",
}


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else float(x)


def parse_hex_color_str(s: str) -> RGBA:
    """Hex 文字列から RGBA(0–1) を返す。

    受理形式: "#RRGGBB", "#RRGGBBAA", "0xRRGGBB", "0xRRGGBBAA", "RRGGBB", "RRGGBBAA"。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RRGGBBAA)")
    try:
        r = int(t[0:2], 16)
        g = int(t[2:4], 16)
        b = int(t[4:6], 16)
        a = int(t[6:8], 16) if len(t) == 8 else 255
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def _parse_color_str(s: str) -> RGBA:
    key = s.strip().lower().replace("-", "_").replace(" ", "_")
    if key in NAMED_COLORS:
        return parse_hex_color_str(NAMED_COLORS[key])
    return parse_hex_color_str(s)


def normalize_color(value: object) -> RGBA:
    """色を RGBA(0–1) へ正規化する。

    - 受理: 名前付き色（`NAMED_COLORS`）, Hex 文字列, (r,g,b[,a])（0–1 または 0–255）
    - 返値: (r,g,b,a)（0–1）
    """
    if isinstance(value, str):
        return _parse_color_str(value)
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"unsupported color type: {type(value)!r}")
    seq: Sequence[float | int] = value
    if len(seq) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    try:
        fseq = [float(v) for v in seq]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {value!r}") from e
    if len(fseq) == 3:
        # アルファ省略時は不透明（スケールは RGB 側で判定）
        fseq.append(1.0 if all(0.0 <= x <= 1.0 for x in fseq) else 255.0)
    if all(0.0 <= x <= 1.0 for x in fseq):
        r, g, b, a = fseq
        return (_clamp01(r), _clamp01(g), _clamp01(b), _clamp01(a))
    # 0–255 とみなし、整数丸め → 0–1 へスケール
    r, g, b, a = (max(0, min(255, int(round(x)))) for x in fseq)
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def to_u8_rgba(value: object) -> tuple[int, int, int, int]:
    """色を RGBA(0–255) へ変換する。"""
    r, g, b, a = normalize_color(value)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)), int(round(a * 255)))


__all__ = [
    "NAMED_COLORS",
    "parse_hex_color_str",
    "normalize_color",
    "to_u8_rgba",
]
