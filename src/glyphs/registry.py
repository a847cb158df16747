"""
どこで: `glyphs` のレジストリ層。
何を: ロゴ用の線分字形を 1 文字キーで登録し、取得/一覧/検査を提供。
なぜ: ロゴ文字列を差し替えても描画側（`draw_letter`）を変えずに済むようにするため。
"""

from __future__ import annotations

from typing import Sequence

from common.base_registry import BaseRegistry
from common.types import Segment

LetterSegments = tuple[Segment, ...]

_letter_registry = BaseRegistry(kind="letter")


def letter(char: str, segments: Sequence[Segment]) -> LetterSegments:
    """1 文字分の線分列（6×10 のローカル箱）を登録して返す。

    例外:
    - ValueError: `char` が 1 文字でない場合、または線分が 4 要素でない場合。
    """
    if len(char) != 1:
        raise ValueError(f"letter key must be a single character: {char!r}")
    frozen = tuple(tuple(float(v) for v in seg) for seg in segments)
    if any(len(seg) != 4 for seg in frozen):
        raise ValueError(f"letter {char!r}: each segment must be (x1, y1, x2, y2)")
    return _letter_registry.add(char, frozen)


def get_letter(char: str) -> LetterSegments:
    """登録された字形を取得（未登録は KeyError）。"""
    return _letter_registry.get(char)


def list_letters() -> list[str]:
    return sorted(_letter_registry.list_all())


def is_letter_registered(char: str) -> bool:
    return _letter_registry.is_registered(char)


__all__ = ["LetterSegments", "letter", "get_letter", "list_letters", "is_letter_registered"]
