"""
どこで: `glyphs` パッケージ。
何を: 静的な線分字形（7 セグメント数字・ロゴ字形・王冠）と、それらを Drawable 列へ展開する描画関数。
なぜ: 文字盤の印字要素を固定表 + 純関数として一箇所に集約するため。
"""

# 字形の登録は import 副作用で行う
from .crown import CROWN_DOTS, CROWN_SEGMENTS, draw_crown
from .digits import DIGIT_SEGMENTS, draw_digit, draw_digit_rotated
from .letters import LETTER_BOX, LOGO_TEXT, draw_letter, logo_letters
from .registry import get_letter, is_letter_registered, list_letters

__all__ = [
    "CROWN_DOTS",
    "CROWN_SEGMENTS",
    "DIGIT_SEGMENTS",
    "LETTER_BOX",
    "LOGO_TEXT",
    "draw_crown",
    "draw_digit",
    "draw_digit_rotated",
    "draw_letter",
    "get_letter",
    "is_letter_registered",
    "list_letters",
    "logo_letters",
]
