"""
どこで: `common` パッケージ。
何を: ロギング初期化・環境変数ヘルパ・型付き設定・名前付きレジストリの共通基盤。
なぜ: engine/glyphs/face の各層が同じ小さな土台を共有し、依存の向きを一方向に保つため。
"""

from .base_registry import BaseRegistry

__all__ = [
    "BaseRegistry",
]
