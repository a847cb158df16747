"""
どこで: `common.settings`
何を: ウォッチの環境変数オーバーライドを型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、YAML 設定より優先される値を一箇所で解決するため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str


@dataclass
class _Settings:
    # Logging
    LOG_LEVEL: str | None = None
    # 1 フレームごとの描画数を DEBUG で出す
    DEBUG_FRAMES: bool = False

    # Runner（None は YAML / 既定に委ねる）
    FPS: int | None = None
    THEME: str | None = None


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。"""
    level = env_str("PXW_LOG_LEVEL", None)
    _settings.LOG_LEVEL = level.upper() if level is not None else None
    _settings.DEBUG_FRAMES = env_bool("PXW_DEBUG_FRAMES", False)
    _settings.FPS = env_int("PXW_FPS", None, min_value=1)
    _settings.THEME = env_str("PXW_THEME", None)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
