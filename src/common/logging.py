"""
ウォッチ向けの軽量ロギングユーティリティ。

要点:
- ライブラリ側の各モジュールは `logging.getLogger(__name__)` でロガーを取得するだけ。
- ハンドラ設定はランナー/CLI からのみ、1 度だけ適用する。
"""

from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        from .settings import get as _get_settings

        level = _get_settings().LOG_LEVEL or "INFO"
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return int(level)


def setup_default_logging(level: int | str | None = None) -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - `level` 省略時は `PXW_LOG_LEVEL`、それも無ければ INFO
    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    """
    lvl = _resolve_level(level)
    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(level=lvl, format=DEFAULT_FORMAT)


__all__ = ["setup_default_logging", "DEFAULT_FORMAT"]
