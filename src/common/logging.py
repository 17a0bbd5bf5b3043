"""
どこで: `common.logging`
何を: iro CLI 向けのロギング初期化。`IRO_LOG_LEVEL` / `IRO_DEBUG` を反映する。
なぜ: ライブラリとして import された場合はアプリ側の設定を尊重し、CLI 実行時のみ stderr に出力するため。
"""

from __future__ import annotations

import logging
import sys

from . import settings as settings_mod

LOG_FORMAT = "iro: %(levelname)s %(name)s: %(message)s"


def resolve_level(level: int | str | None = None) -> int:
    """ログレベルを数値に解決する。

    - `None` は `settings.LOG_LEVEL`（`IRO_LOG_LEVEL`）を使う
    - `IRO_DEBUG` が真なら指定に関わらず DEBUG
    - 不明な名前は WARNING
    """
    s = settings_mod.get()
    if s.DEBUG:
        return logging.DEBUG
    if level is None:
        level = s.LOG_LEVEL
    if isinstance(level, str):
        lvl = logging.getLevelName(level.strip().upper())
        return lvl if isinstance(lvl, int) else logging.WARNING
    return int(level)


def setup_default_logging(level: int | str | None = None) -> None:
    """stderr へのハンドラを 1 度だけ設定する。

    ルートロガーにハンドラが既にあれば何もしない（no-op）。
    """
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=resolve_level(level), format=LOG_FORMAT, stream=sys.stderr)


__all__ = ["LOG_FORMAT", "resolve_level", "setup_default_logging"]
