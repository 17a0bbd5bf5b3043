"""
どこで: `common.settings`
何を: iro の環境変数（`IRO_*`）を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str


@dataclass
class _Settings:
    # Logging
    LOG_LEVEL: str = "WARNING"
    DEBUG: bool = False

    # CLI
    CONFIG_PATH: str | None = None
    DOWNSCALE: int = 1


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - `IRO_DEBUG` が真なら `LOG_LEVEL` は DEBUG に上書きされる。
    - `IRO_DOWNSCALE` は 1 未満を 1 に丸める。
    """
    _settings.DEBUG = env_bool("IRO_DEBUG", False)
    level = env_str("IRO_LOG_LEVEL", "WARNING") or "WARNING"
    _settings.LOG_LEVEL = "DEBUG" if _settings.DEBUG else level.upper()

    _settings.CONFIG_PATH = env_str("IRO_CONFIG")
    _settings.DOWNSCALE = env_int("IRO_DOWNSCALE", 1, min_value=1) or 1


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
