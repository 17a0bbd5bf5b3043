"""
どこで: `common.config`
何を: YAML 設定ファイルを読み込み、CLI の既定値として使える辞書を返す。
なぜ: 毎回同じオプションを指定せずに済むようにするため。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "iro.yaml"


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("failed to read config %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def default_search_paths(cwd: Optional[Path] = None) -> list[Path]:
    """既定の探索先（優先度の低い順）。

    1) `~/.config/iro/config.yaml`
    2) カレントディレクトリの `iro.yaml`
    """
    base = cwd if cwd is not None else Path.cwd()
    return [
        Path.home() / ".config" / "iro" / "config.yaml",
        base / CONFIG_FILENAME,
    ]


def load_config(
    path: Optional[Path | str] = None,
    search_paths: Optional[Iterable[Path]] = None,
) -> Dict[str, Any]:
    """構成を読み込んで辞書で返す（フェイルソフト）。

    - `path` 指定時はそのファイルのみを読む（存在しなければ空辞書）。
    - 未指定時は `search_paths`（既定: `default_search_paths()`）を順に読み、後勝ちで上書き。
    - ネストした辞書のディープマージは行わず、トップレベルのみ上書き。
    - キー中の `-` は `_` に正規化する（`segment-size` → `segment_size`）。
    """
    if path is not None:
        candidates = [Path(path)]
    else:
        candidates = list(search_paths) if search_paths is not None else default_search_paths()

    merged: Dict[str, Any] = {}
    for candidate in candidates:
        if candidate.is_file():
            logger.debug("loading config %s", candidate)
            merged.update(_safe_load_yaml(candidate))
        elif path is not None:
            logger.warning("config file not found: %s", candidate)

    return {str(k).replace("-", "_"): v for k, v in merged.items()}


__all__ = ["CONFIG_FILENAME", "default_search_paths", "load_config"]
