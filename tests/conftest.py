"""共通フィクスチャ。

- 乱数シード固定
- 小さな合成ピクセルバッファ / PNG 画像
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import numpy as np
import pytest
from PIL import Image

RED = (255, 0, 0)
GREEN = (0, 255, 0)
GRAY = (128, 128, 128)
SOLID = (200, 60, 40)


def make_pixels(*groups: tuple[tuple[int, int, int], int]) -> np.ndarray:
    """(color, count) の組から (N, 3) uint8 配列を作る。"""
    rows = [np.tile(np.array(color, dtype=np.uint8), (count, 1)) for color, count in groups]
    return np.concatenate(rows, axis=0)


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture()
def pixels_of() -> Callable[..., np.ndarray]:
    """`make_pixels` をテストから使うためのファクトリ。"""
    return make_pixels


@pytest.fixture()
def solid_pixels() -> np.ndarray:
    return make_pixels((SOLID, 100))


@pytest.fixture()
def two_hue_pixels() -> np.ndarray:
    """赤 30 / 緑 20 / 灰 50。灰は平均彩度未満で除外される。"""
    return make_pixels((RED, 30), (GREEN, 20), (GRAY, 50))


@pytest.fixture()
def write_png(tmp_path: Path) -> Callable[..., Path]:
    def _write(pixels: np.ndarray, width: int, name: str = "image.png", mode: str = "RGB") -> Path:
        arr = np.asarray(pixels, dtype=np.uint8).reshape(-1, width, len(mode))
        path = tmp_path / name
        Image.fromarray(arr).save(path)
        return path

    return _write


@pytest.fixture()
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """ホーム/カレントの設定ファイルと IRO_* 環境変数の影響を遮断する。"""
    from common import settings

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for name in ("IRO_CONFIG", "IRO_LOG_LEVEL", "IRO_DEBUG", "IRO_DOWNSCALE"):
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield tmp_path
    monkeypatch.undo()
    settings.reload_from_env()
