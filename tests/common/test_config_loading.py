from __future__ import annotations

from pathlib import Path

from common.config import default_search_paths, load_config


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_later_files_override_earlier(tmp_path: Path) -> None:
    user = _write(tmp_path / "user.yaml", "style: light\nsegment-size: 10\n")
    local = _write(tmp_path / "local.yaml", "segment-size: 12\n")
    cfg = load_config(search_paths=[user, local, tmp_path / "absent.yaml"])
    assert cfg == {"style": "light", "segment_size": 12}


def test_explicit_path_only(tmp_path: Path) -> None:
    _write(tmp_path / "iro.yaml", "rotation: 1\n")
    explicit = _write(tmp_path / "explicit.yaml", "rotation: 3\n")
    assert load_config(explicit) == {"rotation": 3}
    assert load_config(tmp_path / "missing.yaml") == {}


def test_broken_or_non_mapping_files_are_ignored(tmp_path: Path) -> None:
    broken = _write(tmp_path / "broken.yaml", "style: [light\n")
    listing = _write(tmp_path / "list.yaml", "- a\n- b\n")
    assert load_config(broken) == {}
    assert load_config(listing) == {}


def test_default_search_paths(isolated_config) -> None:
    paths = default_search_paths()
    assert paths[0] == Path.home() / ".config" / "iro" / "config.yaml"
    assert paths[1] == Path.cwd() / "iro.yaml"
    _write(paths[0], "author: home\nrotation: 1\n")
    _write(paths[1], "rotation: 2\n")
    assert load_config() == {"author": "home", "rotation": 2}
