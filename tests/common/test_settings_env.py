from __future__ import annotations

import pytest

from common import settings
from common.env import env_bool, env_int, env_str


def test_env_helpers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IRO_T_STR", "  value ")
    monkeypatch.setenv("IRO_T_BLANK", "   ")
    monkeypatch.setenv("IRO_T_INT", "-3")
    monkeypatch.setenv("IRO_T_BAD", "abc")
    monkeypatch.setenv("IRO_T_YES", "Yes")
    monkeypatch.setenv("IRO_T_ZERO", "0")

    assert env_str("IRO_T_STR") == "value"
    assert env_str("IRO_T_BLANK", "d") == "d"
    assert env_int("IRO_T_INT", 5) == -3
    assert env_int("IRO_T_INT", 5, min_value=1) == 1
    assert env_int("IRO_T_BAD", 5) == 5
    assert env_int("IRO_T_UNSET") is None
    assert env_bool("IRO_T_YES") is True
    assert env_bool("IRO_T_ZERO", True) is False
    assert env_bool("IRO_T_BAD", True) is True


def test_reload_from_env(isolated_config, monkeypatch: pytest.MonkeyPatch) -> None:
    s = settings.get()
    assert (s.LOG_LEVEL, s.DEBUG, s.CONFIG_PATH, s.DOWNSCALE) == ("WARNING", False, None, 1)

    monkeypatch.setenv("IRO_LOG_LEVEL", "info")
    monkeypatch.setenv("IRO_DOWNSCALE", "0")
    monkeypatch.setenv("IRO_CONFIG", "/tmp/iro.yaml")
    settings.reload_from_env()
    assert s.LOG_LEVEL == "INFO"
    assert s.DOWNSCALE == 1
    assert s.CONFIG_PATH == "/tmp/iro.yaml"

    monkeypatch.setenv("IRO_DEBUG", "1")
    monkeypatch.setenv("IRO_DOWNSCALE", "4")
    settings.reload_from_env()
    assert s.LOG_LEVEL == "DEBUG"
    assert s.DOWNSCALE == 4
