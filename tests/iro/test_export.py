from __future__ import annotations

import json
import re

import pytest
import yaml

from iro.base24 import PaletteStyle, compose_palette, defaults_for
from iro.color_types import Color
from iro.export import ExportFormat, export_style
from iro.palette import Base24Style, Palette


@pytest.fixture()
def style() -> Base24Style:
    colors = [Color(0.6, 0.15, h) for h in (20.0, 140.0, 260.0)]
    pal = compose_palette(colors, defaults_for(PaletteStyle.LIGHT))
    return Base24Style(name="Bebop", author="", variant="light", palette=pal)


def test_yaml_document_round_trips(style: Base24Style) -> None:
    text = export_style(style, ExportFormat.YAML)
    loaded = yaml.safe_load(text)
    assert loaded == style.to_dict()
    assert list(loaded) == ["name", "author", "variant", "palette"]
    assert list(loaded["palette"])[0] == "base00"
    assert list(loaded["palette"])[-1] == "base17"
    # hex values stay strings even when they look numeric
    assert all(isinstance(v, str) for v in loaded["palette"].values())


def test_json_export(style: Base24Style) -> None:
    loaded = json.loads(export_style(style, "json"))
    assert loaded == style.to_dict()


def test_hex_export(style: Base24Style) -> None:
    lines = export_style(style, "hex").splitlines()
    assert len(lines) == 24
    assert all(line.startswith("#") and len(line) == 7 for line in lines)
    assert lines[0] == "#" + style.palette[0].to_hex()


def test_unknown_format() -> None:
    with pytest.raises(ValueError):
        ExportFormat.from_value("toml")


def test_yaml_quotes_every_hex_value(style: Base24Style) -> None:
    lines = [line for line in export_style(style, "yaml").splitlines() if line.startswith("  base")]
    assert len(lines) == 24
    assert all(re.fullmatch(r'  base[0-9A-F]{2}: "[0-9a-f]{6}"', line) for line in lines)


def test_yaml_keeps_exponent_like_hex_a_string() -> None:
    color = Color.from_hex("3e4451")
    hex_value = color.to_hex()
    assert hex_value == "3e4451"
    pal = Palette(tuple([color] * 24))
    text = export_style(Base24Style(name="tint", author="", variant="dark", palette=pal), "yaml")
    assert f'  base00: "{hex_value}"' in text.splitlines()
    assert yaml.safe_load(text)["palette"]["base00"] == hex_value
