from __future__ import annotations

import pytest

from iro import (
    ParseSettings,
    PaletteStyle,
    defaults_for,
    generate_style,
    style_from_image,
)


def test_generate_style_from_solid_image(solid_pixels) -> None:
    """単色画像: ハイライト 8 色と明るい 6 色がすべて同じ色相になる。"""
    settings = defaults_for(PaletteStyle.DARK).with_overrides(keep=8)
    style = generate_style(solid_pixels, ParseSettings(segment_size=15), settings, name="solid")
    assert style.name == "solid"
    assert style.variant == "dark"
    pal = style.palette
    assert len(pal) == 24
    hues = {round(c.h, 9) for c in pal.highlights + pal.bright_highlights}
    assert len(hues) == 1
    assert len({c.L for c in pal.ramp}) == 8
    assert {round(c.h, 9) for c in pal.ramp} == hues


def test_generate_style_variant_follows_style(two_hue_pixels) -> None:
    style = generate_style(two_hue_pixels, palette_settings=defaults_for(PaletteStyle.LIGHT))
    assert style.variant == "light"
    assert style.author == ""


def test_generate_style_is_deterministic(two_hue_pixels) -> None:
    assert generate_style(two_hue_pixels).to_dict() == generate_style(two_hue_pixels.copy()).to_dict()


def test_generate_style_without_pixels() -> None:
    with pytest.raises(ValueError):
        generate_style([])


def test_style_from_image_uses_file_stem(write_png, two_hue_pixels) -> None:
    path = write_png(two_hue_pixels, width=10, name="sunset.png")
    style = style_from_image(path)
    assert style.name == "sunset"
    assert style.to_dict() == generate_style(two_hue_pixels, name="sunset").to_dict()
