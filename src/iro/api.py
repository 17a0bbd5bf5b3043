from __future__ import annotations

"""High-level public API for generating Base24 schemes.

This module provides :func:`generate_style`, which coordinates dominant
color extraction and palette composition to produce a
:class:`iro.palette.Base24Style`, and :func:`style_from_image`, which
does the same starting from an image file.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .base24 import PaletteSettings, PaletteStyle, compose_palette, defaults_for
from .engine import ColorEngine
from .extract import ParseSettings, PixelBuffer, extract_colors
from .image_io import load_pixels
from .palette import Base24Style


logger = logging.getLogger(__name__)

DEFAULT_NAME = "iro"


def generate_style(
    pixels: PixelBuffer,
    parse_settings: Optional[ParseSettings] = None,
    palette_settings: Optional[PaletteSettings] = None,
    name: str = DEFAULT_NAME,
    author: str = "",
    engine: Optional[ColorEngine] = None,
) -> Base24Style:
    """Generate a Base24 scheme from raw RGB pixels.

    Parameters
    ----------
    pixels:
        8-bit RGB triples (sequence or uint8 array).
    parse_settings:
        Hue bucketing parameters. Defaults are used if None.
    palette_settings:
        Style/tuning parameters. If None, dark-style defaults are used.
    name, author:
        Scheme metadata copied into the result.
    engine:
        Optional ColorEngine for the pixel conversion.

    Returns
    -------
    Base24Style
        Named scheme whose variant is the style value ("dark"/"light").

    Raises
    ------
    ValueError
        If no dominant color could be extracted (empty pixel buffer).
    """
    if palette_settings is None:
        palette_settings = defaults_for(PaletteStyle.DARK)

    colors = extract_colors(pixels, parse_settings, engine)
    if not colors:
        raise ValueError("No colors could be extracted from the image.")
    logger.info("extracted %d dominant colors", len(colors))

    palette = compose_palette(colors, palette_settings)
    return Base24Style(
        name=name,
        author=author,
        variant=palette_settings.style.value,
        palette=palette,
    )


def style_from_image(
    path: Union[str, Path],
    parse_settings: Optional[ParseSettings] = None,
    palette_settings: Optional[PaletteSettings] = None,
    name: Optional[str] = None,
    author: str = "",
    downscale: int = 1,
) -> Base24Style:
    """Load an image file and generate a Base24 scheme from it.

    ``name`` defaults to the file stem.
    """
    p = Path(path)
    pixels = load_pixels(p, downscale=downscale)
    return generate_style(
        pixels,
        parse_settings=parse_settings,
        palette_settings=palette_settings,
        name=name if name is not None else p.stem,
        author=author,
    )
