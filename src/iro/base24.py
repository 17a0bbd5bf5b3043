from __future__ import annotations

"""Base24 palette composition.

This module turns a ranked list of extracted colors into the 24 slots of
a Base24 scheme::

    base00-base07  neutral ramp tinted with the dominant hue
    base08-base0F  highlights at fixed lightness/chroma
    base10-base11  background extremes
    base12-base17  bright highlights (base08-base0F minus slots 2 and 7)

Style-dependent constants live on :attr:`PaletteStyle.table`.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from itertools import chain
from typing import List, Optional, Sequence, Tuple

from .collect import take_exact
from .color_types import Color
from .palette import PALETTE_SIZE, InsufficientColorsError, Palette


logger = logging.getLogger(__name__)

N_RAMP = 8
N_HIGHLIGHTS = 8
BRIGHT_FACTOR = 1.2
# base0A has no bright terminal counterpart and base0F is deprecated.
BRIGHT_EXCLUDED = frozenset({2, 7})
RAMP_STEP = 0.125


@dataclass(frozen=True)
class StyleTable:
    """Constant table carried by each :class:`PaletteStyle`."""

    base_chroma: float
    highlight_lightness: float
    highlight_chroma: float
    ramp_reversed: bool
    background: Tuple[float, float]


class PaletteStyle(Enum):
    """Dark or light scheme construction."""

    DARK = "dark"
    LIGHT = "light"

    @property
    def table(self) -> StyleTable:
        return _STYLE_TABLES[self]

    @classmethod
    def from_value(cls, value: str) -> "PaletteStyle":
        for style in cls:
            if style.value == value.strip().lower():
                return style
        raise ValueError(f"Unknown palette style: {value}")

    def __str__(self) -> str:
        return self.value


_STYLE_TABLES = {
    PaletteStyle.DARK: StyleTable(
        base_chroma=0.03,
        highlight_lightness=0.6,
        highlight_chroma=0.12,
        ramp_reversed=False,
        background=(0.05, 0.0),
    ),
    PaletteStyle.LIGHT: StyleTable(
        base_chroma=0.04,
        highlight_lightness=0.4,
        highlight_chroma=0.13,
        ramp_reversed=True,
        background=(0.85, 0.90),
    ),
}


@dataclass(frozen=True)
class PaletteSettings:
    """Style and tuning parameters for :func:`compose_palette`.

    Attributes
    ----------
    style:
        Dark or light construction path.
    keep:
        How many of the extracted colors take part in highlight
        selection. None keeps all of them.
    rotation:
        Cyclic offset applied to the sorted highlight hues before they
        are assigned to base08-base0F.
    base_chroma:
        Chroma of the neutral ramp and background slots.
    highlight_chroma, highlight_lightness:
        Chroma/lightness shared by all highlight slots.
    """

    style: PaletteStyle = PaletteStyle.DARK
    keep: Optional[int] = None
    rotation: int = 0
    base_chroma: float = 0.03
    highlight_chroma: float = 0.12
    highlight_lightness: float = 0.6

    def with_overrides(self, **kwargs) -> "PaletteSettings":
        """Return a copy with the given non-None fields replaced."""
        changes = {k: v for k, v in kwargs.items() if v is not None}
        return replace(self, **changes)


def defaults_for(style: PaletteStyle) -> PaletteSettings:
    """Return the default settings for ``style``."""
    table = style.table
    return PaletteSettings(
        style=style,
        keep=None,
        rotation=0,
        base_chroma=table.base_chroma,
        highlight_chroma=table.highlight_chroma,
        highlight_lightness=table.highlight_lightness,
    )


def pad_colors(colors: Sequence[Color], minimum: int = N_HIGHLIGHTS) -> List[Color]:
    """Cyclically repeat ``colors`` from the front until ``minimum`` is reached."""
    padded = list(colors)
    if not padded:
        return padded
    i = 0
    while len(padded) < minimum:
        padded.append(padded[i])
        i += 1
    return padded


def rotate(values: Sequence, rotation: int) -> list:
    """Shift ``values`` left by ``rotation`` positions (cyclic)."""
    if not values:
        return []
    k = rotation % len(values)
    return list(values[k:]) + list(values[:k])


def base_ramp(base_hue: float, settings: PaletteSettings) -> List[Color]:
    """Eight tinted neutrals from background to foreground."""
    levels = range(1, N_RAMP + 1)
    if settings.style.table.ramp_reversed:
        levels = reversed(levels)
    return [Color(i * RAMP_STEP, settings.base_chroma, base_hue) for i in levels]


def highlight_hues(colors: Sequence[Color], settings: PaletteSettings) -> List[float]:
    """Select, order and rotate the hues of the highlight slots."""
    kept = list(colors) if settings.keep is None else list(colors[: max(settings.keep, 0)])
    kept = pad_colors(kept)
    by_chroma = sorted(kept, key=lambda c: c.C)[::-1][:N_HIGHLIGHTS]
    hues = sorted((c.hue_degrees for c in by_chroma), key=int)
    return rotate(hues, settings.rotation)


def highlights(colors: Sequence[Color], settings: PaletteSettings) -> List[Color]:
    """Highlight colors for base08-base0F."""
    return [
        Color(settings.highlight_lightness, settings.highlight_chroma, h)
        for h in highlight_hues(colors, settings)
    ]


def background_pair(base_hue: float, settings: PaletteSettings) -> List[Color]:
    """Background extremes for base10-base11."""
    return [Color(L, settings.base_chroma, base_hue) for L in settings.style.table.background]


def bright_highlights(hl: Sequence[Color]) -> List[Color]:
    """Brightened highlights, skipping slots without a bright counterpart."""
    return [c.scaled(BRIGHT_FACTOR) for i, c in enumerate(hl) if i not in BRIGHT_EXCLUDED]


def compose_palette(
    colors: Sequence[Color],
    settings: Optional[PaletteSettings] = None,
) -> Palette:
    """Compose a Base24 palette from ranked dominant colors.

    Parameters
    ----------
    colors:
        Extracted colors, most dominant first. Must not be empty.
    settings:
        PaletteSettings. If None, ``defaults_for(PaletteStyle.DARK)``.

    Returns
    -------
    Palette
        24 colors in slot order.

    Raises
    ------
    ValueError
        If ``colors`` is empty.
    InsufficientColorsError
        If fewer than 24 colors could be assembled (e.g. ``keep=0``).
    """
    if not colors:
        raise ValueError("at least one color is required.")
    if settings is None:
        settings = defaults_for(PaletteStyle.DARK)

    base_hue = colors[0].h
    padded = pad_colors(colors)

    hl = highlights(padded, settings)
    assembled = take_exact(
        chain(
            base_ramp(base_hue, settings),
            hl,
            background_pair(base_hue, settings),
            bright_highlights(hl),
        ),
        PALETTE_SIZE,
    )
    if assembled is None:
        raise InsufficientColorsError("Not enough colors")

    logger.debug(
        "compose_palette: style=%s base_hue=%.1f highlight_hues=%s",
        settings.style.value,
        base_hue,
        [round(c.h, 1) for c in hl],
    )
    return Palette(assembled)

