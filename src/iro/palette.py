from __future__ import annotations

"""Container types for generated Base24 palettes.

This module defines the :class:`Palette` dataclass, which holds the 24
slot colors in order, and :class:`Base24Style`, the named scheme that is
handed to the exporters.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Tuple

from .color_types import Color


PALETTE_SIZE = 24


class InsufficientColorsError(RuntimeError):
    """Raised when a palette cannot be filled with 24 colors."""


def slot_key(index: int) -> str:
    """Base24 key for a slot index, e.g. ``slot_key(16) == "base10"``."""
    if not (0 <= index < PALETTE_SIZE):
        raise IndexError(f"slot index out of range: {index}")
    return f"base{index:02X}"


@dataclass(frozen=True)
class Palette:
    """Generated Base24 palette.

    Attributes
    ----------
    colors:
        Exactly 24 colors. Slot 0 is the darkest background-adjacent tone
        of a dark scheme; slot 23 is the last bright highlight.
    """

    colors: Tuple[Color, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "colors", tuple(self.colors))
        if len(self.colors) != PALETTE_SIZE:
            raise InsufficientColorsError(
                f"Palette needs {PALETTE_SIZE} colors, got {len(self.colors)}."
            )

    def __len__(self) -> int:
        return len(self.colors)

    def __getitem__(self, index: int) -> Color:
        return self.colors[index]

    def __iter__(self) -> Iterator[Color]:
        return iter(self.colors)

    @property
    def ramp(self) -> Tuple[Color, ...]:
        return self.colors[0:8]

    @property
    def highlights(self) -> Tuple[Color, ...]:
        return self.colors[8:16]

    @property
    def background(self) -> Tuple[Color, ...]:
        return self.colors[16:18]

    @property
    def bright_highlights(self) -> Tuple[Color, ...]:
        return self.colors[18:24]

    def to_hex_map(self) -> Dict[str, str]:
        """Return ``{"base00": "rrggbb", ...}`` in slot order."""
        return {slot_key(i): c.to_hex() for i, c in enumerate(self.colors)}


@dataclass(frozen=True)
class Base24Style:
    """A named Base24 scheme.

    Attributes
    ----------
    name, author:
        Free-form scheme metadata.
    variant:
        ``"dark"`` or ``"light"``.
    palette:
        The 24 slot colors.
    """

    name: str
    author: str
    variant: str
    palette: Palette

    def to_dict(self) -> dict:
        """Return ``{name, author, variant, palette: {base00: ...}}``."""
        return {
            "name": self.name,
            "author": self.author,
            "variant": self.variant,
            "palette": self.palette.to_hex_map(),
        }
