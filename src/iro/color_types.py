from __future__ import annotations

"""Core color type used by iro.

:class:`Color` is a point in OKLCH. All palette math operates on it;
conversion to 8-bit sRGB only happens when reading pixels and when
serializing a palette.
"""

from dataclasses import dataclass
from typing import Tuple

from .engine import ColorEngine, DefaultColorEngine


RGB8 = Tuple[int, int, int]


@dataclass(frozen=True)
class Color:
    """Immutable OKLCH color.

    Attributes
    ----------
    L:
        Lightness, nominally in [0, 1].
    C:
        Chroma. Expected non-negative but not enforced.
    h:
        Hue in degrees. Not normalized on construction; conversions
        always take it modulo 360.
    """

    L: float
    C: float
    h: float

    @property
    def hue_degrees(self) -> float:
        """Hue normalized into [0, 360)."""
        h = self.h % 360.0
        # tiny negative angles wrap to exactly 360.0
        return 0.0 if h >= 360.0 else h

    def scaled(self, factor: float) -> "Color":
        """Return a copy with lightness and chroma multiplied by ``factor``."""
        return Color(self.L * factor, self.C * factor, self.h)

    def to_rgb8(self, engine: ColorEngine | None = None) -> RGB8:
        """Return the nearest 8-bit sRGB triple (channels clamped)."""
        if engine is None:
            engine = DefaultColorEngine()
        return engine.oklch_to_rgb8(self.L, self.C, self.h)

    def to_hex(self, engine: ColorEngine | None = None) -> str:
        """Return lowercase ``rrggbb`` without a leading ``#``."""
        r, g, b = self.to_rgb8(engine)
        return f"{r:02x}{g:02x}{b:02x}"

    @classmethod
    def from_rgb8(
        cls,
        r: int,
        g: int,
        b: int,
        engine: ColorEngine | None = None,
    ) -> "Color":
        """Create a Color from 8-bit gamma-encoded sRGB channels."""
        for name, v in (("r", r), ("g", g), ("b", b)):
            if not (0 <= v <= 255):
                raise ValueError(f"{name} must be in [0, 255].")
        if engine is None:
            engine = DefaultColorEngine()
        L, C, h = engine.srgb_to_oklch(r / 255.0, g / 255.0, b / 255.0)
        return cls(L, C, h)

    @classmethod
    def from_hex(cls, hex_str: str, engine: ColorEngine | None = None) -> "Color":
        """Create a Color from a hex string (#rrggbb or rrggbb)."""
        s = hex_str.strip()
        if s.startswith("#"):
            s = s[1:]
        if len(s) != 6:
            raise ValueError("HEX string must be 6 hex digits.")
        try:
            r, g, b = int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16)
        except ValueError as exc:
            raise ValueError("HEX string must contain only hex digits.") from exc
        return cls.from_rgb8(r, g, b, engine)
