"""Public entrypoint for the iro Base24 scheme generator.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``iro`` instead of individual
submodules.
"""

from .color_types import Color
from .extract import ParseSettings, extract_colors
from .base24 import PaletteSettings, PaletteStyle, compose_palette, defaults_for
from .palette import Base24Style, InsufficientColorsError, Palette, slot_key
from .api import generate_style, style_from_image
from .export import ExportFormat, export_style

__all__ = [
    "Color",
    "ParseSettings",
    "extract_colors",
    "PaletteSettings",
    "PaletteStyle",
    "compose_palette",
    "defaults_for",
    "Base24Style",
    "InsufficientColorsError",
    "Palette",
    "slot_key",
    "generate_style",
    "style_from_image",
    "ExportFormat",
    "export_style",
]
