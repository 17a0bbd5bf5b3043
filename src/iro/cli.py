from __future__ import annotations

"""Command-line entry point: ``iro IMAGE`` prints a Base24 scheme.

Defaults can be supplied through a YAML config file (``--config``,
``$IRO_CONFIG`` or ``iro.yaml`` in the working directory). Keys are the
long option names, e.g.::

    style: light
    keep-image-colors: 6
    segment-size: 12
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from common import settings as settings_mod
from common.config import load_config
from common.logging import setup_default_logging

from .api import style_from_image
from .base24 import PaletteStyle, defaults_for
from .export import ExportFormat, export_style
from .extract import ParseSettings
from .palette import InsufficientColorsError


logger = logging.getLogger(__name__)

# Config keys accepted as parser defaults
_CONFIG_KEYS = {
    "light",
    "keep_image_colors",
    "rotation",
    "segment_size",
    "base_chroma",
    "highlight_chroma",
    "highlight_lightness",
    "downscale",
    "author",
    "format",
    "log_level",
}


def build_parser() -> argparse.ArgumentParser:
    s = settings_mod.get()
    parser = argparse.ArgumentParser(
        prog="iro",
        description="Generate Base24 color schemes from images",
    )
    parser.add_argument("path", type=Path, help="Path to the image")
    parser.add_argument(
        "-l",
        "--light",
        action="store_true",
        default=False,
        help="Generate a light color scheme",
    )
    parser.add_argument(
        "-k",
        "--keep-image-colors",
        type=int,
        default=5,
        help="Number of extracted colors used for highlights (default: 5)",
    )
    parser.add_argument(
        "-r",
        "--rotation",
        type=int,
        default=0,
        help="Rotate highlight hues across the highlight slots",
    )
    parser.add_argument(
        "-s",
        "--segment-size",
        type=float,
        default=ParseSettings().segment_size,
        help="Hue segment granularity used when clustering (default: 15)",
    )
    parser.add_argument("--base-chroma", type=float, default=None)
    parser.add_argument("--highlight-chroma", type=float, default=None)
    parser.add_argument("--highlight-lightness", type=float, default=None)
    parser.add_argument(
        "--downscale",
        type=int,
        default=s.DOWNSCALE,
        help="Shrink the image by this factor before extraction",
    )
    parser.add_argument("--name", default=None, help="Scheme name (default: image file stem)")
    parser.add_argument("--author", default="")
    parser.add_argument(
        "-f",
        "--format",
        choices=[fmt.value for fmt in ExportFormat],
        default=ExportFormat.YAML.value,
    )
    parser.add_argument("-o", "--output", type=Path, default=None, help="Write to file")
    parser.add_argument("--config", type=Path, default=None, help="YAML config file")
    parser.add_argument("--log-level", default=s.LOG_LEVEL)
    return parser


def config_defaults(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Translate a loaded config dict into parser defaults."""
    out: Dict[str, Any] = {}
    for key, value in cfg.items():
        if key == "style":
            out["light"] = PaletteStyle.from_value(str(value)) == PaletteStyle.LIGHT
        elif key == "format":
            out["format"] = ExportFormat.from_value(str(value)).value
        elif key == "keep":
            out["keep_image_colors"] = value
        elif key in _CONFIG_KEYS:
            out[key] = value
        else:
            logger.warning("ignoring unknown config key: %s", key)
    return out


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse ``argv`` with config-file values as defaults.

    Raises ValueError when the config holds an invalid style or format.
    """
    parser = build_parser()
    known, _ = parser.parse_known_args(argv)
    config_path = known.config
    if config_path is None and settings_mod.get().CONFIG_PATH:
        config_path = Path(settings_mod.get().CONFIG_PATH)
    parser.set_defaults(**config_defaults(load_config(config_path)))
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        args = parse_args(argv)
    except ValueError as exc:
        print(f"iro: error: invalid config: {exc}", file=sys.stderr)
        return 1
    setup_default_logging(args.log_level)

    style = PaletteStyle.LIGHT if args.light else PaletteStyle.DARK
    palette_settings = defaults_for(style).with_overrides(
        keep=args.keep_image_colors,
        rotation=args.rotation,
        base_chroma=args.base_chroma,
        highlight_chroma=args.highlight_chroma,
        highlight_lightness=args.highlight_lightness,
    )
    parse_settings = ParseSettings(segment_size=args.segment_size)

    try:
        b24 = style_from_image(
            args.path,
            parse_settings=parse_settings,
            palette_settings=palette_settings,
            name=args.name,
            author=args.author,
            downscale=args.downscale,
        )
        text = export_style(b24, args.format)
        if args.output is not None:
            args.output.write_text(text, encoding="utf-8")
            logger.info("wrote %s", args.output)
        else:
            sys.stdout.write(text)
    except (OSError, ValueError, InsufficientColorsError) as exc:
        logger.debug("failed to generate scheme from %s", args.path, exc_info=True)
        print(f"iro: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
