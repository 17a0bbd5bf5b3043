from __future__ import annotations

"""Text serialization of Base24 schemes.

Exposes :class:`ExportFormat` and :func:`export_style`, which render a
:class:`~iro.palette.Base24Style` as the Base24 YAML document, as JSON,
or as a plain list of ``#rrggbb`` lines.
"""

import json
from enum import Enum
from typing import List

import yaml

from .palette import Base24Style


class ExportFormat(Enum):
    """Supported output formats."""

    YAML = "yaml"
    JSON = "json"
    HEX = "hex"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")


class _HexValue(str):
    """Palette hex string, always emitted double-quoted."""


class _SchemeDumper(yaml.SafeDumper):
    pass


def _represent_hex(dumper: yaml.SafeDumper, data: _HexValue) -> yaml.ScalarNode:
    return dumper.represent_scalar("tag:yaml.org,2002:str", str(data), style='"')


_SchemeDumper.add_representer(_HexValue, _represent_hex)


def to_yaml(style: Base24Style) -> str:
    """Base24 scheme document with keys in slot order.

    Hex values are always double-quoted, e.g. ``base00: "3e4451"``.
    """
    data = style.to_dict()
    data["palette"] = {k: _HexValue(v) for k, v in data["palette"].items()}
    return yaml.dump(
        data,
        Dumper=_SchemeDumper,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )


def to_json(style: Base24Style) -> str:
    return json.dumps(style.to_dict(), indent=2, ensure_ascii=False) + "\n"


def to_hex_lines(style: Base24Style) -> List[str]:
    return [f"#{c.to_hex()}" for c in style.palette]


def export_style(style: Base24Style, fmt: ExportFormat | str) -> str:
    """Render ``style`` in the desired format."""
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    if export_fmt == ExportFormat.YAML:
        return to_yaml(style)
    if export_fmt == ExportFormat.JSON:
        return to_json(style)
    if export_fmt == ExportFormat.HEX:
        return "\n".join(to_hex_lines(style)) + "\n"
    raise ValueError(f"Unsupported export format: {fmt}")


__all__ = [
    "ExportFormat",
    "export_style",
    "to_hex_lines",
    "to_json",
    "to_yaml",
]
