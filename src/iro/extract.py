from __future__ import annotations

"""Dominant color extraction by hue-bucket clustering.

Pixels are converted to OKLCH, low-chroma pixels are dropped, and the
survivors are grouped into equal arcs of the hue circle. Each populated
arc contributes its mean color; arcs are ranked by pixel count.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

import numpy as np

from .color_types import Color
from .engine import ColorEngine, DefaultColorEngine


logger = logging.getLogger(__name__)

PixelBuffer = Union[np.ndarray, Sequence[Sequence[int]]]

_CHROMA_TOL = 1e-12


@dataclass(frozen=True)
class ParseSettings:
    """Parameters for :func:`extract_colors`.

    Attributes
    ----------
    segment_size:
        Number of equal arcs the hue circle is divided into. Each bucket
        spans ``360 / segment_size`` degrees.
    """

    segment_size: float = 15.0


def _as_pixel_array(pixels: PixelBuffer) -> np.ndarray:
    arr = np.asarray(pixels, dtype=np.uint8)
    if arr.size == 0:
        return np.zeros((0, 3), dtype=np.uint8)
    if arr.shape[-1] != 3:
        raise ValueError(f"pixels must be RGB triples, got shape {arr.shape}")
    return arr.reshape(-1, 3)


def bucket_indices(hues: np.ndarray, segment_size: float) -> np.ndarray:
    """Map hue degrees in [0, 360) to hue bucket indices.

    A zero ``segment_size`` gives an infinite width, so every hue lands in
    bucket 0.
    """
    with np.errstate(divide="ignore"):
        width = np.divide(360.0, segment_size)
    return np.floor(np.asarray(hues, dtype=np.float64) / width).astype(np.int64)


def extract_colors(
    pixels: PixelBuffer,
    settings: Optional[ParseSettings] = None,
    engine: Optional[ColorEngine] = None,
) -> List[Color]:
    """Extract dominant colors from an RGB pixel buffer.

    Parameters
    ----------
    pixels:
        8-bit RGB triples, either as a sequence or as a uint8 array whose
        last dimension is 3 (e.g. an ``(H, W, 3)`` image).
    settings:
        ParseSettings controlling hue bucketing. Defaults are used if None.
    engine:
        ColorEngine for the sRGB -> OKLCH conversion.

    Returns
    -------
    list[Color]
        Mean color of each populated hue bucket, most populated first.
        Empty when ``pixels`` is empty.
    """
    if settings is None:
        settings = ParseSettings()
    if engine is None:
        engine = DefaultColorEngine()

    rgb = _as_pixel_array(pixels)
    if rgb.shape[0] == 0:
        logger.debug("extract_colors: empty pixel buffer")
        return []

    lch = engine.srgb8_to_oklch_array(rgb)

    # Keep pixels at or above mean chroma, within rounding of the mean
    avg_chroma = float(lch[:, 1].mean())
    kept = lch[lch[:, 1] >= avg_chroma - _CHROMA_TOL]

    idx = bucket_indices(kept[:, 2], settings.segment_size)
    buckets, inverse = np.unique(idx, return_inverse=True)
    inverse = inverse.reshape(-1)
    counts = np.bincount(inverse, minlength=len(buckets))
    sum_l = np.bincount(inverse, weights=kept[:, 0], minlength=len(buckets))
    sum_c = np.bincount(inverse, weights=kept[:, 1], minlength=len(buckets))
    sum_h = np.bincount(inverse, weights=kept[:, 2], minlength=len(buckets))

    # Ties keep ascending bucket order
    order = np.argsort(-counts, kind="stable")

    logger.debug(
        "extract_colors: %d/%d pixels above mean chroma %.4f, %d buckets",
        kept.shape[0],
        lch.shape[0],
        avg_chroma,
        len(buckets),
    )

    colors: List[Color] = []
    for i in order:
        n = float(counts[i])
        colors.append(Color(float(sum_l[i] / n), float(sum_c[i] / n), float(sum_h[i] / n)))
    return colors
