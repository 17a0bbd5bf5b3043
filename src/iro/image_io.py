from __future__ import annotations

"""Image decoding into raw RGB pixel buffers."""

import io
import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image, UnidentifiedImageError


logger = logging.getLogger(__name__)


def image_to_pixels(img: Image.Image, downscale: int = 1) -> np.ndarray:
    """Flatten a PIL image into an ``(N, 3)`` uint8 array (row-major).

    Alpha is dropped. With ``downscale > 1`` the image is first shrunk by
    that factor using nearest-neighbour sampling (never below 1x1).
    """
    if downscale < 1:
        raise ValueError("downscale must be >= 1.")
    rgb = img.convert("RGB")
    if downscale > 1:
        w, h = rgb.size
        size = (max(1, w // downscale), max(1, h // downscale))
        rgb = rgb.resize(size, Image.Resampling.NEAREST)
    arr = np.asarray(rgb, dtype=np.uint8)
    return arr.reshape(-1, 3)


def decode_pixels(data: bytes, downscale: int = 1) -> np.ndarray:
    """Decode an encoded image held in memory."""
    try:
        with Image.open(io.BytesIO(data)) as img:
            return image_to_pixels(img, downscale)
    except UnidentifiedImageError as exc:
        raise ValueError("Failed to decode image data") from exc


def load_pixels(path: Union[str, Path], downscale: int = 1) -> np.ndarray:
    """Open an image file and return its pixels as an ``(N, 3)`` array."""
    p = Path(path)
    try:
        with Image.open(p) as img:
            logger.debug("load_pixels: %s %s %dx%d", p, img.mode, img.width, img.height)
            return image_to_pixels(img, downscale)
    except UnidentifiedImageError as exc:
        raise ValueError(f"Failed to decode image: {p}") from exc
