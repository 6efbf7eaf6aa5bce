"""Colour helpers: hex formatting and dominant colour statistics."""

import numpy as np
from numpy.typing import NDArray
from PIL import Image
from pydantic import BaseModel, Field

# 16 levels per channel, 4096 bins in total
HISTOGRAM_LEVELS = 16
_BIN_SIZE = 256 // HISTOGRAM_LEVELS


class RGB(BaseModel):
    r: int = Field(..., ge=0, le=255)
    g: int = Field(..., ge=0, le=255)
    b: int = Field(..., ge=0, le=255)


class ImageStats(BaseModel):
    """Pixel statistics of an image. ``dominant`` is None when unavailable."""

    dominant: RGB | None = None


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format an RGB triple as ``#rrggbb``."""
    for value in (r, g, b):
        if not 0 <= value <= 255:
            raise ValueError(f"Colour component out of range: {value}")
    return f"#{r:02x}{g:02x}{b:02x}"


def dominant_color(pixels: NDArray[np.uint8]) -> RGB | None:
    """
    Most populated bin of a 16x16x16 RGB histogram, reported as the bin centre.

    Args:
        pixels: (N, 3) array of RGB values

    Returns:
        The dominant colour, or None when there are no pixels
    """
    if pixels.size == 0:
        return None

    levels = (pixels // _BIN_SIZE).astype(np.int64)
    bins = (levels[:, 0] * HISTOGRAM_LEVELS + levels[:, 1]) * HISTOGRAM_LEVELS + levels[:, 2]
    counts = np.bincount(bins, minlength=HISTOGRAM_LEVELS**3)
    winner = int(np.argmax(counts))

    r_level, rest = divmod(winner, HISTOGRAM_LEVELS * HISTOGRAM_LEVELS)
    g_level, b_level = divmod(rest, HISTOGRAM_LEVELS)
    half = _BIN_SIZE // 2
    return RGB(
        r=r_level * _BIN_SIZE + half,
        g=g_level * _BIN_SIZE + half,
        b=b_level * _BIN_SIZE + half,
    )


def compute_image_stats(img: Image.Image) -> ImageStats:
    """Compute pixel statistics, ignoring fully transparent pixels."""
    rgba = np.asarray(img.convert("RGBA"), dtype=np.uint8).reshape(-1, 4)
    opaque = rgba[rgba[:, 3] > 0][:, :3]
    return ImageStats(dominant=dominant_color(opaque))
