"""
Pixel classifier: RGB -> white, black or one of the 18 Piet colors.

Channels are quantized to {0x00, 0xC0, 0xFF} first so that slightly
off colors (anti-aliasing, lossy re-encoding) still land on the palette.
Anything that does not match a palette pattern counts as white.
"""

import logging
from typing import Tuple, Union

import numpy as np
from PIL import Image

from .colors import Color, Hue, Lightness
from .grid import Grid

logger = logging.getLogger(__name__)

BLACK = -1
WHITE = -2

RawCodel = Union[Color, int]

# Quantization: [0, 0x60) -> 0x00, [0x60, 0xE0) -> 0xC0, [0xE0, 0xFF] -> 0xFF
LEVELS = (0x00, 0xC0, 0xFF)
THRESHOLDS = (0x60, 0xE0)

LIGHTNESS_OF = {
    (0xC0, 0xFF): Lightness.LIGHT,
    (0x00, 0xFF): Lightness.NORMAL,
    (0x00, 0xC0): Lightness.DARK,
}

# Which channels sit at the max -> hue
HUE_OF = {
    (True, False, False): Hue.RED,
    (True, True, False): Hue.YELLOW,
    (False, True, False): Hue.GREEN,
    (False, True, True): Hue.CYAN,
    (False, False, True): Hue.BLUE,
    (True, False, True): Hue.MAGENTA,
}


def quantize(value: int) -> int:
    """Snap one channel to its canonical level."""
    if value < THRESHOLDS[0]:
        return LEVELS[0]
    if value < THRESHOLDS[1]:
        return LEVELS[1]
    return LEVELS[2]


def classify_quantized(rgb: Tuple[int, int, int]) -> RawCodel:
    """Classify an already quantized triple."""
    lo, hi = min(rgb), max(rgb)

    # A middle value that is neither min nor max has no palette meaning
    if any(v != lo and v != hi for v in rgb):
        return WHITE

    if (lo, hi) == (0x00, 0x00):
        return BLACK
    if (lo, hi) == (0xFF, 0xFF):
        return WHITE

    lightness = LIGHTNESS_OF.get((lo, hi))
    hue = HUE_OF.get(tuple(v == hi for v in rgb))
    if lightness is None or hue is None:
        return WHITE

    return Color(hue, lightness)


def classify_pixel(rgb: Tuple[int, int, int]) -> RawCodel:
    """Classify a raw RGB pixel."""
    r, g, b = rgb[:3]
    return classify_quantized((quantize(r), quantize(g), quantize(b)))


def _build_lookup() -> list:
    """All 27 quantized triples, indexed by r*9 + g*3 + b level indices."""
    return [
        classify_quantized((LEVELS[r], LEVELS[g], LEVELS[b]))
        for r in range(3) for g in range(3) for b in range(3)
    ]


_LOOKUP = _build_lookup()


def classify_array(arr: np.ndarray) -> Grid:
    """
    Classify an (H, W, 3) uint8 array cell by cell.

    Args:
        arr: RGB pixel data, one pixel per codel

    Returns:
        Grid of raw codels (Color, WHITE or BLACK)
    """
    if arr.ndim != 3 or arr.shape[2] < 3:
        raise ValueError(f"Expected an (H, W, 3) array, got shape {arr.shape}")

    # Level index per channel: 0, 1 or 2
    levels = np.digitize(arr[:, :, :3], THRESHOLDS)
    codes = levels[:, :, 0] * 9 + levels[:, :, 1] * 3 + levels[:, :, 2]

    h, w = codes.shape
    return Grid.from_fn(w, h, lambda x, y: _LOOKUP[codes[y, x]])


def downsample(img: Image.Image, codel_size: int) -> np.ndarray:
    """
    Reduce an image to one pixel per codel.

    The top-left pixel of every codel_size x codel_size cell is sampled;
    partial cells at the right/bottom edge are dropped.
    """
    if codel_size < 1:
        raise ValueError(f"Codel size must be >= 1, got {codel_size}")

    arr = np.asarray(img.convert('RGB'))
    h, w = arr.shape[0] // codel_size, arr.shape[1] // codel_size
    return arr[:h * codel_size:codel_size, :w * codel_size:codel_size]


def classify_image(img: Image.Image, codel_size: int = 1) -> Grid:
    """Downsample and classify a decoded image."""
    grid = classify_array(downsample(img, codel_size))
    logger.debug("Classified %dx%d codels (codel size %d)",
                 grid.width, grid.height, codel_size)
    return grid
