# colorex/quantize.py
from __future__ import annotations

"""
Nearest-palette assignment and hit counting.

Exports:
  scale_channels(rgb_u8) -> int64 array (same shape)
  squared_distances(pixels, pal_rgb) -> int64 [N,P]
  nearest_palette_indices(pixels, pal_rgb) -> int64 [N]
  pad_edges(raster) -> raster with the last row and column repeated once
  count_hits(raster, palette, *, workers=1, chunk_rows=SCAN_CHUNK_ROWS, inclusive_edges=False) -> int64 [P]
  hits_by_hex(counts, palette) -> {hex: count} for non-zero slots

Notes:
  - Distances are plain squared Euclidean in RGB.
  - Ties go to the lowest palette index (np.argmin returns the first minimum),
    so palette input order is the tie-break everywhere.
  - Row spans are counted independently and summed, which makes the result
    identical for any worker count.
"""

import math
from concurrent.futures import ThreadPoolExecutor
from typing import Tuple

import numpy as np

from .constants import CHANNEL_DIVISOR, CHANNEL_WIDEN, SCAN_CHUNK_ROWS
from .core_types import HitCounts, I64Array, Palette, U8Image, assert_u8_image_rgb
from .errors import InvalidPalette
from .utils import split_rows_into_parts


def scale_channels(rgb_u8: np.ndarray) -> I64Array:
    """
    Widen 8-bit channels to 16-bit (v * 257) and divide by 255.

    This is the 16-bit -> 8-bit-equivalent step of the scan; it is
    not the identity (128..254 land one higher, 255 lands on 257).
    """
    wide = rgb_u8.astype(np.int64) * CHANNEL_WIDEN
    return wide // CHANNEL_DIVISOR


def squared_distances(pixels: I64Array, pal_rgb: I64Array) -> I64Array:
    """(dr)^2 + (dg)^2 + (db)^2 for every pixel row against every palette row."""
    diff = pal_rgb[None, :, :] - pixels[:, None, :]
    return np.sum(diff * diff, axis=2)


def nearest_palette_indices(pixels: I64Array, pal_rgb: I64Array) -> I64Array:
    """For each pixel row pick the nearest palette row; first minimum wins."""
    if pixels.shape[0] == 0:
        return np.zeros((0,), dtype=np.int64)
    return np.argmin(squared_distances(pixels, pal_rgb), axis=1).astype(np.int64)


def pad_edges(raster: U8Image) -> U8Image:
    """Repeat the last row and last column once (clamped out-of-range reads)."""
    if raster.shape[0] == 0 or raster.shape[1] == 0:
        return raster
    return np.pad(raster, ((0, 1), (0, 1), (0, 0)), mode="edge")


def _count_span(raster: U8Image, pal_rgb: I64Array, span: Tuple[int, int]) -> I64Array:
    start, end = span
    rows = raster[start:end].reshape(-1, 3)
    idx = nearest_palette_indices(scale_channels(rows), pal_rgb)
    return np.bincount(idx, minlength=pal_rgb.shape[0]).astype(np.int64, copy=False)


def count_hits(
    raster: U8Image,
    palette: Palette,
    *,
    workers: int = 1,
    chunk_rows: int = SCAN_CHUNK_ROWS,
    inclusive_edges: bool = False,
) -> I64Array:
    """
    Tally nearest-palette matches for every pixel of a uint8 [H,W,3] raster.

    Returns an int64 array of length P indexed by palette position. Its sum is
    H*W, or (H+1)*(W+1) with inclusive_edges=True.
    """
    raster = assert_u8_image_rgb(raster)
    if len(palette) == 0:
        raise InvalidPalette("palette is empty")

    if inclusive_edges:
        raster = pad_edges(raster)

    counts: I64Array = np.zeros((len(palette),), dtype=np.int64)
    height, width = raster.shape[0], raster.shape[1]
    if height == 0 or width == 0:
        return counts

    parts = math.ceil(height / max(1, int(chunk_rows)))
    spans = split_rows_into_parts(height, parts)

    if workers <= 1 or len(spans) == 1:
        for span in spans:
            counts += _count_span(raster, palette.rgb, span)
        return counts

    with ThreadPoolExecutor(max_workers=workers) as ex:
        for part in ex.map(lambda s: _count_span(raster, palette.rgb, s), spans):
            counts += part
    return counts


def hits_by_hex(counts: I64Array, palette: Palette) -> HitCounts:
    """Hit counter as a {hex: count} mapping, palette order, zero slots omitted."""
    return {
        entry.hex: int(n)
        for entry, n in zip(palette.entries, counts.tolist())
        if n > 0
    }


__all__ = [
    "scale_channels",
    "squared_distances",
    "nearest_palette_indices",
    "pad_edges",
    "count_hits",
    "hits_by_hex",
]
