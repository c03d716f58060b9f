# colorex/extract.py
from __future__ import annotations

"""
Dominant-colour extraction entry point.

  extract_colors(source, limit=0, palette=None, *, width=100, workers=1,
                 inclusive_edges=False, debug=False) -> list[Result]

Pipeline: palette -> decode -> downscale -> count hits -> rank.
The palette is validated first so InvalidPalette surfaces before any decoding
or scanning. Every failure propagates; nothing is turned into an empty result.
"""

import time
from typing import List, Optional, Sequence

from .constants import DOWNSCALE_WIDTH
from .core_types import Result
from .image_io import ImageSource, decode_image, downscale_nearest
from .palette_data import build_palette
from .quantize import count_hits, hits_by_hex
from .rank import rank_hits, resolve_limit
from .utils import debug_log, format_seconds_compact, key_value_pairs_to_string


def extract_colors(
    source: ImageSource,
    limit: Optional[int] = 0,
    palette: Optional[Sequence[str]] = None,
    *,
    width: int = DOWNSCALE_WIDTH,
    workers: int = 1,
    inclusive_edges: bool = False,
    debug: bool = False,
) -> List[Result]:
    """
    Return the most frequent palette matches of an encoded image.

    Args:
      source          : binary stream, raw bytes, or path of a JPEG/PNG/GIF/... image
      limit           : max results; 0 or None means 5
      palette         : hex strings ('#rrggbb' or '#rgb'); empty or None means HTML4
      width           : downscale width, height follows the aspect ratio
      workers         : threads for the per-pixel scan (result is identical)
      inclusive_edges : also scan one clamped row/column past the bounds
      debug           : print stage sizes and timings

    Raises:
      InvalidPalette, DecodeFailure, NoMatches, ValueError (negative limit)
    """
    t_start = time.perf_counter()
    k = resolve_limit(limit)
    pal = build_palette(palette)

    im = decode_image(source)
    width0, height0 = im.size
    t_decoded = time.perf_counter()

    raster = downscale_nearest(im, width)
    height, width_eff = raster.shape[0], raster.shape[1]
    total_pixels = height * width_eff
    t_resized = time.perf_counter()

    if debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Loaded", f"{width0}x{height0}"),
                    ("Resized", f"{width_eff}x{height}"),
                    ("Palette", len(pal)),
                    ("Limit", k),
                    ("Workers", workers),
                    ("Inclusive edges", inclusive_edges),
                ]
            )
        )

    counts = count_hits(
        raster, pal, workers=workers, inclusive_edges=inclusive_edges
    )
    t_counted = time.perf_counter()

    if debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Scanned", int(counts.sum())),
                    ("Total pixels", total_pixels),
                    ("Colours hit", int((counts > 0).sum())),
                ]
            )
        )
        debug_log("Hits  " + key_value_pairs_to_string(hits_by_hex(counts, pal).items()))

    results = rank_hits(counts, pal, total_pixels, k)

    if debug:
        t_end = time.perf_counter()
        debug_log(
            f"decode={format_seconds_compact(t_decoded - t_start)}  "
            f"resize={format_seconds_compact(t_resized - t_decoded)}  "
            f"scan={format_seconds_compact(t_counted - t_resized)}  "
            f"rank={format_seconds_compact(t_end - t_counted)}"
        )
    return results


__all__ = ["extract_colors"]
