# colorex/rank.py
from __future__ import annotations

from typing import List, Optional

import numpy as np

from .constants import DEFAULT_LIMIT
from .core_types import I64Array, Palette, Result
from .errors import NoMatches


def resolve_limit(limit: Optional[int]) -> int:
    """0 or None means DEFAULT_LIMIT; negatives are rejected."""
    if limit is None or int(limit) == 0:
        return DEFAULT_LIMIT
    if int(limit) < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    return int(limit)


def rank_hits(
    counts: I64Array,
    palette: Palette,
    total_pixels: int,
    limit: Optional[int] = DEFAULT_LIMIT,
) -> List[Result]:
    """
    Turn palette-indexed hit counts into ranked (hex, match%) results.

    Order is count descending; equal counts keep palette order (stable sort).
    Percentages are count*100 // total_pixels and entries at 0% are dropped,
    so an empty list is a valid outcome. Raises NoMatches when no slot was hit.
    """
    counts = np.asarray(counts, dtype=np.int64)
    if counts.shape != (len(palette),):
        raise ValueError(
            f"counts shape {counts.shape} does not match palette size {len(palette)}"
        )
    k = resolve_limit(limit)

    hit_idx = np.flatnonzero(counts > 0)
    if hit_idx.size == 0:
        raise NoMatches("no pixels matched any palette colour")
    if total_pixels <= 0:
        raise ValueError(f"total_pixels must be positive, got {total_pixels}")

    order = hit_idx[np.argsort(-counts[hit_idx], kind="stable")]

    results: List[Result] = []
    for i in order[:k].tolist():
        match = int(counts[i]) * 100 // int(total_pixels)
        if match > 0:
            results.append(Result(hex=palette.entries[i].hex, match=match))
    return results


__all__ = ["resolve_limit", "rank_hits"]
