from __future__ import annotations

import numpy as np
import pytest

from colorex.core_types import Result
from colorex.errors import NoMatches
from colorex.palette_data import build_palette
from colorex.rank import rank_hits, resolve_limit

PAL = build_palette(["#d50000", "#9e9d24", "#ff71d4", "#ffffff"])


def test_orders_by_count_and_computes_truncated_percent() -> None:
    counts = np.array([30, 41, 9, 20], dtype=np.int64)
    res = rank_hits(counts, PAL, total_pixels=100, limit=10)
    assert res == [
        Result("#9e9d24", 41),
        Result("#d50000", 30),
        Result("#ffffff", 20),
        Result("#ff71d4", 9),
    ]


def test_unhit_entries_are_not_returned() -> None:
    counts = np.array([0, 7, 0, 3], dtype=np.int64)
    res = rank_hits(counts, PAL, total_pixels=10, limit=10)
    assert [r.hex for r in res] == ["#9e9d24", "#ffffff"]


def test_ties_keep_palette_order() -> None:
    counts = np.array([25, 25, 25, 25], dtype=np.int64)
    res = rank_hits(counts, PAL, total_pixels=100, limit=3)
    assert [r.hex for r in res] == ["#d50000", "#9e9d24", "#ff71d4"]


def test_limit_truncates_before_zero_filter() -> None:
    counts = np.array([1, 998, 1, 0], dtype=np.int64)
    res = rank_hits(counts, PAL, total_pixels=1000, limit=2)
    # second place is 0% and is dropped; nothing backfills it
    assert res == [Result("#9e9d24", 99)]


def test_all_zero_percent_is_empty_success() -> None:
    counts = np.array([1, 999, 0, 0], dtype=np.int64)
    assert rank_hits(counts, PAL, total_pixels=100_000, limit=1) == []


def test_no_hits_raises_no_matches() -> None:
    with pytest.raises(NoMatches):
        rank_hits(np.zeros(4, dtype=np.int64), PAL, total_pixels=0, limit=5)


def test_counts_must_match_palette() -> None:
    with pytest.raises(ValueError):
        rank_hits(np.array([1, 2], dtype=np.int64), PAL, total_pixels=3, limit=5)


def test_resolve_limit() -> None:
    assert resolve_limit(0) == 5
    assert resolve_limit(None) == 5
    assert resolve_limit(3) == 3
    with pytest.raises(ValueError):
        resolve_limit(-1)


def test_default_limit_applies_in_rank() -> None:
    pal = build_palette([])
    counts = np.arange(1, 17, dtype=np.int64)
    res = rank_hits(counts, pal, total_pixels=int(counts.sum()), limit=0)
    assert len(res) == 5
    assert res[0].hex == pal.hexes[-1]
    assert all(0 < r.match <= 100 for r in res)


def test_result_to_dict() -> None:
    assert Result("#ffffff", 12).to_dict() == {"hex": "#ffffff", "match": 12}
