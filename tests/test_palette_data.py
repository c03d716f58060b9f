from __future__ import annotations

import numpy as np
import pytest

from colorex.core_types import hex_to_rgb
from colorex.errors import InvalidPalette
from colorex.palette_data import HTML4_PALETTE, NAME_OF, build_palette


def test_empty_palette_falls_back_to_html4() -> None:
    for empty in (None, [], ()):
        pal = build_palette(empty)
        assert pal.hexes == tuple(hx for hx, _ in HTML4_PALETTE)
        assert pal.rgb.shape == (16, 3)
    assert NAME_OF["#800000"] == "maroon"


def test_palette_keeps_input_order_and_rgb() -> None:
    pal = build_palette(["#d50000", "#9e9d24", "#ff71d4", "#ffffff"])
    assert pal.hexes == ("#d50000", "#9e9d24", "#ff71d4", "#ffffff")
    assert pal.entries[0].rgb == (213, 0, 0)
    assert pal.rgb.dtype == np.int64
    assert pal.rgb.tolist()[1] == [158, 157, 36]


def test_palette_is_read_only() -> None:
    pal = build_palette(["#000000"])
    with pytest.raises(ValueError):
        pal.rgb[0, 0] = 1


def test_duplicates_collapse_onto_first_position() -> None:
    pal = build_palette(["#ffffff", "#000000", "#ffffff", " #000000 "])
    assert pal.hexes == ("#ffffff", "#000000")
    assert len(pal) == 2


def test_short_hex_and_case() -> None:
    assert hex_to_rgb("#F0a") == (255, 0, 170)
    assert hex_to_rgb("#D50000") == (213, 0, 0)
    # Keyed by the supplied string, not the normalised one.
    assert build_palette(["#FFF"]).hexes == ("#FFF",)


@pytest.mark.parametrize("bad", ["d50000", "#d5000", "#zzzzzz", "#", "", "#1234567", None, 0xFFFFFF])
def test_malformed_hex_raises_invalid_palette(bad) -> None:
    with pytest.raises(InvalidPalette):
        build_palette(["#ffffff", bad])


def test_invalid_palette_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        build_palette(["nope"])


def test_bare_string_palette_rejected() -> None:
    with pytest.raises(InvalidPalette):
        build_palette("#ffffff")


def test_palette_array_rows_follow_entries() -> None:
    pal = build_palette(["#FFF", "#0a0", "#d50000"])
    assert pal.rgb.tolist() == [list(e.rgb) for e in pal.entries]
    assert pal.rgb.tolist() == [[255, 255, 255], [0, 170, 0], [213, 0, 0]]
