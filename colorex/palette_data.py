# colorex/palette_data.py
from __future__ import annotations

"""
Palette definitions and builders.

Exports:
  HTML4_PALETTE: tuple[tuple[str, str], ...]  # ((hex, name), ...)
  NAME_OF: dict "#rrggbb" -> name for the default palette
  build_palette(hex_list=None) -> Palette
"""

from typing import Dict, List, Optional, Sequence, Set, Tuple

import numpy as np

from .core_types import HexStr, Palette, PaletteEntry, hex_to_rgb
from .errors import InvalidPalette


# The 16 HTML 4.01 colour keywords.
HTML4_PALETTE: Tuple[Tuple[str, str], ...] = (
    ("#00ffff", "aqua"),
    ("#000000", "black"),
    ("#0000ff", "blue"),
    ("#ff00ff", "fuchsia"),
    ("#008000", "green"),
    ("#808080", "gray"),
    ("#00ff00", "lime"),
    ("#800000", "maroon"),
    ("#000080", "navy"),
    ("#808000", "olive"),
    ("#800080", "purple"),
    ("#ff0000", "red"),
    ("#c0c0c0", "silver"),
    ("#008080", "teal"),
    ("#ffffff", "white"),
    ("#ffff00", "yellow"),
)

NAME_OF: Dict[HexStr, str] = {hx: name for hx, name in HTML4_PALETTE}


def default_hex_list() -> List[HexStr]:
    return [hx for hx, _name in HTML4_PALETTE]


def build_palette(hex_list: Optional[Sequence[str]] = None) -> Palette:
    """
    Convert a list of hex strings into a Palette.

    Empty or None falls back to HTML4_PALETTE. Entries are keyed by the
    stripped string as supplied; repeats collapse onto the first position.
    Raises InvalidPalette naming the first malformed entry.
    """
    if hex_list is None or len(hex_list) == 0:
        hex_list = default_hex_list()
    if isinstance(hex_list, str):
        raise InvalidPalette("palette must be a sequence of hex strings, not a str")

    entries: List[PaletteEntry] = []
    seen: Set[str] = set()
    for hx in hex_list:
        rgb = hex_to_rgb(hx)
        key = hx.strip()
        if key in seen:
            continue
        seen.add(key)
        entries.append(PaletteEntry(hex=key, rgb=rgb))

    pal_rgb = np.array([e.rgb for e in entries], dtype=np.int64).reshape(-1, 3)
    pal_rgb.setflags(write=False)
    return Palette(entries=tuple(entries), rgb=pal_rgb)


__all__ = ["HTML4_PALETTE", "NAME_OF", "default_hex_list", "build_palette"]
