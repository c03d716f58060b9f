# colorex/core_types.py
from __future__ import annotations

"""
Core type aliases, small value objects, and lightweight helpers.
"""

from dataclasses import dataclass
from typing import Dict, Mapping, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from .errors import InvalidPalette

# Basic aliases

RGBTuple = Tuple[int, int, int]
HexStr = str

U8Image = NDArray[np.uint8]  # (H, W, 3)
I64Array = NDArray[np.int64]  # palette rows (P, 3) or hit counts (P,)

NameOf = Mapping[HexStr, str]  # "#rrggbb" -> human-readable name
HitCounts = Dict[HexStr, int]  # hex -> pixels matched

_HEX_DIGITS = frozenset("0123456789abcdef")

# Value objects


@dataclass(frozen=True)
class PaletteEntry:
    """Reference colour keyed by the hex string it was supplied as."""

    hex: HexStr
    rgb: RGBTuple


@dataclass(frozen=True)
class Palette:
    """Ordered palette entries plus an int64 [P,3] view for distance maths."""

    entries: Tuple[PaletteEntry, ...]
    rgb: I64Array  # shape (P, 3)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def hexes(self) -> Tuple[HexStr, ...]:
        return tuple(e.hex for e in self.entries)


@dataclass(frozen=True)
class Result:
    """One ranked colour: palette hex and integer share of scanned pixels."""

    hex: HexStr
    match: int

    def to_dict(self) -> Dict[str, Union[str, int]]:
        return {"hex": self.hex, "match": self.match}


# Small helpers


def hex_to_rgb(hex_str: str) -> RGBTuple:
    """Parse '#rgb' or '#rrggbb' (case-insensitive) into an RGB tuple."""
    if not isinstance(hex_str, str):
        raise InvalidPalette(f"hex colour must be a string, got {hex_str!r}")
    s = hex_str.strip().lower()
    if not s.startswith("#"):
        raise InvalidPalette(f"hex must start with '#': {hex_str!r}")
    if len(s) == 4:
        r, g, b = s[1], s[2], s[3]
        s = f"#{r}{r}{g}{g}{b}{b}"
    if len(s) != 7 or any(ch not in _HEX_DIGITS for ch in s[1:]):
        raise InvalidPalette(f"hex must be '#rrggbb' or '#rgb': {hex_str!r}")
    return (int(s[1:3], 16), int(s[3:5], 16), int(s[5:7], 16))


def assert_u8_image_rgb(image: np.ndarray) -> U8Image:
    """Validate a uint8 (H,W,3) image and return it typed as U8Image."""
    if image.dtype != np.uint8 or image.ndim != 3 or image.shape[-1] != 3:
        raise TypeError("expected uint8 (H,W,3) image")
    return image  # type: ignore[return-value]


__all__ = [
    # aliases / types
    "RGBTuple",
    "HexStr",
    "U8Image",
    "I64Array",
    "NameOf",
    "HitCounts",
    # value objects
    "PaletteEntry",
    "Palette",
    "Result",
    # helpers
    "hex_to_rgb",
    "assert_u8_image_rgb",
]
