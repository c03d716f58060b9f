# colorex/__init__.py
"""
colorex package.

Purpose:
  Extract the dominant colours of an image by matching every pixel of a
  downscaled copy to its nearest reference palette colour. See cli.py for CLI.

Public API:
  extract_colors : image (stream, bytes or path) -> ranked list[Result].
  Result         : (hex, match) with match an integer percentage.
  build_palette  : hex list -> Palette (empty => HTML4_PALETTE).
  HTML4_PALETTE  : default (hex, name) pairs.
  errors         : ColorexError, DecodeFailure, InvalidPalette, NoMatches.

Quick start:
  from colorex import extract_colors
  with open("photo.jpg", "rb") as fh:
      for r in extract_colors(fh, 10, ["#d50000", "#9e9d24", "#ff71d4", "#ffffff"]):
          print(r.hex, r.match)
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import constants
from . import core_types
from . import palette_data
from . import quantize
from . import rank
from . import utils

from .core_types import Palette, PaletteEntry, Result  # noqa: E402,F401
from .errors import (  # noqa: E402,F401
    ColorexError,
    DecodeFailure,
    InvalidPalette,
    NoMatches,
)
from .extract import extract_colors  # noqa: E402,F401
from .palette_data import HTML4_PALETTE, build_palette  # noqa: E402,F401

__all__ = [
    "__version__",
    "constants",
    "core_types",
    "palette_data",
    "quantize",
    "rank",
    "utils",
    "Palette",
    "PaletteEntry",
    "Result",
    "ColorexError",
    "DecodeFailure",
    "InvalidPalette",
    "NoMatches",
    "extract_colors",
    "HTML4_PALETTE",
    "build_palette",
]
