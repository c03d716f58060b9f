# colorex/errors.py
"""
Error kinds surfaced by extract_colors.

  DecodeFailure  : input is not a decodable image (wraps the Pillow error).
  InvalidPalette : a palette entry is not a valid hex colour.
  NoMatches      : the scan produced no countable pixels.
"""

from __future__ import annotations


class ColorexError(Exception):
    """Base class for all colorex errors."""


class DecodeFailure(ColorexError):
    pass


class InvalidPalette(ColorexError, ValueError):
    pass


class NoMatches(ColorexError):
    pass


__all__ = ["ColorexError", "DecodeFailure", "InvalidPalette", "NoMatches"]
