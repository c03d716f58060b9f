"""
Tunables used across the project.

- Downscale geometry (DOWNSCALE_WIDTH, HEIGHT_ROUNDING)
- Pixel channel scaling (CHANNEL_WIDEN, CHANNEL_DIVISOR)
- Ranking defaults (DEFAULT_LIMIT)
- Scan chunking (SCAN_CHUNK_ROWS)
"""
from __future__ import annotations

# =========================
# Downscale
# =========================
DOWNSCALE_WIDTH = 100
# Proportional height is int(HEIGHT_ROUNDING + h * width / w).
HEIGHT_ROUNDING = 0.7

# =========================
# Pixel channels
# =========================
# 8-bit -> 16-bit widening (0xff -> 0xffff), then back down by CHANNEL_DIVISOR.
CHANNEL_WIDEN = 257
CHANNEL_DIVISOR = 255

# =========================
# Ranking
# =========================
DEFAULT_LIMIT = 5

# =========================
# Scan
# =========================
# Rows per bincount span; bounds the (N, P) distance matrix.
SCAN_CHUNK_ROWS = 64

IMAGE_EXTS = {".png", ".jpg", ".jpeg", ".gif", ".webp", ".bmp"}

__all__ = [
    "DOWNSCALE_WIDTH",
    "HEIGHT_ROUNDING",
    "CHANNEL_WIDEN",
    "CHANNEL_DIVISOR",
    "DEFAULT_LIMIT",
    "SCAN_CHUNK_ROWS",
    "IMAGE_EXTS",
]
