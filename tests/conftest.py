"""Shared fixtures: synthetic images encoded in memory with Pillow."""

from __future__ import annotations

import io
from typing import List, Sequence, Tuple

import pytest
from PIL import Image

RGB = Tuple[int, int, int]


def encode(im: Image.Image, fmt: str = "PNG") -> bytes:
    buf = io.BytesIO()
    im.save(buf, format=fmt)
    return buf.getvalue()


def solid_image(rgb: RGB, size: Tuple[int, int] = (100, 100)) -> Image.Image:
    return Image.new("RGB", size, rgb)


def banded_image(bands: Sequence[Tuple[RGB, int]], width: int = 100) -> Image.Image:
    """Horizontal bands, top to bottom: [(rgb, rows), ...]."""
    height = sum(rows for _rgb, rows in bands)
    im = Image.new("RGB", (width, height))
    y = 0
    for rgb, rows in bands:
        im.paste(rgb, (0, y, width, y + rows))
        y += rows
    return im


FOUR_COLOUR_PALETTE: List[str] = ["#d50000", "#9e9d24", "#ff71d4", "#ffffff"]

# 40% olive, 30% red, 20% white, 10% pink; pixels are close to, not equal to, the palette.
FOUR_COLOUR_BANDS: List[Tuple[RGB, int]] = [
    ((160, 155, 40), 40),
    ((210, 5, 3), 30),
    ((250, 250, 250), 20),
    ((250, 115, 210), 10),
]


@pytest.fixture
def four_colour_png() -> bytes:
    return encode(banded_image(FOUR_COLOUR_BANDS), "PNG")
