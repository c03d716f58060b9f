# colorex/image_io.py
from __future__ import annotations

import io
from pathlib import Path
from typing import BinaryIO, Union

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from .constants import DOWNSCALE_WIDTH, HEIGHT_ROUNDING
from .core_types import U8Image
from .errors import DecodeFailure

"""
Image decoding (any Pillow-readable format) and nearest-neighbour downscale.
"""

ImageSource = Union[BinaryIO, bytes, bytearray, memoryview, str, Path]


def _narrow_wide_grey(im: Image.Image) -> Image.Image:
    """
    16-bit grey ("I;16*" or "I") -> 8-bit "L" by dropping the low byte.

    Pillow's own convert() clips these samples at 255 instead of scaling.
    """
    if im.mode != "I" and not im.mode.startswith("I;16"):
        return im
    wide = np.asarray(im, dtype=np.int64) >> 8
    return Image.fromarray(np.clip(wide, 0, 255).astype(np.uint8))


def decode_image(source: ImageSource) -> Image.Image:
    """
    Decode an encoded image into an RGBA Pillow image.

    Accepts a readable binary stream, raw bytes, or a filesystem path.
    EXIF orientation is applied and 16-bit greyscale is narrowed to 8 bits.
    Missing files raise FileNotFoundError as-is; anything Pillow cannot
    identify or load raises DecodeFailure.
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        source = io.BytesIO(bytes(source))
    try:
        with Image.open(source) as im0:
            im0.load()
            im = ImageOps.exif_transpose(im0)
            return _narrow_wide_grey(im).convert("RGBA")
    except FileNotFoundError:
        raise
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise DecodeFailure(f"cannot decode image: {e}") from e


def proportional_height(src_w: int, src_h: int, dst_w: int) -> int:
    """Height that keeps the aspect ratio at dst_w, rounded with a +0.7 bias."""
    if src_w <= 0 or src_h <= 0:
        return 0
    return int(HEIGHT_ROUNDING + src_h * (dst_w / float(src_w)))


def downscale_nearest(im: Image.Image, width: int = DOWNSCALE_WIDTH) -> U8Image:
    """
    Resize to a fixed width (proportional height) with nearest-neighbour sampling.

    Returns uint8 [H,W,3]; alpha is dropped. A height that rounds to zero gives
    an empty (0, width, 3) raster rather than a Pillow error.
    """
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    w0, h0 = im.size
    dst_h = proportional_height(w0, h0, width)
    if dst_h <= 0:
        return np.zeros((0, width, 3), dtype=np.uint8)

    small = im.resize((width, dst_h), resample=Image.Resampling.NEAREST)
    arr = np.array(small.convert("RGBA"), dtype=np.uint8)
    return np.ascontiguousarray(arr[..., :3])


__all__ = [
    "ImageSource",
    "decode_image",
    "proportional_height",
    "downscale_nearest",
]
