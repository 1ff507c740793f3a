"""Image normalization for media resources."""

from __future__ import annotations

import io
import logging
import os
from pathlib import Path
from typing import Union

from PIL import Image

_LOGGER = logging.getLogger("ofd_graphics.images")

ImageSource = Union[Image.Image, bytes, bytearray, str, "os.PathLike[str]"]

# Fixed pixel format of every stored image; keeps per-pixel opacity.
TARGET_MODE = "RGBA"
TARGET_FORMAT = "PNG"


def load_image(source: ImageSource) -> Image.Image:
    """Return a Pillow image for *source*.

    ``bytes`` are decoded as an encoded image file, strings and path-like
    objects are opened from disk. Decoding errors surface as :class:`OSError`.
    """

    if isinstance(source, Image.Image):
        return source
    if isinstance(source, (bytes, bytearray)):
        with Image.open(io.BytesIO(bytes(source))) as img:
            img.load()
            return img.copy()
    if isinstance(source, (str, os.PathLike)):
        with Image.open(Path(source)) as img:
            img.load()
            return img.copy()
    raise TypeError(f"Unsupported image source: {type(source)!r}")


def normalize_image(source: ImageSource) -> Image.Image:
    """Convert *source* into the fixed ``RGBA`` pixel format."""

    img = load_image(source)
    if img.mode == TARGET_MODE:
        return img
    _LOGGER.debug("Converting image from mode %s to %s", img.mode, TARGET_MODE)
    return img.convert(TARGET_MODE)


def write_png(image: Image.Image, destination: Path) -> Path:
    """Encode *image* losslessly at *destination*."""

    image.save(destination, format=TARGET_FORMAT)
    return destination


__all__ = ["ImageSource", "TARGET_MODE", "TARGET_FORMAT", "load_image", "normalize_image", "write_png"]
