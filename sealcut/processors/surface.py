"""
Image surface helpers.

Every stage works on Pillow ``RGBA`` images. These helpers turn whatever the
caller hands in (a Pillow image, a numpy array, raw file bytes) into a fresh
RGBA surface, and serialise results back to PNG.
"""

import base64
import io
import logging

import numpy as np
from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)


def as_rgba(image) -> Image.Image | None:
    """
    Acquire an RGBA copy of ``image``.

    Returns None (after logging) when there is nothing usable to draw on:
    a missing image, a zero-sized one, or data Pillow cannot convert.
    """
    if image is None:
        logger.warning("No image surface supplied")
        return None

    try:
        if isinstance(image, np.ndarray):
            image = _from_array(image)
        rgba = image.convert("RGBA")
    except (AttributeError, ValueError, TypeError, OSError) as exc:
        logger.warning("Could not acquire an RGBA surface: %s", exc)
        return None

    if rgba.width == 0 or rgba.height == 0:
        logger.warning("Image surface is empty (%dx%d)", rgba.width, rgba.height)
        return None

    return rgba


def _from_array(arr: np.ndarray) -> Image.Image:
    if arr.dtype != np.uint8:
        raise ValueError(f"Unsupported array dtype {arr.dtype}, expected uint8")
    arr = np.ascontiguousarray(arr)
    if arr.ndim == 2 or (arr.ndim == 3 and arr.shape[2] in (3, 4)):
        return Image.fromarray(arr)
    raise ValueError(f"Unsupported array shape {arr.shape}")


def from_bytes(data: bytes) -> Image.Image | None:
    """Decode an encoded image (PNG, JPEG, ...) into an RGBA surface."""
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            return as_rgba(img)
    except (UnidentifiedImageError, OSError) as exc:
        logger.warning("Could not decode image bytes: %s", exc)
        return None


def to_png_bytes(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    image.save(buf, "PNG")
    return buf.getvalue()


def to_data_uri(image: Image.Image) -> str:
    """Encode as a ``data:image/png;base64,...`` URI."""
    return "data:image/png;base64," + base64.b64encode(to_png_bytes(image)).decode("ascii")
