"""
Smooth upscaling of extracted seals.

This is a plain high-quality resize (Lanczos). Nothing is sharpened; an
unsharp mask or a super-resolution model would be a separate feature.
"""

import logging
import math

from PIL import Image

from sealcut.config import DEFAULT_UPSCALE_FACTOR

from .surface import as_rgba

logger = logging.getLogger(__name__)


def valid_scale(scale) -> bool:
    """True for a positive, finite upscale factor."""
    return scale is not None and math.isfinite(scale) and scale > 0


def scaled_size(width: int, height: int, scale: float) -> tuple[int, int]:
    """Both sides scaled by the same factor, rounded, at least 1px."""
    return max(1, round(width * scale)), max(1, round(height * scale))


def upscale(image, scale: float = DEFAULT_UPSCALE_FACTOR) -> Image.Image | None:
    """
    Resize an image by ``scale`` using Lanczos resampling.

    Args:
        image: PIL Image or numpy array
        scale: Positive scale factor (default 2x)

    Returns:
        New RGBA image of size ``(round(w * scale), round(h * scale))``, or
        None when the scale is not a positive finite number or no surface
        could be acquired
    """
    if not valid_scale(scale):
        logger.warning("Ignoring upscale with invalid factor %r", scale)
        return None

    surface = as_rgba(image)
    if surface is None:
        return None

    size = scaled_size(surface.width, surface.height, scale)
    # Pillow resizes RGBA in premultiplied form, so transparent RGB does not bleed
    upscaled = surface.resize(size, Image.Resampling.LANCZOS)
    logger.debug("Upscaled %dx%d -> %dx%d", surface.width, surface.height, *size)
    return upscaled


def upscale_file(input_path: str, output_path: str, scale: float = DEFAULT_UPSCALE_FACTOR) -> Image.Image | None:
    """Convenience function: upscale ``input_path`` and save it as PNG."""
    with Image.open(input_path) as img:
        upscaled = upscale(img, scale)
    if upscaled is not None:
        upscaled.save(output_path, "PNG")
    return upscaled
