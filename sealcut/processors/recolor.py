"""
Seal segmentation and recoloring.

Runs the ink classifier over every pixel of a photographed document, makes
background pixels fully transparent and paints the kept pixels one uniform
target color. The result has hard binary alpha: there is no feathering, and
``edge_softness`` is currently ignored.
"""

import logging

import numpy as np
from PIL import Image

from sealcut.models import ProcessingSettings, get_classifier

from .colors import hex_to_rgb
from .surface import as_rgba

logger = logging.getLogger(__name__)


def extract_seal(image, settings: ProcessingSettings | None = None) -> Image.Image | None:
    """
    Segment the seal from ``image`` and recolor it.

    Args:
        image: PIL Image or numpy array (RGB/RGBA). Source alpha is ignored.
        settings: Processing settings (defaults when omitted)

    Returns:
        New RGBA image of the same size where every pixel is either fully
        transparent or opaque ``settings.target_color``, or None when no
        surface could be acquired
    """
    settings = settings or ProcessingSettings()
    surface = as_rgba(image)
    if surface is None:
        return None

    arr = np.array(surface)
    keep = get_classifier(settings).mask(arr[:, :, :3])

    arr[:, :, 3] = np.where(keep, 255, 0).astype(np.uint8)
    arr[keep, :3] = hex_to_rgb(settings.target_color)

    logger.debug(
        "Segmented %dx%d image in %s mode, kept %d pixels",
        surface.width, surface.height, settings.detection_mode.value, int(keep.sum()),
    )
    return Image.fromarray(arr)


def seal_coverage(image: Image.Image) -> float:
    """Fraction of pixels that are opaque ink."""
    alpha = np.array(image.convert("RGBA"))[:, :, 3]
    if alpha.size == 0:
        return 0.0
    return float((alpha > 0).mean())


def extract_seal_file(
    input_path: str,
    output_path: str,
    settings: ProcessingSettings | None = None,
) -> Image.Image | None:
    """Convenience function: read ``input_path`` and write the extracted seal as PNG."""
    with Image.open(input_path) as img:
        result = extract_seal(img, settings)
    if result is not None:
        result.save(output_path, "PNG")
    return result
