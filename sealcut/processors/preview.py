import numpy as np
from PIL import Image

from sealcut.config import CHECKERBOARD_COLORS, CHECKERBOARD_TILE, PREVIEW_BACKGROUNDS

PREVIEW_CHOICES = ("checkerboard", *PREVIEW_BACKGROUNDS)


def checkerboard(width: int, height: int, tile: int = CHECKERBOARD_TILE) -> np.ndarray:
    """RGB checkerboard used to show transparency."""
    ys, xs = np.indices((height, width))
    odd = ((ys // tile + xs // tile) % 2).astype(bool)
    light, dark = (np.array(c, dtype=np.float32) for c in CHECKERBOARD_COLORS)
    return np.where(odd[:, :, None], dark, light)


def render_preview(image: Image.Image, background: str = "checkerboard") -> Image.Image:
    """
    Composite an RGBA seal onto a preview background.

    Args:
        image: RGBA image (e.g. the output of ``extract_seal``)
        background: "checkerboard", "white", "black", "blue" or "green"

    Returns:
        Opaque RGB image
    """
    if background not in PREVIEW_CHOICES:
        raise ValueError(f"background must be one of {list(PREVIEW_CHOICES)}")

    arr = np.array(image.convert("RGBA"))
    h, w = arr.shape[:2]
    rgb = arr[:, :, :3].astype(np.float32)
    alpha = (arr[:, :, 3].astype(np.float32) / 255.0)[:, :, np.newaxis]

    if background == "checkerboard":
        bg = checkerboard(w, h)
    else:
        bg = np.ones_like(rgb) * np.array(PREVIEW_BACKGROUNDS[background], dtype=np.float32)

    # Alpha compositing: result = foreground * alpha + background * (1 - alpha)
    composited = rgb * alpha + bg * (1 - alpha)
    return Image.fromarray(np.clip(np.rint(composited), 0, 255).astype(np.uint8))
