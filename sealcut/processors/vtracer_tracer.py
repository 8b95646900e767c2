"""
VTracer-based tracing for extracted seals.

VTracer fits splines to the outline of each region, which suits the rounded,
slightly ragged edges of stamp ink. Seals are traced in binary mode: the
image is reduced to black ink on white, traced, and the path fills are then
painted with the seal color.

Best for: Segmented seals with a transparent background and one ink color.
"""

import logging
import math
import re
from importlib.util import find_spec

import cv2
import numpy as np
from PIL import Image

from sealcut.config import TRACE_ALPHA_CUTOFF, TRACE_OPTIONS

from .colors import rgb_to_hex
from .surface import as_rgba
from .tracer import Tracer

logger = logging.getLogger(__name__)

_SVG_TAG_RE = re.compile(r"<svg\b[^>]*>")
_FILL_RE = re.compile(r'fill="#[0-9a-fA-F]{3,8}"')


def vtracer_options(options: dict = TRACE_OPTIONS) -> dict:
    """
    Map the fixed trace options onto vtracer parameters.

    - ``pathomit`` is an area in pixels; vtracer's ``filter_speckle`` is a
      side length, so the square root is used
    - ``ltres``/``qtres`` set how many decimals path coordinates keep
    - right-angle enhancement keeps 90 degree corners as corners
    - two colors means binary mode
    """
    tolerance = min(options["ltres"], options["qtres"])
    return {
        "colormode": "binary" if options["numberofcolors"] <= 2 else "color",
        "mode": "spline",
        "filter_speckle": math.ceil(math.sqrt(options["pathomit"])),
        "corner_threshold": 60 if options["rightangleenhance"] else 180,
        "length_threshold": 4.0,
        "splice_threshold": 45,
        "path_precision": max(1, math.ceil(-math.log10(tolerance))),
    }


def binarize(arr: np.ndarray) -> np.ndarray:
    """Black ink on a white background, as a 3-channel uint8 array."""
    ink = arr[:, :, 3] > TRACE_ALPHA_CUTOFF
    bw = np.where(ink, 0, 255).astype(np.uint8)
    return np.dstack([bw, bw, bw])


def ink_color(arr: np.ndarray) -> str:
    """Median color of the ink pixels, or ``currentColor`` when there are none."""
    ink = arr[:, :, 3] > TRACE_ALPHA_CUTOFF
    if not ink.any():
        return "currentColor"
    return rgb_to_hex(np.median(arr[ink][:, :3], axis=0).astype(np.uint8))


def ensure_viewbox(svg: str, width: int, height: int) -> str:
    """Add ``viewBox="0 0 W H"`` to the root element if it has none."""
    match = _SVG_TAG_RE.search(svg)
    if match is None:
        raise ValueError("Tracer output has no <svg> root element")
    tag = match.group(0)
    if "viewBox" in tag:
        return svg
    closing = "/>" if tag.endswith("/>") else ">"
    new_tag = f'{tag[:-len(closing)].rstrip()} viewBox="0 0 {width} {height}"{closing}'
    return svg[:match.start()] + new_tag + svg[match.end():]


class VTracerTracer(Tracer):
    """Primary tracer backed by the vtracer library."""

    name = "vtracer"

    def __init__(self, options: dict = TRACE_OPTIONS):
        self.options = options

    def is_available(self) -> bool:
        return find_spec("vtracer") is not None

    def trace(self, image: Image.Image) -> str:
        import vtracer

        surface = as_rgba(image)
        if surface is None:
            return ""

        arr = np.array(surface)
        ok, encoded = cv2.imencode(".png", binarize(arr))
        if not ok:
            raise RuntimeError("OpenCV could not encode the binarized seal")

        svg = vtracer.convert_raw_image_to_svg(
            encoded.tobytes(),
            img_format="png",
            **vtracer_options(self.options),
        )

        svg = _FILL_RE.sub(f'fill="{ink_color(arr)}"', svg)
        if self.options.get("viewbox"):
            svg = ensure_viewbox(svg, surface.width, surface.height)

        logger.debug("vtracer produced %d bytes of SVG", len(svg))
        return svg
