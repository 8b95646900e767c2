"""
Bitmap-to-SVG tracers.

``Tracer`` is the common interface. Two implementations ship with sealcut:

- ``VTracerTracer`` (in ``vtracer_tracer``): smooth, curve-fitted outlines
  from the vtracer library
- ``RunLengthTracer``: one rectangle per horizontal run of ink pixels. Blocky
  but dependency-free and always succeeds on a readable surface

``FallbackTracer`` chains a primary tracer to a fallback one.
"""

import logging
from abc import ABC, abstractmethod

import numpy as np
from PIL import Image

from sealcut.config import TRACE_ALPHA_CUTOFF

from .surface import as_rgba

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"


class Tracer(ABC):
    """Abstract base class for tracers."""

    name = "tracer"

    def is_available(self) -> bool:
        return True

    @abstractmethod
    def trace(self, image: Image.Image) -> str:
        """
        Trace the opaque region of an image.

        Args:
            image: RGBA image, normally the output of ``extract_seal``

        Returns:
            SVG document string, empty when the surface could not be read
        """
        pass

    def trace_with_name(self, image: Image.Image) -> tuple[str, str]:
        """Trace ``image`` and report the name of the tracer that produced the SVG."""
        return self.trace(image), self.name


def ink_mask(image) -> np.ndarray | None:
    """Boolean (H, W) array of pixels with alpha above the trace cutoff."""
    surface = as_rgba(image)
    if surface is None:
        return None
    return np.array(surface)[:, :, 3] > TRACE_ALPHA_CUTOFF


def row_runs(row: np.ndarray) -> list[tuple[int, int]]:
    """(start, length) of each run of True values in a 1-D boolean array."""
    padded = np.concatenate(([False], row, [False])).astype(np.int8)
    edges = np.flatnonzero(np.diff(padded))
    starts, ends = edges[::2], edges[1::2]
    return [(int(s), int(e - s)) for s, e in zip(starts, ends)]


class RunLengthTracer(Tracer):
    """
    Deterministic run-length tracer.

    Scans rows top to bottom and columns left to right; each run of ink
    pixels becomes ``M{x},{y}h{n}v1h-{n}z``. All runs share a single
    ``<path>`` filled with ``currentColor`` so the SVG takes the color of
    whatever embeds it.
    """

    name = "run-length"

    def trace(self, image: Image.Image) -> str:
        mask = ink_mask(image)
        if mask is None:
            return ""

        h, w = mask.shape
        commands = []
        for y in range(h):
            for x, n in row_runs(mask[y]):
                commands.append(f"M{x},{y}h{n}v1h-{n}z")

        return (
            f'<svg xmlns="{SVG_NS}" viewBox="0 0 {w} {h}" width="{w}" height="{h}">'
            f'<path d="{" ".join(commands)}" fill="currentColor"/>'
            "</svg>"
        )


class FallbackTracer(Tracer):
    """Use ``primary`` when it is available and succeeds, else ``fallback``."""

    def __init__(self, primary: Tracer, fallback: Tracer | None = None):
        self.primary = primary
        self.fallback = fallback or RunLengthTracer()

    @property
    def name(self) -> str:
        return f"{self.primary.name}+{self.fallback.name}"

    def trace(self, image: Image.Image) -> str:
        return self.trace_with_name(image)[0]

    def trace_with_name(self, image: Image.Image) -> tuple[str, str]:
        if self.primary.is_available():
            try:
                svg, used = self.primary.trace_with_name(image)
            except Exception:
                logger.exception("Tracing with %s failed, using %s", self.primary.name, self.fallback.name)
            else:
                if svg:
                    return svg, used
                logger.warning("%s returned no SVG, using %s", self.primary.name, self.fallback.name)
        else:
            logger.warning("%s is not available, using %s", self.primary.name, self.fallback.name)

        return self.fallback.trace_with_name(image)
