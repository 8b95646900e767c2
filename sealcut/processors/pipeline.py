"""
End-to-end seal processing: extract -> (upscale) -> (trace).

Each stage reads the previous stage's output. Upscaling and tracing are
optional; tracing uses the upscaled image when there is one.
"""

import logging
from dataclasses import dataclass

from PIL import Image

from sealcut.models import ProcessingSettings

from .recolor import extract_seal, seal_coverage
from .tracer import Tracer
from .upscaler import upscale
from .vectorizer import default_tracer

logger = logging.getLogger(__name__)


@dataclass
class SealResult:
    seal: Image.Image | None
    upscaled: Image.Image | None = None
    svg: str | None = None
    coverage: float = 0.0
    tracer: str | None = None

    @property
    def final_image(self) -> Image.Image | None:
        """The largest raster produced."""
        return self.upscaled if self.upscaled is not None else self.seal


def process_seal(
    image,
    settings: ProcessingSettings | None = None,
    scale: float | None = None,
    vectorize: bool = False,
    tracer: Tracer | None = None,
) -> SealResult:
    """
    Run the seal pipeline on one image.

    Args:
        image: PIL Image or numpy array
        settings: Processing settings (defaults when omitted)
        scale: Upscale factor, None or 1 to skip upscaling
        vectorize: Whether to trace the result to SVG
        tracer: Tracer to use when vectorizing

    Returns:
        SealResult; ``seal`` is None when the image could not be read
    """
    settings = settings or ProcessingSettings()

    seal = extract_seal(image, settings)
    if seal is None:
        return SealResult(seal=None)

    result = SealResult(seal=seal, coverage=seal_coverage(seal))
    logger.info(
        "Extracted %s seal from %dx%d image (%.1f%% ink)",
        settings.detection_mode.value, seal.width, seal.height, result.coverage * 100,
    )

    if scale and scale != 1:
        result.upscaled = upscale(seal, scale)

    if vectorize:
        tracer = tracer or default_tracer()
        result.svg, result.tracer = tracer.trace_with_name(result.final_image)

    return result
