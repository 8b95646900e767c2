import base64

from PIL import Image

from .tracer import FallbackTracer, RunLengthTracer, Tracer
from .vtracer_tracer import VTracerTracer

SVG_MIME_TYPE = "image/svg+xml"


def default_tracer() -> FallbackTracer:
    """vtracer first, run-length tracing when vtracer is missing or fails."""
    return FallbackTracer(VTracerTracer(), RunLengthTracer())


def trace_to_svg(image: Image.Image, tracer: Tracer | None = None) -> str:
    """
    Convert an extracted (optionally upscaled) seal to an SVG string.

    Args:
        image: RGBA image with a transparent background
        tracer: Tracer to use (default: vtracer with run-length fallback)

    Returns:
        SVG document string; empty only when the image could not be read
    """
    tracer = tracer or default_tracer()
    return tracer.trace(image)


def trace_file(input_path: str, output_path: str, tracer: Tracer | None = None) -> str:
    """
    Trace a PNG on disk and write the SVG.

    Returns:
        Path to the output SVG file
    """
    with Image.open(input_path) as img:
        svg = trace_to_svg(img, tracer)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(svg)
    return output_path


def svg_to_data_uri(svg: str) -> str:
    return f"data:{SVG_MIME_TYPE};base64," + base64.b64encode(svg.encode("utf-8")).decode("ascii")
