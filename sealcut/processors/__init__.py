from .colors import hex_to_rgb, rgb_to_hex, preset_color, resolve_color
from .recolor import extract_seal, extract_seal_file, seal_coverage
from .upscaler import upscale, upscale_file
from .tracer import Tracer, RunLengthTracer, FallbackTracer
from .vtracer_tracer import VTracerTracer
from .vectorizer import trace_to_svg, trace_file, default_tracer, svg_to_data_uri
from .preview import render_preview
from .pipeline import SealResult, process_seal

__all__ = [
    "hex_to_rgb",
    "rgb_to_hex",
    "preset_color",
    "resolve_color",
    "extract_seal",
    "extract_seal_file",
    "seal_coverage",
    "upscale",
    "upscale_file",
    "Tracer",
    "RunLengthTracer",
    "FallbackTracer",
    "VTracerTracer",
    "trace_to_svg",
    "trace_file",
    "default_tracer",
    "svg_to_data_uri",
    "render_preview",
    "SealResult",
    "process_seal",
]
