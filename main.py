#!/usr/bin/env python3
"""
Seal Extraction CLI

Processes a photo of a stamped document through: Extract → Upscale → Vectorize
"""

import argparse
import logging
import sys
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from sealcut.config import (
    DEFAULT_CHROMA_THRESHOLD,
    DEFAULT_EDGE_SOFTNESS,
    DEFAULT_LIGHTNESS_THRESHOLD,
    DEFAULT_RED_SENSITIVITY,
    OUTPUTS_DIR,
    configure_logging,
)
from sealcut.models import DetectionMode, ProcessingSettings
from sealcut.processors.colors import resolve_color
from sealcut.processors.pipeline import process_seal
from sealcut.processors.preview import PREVIEW_CHOICES, render_preview

logger = logging.getLogger(__name__)


def process_file(
    input_path: str,
    settings: ProcessingSettings,
    output_dir: str | None = None,
    scale: float | None = None,
    vectorize: bool = False,
    preview: str | None = None,
) -> dict:
    """
    Process a seal photo through the full pipeline.

    Args:
        input_path: Path to the input photo
        settings: Processing settings
        output_dir: Directory to save outputs (default: data/outputs)
        scale: Upscale factor (None to skip)
        vectorize: Whether to write an SVG trace
        preview: Background name for an extra preview PNG (None to skip)

    Returns:
        Dictionary of output file paths
    """
    output_dir = Path(output_dir) if output_dir else OUTPUTS_DIR
    output_dir.mkdir(parents=True, exist_ok=True)

    with Image.open(input_path) as img:
        result = process_seal(img, settings, scale=scale, vectorize=vectorize)

    if result.seal is None:
        raise ValueError(f"Could not read pixels from {input_path}")

    outputs = {}

    # Step 1: Extracted, recolored seal
    seal_path = str(output_dir / "0_seal.png")
    result.seal.save(seal_path, "PNG")
    logger.info("Wrote %s", seal_path)
    outputs["seal"] = seal_path

    # Step 2: Upscaled seal
    if result.upscaled is not None:
        upscaled_path = str(output_dir / "1_upscaled.png")
        result.upscaled.save(upscaled_path, "PNG")
        logger.info("Wrote %s", upscaled_path)
        outputs["upscaled"] = upscaled_path

    # Step 3: Vector trace
    if result.svg is not None:
        svg_path = str(output_dir / "2_trace.svg")
        with open(svg_path, "w", encoding="utf-8") as f:
            f.write(result.svg)
        logger.info("Wrote %s (%s)", svg_path, result.tracer)
        outputs["svg"] = svg_path

    # Step 4: Preview on a background
    if preview:
        preview_path = str(output_dir / f"3_preview_{preview}.png")
        render_preview(result.final_image, preview).save(preview_path, "PNG")
        logger.info("Wrote %s", preview_path)
        outputs["preview"] = preview_path

    return outputs


def main():
    parser = argparse.ArgumentParser(
        description="Extract a stamped seal from a document photo",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="data/inputs/seal.jpg",
        help="Path to the input photo",
    )
    parser.add_argument(
        "-o", "--output-dir",
        default=None,
        help="Directory to save output files (default: data/outputs)",
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in DetectionMode],
        default=DetectionMode.RED.value,
        help="Kind of ink to detect",
    )
    parser.add_argument(
        "--red-sensitivity",
        type=int,
        default=DEFAULT_RED_SENSITIVITY,
        help="Detection strictness, 0-100 (saturation tolerance in black mode)",
    )
    parser.add_argument(
        "--lightness-threshold",
        type=int,
        default=DEFAULT_LIGHTNESS_THRESHOLD,
        help="Luminance cutoff, 0-255 (inverted in black mode)",
    )
    parser.add_argument(
        "--chroma-threshold",
        type=int,
        default=DEFAULT_CHROMA_THRESHOLD,
        help="Minimum red dominance margin in red mode",
    )
    parser.add_argument(
        "--edge-softness",
        type=int,
        default=DEFAULT_EDGE_SOFTNESS,
        help="Reserved, currently has no effect",
    )
    parser.add_argument(
        "--color",
        default=None,
        help="Recolor target: #rrggbb or a palette name (default: the mode's color)",
    )
    parser.add_argument(
        "--scale",
        type=float,
        default=None,
        help="Upscale factor, e.g. 2 (skip upscaling when omitted)",
    )
    parser.add_argument(
        "--svg",
        action="store_true",
        help="Also write an SVG trace",
    )
    parser.add_argument(
        "--preview",
        choices=PREVIEW_CHOICES,
        default=None,
        help="Also write a preview composited on this background",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()
    configure_logging("DEBUG" if args.verbose else None)

    if not Path(args.input).exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        sys.exit(1)

    overrides = {
        "red_sensitivity": args.red_sensitivity,
        "lightness_threshold": args.lightness_threshold,
        "chroma_threshold": args.chroma_threshold,
        "edge_softness": args.edge_softness,
    }
    if args.color:
        overrides["target_color"] = resolve_color(args.color)
    settings = ProcessingSettings.for_mode(args.mode, **overrides)

    print(f"Processing: {args.input}")
    try:
        outputs = process_file(
            args.input,
            settings,
            output_dir=args.output_dir,
            scale=args.scale,
            vectorize=args.svg,
            preview=args.preview,
        )
    except (ValueError, UnidentifiedImageError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"\nDone! Generated {len(outputs)} files.")


if __name__ == "__main__":
    main()
