import base64

from fastapi import FastAPI, File, Form, HTTPException, UploadFile

from sealcut.config import (
    DEFAULT_CHROMA_THRESHOLD,
    DEFAULT_EDGE_SOFTNESS,
    DEFAULT_LIGHTNESS_THRESHOLD,
    DEFAULT_RED_SENSITIVITY,
    PRESET_COLORS,
    configure_logging,
)
from sealcut.models import DetectionMode, ProcessingSettings
from sealcut.processors.colors import resolve_color
from sealcut.processors.pipeline import process_seal
from sealcut.processors.surface import from_bytes, to_data_uri, to_png_bytes
from sealcut.processors.upscaler import valid_scale

configure_logging()

app = FastAPI(title="Seal Extraction API")


def build_settings(
    detection_mode: str,
    red_sensitivity: int,
    lightness_threshold: int,
    chroma_threshold: int,
    edge_softness: int,
    target_color: str | None,
) -> ProcessingSettings:
    """Build settings from form fields; an empty color means the mode's preset."""
    overrides = {
        "red_sensitivity": red_sensitivity,
        "lightness_threshold": lightness_threshold,
        "chroma_threshold": chroma_threshold,
        "edge_softness": edge_softness,
    }
    if target_color:
        overrides["target_color"] = resolve_color(target_color)
    return ProcessingSettings.for_mode(detection_mode, **overrides)


def process_image(image_data: bytes, settings: ProcessingSettings, scale: float | None, vectorize: bool) -> dict:
    """
    Process a seal photo from raw bytes.

    Returns:
        dict with:
            - success: bool
            - message: str
            - settings: the settings actually used (after clamping)
            - coverage: fraction of pixels kept as ink
            - files: dict with base64-encoded PNGs and the SVG text
            - previews: dict of PNG data URIs
    """
    image = from_bytes(image_data)
    if image is None:
        raise ValueError("Could not decode the uploaded image")

    result = process_seal(image, settings, scale=scale, vectorize=vectorize)
    if result.seal is None:
        raise ValueError("Could not read pixels from the uploaded image")

    files = {"seal": base64.b64encode(to_png_bytes(result.seal)).decode()}
    previews = {"seal": to_data_uri(result.seal)}

    if result.upscaled is not None:
        files["upscaled"] = base64.b64encode(to_png_bytes(result.upscaled)).decode()
        previews["upscaled"] = to_data_uri(result.upscaled)

    if result.svg is not None:
        files["svg"] = result.svg

    return {
        "success": True,
        "message": "Seal extracted successfully",
        "settings": settings.to_dict(),
        "coverage": result.coverage,
        "tracer": result.tracer,
        "files": files,
        "previews": previews,
        "files_generated": list(files.keys()),
    }


@app.post("/extract")
async def extract_endpoint(
    image: UploadFile = File(..., description="Photo or scan containing the seal"),
    detection_mode: str = Form(DetectionMode.RED.value),
    red_sensitivity: int = Form(DEFAULT_RED_SENSITIVITY),
    lightness_threshold: int = Form(DEFAULT_LIGHTNESS_THRESHOLD),
    chroma_threshold: int = Form(DEFAULT_CHROMA_THRESHOLD),
    edge_softness: int = Form(DEFAULT_EDGE_SOFTNESS),
    target_color: str | None = Form(None),
    scale: float | None = Form(None),
    vectorize: bool = Form(False),
):
    """
    Extract a seal and return the recolored PNG, optionally upscaled and traced.

    - **image**: image file
    - **detection_mode**: red, black or mixed
    - **target_color**: hex color or palette name (defaults to the mode's color)
    - **scale**: upscale factor (omit to skip)
    - **vectorize**: also return an SVG trace
    """
    if not image.content_type or not image.content_type.startswith("image/"):
        raise HTTPException(status_code=400, detail="File must be an image")

    try:
        settings = build_settings(
            detection_mode,
            red_sensitivity,
            lightness_threshold,
            chroma_threshold,
            edge_softness,
            target_color,
        )
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"detection_mode must be one of {[m.value for m in DetectionMode]}",
        )

    if scale is not None and not valid_scale(scale):
        raise HTTPException(status_code=400, detail="scale must be a positive finite number")

    content = await image.read()
    try:
        return process_image(content, settings, scale, vectorize)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/palette")
async def palette():
    return {"colors": PRESET_COLORS}


@app.get("/")
async def root():
    return {"message": "Seal Extraction API", "version": "1.0.0"}


@app.get("/health")
async def health():
    return {"status": "healthy"}
