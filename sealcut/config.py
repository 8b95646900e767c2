import logging
import os
from pathlib import Path

# Base paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = PROJECT_ROOT / "data"
INPUTS_DIR = DATA_DIR / "inputs"
OUTPUTS_DIR = DATA_DIR / "outputs"

# Ensure directories exist (wrapped for read-only deployments)
try:
    INPUTS_DIR.mkdir(parents=True, exist_ok=True)
    OUTPUTS_DIR.mkdir(parents=True, exist_ok=True)
except OSError:
    pass

# Processing defaults
DEFAULT_RED_SENSITIVITY = 50
DEFAULT_LIGHTNESS_THRESHOLD = 220
DEFAULT_CHROMA_THRESHOLD = 15
DEFAULT_EDGE_SOFTNESS = 2
DEFAULT_TARGET_COLOR = "#d90000"
DEFAULT_RGB = (217, 0, 0)
DEFAULT_UPSCALE_FACTOR = float(os.getenv("SEALCUT_DEFAULT_SCALE", "2"))

# Alpha above this counts as ink when tracing
TRACE_ALPHA_CUTOFF = 128

# Fixed trace configuration for the primary tracer
TRACE_OPTIONS = {
    "ltres": 0.1,
    "qtres": 0.1,
    "pathomit": 32,
    "rightangleenhance": True,
    "colorsampling": 1,
    "numberofcolors": 2,
    "mincolorratio": 0.05,
    "viewbox": True,
}

# Named palette, in display order
PRESET_COLORS = {
    "classic-seal": "#d90000",
    "deep-vermilion": "#b91c1c",
    "pro-black": "#1e293b",
    "trust-navy": "#1e3a8a",
    "noble-gold": "#a16207",
}

# Recolor target picked when switching detection mode
MODE_COLORS = {
    "red": "#d90000",
    "black": "#1e293b",
    "mixed": "#d90000",
}

PREVIEW_BACKGROUNDS = {
    "white": (255, 255, 255),
    "black": (0, 0, 0),
    "blue": (224, 242, 254),
    "green": (220, 252, 231),
}
CHECKERBOARD_COLORS = ((255, 255, 255), (226, 232, 240))
CHECKERBOARD_TILE = 10

# Logging
LOG_LEVEL = os.getenv("SEALCUT_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - [%(levelname)s] - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | int | None = None) -> None:
    """Configure root logging for the CLI and the API process."""
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT, force=True)
    # Pillow's PNG plugin is chatty at DEBUG
    logging.getLogger("PIL").setLevel(logging.WARNING)
