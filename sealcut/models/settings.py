from dataclasses import dataclass, fields, replace as dc_replace
from enum import Enum

from sealcut.config import (
    DEFAULT_CHROMA_THRESHOLD,
    DEFAULT_EDGE_SOFTNESS,
    DEFAULT_LIGHTNESS_THRESHOLD,
    DEFAULT_RED_SENSITIVITY,
    DEFAULT_TARGET_COLOR,
    MODE_COLORS,
)


class DetectionMode(str, Enum):
    """Which kind of ink the classifier looks for."""

    RED = "red"
    BLACK = "black"
    MIXED = "mixed"


# (low, high) bounds applied on construction
_RANGES = {
    "red_sensitivity": (0, 100),
    "lightness_threshold": (0, 255),
    "chroma_threshold": (0, 255),
    "edge_softness": (0, 10),
}


def _clamp(value, low: int, high: int) -> int:
    return int(min(max(int(value), low), high))


@dataclass(frozen=True)
class ProcessingSettings:
    """
    Parameters for one segmentation pass.

    Attributes:
        red_sensitivity: Strictness knob (0-100). In red mode it lowers the
            red-dominance ratio, in black mode it is the saturation tolerance.
        lightness_threshold: Luminance cutoff (0-255). Inverted in black mode.
        chroma_threshold: Minimum ``r - max(g, b)`` margin in red mode.
        edge_softness: Reserved for edge feathering, currently has no effect.
        target_color: ``#rrggbb`` recolor target.
        detection_mode: red, black or mixed.
    """

    red_sensitivity: int = DEFAULT_RED_SENSITIVITY
    lightness_threshold: int = DEFAULT_LIGHTNESS_THRESHOLD
    chroma_threshold: int = DEFAULT_CHROMA_THRESHOLD
    edge_softness: int = DEFAULT_EDGE_SOFTNESS
    target_color: str = DEFAULT_TARGET_COLOR
    detection_mode: DetectionMode = DetectionMode.RED

    def __post_init__(self):
        for name, (low, high) in _RANGES.items():
            object.__setattr__(self, name, _clamp(getattr(self, name), low, high))
        # Raises ValueError for unknown modes
        object.__setattr__(self, "detection_mode", DetectionMode(self.detection_mode))

    @classmethod
    def for_mode(cls, mode: DetectionMode | str, **overrides) -> "ProcessingSettings":
        """Settings for ``mode`` with that mode's preset target color."""
        mode = DetectionMode(mode)
        overrides.setdefault("target_color", MODE_COLORS[mode.value])
        return cls(detection_mode=mode, **overrides)

    def replace(self, **changes) -> "ProcessingSettings":
        return dc_replace(self, **changes)

    def to_dict(self) -> dict:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["detection_mode"] = self.detection_mode.value
        return data
