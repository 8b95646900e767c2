from .base import InkClassifier
from .black_ink_model import BlackInkClassifier
from .mixed_ink_model import MixedInkClassifier
from .red_ink_model import RedInkClassifier
from .settings import DetectionMode, ProcessingSettings

CLASSIFIERS = {
    DetectionMode.RED: RedInkClassifier,
    DetectionMode.BLACK: BlackInkClassifier,
    DetectionMode.MIXED: MixedInkClassifier,
}


def get_classifier(settings: ProcessingSettings) -> InkClassifier:
    """Return the classifier matching ``settings.detection_mode``."""
    return CLASSIFIERS[settings.detection_mode](settings)


__all__ = [
    "InkClassifier",
    "RedInkClassifier",
    "BlackInkClassifier",
    "MixedInkClassifier",
    "DetectionMode",
    "ProcessingSettings",
    "CLASSIFIERS",
    "get_classifier",
]
