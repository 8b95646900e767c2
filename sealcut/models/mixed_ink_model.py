import numpy as np

from .base import InkClassifier
from .black_ink_model import BlackInkClassifier
from .red_ink_model import RedInkClassifier
from .settings import ProcessingSettings


class MixedInkClassifier(InkClassifier):
    """Keeps a pixel when either the red or the black rule keeps it."""

    def __init__(self, settings: ProcessingSettings):
        super().__init__(settings)
        self._red = RedInkClassifier(settings)
        self._black = BlackInkClassifier(settings)

    def is_ink(self, r: int, g: int, b: int) -> bool:
        return self._red.is_ink(r, g, b) or self._black.is_ink(r, g, b)

    def mask(self, rgb: np.ndarray) -> np.ndarray:
        return self._red.mask(rgb) | self._black.mask(rgb)
