from abc import ABC, abstractmethod

import numpy as np

from .settings import ProcessingSettings


def lightness(rgb: np.ndarray) -> np.ndarray:
    """Unrounded channel average of an (..., 3) array, as float64."""
    return rgb.astype(np.float64).sum(axis=-1) / 3.0


class InkClassifier(ABC):
    """Abstract base class for per-pixel seal ink classifiers."""

    def __init__(self, settings: ProcessingSettings):
        self.settings = settings

    @abstractmethod
    def is_ink(self, r: int, g: int, b: int) -> bool:
        """
        Decide whether a single pixel belongs to the seal.

        Args:
            r: Red channel (0-255)
            g: Green channel (0-255)
            b: Blue channel (0-255)

        Returns:
            True if the pixel should be kept
        """
        pass

    @abstractmethod
    def mask(self, rgb: np.ndarray) -> np.ndarray:
        """
        Classify a whole RGB array at once.

        Args:
            rgb: uint8 array of shape (H, W, 3)

        Returns:
            Boolean array of shape (H, W), True where the pixel is ink
        """
        pass
