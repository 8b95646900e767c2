import numpy as np

from .base import InkClassifier, lightness


class BlackInkClassifier(InkClassifier):
    """
    Classifier for black (carbon or toner) seal ink.

    Keeps dark, nearly grey pixels. The thresholds are read differently from
    red mode:
    - ``lightness_threshold`` is inverted: a pixel is dark when its lightness
      is below ``255 - lightness_threshold``, so a larger value widens the
      accepted range
    - ``red_sensitivity`` acts as a saturation tolerance: the
      ``max - min`` channel spread must stay under ``red_sensitivity / 2``
    """

    @property
    def max_saturation(self) -> float:
        return self.settings.red_sensitivity / 2

    @property
    def dark_cutoff(self) -> int:
        return 255 - self.settings.lightness_threshold

    def is_ink(self, r: int, g: int, b: int) -> bool:
        r, g, b = int(r), int(g), int(b)
        saturation = max(r, g, b) - min(r, g, b)
        is_dark = (r + g + b) / 3 < self.dark_cutoff
        return is_dark and saturation < self.max_saturation

    def mask(self, rgb: np.ndarray) -> np.ndarray:
        channels = rgb[..., :3].astype(np.float64)
        saturation = channels.max(axis=-1) - channels.min(axis=-1)
        is_dark = lightness(channels) < self.dark_cutoff
        return is_dark & (saturation < self.max_saturation)
