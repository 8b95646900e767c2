import numpy as np

from .base import InkClassifier, lightness


class RedInkClassifier(InkClassifier):
    """
    Classifier for red (vermilion) seal ink.

    Best for: Traditional name stamps on white or cream paper.

    A pixel is ink when all three hold:
    1. It is not brighter than ``lightness_threshold`` (rejects paper)
    2. Red beats both green and blue by the sensitivity ratio
       ``1 + red_sensitivity / 100``; higher sensitivity lowers the ratio,
       which picks up faded or bled ink
    3. ``r - max(g, b)`` reaches ``chroma_threshold`` (rejects muddy,
       weakly reddish edge pixels)
    """

    @property
    def ratio(self) -> float:
        return 1.0 + self.settings.red_sensitivity / 100

    def is_ink(self, r: int, g: int, b: int) -> bool:
        r, g, b = int(r), int(g), int(b)
        rr = self.ratio
        is_reddish = r > g * rr and r > b * rr
        color_diff = r - max(g, b)
        return (
            (r + g + b) / 3 <= self.settings.lightness_threshold
            and is_reddish
            and color_diff >= self.settings.chroma_threshold
        )

    def mask(self, rgb: np.ndarray) -> np.ndarray:
        channels = rgb[..., :3].astype(np.float64)
        r, g, b = channels[..., 0], channels[..., 1], channels[..., 2]
        rr = self.ratio

        is_reddish = (r > g * rr) & (r > b * rr)
        color_diff = r - np.maximum(g, b)

        return (
            (lightness(channels) <= self.settings.lightness_threshold)
            & is_reddish
            & (color_diff >= self.settings.chroma_threshold)
        )
