import numpy as np
from PIL import Image

PAPER = (245, 240, 230)
RED_INK = (200, 30, 30)
BLACK_INK = (20, 20, 20)


def document(width: int = 8, height: int = 6) -> np.ndarray:
    """Cream paper with a red blob on the left and a black blob on the right."""
    arr = np.zeros((height, width, 3), dtype=np.uint8)
    arr[:, :] = PAPER
    arr[1:4, 1:3] = RED_INK
    arr[2:5, 5:7] = BLACK_INK
    return arr


def rgba(arr: np.ndarray) -> Image.Image:
    if arr.shape[2] == 3:
        alpha = np.full(arr.shape[:2] + (1,), 255, dtype=np.uint8)
        arr = np.concatenate([arr, alpha], axis=2)
    return Image.fromarray(arr.astype(np.uint8))


def alpha_canvas(alpha: np.ndarray, color=(217, 0, 0)) -> Image.Image:
    """RGBA image of a single color with the given alpha channel."""
    h, w = alpha.shape
    arr = np.zeros((h, w, 4), dtype=np.uint8)
    arr[:, :, :3] = color
    arr[:, :, 3] = alpha
    return Image.fromarray(arr)
