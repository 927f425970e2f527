"""
Raster Types

Shared pixel and image types passed between all modules.
An image is an (height, width, 3) integer array of RGB pixels.
"""

import numpy as np
from typing import Iterable, Sequence, Tuple

Pixel = Tuple[int, int, int]

BLACK: Pixel = (0, 0, 0)
WHITE: Pixel = (255, 255, 255)

RASTER_DTYPE = np.int64


def empty_image() -> np.ndarray:
    """Return the 0x0 image."""
    return np.zeros((0, 0, 3), dtype=RASTER_DTYPE)


def make_image(rows: Iterable[Sequence[Pixel]]) -> np.ndarray:
    """
    Build an image from nested rows of (r, g, b) pixels.

    Args:
        rows: Sequence of rows, each a sequence of 3-tuples

    Returns:
        (height, width, 3) image array
    """
    rows = [list(row) for row in rows]
    if not rows or not rows[0]:
        return empty_image()

    width = len(rows[0])
    for idx, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"Row {idx} has {len(row)} pixels, expected {width}")

    image = np.array(rows, dtype=RASTER_DTYPE)
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError("Pixels must have exactly three channels")
    return image


def filled_image(height: int, width: int, pixel: Pixel) -> np.ndarray:
    """Create an image of the given size filled with a single pixel."""
    image = np.empty((height, width, 3), dtype=RASTER_DTYPE)
    image[:, :] = pixel
    return image


def check_image(image: np.ndarray) -> np.ndarray:
    """Validate that an array is an RGB raster and return it as one."""
    image = np.asarray(image)
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an (height, width, 3) image, got shape {image.shape}")
    return image.astype(RASTER_DTYPE, copy=False)

