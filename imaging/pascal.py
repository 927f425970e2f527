"""
Pascal Triangle Module

Renders Pascal's triangle reduced modulo m as a square image.
"""

import cv2
import numpy as np
from typing import Callable, List
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))
from config import PipelineConfig
from .raster import BLACK, WHITE, RASTER_DTYPE, Pixel


def binary_pixel(value: int) -> Pixel:
    """Zero residues are black, everything else white."""
    return BLACK if value == 0 else WHITE


def palette_pixel(modulus: int, colormap: int = None) -> Callable[[int], Pixel]:
    """
    Build a pixel function mapping each residue to its own colormap entry.

    Args:
        modulus: Number of residues
        colormap: OpenCV colormap id, uses PipelineConfig.PASCAL['COLORMAP'] if None

    Returns:
        Function int -> (r, g, b)
    """
    if modulus <= 0:
        raise ValueError(f"Modulus must be positive, got {modulus}")
    if colormap is None:
        colormap = PipelineConfig.PASCAL['COLORMAP']

    levels = np.linspace(0, 255, modulus).astype(np.uint8).reshape(-1, 1)
    bgr = cv2.applyColorMap(levels, colormap).reshape(-1, 3)
    palette = [tuple(int(c) for c in px[::-1]) for px in bgr]

    def to_pixel(value: int) -> Pixel:
        return palette[value % modulus]

    return to_pixel


class PascalGenerator:
    """Generates modular Pascal triangle images."""

    def __init__(self, config: dict = None):
        """
        Initialize Pascal generator.

        Args:
            config: Optional config dict, uses PipelineConfig.PASCAL if None
        """
        self.config = config if config is not None else PipelineConfig.PASCAL
        self.pad_color = self.config['PAD_COLOR']

    @staticmethod
    def _check_args(modulus: int, size: int):
        if modulus <= 0:
            raise ValueError(f"Modulus must be positive, got {modulus}")
        if size <= 0:
            raise ValueError(f"Size must be positive, got {size}")

    def make_rows(self, modulus: int, size: int) -> List[np.ndarray]:
        """
        Build the first `size` rows of the triangle modulo `modulus`.

        Each row depends on the previous one, so rows are built in order.
        The two ends of every row are always 1.
        """
        self._check_args(modulus, size)

        # Sums of two residues must fit, otherwise fall back to Python ints
        dtype = np.int64 if modulus <= np.iinfo(np.int64).max // 2 else object
        triangle = np.zeros((size, size), dtype=dtype)
        triangle[:, 0] = 1
        for i in range(1, size):
            prev = triangle[i - 1]
            triangle[i, 1:i] = (prev[0:i - 1] + prev[1:i]) % modulus
            triangle[i, i] = 1

        return [triangle[i, :i + 1].copy() for i in range(size)]

    def generate(self,
                 modulus: int,
                 to_pixel: Callable[[int], Pixel],
                 size: int) -> np.ndarray:
        """
        Render the triangle as a size x size image.

        Args:
            modulus: Modulus applied to every inner entry
            to_pixel: Maps each entry to an (r, g, b) pixel
            size: Number of rows, also the image width

        Returns:
            (size, size, 3) image, rows right-padded with the pad color
        """
        rows = self.make_rows(modulus, size)

        image = np.empty((size, size, 3), dtype=RASTER_DTYPE)
        image[:, :] = self.pad_color
        for i, row in enumerate(rows):
            image[i, :i + 1] = [to_pixel(int(v)) for v in row]
        return image
