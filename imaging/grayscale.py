"""
Grayscale Conversion Module

Maps RGB pixels to luminance values using a fixed weighting.
"""

import numpy as np
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))
from config import PipelineConfig
from .raster import Pixel, check_image


def to_grayscale(pixel: Pixel, weights=None) -> float:
    """Luminance of a single pixel."""
    if weights is None:
        weights = PipelineConfig.GRAYSCALE['WEIGHTS']
    wr, wg, wb = weights
    r, g, b = pixel
    return wr * r + wg * g + wb * b


class GrayscaleConverter:
    """Converts RGB images to grayscale matrices."""

    def __init__(self, config: dict = None):
        """
        Initialize grayscale converter.

        Args:
            config: Optional config dict, uses PipelineConfig.GRAYSCALE if None
        """
        self.config = config if config is not None else PipelineConfig.GRAYSCALE
        self.weights = np.asarray(self.config['WEIGHTS'], dtype=np.float64)
        if self.weights.shape != (3,):
            raise ValueError("Grayscale weights must have exactly three entries")

    def convert(self, image: np.ndarray) -> np.ndarray:
        """
        Convert every pixel of an image to its luminance.

        Args:
            image: (height, width, 3) RGB image

        Returns:
            (height, width) float matrix
        """
        image = check_image(image)
        return image.astype(np.float64) @ self.weights
