"""
Edge Detection Module

Detects edges with a Gaussian blur followed by a Sobel gradient magnitude
and a binary threshold. Every convolution drops the border, so the output
is smaller than the input by 2 * (blur radius + sobel radius) per axis.
"""

import numpy as np
from typing import Dict
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))
from config import PipelineConfig
from .convolution import apply_convolution, check_kernel, matrix_scalar_operator
from .grayscale import GrayscaleConverter
from .raster import RASTER_DTYPE, check_image, empty_image


class EdgeDetector:
    """Detects edges in RGB images."""

    def __init__(self, config: dict = None, grayscale: GrayscaleConverter = None):
        """
        Initialize edge detector.

        Args:
            config: Optional config dict, uses PipelineConfig.EDGE_DETECTION if None
            grayscale: Optional converter, a default GrayscaleConverter if None
        """
        self.config = config if config is not None else PipelineConfig.EDGE_DETECTION
        self.gaussian_kernel = check_kernel(self.config['GAUSSIAN_KERNEL'])
        self.gx = check_kernel(self.config['GX'])
        self.gy = check_kernel(self.config['GY'])
        self.low_color = self.config['LOW_COLOR']
        self.high_color = self.config['HIGH_COLOR']
        self.grayscale = grayscale if grayscale is not None else GrayscaleConverter()

    @property
    def shrink(self) -> int:
        """Total number of pixels lost per axis."""
        return (self.gaussian_kernel.shape[0] // 2 + self.gx.shape[0] // 2) * 2

    def run_stages(self, image: np.ndarray) -> Dict[str, np.ndarray]:
        """
        Run the numeric stages of the detector.

        Args:
            image: (height, width, 3) RGB image

        Returns:
            Dict with 'grayscale', 'blurred', 'gx', 'gy' and 'magnitude' matrices
        """
        stages = {}
        stages['grayscale'] = self.grayscale.convert(image)
        stages['blurred'] = apply_convolution(stages['grayscale'], self.gaussian_kernel)
        stages['gx'] = np.abs(apply_convolution(stages['blurred'], self.gx))
        stages['gy'] = np.abs(apply_convolution(stages['blurred'], self.gy))
        stages['magnitude'] = matrix_scalar_operator(stages['gx'], stages['gy'], np.add)
        return stages

    def threshold(self, magnitude: np.ndarray, threshold: float) -> np.ndarray:
        """Map values below threshold to the low color, everything else to the high color."""
        if magnitude.size == 0:
            return empty_image()
        out = np.empty(magnitude.shape + (3,), dtype=RASTER_DTYPE)
        below = magnitude < threshold
        out[below] = self.low_color
        out[~below] = self.high_color
        return out

    def detect(self, image: np.ndarray, threshold: float = None) -> np.ndarray:
        """
        Detect edges in an image.

        Args:
            image: (height, width, 3) RGB image
            threshold: Gradient threshold, uses config THRESHOLD if None

        Returns:
            Black/white image, smaller than the input by `shrink` per axis
        """
        if threshold is None:
            threshold = self.config['THRESHOLD']
        image = check_image(image)
        stages = self.run_stages(image)
        return self.threshold(stages['magnitude'], threshold)
