"""
Raster Pipeline Modules

This package contains the components of the raster pipeline:
- raster: Pixel and image types
- ppm: Plain-text (P3) codec
- geometry: Concatenation and rotation
- grayscale: RGB to luminance conversion
- convolution: Neighborhood extraction and kernel convolution
- edge_detection: Blur, gradient magnitude and threshold
- pascal: Modular Pascal triangle images
"""

from .convolution import apply_convolution, get_neighbors, matrix_scalar_operator
from .edge_detection import EdgeDetector
from .geometry import horizontal_concat, rotate, vertical_concat
from .grayscale import GrayscaleConverter, to_grayscale
from .pascal import PascalGenerator, binary_pixel, palette_pixel
from .ppm import PPMFormatError, from_string_ppm, read_ppm, to_string_ppm, write_ppm
from .raster import BLACK, WHITE, Pixel, empty_image, filled_image, make_image

__all__ = [
    'EdgeDetector',
    'GrayscaleConverter',
    'PascalGenerator',
    'PPMFormatError',
    'Pixel',
    'BLACK',
    'WHITE',
    'apply_convolution',
    'binary_pixel',
    'empty_image',
    'filled_image',
    'from_string_ppm',
    'get_neighbors',
    'horizontal_concat',
    'make_image',
    'matrix_scalar_operator',
    'palette_pixel',
    'read_ppm',
    'rotate',
    'to_grayscale',
    'to_string_ppm',
    'vertical_concat',
    'write_ppm'
]
