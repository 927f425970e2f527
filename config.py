"""
Configuration settings for the raster pipeline.
Centralized configuration for all modules.
"""

import cv2
import numpy as np


class PipelineConfig:
    """Configuration for the entire raster pipeline."""

    # Grayscale conversion (r, g, b luminance weights)
    GRAYSCALE = {
        'WEIGHTS': (0.21, 0.72, 0.07)
    }

    # Edge Detection
    EDGE_DETECTION = {
        'GAUSSIAN_KERNEL': np.array([
            [1,  4,  7,  4, 1],
            [4, 16, 26, 16, 4],
            [7, 26, 41, 26, 7],
            [4, 16, 26, 16, 4],
            [1,  4,  7,  4, 1]
        ], dtype=np.float64) / 273,
        'GX': np.array([
            [-1, 0, 1],
            [-2, 0, 2],
            [-1, 0, 1]
        ], dtype=np.float64),
        'GY': np.array([
            [ 1,  2,  1],
            [ 0,  0,  0],
            [-1, -2, -1]
        ], dtype=np.float64),
        'THRESHOLD': 20.0,
        'LOW_COLOR': (0, 0, 0),
        'HIGH_COLOR': (255, 255, 255)
    }

    # Pascal triangle generation
    PASCAL = {
        'MODULUS': 2,
        'SIZE': 64,
        'PAD_COLOR': (0, 0, 0),
        'COLORMAP': cv2.COLORMAP_JET
    }

    # PPM codec
    PPM = {
        'MAGIC': 'P3',
        'MAX_VALUE': 255
    }

    # Visualization
    VIZ = {
        'PREVIEW_SCALE': 4,
        'LABEL_COLOR': (255, 255, 255),
        'LABEL_BG': (0, 0, 0)
    }
