"""
Geometry Module

Concatenation and rotation of images.
"""

import numpy as np

from .raster import check_image


def vertical_concat(top: np.ndarray, bottom: np.ndarray) -> np.ndarray:
    """Stack `bottom` under `top`."""
    top = check_image(top)
    bottom = check_image(bottom)
    if top.size == 0:
        return bottom.copy()
    if bottom.size == 0:
        return top.copy()
    if top.shape[1] != bottom.shape[1]:
        raise ValueError(f"Width mismatch: {top.shape[1]} vs {bottom.shape[1]}")
    return np.vstack([top, bottom])


def horizontal_concat(left: np.ndarray, right: np.ndarray) -> np.ndarray:
    """Place `right` to the right of `left`."""
    left = check_image(left)
    right = check_image(right)
    if left.size == 0:
        return right.copy()
    if right.size == 0:
        return left.copy()
    if left.shape[0] != right.shape[0]:
        raise ValueError(f"Height mismatch: {left.shape[0]} vs {right.shape[0]}")
    return np.hstack([left, right])


def rotate(image: np.ndarray, degrees: int) -> np.ndarray:
    """
    Rotate an image counter-clockwise.

    Args:
        image: (height, width, 3) image
        degrees: Non-negative multiple of 90

    Returns:
        Rotated image
    """
    if degrees < 0 or degrees % 90 != 0:
        raise ValueError(f"Rotation must be a non-negative multiple of 90, got {degrees}")
    rotated = check_image(image).copy()
    for _ in range((degrees // 90) % 4):
        rotated = np.rot90(rotated)
    return np.ascontiguousarray(rotated)
