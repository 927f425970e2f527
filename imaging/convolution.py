"""
Convolution Module

Neighborhood extraction and kernel convolution over grayscale matrices.
Borders are dropped rather than padded, so each pass shrinks the matrix
by the kernel radius on every side.
"""

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view
from typing import Callable


def _check_matrix(matrix: np.ndarray) -> np.ndarray:
    matrix = np.asarray(matrix, dtype=np.float64)
    if matrix.ndim != 2:
        raise ValueError(f"Expected a 2D matrix, got {matrix.ndim} dimensions")
    return matrix


def check_kernel(kernel: np.ndarray) -> np.ndarray:
    """Validate that a kernel is square with an odd side length."""
    kernel = np.asarray(kernel, dtype=np.float64)
    if kernel.ndim != 2:
        raise ValueError(f"Kernel must be 2D, got {kernel.ndim} dimensions")
    rows, cols = kernel.shape
    if rows != cols:
        raise ValueError(f"Kernel must be square, got {rows}x{cols}")
    if rows % 2 == 0:
        raise ValueError(f"Kernel side must be odd, got {rows}")
    return kernel


def get_neighbors(matrix: np.ndarray, radius: int) -> np.ndarray:
    """
    Extract the square neighborhood around every interior cell.

    Args:
        matrix: (height, width) matrix
        radius: Neighborhood radius, window side is 2 * radius + 1

    Returns:
        (height - 2r, width - 2r, side, side) array of windows, or an
        empty (0, 0, side, side) array if the matrix is too small
    """
    if radius < 0:
        raise ValueError(f"Radius must be non-negative, got {radius}")
    matrix = _check_matrix(matrix)

    side = 2 * radius + 1
    h, w = matrix.shape
    if h < side or w < side:
        return np.zeros((0, 0, side, side), dtype=np.float64)

    return sliding_window_view(matrix, (side, side)).copy()


def matrix_scalar_operator(m1: np.ndarray,
                           m2: np.ndarray,
                           op: Callable[[np.ndarray, np.ndarray], np.ndarray]) -> np.ndarray:
    """
    Apply a binary operator elementwise between two matrices of equal shape.

    Args:
        m1: First matrix
        m2: Second matrix
        op: Vectorized operator, e.g. np.add or np.multiply

    Returns:
        Result matrix
    """
    m1 = np.asarray(m1, dtype=np.float64)
    m2 = np.asarray(m2, dtype=np.float64)
    if m1.shape != m2.shape:
        raise ValueError(f"Shape mismatch: {m1.shape} vs {m2.shape}")
    return op(m1, m2)


def apply_convolution(matrix: np.ndarray, kernel: np.ndarray) -> np.ndarray:
    """
    Convolve a matrix with a square kernel (cross-correlation, no flip).

    Args:
        matrix: (height, width) grayscale matrix
        kernel: (k, k) kernel with odd k

    Returns:
        (height - 2r, width - 2r) matrix where r = k // 2
    """
    kernel = check_kernel(kernel)
    windows = get_neighbors(matrix, kernel.shape[0] // 2)
    if windows.shape[0] == 0:
        return np.zeros((0, 0), dtype=np.float64)

    # Frobenius inner product of each window with the kernel
    return (windows * kernel).sum(axis=(2, 3))
