"""
Visualization utilities for the raster pipeline.
Common functions for turning images and intermediate matrices into previews.
"""

import cv2
import numpy as np
from pathlib import Path
from typing import List, Tuple, Optional, Union


def to_display(data: np.ndarray, scale: int = 1) -> np.ndarray:
    """
    Convert an RGB image or a grayscale matrix into a BGR uint8 preview.

    Args:
        data: (h, w, 3) RGB image or (h, w) matrix
        scale: Integer upscaling factor (nearest neighbour)

    Returns:
        BGR uint8 image
    """
    if data.size == 0:
        return np.zeros((1, 1, 3), dtype=np.uint8)

    if data.ndim == 2:
        # Stretch matrix values to the full 0-255 range
        lo, hi = float(data.min()), float(data.max())
        span = hi - lo if hi > lo else 1.0
        gray = ((data - lo) / span * 255).astype(np.uint8)
        vis = cv2.cvtColor(gray, cv2.COLOR_GRAY2BGR)
    else:
        rgb = np.clip(data, 0, 255).astype(np.uint8)
        vis = cv2.cvtColor(rgb, cv2.COLOR_RGB2BGR)

    if scale > 1:
        h, w = vis.shape[:2]
        vis = cv2.resize(vis, (w * scale, h * scale), interpolation=cv2.INTER_NEAREST)
    return vis


def add_label_to_image(img: np.ndarray,
                       text: str,
                       color: Tuple[int, int, int] = (255, 255, 255),
                       bg_color: Tuple[int, int, int] = (0, 0, 0)) -> np.ndarray:
    """
    Add a labeled banner above an image.

    Args:
        img: Input image (BGR or grayscale)
        text: Label text
        color: Text color
        bg_color: Background color

    Returns:
        Image with label banner stacked on top
    """
    if len(img.shape) == 2:
        vis = cv2.cvtColor(img, cv2.COLOR_GRAY2BGR)
    else:
        vis = img.copy()

    w = vis.shape[1]
    bar_h = 24
    font_scale = 0.45
    banner = np.zeros((bar_h, w, 3), dtype=np.uint8)
    banner[:, :] = bg_color
    cv2.putText(banner, text, (4, int(bar_h * 0.7)), cv2.FONT_HERSHEY_SIMPLEX,
                font_scale, color, 1, cv2.LINE_AA)

    return np.vstack([banner, vis])


def _pad_to(img: np.ndarray, h: int, w: int) -> np.ndarray:
    out = np.zeros((h, w, 3), dtype=np.uint8)
    out[:img.shape[0], :img.shape[1]] = img
    return out


def create_grid_visualization(images: List[np.ndarray],
                              labels: Optional[List[str]] = None,
                              grid_size: Optional[Tuple[int, int]] = None,
                              label_color: Tuple[int, int, int] = (255, 255, 255),
                              label_bg: Tuple[int, int, int] = (0, 0, 0)) -> np.ndarray:
    """
    Create a grid visualization from multiple images.

    Images of different sizes are padded with black to the largest one.

    Args:
        images: List of BGR images to arrange
        labels: Optional labels for each image
        grid_size: Optional (rows, cols), auto-calculated if None
        label_color: Label text color (BGR)
        label_bg: Label banner color (BGR)

    Returns:
        Grid visualization
    """
    if not images:
        raise ValueError("No images provided")

    n = len(images)

    # Auto-calculate grid size if not provided
    if grid_size is None:
        cols = int(np.ceil(np.sqrt(n)))
        rows = int(np.ceil(n / cols))
    else:
        rows, cols = grid_size

    if labels:
        images = [add_label_to_image(img, label, label_color, label_bg)
                  for img, label in zip(images, labels)]

    h = max(img.shape[0] for img in images)
    w = max(img.shape[1] for img in images)
    images = [_pad_to(img, h, w) for img in images]
    while len(images) < rows * cols:
        images.append(np.zeros((h, w, 3), dtype=np.uint8))

    image_rows = []
    for r in range(rows):
        row_images = images[r * cols:(r + 1) * cols]
        if row_images:
            image_rows.append(np.hstack(row_images))

    return np.vstack(image_rows)


def save_preview(path: Union[str, Path], data: np.ndarray, scale: int = 1) -> None:
    """Write an RGB image or matrix as a PNG/JPG preview."""
    vis = data if data.dtype == np.uint8 and data.ndim == 3 else to_display(data, scale)
    if not cv2.imwrite(str(path), vis):
        raise OSError(f"Could not write preview: {path}")
