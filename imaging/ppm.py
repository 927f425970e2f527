"""
PPM Codec Module

Reads and writes plain-text (P3) pixel maps.
"""

import numpy as np
from pathlib import Path
from typing import List, Union
import sys

sys.path.append(str(Path(__file__).parent.parent))
from config import PipelineConfig
from .raster import RASTER_DTYPE, check_image


class PPMFormatError(ValueError):
    """Raised when PPM text cannot be decoded."""


def _tokenize(text: str) -> List[str]:
    tokens = []
    for line in text.splitlines():
        line = line.split('#', 1)[0]
        tokens.extend(line.split())
    return tokens


def _parse_int(token: str, what: str) -> int:
    try:
        value = int(token)
    except ValueError:
        raise PPMFormatError(f"Invalid {what}: {token!r}") from None
    if value < 0:
        raise PPMFormatError(f"Negative {what}: {value}")
    return value


def from_string_ppm(text: str) -> np.ndarray:
    """
    Decode P3 text into an image.

    Args:
        text: PPM file contents

    Returns:
        (height, width, 3) image
    """
    tokens = _tokenize(text)
    magic = PipelineConfig.PPM['MAGIC']
    if not tokens or tokens[0] != magic:
        raise PPMFormatError(f"Expected magic number {magic}")
    if len(tokens) < 4:
        raise PPMFormatError("Truncated header")

    width = _parse_int(tokens[1], 'width')
    height = _parse_int(tokens[2], 'height')
    _parse_int(tokens[3], 'max value')

    samples = tokens[4:]
    expected = width * height * 3
    if len(samples) != expected:
        raise PPMFormatError(f"Expected {expected} samples for {width}x{height}, got {len(samples)}")

    values = [_parse_int(tok, 'sample') for tok in samples]
    return np.array(values, dtype=RASTER_DTYPE).reshape((height, width, 3))


def to_string_ppm(image: np.ndarray) -> str:
    """
    Encode an image as P3 text, one pixel per line.

    Args:
        image: (height, width, 3) image

    Returns:
        PPM file contents
    """
    image = check_image(image)
    height, width = image.shape[:2]
    lines = [
        PipelineConfig.PPM['MAGIC'],
        f"{width} {height}",
        str(PipelineConfig.PPM['MAX_VALUE'])
    ]
    lines.extend(f"{r} {g} {b}" for r, g, b in image.reshape(-1, 3))
    return '\n'.join(lines) + '\n'


def read_ppm(path: Union[str, Path]) -> np.ndarray:
    """Read a P3 file from disk."""
    return from_string_ppm(Path(path).read_text())


def write_ppm(path: Union[str, Path], image: np.ndarray) -> None:
    """Write an image to disk as P3."""
    Path(path).write_text(to_string_ppm(image))
