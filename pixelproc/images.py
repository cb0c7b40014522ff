"""Building, generating and loading images as numpy arrays.

Grayscale images have shape ``(height, width)``; images with several
channels have shape ``(height, width, channels)``.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence

import numpy as np
from PIL import Image


def _from_rows(rows: Iterable[Sequence], channels: int | None, dtype) -> np.ndarray:
    rows = [list(row) for row in rows]
    if not rows:
        shape = (0, 0) if channels is None else (0, 0, channels)
        return np.zeros(shape, dtype=dtype)
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows must have the same number of pixels")
    expected = (len(rows), width) if channels is None else (len(rows), width, channels)
    if width == 0:
        return np.zeros(expected, dtype=dtype)
    array = np.array(rows, dtype=dtype)
    if array.shape != expected:
        raise ValueError(f"pixels must have {channels or 1} channel(s)")
    return array


def gray_image(rows: Iterable[Sequence], dtype=np.uint8) -> np.ndarray:
    """Build a grayscale image from rows of intensities."""
    return _from_rows(rows, None, dtype)


def rgb_image(rows: Iterable[Sequence], dtype=np.uint8) -> np.ndarray:
    """Build an RGB image from rows of ``[r, g, b]`` pixels."""
    return _from_rows(rows, 3, dtype)


def rgba_image(rows: Iterable[Sequence], dtype=np.uint8) -> np.ndarray:
    """Build an RGBA image from rows of ``[r, g, b, a]`` pixels."""
    return _from_rows(rows, 4, dtype)


def gray_bench_image(width: int, height: int) -> np.ndarray:
    """A non-constant 8-bit grayscale image, handy for benchmarks."""
    ys, xs = np.indices((height, width))
    return (xs % 7 + ys % 6).astype(np.uint8)


def rgb_bench_image(width: int, height: int) -> np.ndarray:
    """A non-constant 8-bit RGB image, handy for benchmarks."""
    red = gray_bench_image(width, height)
    green = (255 - red).astype(np.uint8)
    blue = np.minimum(red, green)
    return np.stack([red, green, blue], axis=-1)


def load_image(path: str | os.PathLike) -> np.ndarray:
    """Load the image at ``path`` as an array, raising OSError on failure."""
    try:
        with Image.open(path) as img:
            return np.array(img)
    except (OSError, ValueError) as exc:
        raise OSError(f"Could not load image at {os.fspath(path)!r}") from exc