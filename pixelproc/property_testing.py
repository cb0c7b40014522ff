"""Helpers for property-based tests of image processing functions.

Random images are small numpy arrays of 8-bit channels, and ``shrink``
offers the smaller candidates a failing case can be reduced to.
"""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np


def small_image_dimensions(rng: np.random.Generator) -> tuple[int, int]:
    """Draw a ``(width, height)`` pair with each side between 0 and 9."""
    width, height = rng.integers(0, 256, size=2)
    return int(width) % 10, int(height) % 10


def random_gray_image(rng: np.random.Generator) -> np.ndarray:
    """Draw a small 8-bit grayscale image with uniformly random pixels."""
    width, height = small_image_dimensions(rng)
    return rng.integers(0, 256, size=(height, width), dtype=np.uint8)


def random_rgb_image(rng: np.random.Generator) -> np.ndarray:
    """Draw a small 8-bit RGB image with uniformly random pixels."""
    width, height = small_image_dimensions(rng)
    return rng.integers(0, 256, size=(height, width, 3), dtype=np.uint8)


def shrink(image) -> Iterator[np.ndarray]:
    """Yield copies of ``image`` with one column or row removed.

    The order is: without the last column, without the first column,
    without the last row, without the first row. Columns are only
    removed from images of non-zero width, rows only from images of
    non-zero height.
    """
    image = np.asarray(image)
    height, width = image.shape[:2]
    if width > 0:
        yield image[:, : width - 1].copy()
        yield image[:, 1:].copy()
    if height > 0:
        yield image[: height - 1].copy()
        yield image[1:].copy()


def _pixel(value) -> object:
    if np.ndim(value) == 0:
        return value.item()
    return tuple(value.tolist())


def describe_image(image) -> str:
    """Describe an image by its size and every ``(x, y, pixel)`` entry."""
    image = np.asarray(image)
    height, width = image.shape[:2]
    data = [
        (x, y, _pixel(image[y, x])) for y in range(height) for x in range(width)
    ]
    return f"width: {width}, height: {height}, data: {data!r}"