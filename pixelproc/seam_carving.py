"""Removing and drawing vertical seams of an image."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

_SEAM_COLOR = (255, 0, 0)


@dataclass(frozen=True)
class VerticalSeam:
    """A seam through an image, as x-coordinates from the bottom row to the top."""

    xs: tuple[int, ...]

    def __init__(self, xs: Iterable[int]) -> None:
        object.__setattr__(self, "xs", tuple(int(x) for x in xs))

    def __len__(self) -> int:
        return len(self.xs)

    def __iter__(self):
        return iter(self.xs)


def remove_vertical_seam(image, seam: VerticalSeam) -> np.ndarray:
    """Return a copy of ``image`` with one pixel per row removed along ``seam``.

    Raises ValueError if the seam length does not match the image height or
    a seam coordinate lies outside the image.
    """
    image = np.asarray(image)
    height, width = image.shape[:2]
    if len(seam) != height:
        raise ValueError("seam length does not match image height")
    if height == 0:
        return image[:, : max(width - 1, 0)].copy()

    columns = np.array(seam.xs[::-1], dtype=np.int64)
    if np.any(columns < 0) or np.any(columns >= width):
        raise ValueError("seam lies outside the image")

    keep = np.ones((height, width), dtype=bool)
    keep[np.arange(height), columns] = False
    return image[keep].reshape((height, width - 1) + image.shape[2:])


def draw_vertical_seams(image, seams: Sequence[VerticalSeam]) -> np.ndarray:
    """Draw ``seams`` in red on an RGB copy of a grayscale image.

    The seams are taken to have been removed from the image in the given
    order, so later seams are shifted back to original coordinates.
    """
    image = np.asarray(image)
    if image.ndim != 2:
        raise ValueError("image must be a single-channel image")
    height = image.shape[0]
    out = np.repeat(image.astype(np.uint8)[..., np.newaxis], 3, axis=2)

    offsets: list[list[int]] = [[] for _ in range(height)]
    for seam in seams:
        for y, x in zip(reversed(range(height)), seam.xs):
            x_original = x + sum(1 for o in offsets[y] if o < x)
            out[y, x_original] = _SEAM_COLOR
            offsets[y].append(x_original)
    return out