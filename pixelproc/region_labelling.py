"""Finding and labelling connected components of an image."""

from __future__ import annotations

from enum import Enum

import numpy as np

from pixelproc.union_find import DisjointSetForest


class Connectivity(Enum):
    """Which neighbours of a pixel count as connected to it."""

    FOUR = "four"
    EIGHT = "eight"


def connected_components(image, conn: Connectivity, background) -> np.ndarray:
    """Label each foreground pixel by its connected component, starting at 1.

    Pixels equal to ``background`` get label 0. Pixels of different values
    never share a component. Returns a ``uint32`` array of shape
    ``(height, width)``.
    """
    image = np.asarray(image)
    multi = image.ndim == 3
    height, width = image.shape[:2]
    image_size = width * height
    if image_size >= 2**32:
        raise ValueError("Images with 2^32 or more pixels are not supported")

    out = np.zeros((height, width), dtype=np.uint32)
    if width == 0 or height == 0:
        return out

    def same(a: np.ndarray, b) -> np.ndarray:
        eq = a == b
        return eq.all(axis=-1) if multi else eq

    foreground = ~same(image, np.asarray(background, dtype=image.dtype))
    same_west = np.zeros((height, width), dtype=bool)
    same_west[:, 1:] = same(image[:, 1:], image[:, :-1])
    same_north = np.zeros((height, width), dtype=bool)
    same_north[1:, :] = same(image[1:, :], image[:-1, :])
    same_nw = np.zeros((height, width), dtype=bool)
    same_nw[1:, 1:] = same(image[1:, 1:], image[:-1, :-1])
    same_ne = np.zeros((height, width), dtype=bool)
    same_ne[1:, :-1] = same(image[1:, :-1], image[:-1, 1:])
    eight = conn is Connectivity.EIGHT

    labels = [[0] * width for _ in range(height)]
    forest = DisjointSetForest(image_size + 1)
    next_label = 1
    fg = foreground.tolist()
    west, north, nw, ne = (a.tolist() for a in (same_west, same_north, same_nw, same_ne))

    for y in range(height):
        row = labels[y]
        above = labels[y - 1] if y > 0 else None
        for x in range(width):
            if not fg[y][x]:
                continue
            adjacent = []
            if west[y][x]:
                adjacent.append(row[x - 1])
            if above is not None:
                if north[y][x]:
                    adjacent.append(above[x])
                if eight:
                    if nw[y][x]:
                        adjacent.append(above[x - 1])
                    if ne[y][x]:
                        adjacent.append(above[x + 1])
            if not adjacent:
                row[x] = next_label
                next_label += 1
            else:
                smallest = min(adjacent)
                row[x] = smallest
                for label in adjacent:
                    forest.union(smallest, label)

    output_labels: dict[int, int] = {}
    for y in range(height):
        for x in range(width):
            if not fg[y][x]:
                continue
            root = forest.root(labels[y][x])
            out[y, x] = output_labels.setdefault(root, len(output_labels) + 1)
    return out