"""Suppressing non-maximal values."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar

import numpy as np


class Scored(Protocol):
    """An item with a position and a score."""

    x: int
    y: int
    score: float


S = TypeVar("S", bound=Scored)


def _contains_greater_value(
    pixels: list[list],
    x: int,
    y: int,
    value,
    y_lower: int,
    y_upper: int,
    x_lower: int,
    x_upper: int,
) -> bool:
    """Whether the block holds a larger value, or an equal one at a smaller (x, y)."""
    for cy in range(y_lower, y_upper):
        row = pixels[cy]
        for cx in range(x_lower, x_upper):
            ci = row[cx]
            if ci < value:
                continue
            if ci > value or (cx, cy) < (x, y):
                return True
    return False


def suppress_non_maximum(image, radius: int) -> np.ndarray:
    """Zero every pixel that is not the greatest in the square block around it.

    The block is ``2 * radius + 1`` pixels on a side. Ties are resolved in
    favour of the lexicographically smallest ``(x, y)``.
    """
    image = np.asarray(image)
    if image.ndim != 2:
        raise ValueError("suppress_non_maximum needs a single-channel image")
    if radius < 0:
        raise ValueError("radius must be non-negative")
    height, width = image.shape
    out = np.zeros_like(image)
    if width == 0 or height == 0:
        return out

    pixels = image.tolist()
    step = radius + 1

    # Only the maximum of each (r + 1) x (r + 1) cell can be a local maximum,
    # so the full window search runs once per cell.
    for y in range(0, height, step):
        for x in range(0, width, step):
            best_x, best_y = x, y
            best = pixels[y][x]
            for cy in range(y, min(height, y + step)):
                row = pixels[cy]
                for cx in range(x, min(width, x + step)):
                    ci = row[cx]
                    if ci < best:
                        continue
                    if ci > best or (cx, cy) < (best_x, best_y):
                        best_x, best_y, best = cx, cy, ci

            x0 = max(0, best_x - radius)
            x1 = x
            x2 = min(width, x + step)
            x3 = min(width, best_x + step)
            y0 = max(0, best_y - radius)
            y1 = y
            y2 = min(height, y + step)
            y3 = min(height, best_y + step)

            blocks = (
                (y0, y1, x0, x3),  # above the cell
                (y1, y2, x0, x1),  # left of the cell
                (y1, y2, x2, x3),  # right of the cell
                (y2, y3, x0, x3),  # below the cell
            )
            if not any(
                _contains_greater_value(pixels, best_x, best_y, best, *block)
                for block in blocks
            ):
                out[best_y, best_x] = best
    return out


def _is_local_max(item: Scored, rows: list[list[Scored]], radius: int, height: int) -> bool:
    cx, cy, cs = item.x, item.y, item.score
    row_lower = max(0, cy - radius)
    row_upper = height if cy + radius + 1 > height else cy + radius + 1
    for y in range(row_lower, row_upper):
        for other in rows[y]:
            if other.x + radius < cx:
                continue
            if other.x > cx + radius:
                break
            if other.score > cs:
                return False
            if other.score < cs:
                continue
            if (other.y, other.x) < (cy, cx):
                return False
    return True


def local_maxima(ts: Sequence[S], radius: int) -> list[S]:
    """Return the items with the highest score in the square block around them.

    Items need ``x``, ``y`` and ``score`` attributes; the block is
    ``2 * radius + 1`` on a side. Ties go to the smallest ``(y, x)``.
    Results are ordered by ``(y, x)``.
    """
    if radius < 0:
        raise ValueError("radius must be non-negative")
    ordered = sorted(ts, key=lambda t: (t.y, t.x))
    height = ordered[-1].y if ordered else 0

    rows: list[list[S]] = [[] for _ in range(height + 1)]
    for t in ordered:
        rows[t.y].append(t)

    return [t for t in ordered if _is_local_max(t, rows, radius, height)]