"""Finding and describing differences between images."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

PixelEntry = tuple[int, int, Any]


class DimensionMismatchError(ValueError):
    """Raised when two images do not have the same dimensions."""


class PixelMismatchError(AssertionError):
    """Raised when the pixels of two images differ."""


@dataclass(frozen=True)
class Diff:
    """A pixel location at which two images differ."""

    x: int
    y: int
    actual: Any
    expected: Any


class _Color(Enum):
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    CYAN = "\x1b[36m"
    YELLOW = "\x1b[33m"


def _colored(text: str, color: _Color) -> str:
    return f"{color.value}{text}\x1b[0m"


def _dimensions(image: np.ndarray) -> tuple[int, int]:
    return image.shape[1], image.shape[0]


def _pixel(image: np.ndarray, x: int, y: int) -> Any:
    value = image[y, x]
    if np.ndim(value) == 0:
        return value.item()
    return tuple(value.tolist())


def _enumerate_pixels(image: np.ndarray):
    width, height = _dimensions(image)
    for y in range(height):
        for x in range(width):
            yield x, y, _pixel(image, x, y)


def _channels(pixel: Any) -> tuple:
    if isinstance(pixel, (tuple, list, np.ndarray)):
        return tuple(np.asarray(pixel).tolist())
    if isinstance(pixel, np.generic):
        return (pixel.item(),)
    return (pixel,)


def _render_pixel(pixel: Any) -> str:
    channels = _channels(pixel)
    if len(channels) == 1:
        return repr(channels[0])
    return "[" + ", ".join(repr(c) for c in channels) + "]"


def assert_dimensions_match(actual, expected) -> None:
    """Raise DimensionMismatchError if the images differ in size."""
    actual_dim = _dimensions(np.asarray(actual))
    expected_dim = _dimensions(np.asarray(expected))
    if actual_dim != expected_dim:
        raise DimensionMismatchError(
            f"dimensions do not match. actual: {actual_dim}, expected: {expected_dim}"
        )


def pixel_diffs(
    actual,
    expected,
    is_diff: Callable[[PixelEntry, PixelEntry], bool],
) -> list[Diff]:
    """List the pixels for which ``is_diff((x, y, p), (x, y, q))`` holds."""
    actual = np.asarray(actual)
    expected = np.asarray(expected)
    if actual.size == 0 or expected.size == 0:
        return []
    diffs = []
    for p, q in zip(_enumerate_pixels(actual), _enumerate_pixels(expected)):
        if not is_diff(p, q):
            continue
        if p[:2] != q[:2]:
            raise DimensionMismatchError("Pixel locations do not match")
        diffs.append(Diff(x=p[0], y=p[1], actual=p[2], expected=q[2]))
    return diffs


def significant_pixel_diff_summary(
    actual,
    expected,
    is_significant_diff: Callable[[PixelEntry, PixelEntry], bool],
) -> str | None:
    """Describe the significant differences, or return None if there are none."""
    actual = np.asarray(actual)
    expected = np.asarray(expected)
    actual_dim = _dimensions(actual)
    expected_dim = _dimensions(expected)
    if actual_dim != expected_dim:
        return f"dimensions do not match. actual: {actual_dim}, expected: {expected_dim}"
    diffs = pixel_diffs(actual, expected, is_significant_diff)
    if not diffs:
        return None
    return describe_pixel_diffs(actual, expected, diffs)


def pixel_diff_summary(actual, expected) -> str | None:
    """Describe the differing pixels, or return None if all match."""
    return significant_pixel_diff_summary(actual, expected, lambda p, q: p != q)


def _render_image_region(
    image: np.ndarray,
    left: int,
    top: int,
    right: int,
    bottom: int,
    color: Callable[[int, int], _Color],
) -> str:
    xs = range(left, right + 1)
    ys = range(top, bottom + 1)
    rendered = [[_render_pixel(_pixel(image, x, y)) for x in xs] for y in ys]

    column_width = max(len(text) for row in rendered for text in row) + 1
    max_digits = math.ceil(math.log10(max(1, right, bottom)))
    column_width = max(column_width, max_digits + 1)

    parts = ["\n" + " " * (max_digits + 4)]
    parts.extend(f"{x:>{column_width}} " for x in xs)
    parts.append(f"\n  {' ' * max_digits}+{'-' * ((column_width + 1) * len(xs) + 1)}")
    parts.append(f"\n  {' ':>{max_digits}}| ")
    for y, row in zip(ys, rendered):
        parts.append(f"\n  {y:>{max_digits}}| ")
        for x, text in zip(xs, row):
            parts.append(_colored(f"{text:>{column_width}}", color(x, y)) + " ")
        parts.append(f"\n  {' ':>{max_digits}}| ")
    parts.append("\n")
    return "".join(parts)


def describe_pixel_diffs(actual, expected, diffs: Sequence[Diff]) -> str:
    """Summarise a non-empty list of pixel differences for an error message."""
    diffs = list(diffs)
    if not diffs:
        raise ValueError("no differences to describe")
    actual = np.asarray(actual)
    expected = np.asarray(expected)
    err = "pixels do not match.\n"

    min_x = min(d.x for d in diffs)
    min_y = min(d.y for d in diffs)
    max_x = max(d.x for d in diffs)
    max_y = max(d.y for d in diffs)

    if max(max_x - min_x, max_y - min_y) < 6:
        width, height = _dimensions(actual)
        left = max(0, min_x - 2)
        top = max(0, min_y - 2)
        right = min(width - 1, max_x + 2)
        bottom = min(height - 1, max_y + 2)
        locations = {(d.x, d.y) for d in diffs}

        err += _colored("Actual:", _Color.RED)
        err += _render_image_region(
            actual,
            left,
            top,
            right,
            bottom,
            lambda x, y: _Color.RED if (x, y) in locations else _Color.CYAN,
        )
        err += _colored("Expected:", _Color.GREEN)
        err += _render_image_region(
            expected,
            left,
            top,
            right,
            bottom,
            lambda x, y: _Color.GREEN if (x, y) in locations else _Color.CYAN,
        )
        return err

    err += "".join(
        "\nlocation: {}, actual: {}, expected: {} ".format(
            _colored(str((d.x, d.y)), _Color.YELLOW),
            _colored(_render_pixel(d.actual), _Color.RED),
            _colored(_render_pixel(d.expected), _Color.GREEN),
        )
        for d in diffs[:5]
    )
    return err


def assert_pixels_eq(actual, expected) -> None:
    """Raise PixelMismatchError if any pixels of the two images differ."""
    assert_dimensions_match(actual, expected)
    summary = pixel_diff_summary(actual, expected)
    if summary is not None:
        raise PixelMismatchError(summary)


def assert_pixels_eq_within(actual, expected, channel_tolerance) -> None:
    """Raise PixelMismatchError if any channel differs by more than the tolerance."""
    assert_dimensions_match(actual, expected)

    def large_diff(p: PixelEntry, q: PixelEntry) -> bool:
        cp = _channels(p[2])
        cq = _channels(q[2])
        if len(cp) != len(cq):
            raise ValueError(
                "pixels have different channel counts. "
                f"actual: {len(cp)}, expected: {len(cq)}"
            )
        return any(abs(a - b) > channel_tolerance for a, b in zip(cp, cq))

    diffs = pixel_diffs(actual, expected, large_diff)
    if diffs:
        raise PixelMismatchError(describe_pixel_diffs(actual, expected, diffs))