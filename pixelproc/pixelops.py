"""Per-pixel arithmetic."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

Pixel = Sequence[float] | np.ndarray


def _clamp(values: np.ndarray, dtype: np.dtype) -> np.ndarray:
    """Clamp float values into ``dtype``, truncating for integer types."""
    dtype = np.dtype(dtype)
    values = np.asarray(values, dtype=np.float64)
    if np.issubdtype(dtype, np.integer):
        info = np.iinfo(dtype)
        return np.trunc(np.clip(values, info.min, info.max)).astype(dtype)
    return values.astype(dtype)


def weighted_channel_sum(
    left: float,
    right: float,
    left_weight: float,
    right_weight: float,
    dtype=np.uint8,
):
    """Weighted sum of two channel values, clamped to ``dtype``."""
    total = np.float32(left) * np.float32(left_weight) + np.float32(
        right
    ) * np.float32(right_weight)
    return _clamp(total, dtype).item()


def weighted_sum(
    left: Pixel, right: Pixel, left_weight: float, right_weight: float
) -> Pixel:
    """Add two pixels channel by channel with the given weights.

    Arrays keep their dtype; plain sequences are treated as 8-bit channels
    and a tuple is returned.
    """
    dtype = left.dtype if isinstance(left, np.ndarray) else np.uint8
    lhs = np.asarray(left, dtype=np.float32)
    rhs = np.asarray(right, dtype=np.float32)
    if lhs.shape != rhs.shape:
        raise ValueError("pixels have different channel counts")
    total = lhs * np.float32(left_weight) + rhs * np.float32(right_weight)
    result = _clamp(total, dtype)
    if isinstance(left, np.ndarray):
        return result
    return tuple(result.tolist())


def interpolate(left: Pixel, right: Pixel, left_weight: float) -> Pixel:
    """Same as ``weighted_sum(left, right, w, 1 - w)``."""
    right_weight = float(np.float32(1.0) - np.float32(left_weight))
    return weighted_sum(left, right, left_weight, right_weight)