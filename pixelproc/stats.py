"""Statistical properties of images."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from pixelproc.diffs import assert_dimensions_match


@dataclass
class ChannelHistogram:
    """Per-channel histograms of an 8-bit image."""

    channels: list[np.ndarray]


@dataclass
class CumulativeChannelHistogram:
    """Per-channel cumulative histograms of an 8-bit image."""

    channels: list[np.ndarray]


def _as_channels(image: np.ndarray) -> np.ndarray:
    return image[..., np.newaxis] if image.ndim == 2 else image


def histogram(image) -> ChannelHistogram:
    """Return one 256-bin histogram per channel of an 8-bit image."""
    image = np.asarray(image)
    if image.dtype != np.uint8:
        raise ValueError("histograms need an image with 8 bits per channel")
    planes = _as_channels(image)
    return ChannelHistogram(
        [
            np.bincount(planes[..., c].ravel(), minlength=256).astype(np.int64)
            for c in range(planes.shape[-1])
        ]
    )


def cumulative_histogram(image) -> CumulativeChannelHistogram:
    """Return one 256-bin cumulative histogram per channel."""
    return CumulativeChannelHistogram(
        [np.cumsum(channel) for channel in histogram(image).channels]
    )


def percentile(image, p: int) -> int:
    """Return the least intensity ``x`` such that at least ``p``% of pixels are <= ``x``."""
    if not 0 <= p <= 100:
        raise ValueError("requested percentile must be between 0 and 100")
    cumulative = cumulative_histogram(image).channels[0]
    total = int(cumulative[255])
    if total == 0:
        raise ValueError("percentile of an empty image is undefined")
    for intensity, count in enumerate(cumulative.tolist()):
        if 100 * count // total >= p:
            return intensity
    raise AssertionError("unreachable: the last bin holds every pixel")


def _mean_squared_error(left, right) -> float:
    left = np.asarray(left)
    right = np.asarray(right)
    assert_dimensions_match(left, right)
    if left.shape != right.shape:
        raise ValueError("images have different channel counts")
    if left.size == 0:
        return math.nan
    diff = left.astype(np.float64) - right.astype(np.float64)
    return float(np.sum(diff * diff)) / left.size


def root_mean_squared_error(left, right) -> float:
    """Square root of the mean squared difference over all channels."""
    return math.sqrt(_mean_squared_error(left, right))


def peak_signal_to_noise_ratio(original, noisy) -> float:
    """Peak signal-to-noise ratio of ``noisy`` against ``original``, in decibels."""
    original = np.asarray(original)
    dtype = original.dtype
    if np.issubdtype(dtype, np.integer):
        peak = float(np.iinfo(dtype).max)
    else:
        peak = float(np.finfo(dtype).max)
    mse = _mean_squared_error(original, noisy)
    if mse == 0:
        return math.inf
    return 20.0 * math.log10(peak) - 10.0 * math.log10(mse)