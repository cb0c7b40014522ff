"""Adding synthetic noise to images.

Images are numpy arrays of shape ``(height, width)`` or
``(height, width, channels)``.
"""

from __future__ import annotations

import math

import numpy as np


def _check_seed(seed: int) -> None:
    if not 0 <= seed < 2**64:
        raise ValueError("seed must be an unsigned 64-bit integer")


def _require_array(image) -> np.ndarray:
    if not isinstance(image, np.ndarray):
        raise TypeError("in-place noise needs a numpy array")
    return image


def _clamp(values: np.ndarray, dtype: np.dtype) -> np.ndarray:
    """Clamp float values into ``dtype``, truncating for integer types."""
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.integer):
        info = np.iinfo(dtype)
        return np.trunc(np.clip(values, info.min, info.max)).astype(dtype)
    return values.astype(dtype)


def _black_and_white(dtype: np.dtype) -> tuple:
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.integer):
        info = np.iinfo(dtype)
        return info.min, info.max
    if dtype == np.bool_:
        return False, True
    return 0.0, 1.0


def gaussian_noise_inplace(
    image: np.ndarray, mean: float, stddev: float, seed: int
) -> None:
    """Add independent Gaussian noise to every channel of ``image`` in place."""
    image = _require_array(image)
    if not (math.isfinite(stddev) and stddev >= 0):
        raise ValueError("stddev must be finite and non-negative")
    if not math.isfinite(mean):
        raise ValueError("mean must be finite")
    _check_seed(seed)
    rng = np.random.default_rng(seed)
    noise = rng.normal(mean, stddev, size=image.shape)
    image[...] = _clamp(image.astype(np.float64) + noise, image.dtype)


def gaussian_noise(image, mean: float, stddev: float, seed: int) -> np.ndarray:
    """Return a copy of ``image`` with independent Gaussian noise added."""
    out = np.array(image)
    gaussian_noise_inplace(out, mean, stddev, seed)
    return out


def salt_and_pepper_noise_inplace(image: np.ndarray, rate: float, seed: int) -> None:
    """Turn pixels black or white at the given ``rate``, in place.

    Black and white occur with equal probability.
    """
    image = _require_array(image)
    _check_seed(seed)
    rng = np.random.default_rng(seed)
    height, width = image.shape[:2]
    chosen = rng.random((height, width)) <= rate
    white = rng.random((height, width)) >= 0.5
    black_value, white_value = _black_and_white(image.dtype)
    image[chosen & white] = white_value
    image[chosen & ~white] = black_value


def salt_and_pepper_noise(image, rate: float, seed: int) -> np.ndarray:
    """Return a copy of ``image`` with salt-and-pepper noise at ``rate``."""
    out = np.array(image)
    salt_and_pepper_noise_inplace(out, rate, seed)
    return out