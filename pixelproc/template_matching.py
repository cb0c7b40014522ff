"""Template matching on grayscale images."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view


class MatchTemplateMethod(Enum):
    """How the match between a template and an image region is scored."""

    SUM_OF_SQUARED_ERRORS = "sum_of_squared_errors"
    """Sum of squared intensity differences; smaller is better."""
    SUM_OF_SQUARED_ERRORS_NORMALIZED = "sum_of_squared_errors_normalized"
    """Sum of squared errors divided by a normalization term."""
    CROSS_CORRELATION = "cross_correlation"
    """Sum of products of intensities; larger is better."""
    CROSS_CORRELATION_NORMALIZED = "cross_correlation_normalized"
    """Cross correlation divided by a normalization term."""

    @property
    def normalized(self) -> bool:
        return self in (
            MatchTemplateMethod.SUM_OF_SQUARED_ERRORS_NORMALIZED,
            MatchTemplateMethod.CROSS_CORRELATION_NORMALIZED,
        )

    @property
    def squared_errors(self) -> bool:
        return self in (
            MatchTemplateMethod.SUM_OF_SQUARED_ERRORS,
            MatchTemplateMethod.SUM_OF_SQUARED_ERRORS_NORMALIZED,
        )


def _gray(image, name: str) -> np.ndarray:
    array = np.asarray(image)
    if array.ndim != 2:
        raise ValueError(f"{name} must be a single-channel image")
    return array


def match_template(image, template, method: MatchTemplateMethod) -> np.ndarray:
    """Slide ``template`` over ``image`` and score every placement.

    The result is a ``float32`` array of shape
    ``(image_height - template_height + 1, image_width - template_width + 1)``.
    Raises ValueError if the template is larger than the image in either
    dimension.
    """
    image = _gray(image, "image")
    template = _gray(template, "template")
    image_height, image_width = image.shape
    template_height, template_width = template.shape

    if image_width < template_width:
        raise ValueError("image width must be greater than or equal to template width")
    if image_height < template_height:
        raise ValueError(
            "image height must be greater than or equal to template height"
        )

    image_f = image.astype(np.float32)
    template_f = template.astype(np.float32)
    windows = sliding_window_view(image_f, (template_height, template_width))

    if method.squared_errors:
        terms = (windows - template_f) ** 2
    else:
        terms = windows * template_f
    scores = terms.sum(axis=(2, 3), dtype=np.float32)

    if method.normalized:
        squared = image.astype(np.uint64) ** 2
        region_sums = (
            sliding_window_view(squared, (template_height, template_width))
            .sum(axis=(2, 3))
            .astype(np.float32)
        )
        template_squared_sum = np.float32(
            (template_f * template_f).sum(dtype=np.float32)
        )
        norm = np.sqrt(region_sums * template_squared_sum).astype(np.float32)
        positive = norm > 0
        safe_norm = np.where(positive, norm, np.float32(1))
        scores = np.where(positive, scores / safe_norm, scores)

    return np.ascontiguousarray(scores, dtype=np.float32)


@dataclass(frozen=True)
class Extremes:
    """The largest and smallest values of an image and their ``(x, y)`` locations."""

    max_value: Any
    min_value: Any
    max_value_location: tuple[int, int]
    min_value_location: tuple[int, int]


def find_extremes(image) -> Extremes:
    """Find the largest and smallest values of a grayscale image.

    Where a value occurs several times, the first location in row-major
    order is reported. Raises ValueError for an empty image.
    """
    image = _gray(image, "image")
    if image.size == 0:
        raise ValueError("image must be non-empty")
    width = image.shape[1]
    flat = image.ravel()
    max_index = int(np.argmax(flat))
    min_index = int(np.argmin(flat))
    return Extremes(
        max_value=flat[max_index].item(),
        min_value=flat[min_index].item(),
        max_value_location=(max_index % width, max_index // width),
        min_value_location=(min_index % width, min_index // width),
    )