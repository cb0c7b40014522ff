import numpy as np
import pytest

from pixelproc.template_matching import (
    Extremes,
    MatchTemplateMethod,
    find_extremes,
    match_template,
)

IMAGE = np.array([[1, 4, 2], [2, 1, 3], [3, 3, 4]], dtype=np.uint8)
TEMPLATE = np.array([[1, 2], [3, 4]], dtype=np.uint8)


def test_panics_if_image_width_is_less_than_template_width():
    with pytest.raises(ValueError):
        match_template(
            np.zeros((5, 5), np.uint8),
            np.zeros((5, 6), np.uint8),
            MatchTemplateMethod.SUM_OF_SQUARED_ERRORS,
        )


def test_panics_if_image_height_is_less_than_template_height():
    with pytest.raises(ValueError):
        match_template(
            np.zeros((5, 5), np.uint8),
            np.zeros((6, 5), np.uint8),
            MatchTemplateMethod.SUM_OF_SQUARED_ERRORS,
        )


def test_handles_template_of_same_size_as_image():
    result = match_template(
        np.zeros((5, 5), np.uint8),
        np.zeros((5, 5), np.uint8),
        MatchTemplateMethod.SUM_OF_SQUARED_ERRORS,
    )
    np.testing.assert_array_equal(result, np.array([[0.0]], dtype=np.float32))


def test_normalization_handles_zero_norm():
    result = match_template(
        np.zeros((1, 1), np.uint8),
        np.zeros((1, 1), np.uint8),
        MatchTemplateMethod.SUM_OF_SQUARED_ERRORS_NORMALIZED,
    )
    np.testing.assert_array_equal(result, np.array([[0.0]], dtype=np.float32))


def test_sum_of_squared_errors():
    result = match_template(IMAGE, TEMPLATE, MatchTemplateMethod.SUM_OF_SQUARED_ERRORS)
    expected = np.array([[14.0, 14.0], [3.0, 1.0]], dtype=np.float32)
    assert result.dtype == np.float32
    np.testing.assert_array_equal(result, expected)


def _normalized(numerators, region_sums):
    tss = np.float32(30.0)
    return np.array(
        [
            [np.float32(n) / np.sqrt(np.float32(r) * tss) for n, r in zip(nrow, rrow)]
            for nrow, rrow in zip(numerators, region_sums)
        ],
        dtype=np.float32,
    )


def test_sum_of_squared_errors_normalized():
    result = match_template(
        IMAGE, TEMPLATE, MatchTemplateMethod.SUM_OF_SQUARED_ERRORS_NORMALIZED
    )
    expected = _normalized([[14.0, 14.0], [3.0, 1.0]], [[22.0, 30.0], [23.0, 35.0]])
    np.testing.assert_allclose(result, expected, rtol=1e-6)


def test_cross_correlation():
    result = match_template(IMAGE, TEMPLATE, MatchTemplateMethod.CROSS_CORRELATION)
    expected = np.array([[19.0, 23.0], [25.0, 32.0]], dtype=np.float32)
    np.testing.assert_array_equal(result, expected)


def test_cross_correlation_normalized():
    result = match_template(
        IMAGE, TEMPLATE, MatchTemplateMethod.CROSS_CORRELATION_NORMALIZED
    )
    expected = _normalized([[19.0, 23.0], [25.0, 32.0]], [[22.0, 30.0], [23.0, 35.0]])
    np.testing.assert_allclose(result, expected, rtol=1e-6)


def test_result_shape():
    image = np.zeros((7, 10), np.uint8)
    template = np.zeros((3, 4), np.uint8)
    result = match_template(image, template, MatchTemplateMethod.CROSS_CORRELATION)
    assert result.shape == (5, 7)


def test_find_extremes():
    image = np.array([[10, 7, 8, 1], [9, 15, 4, 2]], dtype=np.uint8)
    expected = Extremes(
        max_value=15,
        min_value=1,
        max_value_location=(1, 1),
        min_value_location=(3, 0),
    )
    assert find_extremes(image) == expected


def test_find_extremes_prefers_first_location():
    image = np.array([[3, 5], [5, 3]], dtype=np.uint8)
    extremes = find_extremes(image)
    assert extremes.max_value_location == (1, 0)
    assert extremes.min_value_location == (0, 0)


def test_find_extremes_rejects_empty_image():
    with pytest.raises(ValueError):
        find_extremes(np.zeros((0, 0), np.uint8))