import numpy as np
import pytest
from PIL import Image

from pixelproc.images import (
    gray_bench_image,
    gray_image,
    load_image,
    rgb_bench_image,
    rgb_image,
    rgba_image,
)


def test_gray_image_empty():
    image = gray_image([])
    assert image.shape == (0, 0)
    assert image.dtype == np.uint8


def test_gray_image_single_pixel():
    image = gray_image([[1]])
    assert image.tolist() == [[1]]


def test_gray_image_rows_and_columns():
    image = gray_image([[1, 2, 3], [4, 5, 6]])
    assert image.shape == (2, 3)
    assert image.ravel().tolist() == [1, 2, 3, 4, 5, 6]


def test_gray_image_with_dtype():
    image = gray_image([[1, 2, 3], [4, 5, 6]], dtype=np.int16)
    assert image.dtype == np.int16
    assert image.ravel().tolist() == [1, 2, 3, 4, 5, 6]


def test_gray_image_rejects_ragged_rows():
    with pytest.raises(ValueError):
        gray_image([[1, 2], [3]])


def test_rgb_image_single_row():
    image = rgb_image([[[1, 2, 3], [4, 5, 6]]])
    assert image.shape == (1, 2, 3)
    assert image.ravel().tolist() == [1, 2, 3, 4, 5, 6]


def test_rgb_image_two_rows():
    image = rgb_image([[[1, 2, 3], [4, 5, 6]], [[7, 8, 9], [10, 11, 12]]])
    assert image.ravel().tolist() == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12]


def test_rgb_image_empty_has_three_channels():
    assert rgb_image([]).shape == (0, 0, 3)


def test_rgb_image_rejects_wrong_channel_count():
    with pytest.raises(ValueError):
        rgb_image([[[1, 2, 3, 4]]])


def test_rgba_image_round_trip():
    rows = [[[1, 2, 3, 10], [4, 5, 6, 20]], [[7, 8, 9, 30], [10, 11, 12, 40]]]
    image = rgba_image(rows)
    assert image.shape == (2, 2, 4)
    assert image.tolist() == rows


def test_gray_bench_image_shape_and_periods():
    image = gray_bench_image(21, 18)
    assert image.shape == (18, 21)
    assert image.dtype == np.uint8
    assert np.array_equal(image[:, 7:14], image[:, 0:7])
    assert np.array_equal(image[6:12, :], image[0:6, :])


def test_gray_bench_image_is_not_constant():
    image = gray_bench_image(10, 10)
    assert image.min() < image.max()


def test_rgb_bench_image_channels_relate():
    image = rgb_bench_image(15, 9)
    assert image.shape == (9, 15, 3)
    red = image[..., 0].astype(int)
    green = image[..., 1].astype(int)
    blue = image[..., 2].astype(int)
    assert np.array_equal(image[..., 0], gray_bench_image(15, 9))
    assert np.array_equal(green, 255 - red)
    assert np.array_equal(blue, np.minimum(red, green))


def test_load_image_round_trip(tmp_path):
    original = gray_bench_image(12, 8)
    path = tmp_path / "bench.png"
    Image.fromarray(original).save(path)
    loaded = load_image(path)
    assert np.array_equal(loaded, original)


def test_load_image_missing_file_raises(tmp_path):
    with pytest.raises(OSError, match="Could not load image"):
        load_image(tmp_path / "missing.png")