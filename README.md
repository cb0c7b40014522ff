# pixelproc

Image processing routines working on NumPy arrays. Grayscale images are
2-D arrays of shape `(height, width)`; colour images are 3-D arrays of
shape `(height, width, channels)`. Pixel coordinates are given as `(x, y)`.

## Installation

```
pip install pixelproc
```

To run the test suite, install the `test` extra and run pytest:

```
pip install "pixelproc[test]"
pytest
```

## Modules

- `pixelproc.noise` – `gaussian_noise` and `salt_and_pepper_noise` return a
  noisy copy; `gaussian_noise_inplace` and `salt_and_pepper_noise_inplace`
  change a NumPy array in place. Noise is drawn from a NumPy generator
  seeded with the given unsigned 64-bit `seed`, and results are clamped to
  the image's dtype.
- `pixelproc.stats` – `histogram` and `cumulative_histogram` give one
  256-bin array per channel of an 8-bit image (as `ChannelHistogram` and
  `CumulativeChannelHistogram`); `percentile` returns the least intensity
  at or below which at least `p`% of pixels lie; `root_mean_squared_error`
  and `peak_signal_to_noise_ratio` compare two images of the same shape.
- `pixelproc.region_labelling` – `connected_components(image, conn,
  background)` labels foreground components from 1, with
  `Connectivity.FOUR` or `Connectivity.EIGHT`. Pixels of different values
  never share a component. The result is a `uint32` array.
- `pixelproc.suppress` – `suppress_non_maximum(image, radius)` zeroes every
  pixel that is not the greatest in its `2 * radius + 1` square window;
  `local_maxima(items, radius)` does the same for any objects with `x`, `y`
  and `score` attributes. Ties go to the lexicographically smallest position.
- `pixelproc.template_matching` – `match_template(image, template, method)`
  scores every placement of a template using one of the
  `MatchTemplateMethod` members (sum of squared errors or cross correlation,
  plain or normalized) and returns a `float32` array; `find_extremes`
  returns an `Extremes` with the largest and smallest values and their
  locations.
- `pixelproc.seam_carving` – `remove_vertical_seam(image, seam)` removes one
  pixel per row along a `VerticalSeam` (x-coordinates from the bottom row to
  the top); `draw_vertical_seams(image, seams)` draws seams, in the order
  they were removed, in red on an RGB copy of a grayscale image.
- `pixelproc.union_find` – `DisjointSetForest` with `union`, `find`,
  `root`, `num_trees` and `trees`, using union by size and path halving.
- `pixelproc.rect` – `Rect`, built as `Rect.at(x, y).of_size(width,
  height)`, with `left`, `top`, `right`, `bottom`, `intersect` and
  `contains`.
- `pixelproc.point` – `Point` with addition and subtraction, `rotate` and
  `invert_rotation` by a `Rotation.from_angle(theta)`, `distance`,
  `distance_sq`, and `Line.from_points` with `distance_from_point`.
- `pixelproc.pixelops` – `weighted_sum` and `interpolate` of two pixels,
  clamped to the channel type, and `weighted_channel_sum` for single values.
- `pixelproc.images` – `gray_image`, `rgb_image` and `rgba_image` build
  arrays from nested lists; `gray_bench_image` and `rgb_bench_image` make
  non-constant test images; `load_image` reads a file with Pillow and raises
  `OSError` if it cannot.
- `pixelproc.diffs` – `pixel_diffs`, `pixel_diff_summary`,
  `significant_pixel_diff_summary` and `describe_pixel_diffs` find and
  describe differing pixels; `assert_pixels_eq` and
  `assert_pixels_eq_within` raise `PixelMismatchError`, and
  `assert_dimensions_match` raises `DimensionMismatchError`.
- `pixelproc.property_testing` – `random_gray_image` and `random_rgb_image`
  draw small random images from a NumPy generator, `shrink` yields smaller
  candidates of an image, and `describe_image` renders one as text.

Invalid arguments raise `ValueError` (or `IndexError` for elements outside a
`DisjointSetForest`).

## Examples

```python
from pixelproc.images import gray_image
from pixelproc.region_labelling import Connectivity, connected_components

image = gray_image([
    [1, 0, 1, 1],
    [0, 1, 1, 0],
    [0, 0, 0, 0],
    [0, 0, 0, 1],
])

labels = connected_components(image, Connectivity.EIGHT, 0)
# [[1 0 1 1]
#  [0 1 1 0]
#  [0 0 0 0]
#  [0 0 0 2]]
```

```python
from pixelproc.images import gray_image
from pixelproc.stats import percentile

image = gray_image([[1, 2, 3, 4, 5], [6, 7, 8, 9, 10]])
percentile(image, 15)  # 2
```

```python
from pixelproc.pixelops import weighted_sum

weighted_sum((10, 20, 30), (100, 80, 60), 0.7, 0.3)  # (37, 38, 39)
```

## What it does not do

- There is no command-line tool and no image viewer; results are arrays,
  which can be saved or shown with Pillow or any other library.
- Seam carving is limited to removing and drawing seams you supply: the
  package does not compute image gradients, find minimal-energy seams or
  shrink an image's width by itself.