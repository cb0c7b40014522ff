"""Image processing routines on NumPy arrays: noise, statistics, region
labelling, non-maximum suppression, template matching, seam removal and
supporting geometry and comparison helpers."""

__version__ = "0.1.0"