[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelproc"
version = "0.1.0"
description = "Image processing routines on NumPy arrays: noise, statistics, region labelling, non-maximum suppression, template matching and seam removal."
requires-python = ">=3.10"
keywords = [
    "image processing",
    "numpy",
    "connected components",
    "template matching",
    "non-maximum suppression",
    "histogram",
    "union find",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pixelproc"]

[tool.pytest.ini_options]
addopts = "-ra"
