[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "pixellab"
version = "0.1.0"
description = "Software framebuffer drawing: thick lines, scanline polygon filling and Conway's Game of Life"
requires-python = ">=3.10"
keywords = ["framebuffer", "bresenham", "polygon", "scanline", "game-of-life", "raster"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pillow",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixellab-life = "pixellab.life_app:main"
pixellab-polygons = "pixellab.polygons:main"

[tool.setuptools.packages.find]
include = ["pixellab*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
