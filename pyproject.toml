[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "planegeo"
version = "0.1.0"
description = "Planar geometry types with coordinate rounding, a point quadtree and line simplification."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "geometry",
    "gis",
    "planar",
    "quadtree",
    "nearest-neighbour",
    "simplification",
    "douglas-peucker",
    "visvalingam",
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
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["planegeo"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
