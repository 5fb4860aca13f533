[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinterrain"
version = "0.1.0"
description = "Terrain rasters, geometry helpers and dense triangulated meshes for elevation models"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["terrain", "dem", "tin", "mesh", "raster", "gis", "triangulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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
packages = ["tinterrain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
