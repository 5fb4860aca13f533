"""Terrain rasters, raster tools, geometry helpers and dense grid meshing for elevation models."""

__version__ = "0.1.0"