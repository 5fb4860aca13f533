"""Mesh and raster file formats and the mesh layout each prefers."""

from __future__ import annotations

import enum

__all__ = ["MeshMode", "FileFormat"]


class MeshMode(enum.Enum):
    """How a mesh stores its geometry."""

    none = "none"
    decomposed = "decomposed"
    triangles = "triangles"


_NAMES = {
    0: "",
    1: "off",
    2: "obj",
    3: "asc",
    4: "xyz",
    5: "terrain",
    6: "json",
    7: "geojson",
    8: "tiff",
    9: "tif",
}


class FileFormat(enum.Enum):
    """Known file formats, identified by their lower-case extension."""

    NONE = 0
    OFF = 1
    OBJ = 2
    ASC = 3
    XYZ = 4
    TERRAIN = 5
    JSON = 6
    GEOJSON = 7
    TIFF = 8
    TIF = 9

    def to_string(self) -> str:
        """Return the format name; empty for NONE."""
        return _NAMES[self.value]

    def __str__(self) -> str:
        return self.to_string()

    @classmethod
    def from_string(cls, s: str) -> "FileFormat":
        """Look up a format by name, ignoring case; unknown names give NONE."""
        lowered = s.lower()
        for fmt in cls:
            if fmt is not cls.NONE and _NAMES[fmt.value] == lowered:
                return fmt
        return cls.NONE

    @classmethod
    def from_fileext(cls, s: str) -> "FileFormat":
        """Look up a format by file extension, with or without a leading dot."""
        return cls.from_string(s[1:] if s.startswith(".") else s)

    def optimal_mesh_mode(self) -> MeshMode:
        """Return the mesh layout best suited for writing this format."""
        if self in (FileFormat.OBJ, FileFormat.OFF):
            return MeshMode.decomposed
        if self is FileFormat.TERRAIN:
            return MeshMode.triangles
        return MeshMode.none