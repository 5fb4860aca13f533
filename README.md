# tinterrain

Building blocks for turning digital elevation models (DEMs) into triangulated
meshes. The package is a library; it has no command-line program.

## What is in it

- `tinterrain.raster.Raster`: a grid of values (row 0 at the top) with a world
  position (`pos_x`, `pos_y` of the lower left corner), a `cell_size` and a
  `no_data_value`. It can crop (`crop`, `crop_ll`), convert between row and
  column indices and world coordinates (`col2x`, `x2col`, `row2y`, `y2row`,
  `row_ll2y`), report its bounding box and yield `(x, y, value)` vertices.
- `tinterrain.raster_tools`: `integer_downsample_mean`, `convolution_filter`,
  `max_filter`, `flip_data_x`, `flip_data_y`, `find_minmax`,
  `get_bounding_box3d`, and `sample_nearest_valid_avg`, which estimates a value
  for a no-data cell from the nearest valid cells.
- `tinterrain.dense_meshing`: `generate_tin_dense_quadwalk(raster, step)`
  builds a `GridMesh` (vertices and counter-clockwise faces) with one vertex
  every `step` cells, always including the last row and column.
- `tinterrain.geometrix`: `Edge`, `BBox2D`, `BBox3D`, sort keys for vertices
  and triangles, `triangle_semantic_equal` and the upward-facing tests.
- `tinterrain.clipping`: line intersection, side-of-line tests and clipping of
  2.5D triangles (2D triangles carrying a height) to the unit square with
  `clip_25d_triangles_to_01_quadrant`.
- `tinterrain.predicates`: `tri_area`, `ccw`, `left_of`, `right_of`,
  `in_circle`, `Line` and `Plane`.
- `tinterrain.candidates`: `Candidate` and the priority queue `CandidateList`
  for greedy refinement, plus `order_triangle_points` and `is_no_data`.
- `tinterrain.objpool`: `ObjPool` and its index handles `PoolPtr`.
- `tinterrain.tiles`: `BoundingBox`, `ZoomRange` and `tile_size_in_meters` for
  Web Mercator tiles.
- `tinterrain.fileformat`: `FileFormat`, recognised by name or file extension
  regardless of case, and the `MeshMode` each format prefers.
- `tinterrain.log`, `tinterrain.output` and `tinterrain.text`: leveled
  diagnostics, writing to stdout, and tokenising strings.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Example

```python
from tinterrain.raster import Raster
from tinterrain.dense_meshing import generate_tin_dense_quadwalk

dem = Raster(4, 3)
dem.cell_size = 10.0
for r in range(3):
    for c in range(4):
        dem.set_value(r, c, float(r * 4 + c))

mesh = generate_tin_dense_quadwalk(dem, 1)
print(mesh.poly_count())   # 12 triangles
```

File formats are recognised case-insensitively:

```python
from tinterrain.fileformat import FileFormat, MeshMode

fmt = FileFormat.from_fileext(".OBJ")
assert fmt is FileFormat.OBJ
assert fmt.optimal_mesh_mode() is MeshMode.decomposed
```

Diagnostics go to stderr at level INFO by default:

```python
from tinterrain.log import LogLevel, LogStream, log, set_log_stream

set_log_stream(LogStream.STDOUT)
log(LogLevel.INFO, "meshing done")
```

## What it does not do

- It reads and writes no files: there are no loaders for elevation rasters
  and no writers for OBJ, OFF, GeoJSON or quantized-mesh output.
  `FileFormat` only names the formats.
- The only meshing method is the dense grid. There is no greedy-insertion
  (Delaunay refinement) mesher; `predicates`, `candidates` and `objpool`
  provide pieces such a mesher would use.
- It does not cut meshes into map tiles or write tile directories.
- There is no command-line tool.