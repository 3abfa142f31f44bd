# polymesh

`polymesh` reads a two-dimensional polygonal mesh stored as three
semicolon-separated CSV files. It checks that the mesh is geometrically sound
and writes its vertices and edges as ASCII UCD (`.inp`) files that ParaView
can open.

It has no dependencies outside the Python standard library (Python 3.10 or
later).

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Input files

The mesh is described by three files. Each one starts with a header line,
which is skipped. Fields are separated by `;`, and blank lines are ignored.

| File          | Columns                                             |
|---------------|-----------------------------------------------------|
| `Cell0Ds.csv` | `Id;Marker;X;Y`                                     |
| `Cell1Ds.csv` | `Id;Marker;Origin;End`                              |
| `Cell2Ds.csv` | `Id;Marker;NumVertices;Vertex...;NumEdges;Edge...`  |

Ids, markers, counts and indices must be non-negative integers. Point ids
and edge ids must each be smaller than the number of lines in their file,
because each entry is stored at the position its id gives. A marker of `0`
means the cell carries no marker. Any other value groups the cell under that
marker. Markers are recorded for points and edges only.

## Command line

```
polymesh [DIRECTORY] [--output-dir OUTPUT_DIR]
```

`DIRECTORY` is the directory that holds the three CSV files. It defaults to
the current directory. `--output-dir` is the directory that receives the
exported files. It also defaults to the current directory, and it is created
if it does not exist.

The command:

1. imports the mesh,
2. checks that every edge joins two existing vertices and has non-zero length,
3. checks that every polygon has at least three existing vertices and
   non-zero area,
4. prints the point and edge markers, sorted by marker,
5. writes `Cell0Ds.inp` (one point cell per vertex) and `Cell1Ds.inp`
   (one line cell per edge).

The command's messages are in Italian. If a file is missing, empty or
malformed, or if the mesh fails a check, the command prints the reason on
standard error and exits with status 1. When every step succeeds it exits
with status 0.

## Library use

```python
from polymesh.mesh import import_mesh, MeshImportError
from polymesh.checks import check_edges, check_polygons, format_markers, MeshValidationError

try:
    mesh = import_mesh(".")
    lengths = check_edges(mesh)      # list of edge lengths
    areas = check_polygons(mesh)     # {polygon id: area}
except (MeshImportError, MeshValidationError) as error:
    print(f"bad mesh: {error}")
else:
    print(format_markers(mesh), end="")
```

### `polymesh.mesh`

- `PolygonalMesh` is a dataclass holding the mesh:
  - point ids, coordinates as `(x, y, 0.0)` triples, and point markers;
  - edge ids, extrema as `(start, end)` pairs, and edge markers;
  - polygon ids, with the vertices and edges of each polygon keyed by id.
  - The properties `num_cell0ds`, `num_cell1ds` and `num_cell2ds` give the
    number of points, edges and polygons.
- `import_cell0ds(mesh, path)`, `import_cell1ds(mesh, path)` and
  `import_cell2ds(mesh, path)` each read one file into an existing mesh.
  `path` defaults to the standard file name in the current directory.
- `import_mesh(directory)` reads all three files from `directory` and returns
  a new mesh.
- `MeshImportError` is raised when a file cannot be opened, has no data
  lines, holds a missing or invalid value, or gives an id out of range.

### `polymesh.checks`

- `check_edges(mesh)` returns the length of every edge. It raises
  `MeshValidationError` if an edge refers to a missing vertex or is shorter
  than `1e-16`.
- `check_polygons(mesh)` returns each polygon's area, computed with the
  shoelace formula. It raises `MeshValidationError` if a polygon has fewer
  than three vertices, refers to a missing vertex, or has an area below
  `1e-16`.
- `format_markers(mesh)` returns the marker report that the command prints.

`MeshValidationError` is a subclass of `ValueError`.

### `polymesh.ucd`

This module writes UCD ASCII files for any set of points and cells. Points
are `(x, y, z)` triples, and cell point indices are zero-based.

- `export_points` writes one point cell per point. Any properties passed to
  it are attached to those cells.
- `export_segments` writes line cells from `(start, end)` pairs.
- `export_polygons` writes triangles and quadrilaterals.
- `export_polyhedra` writes tetrahedra.
- `write_ucd_ascii` is the underlying writer. It takes explicit `UCDCell`
  objects (a `CellType`, point ids and a material id) and optional point and
  cell `UCDProperty` data.

Coordinates and property values are written in scientific notation with 16
decimal digits. A list of materials is used only when it has exactly one
entry per cell. Otherwise every cell gets material `0`.

`ValueError` is raised for:

- polygons that are not triangles or quadrilaterals,
- polyhedra that are not tetrahedra,
- cells of a type that has no UCD label,
- properties holding fewer values than the items they describe.

## Limitations

The command exports only the vertices and the edges. Polygons are checked
but are not written to a UCD file. `export_polygons` can write them when
every polygon is a triangle or a quadrilateral.