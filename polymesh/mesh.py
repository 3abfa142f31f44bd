"""Polygonal mesh read from the Cell0Ds, Cell1Ds and Cell2Ds CSV files."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeVar, Union

PathLike = Union[str, "os.PathLike[str]"]
T = TypeVar("T")

CELL0DS_FILE = "Cell0Ds.csv"
CELL1DS_FILE = "Cell1Ds.csv"
CELL2DS_FILE = "Cell2Ds.csv"


class MeshImportError(Exception):
    """Raised when a mesh file is missing, empty or malformed."""


@dataclass
class PolygonalMesh:
    """Points, edges and polygons of a planar mesh.

    Point coordinates are ``(x, y, z)`` triples stored at the position given
    by the point id; edge extrema are ``(start, end)`` pairs stored the same way.
    Markers map a non-zero marker to the ids carrying it, in reading order.
    """

    cell0ds_ids: list[int] = field(default_factory=list)
    cell0ds_coordinates: list[tuple[float, float, float]] = field(default_factory=list)
    marker_cell0ds: dict[int, list[int]] = field(default_factory=dict)

    cell1ds_ids: list[int] = field(default_factory=list)
    cell1ds_extrema: list[tuple[int, int]] = field(default_factory=list)
    marker_cell1ds: dict[int, list[int]] = field(default_factory=dict)

    cell2ds_ids: list[int] = field(default_factory=list)
    cell2ds_vertices: dict[int, list[int]] = field(default_factory=dict)
    cell2ds_edges: dict[int, list[int]] = field(default_factory=dict)

    @property
    def num_cell0ds(self) -> int:
        return len(self.cell0ds_coordinates)

    @property
    def num_cell1ds(self) -> int:
        return len(self.cell1ds_extrema)

    @property
    def num_cell2ds(self) -> int:
        return len(self.cell2ds_ids)


def _unsigned(token: str) -> int:
    value = int(token)
    if value < 0:
        raise ValueError(f"negative value {value}")
    return value


def _take(tokens: Iterator[str], convert: Callable[[str], T], where: str) -> T:
    try:
        token = next(tokens)
    except StopIteration:
        raise MeshImportError(f"{where}: missing value") from None
    try:
        return convert(token)
    except ValueError as exc:
        raise MeshImportError(f"{where}: invalid value '{token}'") from exc


def _read_records(path: PathLike, what: str) -> list[tuple[str, Iterator[str]]]:
    """Return the data lines of ``path`` (header dropped) as token iterators."""
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError as exc:
        raise MeshImportError(f"File '{path}' cannot be opened") from exc

    records = [
        (f"{path}:{number}", iter(line.replace(";", " ").split()))
        for number, line in enumerate(lines[1:], start=2)
        if line.strip()
    ]
    if not records:
        raise MeshImportError(f"There is no {what}")
    return records


def _check_slot(identifier: int, count: int, where: str) -> None:
    if identifier >= count:
        raise MeshImportError(f"{where}: id {identifier} out of range for {count} entries")


def _add_marker(markers: dict[int, list[int]], marker: int, identifier: int) -> None:
    if marker != 0:
        markers.setdefault(marker, []).append(identifier)


def import_cell0ds(mesh: PolygonalMesh, path: PathLike = CELL0DS_FILE) -> None:
    """Read points (``id;marker;x;y``) into ``mesh``."""
    records = _read_records(path, "Cell 0D")
    count = len(records)
    mesh.cell0ds_ids = []
    mesh.cell0ds_coordinates = [(0.0, 0.0, 0.0)] * count
    mesh.marker_cell0ds = {}

    for where, tokens in records:
        identifier = _take(tokens, _unsigned, where)
        marker = _take(tokens, _unsigned, where)
        x = _take(tokens, float, where)
        y = _take(tokens, float, where)
        _check_slot(identifier, count, where)
        mesh.cell0ds_coordinates[identifier] = (x, y, 0.0)
        mesh.cell0ds_ids.append(identifier)
        _add_marker(mesh.marker_cell0ds, marker, identifier)


def import_cell1ds(mesh: PolygonalMesh, path: PathLike = CELL1DS_FILE) -> None:
    """Read edges (``id;marker;origin;end``) into ``mesh``."""
    records = _read_records(path, "cell 1D")
    count = len(records)
    mesh.cell1ds_ids = []
    mesh.cell1ds_extrema = [(0, 0)] * count
    mesh.marker_cell1ds = {}

    for where, tokens in records:
        identifier = _take(tokens, _unsigned, where)
        marker = _take(tokens, _unsigned, where)
        origin = _take(tokens, _unsigned, where)
        end = _take(tokens, _unsigned, where)
        _check_slot(identifier, count, where)
        mesh.cell1ds_extrema[identifier] = (origin, end)
        mesh.cell1ds_ids.append(identifier)
        _add_marker(mesh.marker_cell1ds, marker, identifier)


def import_cell2ds(mesh: PolygonalMesh, path: PathLike = CELL2DS_FILE) -> None:
    """Read polygons (``id;marker;n;vertices...;m;edges...``) into ``mesh``."""
    records = _read_records(path, "cell 2D")
    mesh.cell2ds_ids = []
    mesh.cell2ds_vertices = {}
    mesh.cell2ds_edges = {}

    for where, tokens in records:
        identifier = _take(tokens, _unsigned, where)
        _take(tokens, _unsigned, where)  # marker, unused for polygons
        num_vertices = _take(tokens, _unsigned, where)
        vertices = [_take(tokens, _unsigned, where) for _ in range(num_vertices)]
        num_edges = _take(tokens, _unsigned, where)
        edges = [_take(tokens, _unsigned, where) for _ in range(num_edges)]
        mesh.cell2ds_ids.append(identifier)
        mesh.cell2ds_vertices[identifier] = vertices
        mesh.cell2ds_edges[identifier] = edges


def import_mesh(directory: PathLike = ".") -> PolygonalMesh:
    """Load the three mesh files found in ``directory``."""
    base = Path(directory)
    mesh = PolygonalMesh()
    import_cell0ds(mesh, base / CELL0DS_FILE)
    import_cell1ds(mesh, base / CELL1DS_FILE)
    import_cell2ds(mesh, base / CELL2DS_FILE)
    return mesh