"""Sanity checks on an imported polygonal mesh."""

from __future__ import annotations

import math
from collections.abc import Iterable

from polymesh.mesh import PolygonalMesh

EDGE_TOLERANCE = 1e-16
AREA_TOLERANCE = 1e-16


class MeshValidationError(ValueError):
    """Raised when a mesh has a degenerate or ill-formed element."""


def check_edges(mesh: PolygonalMesh) -> list[float]:
    """Return every edge's length, raising if an edge is degenerate or dangling."""
    count = mesh.num_cell0ds
    coordinates = mesh.cell0ds_coordinates
    lengths = []
    for start, end in mesh.cell1ds_extrema:
        if start >= count or end >= count:
            raise MeshValidationError(
                "Indice non valido tra gli estremi dell'arco: "
                f"inizio = {start}, fine = {end}, limite massimo = {count - 1}"
            )
        x1, y1 = coordinates[start][:2]
        x2, y2 = coordinates[end][:2]
        length = math.hypot(x2 - x1, y2 - y1)
        if length < EDGE_TOLERANCE:
            raise MeshValidationError(
                f"Spigolo con lunghezza nulla tra i punti {start} e {end}"
            )
        lengths.append(length)
    return lengths


def check_polygons(mesh: PolygonalMesh) -> dict[int, float]:
    """Return each polygon's area by id, raising if a polygon is degenerate."""
    count = mesh.num_cell0ds
    areas = {}
    for polygon_id, vertices in mesh.cell2ds_vertices.items():
        if len(vertices) < 3:
            raise MeshValidationError(
                f"Poligono con meno di 3 vertici all'indice {polygon_id}"
            )
        for vertex in vertices:
            if vertex >= count:
                raise MeshValidationError(
                    f"Vertice non valido {vertex} nel poligono {polygon_id}"
                )
        points = [mesh.cell0ds_coordinates[vertex] for vertex in vertices]
        total = sum(
            a[0] * b[1] - b[0] * a[1] for a, b in zip(points, points[1:] + points[:1])
        )
        area = 0.5 * abs(total)
        if area < AREA_TOLERANCE:
            raise MeshValidationError(f"Poligono con area nulla all'indice {polygon_id}")
        areas[polygon_id] = area
    return areas


def _marker_lines(kind: str, markers: dict[int, list[int]]) -> Iterable[str]:
    for marker, ids in sorted(markers.items()):
        yield f"{kind}: {marker} IDs = [" + "".join(f" {i}" for i in ids) + " ]"


def format_markers(mesh: PolygonalMesh) -> str:
    """Return the report listing point and edge markers, in marker order."""
    lines = ["Marker registrati:"]
    lines.extend(_marker_lines("Marker0D", mesh.marker_cell0ds))
    lines.append("")
    lines.extend(_marker_lines("Marker1D", mesh.marker_cell1ds))
    lines.append("")
    return "\n".join(lines) + "\n"