"""Export of points, segments, polygons and polyhedra to the AVS UCD ASCII format."""

from __future__ import annotations

import enum
import os
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]
Point = Sequence[float]

_SEPARATOR = " "


@dataclass(frozen=True)
class UCDProperty:
    """A named field attached to every point or every cell.

    ``data`` holds ``num_components`` values per item, item after item.
    """

    label: str
    unit_label: str
    num_components: int
    data: Sequence[float] = field(default_factory=tuple)


class CellType(enum.Enum):
    """Kinds of UCD cells."""

    UNKNOWN = -1
    POINT = 0
    LINE = 1
    TRIANGLE = 2
    QUADRILATERAL = 3
    HEXAHEDRON = 4
    PRISM = 5
    TETRAHEDRON = 6
    PYRAMID = 7


_CELL_LABELS = {
    CellType.LINE: "line",
    CellType.TRIANGLE: "tri",
    CellType.QUADRILATERAL: "quad",
    CellType.HEXAHEDRON: "hex",
    CellType.PRISM: "prism",
    CellType.TETRAHEDRON: "tet",
    CellType.PYRAMID: "pyr",
    CellType.POINT: "pt",
}


@dataclass(frozen=True)
class UCDCell:
    """A cell of a given type over zero-based point indices."""

    type: CellType
    point_ids: tuple[int, ...]
    material_id: int = 0

    def label(self) -> str:
        """Return the UCD keyword for this cell's type."""
        try:
            return _CELL_LABELS[self.type]
        except KeyError:
            raise ValueError("Type not supported") from None


def _material_for(materials: Sequence[int], index: int, count: int) -> int:
    return int(materials[index]) if len(materials) == count else 0


def _point_cells(points: Sequence[Point], materials: Sequence[int]) -> list[UCDCell]:
    count = len(points)
    return [
        UCDCell(CellType.POINT, (index,), _material_for(materials, index, count))
        for index in range(count)
    ]


def _line_cells(lines: Sequence[Sequence[int]], materials: Sequence[int]) -> list[UCDCell]:
    count = len(lines)
    return [
        UCDCell(
            CellType.LINE,
            (int(line[0]), int(line[1])),
            _material_for(materials, index, count),
        )
        for index, line in enumerate(lines)
    ]


def _polygon_cells(
    polygons_vertices: Sequence[Sequence[int]], materials: Sequence[int]
) -> list[UCDCell]:
    count = len(polygons_vertices)
    cells = []
    for index, vertices in enumerate(polygons_vertices):
        if len(vertices) == 3:
            polygon_type = CellType.TRIANGLE
        elif len(vertices) == 4:
            polygon_type = CellType.QUADRILATERAL
        else:
            raise ValueError("Polygon type not supported")
        cells.append(
            UCDCell(polygon_type, tuple(vertices), _material_for(materials, index, count))
        )
    return cells


def _polyhedra_cells(
    polyhedra_vertices: Sequence[Sequence[int]], materials: Sequence[int]
) -> list[UCDCell]:
    count = len(polyhedra_vertices)
    cells = []
    for index, vertices in enumerate(polyhedra_vertices):
        if len(vertices) != 4:
            raise ValueError("Polygon type not supported")
        cells.append(
            UCDCell(CellType.TETRAHEDRON, tuple(vertices), _material_for(materials, index, count))
        )
    return cells


def _format_float(value: float) -> str:
    return f"{float(value):.16e}"


def _property_lines(properties: Sequence[UCDProperty], count: int) -> Iterator[str]:
    if not properties:
        return
    yield str(len(properties)) + "".join(
        f"{_SEPARATOR}{prop.num_components}" for prop in properties
    )
    for prop in properties:
        yield f"{prop.label},{_SEPARATOR}{prop.unit_label}"
    for prop in properties:
        if len(prop.data) < prop.num_components * count:
            raise ValueError(
                f"Property '{prop.label}' holds {len(prop.data)} values, "
                f"{prop.num_components * count} needed"
            )
    for index in range(count):
        values = []
        for prop in properties:
            start = prop.num_components * index
            values.extend(prop.data[start:start + prop.num_components])
        yield str(index + 1) + "".join(f"{_SEPARATOR}{_format_float(v)}" for v in values)


def write_ucd_ascii(
    points: Sequence[Point],
    point_properties: Sequence[UCDProperty],
    cells: Sequence[UCDCell],
    cell_properties: Sequence[UCDProperty],
    file_path: PathLike,
) -> None:
    """Write points, cells and their properties to ``file_path`` as UCD ASCII.

    Each point is an ``(x, y, z)`` triple; cell point ids are zero-based.
    """
    sep = _SEPARATOR
    lines = [
        sep.join(
            str(n)
            for n in (len(points), len(cells), len(point_properties), len(cell_properties), 0)
        )
    ]
    for index, point in enumerate(points, start=1):
        coordinates = sep.join(_format_float(point[axis]) for axis in range(3))
        lines.append(f"{index}{sep}{coordinates}")
    for index, cell in enumerate(cells, start=1):
        ids = "".join(f"{sep}{point_id + 1}" for point_id in cell.point_ids)
        lines.append(f"{index}{sep}{cell.material_id}{sep}{cell.label()}{ids}")
    lines.extend(_property_lines(point_properties, len(points)))
    lines.extend(_property_lines(cell_properties, len(cells)))

    with open(file_path, "w", encoding="utf-8") as handle:
        handle.write("\n".join(lines) + "\n")


def export_points(
    file_path: PathLike,
    points: Sequence[Point],
    points_properties: Sequence[UCDProperty] = (),
    materials: Sequence[int] = (),
) -> None:
    """Write every point as a point cell; the properties are attached to those cells."""
    write_ucd_ascii(
        points, (), _point_cells(points, materials), points_properties, file_path
    )


def export_segments(
    file_path: PathLike,
    points: Sequence[Point],
    segments: Sequence[Sequence[int]],
    points_properties: Sequence[UCDProperty] = (),
    segments_properties: Sequence[UCDProperty] = (),
    materials: Sequence[int] = (),
) -> None:
    """Write segments, each a ``(start, end)`` pair of point indices, as line cells."""
    write_ucd_ascii(
        points,
        points_properties,
        _line_cells(segments, materials),
        segments_properties,
        file_path,
    )


def export_polygons(
    file_path: PathLike,
    points: Sequence[Point],
    polygons_vertices: Sequence[Sequence[int]],
    points_properties: Sequence[UCDProperty] = (),
    polygons_properties: Sequence[UCDProperty] = (),
    materials: Sequence[int] = (),
) -> None:
    """Write triangles and quadrilaterals; any other polygon raises ValueError."""
    write_ucd_ascii(
        points,
        points_properties,
        _polygon_cells(polygons_vertices, materials),
        polygons_properties,
        file_path,
    )


def export_polyhedra(
    file_path: PathLike,
    points: Sequence[Point],
    polyhedra_vertices: Sequence[Sequence[int]],
    points_properties: Sequence[UCDProperty] = (),
    polyhedra_properties: Sequence[UCDProperty] = (),
    materials: Sequence[int] = (),
) -> None:
    """Write tetrahedra; any other polyhedron raises ValueError."""
    write_ucd_ascii(
        points,
        points_properties,
        _polyhedra_cells(polyhedra_vertices, materials),
        polyhedra_properties,
        file_path,
    )