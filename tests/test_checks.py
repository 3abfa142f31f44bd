import pytest

from polymesh.checks import (
    MeshValidationError,
    check_edges,
    check_polygons,
    format_markers,
)
from polymesh.mesh import PolygonalMesh


def _square_mesh():
    return PolygonalMesh(
        cell0ds_ids=[0, 1, 2, 3],
        cell0ds_coordinates=[
            (0.0, 0.0, 0.0),
            (1.0, 0.0, 0.0),
            (1.0, 1.0, 0.0),
            (0.0, 1.0, 0.0),
        ],
        marker_cell0ds={1: [0], 2: [1, 2]},
        cell1ds_ids=[0, 1, 2, 3, 4],
        cell1ds_extrema=[(0, 1), (1, 2), (2, 3), (3, 0), (0, 2)],
        marker_cell1ds={5: [0, 2]},
        cell2ds_ids=[0, 1],
        cell2ds_vertices={0: [0, 1, 2], 1: [0, 2, 3]},
        cell2ds_edges={0: [0, 1, 4], 1: [4, 2, 3]},
    )


def test_check_edges_returns_one_length_per_edge():
    mesh = _square_mesh()
    lengths = check_edges(mesh)
    assert len(lengths) == mesh.num_cell1ds
    assert lengths[:4] == [1.0, 1.0, 1.0, 1.0]
    assert lengths[4] == pytest.approx(2 ** 0.5)


def test_check_edges_rejects_zero_length():
    mesh = _square_mesh()
    mesh.cell1ds_extrema[1] = (2, 2)
    with pytest.raises(MeshValidationError, match="lunghezza nulla tra i punti 2 e 2"):
        check_edges(mesh)


def test_check_edges_rejects_coincident_points():
    mesh = _square_mesh()
    mesh.cell0ds_coordinates[1] = (0.0, 0.0, 0.0)
    with pytest.raises(MeshValidationError, match="lunghezza nulla"):
        check_edges(mesh)


def test_check_edges_rejects_index_out_of_range():
    mesh = _square_mesh()
    mesh.cell1ds_extrema[0] = (0, 7)
    with pytest.raises(MeshValidationError, match="Indice non valido"):
        check_edges(mesh)


def test_check_polygons_areas_cover_the_square():
    areas = check_polygons(_square_mesh())
    assert set(areas) == {0, 1}
    assert sum(areas.values()) == pytest.approx(1.0)
    assert areas[0] == pytest.approx(areas[1])


def test_check_polygons_area_independent_of_orientation():
    mesh = _square_mesh()
    forward = check_polygons(mesh)
    mesh.cell2ds_vertices = {k: list(reversed(v)) for k, v in mesh.cell2ds_vertices.items()}
    assert check_polygons(mesh) == pytest.approx(forward)


def test_check_polygons_rejects_too_few_vertices():
    mesh = _square_mesh()
    mesh.cell2ds_vertices[1] = [0, 2]
    with pytest.raises(MeshValidationError, match="meno di 3 vertici all'indice 1"):
        check_polygons(mesh)


def test_check_polygons_rejects_zero_area():
    mesh = _square_mesh()
    mesh.cell0ds_coordinates[2] = (2.0, 0.0, 0.0)
    with pytest.raises(MeshValidationError, match="area nulla all'indice 0"):
        check_polygons(mesh)


def test_check_polygons_rejects_unknown_vertex():
    mesh = _square_mesh()
    mesh.cell2ds_vertices[0] = [0, 1, 9]
    with pytest.raises(MeshValidationError):
        check_polygons(mesh)


def test_format_markers_layout():
    report = format_markers(_square_mesh())
    assert report == (
        "Marker registrati:\n"
        "Marker0D: 1 IDs = [ 0 ]\n"
        "Marker0D: 2 IDs = [ 1 2 ]\n"
        "\n"
        "Marker1D: 5 IDs = [ 0 2 ]\n"
        "\n"
    )


def test_format_markers_sorts_by_marker():
    mesh = _square_mesh()
    mesh.marker_cell0ds = {3: [4], 1: [0]}
    report = format_markers(mesh)
    assert report.index("Marker0D: 1") < report.index("Marker0D: 3")


def test_format_markers_empty_mesh():
    assert format_markers(PolygonalMesh()) == "Marker registrati:\n\n\n"