"""Command that loads a mesh, checks it and exports it for visualisation."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from polymesh.checks import MeshValidationError, check_edges, check_polygons, format_markers
from polymesh.mesh import MeshImportError, import_mesh
from polymesh.ucd import export_points, export_segments


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polymesh",
        description="Check a polygonal mesh and export its points and edges as UCD files.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="directory holding Cell0Ds.csv, Cell1Ds.csv and Cell2Ds.csv",
    )
    parser.add_argument(
        "--output-dir",
        default=".",
        help="directory receiving Cell0Ds.inp and Cell1Ds.inp",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the checks and the export; return the process exit status."""
    args = _parser().parse_args(argv)

    try:
        mesh = import_mesh(args.directory)
    except MeshImportError as exc:
        print(exc, file=sys.stderr)
        print("File non trovato", file=sys.stderr)
        return 1

    try:
        check_edges(mesh)
    except MeshValidationError as exc:
        print(exc, file=sys.stderr)
        print("Errore: spigoli di lunghezza nulla ", file=sys.stderr)
        return 1
    print("Ogni spigolo ha lunghezza diversa da zero")

    try:
        check_polygons(mesh)
    except MeshValidationError as exc:
        print(exc, file=sys.stderr)
        print("Errore: poligoni di area nulla ", file=sys.stderr)
        return 1
    print("Ogni poligono ha area diversa da zero")

    print(format_markers(mesh), end="")
    print("Tutti i marker sono correttamente memorizzati")

    output = Path(args.output_dir)
    output.mkdir(parents=True, exist_ok=True)
    export_points(output / "Cell0Ds.inp", mesh.cell0ds_coordinates)
    export_segments(output / "Cell1Ds.inp", mesh.cell0ds_coordinates, mesh.cell1ds_extrema)
    return 0


if __name__ == "__main__":
    sys.exit(main())