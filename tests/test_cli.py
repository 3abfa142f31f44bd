from polymesh.cli import main

CELL0 = (
    "Id;Marker;X;Y\n"
    "0;1;0.0;0.0\n"
    "1;2;1.0;0.0\n"
    "2;2;1.0;1.0\n"
    "3;0;0.0;1.0\n"
)
CELL1 = (
    "Id;Marker;Origin;End\n"
    "0;5;0;1\n"
    "1;0;1;2\n"
    "2;5;2;3\n"
    "3;0;3;0\n"
    "4;0;0;2\n"
)
CELL2 = (
    "Id;Marker;NumVertices;Vertices;NumEdges;Edges\n"
    "0;0;3;0;1;2;3;0;1;4\n"
    "1;0;3;0;2;3;3;4;2;3\n"
)


def _write(directory, cell0=CELL0, cell1=CELL1, cell2=CELL2):
    directory.mkdir(exist_ok=True)
    (directory / "Cell0Ds.csv").write_text(cell0)
    (directory / "Cell1Ds.csv").write_text(cell1)
    (directory / "Cell2Ds.csv").write_text(cell2)
    return directory


def test_main_exports_points_and_segments(tmp_path, capsys):
    source = _write(tmp_path / "mesh")
    out = tmp_path / "out"
    status = main([str(source), "--output-dir", str(out)])
    assert status == 0
    points = (out / "Cell0Ds.inp").read_text().splitlines()
    segments = (out / "Cell1Ds.inp").read_text().splitlines()
    assert points[0] == "4 4 0 0 0"
    assert segments[0] == "4 5 0 0 0"
    assert "1 0 line 1 2" in segments
    assert len(segments) == 1 + 4 + 5


def test_main_reports_success_messages(tmp_path, capsys):
    source = _write(tmp_path / "mesh")
    main([str(source), "--output-dir", str(tmp_path / "out")])
    stdout = capsys.readouterr().out
    assert "Ogni spigolo ha lunghezza diversa da zero" in stdout
    assert "Ogni poligono ha area diversa da zero" in stdout
    assert "Marker1D: 5 IDs = [ 0 2 ]" in stdout
    assert stdout.rstrip().endswith("Tutti i marker sono correttamente memorizzati")


def test_main_missing_files(tmp_path, capsys):
    status = main([str(tmp_path / "absent"), "--output-dir", str(tmp_path / "out")])
    assert status == 1
    assert "File non trovato" in capsys.readouterr().err
    assert not (tmp_path / "out").exists()


def test_main_degenerate_edge(tmp_path, capsys):
    bad_edges = CELL1.replace("1;0;1;2", "1;0;1;1")
    source = _write(tmp_path / "mesh", cell1=bad_edges)
    status = main([str(source), "--output-dir", str(tmp_path / "out")])
    assert status == 1
    assert "Errore: spigoli di lunghezza nulla" in capsys.readouterr().err


def test_main_degenerate_polygon(tmp_path, capsys):
    bad_polygons = CELL2.replace("0;0;3;0;1;2", "0;0;2;0;1")
    source = _write(tmp_path / "mesh", cell2=bad_polygons)
    status = main([str(source), "--output-dir", str(tmp_path / "out")])
    captured = capsys.readouterr()
    assert status == 1
    assert "Errore: poligoni di area nulla" in captured.err
    assert "Ogni spigolo ha lunghezza diversa da zero" in captured.out