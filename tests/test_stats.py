import csv
import json
import os

import numpy as np
import pytest

from geometry.api import polygon_from_profile
from mesh.core import loft
from mesh.stats import summarize, write_summary_csv, write_summary_json, write_summary_excel
from mesh.stats.report import edge_report


@pytest.fixture
def cube(unit_square):
    return loft(unit_square, span=1.0, span_segments=2, twist_enabled=False)


def test_cube_summary(cube):
    s = summarize(cube)
    assert s["n_vertices"] == 12
    assert s["n_triangles"] == 2 * 2 * 4 + 4
    assert s["n_slices"] == 3
    assert s["ring_size"] == 4
    assert s["watertight"] is True
    assert s["edges"]["consistent"] is True
    assert s["edges"]["boundary_edges"] == 0
    assert s["degenerate_triangles"] == 0
    assert s["signed_volume"] == pytest.approx(1.0)
    assert s["surface_area"] == pytest.approx(6.0)
    assert s["bbox"]["xmin"] == pytest.approx(-0.5)
    assert s["size"] == pytest.approx({"dx": 1.0, "dy": 1.0, "dz": 1.0})


def test_flat_section_is_open(naca2412):
    mesh = loft(polygon_from_profile(naca2412), span=0.0)
    s = summarize(mesh)
    assert s["watertight"] is False
    assert s["edges"]["boundary_edges"] == mesh.ring_size
    assert s["signed_volume"] == pytest.approx(0.0, abs=1e-15)
    assert s["size"]["dz"] == 0.0


def test_flipped_triangle_breaks_consistency():
    tris = np.array([[0, 1, 2], [0, 2, 3], [0, 3, 1], [1, 3, 2]])
    assert edge_report(tris)["watertight"]
    assert edge_report(tris)["consistent"]
    tris[3] = tris[3][::-1]
    assert not edge_report(tris)["consistent"]


def test_json_export_round_trip(cube, tmp_path):
    s = summarize(cube)
    path = write_summary_json(s, str(tmp_path / "qa" / "summary.json"))
    with open(path, encoding="utf-8") as f:
        loaded = json.load(f)
    assert loaded == s
    assert os.listdir(str(tmp_path / "qa")) == ["summary.json"]


def test_csv_export_flattens_keys(cube, tmp_path):
    s = summarize(cube)
    path = write_summary_csv(s, str(tmp_path / "summary.csv"))
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["key", "value"]
    table = dict(rows[1:])
    assert table["n_triangles"] == "20"
    assert table["watertight"] == "True"
    assert "bbox.zmax" in table
    assert "edges.n_edges" in table
    assert os.listdir(str(tmp_path)) == ["summary.csv"]


def test_excel_export(cube, tmp_path):
    pd = pytest.importorskip("pandas")
    pytest.importorskip("openpyxl")
    path = write_summary_excel(summarize(cube), str(tmp_path / "summary.xlsx"))
    df = pd.read_excel(path)
    assert list(df.columns) == ["key", "value"]
    assert "signed_volume" in set(df["key"])
