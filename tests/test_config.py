import json

import pytest

from config import (
    DEFAULTS, build_settings, load_settings, write_settings, profile_options, loft_parameters,
    normalize_keys,
)
from geometry.errors import InvalidArgument, UnsupportedSeries
from geometry.naca.profile import ProfileOptions
from mesh.core import LoftParameters


def test_defaults_match_gui_startup():
    cfg = build_settings()
    assert cfg == DEFAULTS
    assert cfg["designation"] == "2412"
    assert cfg["station_count"] == 48
    assert cfg["span"] == 0.2
    assert cfg["span_segments"] == 48


def test_aliases_are_canonicalized():
    cfg = build_settings({"naca": "0012", "sections": 100, "aoa": 5, "enableTwist": False,
                          "rootScale": 0.8, "cte": True})
    assert cfg["designation"] == "0012"
    assert cfg["station_count"] == 100
    assert cfg["angle_of_attack_deg"] == 5
    assert cfg["twist_enabled"] is False
    assert cfg["root_scale"] == 0.8
    assert cfg["closed_trailing_edge"] is True
    assert "naca" not in cfg


def test_normalize_keys_passes_unknown_through():
    assert normalize_keys({"twist": 3, "foo": 1}) == {"twist_deg": 3, "foo": 1}


def test_sectioned_params():
    cfg = build_settings({"EXTRUSION": {"span": 1.5, "tipScale": 0.5},
                          "GENERATION": {"spacing": "Linear"}})
    assert cfg["span"] == 1.5
    assert cfg["tip_scale"] == 0.5
    assert cfg["spacing"] == "linear"


@pytest.mark.parametrize("params", [
    {"span": 6.0},
    {"span": -0.1},
    {"twist": 91},
    {"rootScale": 0.0},
    {"chord": 0.05},
    {"sections": 3},
    {"sections": 10.5},
    {"segments": 0},
    {"spacing": "log"},
    {"span": "wide"},
    {"span": True},
    {"enableScale": "yes"},
    {"alpha_deg": 90.0},
    {"foo": 1},
])
def test_invalid_params(params):
    with pytest.raises(InvalidArgument):
        build_settings(params)


def test_unsupported_designation_fails_early():
    with pytest.raises(UnsupportedSeries):
        build_settings({"naca": 1234567})


def test_conversion_to_typed_options():
    cfg = build_settings({"naca": 23012, "sections": 64, "chord": 1.5, "span": 2.0,
                          "twist": -4, "enableScale": True, "tipScale": 0.5, "segments": 10})
    opts = profile_options(cfg)
    params = loft_parameters(cfg)
    assert opts == ProfileOptions(alpha_deg=0.0, chord=1.5, station_count=64,
                                  spacing="cosine", closed_trailing_edge=False)
    assert params == LoftParameters(span=2.0, twist_enabled=True, twist_deg=-4.0,
                                    scale_enabled=True, root_scale=1.0, tip_scale=0.5,
                                    angle_of_attack_deg=0.0, span_segments=10)


def test_load_settings(tmp_path):
    path = tmp_path / "wing.json"
    path.write_text(json.dumps({"naca": "4415", "span": 3.0}), encoding="utf-8")
    cfg = load_settings(str(path))
    assert cfg["designation"] == "4415"
    assert cfg["span"] == 3.0


@pytest.mark.parametrize("text", ["{not json", "[1, 2, 3]"])
def test_load_settings_rejects_bad_files(tmp_path, text):
    path = tmp_path / "bad.json"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(InvalidArgument):
        load_settings(str(path))


def test_write_then_load(tmp_path):
    cfg = build_settings({"naca": "0009", "twist": 12.0, "segments": 20})
    path = write_settings(cfg, str(tmp_path / "nested" / "settings.json"))
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    assert set(data) == {"GENERATION", "EXTRUSION"}
    assert data["EXTRUSION"]["twist_deg"] == 12.0
    assert load_settings(path) == cfg
