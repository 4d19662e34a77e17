import math

import numpy as np
import pytest

from geometry.errors import InvalidArgument, UnsupportedSeries
from geometry.naca.profile import AirfoilProfile, ProfileOptions, generate


def test_naca2412_linear_five_stations():
    p = generate(2412, ProfileOptions(station_count=5, spacing="linear",
                                      closed_trailing_edge=False))
    assert p.series == 4
    assert p.designation == 2412
    assert p.stations.tolist() == [0.0, 0.25, 0.5, 0.75, 1.0]
    assert p.camber_y[0] == 0.0
    assert p.camber_y[-1] == 0.0
    for arr in (p.camber_x, p.camber_y, p.upper_x, p.upper_y, p.lower_x, p.lower_y):
        assert arr.shape == (5,)


def test_arrays_are_read_only(naca2412):
    with pytest.raises(ValueError):
        naca2412.upper_y[3] = 1.0
    with pytest.raises(ValueError):
        naca2412.stations[0] = 0.5


def test_surfaces_meet_at_leading_edge(naca2412):
    assert naca2412.upper_x[0] == naca2412.lower_x[0]
    assert naca2412.upper_y[0] == naca2412.lower_y[0]


def test_surfaces_bracket_camber(naca2412):
    inner = slice(1, -1)
    assert np.all(naca2412.upper_y[inner] > naca2412.camber_y[inner])
    assert np.all(naca2412.lower_y[inner] < naca2412.camber_y[inner])


def test_symmetric_section(naca0012):
    np.testing.assert_array_equal(naca0012.camber_y, 0.0)
    np.testing.assert_allclose(naca0012.upper_y, -naca0012.lower_y, atol=0.0)
    np.testing.assert_allclose(naca0012.upper_x, naca0012.stations, atol=1e-15)


def test_max_thickness_matches_designation():
    p = generate(12, station_count=1001, spacing="linear")
    t = p.upper_y - p.lower_y
    i = int(np.argmax(t))
    assert t[i] == pytest.approx(0.12, abs=1e-3)
    assert p.stations[i] == pytest.approx(0.3, abs=0.01)


def test_trailing_edge_closure():
    closed_te = generate(12, station_count=20, closed_trailing_edge=True)
    assert closed_te.upper_y[-1] == 0.0
    assert closed_te.lower_y[-1] == 0.0

    cambered = generate(2412, station_count=20, closed_trailing_edge=True)
    assert cambered.upper_y[-1] == cambered.lower_y[-1]
    assert cambered.upper_x[-1] == cambered.lower_x[-1]


@pytest.mark.parametrize("code, t", [(6, 0.06), (12, 0.12), (24, 0.24)])
def test_open_trailing_edge_gap(code, t):
    p = generate(code, station_count=20)
    gap = p.upper_y[-1] - p.lower_y[-1]
    assert gap == pytest.approx(2.0 * 0.0105 * t, rel=1e-9)


def test_chord_scales_coordinates():
    a = generate(2412, station_count=30)
    b = generate(2412, station_count=30, chord=2.0)
    np.testing.assert_allclose(b.upper_x, 2.0 * a.upper_x)
    np.testing.assert_allclose(b.lower_y, 2.0 * a.lower_y)
    np.testing.assert_array_equal(b.stations, a.stations)


def test_linearized_tilt():
    alpha = 10.0
    p = generate(12, station_count=3, spacing="linear", alpha_deg=alpha)
    a = math.radians(alpha)
    assert p.camber_x[1] == pytest.approx(0.5)
    assert p.camber_y[1] == pytest.approx(0.0)
    assert p.camber_x[0] == pytest.approx(0.5 - 0.5 * math.cos(a))
    assert p.camber_y[0] == pytest.approx(0.5 * math.sin(a))
    assert p.camber_y[-1] == pytest.approx(-0.5 * math.sin(a))


def test_series5_reference_shape():
    p = generate(23012, station_count=2001, spacing="linear")
    i = int(np.argmax(p.camber_y))
    assert p.camber_y[i] == pytest.approx(0.0184, abs=5e-4)
    assert p.stations[i] == pytest.approx(0.15, abs=0.01)
    assert p.camber_y[0] == pytest.approx(0.0, abs=1e-12)
    assert p.camber_y[-1] == pytest.approx(0.0, abs=1e-12)


def test_series5_reflexed_returns_to_chord():
    p = generate(23112, station_count=400)
    assert p.camber_y[-1] == pytest.approx(0.0, abs=1e-12)
    assert np.isfinite(p.upper_y).all()


def test_series6_is_finite_everywhere():
    for spacing in ("linear", "cosine"):
        p = generate(641212, station_count=501, spacing=spacing)
        for arr in (p.camber_x, p.camber_y, p.upper_x, p.upper_y, p.lower_x, p.lower_y):
            assert np.isfinite(arr).all()
        assert p.camber_y[0] == pytest.approx(0.0, abs=1e-12)
        assert p.camber_y[-1] == pytest.approx(0.0, abs=1e-12)
        assert p.camber_y[len(p.camber_y) // 2] > 0.0


def test_series6_with_tilt_stays_finite():
    p = generate(641212, station_count=101, alpha_deg=5.0)
    assert np.isfinite(p.upper_x).all()
    assert np.isfinite(p.lower_y).all()


def test_seven_digit_designation_fails():
    with pytest.raises(UnsupportedSeries):
        generate(1234567, ProfileOptions(station_count=10))


@pytest.mark.parametrize("overrides", [
    {"chord": 0.0},
    {"chord": -1.0},
    {"chord": float("nan")},
    {"alpha_deg": float("inf")},
    {"station_count": 1},
    {"spacing": "log"},
    {"closed_trailing_edge": "yes"},
    {"stations": 10},
])
def test_invalid_options(overrides):
    with pytest.raises(InvalidArgument):
        generate(2412, **overrides)


def test_overrides_apply_on_top_of_options():
    base = ProfileOptions(station_count=7, spacing="linear")
    p = generate("2412", base, chord=3.0)
    assert p.station_count == 7
    assert p.upper_x[-1] == pytest.approx(3.0, rel=1e-2)
    assert base.chord == 1.0


def test_closed_polygon_layout(naca2412):
    poly = naca2412.closed_polygon()
    n = naca2412.station_count
    assert poly.shape == (2 * n, 2)
    np.testing.assert_array_equal(poly[0], poly[-1])
    np.testing.assert_array_equal(poly[:n], naca2412.upper_points())
    np.testing.assert_array_equal(poly[n:], naca2412.lower_points()[::-1])


def test_generate_returns_fresh_profile():
    a = generate(2412, station_count=10)
    b = generate(2412, station_count=10)
    assert isinstance(a, AirfoilProfile)
    assert a.upper_y is not b.upper_y
    np.testing.assert_array_equal(a.upper_y, b.upper_y)
