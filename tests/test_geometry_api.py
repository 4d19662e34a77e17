import numpy as np
import pytest

from geometry import (
    GeometryDegenerate, InvalidArgument, LoftfoilError, UnsupportedSeries,
    generate_profile, polygon_from_points, polygon_from_profile,
)


def test_generate_profile_facade():
    p = generate_profile("NACA 0012", station_count=11)
    assert p.designation == 12
    assert polygon_from_profile(p).shape == (22, 2)


def test_polygon_from_points_is_a_verbatim_copy():
    pts = [[1.0, 0.0], [0.5, 0.06], [0.0, 0.0], [0.5, -0.06], [1.0, 0.0]]
    poly = polygon_from_points(pts)
    assert poly.dtype == np.float64
    np.testing.assert_array_equal(poly, pts)

    arr = np.asarray(pts)
    copy = polygon_from_points(arr)
    copy[0, 0] = 9.0
    assert arr[0, 0] == 1.0


def test_polygon_from_points_closure_check():
    open_pts = [[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]]
    assert polygon_from_points(open_pts).shape == (3, 2)
    with pytest.raises(GeometryDegenerate):
        polygon_from_points(open_pts, require_closed=True)
    closed = polygon_from_points(open_pts + [[0.0, 0.0]], require_closed=True)
    assert closed.shape == (4, 2)


@pytest.mark.parametrize("pts, err", [
    ([[0.0, 0.0], [1.0, 0.0]], GeometryDegenerate),
    ([[0.0, 0.0, 0.0]], InvalidArgument),
    ([[0.0, 0.0], [1.0, float("inf")], [0.0, 1.0]], InvalidArgument),
    ([["a", "b"], ["c", "d"], ["e", "f"]], InvalidArgument),
])
def test_polygon_from_points_rejects(pts, err):
    with pytest.raises(err):
        polygon_from_points(pts)


def test_error_hierarchy_and_context():
    for cls in (InvalidArgument, UnsupportedSeries, GeometryDegenerate):
        assert issubclass(cls, LoftfoilError)
        assert issubclass(cls, ValueError)
    e = UnsupportedSeries("No formula.", {"designation": 1234567, "digits": 7})
    assert str(e) == "No formula. | designation=1234567, digits=7"
    assert e.context == {"designation": 1234567, "digits": 7}
    assert str(InvalidArgument("plain")) == "plain"
