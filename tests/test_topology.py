import numpy as np
import pytest

from geometry.errors import GeometryDegenerate, InvalidArgument
from geometry.ops import bbox_center, drop_consecutive_duplicates, rotate_z, scale_xy, translate
from geometry.topology import ccw_ring, is_closed, open_ring, signed_area


def test_signed_area_sign_follows_winding(unit_square):
    assert signed_area(unit_square) == pytest.approx(1.0)
    assert signed_area(unit_square[::-1]) == pytest.approx(-1.0)


def test_closed_duplicate_does_not_change_area(unit_square):
    closed = np.vstack((unit_square, unit_square[:1]))
    assert signed_area(closed) == pytest.approx(1.0)
    assert is_closed(closed)
    assert not is_closed(unit_square)


def test_open_ring_drops_duplicates(unit_square):
    pts = np.vstack((unit_square[:2], unit_square[1:2], unit_square[2:], unit_square[:1]))
    ring = open_ring(pts)
    np.testing.assert_array_equal(ring, unit_square)


def test_ccw_ring_keeps_first_vertex(unit_square):
    cw = unit_square[[0, 3, 2, 1]]
    ring = ccw_ring(np.vstack((cw, cw[:1])))
    np.testing.assert_array_equal(ring, unit_square)
    assert signed_area(ring) > 0.0


def test_ccw_ring_leaves_input_untouched(unit_square):
    cw = unit_square[::-1].copy()
    before = cw.copy()
    ccw_ring(cw)
    np.testing.assert_array_equal(cw, before)


def test_profile_polygon_is_clockwise(naca2412):
    poly = naca2412.closed_polygon()
    assert signed_area(poly) < 0.0
    ring = ccw_ring(poly)
    assert ring.shape[0] == poly.shape[0] - 1
    np.testing.assert_array_equal(ring[0], poly[0])


@pytest.mark.parametrize("pts", [
    [[0.0, 0.0], [1.0, 0.0]],
    [[0.0, 0.0], [1.0, 0.0], [0.0, 0.0]],
    [[0.0, 0.0], [1.0, 1.0], [2.0, 2.0], [0.0, 0.0]],
])
def test_degenerate_outlines(pts):
    with pytest.raises(GeometryDegenerate):
        ccw_ring(pts)


@pytest.mark.parametrize("pts", [
    [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [1.0, 1.0, 0.0]],
    [[0.0, 0.0], [1.0, float("nan")], [1.0, 1.0]],
    [0.0, 1.0, 2.0],
    None,
])
def test_malformed_outlines(pts):
    with pytest.raises(InvalidArgument):
        ccw_ring(pts)


def test_drop_consecutive_duplicates_with_tolerance():
    pts = np.array([[0.0, 0.0], [1e-13, 0.0], [1.0, 0.0], [1.0, 0.0]])
    assert drop_consecutive_duplicates(pts).shape[0] == 3
    assert drop_consecutive_duplicates(pts, tol=1e-12).shape[0] == 2


def test_rotate_and_scale():
    pts = np.array([[1.0, 0.0, 3.0]])
    r = rotate_z(pts, 90.0)
    np.testing.assert_allclose(r, [[0.0, 1.0, 3.0]], atol=1e-15)
    s = scale_xy(pts, 0.5)
    np.testing.assert_array_equal(s, [[0.5, 0.0, 3.0]])
    np.testing.assert_array_equal(pts, [[1.0, 0.0, 3.0]])


def test_bbox_center_and_translate(naca0012):
    poly = naca0012.closed_polygon()
    c = bbox_center(poly)
    assert c[0] == pytest.approx(0.5)
    assert c[1] == pytest.approx(0.0, abs=1e-15)
    centred = translate(poly, -c)
    np.testing.assert_allclose(bbox_center(centred), 0.0, atol=1e-15)
    np.testing.assert_array_equal(centred[:, 0], poly[:, 0] - c[0])
