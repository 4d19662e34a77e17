# -*- coding: utf-8 -*-
# Loftfoil/geometry/topology/loop.py

"""
Project: Loftfoil
Date: 10/6/2026

Purpose:
--------
This module owns *connectivity-level* concerns for section outlines:
   - Closure predicate and open-ring extraction,
   - Signed area,
   - Canonical open CCW rings for triangulation and lofting.

Notes:
------------
   - Pure NumPy; no logging, plotting, or file I/O.
   - Functions are side-effect free; inputs are never modified in place.
   - A ClosedPolygon repeats its first point at the end (or nearly so). A *ring*
     is the same loop without that duplicate: vertex i connects to vertex (i+1) % N.
"""

import numpy as np
from ._validation import _as_xy, _is_exactly_closed
from ..errors import GeometryDegenerate
from ..ops.basic import drop_consecutive_duplicates

# Loops whose |area| falls below this are treated as degenerate (chord units squared).
AREA_EPS = 1e-14


# -----------------------
# Public API
# -----------------------
def is_closed(points, tol: float = 1e-9) -> bool:
    """
    Predicate: does the polyline close on itself (first==last within tol)?

    Parameters
    ----------
    points : array-like
        (N, 2) points.
    tol : float
        Absolute tolerance for endpoint equality (rtol fixed at 0).
    """
    return _is_exactly_closed(_as_xy(points), tol)


def open_ring(points, tol: float = 1e-12) -> np.ndarray:
    """
    Drop consecutive duplicates and the closing duplicate, returning an open ring.

    Parameters
    ----------
    points : array-like
        (N, 2) loop, explicitly closed or not.
    tol : float
        Absolute tolerance for "same point" tests.

    Returns
    -------
    np.ndarray
        (M, 2) ring with no repeated neighbours (including last→first).
    """
    P = drop_consecutive_duplicates(_as_xy(points), tol=tol)
    while P.shape[0] > 1 and _is_exactly_closed(P, tol):
        P = P[:-1]
    return P


def signed_area(points) -> float:
    """
    Shoelace signed area of a loop (open ring or explicitly closed).

    Conventions
    -----------
    - Positive area => counter-clockwise (CCW) orientation.
    - A duplicated last==first row contributes a zero-length edge.

    Raises
    ------
    GeometryDegenerate
        If fewer than 3 points are given.
    """
    P = _as_xy(points)
    if P.shape[0] < 3:
        raise GeometryDegenerate("Need at least 3 points to compute area.",
                                 {"n_points": int(P.shape[0])})
    x = P[:, 0]
    y = P[:, 1]
    # Roll by -1 to represent edges (i -> i+1), implicitly connects last->first
    area2 = np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))
    return 0.5 * float(area2)


def ccw_ring(points, tol: float = 1e-12) -> np.ndarray:
    """
    Canonicalize a section outline into an open, counter-clockwise ring.

    Behavior
    --------
    - Consecutive duplicates and the closing duplicate are removed (`open_ring`).
    - A clockwise ring is reversed; the first vertex stays first so the ordering
      remains deterministic.

    Returns
    -------
    np.ndarray
        (M, 2) CCW ring, M >= 3.

    Raises
    ------
    GeometryDegenerate
        If fewer than 3 distinct points remain or the enclosed area is ~0.
    """
    R = open_ring(points, tol=tol)
    if R.shape[0] < 3:
        raise GeometryDegenerate("Outline has fewer than 3 distinct points.",
                                 {"n_points": int(R.shape[0])})

    area = signed_area(R)
    if abs(area) <= AREA_EPS:
        raise GeometryDegenerate("Outline encloses no area.", {"area": area})

    if area < 0.0:
        R = np.vstack((R[:1], R[1:][::-1]))
    return R
