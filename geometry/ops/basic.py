# -*- coding: utf-8 -*-
# Loftfoil/geometry/ops/basic.py

"""
Project: Loftfoil
Date: 10/6/2026 (Updated: 10/12/2026)

Purpose
-------
Foundational point-array utilities shared by the profile façade and the loft builder:
deduplicate consecutive points and measure axis-aligned bounds in 2D or 3D.

Main Tasks
----------
    1. Sanitize polylines with consecutive-duplicate removal.
    2. Compute bounding boxes and their centres for (N, 2) or (N, 3) arrays.

Notes
-----
- Functions do not re-order points and never modify their input.
"""

from typing import Tuple
import numpy as np

__all__ = [
    "drop_consecutive_duplicates",
    "bounding_box",
    "bbox_center",
]


def _assert_points(points: np.ndarray, dims: Tuple[int, ...] = (2,)) -> None:
    """
    Ensure `points` is a NumPy array of shape (N, D) with D in `dims`.

    Raises
    ------
    ValueError
        If `points` is None or has the wrong shape.
    """
    if points is None:
        raise ValueError("No geometry provided (points is None).")
    if points.ndim != 2 or points.shape[1] not in dims:
        raise ValueError("Expected (N,{}) float array for points, got shape {}.".format(
            "|".join(str(d) for d in dims), points.shape))


def drop_consecutive_duplicates(pts: np.ndarray, tol: float = 0.0) -> np.ndarray:
    """
    Remove exact (or tolerance-close) consecutive duplicates.

    Useful to avoid zero-length edges, which stall ear clipping and produce
    zero-area side faces when lofting.

    Args
    ----
    pts : np.ndarray
        Input polyline points, shape (N, 2).
    tol : float, optional
        Absolute tolerance for equality (`np.allclose` with rtol=0). Default: 0.0.

    Returns
    -------
    np.ndarray
        Filtered points retaining original order.
    """
    _assert_points(pts)
    if pts.shape[0] <= 1:
        return pts
    step = np.abs(np.diff(pts, axis=0)).max(axis=1)
    keep = np.concatenate(([True], step > tol))
    return pts[keep]


def bounding_box(points: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Axis-aligned bounds of a 2D or 3D point array.

    Returns
    -------
    (np.ndarray, np.ndarray)
        (lo, hi) per-axis minima and maxima.
    """
    _assert_points(points, dims=(2, 3))
    if points.shape[0] == 0:
        raise ValueError("Empty array provided; bounding box undefined.")
    return points.min(axis=0), points.max(axis=0)


def bbox_center(points: np.ndarray) -> np.ndarray:
    """Geometric centre of the axis-aligned bounding box."""
    lo, hi = bounding_box(points)
    return 0.5 * (lo + hi)
