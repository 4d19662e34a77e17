# -*- coding: utf-8 -*-
# Loftfoil/geometry/topology/_validation.py

"""
Project: Loftfoil
Date: 10/6/2026

Purpose:
--------
Shared validation for section outlines, so the profile façade and the loft builder reject
malformed point arrays with the same InvalidArgument messages.

Main Tasks:
   1. Coerce array-likes to (N, 2) float64 and validate shape/finiteness.
   2. Provide the closure predicate used by loop canonicalization.
"""

from typing import Any
import numpy as np
from ..errors import InvalidArgument


def _as_xy(points: Any, check_finite: bool = True) -> np.ndarray:
    """
    Return `points` as an (N, 2) float64 array, raising InvalidArgument otherwise.

    Parameters
    ----------
    points : array-like
        Sequence of (x, y) pairs or an (N, 2) array.
    check_finite : bool, optional
        If True (default), reject NaN/Inf coordinates.

    Returns
    -------
    np.ndarray
        (N, 2) float64 array (a new array unless the input already matched).
    """
    if points is None:
        raise InvalidArgument("No outline provided (points is None).")
    try:
        arr = np.asarray(points, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidArgument("Outline is not numeric: {}".format(e))

    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidArgument(
            "Expected (N, 2) array for points.", {"shape": tuple(arr.shape)}
        )

    if check_finite and not np.isfinite(arr).all():
        bad = np.argwhere(~np.isfinite(arr))
        raise InvalidArgument(
            "Non-finite coordinates in outline.", {"indices": bad[:, 0].tolist()}
        )
    return arr


def _is_exactly_closed(points: np.ndarray, tol: float) -> bool:
    """True if first == last within `tol` (requires at least 2 rows)."""
    if points.shape[0] < 2:
        return False
    return bool(np.allclose(points[0], points[-1], atol=tol, rtol=0.0))
