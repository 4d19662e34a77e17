# -*- coding: utf-8 -*-
# Loftfoil/geometry/naca/stations.py

"""
Project: Loftfoil
Date: 9/28/2026

Purpose
-------
Chordwise station sampling shared by both airfoil surfaces.

Notes
-----
- Cosine spacing clusters stations at the leading and trailing edges, where surface
  curvature is highest, at the cost of sparser sampling at mid-chord.
- Endpoints are exact: stations[0] == 0.0 and stations[-1] == 1.0 for both spacings.
"""

import numbers
import numpy as np
from ..errors import InvalidArgument

LINEAR = "linear"
COSINE = "cosine"
SPACINGS = (LINEAR, COSINE)

__all__ = ["LINEAR", "COSINE", "SPACINGS", "sample_stations"]


def sample_stations(station_count: int, spacing: str = COSINE) -> np.ndarray:
    """
    Produce `station_count` normalized chordwise stations in [0, 1].

    Parameters
    ----------
    station_count : int
        Number of stations, >= 2.
    spacing : {"linear", "cosine"}
        Linear: x_i = i / (n - 1).
        Cosine: x_i = (1 - cos(i·π / (n - 1))) / 2.

    Returns
    -------
    np.ndarray
        Non-decreasing float64 array of length `station_count`.

    Raises
    ------
    InvalidArgument
        If `station_count` is not an integer >= 2 or `spacing` is unknown.
    """
    if isinstance(station_count, bool) or not isinstance(station_count, numbers.Integral):
        raise InvalidArgument("station_count must be an integer.",
                              {"station_count": station_count})
    if station_count < 2:
        raise InvalidArgument("station_count must be >= 2.",
                              {"station_count": station_count})

    n = int(station_count)
    i = np.arange(n, dtype=np.float64)
    if spacing == LINEAR:
        return i / (n - 1)
    if spacing == COSINE:
        return (1.0 - np.cos(i * np.pi / (n - 1))) / 2.0
    raise InvalidArgument("Unknown spacing.", {"spacing": spacing, "allowed": SPACINGS})
