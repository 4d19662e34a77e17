# -*- coding: utf-8 -*-
# Loftfoil/geometry/naca/thickness.py

"""
Project: Loftfoil
Date: 9/29/2026 (Updated: 10/19/2026)

Purpose
-------
NACA half-thickness distribution, shared by every series:

    y_t = t / 0.2 · (0.2969·√x − 0.1260·x − 0.3516·x² + 0.2843·x³ + a4·x⁴)

with a4 = −0.1015 for the historical open trailing edge (half-thickness of 0.0105·t
at x = 1) and a4 = −0.1036 for a trailing edge closed to zero thickness.

Notes
-----
- The closed-TE coefficients sum to zero only up to rounding, so y_t at x = 1 is
  pinned to exactly 0 rather than left as a ~1e-17 residue of either sign.
"""

import numpy as np

A4_OPEN = -0.1015
A4_CLOSED = -0.1036

__all__ = ["A4_OPEN", "A4_CLOSED", "half_thickness"]


def half_thickness(x: np.ndarray, thickness: float, closed_trailing_edge: bool = False) -> np.ndarray:
    """
    Evaluate the half-thickness at normalized stations `x` (0..1).

    Parameters
    ----------
    x : np.ndarray
        Chordwise stations.
    thickness : float
        Maximum thickness as a fraction of chord (e.g. 0.12).
    closed_trailing_edge : bool
        Select the closed-TE x⁴ coefficient.
    """
    a4 = A4_CLOSED if closed_trailing_edge else A4_OPEN
    x = np.asarray(x, dtype=np.float64)
    yt = (thickness / 0.2) * (
        0.2969 * np.sqrt(x) - 0.1260 * x - 0.3516 * x ** 2 + 0.2843 * x ** 3 + a4 * x ** 4
    )
    if closed_trailing_edge:
        yt = np.where(x >= 1.0, 0.0, yt)
    return yt
