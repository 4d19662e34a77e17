# -*- coding: utf-8 -*-
# Loftfoil/geometry/naca/camber.py

"""
Project: Loftfoil
Date: 9/29/2026 (Updated: 10/14/2026)

Purpose
-------
Mean camber lines and their slopes for the implemented NACA series. Each function maps
normalized stations x ∈ [0, 1] to (y_c, dy_c/dx) for an *untilted* section; the tilt
and the surface construction live in `profile`.

Main Tasks
----------
    1. Series4: forward/aft quadratics matched in value and slope at p.
    2. Series5: normal (family 0) and reflexed (family 1) cubic mean lines whose break
       point r and coefficients k1, k2/k1 come from regression fits to the NACA tables.
    3. Series6: uniform-loading mean line (closed-form logarithmic expressions).

Notes
-----
- The 5-digit fits are tabulated for a design lift coefficient of 0.3; camber is
  scaled linearly by c_l / 0.3.
- The regression constants are empirical. Treat them as opaque; they reproduce the
  published 210–250 and 221–251 mean lines.
- The 6-series expressions contain d·log|d| and d²·log|d| terms whose limit at d = 0 is
  0; they are evaluated through `_xlog` / `_x2log` so no NaN appears at x = 0, x = a or
  x = 1. The slope legitimately diverges at x = 0 (log x).
"""

from typing import Tuple
import numpy as np
from .designation import Designation, SERIES4, SERIES5, SERIES6

__all__ = ["camber_series4", "camber_series5", "camber_series6", "camber_line"]

# 5-digit regression fits, polynomial coefficients in p (highest power first).
_NORMAL_R = (3.33333333333212, 0.700000000000909, 1.19666666666638, -0.00399999999996247)
_NORMAL_K1 = (1514933.33335235, -1087744.00001147, 286455.266669048,
              -32968.4700001967, 1420.18500000524)
_REFLEX_R = (10.6666666666861, -2.00000000001601, 1.73333333333684, -0.0340000000002413)
_REFLEX_K1 = (-27973.3333333385, 17972.8000000027, -3888.40666666711, 289.076000000022)
_REFLEX_K21 = (85.5279999999984, -34.9828000000004, 4.80324000000028, -0.21526000000003)

# Design lift coefficient the 5-digit fits were tabulated for.
_SERIES5_TABLE_CL = 0.3


def camber_series4(x: np.ndarray, m: float, p: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    4-digit mean line.

    Parameters
    ----------
    x : np.ndarray
        Stations in [0, 1].
    m : float
        Maximum camber (first digit / 100).
    p : float
        Chordwise position of maximum camber (second digit / 10).
    """
    yc = np.zeros_like(x)
    dyc = np.zeros_like(x)
    if m == 0.0:
        return yc, dyc

    fwd = x < p
    aft = ~fwd
    xf = x[fwd]
    xa = x[aft]
    yc[fwd] = m / p ** 2 * (2.0 * p * xf - xf ** 2)
    dyc[fwd] = 2.0 * m / p ** 2 * (p - xf)
    yc[aft] = m / (1.0 - p) ** 2 * (1.0 - xa) * (1.0 + xa - 2.0 * p)
    dyc[aft] = 2.0 * m / (1.0 - p) ** 2 * (p - xa)
    return yc, dyc


def camber_series5(x: np.ndarray, design_cl: float, p: float,
                   family: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    5-digit mean line (normal or reflexed).

    Parameters
    ----------
    x : np.ndarray
        Stations in [0, 1].
    design_cl : float
        Design lift coefficient (0.15 × first digit).
    p : float
        Second digit / 20.
    family : int
        0 = normal, 1 = reflexed.
    """
    scale = design_cl / _SERIES5_TABLE_CL
    yc = np.empty_like(x)
    dyc = np.empty_like(x)

    if family == 0:
        r = np.polyval(_NORMAL_R, p)
        k1 = np.polyval(_NORMAL_K1, p) * scale
        fwd = x < r
        xf = x[fwd]
        yc[fwd] = k1 / 6.0 * (xf ** 3 - 3.0 * r * xf ** 2 + r ** 2 * (3.0 - r) * xf)
        dyc[fwd] = k1 / 6.0 * (3.0 * xf ** 2 - 6.0 * r * xf + r ** 2 * (3.0 - r))
        aft = ~fwd
        yc[aft] = k1 * r ** 3 / 6.0 * (1.0 - x[aft])
        dyc[aft] = -k1 * r ** 3 / 6.0
        return yc, dyc

    r = np.polyval(_REFLEX_R, p)
    k1 = np.polyval(_REFLEX_K1, p) * scale
    k21 = np.polyval(_REFLEX_K21, p)
    tail = k21 * (1.0 - r) ** 3 + r ** 3
    fwd = x < r
    aft = ~fwd
    xf = x[fwd]
    xa = x[aft]
    yc[fwd] = k1 / 6.0 * ((xf - r) ** 3 - tail * xf + r ** 3)
    dyc[fwd] = k1 / 6.0 * (3.0 * (xf - r) ** 2 - tail)
    yc[aft] = k1 / 6.0 * (k21 * (xa - r) ** 3 - tail * xa + r ** 3)
    dyc[aft] = k1 / 6.0 * (3.0 * k21 * (xa - r) ** 2 - tail)
    return yc, dyc


def _xlog(d: np.ndarray) -> np.ndarray:
    """d·log|d| with the d → 0 limit (0) taken explicitly."""
    out = np.zeros_like(d)
    nz = d != 0.0
    out[nz] = d[nz] * np.log(np.abs(d[nz]))
    return out


def _x2log(d: np.ndarray) -> np.ndarray:
    """d²·log|d| with the d → 0 limit (0) taken explicitly."""
    return d * _xlog(d)


def camber_series6(x: np.ndarray, cli: float, a: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    6-series uniform-loading mean line.

    Parameters
    ----------
    x : np.ndarray
        Stations in [0, 1].
    cli : float
        Design lift coefficient (fourth digit / 10).
    a : float
        Mean-line loading parameter (second digit / 10), 0 < a < 1.
    """
    if cli == 0.0:
        return np.zeros_like(x), np.zeros_like(x)

    g = -1.0 / (1.0 - a) * (a ** 2 * (0.5 * np.log(a) - 0.25) + 0.25)
    h = 1.0 / (1.0 - a) * (0.5 * (1.0 - a) ** 2 * np.log(1.0 - a) - 0.25 * (1.0 - a) ** 2) + g
    k = cli / (2.0 * np.pi * (a + 1.0))

    am = a - x
    om = 1.0 - x
    yc = k * (
        1.0 / (1.0 - a) * (0.5 * _x2log(am) - 0.5 * _x2log(om) + 0.25 * om ** 2 - 0.25 * am ** 2)
        - _xlog(x) + g - h * x
    )

    # (1-x)·log(1-x) and (a-x)·log|a-x| vanish at their roots; log x diverges at the LE.
    with np.errstate(divide="ignore"):
        log_x = np.log(x)
    dyc = k * ((_xlog(om) - _xlog(am)) / (1.0 - a) - log_x - 1.0 - h)
    return yc, dyc


def camber_line(x: np.ndarray, des: Designation) -> Tuple[np.ndarray, np.ndarray]:
    """Dispatch on `des.series` and return (y_c, dy_c/dx) for the untilted section."""
    x = np.asarray(x, dtype=np.float64)
    if des.series == SERIES4:
        return camber_series4(x, des.camber, des.position)
    if des.series == SERIES5:
        return camber_series5(x, des.camber, des.position, des.family)
    if des.series == SERIES6:
        return camber_series6(x, des.camber, des.position)
    raise ValueError("No camber line for series {}".format(des.series))
