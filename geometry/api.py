# -*- coding: utf-8 -*-
# Loftfoil/geometry/api.py

"""
Project: Loftfoil
Date: 10/7/2026 (Updated: 10/14/2026)

Purpose
-------
Thin, import-only façade for Loftfoil section workflows. Exposes the helpers that turn
a designation or an imported point list into the ClosedPolygon consumed by the loft
builder.

Main Tasks
----------
    1. `generate_profile` → decode a designation and sample the analytic surfaces.
    2. `polygon_from_profile` → upper surface LE→TE followed by lower surface TE→LE.
    3. `polygon_from_points` → validate an externally supplied (N, 2) point list.

Notes
-----
- Detailed behavior lives in `naca.profile` and `topology.loop`. Imported points are
  passed through verbatim (closure and orientation are fixed later by the loft
  builder), so a round trip through this façade never reorders user data.
"""

import logging
from typing import Optional, Union
import numpy as np
from .naca.profile import AirfoilProfile, ProfileOptions, generate
from .topology._validation import _as_xy
from .topology.loop import is_closed
from .errors import GeometryDegenerate

logger = logging.getLogger(__name__)

__all__ = [
    "generate_profile",
    "polygon_from_profile",
    "polygon_from_points",
]


def generate_profile(
    designation: Union[int, str],
    options: Optional[ProfileOptions] = None,
    **overrides,
) -> AirfoilProfile:
    """
    Generate a NACA profile.

    Args
    ----
    designation : int or str
        NACA code (e.g. 2412 or "0012").
    options : ProfileOptions, optional
        Sampling/shaping options; keyword overrides are applied on top.

    Returns
    -------
    AirfoilProfile
    """
    return generate(designation, options, **overrides)


def polygon_from_profile(profile: AirfoilProfile) -> np.ndarray:
    """Return the profile outline as a new (2·N, 2) float64 array."""
    return profile.closed_polygon()


def polygon_from_points(points, *, require_closed: bool = False, tol: float = 1e-9) -> np.ndarray:
    """
    Accept an imported outline (e.g. parsed from a coordinate file).

    Args
    ----
    points : array-like
        (N, 2) sequence of (x, y) pairs.
    require_closed : bool, optional
        If True, the first and last points must coincide within `tol`.
    tol : float, optional
        Closure tolerance.

    Returns
    -------
    np.ndarray
        (N, 2) float64 copy of the points, order preserved.

    Raises
    ------
    InvalidArgument
        Wrong shape or non-finite coordinates.
    GeometryDegenerate
        Fewer than 3 points, or an open outline when `require_closed` is set.
    """
    P = np.array(_as_xy(points), dtype=np.float64, copy=True)
    if P.shape[0] < 3:
        raise GeometryDegenerate("Imported outline needs at least 3 points.",
                                 {"n_points": int(P.shape[0])})
    if require_closed and not is_closed(P, tol=tol):
        raise GeometryDegenerate("Imported outline is not closed.",
                                 {"first": P[0].tolist(), "last": P[-1].tolist()})
    logger.debug("[Geometry] Accepted imported outline with %d points.", P.shape[0])
    return P
