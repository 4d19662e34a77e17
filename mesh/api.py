# -*- coding: utf-8 -*-
# Loftfoil/mesh/api.py

"""
Project: Loftfoil
Date: 10/12/2026

Purpose
-------
High-level API for turning a section outline (or a designation) into a lofted mesh.

Main Tasks
----------
    1. `build_loft` → validate parameters and loft a ClosedPolygon.
    2. `build_wing` → generate a NACA profile and loft it in one call.
"""

import logging
from typing import Optional, Union
from geometry.api import generate_profile, polygon_from_profile
from geometry.naca.profile import ProfileOptions
from mesh.core import LoftMesh, LoftParameters, loft

logger = logging.getLogger(__name__)

__all__ = ["build_loft", "build_wing"]


def build_loft(polygon, params: Optional[LoftParameters] = None, **overrides) -> LoftMesh:
    """
    Loft a closed section outline.

    Parameters
    ----------
    polygon : array-like
        (N, 2) ClosedPolygon (from a profile or an imported point list).
    params : LoftParameters, optional
        Extrusion controls; keyword overrides are applied on top.

    Returns
    -------
    LoftMesh
    """
    return loft(polygon, params, **overrides)


def build_wing(
    designation: Union[int, str],
    profile_options: Optional[ProfileOptions] = None,
    params: Optional[LoftParameters] = None,
) -> LoftMesh:
    """
    Generate a NACA section and loft it.

    Raises
    ------
    InvalidArgument, UnsupportedSeries, GeometryDegenerate
        Propagated from the generator and the builder.
    """
    profile = generate_profile(designation, profile_options)
    mesh = loft(polygon_from_profile(profile), params)
    logger.debug("[build_wing] NACA %s → %d triangles.", designation, mesh.n_triangles)
    return mesh
