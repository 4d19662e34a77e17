# -*- coding: utf-8 -*-
# Loftfoil/geometry/__init__.py

"""
Project: Loftfoil
Date: 9/28/2026 (Updated: 10/14/2026)

Modules:
--------
- naca:     Package generating analytic NACA sections.
              * Station sampling (linear / cosine),
              * Designation decoding for 4-digit, 5-digit and 6-series codes,
              * Thickness and camber lines, linearized tilt, surface offsets.

- topology: Connectivity-level operations on closed loops:
              * Closure predicate and open-ring extraction,
              * Signed area and CCW canonicalization.

- ops:      Lightweight point-array utilities (duplicates, bounds, transforms).

- errors:   Typed exceptions shared by every Loftfoil layer.

- api:      Thin façade: generate_profile, polygon_from_profile, polygon_from_points.
"""

from .errors import LoftfoilError, InvalidArgument, UnsupportedSeries, GeometryDegenerate
from .api import generate_profile, polygon_from_profile, polygon_from_points

__all__ = [
    "LoftfoilError", "InvalidArgument", "UnsupportedSeries", "GeometryDegenerate",
    "generate_profile", "polygon_from_profile", "polygon_from_points",
]
