# -*- coding: utf-8 -*-
# Loftfoil/geometry/naca/__init__.py

"""
Project: Loftfoil
Date: 9/28/2026 (Updated: 10/14/2026)

NACA Subfolder:
---------------
Analytic section generation from a NACA designation.

Modules:
--------
- stations:    Linear / cosine chordwise station sampling.
- designation: Digit-count classification and per-series digit decoding.
- thickness:   Half-thickness polynomial (open or closed trailing edge).
- camber:      Series4 / Series5 (normal, reflexed) / Series6 mean lines and slopes.
- profile:     ProfileOptions, AirfoilProfile and the `generate` pipeline.
"""

from .stations import LINEAR, COSINE, SPACINGS, sample_stations
from .designation import SERIES4, SERIES5, SERIES6, Designation, decode, digit_count
from .profile import ProfileOptions, AirfoilProfile, generate

__all__ = [
    "LINEAR", "COSINE", "SPACINGS", "sample_stations",
    "SERIES4", "SERIES5", "SERIES6", "Designation", "decode", "digit_count",
    "ProfileOptions", "AirfoilProfile", "generate",
]
