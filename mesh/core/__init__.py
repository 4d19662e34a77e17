# -*- coding: utf-8 -*-
# Loftfoil/mesh/core/__init__.py

"""
Project: Loftfoil
Date: 10/10/2026

Core Subpackage:
----------------
Loft construction engine.

Modules:
--------
- params:      LoftParameters and validation.
- triangulate: Ear clipping of CCW rings (flat section and loft caps).
- slices:      SliceFrame enumeration and per-slice placement.
- loft:        LoftMesh and the `loft` assembly pipeline.
"""

from .params import LoftParameters, validate_parameters
from .triangulate import triangulate_ring
from .slices import SliceFrame, spanwise_slices, place_slice
from .loft import LoftMesh, loft, side_faces

__all__ = [
    "LoftParameters", "validate_parameters",
    "triangulate_ring",
    "SliceFrame", "spanwise_slices", "place_slice",
    "LoftMesh", "loft", "side_faces",
]
