# -*- coding: utf-8 -*-
# Loftfoil/geometry/topology/__init__.py

"""
Project: Loftfoil
Date: 10/6/2026

Topology Subfolder:
-------------------
Connectivity-level operations for section outlines.

Modules:
--------
- loop:        Closure predicate, open-ring extraction, signed area, and CCW
               canonicalization for triangulation.

- _validation: Shared (N, 2) coercion/finiteness checks and the closure predicate.
"""

from .loop import is_closed, open_ring, signed_area, ccw_ring

__all__ = ["is_closed", "open_ring", "signed_area", "ccw_ring"]
