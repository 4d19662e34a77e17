# -*- coding: utf-8 -*-
# Loftfoil/post/__init__.py

"""
Project: Loftfoil
Date: 10/14/2026

Modules:
--------
- plot_profile: Section plot (upper/lower surfaces and camber line).
- plot_loft:    3D triangle wireframe of a LoftMesh; headless-safe backend,
                optional down-sampling for huge meshes.
"""

from .plot_profile import plot_profile
from .plot_loft import plot_loft

__all__ = ["plot_profile", "plot_loft"]
