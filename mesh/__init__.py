# -*- coding: utf-8 -*-
# Loftfoil/mesh/__init__.py

"""
Project: Loftfoil
Date: 10/12/2026

Modules:
--------
- core:   LoftParameters, ear-clipping triangulation, spanwise slices, LoftMesh assembly.
- stats:  Mesh QA summary and CSV/JSON export.
- io:     meshio hand-off for file export.
- api:    `build_loft` / `build_wing` façade.
"""
