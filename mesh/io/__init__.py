# -*- coding: utf-8 -*-
# Loftfoil/mesh/io/__init__.py

"""
Project: Loftfoil
Date: 10/12/2026

Modules:
--------
- writer:   meshio hand-off (`to_meshio`, `write_mesh`).
"""

from .writer import to_meshio, write_mesh

__all__ = ["to_meshio", "write_mesh"]
