# -*- coding: utf-8 -*-
# Loftfoil/mesh/io/writer.py

"""
Project: Loftfoil
Date: 10/12/2026

Purpose:
--------
Hand a LoftMesh to meshio so any of its writers (OBJ, STL, VTK, PLY, ...) can encode it.

Notes:
------
   - Only triangle cells are emitted; no point or cell data is attached.
   - File format is inferred from the extension unless `file_format` is given.
"""

import logging
from pathlib import Path
from typing import Optional
import numpy as np
import meshio

logger = logging.getLogger(__name__)

__all__ = ["to_meshio", "write_mesh"]


def to_meshio(mesh) -> meshio.Mesh:
    """Wrap positions and triangles in a `meshio.Mesh` (arrays are copied)."""
    pts = np.array(mesh.positions, dtype=np.float64, copy=True)
    tris = np.array(mesh.indices, dtype=np.int64, copy=True)
    return meshio.Mesh(points=pts, cells=[("triangle", tris)])


def write_mesh(mesh, path: str, file_format: Optional[str] = None) -> str:
    """
    Write a LoftMesh with meshio, creating parent folders as needed.

    Returns
    -------
    str
        Written file path.
    """
    p = Path(path)
    if not p.parent.exists():
        p.parent.mkdir(parents=True)
    meshio.write(str(p), to_meshio(mesh), file_format=file_format)
    logger.info("[MeshWriter] Wrote %d triangles to %s.", int(mesh.indices.shape[0]), p)
    return str(p)
