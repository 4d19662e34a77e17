# -*- coding: utf-8 -*-
# Loftfoil/mesh/stats/report.py

"""
Project: Loftfoil
Date: 10/11/2026

Purpose:
--------
Compute a compact quality summary of a LoftMesh and return a structured dictionary
ready for export (CSV/JSON) or downstream checks.

Main Tasks:
-----------
    1) Inventory: vertex/triangle/slice counts and ring size.
    2) Extents: bounding box and size.
    3) Integrals: surface area and signed volume (divergence theorem).
    4) Topology: edge-manifold watertightness, consistent winding, degenerate triangles.

Notes:
------
    - A closed loft with outward winding has signed_volume > 0.
    - A flat section (span 0) is an open surface: watertight is False, volume 0.
"""

from typing import Any, Dict
import numpy as np

__all__ = ["summarize", "triangle_areas", "signed_volume", "edge_report"]

# Triangles at or below this area are reported as degenerate.
DEGENERATE_AREA = 1e-15


def _corners(positions: np.ndarray, indices: np.ndarray):
    return positions[indices[:, 0]], positions[indices[:, 1]], positions[indices[:, 2]]


def triangle_areas(positions: np.ndarray, indices: np.ndarray) -> np.ndarray:
    """Per-triangle areas, shape (F,)."""
    a, b, c = _corners(positions, indices)
    return 0.5 * np.linalg.norm(np.cross(b - a, c - a), axis=1)


def signed_volume(positions: np.ndarray, indices: np.ndarray) -> float:
    """Enclosed volume; positive when triangles wind outward."""
    a, b, c = _corners(positions, indices)
    return float(np.einsum("ij,ij->i", a, np.cross(b, c)).sum() / 6.0)


def edge_report(indices: np.ndarray) -> Dict[str, Any]:
    """
    Edge-use statistics.

    Returns
    -------
    dict
        {"n_edges", "boundary_edges", "nonmanifold_edges", "watertight", "consistent"}
        where `watertight` means every undirected edge is used by exactly two triangles
        and `consistent` means no directed edge is used twice.
    """
    if indices.shape[0] == 0:
        return {"n_edges": 0, "boundary_edges": 0, "nonmanifold_edges": 0,
                "watertight": False, "consistent": True}
    directed = np.concatenate((indices[:, [0, 1]], indices[:, [1, 2]], indices[:, [2, 0]]))
    undirected = np.sort(directed, axis=1)
    _, counts = np.unique(undirected, axis=0, return_counts=True)
    _, dcounts = np.unique(directed, axis=0, return_counts=True)
    return {
        "n_edges": int(counts.size),
        "boundary_edges": int(np.count_nonzero(counts == 1)),
        "nonmanifold_edges": int(np.count_nonzero(counts > 2)),
        "watertight": bool(np.all(counts == 2)),
        "consistent": bool(np.all(dcounts == 1)),
    }


def summarize(mesh) -> Dict[str, Any]:
    """
    Produce the QA summary for a LoftMesh.

    Returns
    -------
    dict
        {
          "n_vertices", "n_triangles", "n_slices", "ring_size",
          "bbox": {"xmin","xmax","ymin","ymax","zmin","zmax"},
          "size": {"dx","dy","dz"},
          "surface_area", "signed_volume",
          "edges": {...}, "watertight", "degenerate_triangles"
        }
    """
    P = np.asarray(mesh.positions, dtype=np.float64)
    T = np.asarray(mesh.indices, dtype=np.int64)
    lo, hi = mesh.bounds()
    areas = triangle_areas(P, T)
    edges = edge_report(T)

    return {
        "n_vertices": int(mesh.n_vertices),
        "n_triangles": int(mesh.n_triangles),
        "n_slices": len(mesh.slices),
        "ring_size": int(mesh.ring_size),
        "bbox": {
            "xmin": float(lo[0]), "xmax": float(hi[0]),
            "ymin": float(lo[1]), "ymax": float(hi[1]),
            "zmin": float(lo[2]), "zmax": float(hi[2]),
        },
        "size": {"dx": float(hi[0] - lo[0]), "dy": float(hi[1] - lo[1]),
                 "dz": float(hi[2] - lo[2])},
        "surface_area": float(areas.sum()),
        "signed_volume": signed_volume(P, T),
        "edges": edges,
        "watertight": edges["watertight"],
        "degenerate_triangles": int(np.count_nonzero(areas <= DEGENERATE_AREA)),
    }
