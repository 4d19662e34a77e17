# -*- coding: utf-8 -*-
# Loftfoil/mesh/core/loft.py

"""
Project: Loftfoil
Date: 10/10/2026 (Updated: 10/15/2026)

Purpose:
--------
Loft a closed section outline into a triangulated solid (or a flat capped section when
the span is zero).

Pipeline:
---------
ccw_ring(polygon) → triangulate_ring (caps) → spanwise_slices → place_slice per frame
→ side quads (2 triangles each) + root cap (−z) + tip cap (+z)
→ rotate by −angle_of_attack_deg about z → centre the bounding box on the origin

Notes:
------
- Vertex layout: slice k occupies rows [k·M, (k+1)·M) where M is the ring size; the
  ring order is the canonical CCW order, so row k·M + j is vertex j of slice k.
- Side quad (k, j): v0 = (k, j), v1 = (k, j+1), v2 = (k+1, j+1), v3 = (k+1, j), split
  into [v0, v1, v2] and [v0, v2, v3]. For a CCW ring these face outward.
- Twist and angle of attack both rotate in the section plane about the z axis through
  the section origin.
- Output arrays are freshly allocated and read-only; the input polygon is never modified.
"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import Optional, Tuple
import numpy as np
from geometry.errors import InvalidArgument
from geometry.ops.basic import bbox_center, bounding_box
from geometry.ops.transform import rotate_z, translate
from geometry.topology.loop import ccw_ring
from .params import LoftParameters, validate_parameters
from .slices import SliceFrame, spanwise_slices, place_slice
from .triangulate import triangulate_ring

logger = logging.getLogger(__name__)

__all__ = ["LoftMesh", "loft", "side_faces"]


def _readonly(a, dtype) -> np.ndarray:
    a = np.ascontiguousarray(a, dtype=dtype)
    a.setflags(write=False)
    return a


@dataclass(frozen=True, eq=False)
class LoftMesh:
    """
    Triangulated loft.

    Attributes
    ----------
    positions : np.ndarray
        (V, 3) float64 vertex positions (read-only).
    indices : np.ndarray
        (F, 3) int64 triangle vertex indices, outward winding (read-only).
    slices : tuple of SliceFrame
        Per-slice transforms, root → tip.
    ring_size : int
        Vertices per slice.
    """
    positions: np.ndarray
    indices: np.ndarray
    slices: Tuple[SliceFrame, ...]
    ring_size: int

    @property
    def n_vertices(self) -> int:
        return int(self.positions.shape[0])

    @property
    def n_triangles(self) -> int:
        return int(self.indices.shape[0])

    def bounds(self) -> Tuple[np.ndarray, np.ndarray]:
        """Axis-aligned (lo, hi) corners."""
        return bounding_box(self.positions)

    def size(self) -> np.ndarray:
        """Bounding-box extents (dx, dy, dz)."""
        lo, hi = self.bounds()
        return hi - lo


def side_faces(ring_size: int, segments: int) -> np.ndarray:
    """
    Side-wall triangles for `segments` spanwise bands of a `ring_size`-vertex ring.

    Returns
    -------
    np.ndarray
        (2 · segments · ring_size, 3) int64, two triangles per quad in (k, j) order.
    """
    m = int(ring_size)
    k = np.arange(segments, dtype=np.int64)[:, None]
    j = np.arange(m, dtype=np.int64)[None, :]
    jn = (j + 1) % m
    v0 = (k * m + j).ravel()
    v1 = (k * m + jn).ravel()
    v2 = ((k + 1) * m + jn).ravel()
    v3 = ((k + 1) * m + j).ravel()

    faces = np.empty((2 * v0.size, 3), dtype=np.int64)
    faces[0::2] = np.column_stack((v0, v1, v2))
    faces[1::2] = np.column_stack((v0, v2, v3))
    return faces


def loft(polygon, params: Optional[LoftParameters] = None, **overrides) -> LoftMesh:
    """
    Build the lofted mesh of a closed section outline.

    Parameters
    ----------
    polygon : array-like
        (N, 2) outline; closed or open, either orientation.
    params : LoftParameters, optional
        Extrusion controls; defaults to `LoftParameters()`.
    **overrides
        Field overrides applied on top of `params` (e.g. span=2.0).

    Returns
    -------
    LoftMesh

    Raises
    ------
    InvalidArgument
        Invalid parameters or a malformed point array.
    GeometryDegenerate
        Fewer than 3 distinct points, zero area, or an outline that cannot be triangulated.
    """
    p = params if params is not None else LoftParameters()
    if overrides:
        try:
            p = dataclasses.replace(p, **overrides)
        except TypeError as e:
            raise InvalidArgument("Unknown loft parameter: {}".format(e),
                                  {"parameters": sorted(overrides)})
    validate_parameters(p)

    ring = ccw_ring(polygon)
    m = int(ring.shape[0])
    cap = triangulate_ring(ring)
    frames = spanwise_slices(p)

    if p.span == 0.0:
        positions = place_slice(ring, frames[0])
        indices = cap
    else:
        segments = len(frames) - 1
        positions = np.vstack([place_slice(ring, f) for f in frames])
        indices = np.vstack((
            side_faces(m, segments),
            cap[:, ::-1],
            cap + segments * m,
        ))
        logger.debug("[LoftBuilder] %d slices x %d ring vertices, %d cap triangles.",
                     len(frames), m, cap.shape[0])

    positions = rotate_z(positions, -float(p.angle_of_attack_deg))
    positions = translate(positions, -bbox_center(positions))

    mesh = LoftMesh(
        positions=_readonly(positions, np.float64),
        indices=_readonly(indices, np.int64),
        slices=frames,
        ring_size=m,
    )
    logger.info("[LoftBuilder] Lofted %d vertices / %d triangles (span=%.4g, segments=%d).",
                mesh.n_vertices, mesh.n_triangles, p.span,
                0 if p.span == 0.0 else p.span_segments)
    return mesh
