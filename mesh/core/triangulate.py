# -*- coding: utf-8 -*-
# Loftfoil/mesh/core/triangulate.py

"""
Project: Loftfoil
Date: 10/9/2026 (Updated: 10/15/2026)

Purpose:
--------
Triangulate a simple polygon (an open CCW ring) by ear clipping. Used for the flat
section and for the root/tip caps of a loft.

Main Tasks:
-----------
    1. Maintain the shrinking polygon as a doubly linked prev/next index list.
    2. Track non-convex vertices; only those can invalidate an ear candidate.
    3. Clip ears until three vertices remain, emitting n − 2 CCW triangles.

Notes:
------
- Input must be an open ring in CCW order (see `geometry.topology.ccw_ring`).
- Collinear vertices are never ear tips while a proper ear exists. If clipping
  stalls with only collinear tips left, one is clipped as a zero-area sliver so the
  cap still shares every ring edge with the side wall.
- Runs on Python floats; cost is O(n·r) per pass with r non-convex vertices.
"""

from typing import List
import numpy as np
from geometry.errors import GeometryDegenerate

__all__ = ["triangulate_ring"]


def triangulate_ring(ring) -> np.ndarray:
    """
    Ear-clip an open CCW ring.

    Parameters
    ----------
    ring : array-like
        (N, 2) vertices, N >= 3, counter-clockwise, no repeated closing vertex.

    Returns
    -------
    np.ndarray
        (N − 2, 3) int64 triangle indices into `ring`, each wound CCW.

    Raises
    ------
    GeometryDegenerate
        Fewer than 3 vertices, or no ear can be found (self-intersecting outline).
    """
    P = np.asarray(ring, dtype=np.float64)
    n = int(P.shape[0])
    if n < 3:
        raise GeometryDegenerate("Triangulation needs at least 3 vertices.", {"n_points": n})
    if n == 3:
        return np.array([[0, 1, 2]], dtype=np.int64)

    xs = P[:, 0].tolist()
    ys = P[:, 1].tolist()

    def cross(a: int, b: int, c: int) -> float:
        return (xs[b] - xs[a]) * (ys[c] - ys[a]) - (ys[b] - ys[a]) * (xs[c] - xs[a])

    def inside(p: int, a: int, b: int, c: int) -> bool:
        # strict: points on an edge do not block
        return cross(a, b, p) > 0.0 and cross(b, c, p) > 0.0 and cross(c, a, p) > 0.0

    prev = [(i - 1) % n for i in range(n)]
    nxt = [(i + 1) % n for i in range(n)]
    blockers = {i for i in range(n) if cross(prev[i], i, nxt[i]) <= 0.0}

    def is_ear(i: int) -> bool:
        a, c = prev[i], nxt[i]
        if cross(a, i, c) <= 0.0:
            return False
        for r in blockers:
            if r == a or r == i or r == c:
                continue
            if inside(r, a, i, c):
                return False
        return True

    tris: List[List[int]] = []
    remaining = n
    i = 0
    misses = 0
    while remaining > 3:
        if is_ear(i):
            tip = i
        elif misses < remaining:
            i = nxt[i]
            misses += 1
            continue
        else:
            tip = _collinear_tip(i, remaining, prev, nxt, cross)
            if tip is None:
                raise GeometryDegenerate(
                    "Ear clipping stalled; the outline is probably self-intersecting.",
                    {"remaining": remaining, "n_points": n})

        a, c = prev[tip], nxt[tip]
        tris.append([a, tip, c])
        nxt[a] = c
        prev[c] = a
        blockers.discard(tip)
        for v in (a, c):
            if v in blockers and cross(prev[v], v, nxt[v]) > 0.0:
                blockers.discard(v)
        remaining -= 1
        misses = 0
        i = c

    tris.append([prev[i], i, nxt[i]])
    return np.asarray(tris, dtype=np.int64)


def _collinear_tip(start, remaining, prev, nxt, cross):
    """First vertex (walking from `start`) whose neighbours are collinear with it."""
    i = start
    for _ in range(remaining):
        if cross(prev[i], i, nxt[i]) == 0.0:
            return i
        i = nxt[i]
    return None
