# -*- coding: utf-8 -*-
# Loftfoil/geometry/ops/transform.py

"""
Project: Loftfoil
Date: 10/12/2026

Purpose
-------
Rigid and uniform transforms for section outlines and loft vertex arrays. Every helper
returns a new array; rotations follow the right-hand rule about +z (positive = CCW when
looking down the span).
"""

import math
import numpy as np

__all__ = ["rotation_z", "rotate_z", "scale_xy", "translate"]


def rotation_z(angle_deg: float) -> np.ndarray:
    """2x2 rotation matrix for an in-plane rotation of `angle_deg` degrees."""
    a = math.radians(angle_deg)
    c, s = math.cos(a), math.sin(a)
    return np.array([[c, -s], [s, c]], dtype=np.float64)


def rotate_z(points: np.ndarray, angle_deg: float) -> np.ndarray:
    """
    Rotate (N, 2) or (N, 3) points about the z axis through the origin.

    The z column (if present) is carried through unchanged. A zero angle returns
    an exact copy so untwisted slices stay bit-identical to the input ring.
    """
    out = np.array(points, dtype=np.float64, copy=True)
    if angle_deg == 0.0:
        return out
    out[:, :2] = out[:, :2] @ rotation_z(angle_deg).T
    return out


def scale_xy(points: np.ndarray, factor: float) -> np.ndarray:
    """Uniformly scale the in-plane (x, y) coordinates about the origin."""
    out = np.array(points, dtype=np.float64, copy=True)
    if factor != 1.0:
        out[:, :2] *= factor
    return out


def translate(points: np.ndarray, offset) -> np.ndarray:
    """Translate points by `offset` (length matching the point dimension)."""
    return np.asarray(points, dtype=np.float64) + np.asarray(offset, dtype=np.float64)
