# -*- coding: utf-8 -*-
# Loftfoil/mesh/core/slices.py

"""
Project: Loftfoil
Date: 10/9/2026

Purpose:
--------
Spanwise slice frames and their placement. A frame records the rigid/uniform transform
actually applied to the section ring at one spanwise station, so callers (and tests) can
inspect twist and taper without re-deriving them from vertex positions.

Notes:
------
- u_k = k / span_segments; twist_k = −twist_deg·u_k; scale_k = lerp(root, tip, u_k).
- Disabled twist or scale yields exactly 0 / 1 for every slice.
- A zero span yields a single frame at z = 0 with no twist. Its scale is root_scale only
  when scale_enabled is set, otherwise 1. The legacy viewer always scaled the flat section
  by root_scale; here the scale switch governs flat and lofted sections alike.
"""

from dataclasses import dataclass
from typing import Tuple
import numpy as np
from geometry.ops.transform import rotate_z, scale_xy
from .params import LoftParameters

__all__ = ["SliceFrame", "spanwise_slices", "place_slice"]


@dataclass(frozen=True)
class SliceFrame:
    """Transform of one spanwise slice: in-plane twist (deg), uniform scale, then z offset."""
    index: int
    u: float
    z: float
    twist_deg: float
    scale: float


def spanwise_slices(params: LoftParameters) -> Tuple[SliceFrame, ...]:
    """
    Enumerate the slice frames for `params` (assumed validated).

    Returns
    -------
    tuple of SliceFrame
        span_segments + 1 frames ordered root → tip, or a single frame when span == 0.
    """
    if params.span == 0.0:
        scale = float(params.root_scale) if params.scale_enabled else 1.0
        return (SliceFrame(index=0, u=0.0, z=0.0, twist_deg=0.0, scale=scale),)

    n = int(params.span_segments)
    frames = []
    for k in range(n + 1):
        u = k / n
        twist = -float(params.twist_deg) * u if params.twist_enabled else 0.0
        if params.scale_enabled:
            scale = params.root_scale + (params.tip_scale - params.root_scale) * u
        else:
            scale = 1.0
        frames.append(SliceFrame(index=k, u=u, z=float(params.span) * u,
                                 twist_deg=twist, scale=float(scale)))
    return tuple(frames)


def place_slice(ring: np.ndarray, frame: SliceFrame) -> np.ndarray:
    """Twist, scale and lift a 2D ring into a new (N, 3) vertex block."""
    xy = scale_xy(rotate_z(ring, frame.twist_deg), frame.scale)
    out = np.empty((xy.shape[0], 3), dtype=np.float64)
    out[:, :2] = xy
    out[:, 2] = frame.z
    return out
