# -*- coding: utf-8 -*-
# Loftfoil/mesh/core/params.py

"""
Project: Loftfoil
Date: 10/8/2026

Purpose:
--------
Extrusion parameters for the loft builder and their validation.

Notes:
------
- Validation fails fast with InvalidArgument; nothing downstream re-checks ranges.
- GUI slider bounds (span ≤ 5, |twist| ≤ 90, ...) are enforced by the `config`
  layer, not here; the builder only rejects values it cannot mesh.
"""

import math
import numbers
from dataclasses import dataclass
from geometry.errors import InvalidArgument

__all__ = ["LoftParameters", "validate_parameters"]


@dataclass(frozen=True)
class LoftParameters:
    """
    Spanwise loft controls.

    Attributes
    ----------
    span : float
        Extrusion length along +z (0 produces a flat, capped section).
    twist_enabled : bool
        Apply the linear washout `twist_deg` from root (0) to tip (full).
    twist_deg : float
        Tip twist in degrees; slice k is rotated by −twist_deg·u_k.
    scale_enabled : bool
        Apply the linear chord taper from `root_scale` to `tip_scale`.
    root_scale, tip_scale : float
        In-plane scale factors at u = 0 and u = 1 (> 0).
    angle_of_attack_deg : float
        Global rotation of the finished mesh (−angle about z).
    span_segments : int
        Number of spanwise segments; the loft has span_segments + 1 slices.
    """
    span: float = 0.2
    twist_enabled: bool = True
    twist_deg: float = 0.0
    scale_enabled: bool = False
    root_scale: float = 1.0
    tip_scale: float = 1.0
    angle_of_attack_deg: float = 0.0
    span_segments: int = 48


_REAL_FIELDS = ("span", "twist_deg", "root_scale", "tip_scale", "angle_of_attack_deg")
_BOOL_FIELDS = ("twist_enabled", "scale_enabled")


def validate_parameters(params: LoftParameters) -> None:
    """
    Reject parameters the builder cannot mesh.

    Raises
    ------
    InvalidArgument
        Non-finite numbers, span < 0, span_segments not an integer >= 1,
        root_scale/tip_scale <= 0, or non-boolean switches.
    """
    for name in _REAL_FIELDS:
        v = getattr(params, name)
        if isinstance(v, bool) or not isinstance(v, numbers.Real) or not math.isfinite(v):
            raise InvalidArgument("{} must be a finite number.".format(name), {name: v})

    for name in _BOOL_FIELDS:
        if not isinstance(getattr(params, name), bool):
            raise InvalidArgument("{} must be a boolean.".format(name),
                                  {name: getattr(params, name)})

    if params.span < 0.0:
        raise InvalidArgument("span must be >= 0.", {"span": params.span})

    seg = params.span_segments
    if isinstance(seg, bool) or not isinstance(seg, numbers.Integral):
        raise InvalidArgument("span_segments must be an integer.", {"span_segments": seg})
    if seg < 1:
        raise InvalidArgument("span_segments must be >= 1.", {"span_segments": seg})

    for name in ("root_scale", "tip_scale"):
        if getattr(params, name) <= 0.0:
            raise InvalidArgument("{} must be > 0.".format(name), {name: getattr(params, name)})
