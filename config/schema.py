# -*- coding: utf-8 -*-
# Loftfoil/config/schema.py

"""
Project: Loftfoil
Date: 10/13/2026

Purpose
-------
Lightweight schema layer for Loftfoil parameters. Canonicalizes user-friendly keys
(including the camelCase names of the legacy GUI controls), validates categorical options
against enumerations, and checks numeric scalars against the GUI slider ranges, raising
`InvalidArgument` with actionable messages on violations.

Main Tasks
----------
    1. Canonicalize params via `normalize_keys` using curated `ALIASES`.
    2. Enforce categorical constraints using `ENUMS` (case-insensitive matching).
    3. Enforce numeric constraints using `RANGES` with inclusive/strict bounds.
    4. Enforce boolean switches using `BOOLEANS`.
    5. Expose a single `validate` entrypoint for post-canonicalization checks.

Notes
-----
- No defaults are filled here; `settings` merges over sectioned defaults and
  `validate.cross_validate` handles cross-key and type consistency.
- Unknown keys pass through untouched at this layer.
"""

from typing import Any, Dict, Mapping
from geometry.errors import InvalidArgument

__all__ = ["normalize_keys", "validate", "ALIASES", "ENUMS", "RANGES", "BOOLEANS"]

# --------------------------
# Canonicalization (aliases)
# --------------------------
ALIASES = {
    # Generation
    "naca": "designation",
    "code": "designation",
    "sections": "station_count",
    "stations": "station_count",
    "n_stations": "station_count",
    "alpha": "alpha_deg",
    "tilt": "alpha_deg",
    "cte": "closed_trailing_edge",
    "closed_te": "closed_trailing_edge",
    "closedTrailingEdge": "closed_trailing_edge",

    # Extrusion
    "enableTwist": "twist_enabled",
    "twist": "twist_deg",
    "enableScale": "scale_enabled",
    "rootScale": "root_scale",
    "tipScale": "tip_scale",
    "aoa": "angle_of_attack_deg",
    "angle_of_attack": "angle_of_attack_deg",
    "segments": "span_segments",
    "spanSegments": "span_segments",
}

# --------------------------
# Enumerations (exact sets)
# --------------------------
ENUMS = {
    "spacing": {"linear", "cosine"},
}

# --------------------------
# Numeric ranges (inclusive flag)
# --------------------------
# key -> (min, max, inclusive_bounds)
RANGES = {
    "chord": (0.1, 2.0, True),
    "station_count": (4, 1000, True),
    "alpha_deg": (-90.0, 90.0, False),
    "span": (0.0, 5.0, True),
    "twist_deg": (-90.0, 90.0, True),
    "angle_of_attack_deg": (-90.0, 90.0, True),
    "root_scale": (0.01, 2.0, True),
    "tip_scale": (0.01, 2.0, True),
    "span_segments": (1, 1000, True),
}

BOOLEANS = {"closed_trailing_edge", "twist_enabled", "scale_enabled"}


def normalize_keys(params: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Map user-friendly keys to canonical keys (no value coercion).

    Only keys present in `ALIASES` are rewritten; all others are passed through.
    """
    out = {}  # type: Dict[str, Any]
    for k, v in params.items():
        out[ALIASES.get(k, k)] = v
    return out


def _check_enum(key: str, val: Any) -> None:
    if key in ENUMS:
        sval = str(val).lower()
        if sval not in ENUMS[key]:
            raise InvalidArgument(
                "Invalid value for {k}: {v!r}. Allowed: {opts}".format(
                    k=key, v=val, opts=sorted(ENUMS[key])),
                {key: val})


def _check_range(key: str, val: Any) -> None:
    """
    Validate numeric parameters against `RANGES`.

    Raises
    ------
    InvalidArgument
        Non-numeric value for a ranged key, or a value outside the bounds.
    """
    if key not in RANGES:
        return
    lo, hi, inclusive = RANGES[key]
    if isinstance(val, bool):
        raise InvalidArgument("Non-numeric value for {k}: {v!r}".format(k=key, v=val), {key: val})
    try:
        fval = float(val)
    except (TypeError, ValueError):
        raise InvalidArgument("Non-numeric value for {k}: {v!r}".format(k=key, v=val), {key: val})
    ok = (lo <= fval <= hi) if inclusive else (lo < fval < hi)
    if not ok:
        raise InvalidArgument(
            "Out-of-range {k}: {v} (expected {lo} {ineq} {hi})".format(
                k=key, v=fval, lo=lo, ineq="≤ ... ≤" if inclusive else "< ... <", hi=hi),
            {key: val, "inclusive": inclusive})


def _check_bool(key: str, val: Any) -> None:
    if key in BOOLEANS and not isinstance(val, bool):
        raise InvalidArgument("{} must be true or false.".format(key), {key: val})


def validate(params: Mapping[str, Any]) -> None:
    """
    Validate a parameter dict *after* canonicalization via `normalize_keys`.

    Raises
    ------
    InvalidArgument
        On any violation (bad enum, non-numeric ranged value, out-of-range, non-boolean switch).
    """
    for k, v in params.items():
        _check_enum(k, v)
        _check_range(k, v)
        _check_bool(k, v)
