# -*- coding: utf-8 -*-
# Loftfoil/config/settings.py

"""
Project: Loftfoil
Date: 10/13/2026 (Updated: 10/16/2026)

Purpose
-------
Assemble Loftfoil settings from sectioned defaults and user overrides, enforce schema
and cross-key validation, and convert the result into the typed option objects consumed
by the profile generator and the loft builder.

Main Tasks
----------
    1. Flatten sectioned defaults (GENERATION, EXTRUSION) and merge normalized,
       schema-checked user params.
    2. Run cross-key validation on the merged dict.
    3. Load params from a JSON file (flat or sectioned) and write settings atomically.
    4. Build `ProfileOptions` / `LoftParameters` from a settings dict.

Notes
-----
- The defaults mirror the legacy GUI start-up state (NACA 2412, 48 sections).
- Order of ops: normalize -> per-key validate -> merge -> cross-validate.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Mapping, Optional
from geometry.errors import InvalidArgument
from geometry.naca.profile import ProfileOptions
from mesh.core.params import LoftParameters
from .schema import normalize_keys, validate
from .validate import cross_validate

__all__ = [
    "DEFAULT_SECTIONS", "DEFAULTS",
    "build_settings", "load_settings", "write_settings",
    "profile_options", "loft_parameters",
]

# -----------------------------
DEFAULT_SECTIONS = [
    ("GENERATION", {
        "designation": "2412",
        "spacing": "cosine",
        "chord": 1.0,
        "station_count": 48,
        "closed_trailing_edge": False,
        "alpha_deg": 0.0,
    }),
    ("EXTRUSION", {
        "span": 0.2,
        "twist_enabled": True,
        "twist_deg": 0.0,
        "scale_enabled": False,
        "root_scale": 1.0,
        "tip_scale": 1.0,
        "angle_of_attack_deg": 0.0,
        "span_segments": 48,
    }),
]


def _flatten_defaults(sections):
    """Turn sectioned defaults into a single flat dict (stable order preserved)."""
    flat = {}  # type: Dict[str, Any]
    for _name, block in sections:
        flat.update(block)
    return flat


DEFAULTS = _flatten_defaults(DEFAULT_SECTIONS)
_SECTION_NAMES = {name for name, _ in DEFAULT_SECTIONS}


def _unsection(params):
    # type: (Mapping[str, Any]) -> Dict[str, Any]
    """Accept {"GENERATION": {...}, "EXTRUSION": {...}} as well as a flat dict."""
    flat = {}  # type: Dict[str, Any]
    for k, v in params.items():
        if k.upper() in _SECTION_NAMES and isinstance(v, Mapping):
            flat.update(v)
        else:
            flat[k] = v
    return flat


# ---------- Public API ----------
def build_settings(params=None):
    # type: (Optional[Mapping[str, Any]]) -> Dict[str, Any]
    """
    Merge user params over the sectioned defaults and return a flat, validated dict.

    Raises
    ------
    InvalidArgument
        Schema violations, unknown keys or non-integer counts.
    UnsupportedSeries
        Designation without an implemented series formula.
    """
    cfg = dict(DEFAULTS)
    if params:
        user = normalize_keys(_unsection(params))
        validate(user)
        cfg.update(user)
    if isinstance(cfg["spacing"], str):
        cfg["spacing"] = cfg["spacing"].lower()
    cross_validate(cfg, DEFAULTS.keys())
    return cfg


def load_settings(path):
    # type: (str) -> Dict[str, Any]
    """
    Read params from a JSON file and build settings from them.

    Raises
    ------
    InvalidArgument
        If the file is not a JSON object, or on any validation error.
    """
    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InvalidArgument("Settings file is not valid JSON: {}".format(e), {"path": str(p)})
    if not isinstance(data, dict):
        raise InvalidArgument("Settings file must contain a JSON object.", {"path": str(p)})
    return build_settings(data)


def write_settings(cfg, path):
    # type: (Mapping[str, Any], str) -> str
    """
    Atomic UTF-8 write of settings as sectioned JSON (unknown keys under "MISC").
    """
    out = {}  # type: Dict[str, Dict[str, Any]]
    seen = set()
    for title, block in DEFAULT_SECTIONS:
        out[title] = {k: cfg[k] for k in block if k in cfg}
        seen.update(block)
    misc = {k: v for k, v in cfg.items() if k not in seen}
    if misc:
        out["MISC"] = misc

    p = Path(path)
    if not p.parent.exists():
        p.parent.mkdir(parents=True)
    tf = tempfile.NamedTemporaryFile("w", encoding="utf-8", dir=str(p.parent), delete=False)
    try:
        json.dump(out, tf, indent=2)
        tf.write("\n")
        tmp_name = tf.name
    finally:
        tf.close()
    os.replace(tmp_name, str(p))
    return str(p)


def profile_options(cfg):
    # type: (Mapping[str, Any]) -> ProfileOptions
    """ProfileOptions from a settings dict."""
    return ProfileOptions(
        alpha_deg=float(cfg["alpha_deg"]),
        chord=float(cfg["chord"]),
        station_count=int(cfg["station_count"]),
        spacing=str(cfg["spacing"]),
        closed_trailing_edge=bool(cfg["closed_trailing_edge"]),
    )


def loft_parameters(cfg):
    # type: (Mapping[str, Any]) -> LoftParameters
    """LoftParameters from a settings dict."""
    return LoftParameters(
        span=float(cfg["span"]),
        twist_enabled=bool(cfg["twist_enabled"]),
        twist_deg=float(cfg["twist_deg"]),
        scale_enabled=bool(cfg["scale_enabled"]),
        root_scale=float(cfg["root_scale"]),
        tip_scale=float(cfg["tip_scale"]),
        angle_of_attack_deg=float(cfg["angle_of_attack_deg"]),
        span_segments=int(cfg["span_segments"]),
    )
