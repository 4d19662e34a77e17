# -*- coding: utf-8 -*-
# Loftfoil/config/validate.py

"""
Project: Loftfoil
Date: 10/13/2026

Purpose
-------
Post-merge, cross-key validation for Loftfoil settings. Runs after defaults and user
params are merged; per-key schema checks happen in `schema`.

Main Tasks
----------
    1. Reject keys that no section defines.
    2. Require integer counts (station_count, span_segments).
    3. Decode the designation so unsupported series fail before any geometry is built.
    4. Flag twist/scale values that are set while their switch is off (warning only).
"""

import logging
import numbers
from typing import Any, Mapping
from geometry.errors import InvalidArgument
from geometry.naca.designation import decode

logger = logging.getLogger(__name__)

_INTEGER_KEYS = ("station_count", "span_segments")


def _require(cfg, key):
    # type: (Mapping[str, Any], str) -> None
    if key not in cfg:
        raise InvalidArgument("Missing required key: {}".format(key), {"key": key})


def cross_validate(cfg, known_keys):
    # type: (Mapping[str, Any], Any) -> None
    """
    Cross-key logical validation (post-merge).

    Raises
    ------
    InvalidArgument
        Unknown keys or non-integer counts.
    UnsupportedSeries
        The designation decodes to a series without an implemented formula.
    """
    unknown = sorted(k for k in cfg if k not in known_keys)
    if unknown:
        raise InvalidArgument("Unknown parameter(s): {}".format(", ".join(unknown)),
                              {"unknown": unknown})

    for k in ("designation", "station_count", "span_segments"):
        _require(cfg, k)

    for k in _INTEGER_KEYS:
        v = cfg[k]
        if isinstance(v, bool) or not isinstance(v, numbers.Integral):
            raise InvalidArgument("{} must be an integer.".format(k), {k: v})

    decode(cfg["designation"])

    if not cfg.get("twist_enabled", True) and float(cfg.get("twist_deg", 0.0)) != 0.0:
        logger.warning("[Config] twist_deg=%s is ignored because twist_enabled is false.",
                       cfg.get("twist_deg"))
    if not cfg.get("scale_enabled", False) and (
            float(cfg.get("root_scale", 1.0)) != 1.0 or float(cfg.get("tip_scale", 1.0)) != 1.0):
        logger.warning("[Config] root/tip scale are ignored because scale_enabled is false.")
