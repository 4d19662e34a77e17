# -*- coding: utf-8 -*-
# Loftfoil/config/__init__.py

"""
Project: Loftfoil
Date: 10/13/2026

Modules:
--------
- settings: Sectioned defaults and public API to assemble, load and write settings, and to
            convert them into ProfileOptions / LoftParameters.
            Order of ops: normalize -> per-key validate -> merge -> cross-validate.

- schema:   Canonical key normalization (aliases → canonical keys) and per-key validation.
            Enforces enums, numeric ranges and boolean switches.

- validate: Cross-key consistency checks after merge (unknown keys, integer counts,
            designation decoding).
"""

from .settings import (
    DEFAULTS, build_settings, load_settings, write_settings, profile_options, loft_parameters,
)
from .schema import normalize_keys, validate as validate_schema
from .validate import cross_validate

__all__ = [
    "DEFAULTS", "build_settings", "load_settings", "write_settings",
    "profile_options", "loft_parameters",
    "normalize_keys", "validate_schema", "cross_validate",
]
