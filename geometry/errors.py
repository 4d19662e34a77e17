# -*- coding: utf-8 -*-
# Loftfoil/geometry/errors.py


"""
Project: Loftfoil
Date: 10/4/2026

Purpose
-------
Provide typed exceptions shared by the profile generator, the loft builder and the
parameters surface, with compact, context-aware messages so a GUI or script can show
the offending value without re-deriving it.

Main Tasks
----------
    1. Define LoftfoilError(message, context) with a compact context suffix in __str__.
    2. Provide typed subclasses: InvalidArgument, UnsupportedSeries, GeometryDegenerate.
    3. Supply _format_context helper and expose public names via __all__.

Notes
-----
- Context is optional; long values are truncated for readability.
- All subclasses also derive from ValueError so generic callers can catch them.
- Errors are raised before any output is assembled; nothing partial is returned.
"""

__all__ = [
    "LoftfoilError",
    "InvalidArgument",
    "UnsupportedSeries",
    "GeometryDegenerate",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class LoftfoilError(Exception):
    """
    Base class for all errors raised by the geometry and mesh layers.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields to append in the string form (e.g., {"designation": 1234567}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super().__init__(message)

    def __str__(self):
        base = super().__str__()
        return base + _format_context(self.context)


class InvalidArgument(LoftfoilError, ValueError):
    """
    Malformed numeric inputs:
      - too few stations or span segments
      - negative span, non-positive root/tip scale
      - unknown spacing names, non-finite values, unknown config keys
    """


class UnsupportedSeries(LoftfoilError, ValueError):
    """
    Designations that classify correctly but have no implemented formula:
      - 7/8-digit designations
      - 5-digit family digit outside {0, 1} or position digit outside the fitted range
      - 6-digit designations whose first digit is not 6
    """


class GeometryDegenerate(LoftfoilError, ValueError):
    """
    Section outlines that cannot be triangulated:
      - fewer than 3 distinct points
      - zero enclosed area
      - ear clipping stalls on a self-intersecting outline
    """
