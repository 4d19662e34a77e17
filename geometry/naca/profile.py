# -*- coding: utf-8 -*-
# Loftfoil/geometry/naca/profile.py

"""
Project: Loftfoil
Date: 9/30/2026 (Updated: 10/14/2026)

Purpose:
--------
Analytic airfoil surface generation from a NACA designation.

Pipeline:
---------
decode(designation) → sample_stations → half_thickness → camber_line → linearized tilt
→ normal-offset surfaces → AirfoilProfile (read-only arrays, length station_count)

Notes:
------
- The tilt by `alpha_deg` is the additive approximation used by the legacy generator:
  y_c += (0.5 − x)·sin α, slope = slope / cos α − tan α, x_rot = 0.5 − (0.5 − x)·cos α.
  It is *not* a rotation matrix; for small angles the difference is invisible, and it keeps
  output compatible with previously exported coordinates.
- Surfaces use the standard normal offset:
  x_u = (x_rot − y_t·sin θ)·c, y_u = (y_c + y_t·cos θ)·c, and mirrored for the lower side.
"""

import dataclasses
import logging
import math
import numbers
from dataclasses import dataclass
from typing import Optional, Union
import numpy as np
from ..errors import InvalidArgument
from .designation import decode
from .stations import COSINE, sample_stations
from .thickness import half_thickness
from .camber import camber_line

logger = logging.getLogger(__name__)

__all__ = ["ProfileOptions", "AirfoilProfile", "generate"]


@dataclass(frozen=True)
class ProfileOptions:
    """
    Sampling and shaping options for `generate`.

    Attributes
    ----------
    alpha_deg : float
        Section tilt in degrees (linearized, see module notes).
    chord : float
        Chord length; all output coordinates are scaled by it.
    station_count : int
        Number of chordwise stations per surface (>= 2).
    spacing : str
        "linear" or "cosine".
    closed_trailing_edge : bool
        Close the thickness distribution to zero at x = 1.
    """
    alpha_deg: float = 0.0
    chord: float = 1.0
    station_count: int = 1000
    spacing: str = COSINE
    closed_trailing_edge: bool = False


def _readonly(a: np.ndarray) -> np.ndarray:
    a = np.ascontiguousarray(a, dtype=np.float64)
    a.setflags(write=False)
    return a


@dataclass(frozen=True, eq=False)
class AirfoilProfile:
    """
    Generated section. Every array has length `station_count` and is read-only.

    Attributes
    ----------
    designation : int
        Integer designation the profile was generated from.
    series : int
        Digit-count class (4, 5 or 6).
    stations : np.ndarray
        Normalized chordwise stations in [0, 1] (before tilt and chord scaling).
    camber_x, camber_y : np.ndarray
        Camber line, tilted and scaled by chord.
    upper_x, upper_y, lower_x, lower_y : np.ndarray
        Surface coordinates, index 0 at the leading edge.
    """
    designation: int
    series: int
    stations: np.ndarray
    camber_x: np.ndarray
    camber_y: np.ndarray
    upper_x: np.ndarray
    upper_y: np.ndarray
    lower_x: np.ndarray
    lower_y: np.ndarray

    @property
    def station_count(self) -> int:
        return int(self.stations.shape[0])

    def upper_points(self) -> np.ndarray:
        """(N, 2) upper surface, leading edge → trailing edge."""
        return np.column_stack((self.upper_x, self.upper_y))

    def lower_points(self) -> np.ndarray:
        """(N, 2) lower surface, leading edge → trailing edge."""
        return np.column_stack((self.lower_x, self.lower_y))

    def closed_polygon(self) -> np.ndarray:
        """
        Outline for lofting: upper surface forward, then lower surface reversed.

        The result has 2·N rows; its first and last rows are both the leading edge.
        """
        return np.vstack((self.upper_points(), self.lower_points()[::-1]))


def _check_options(opts: ProfileOptions) -> None:
    """Reject malformed options with InvalidArgument (station checks live in the sampler)."""
    for name in ("alpha_deg", "chord"):
        v = getattr(opts, name)
        if isinstance(v, bool) or not isinstance(v, numbers.Real) or not math.isfinite(v):
            raise InvalidArgument("{} must be a finite number.".format(name), {name: v})
    if opts.chord <= 0.0:
        raise InvalidArgument("chord must be > 0.", {"chord": opts.chord})
    if not isinstance(opts.closed_trailing_edge, (bool, np.bool_)):
        raise InvalidArgument("closed_trailing_edge must be a boolean.",
                              {"closed_trailing_edge": opts.closed_trailing_edge})


def generate(designation: Union[int, str],
             options: Optional[ProfileOptions] = None,
             **overrides) -> AirfoilProfile:
    """
    Generate the surface coordinates of a NACA airfoil.

    Parameters
    ----------
    designation : int or str
        NACA code, e.g. 2412, "0012", 23012, 641212.
    options : ProfileOptions, optional
        Sampling/shaping options; defaults to `ProfileOptions()`.
    **overrides
        Field overrides applied on top of `options` (e.g. station_count=5).

    Returns
    -------
    AirfoilProfile
        Freshly allocated, immutable profile.

    Raises
    ------
    InvalidArgument
        Malformed options or designation value.
    UnsupportedSeries
        Digit count or a governing digit without an implemented formula.
    """
    opts = options if options is not None else ProfileOptions()
    if overrides:
        try:
            opts = dataclasses.replace(opts, **overrides)
        except TypeError as e:
            raise InvalidArgument("Unknown profile option: {}".format(e),
                                  {"options": sorted(overrides)})
    _check_options(opts)

    des = decode(designation)
    x = sample_stations(opts.station_count, opts.spacing)

    yt = half_thickness(x, des.thickness, bool(opts.closed_trailing_edge))
    yc, dyc = camber_line(x, des)

    alpha = math.radians(opts.alpha_deg)
    yc = yc + (0.5 - x) * math.sin(alpha)
    slope = dyc / math.cos(alpha) - math.tan(alpha)
    x_rot = 0.5 - (0.5 - x) * math.cos(alpha)

    theta = np.arctan(slope)
    st = yt * np.sin(theta)
    ct = yt * np.cos(theta)
    c = float(opts.chord)

    profile = AirfoilProfile(
        designation=des.code,
        series=des.series,
        stations=_readonly(x),
        camber_x=_readonly(x_rot * c),
        camber_y=_readonly(yc * c),
        upper_x=_readonly((x_rot - st) * c),
        upper_y=_readonly((yc + ct) * c),
        lower_x=_readonly((x_rot + st) * c),
        lower_y=_readonly((yc - ct) * c),
    )
    logger.info(
        "[ProfileGenerator] Generated %s (%d stations, %s spacing, alpha=%.3g deg, chord=%.4g).",
        des.label, profile.station_count, opts.spacing, opts.alpha_deg, c
    )
    return profile
