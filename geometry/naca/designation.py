# -*- coding: utf-8 -*-
# Loftfoil/geometry/naca/designation.py

"""
Project: Loftfoil
Date: 9/28/2026 (Updated: 10/14/2026)

Purpose
-------
Classify a NACA designation by digit count and decode it into the per-series
parameters consumed by the thickness and camber formulas.

Main Tasks
----------
    1. `coerce_designation`: accept an int or a digit string ("0012" → 12).
    2. `digit_count`: order-of-magnitude classification (4..8).
    3. `decode`: validate digit ranges and return a frozen `Designation`.

Notes
-----
- Classification is digit-count only: anything below 10^4 is a 4-digit code, so
  leading zeros ("0012") survive integer conversion.
- Digit-range checks happen here, before any arithmetic, so invalid codes fail with
  UnsupportedSeries instead of leaking NaN into coordinates.
"""

import numbers
from dataclasses import dataclass
from typing import Union
from ..errors import InvalidArgument, UnsupportedSeries

__all__ = [
    "SERIES4", "SERIES5", "SERIES6",
    "Designation", "coerce_designation", "digit_count", "decode",
]

SERIES4 = 4
SERIES5 = 5
SERIES6 = 6

# Position digits covered by the 5-digit regression fits (p = digit / 20).
_SERIES5_POSITIONS = {0: range(1, 6), 1: range(2, 6)}


@dataclass(frozen=True)
class Designation:
    """
    Decoded designation.

    Attributes
    ----------
    code : int
        The integer designation.
    series : int
        4, 5 or 6.
    thickness : float
        Maximum thickness as a fraction of chord (last two digits / 100).
    camber : float
        Series4: maximum camber m. Series5: design lift coefficient (0.15 · L).
        Series6: design lift coefficient c_li.
    position : float
        Series4: camber position p. Series5: p = P / 20. Series6: mean-line parameter a.
    family : int
        Series5 camber family (0 normal, 1 reflexed); 0 otherwise.
    """
    code: int
    series: int
    thickness: float
    camber: float
    position: float
    family: int = 0

    @property
    def label(self) -> str:
        """Canonical zero-padded label, e.g. 'NACA 0012'."""
        return "NACA {:0{w}d}".format(self.code, w=self.series)


def coerce_designation(value: Union[int, str]) -> int:
    """
    Convert an int or a digit string to a non-negative integer designation.

    Raises
    ------
    InvalidArgument
        For booleans, negative values, floats, or strings with non-digit characters.
    """
    if isinstance(value, bool):
        raise InvalidArgument("Designation must be an integer.", {"designation": value})
    if isinstance(value, str):
        text = value.strip()
        if text.upper().startswith("NACA"):
            text = text[4:].strip()
        if not text.isdigit():
            raise InvalidArgument("Designation must contain digits only.",
                                  {"designation": value})
        return int(text)
    if not isinstance(value, numbers.Integral):
        raise InvalidArgument("Designation must be an integer.", {"designation": value})
    if value < 0:
        raise InvalidArgument("Designation must be non-negative.", {"designation": value})
    return int(value)


def digit_count(code: int) -> int:
    """
    Classify by order of magnitude: <10^4 → 4, <10^5 → 5, <10^6 → 6, <10^7 → 7, else 8.
    """
    if code // 10_000_000 != 0:
        return 8
    if code // 1_000_000 != 0:
        return 7
    if code // 100_000 != 0:
        return 6
    if code // 10_000 != 0:
        return 5
    return 4


def _digit(code: int, place: int) -> int:
    """Decimal digit at `place` (0 = units)."""
    return (code // 10 ** place) % 10


def decode(value: Union[int, str]) -> Designation:
    """
    Decode and range-check a designation.

    Raises
    ------
    InvalidArgument
        If the value is not a non-negative integer designation.
    UnsupportedSeries
        If the series or one of its governing digits has no implemented formula.
    """
    code = coerce_designation(value)
    nc = digit_count(code)
    thickness = (code % 100) / 100.0
    ctx = {"designation": code, "digits": nc}

    if nc == SERIES4:
        m = _digit(code, 3) / 100.0
        p = _digit(code, 2) / 10.0
        if m > 0.0 and p == 0.0:
            raise UnsupportedSeries(
                "4-digit camber requires a non-zero camber position digit.", ctx)
        return Designation(code, SERIES4, thickness, m, p)

    if nc == SERIES5:
        lift = _digit(code, 4)
        pos = _digit(code, 3)
        family = _digit(code, 2)
        if family not in _SERIES5_POSITIONS:
            raise UnsupportedSeries(
                "5-digit camber family digit must be 0 (normal) or 1 (reflexed).",
                dict(ctx, family=family))
        if pos not in _SERIES5_POSITIONS[family]:
            allowed = _SERIES5_POSITIONS[family]
            raise UnsupportedSeries(
                "5-digit camber position digit outside the tabulated range.",
                dict(ctx, position=pos, allowed=(allowed.start, allowed.stop - 1)))
        return Designation(code, SERIES5, thickness, 0.15 * lift, pos / 20.0, family)

    if nc == SERIES6:
        family = _digit(code, 5)
        a = _digit(code, 4)
        cli = _digit(code, 2)
        if family != 6:
            raise UnsupportedSeries("6-digit designations must begin with 6.",
                                    dict(ctx, first_digit=family))
        if a == 0:
            raise UnsupportedSeries("6-series mean-line parameter digit must be 1-9.",
                                    dict(ctx, a_digit=a))
        return Designation(code, SERIES6, thickness, cli / 10.0, a / 10.0)

    raise UnsupportedSeries("NACA {}-digit series has not been implemented.".format(nc), ctx)
