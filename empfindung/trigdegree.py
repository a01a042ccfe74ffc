# -*- coding: utf-8 -*-
"""
Empfindung: Perceptual colour difference in CIE L*a*b* space
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Degree-based trigonometry
=========================
Thin wrappers over the radian-based NumPy primitives. The colour-difference
formulas are written in degrees (hue angles, the CIEDE2000 rotation term),
so every angle in the package goes through these helpers.

The helpers are Numba-compiled with explicit ``float64`` signatures so the
formula kernels can inline them in nopython mode; they remain callable from
plain Python.

NOTE: The conversions multiply first and divide second
(``x * 180 / pi`` rather than ``x * (180 / pi)``). This keeps the landmark
angles exact, e.g. ``to_radians(180.0) == np.pi`` and ``cos_deg(180.0) == -1``.
"""

import numpy as np
from numba import njit, float64

__all__ = [
    "to_degrees",
    "to_radians",
    "cos_deg",
    "sin_deg",
    "atan2_deg",
]


@njit(float64(float64), cache=True, fastmath=False)
def to_degrees(radians: float) -> float:
    """Converts an angle from radians to degrees."""
    return radians * 180.0 / np.pi

@njit(float64(float64), cache=True, fastmath=False)
def to_radians(degrees: float) -> float:
    """Converts an angle from degrees to radians."""
    return degrees * np.pi / 180.0

@njit(float64(float64), cache=True, fastmath=False)
def cos_deg(degrees: float) -> float:
    """Cosine of an angle given in degrees."""
    return np.cos(to_radians(degrees))

@njit(float64(float64), cache=True, fastmath=False)
def sin_deg(degrees: float) -> float:
    """Sine of an angle given in degrees."""
    return np.sin(to_radians(degrees))

@njit(float64(float64, float64), cache=True, fastmath=False)
def atan2_deg(y: float, x: float) -> float:
    """
    Two-argument arctangent in degrees.

    Argument order follows ``np.arctan2``: ``y`` (opposite side) first.

    Returns:
        Angle in (-180, 180]. ``atan2_deg(0, 0)`` is 0.
    """
    return to_degrees(np.arctan2(y, x))
