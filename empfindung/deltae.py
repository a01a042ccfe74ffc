# -*- coding: utf-8 -*-
"""
Empfindung: Perceptual colour difference in CIE L*a*b* space
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Delta E Metrics
===============
Colour-difference formulas for a single pair of CIELAB colours:

- CIE 1976 (Delta E*ab): Euclidean distance in L*a*b*.
- CIE 1994: application-weighted distance (graphic arts / textiles).
- CIEDE2000: CIE 2000 formula with hue rotation and neutral-colour terms.
- CMC l:c (1984): quasimetric with lightness:chroma weighting.

Every public formula validates both colours with ``check_color`` before
touching the numbers, then hands plain floats to a Numba scalar kernel.

Numerical Notes:
    - The Delta H term of CIE 1994 and CMC l:c is computed from the identity
      dH^2 = da^2 + db^2 - dC^2. Floating-point noise can push the radicand
      below zero, in which case the result is NaN. This is the behaviour of
      the reference implementations and is not clamped.
    - CIE 1994 and CMC l:c are asymmetric: the first colour is the reference
      (standard) and drives the weighting functions.

References:
    - CIE 15:2004 "Colorimetry"
    - CIE Publication 116-1995 (CIE 1994 colour difference).
    - Sharma, G., Wu, W., & Dalal, E. N. (2005). "The CIEDE2000 color-difference formula".
    - Clarke, McDonald, Rigg (1984). "CMC l:c colour difference formula".
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Final, FrozenSet, Sequence, Union

import numpy as np
from numba import njit, float64

from .colorutils import _lab_to_lch_kernel, check_color
from .trigdegree import atan2_deg, cos_deg, sin_deg

__all__ = [
    # --- Enumerations ---
    "ApplicationType",
    "ThresholdType",

    # --- Constants ---
    "C25_7",

    # --- Configuration ---
    "set_strict_ieee",
    "is_strict_ieee",

    # --- Functions ---
    "get_kl_value",
    "cie1976",
    "cie1994",
    "ciede2000",
    "cmc1984",

    # --- Classes ---
    "DeltaE",
]


class ApplicationType(str, Enum):
    """CIE 1994 weighting presets. Plain strings compare equal to members."""
    GRAPHIC_ARTS = "graphicArts"
    TEXTILES = "textiles"


class ThresholdType(str, Enum):
    """CMC l:c weighting presets (2:1 acceptability, 1:1 imperceptibility)."""
    ACCEPTABILITY = "acceptability"
    IMPERCEPTIBILITY = "imperceptibility"


C25_7: Final[float] = 25.0**7


# --- Runtime Configuration ---
# When True (default), the formula kernels are compiled with fastmath=False
# and reproduce reference implementations bit for bit. When False, relaxed
# kernels are used; their fastmath flag set leaves out 'nnan', 'ninf' and
# 'afn', so NaN results from a negative Delta H radicand still propagate.
#
# Toggle at runtime via:
#     from empfindung import deltae
#     deltae.set_strict_ieee(False)  # relaxed kernels
#     deltae.set_strict_ieee(True)   # back to strict mode (default)
_STRICT_IEEE: bool = True

_RELAXED_FASTMATH: Final[FrozenSet[str]] = frozenset({"nsz", "arcp", "contract", "reassoc"})

def set_strict_ieee(enabled: bool = True) -> None:
    """
    Toggle between strict IEEE 754 (default) and relaxed Numba kernels.

    Args:
        enabled: If True, use strict IEEE mode.
    """
    global _STRICT_IEEE
    _STRICT_IEEE = bool(enabled)

def is_strict_ieee() -> bool:
    """Returns True if the strict IEEE kernels are active."""
    return _STRICT_IEEE


# =============================================================================
# 1. SCALAR KERNELS
# =============================================================================
# Plain Python bodies; compiled twice below (strict + relaxed).

@njit(float64(float64, float64), cache=True, fastmath=False)
def _hue_angle_kernel(b: float, a_p: float) -> float:
    """CIEDE2000 h' in degrees within [0, 360); 0 when a' = b = 0."""
    if a_p == 0.0 and b == 0.0:
        return 0.0
    h = atan2_deg(b, a_p) % 360.0
    # A tiny negative angle rounds up to exactly 360
    if h >= 360.0:
        h -= 360.0
    return h

def _cie1976_impl(l1: float, a1: float, b1: float,
                  l2: float, a2: float, b2: float) -> float:
    l_diff = l2 - l1
    a_diff = a2 - a1
    b_diff = b2 - b1
    return np.sqrt(l_diff * l_diff + a_diff * a_diff + b_diff * b_diff)

def _cie1994_impl(l1: float, a1: float, b1: float,
                  l2: float, a2: float, b2: float,
                  kl: float, k1: float, k2: float) -> float:
    """
    CIE 1994 with kc = kh = 1.

    S_C is weighted by the reference chroma and S_H by the sample chroma.
    """
    kc = 1.0
    kh = 1.0

    c1 = np.sqrt(a1 * a1 + b1 * b1)
    c2 = np.sqrt(a2 * a2 + b2 * b2)

    delta_a = a1 - a2
    delta_b = b1 - b2
    delta_c = c1 - c2
    # Signed radicand, not clamped (see module notes)
    delta_h = np.sqrt(delta_a * delta_a + delta_b * delta_b - delta_c * delta_c)
    delta_l = l1 - l2

    sl = 1.0
    sc = 1.0 + k1 * c1
    sh = 1.0 + k2 * c2

    term_l = delta_l / (kl * sl)
    term_c = delta_c / (kc * sc)
    term_h = delta_h / (kh * sh)

    return np.sqrt(term_l * term_l + term_c * term_c + term_h * term_h)

def _ciede2000_impl(l1: float, a1: float, b1: float,
                    l2: float, a2: float, b2: float,
                    kl: float, kc: float, kh: float) -> float:
    """CIEDE2000, following the step order of Sharma et al. (2005)."""
    _, c1, _ = _lab_to_lch_kernel(l1, a1, b1)
    _, c2, _ = _lab_to_lch_kernel(l2, a2, b2)

    delta_l_p = l2 - l1

    l_bar = (l1 + l2) / 2.0
    c_bar = (c1 + c2) / 2.0

    # G term: compensation for neutral colours
    c_bar_7 = c_bar**7
    c_coeff = np.sqrt(c_bar_7 / (c_bar_7 + C25_7))
    a1_p = a1 + (a1 / 2.0) * (1.0 - c_coeff)
    a2_p = a2 + (a2 / 2.0) * (1.0 - c_coeff)

    c1_p = np.sqrt(a1_p * a1_p + b1 * b1)
    c2_p = np.sqrt(a2_p * a2_p + b2 * b2)
    c_bar_p = (c1_p + c2_p) / 2.0
    delta_c_p = c2_p - c1_p

    h1_p = _hue_angle_kernel(b1, a1_p)
    h2_p = _hue_angle_kernel(b2, a2_p)

    if c1_p == 0.0 or c2_p == 0.0:
        delta_small_h_p = 0.0
        delta_big_h_p = 0.0
        h_bar_p = h1_p + h2_p
    else:
        if abs(h1_p - h2_p) <= 180.0:
            delta_small_h_p = h2_p - h1_p
        elif h2_p <= h1_p:
            delta_small_h_p = h2_p - h1_p + 360.0
        else:
            delta_small_h_p = h2_p - h1_p - 360.0

        delta_big_h_p = 2.0 * np.sqrt(c1_p * c2_p) * sin_deg(delta_small_h_p / 2.0)

        if abs(h1_p - h2_p) <= 180.0:
            h_bar_p = (h1_p + h2_p) / 2.0
        elif (h1_p + h2_p) < 360.0:
            h_bar_p = (h1_p + h2_p + 360.0) / 2.0
        else:
            h_bar_p = (h1_p + h2_p - 360.0) / 2.0

    T = (1.0
         - 0.17 * cos_deg(h_bar_p - 30.0)
         + 0.24 * cos_deg(2.0 * h_bar_p)
         + 0.32 * cos_deg(3.0 * h_bar_p + 6.0)
         - 0.20 * cos_deg(4.0 * h_bar_p - 63.0))

    sl_coeff = (l_bar - 50.0) * (l_bar - 50.0)
    sl = 1.0 + (0.015 * sl_coeff) / np.sqrt(20.0 + sl_coeff)
    sc = 1.0 + 0.045 * c_bar_p
    sh = 1.0 + 0.015 * c_bar_p * T

    # Hue rotation term (blue region around 275 degrees), weighted by the
    # a' coefficient from the unprimed mean chroma
    rt_angle = 60.0 * np.exp(-((h_bar_p - 275.0) / 25.0) * ((h_bar_p - 275.0) / 25.0))
    rt = -2.0 * c_coeff * sin_deg(rt_angle)

    term_l = delta_l_p / (kl * sl)
    term_c = delta_c_p / (kc * sc)
    term_h = delta_big_h_p / (kh * sh)

    return np.sqrt(term_l * term_l + term_c * term_c + term_h * term_h
                   + rt * term_c * term_h)

def _cmc1984_impl(l1: float, a1: float, b1: float,
                  l2: float, a2: float, b2: float,
                  l: float, c: float) -> float:
    """CMC l:c. Only the reference colour's LCh drives the weights."""
    _, c1, h1 = _lab_to_lch_kernel(l1, a1, b1)
    _, c2, _ = _lab_to_lch_kernel(l2, a2, b2)

    c1_4 = c1 * c1 * c1 * c1
    F = np.sqrt(c1_4 / (c1_4 + 1900.0))

    if 164.0 <= h1 <= 345.0:
        T = 0.56 + abs(0.2 * cos_deg(h1 + 168.0))
    else:
        T = 0.36 + abs(0.4 * cos_deg(h1 + 35.0))

    if l1 < 16.0:
        sl = 0.511
    else:
        sl = (0.040975 * l1) / (1.0 + 0.01765 * l1)
    sc = (0.0638 * c1) / (1.0 + 0.0131 * c1) + 0.638
    sh = sc * (F * T + 1.0 - F)

    delta_a = a1 - a2
    delta_b = b1 - b2
    delta_c = c1 - c2
    delta_h = np.sqrt(delta_a * delta_a + delta_b * delta_b - delta_c * delta_c)

    term_l = (l1 - l2) / (l * sl)
    term_c = delta_c / (c * sc)
    term_h = delta_h / sh

    return np.sqrt(term_l * term_l + term_c * term_c + term_h * term_h)


_SIG_PAIR = float64(float64, float64, float64, float64, float64, float64)
_SIG_PAIR_2 = float64(float64, float64, float64, float64, float64, float64, float64, float64)
_SIG_PAIR_3 = float64(float64, float64, float64, float64, float64, float64, float64, float64, float64)

# Strict kernels: eager (explicit signature) and cached on disk.
_cie1976_strict = njit(_SIG_PAIR, cache=True, fastmath=False)(_cie1976_impl)
_cie1994_strict = njit(_SIG_PAIR_3, cache=True, fastmath=False)(_cie1994_impl)
_ciede2000_strict = njit(_SIG_PAIR_3, cache=True, fastmath=False)(_ciede2000_impl)
_cmc1984_strict = njit(_SIG_PAIR_2, cache=True, fastmath=False)(_cmc1984_impl)

# Relaxed kernels: compiled lazily on first use. Not cached, since the cache
# index is keyed on the Python function and would collide with the strict one.
_cie1976_relaxed = njit(fastmath=set(_RELAXED_FASTMATH))(_cie1976_impl)
_cie1994_relaxed = njit(fastmath=set(_RELAXED_FASTMATH))(_cie1994_impl)
_ciede2000_relaxed = njit(fastmath=set(_RELAXED_FASTMATH))(_ciede2000_impl)
_cmc1984_relaxed = njit(fastmath=set(_RELAXED_FASTMATH))(_cmc1984_impl)

# --- Kernel dispatcher ---
# Checks the global _STRICT_IEEE flag and returns the matching compiled variant.

def _select(strict: Callable[..., float], relaxed: Callable[..., float]) -> Callable[..., float]:
    if _STRICT_IEEE:
        return strict
    return relaxed


# =============================================================================
# 2. PUBLIC API
# =============================================================================

ColorInput = Sequence[float]


def get_kl_value(application_type: Union[ApplicationType, str]) -> int:
    """
    Maps a CIE 1994 application type to its k_L value.

    Graphic arts use k_L = 1, textiles k_L = 2. Any other value falls back to
    graphic arts.
    """
    if application_type == ApplicationType.TEXTILES:
        return 2
    return 1


class DeltaE:
    """Static collection of the Delta E formulas."""

    @staticmethod
    def cie1976(color_a: ColorInput, color_b: ColorInput) -> float:
        """
        Calculates CIE Delta E 1976 (Euclidean distance in Lab).

        The first colour-difference formula relating a measured colour to a
        known set of CIELAB coordinates. It overrates differences between
        saturated colours, which the later formulas correct.

        Args:
            color_a: First colour, (L, a, b).
            color_b: Second colour, (L, a, b).

        Returns:
            Delta E 76. Symmetric in its arguments.

        Raises:
            ColorError: If either input is not a valid 3-channel Lab colour.
        """
        l1, a1, b1 = check_color(color_a, discard_excess_channels=False)
        l2, a2, b2 = check_color(color_b, discard_excess_channels=False)

        kernel = _select(_cie1976_strict, _cie1976_relaxed)
        return kernel(float(l1), float(a1), float(b1), float(l2), float(a2), float(b2))

    @staticmethod
    def cie1994(ref: ColorInput, sample: ColorInput,
                application_type: Union[ApplicationType, str] = ApplicationType.GRAPHIC_ARTS) -> float:
        """
        Calculates CIE 1994 Color Difference (CIE Publication 116-1995).

        Note: This metric is **asymmetric**: ``ref`` is the *reference* and
        ``sample`` the *sample*. Swapping them may give a different result.

        Args:
            ref: Reference colour, (L, a, b).
            sample: Sample colour, (L, a, b).
            application_type: ``"graphicArts"`` (k_L=1, K1=0.045, K2=0.015,
                default) or ``"textiles"`` (k_L=2, K1=0.048, K2=0.014).
                Unrecognised values are treated as graphic arts.

        Returns:
            Delta E 94. NaN if the Delta H radicand is negative.

        Raises:
            ColorError: If either input is not a valid 3-channel Lab colour.
        """
        l1, a1, b1 = check_color(ref, discard_excess_channels=False)
        l2, a2, b2 = check_color(sample, discard_excess_channels=False)

        kl = get_kl_value(application_type)
        if application_type == ApplicationType.TEXTILES:
            k1, k2 = 0.048, 0.014
        else:
            k1, k2 = 0.045, 0.015

        kernel = _select(_cie1994_strict, _cie1994_relaxed)
        return kernel(float(l1), float(a1), float(b1), float(l2), float(a2), float(b2),
                      float(kl), k1, k2)

    @staticmethod
    def ciede2000(ref: ColorInput, sample: ColorInput,
                  kl: float = 1.0, kc: float = 1.0, kh: float = 1.0) -> float:
        """
        Calculates CIEDE2000 Color Difference.

        Adds five corrections to CIE 1994: a hue rotation term (R_T) for the
        blue region around 275 degrees, compensation for neutral colours
        (the primed a' values), and lightness, chroma and hue compensation
        (S_L, S_C, S_H).

        Args:
            ref: Reference colour, (L, a, b).
            sample: Sample colour, (L, a, b).
            kl: Parametric lightness weight (default 1.0).
            kc: Parametric chroma weight (default 1.0).
            kh: Parametric hue weight (default 1.0).

        Returns:
            Delta E 2000.

        Raises:
            ColorError: If either input is not a valid 3-channel Lab colour.
        """
        l1, a1, b1 = check_color(ref, discard_excess_channels=False)
        l2, a2, b2 = check_color(sample, discard_excess_channels=False)

        kernel = _select(_ciede2000_strict, _ciede2000_relaxed)
        return kernel(float(l1), float(a1), float(b1), float(l2), float(a2), float(b2),
                      float(kl), float(kc), float(kh))

    @staticmethod
    def cmc1984(color_a: ColorInput, color_b: ColorInput,
                threshold_type: Union[ThresholdType, str] = ThresholdType.ACCEPTABILITY) -> float:
        """
        Calculates CMC l:c (1984) Color Difference.

        Defined by the Colour Measurement Committee of the Society of Dyers
        and Colourists. The lightness (l) and chroma (c) weights are set by
        the threshold type: 2:1 for acceptability, 1:1 for imperceptibility.

        Note: Like CIE 1994, this metric is **asymmetric**: only the first
        colour's LCh coordinates drive the weighting functions.

        Args:
            color_a: Reference (standard) colour, (L, a, b).
            color_b: Sample (batch) colour, (L, a, b).
            threshold_type: ``"acceptability"`` (default) or
                ``"imperceptibility"``. Unrecognised values use the 1:1
                imperceptibility weights.

        Returns:
            Delta E CMC. NaN if the Delta H radicand is negative.

        Raises:
            ColorError: If either input is not a valid 3-channel Lab colour.
        """
        l1, a1, b1 = check_color(color_a, discard_excess_channels=False)
        l2, a2, b2 = check_color(color_b, discard_excess_channels=False)

        if threshold_type == ThresholdType.ACCEPTABILITY:
            l, c = 2.0, 1.0
        else:
            l, c = 1.0, 1.0

        kernel = _select(_cmc1984_strict, _cmc1984_relaxed)
        return kernel(float(l1), float(a1), float(b1), float(l2), float(a2), float(b2), l, c)


cie1976 = DeltaE.cie1976
cie1994 = DeltaE.cie1994
ciede2000 = DeltaE.ciede2000
cmc1984 = DeltaE.cmc1984
