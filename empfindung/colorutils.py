# -*- coding: utf-8 -*-
"""
Empfindung: Perceptual colour difference in CIE L*a*b* space
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Colour validation and L*a*b* -> L*C*H* conversion
=================================================
Shared plumbing for the Delta E formulas:

1. ``is_valid_lab_color`` checks each channel against its CIELAB bounds.
2. ``check_color`` normalises the channel count and raises ``ColorError``
   for anything that is not a usable L*a*b* triple.
3. ``lab_to_lch`` converts to the cylindrical representation with the hue
   angle in degrees.
"""

from __future__ import annotations

import logging
from typing import Final, Sequence, Tuple, TypeAlias

import numpy as np
from numba import njit, float64, types

from .color_errors import ColorError
from .trigdegree import atan2_deg

__all__ = [
    "Color",
    "NUM_CHANNELS",
    "L_RANGE",
    "A_RANGE",
    "B_RANGE",
    "is_valid_lab_color",
    "check_color",
    "lab_to_lch",
]

logger = logging.getLogger(__name__)

# --- Type Aliases ---
Color: TypeAlias = Tuple[float, float, float]

# --- Constants ---
NUM_CHANNELS: Final[int] = 3
# Inclusive CIELAB coordinate bounds.
L_RANGE: Final[Tuple[int, int]] = (0, 100)
A_RANGE: Final[Tuple[int, int]] = (-128, 127)
B_RANGE: Final[Tuple[int, int]] = (-128, 127)


def is_valid_lab_color(color: Sequence[float]) -> Tuple[bool, bool, bool]:
    """
    Checks whether each channel of a colour lies within CIELAB bounds.

    Every channel is tested independently; the check does not stop at the
    first failure. Elements past the third are ignored.

    Args:
        color: An (L, a, b) colour; at least 3 elements.

    Returns:
        One flag per channel, ``True`` where the coordinate is in range.

    Raises:
        ColorError: ``CHANNEL_COUNT`` if fewer than 3 elements are given.
    """
    if len(color) < NUM_CHANNELS:
        raise ColorError.channel_count(list(color), NUM_CHANNELS)
    l, a, b = color[0], color[1], color[2]
    l_ok = bool(L_RANGE[0] <= l <= L_RANGE[1])
    a_ok = bool(A_RANGE[0] <= a <= A_RANGE[1])
    b_ok = bool(B_RANGE[0] <= b <= B_RANGE[1])
    return l_ok, a_ok, b_ok


def check_color(x: Sequence[float], discard_excess_channels: bool = True) -> Color:
    """
    Validates raw input as a CIE L*a*b* colour.

    Args:
        x: Sequence of channel values (list, tuple or 1-D array).
        discard_excess_channels: If True, inputs with more than 3 elements
            are truncated to their first 3 (e.g. a trailing alpha channel).

    Returns:
        The validated colour as an (L, a, b) tuple, values unchanged.

    Raises:
        ColorError: ``CHANNEL_COUNT`` if the input cannot be reduced to 3
            channels, ``COORDINATE_RANGE`` if any coordinate is out of bounds.
    """
    n = len(x)
    if n != NUM_CHANNELS:
        if discard_excess_channels and n > NUM_CHANNELS:
            color = tuple(x[:NUM_CHANNELS])
            logger.debug(
                "Only using first %d elements of %s because discard_excess_channels "
                "is set; the color used is %s.", NUM_CHANNELS, list(x), color,
            )
        else:
            raise ColorError.channel_count(list(x), NUM_CHANNELS)
    else:
        color = tuple(x)

    checks = is_valid_lab_color(color)
    if not all(checks):
        raise ColorError.coordinate_range(color, checks)

    return color


# =============================================================================
# L*a*b* -> L*C*H*
# =============================================================================

@njit(types.UniTuple(float64, 3)(float64, float64, float64), cache=True, fastmath=False)
def _lab_to_lch_kernel(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """
    Scalar Lab -> LCh kernel, shared with the Delta E kernels.

    Hue is 0 for achromatic colours (C <= 0); otherwise it is shifted into
    [0, 360).
    """
    C = np.sqrt(a * a + b * b)
    H = 0.0 if C <= 0.0 else atan2_deg(b, a)
    while H >= 360.0:
        H -= 360.0
    while H < 0.0:
        H += 360.0
    return L, C, H


def lab_to_lch(color: Sequence[float]) -> Color:
    """
    Converts a CIELAB colour to CIELCh.

    Args:
        color: An (L, a, b) colour.

    Returns:
        A new (L, C, H) tuple; H is in degrees within [0, 360).
    """
    L, a, b = color
    return _lab_to_lch_kernel(float(L), float(a), float(b))
