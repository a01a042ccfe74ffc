# -*- coding: utf-8 -*-
"""
Empfindung: Perceptual colour difference in CIE L*a*b* space
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Colour-difference (Delta E) metrics for a pair of CIELAB colours:
CIE76, CIE94, CIEDE2000 and CMC l:c (1984).

Convenience imports:
    from empfindung import ciede2000, cie1994, ColorError
    from empfindung import deltae, colorutils, trigdegree
"""

import logging

from . import color_errors
from . import colorutils
from . import deltae
from . import trigdegree
from .__about__ import __version__, metadata_summary
from .color_errors import (
    ChannelBoundViolation,
    ChannelCountDetail,
    ColorError,
    ColorErrorKind,
    CoordinateRangeDetail,
)
from .colorutils import check_color, is_valid_lab_color, lab_to_lch
from .deltae import (
    ApplicationType,
    DeltaE,
    ThresholdType,
    cie1976,
    cie1994,
    ciede2000,
    cmc1984,
    get_kl_value,
    is_strict_ieee,
    set_strict_ieee,
)
from .trigdegree import atan2_deg, cos_deg, sin_deg, to_degrees, to_radians

# Library logging: applications attach their own handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Modules
    'color_errors',
    'colorutils',
    'deltae',
    'trigdegree',
    # Metadata
    '__version__',
    'metadata_summary',
    # Errors
    'ColorError',
    'ColorErrorKind',
    'ChannelCountDetail',
    'ChannelBoundViolation',
    'CoordinateRangeDetail',
    # Validation / conversion
    'check_color',
    'is_valid_lab_color',
    'lab_to_lch',
    # Formulas
    'ApplicationType',
    'ThresholdType',
    'DeltaE',
    'cie1976',
    'cie1994',
    'ciede2000',
    'cmc1984',
    'get_kl_value',
    # Configuration
    'set_strict_ieee',
    'is_strict_ieee',
    # Trigonometry
    'to_degrees',
    'to_radians',
    'cos_deg',
    'sin_deg',
    'atan2_deg',
]
