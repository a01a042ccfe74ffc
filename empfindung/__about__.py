# -*- coding: utf-8 -*-
# Empfindung: Perceptual colour difference in CIE L*a*b* space.
#
# Copyright (c) 2026 opticsWolf
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""
Project metadata for Empfindung.
"""

from typing import Final

# Metadata Definitions
__title__: Final[str] = "empfindung"
__description__: Final[str] = (
    "CIE colour-difference metrics (CIE76, CIE94, CIEDE2000, CMC l:c) "
    "for pairs of colours in CIE L*a*b* space."
)
__version__: Final[str] = "1.0.1"
__author__: Final[str] = "opticsWolf"
__license__: Final[str] = "LGPL-3.0-or-later"
__copyright__: Final[str] = "Copyright (c) 2026 opticsWolf"

def metadata_summary() -> dict[str, str]:
    """Returns a dictionary of project metadata for introspection."""
    return {
        "title": __title__,
        "version": __version__,
        "license": __license__,
        "description": __description__,
        "copyright": __copyright__,
    }
