# -*- coding: utf-8 -*-
"""
Empfindung: Perceptual colour difference in CIE L*a*b* space
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: color_errors.py — Failure values for malformed colour input.

A single exception type, ``ColorError``, is raised for every validation
failure. The failure kind is carried as a tag (``ColorErrorKind``) next to a
kind-specific payload record, so callers branch on ``err.kind`` and read the
diagnostic fields from ``err.detail``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple, Union

__all__ = [
    "ColorErrorKind",
    "ChannelCountDetail",
    "ChannelBoundViolation",
    "CoordinateRangeDetail",
    "ColorError",
]

_CHANNEL_NAMES: Tuple[str, str, str] = ("l*", "a*", "b*")
_CHANNEL_BOUNDS: Tuple[Tuple[int, int], ...] = ((0, 100), (-128, 127), (-128, 127))

_ALPHA_HINT = "Consider discarding an alpha channel if it exists"
_LAB_HINT = "Check if the input has been correctly converted to L*a*b* space?"


class ColorErrorKind(Enum):
    """Tag identifying which validation step rejected a colour."""
    CHANNEL_COUNT = "channel_count"
    COORDINATE_RANGE = "coordinate_range"


@dataclass(slots=True, frozen=True)
class ChannelCountDetail:
    """Payload for ``ColorErrorKind.CHANNEL_COUNT``."""
    expected: int
    actual:   int
    values:   Tuple[float, ...]

    def describe(self) -> str:
        shown = ", ".join(_format_number(v) for v in self.values)
        return (
            f"Expected {self.expected} color channels but saw {self.actual} "
            f"channels ({shown}) instead. {_ALPHA_HINT}"
        )


@dataclass(slots=True, frozen=True)
class ChannelBoundViolation:
    """One out-of-range channel: its name, value and the violated bounds."""
    channel: str
    value:   float
    bounds:  Tuple[int, int]

    def describe(self) -> str:
        lo, hi = self.bounds
        return (
            f"Expected {self.channel} = {_format_number(self.value)} "
            f"to be within the range [{lo}, {hi}]."
        )


@dataclass(slots=True, frozen=True)
class CoordinateRangeDetail:
    """Payload for ``ColorErrorKind.COORDINATE_RANGE``."""
    violations: Tuple[ChannelBoundViolation, ...]

    def describe(self) -> str:
        lines = [v.describe() for v in self.violations]
        lines.append(_LAB_HINT)
        return "\n".join(lines)


ColorErrorDetail = Union[ChannelCountDetail, CoordinateRangeDetail]


class ColorError(ValueError):
    """
    Raised when a colour input cannot be used as an L*a*b* colour.

    Attributes:
        kind: Which check failed.
        detail: Kind-specific payload (``ChannelCountDetail`` or
            ``CoordinateRangeDetail``).
        message: Human-readable description, also the ``str()`` of the error.
    """

    def __init__(self, kind: ColorErrorKind, detail: ColorErrorDetail) -> None:
        self.kind = kind
        self.detail = detail
        self.message = detail.describe()
        super().__init__(self.message)

    @classmethod
    def channel_count(cls, values: Sequence[float], expected: int) -> ColorError:
        """Builds the error for a colour with the wrong number of channels."""
        detail = ChannelCountDetail(
            expected=expected,
            actual=len(values),
            values=tuple(values),
        )
        return cls(ColorErrorKind.CHANNEL_COUNT, detail)

    @classmethod
    def coordinate_range(cls, color: Sequence[float],
                         checks: Sequence[bool]) -> ColorError:
        """
        Builds the error for a 3-channel colour with out-of-range coordinates.

        Args:
            color: The (L, a, b) triple that was checked.
            checks: Per-channel flags, ``False`` marks a failing channel.
        """
        violations = tuple(
            ChannelBoundViolation(channel=name, value=value, bounds=bounds)
            for name, value, bounds, ok in zip(_CHANNEL_NAMES, color, _CHANNEL_BOUNDS, checks)
            if not ok
        )
        return cls(ColorErrorKind.COORDINATE_RANGE, CoordinateRangeDetail(violations))


def _format_number(value: float) -> str:
    """Renders integral floats without a trailing ``.0`` (``200.0`` -> ``200``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
