"""Tests for the colour error taxonomy.

Tests for empfindung.color_errors:
    - ColorError is a ValueError carrying kind, detail and message
    - channel-count messages and payload
    - coordinate-range messages list every failing channel

Run:
    pytest tests/test_color_errors.py -v
"""

from __future__ import annotations

import pytest

from empfindung.color_errors import (
    ChannelBoundViolation,
    ChannelCountDetail,
    ColorError,
    ColorErrorKind,
    CoordinateRangeDetail,
)

LAB_HINT = "Check if the input has been correctly converted to L*a*b* space?"


# ---------------------------------------------------------------------------
# Base behaviour
# ---------------------------------------------------------------------------


class TestColorError:
    def test_is_value_error(self) -> None:
        err = ColorError.channel_count([1, 2], 3)
        assert isinstance(err, ValueError)

    def test_str_is_message(self) -> None:
        err = ColorError.channel_count([1, 2], 3)
        assert str(err) == err.message

    def test_can_be_raised_and_caught(self) -> None:
        with pytest.raises(ColorError) as excinfo:
            raise ColorError.channel_count([1, 2], 3)
        assert excinfo.value.kind is ColorErrorKind.CHANNEL_COUNT


# ---------------------------------------------------------------------------
# Channel count
# ---------------------------------------------------------------------------


class TestChannelCount:
    def test_message(self) -> None:
        err = ColorError.channel_count([1, 2, 3, 4], 3)
        assert err.message == (
            "Expected 3 color channels but saw 4 channels (1, 2, 3, 4) instead. "
            "Consider discarding an alpha channel if it exists"
        )

    def test_payload(self) -> None:
        err = ColorError.channel_count([1, 2, 3, 4], 3)
        assert err.kind is ColorErrorKind.CHANNEL_COUNT
        assert err.detail == ChannelCountDetail(expected=3, actual=4, values=(1, 2, 3, 4))

    def test_integral_floats_shown_without_decimals(self) -> None:
        err = ColorError.channel_count([1.0, 2.5], 3)
        assert "(1, 2.5)" in err.message


# ---------------------------------------------------------------------------
# Coordinate range
# ---------------------------------------------------------------------------


class TestCoordinateRange:
    def test_message_l(self) -> None:
        err = ColorError.coordinate_range([200, 0, 0], [False, True, True])
        assert err.message == (
            f"Expected l* = 200 to be within the range [0, 100].\n{LAB_HINT}"
        )

    def test_message_a(self) -> None:
        err = ColorError.coordinate_range([50, 254, 0], [True, False, True])
        assert err.message == (
            f"Expected a* = 254 to be within the range [-128, 127].\n{LAB_HINT}"
        )

    def test_message_b(self) -> None:
        err = ColorError.coordinate_range([50, 0, 254], [True, True, False])
        assert err.message == (
            f"Expected b* = 254 to be within the range [-128, 127].\n{LAB_HINT}"
        )

    def test_all_channels_reported(self) -> None:
        err = ColorError.coordinate_range([200, 200, 200], [False, False, False])
        assert err.kind is ColorErrorKind.COORDINATE_RANGE
        assert isinstance(err.detail, CoordinateRangeDetail)
        assert [v.channel for v in err.detail.violations] == ["l*", "a*", "b*"]
        assert err.message.count("\n") == 3

    def test_violation_payload(self) -> None:
        err = ColorError.coordinate_range([50, -130, 0], [True, False, True])
        assert err.detail.violations == (
            ChannelBoundViolation(channel="a*", value=-130, bounds=(-128, 127)),
        )
