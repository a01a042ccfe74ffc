"""Tests for the degree-based trigonometric helpers.

Tests for empfindung.trigdegree:
    - radian <-> degree conversions hit landmark angles exactly
    - cos_deg / sin_deg at 0, 90, 180 degrees
    - atan2_deg argument order and the (0, 0) convention

Run:
    pytest tests/test_trigdegree.py -v
"""

from __future__ import annotations

import numpy as np
import pytest

from empfindung.trigdegree import atan2_deg, cos_deg, sin_deg, to_degrees, to_radians


class TestConversions:
    def test_to_degrees_zero(self) -> None:
        assert to_degrees(0.0) == 0

    def test_to_degrees_pi(self) -> None:
        assert to_degrees(np.pi) == 180

    def test_to_radians_zero(self) -> None:
        assert to_radians(0.0) == 0

    def test_to_radians_half_turn(self) -> None:
        assert to_radians(180.0) == np.pi

    def test_integer_arguments_accepted(self) -> None:
        assert to_degrees(0) == 0
        assert to_radians(180) == np.pi


class TestCircularFunctions:
    def test_cos_deg(self) -> None:
        assert cos_deg(0.0) == 1
        assert cos_deg(180.0) == -1

    def test_sin_deg(self) -> None:
        assert sin_deg(0.0) == 0
        assert sin_deg(90.0) == 1

    @pytest.mark.parametrize("angle", [12.5, 45.0, 210.0, -75.0])
    def test_matches_numpy(self, angle: float) -> None:
        assert cos_deg(angle) == pytest.approx(np.cos(np.deg2rad(angle)))
        assert sin_deg(angle) == pytest.approx(np.sin(np.deg2rad(angle)))


class TestAtan2Deg:
    def test_fourth_quadrant(self) -> None:
        assert atan2_deg(-1.0, 1.0) == -45

    def test_first_quadrant(self) -> None:
        assert atan2_deg(1.0, 1.0) == 45

    def test_origin_is_zero(self) -> None:
        assert atan2_deg(0.0, 0.0) == 0

    def test_y_comes_first(self) -> None:
        # (y, x) = (1, 0) points straight up
        assert atan2_deg(1.0, 0.0) == pytest.approx(90.0)
        assert atan2_deg(0.0, 1.0) == 0

    def test_range_upper_bound(self) -> None:
        assert atan2_deg(0.0, -1.0) == pytest.approx(180.0)
