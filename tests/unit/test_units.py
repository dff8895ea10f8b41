"""Tests for unit conversion and rounding helpers."""

from __future__ import annotations

import pytest

from framecut.domain.units import (
    MM_PER_FOOT,
    Unit,
    convert,
    from_millimeters,
    round_half_away,
    to_millimeters,
)


class TestConversion:
    """Tests for millimeter/foot conversion."""

    def test_foot_to_millimeters(self) -> None:
        assert to_millimeters(1.0, Unit.FOOT) == MM_PER_FOOT
        assert to_millimeters(10.0, Unit.FOOT) == pytest.approx(3048.0)

    def test_millimeters_unchanged(self) -> None:
        assert to_millimeters(1234.5, Unit.MILLIMETER) == 1234.5
        assert from_millimeters(1234.5, Unit.MILLIMETER) == 1234.5

    def test_millimeters_to_feet(self) -> None:
        assert from_millimeters(304.8, Unit.FOOT) == 1.0
        assert from_millimeters(6096.0, Unit.FOOT) == pytest.approx(20.0)

    def test_convert_between_units(self) -> None:
        assert convert(20.0, Unit.FOOT, Unit.MILLIMETER) == pytest.approx(6096.0)
        assert convert(6096.0, Unit.MILLIMETER, Unit.FOOT) == pytest.approx(20.0)
        assert convert(7.5, Unit.FOOT, Unit.FOOT) == 7.5

    def test_unit_values(self) -> None:
        assert Unit("mm") is Unit.MILLIMETER
        assert Unit("ft") is Unit.FOOT


class TestRoundHalfAway:
    """Tests for round-half-away-from-zero rounding."""

    @pytest.mark.parametrize(
        ("value", "places", "expected"),
        [
            (2.675, 2, 2.68),
            (0.05, 1, 0.1),
            (0.25, 1, 0.3),
            (-0.25, 1, -0.3),
            (1590.9995, 3, 1591.0),
            (899.9999, 3, 900.0),
            (1600.0, 1, 1600.0),
        ],
    )
    def test_rounding(self, value: float, places: int, expected: float) -> None:
        assert round_half_away(value, places) == expected

    def test_differs_from_builtin_round_on_halves(self) -> None:
        assert round(0.125, 2) == 0.12
        assert round_half_away(0.125, 2) == 0.13
