"""Converts packed profiles back to the caller's unit with display rounding."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Sequence

from framecut.domain.units import Unit, from_millimeters, round_half_away
from framecut.domain.value_objects import CutPiece, PackedProfile

# Decimal places shown per unit: tenths of a millimeter, hundredths of a foot.
DISPLAY_PRECISION: dict[Unit, int] = {
    Unit.MILLIMETER: 1,
    Unit.FOOT: 2,
}


class ResultFormatter:
    """Denormalizes packer output (millimeters) into the original unit."""

    def format(
        self,
        profiles: Sequence[PackedProfile],
        original_unit: Unit,
    ) -> list[PackedProfile]:
        """Convert and round every length on the given profiles.

        Args:
            profiles: Packed profiles with lengths in millimeters.
            original_unit: Unit the standard profile was specified in.

        Returns:
            New profiles with lengths, kerf and cuts in ``original_unit``.
        """
        places = DISPLAY_PRECISION[original_unit]

        def display(value: float) -> float:
            return round_half_away(from_millimeters(value, original_unit), places)

        return [
            replace(
                profile,
                original_length=display(profile.original_length),
                waste_length=display(profile.waste_length),
                kerf=display(profile.kerf),
                unit=original_unit,
                cuts=tuple(self._format_cut(cut, display, original_unit) for cut in profile.cuts),
            )
            for profile in profiles
        ]

    def _format_cut(
        self, cut: CutPiece, display: Callable[[float], float], unit: Unit
    ) -> CutPiece:
        return replace(cut, length=display(cut.length), unit=unit)
