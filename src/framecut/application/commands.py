"""Application commands (use cases) for cut list optimization."""

from __future__ import annotations

import logging
from typing import Sequence

from framecut.domain import (
    FrameSpec,
    OptimizationSummary,
    PackedProfile,
    PieceListBuilder,
    StandardProfileSpec,
    Unit,
    ValidationError,
    from_millimeters,
    round_half_away,
    to_millimeters,
)
from framecut.infrastructure.bin_packing import LinearBinPacker, PackingConfig

from .dtos import OptimizationOutput
from .services import InputValidatorService, ResultFormatter
from .services.result_formatter import DISPLAY_PRECISION

logger = logging.getLogger(__name__)


class OptimizationFailedError(Exception):
    """Raised by ``optimize`` when the input is rejected by validation."""

    def __init__(self, error: ValidationError) -> None:
        self.error = error
        super().__init__(error.message)

    @property
    def kind(self) -> str:
        """Validation error kind value, e.g. ``"invalid_profile_length"``."""
        return self.error.kind.value


class OptimizeCutListCommand:
    """Command to compute a cut plan for a set of frames.

    Pipeline: validate input, build the piece list, normalize to
    millimeters, pack onto profiles, then convert back to the standard
    profile's unit. The command holds no per-call state, so one instance
    can serve any number of independent calls.
    """

    def __init__(
        self,
        input_validator: InputValidatorService | None = None,
        piece_list_builder: PieceListBuilder | None = None,
        result_formatter: ResultFormatter | None = None,
    ) -> None:
        self.input_validator = input_validator or InputValidatorService()
        self.piece_list_builder = piece_list_builder or PieceListBuilder()
        self.result_formatter = result_formatter or ResultFormatter()

    def execute(
        self,
        frames: Sequence[FrameSpec],
        standard_profile: StandardProfileSpec,
    ) -> OptimizationOutput:
        """Execute the optimization.

        Args:
            frames: Frames to cut, in the order their pieces are listed.
            standard_profile: Stock profile length, unit and kerf settings.

        Returns:
            OptimizationOutput with packed profiles and summary, or with
            the validation error that rejected the input.
        """
        error = self.input_validator.validate(frames, standard_profile)
        if error is not None:
            logger.warning("Optimization rejected (%s): %s", error.kind.value, error)
            return OptimizationOutput(errors=[error], unit=standard_profile.unit)

        pieces = self.piece_list_builder.normalize(self.piece_list_builder.build(frames))

        config = PackingConfig(
            stock_length=to_millimeters(standard_profile.length, standard_profile.unit),
            kerf=to_millimeters(standard_profile.kerf, standard_profile.unit),
        )
        packed = LinearBinPacker(config).pack(pieces)

        summary = self._summarize(packed, standard_profile.unit)
        logger.info(
            "Packed %d pieces from %d frames onto %d profiles (%.1f%% waste)",
            summary.total_pieces,
            len(frames),
            summary.total_profiles,
            summary.waste_percentage,
        )

        return OptimizationOutput(
            profiles=self.result_formatter.format(packed, standard_profile.unit),
            summary=summary,
            unit=standard_profile.unit,
        )

    def _summarize(
        self,
        packed: Sequence[PackedProfile],
        unit: Unit,
    ) -> OptimizationSummary:
        """Compute totals from millimeter profiles, reported in ``unit``."""
        total_length = sum(profile.original_length for profile in packed)
        total_waste = sum(profile.waste_length for profile in packed)
        waste_percentage = (
            round_half_away(total_waste / total_length * 100, 1) if total_length > 0 else 0.0
        )
        places = DISPLAY_PRECISION[unit]
        return OptimizationSummary(
            total_profiles=len(packed),
            total_pieces=sum(profile.piece_count for profile in packed),
            total_length=round_half_away(from_millimeters(total_length, unit), places),
            total_waste=round_half_away(from_millimeters(total_waste, unit), places),
            waste_percentage=waste_percentage,
            unit=unit,
        )


def optimize(
    frames: Sequence[FrameSpec],
    standard_profile: StandardProfileSpec,
) -> list[PackedProfile]:
    """Compute packed profiles for the given frames.

    Raises:
        OptimizationFailedError: If the input fails validation.
    """
    output = OptimizeCutListCommand().execute(frames, standard_profile)
    if output.error is not None:
        raise OptimizationFailedError(output.error)
    return output.profiles
