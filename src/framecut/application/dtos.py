"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from framecut.domain import (
    OptimizationSummary,
    PackedProfile,
    Unit,
    ValidationError,
)


@dataclass
class OptimizationOutput:
    """Output DTO containing the optimization results.

    Attributes:
        profiles: Packed profiles in the standard profile's unit.
        summary: Totals across all profiles, None if optimization failed.
        errors: Validation errors if the input was rejected.
        unit: Unit of every length in the output.
    """

    profiles: list[PackedProfile] = field(default_factory=list)
    summary: OptimizationSummary | None = None
    errors: list[ValidationError] = field(default_factory=list)
    unit: Unit = Unit.MILLIMETER

    @property
    def is_valid(self) -> bool:
        """Check if the optimization ran successfully."""
        return len(self.errors) == 0

    @property
    def error(self) -> ValidationError | None:
        """The validation error that stopped the run, if any."""
        return self.errors[0] if self.errors else None
