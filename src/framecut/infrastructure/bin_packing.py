"""Linear bin packing of cut pieces onto standard-length profiles.

This module provides the first-fit decreasing packer used to lay out frame
pieces on raw stock. All lengths handled here are in millimeters; callers
normalize before packing and convert the result back afterwards.

Result dataclasses are frozen. The packer keeps its working state in private
mutable objects and freezes them once every piece is placed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from framecut.domain.units import Unit, round_half_away
from framecut.domain.value_objects import CutPiece, PackedProfile

logger = logging.getLogger(__name__)

# Decimal places kept on remaining waste after every subtraction.
WASTE_PRECISION = 3


class PackingInvariantError(ValueError):
    """Raised when a piece reaching the packer cannot fit on any profile.

    Input validation rejects pieces longer than the stock length, so this
    signals a caller that skipped validation rather than bad user input.
    """

    def __init__(self, piece: CutPiece, stock_length: float) -> None:
        self.piece = piece
        self.stock_length = stock_length
        super().__init__(
            f"Piece {piece.ref_no} {piece.label} ({piece.length}{piece.unit.value}) "
            f"exceeds stock length ({stock_length}mm)"
        )


@dataclass(frozen=True)
class PackingConfig:
    """Configuration for linear packing.

    Attributes:
        stock_length: Length of one raw profile in millimeters.
        kerf: Blade width consumed between two cuts in millimeters.
    """

    stock_length: float
    kerf: float = 0.0

    def __post_init__(self) -> None:
        if self.stock_length <= 0:
            raise ValueError("Stock length must be positive")
        if self.kerf < 0:
            raise ValueError("Kerf must be non-negative")


@dataclass
class _ProfileState:
    """Internal state for a profile during packing.

    Attributes:
        index: Profile index in creation order (0-based).
        waste: Length still available on the profile.
        cuts: Pieces placed so far.
    """

    index: int
    waste: float
    cuts: list[CutPiece] = field(default_factory=list)

    def required_length(self, piece: CutPiece, kerf: float) -> float:
        """Length the piece consumes here; kerf applies only after a first cut."""
        if self.cuts:
            return piece.length + kerf
        return piece.length

    def place(self, piece: CutPiece, required: float) -> None:
        self.cuts.append(piece)
        self.waste = round_half_away(self.waste - required, WASTE_PRECISION)


class LinearBinPacker:
    """First-fit decreasing packer for one-dimensional stock.

    Pieces are sorted longest first (stable, so equal lengths keep their
    cut-list order) and each one goes onto the first open profile with
    enough remaining length. A new profile is opened only when none fits,
    so the packer never runs out of capacity.

    Attributes:
        config: Stock length and kerf in millimeters.
    """

    def __init__(self, config: PackingConfig) -> None:
        """Initialize the packer with configuration.

        Args:
            config: Packing configuration with stock length and kerf.
        """
        self.config = config

    def pack(self, pieces: Sequence[CutPiece]) -> list[PackedProfile]:
        """Pack pieces onto as few profiles as the heuristic finds.

        Args:
            pieces: Pieces to place, lengths in millimeters. Not modified.

        Returns:
            Profiles that received at least one cut, in creation order.

        Raises:
            PackingInvariantError: If a piece is longer than the stock length.
        """
        if not pieces:
            return []

        stock_length = self.config.stock_length
        kerf = self.config.kerf
        sorted_pieces = self._sort_by_length(pieces)

        logger.debug(
            "Packing %d pieces onto %.1fmm profiles (kerf %.3fmm)",
            len(sorted_pieces),
            stock_length,
            kerf,
        )

        profiles: list[_ProfileState] = []

        for piece in sorted_pieces:
            if round_half_away(piece.length, WASTE_PRECISION) > stock_length:
                raise PackingInvariantError(piece, stock_length)

            placed = False
            for profile in profiles:
                required = profile.required_length(piece, kerf)
                if profile.waste >= required:
                    profile.place(piece, required)
                    placed = True
                    break

            if not placed:
                # First cut on a fresh profile carries no kerf
                profile = _ProfileState(index=len(profiles), waste=stock_length)
                profile.place(piece, piece.length)
                profiles.append(profile)

        for profile in profiles:
            logger.debug(
                "Profile %d: %d pieces, %.3fmm waste",
                profile.index,
                len(profile.cuts),
                profile.waste,
            )

        return [self._freeze(profile) for profile in profiles]

    def _sort_by_length(self, pieces: Sequence[CutPiece]) -> list[CutPiece]:
        """Sort pieces longest first, keeping input order among equal lengths."""
        return sorted(pieces, key=lambda p: p.length, reverse=True)

    def _freeze(self, profile: _ProfileState) -> PackedProfile:
        return PackedProfile(
            original_length=self.config.stock_length,
            unit=Unit.MILLIMETER,
            cuts=tuple(profile.cuts),
            waste_length=profile.waste,
            kerf=self.config.kerf,
        )
