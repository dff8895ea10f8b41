"""Value objects for frame specifications, cut pieces and packed profiles.

Input specifications (frames, sub-components, the standard profile) are plain
records: they accept any values so that the input validator can report each
problem as a typed error. Cut pieces and packed profiles are produced by the
engine only.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .units import Unit, round_half_away


class PiecePosition(str, Enum):
    """Where a cut piece ends up on its frame."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    ADDITIONAL = "additional"

    @property
    def label(self) -> str:
        """Display label, e.g. ``"Top"``."""
        return self.value.capitalize()


@dataclass(frozen=True)
class SubComponentSpec:
    """Extra linear material a frame needs, such as a mullion or sash bar.

    Attributes:
        id: Identifier of the sub-component.
        name: Display name carried onto each cut piece.
        length: Length of one piece, in the owning frame's unit.
        quantity: Number of pieces required.
    """

    id: str
    name: str
    length: float
    quantity: int = 1


@dataclass(frozen=True)
class FrameSpec:
    """A rectangular window frame to be cut.

    Attributes:
        id: Identifier of the frame.
        ref_no: Reference label printed on every piece of this frame.
        width: Width of the frame (top and bottom pieces).
        height: Height of the frame (left and right pieces).
        unit: Unit of width, height and sub-component lengths.
        sub_components: Additional pieces required by the frame.
    """

    id: str
    ref_no: str
    width: float
    height: float
    unit: Unit = Unit.MILLIMETER
    sub_components: tuple[SubComponentSpec, ...] = ()


@dataclass(frozen=True)
class StandardProfileSpec:
    """Raw stock available for cutting.

    Attributes:
        length: Length of one stock profile.
        unit: Unit of length and blade size.
        include_kerf: Whether blade width is deducted between cuts.
        blade_size: Blade width (kerf), only used when include_kerf is set.
    """

    length: float
    unit: Unit = Unit.MILLIMETER
    include_kerf: bool = False
    blade_size: float = 3.0

    @property
    def kerf(self) -> float:
        """Kerf consumed between two cuts, in the profile's unit."""
        return self.blade_size if self.include_kerf else 0.0


@dataclass(frozen=True)
class CutPiece:
    """A single linear piece to cut from a profile."""

    length: float
    unit: Unit
    frame_id: str
    ref_no: str
    position: PiecePosition
    sub_component_name: str | None = None

    @property
    def label(self) -> str:
        """Sub-component name for additional pieces, else the edge label."""
        if self.position == PiecePosition.ADDITIONAL and self.sub_component_name:
            return self.sub_component_name
        return self.position.label


@dataclass(frozen=True)
class PackedProfile:
    """One stock profile with the pieces assigned to it.

    Attributes:
        original_length: Length of the stock profile.
        unit: Unit of every length on this profile and its cuts.
        cuts: Pieces in the order they were placed.
        waste_length: Length left over after cuts and kerf.
        kerf: Kerf consumed between two consecutive cuts.
    """

    original_length: float
    unit: Unit
    cuts: tuple[CutPiece, ...]
    waste_length: float
    kerf: float = 0.0

    @property
    def piece_count(self) -> int:
        """Number of pieces cut from this profile."""
        return len(self.cuts)

    @property
    def used_length(self) -> float:
        """Total length of the cut pieces, excluding kerf."""
        return sum(cut.length for cut in self.cuts)

    @property
    def kerf_length(self) -> float:
        """Material lost to the blade: one kerf per gap between cuts."""
        return self.kerf * max(len(self.cuts) - 1, 0)

    @property
    def utilization(self) -> float:
        """Percentage of the profile not left as waste, one decimal."""
        if self.original_length <= 0:
            return 0.0
        used = self.original_length - self.waste_length
        return round_half_away(used / self.original_length * 100, 1)


@dataclass(frozen=True)
class OptimizationSummary:
    """Totals over every packed profile of one optimization run.

    Attributes:
        total_profiles: Number of stock profiles consumed.
        total_pieces: Number of pieces cut.
        total_length: Stock length consumed, in the result unit.
        total_waste: Waste over all profiles, in the result unit.
        waste_percentage: Waste as a share of stock consumed, one decimal.
        unit: Unit of total_length and total_waste.
    """

    total_profiles: int
    total_pieces: int
    total_length: float
    total_waste: float
    waste_percentage: float
    unit: Unit = Unit.MILLIMETER
