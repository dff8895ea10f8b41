"""Domain layer - frame specifications, cut pieces and unit handling."""

from .errors import ValidationError, ValidationErrorKind
from .services import PieceListBuilder
from .units import (
    MM_PER_FOOT,
    Unit,
    convert,
    from_millimeters,
    round_half_away,
    to_millimeters,
)
from .value_objects import (
    CutPiece,
    FrameSpec,
    OptimizationSummary,
    PackedProfile,
    PiecePosition,
    StandardProfileSpec,
    SubComponentSpec,
)

__all__ = [
    "MM_PER_FOOT",
    "CutPiece",
    "FrameSpec",
    "OptimizationSummary",
    "PackedProfile",
    "PieceListBuilder",
    "PiecePosition",
    "StandardProfileSpec",
    "SubComponentSpec",
    "Unit",
    "ValidationError",
    "ValidationErrorKind",
    "convert",
    "from_millimeters",
    "round_half_away",
    "to_millimeters",
]
