"""Cut list optimization for window frames on standard-length profiles."""

from framecut.application import (
    OptimizationFailedError,
    OptimizationOutput,
    OptimizeCutListCommand,
    optimize,
)
from framecut.domain import (
    CutPiece,
    FrameSpec,
    PackedProfile,
    PiecePosition,
    StandardProfileSpec,
    SubComponentSpec,
    Unit,
    ValidationError,
    ValidationErrorKind,
)

__all__ = [
    "CutPiece",
    "FrameSpec",
    "OptimizationFailedError",
    "OptimizationOutput",
    "OptimizeCutListCommand",
    "PackedProfile",
    "PiecePosition",
    "StandardProfileSpec",
    "SubComponentSpec",
    "Unit",
    "ValidationError",
    "ValidationErrorKind",
    "optimize",
]
