"""Input validation errors reported before any packing takes place."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ValidationErrorKind(str, Enum):
    """Reason an optimization request was rejected."""

    NO_FRAMES_PROVIDED = "no_frames_provided"
    INVALID_PROFILE_LENGTH = "invalid_profile_length"
    INVALID_BLADE_SIZE = "invalid_blade_size"
    INVALID_FRAME_DIMENSIONS = "invalid_frame_dimensions"
    INVALID_SUB_COMPONENT = "invalid_sub_component"
    PIECE_EXCEEDS_STOCK_LENGTH = "piece_exceeds_stock_length"


@dataclass(frozen=True)
class ValidationError:
    """A rejected input record.

    Attributes:
        kind: Category of the failure.
        message: Human-readable description.
        frame_id: Identifier of the offending frame, if any.
        ref_no: Reference label of the offending frame, if any.
        sub_component: Name of the offending sub-component, if any.
    """

    kind: ValidationErrorKind
    message: str
    frame_id: str | None = None
    ref_no: str | None = None
    sub_component: str | None = None

    def __str__(self) -> str:
        return self.message
