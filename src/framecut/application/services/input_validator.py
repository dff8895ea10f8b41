"""Input validation service for cut list optimization.

Rejects invalid frame and profile input before any piece is built, so the
packer only ever sees pieces it can place. Checks run in a fixed order and
each failure carries enough context (frame reference, sub-component name)
to point the caller at the offending record.
"""

from __future__ import annotations

import math
from typing import Iterator, Sequence

from framecut.domain.errors import ValidationError, ValidationErrorKind
from framecut.domain.units import convert
from framecut.domain.value_objects import FrameSpec, StandardProfileSpec


def _is_number(value: object) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _is_positive(value: object) -> bool:
    return _is_number(value) and value > 0  # type: ignore[operator]


def _is_blank(value: object) -> bool:
    return not isinstance(value, str) or not value.strip()


class InputValidatorService:
    """Service for validating optimization inputs.

    Checks, in order:
    1. At least one frame is provided
    2. The profile length is positive
    3. The blade size is non-negative when kerf is included
    4. Every frame has positive dimensions and a reference number
    5. Every sub-component has a name, a positive length and quantity
    6. No frame edge or sub-component is longer than the stock profile
    """

    def validate(
        self,
        frames: Sequence[FrameSpec],
        profile: StandardProfileSpec,
    ) -> ValidationError | None:
        """Return the first validation failure, or None if input is valid.

        Args:
            frames: Frames to be cut.
            profile: Standard stock profile.

        Returns:
            The first ValidationError found, or None.
        """
        return next(self._iter_errors(frames, profile), None)

    def validate_all(
        self,
        frames: Sequence[FrameSpec],
        profile: StandardProfileSpec,
    ) -> list[ValidationError]:
        """Collect every validation failure, in check order.

        Stock-length checks are skipped while the profile length itself is
        invalid, since there is nothing meaningful to compare against.
        """
        return list(self._iter_errors(frames, profile, stop_early=False))

    def _iter_errors(
        self,
        frames: Sequence[FrameSpec],
        profile: StandardProfileSpec,
        stop_early: bool = True,
    ) -> Iterator[ValidationError]:
        if not frames:
            yield ValidationError(
                kind=ValidationErrorKind.NO_FRAMES_PROVIDED,
                message="No frames provided",
            )
            return

        profile_valid = _is_positive(profile.length)
        if not profile_valid:
            yield ValidationError(
                kind=ValidationErrorKind.INVALID_PROFILE_LENGTH,
                message=f"Invalid profile length: {profile.length!r}",
            )
            if stop_early:
                return

        if profile.include_kerf and not (
            _is_number(profile.blade_size) and profile.blade_size >= 0
        ):
            yield ValidationError(
                kind=ValidationErrorKind.INVALID_BLADE_SIZE,
                message=f"Blade size must be non-negative, got {profile.blade_size!r}",
            )

        yield from self._frame_dimension_errors(frames)
        yield from self._sub_component_errors(frames)

        if profile_valid:
            yield from self._stock_length_errors(frames, profile)

    def _frame_dimension_errors(
        self, frames: Sequence[FrameSpec]
    ) -> Iterator[ValidationError]:
        for index, frame in enumerate(frames):
            if _is_positive(frame.width) and _is_positive(frame.height) and not _is_blank(
                frame.ref_no
            ):
                continue
            label = frame.ref_no if not _is_blank(frame.ref_no) else f"#{index + 1}"
            yield ValidationError(
                kind=ValidationErrorKind.INVALID_FRAME_DIMENSIONS,
                message=(
                    f"Frame {label} must have a positive width and height "
                    f"and a reference number (width={frame.width!r}, "
                    f"height={frame.height!r})"
                ),
                frame_id=frame.id,
                ref_no=frame.ref_no or None,
            )

    def _sub_component_errors(
        self, frames: Sequence[FrameSpec]
    ) -> Iterator[ValidationError]:
        for frame in frames:
            for sub in frame.sub_components:
                quantity_valid = (
                    isinstance(sub.quantity, int)
                    and not isinstance(sub.quantity, bool)
                    and sub.quantity > 0
                )
                if not _is_blank(sub.name) and _is_positive(sub.length) and quantity_valid:
                    continue
                yield ValidationError(
                    kind=ValidationErrorKind.INVALID_SUB_COMPONENT,
                    message=(
                        f"Sub-component {sub.name!r} of frame {frame.ref_no} must have "
                        f"a name, a positive length and a quantity of at least 1 "
                        f"(length={sub.length!r}, quantity={sub.quantity!r})"
                    ),
                    frame_id=frame.id,
                    ref_no=frame.ref_no or None,
                    sub_component=sub.name or None,
                )

    def _stock_length_errors(
        self,
        frames: Sequence[FrameSpec],
        profile: StandardProfileSpec,
    ) -> Iterator[ValidationError]:
        for frame in frames:
            max_length = convert(profile.length, profile.unit, frame.unit)
            unit = frame.unit.value

            for dimension in ("width", "height"):
                value = getattr(frame, dimension)
                if _is_number(value) and value > max_length:
                    yield ValidationError(
                        kind=ValidationErrorKind.PIECE_EXCEEDS_STOCK_LENGTH,
                        message=(
                            f"Frame {frame.ref_no} {dimension} ({value}{unit}) exceeds "
                            f"stock length ({max_length:g}{unit})"
                        ),
                        frame_id=frame.id,
                        ref_no=frame.ref_no or None,
                    )

            for sub in frame.sub_components:
                if _is_number(sub.length) and sub.length > max_length:
                    yield ValidationError(
                        kind=ValidationErrorKind.PIECE_EXCEEDS_STOCK_LENGTH,
                        message=(
                            f"Sub-component {sub.name!r} of frame {frame.ref_no} "
                            f"({sub.length}{unit}) exceeds stock length "
                            f"({max_length:g}{unit})"
                        ),
                        frame_id=frame.id,
                        ref_no=frame.ref_no or None,
                        sub_component=sub.name or None,
                    )
