"""Conversion from configuration models to domain specifications."""

from __future__ import annotations

from framecut.application.config.schema import CutJobConfiguration, FrameConfig
from framecut.domain.value_objects import (
    FrameSpec,
    StandardProfileSpec,
    SubComponentSpec,
)


def config_to_frames(config: CutJobConfiguration) -> list[FrameSpec]:
    """Convert configured frames to FrameSpec objects.

    Frames and sub-components without an id get one from their position,
    e.g. ``frame-2`` and ``frame-2-sub-1``.
    """
    return [_frame_to_spec(frame, index) for index, frame in enumerate(config.frames, 1)]


def config_to_profile(config: CutJobConfiguration) -> StandardProfileSpec:
    """Convert the configured stock profile to a StandardProfileSpec."""
    profile = config.profile
    return StandardProfileSpec(
        length=profile.length,
        unit=profile.unit,
        include_kerf=profile.include_kerf,
        blade_size=profile.blade_size,
    )


def _frame_to_spec(frame: FrameConfig, index: int) -> FrameSpec:
    frame_id = frame.id or f"frame-{index}"
    sub_components = tuple(
        SubComponentSpec(
            id=sub.id or f"{frame_id}-sub-{sub_index}",
            name=sub.name,
            length=sub.length,
            quantity=sub.quantity,
        )
        for sub_index, sub in enumerate(frame.sub_components, 1)
    )
    return FrameSpec(
        id=frame_id,
        ref_no=frame.ref_no,
        width=frame.width,
        height=frame.height,
        unit=frame.unit,
        sub_components=sub_components,
    )
