"""Tests for OptimizeCutListCommand and the optimize() entry point.

Covers the full pipeline: validation, piece building, normalization,
packing and conversion back to the caller's unit, plus the properties
every result must satisfy (conservation, completeness, capacity,
determinism, unit round-trip).
"""

from __future__ import annotations

from collections import Counter

import pytest

from framecut import optimize
from framecut.application import (
    OptimizationFailedError,
    OptimizeCutListCommand,
)
from framecut.domain import (
    FrameSpec,
    PieceListBuilder,
    StandardProfileSpec,
    SubComponentSpec,
    Unit,
    ValidationErrorKind,
)


@pytest.fixture
def command() -> OptimizeCutListCommand:
    return OptimizeCutListCommand()


@pytest.fixture
def workshop_frames() -> list[FrameSpec]:
    """A mixed batch of frames with sub-components, integer millimeters."""
    return [
        FrameSpec(
            id="f1",
            ref_no="W1",
            width=1200.0,
            height=1500.0,
            sub_components=(
                SubComponentSpec(id="s1", name="Mullion", length=1450.0, quantity=1),
            ),
        ),
        FrameSpec(id="f2", ref_no="W2", width=600.0, height=900.0),
        FrameSpec(
            id="f3",
            ref_no="W3",
            width=2100.0,
            height=1000.0,
            sub_components=(
                SubComponentSpec(id="s2", name="Sash bar", length=950.0, quantity=3),
            ),
        ),
        FrameSpec(id="f4", ref_no="W4", width=450.0, height=450.0),
    ]


class TestScenarios:
    """Worked examples."""

    def test_single_frame(
        self,
        command: OptimizeCutListCommand,
        frame_w1: FrameSpec,
        stock_6000: StandardProfileSpec,
    ) -> None:
        output = command.execute([frame_w1], stock_6000)

        assert output.is_valid
        assert len(output.profiles) == 1
        profile = output.profiles[0]
        assert profile.original_length == 6000.0
        assert profile.waste_length == 1600.0
        assert [c.length for c in profile.cuts] == [1200.0, 1200.0, 1000.0, 1000.0]
        assert profile.utilization == 73.3

    def test_single_frame_with_kerf(
        self,
        command: OptimizeCutListCommand,
        frame_w1: FrameSpec,
        stock_6000_kerf: StandardProfileSpec,
    ) -> None:
        output = command.execute([frame_w1], stock_6000_kerf)

        profile = output.profiles[0]
        assert [c.length for c in profile.cuts] == [1200.0, 1200.0, 1000.0, 1000.0]
        assert profile.waste_length == 1591.0

    def test_two_frames_need_two_profiles(self, command: OptimizeCutListCommand) -> None:
        frames = [
            FrameSpec(id="a", ref_no="A", width=1000.0, height=1200.0),
            FrameSpec(id="b", ref_no="B", width=1000.0, height=1200.0),
        ]

        output = command.execute(frames, StandardProfileSpec(length=5000.0))

        assert len(output.profiles) == 2
        for profile in output.profiles:
            assert profile.used_length <= 5000.0
            assert profile.waste_length >= 0

    def test_sub_components_included(
        self,
        command: OptimizeCutListCommand,
        frame_with_mullion: FrameSpec,
        stock_6000: StandardProfileSpec,
    ) -> None:
        output = command.execute([frame_with_mullion], stock_6000)

        assert output.summary is not None
        assert output.summary.total_pieces == 6
        assert output.summary.total_profiles == 2
        first = output.profiles[0]
        assert [c.label for c in first.cuts] == ["Left", "Right", "Mullion", "Mullion", "Top"]
        assert first.waste_length == 300.0

    def test_feet_profile(self, command: OptimizeCutListCommand) -> None:
        frame = FrameSpec(id="f", ref_no="W1", width=4.0, height=5.0, unit=Unit.FOOT)
        profile = StandardProfileSpec(length=20.0, unit=Unit.FOOT)

        output = command.execute([frame], profile)

        result = output.profiles[0]
        assert result.unit == Unit.FOOT
        assert result.original_length == 20.0
        assert result.waste_length == 2.0
        assert [c.length for c in result.cuts] == [5.0, 5.0, 4.0, 4.0]
        assert all(c.unit == Unit.FOOT for c in result.cuts)


class TestSummary:
    """Tests for run totals."""

    def test_summary_millimeters(
        self,
        command: OptimizeCutListCommand,
        frame_w1: FrameSpec,
        stock_6000: StandardProfileSpec,
    ) -> None:
        summary = command.execute([frame_w1], stock_6000).summary

        assert summary is not None
        assert summary.total_profiles == 1
        assert summary.total_pieces == 4
        assert summary.total_length == 6000.0
        assert summary.total_waste == 1600.0
        assert summary.waste_percentage == 26.7
        assert summary.unit == Unit.MILLIMETER

    def test_summary_feet(self, command: OptimizeCutListCommand) -> None:
        frame = FrameSpec(id="f", ref_no="W1", width=4.0, height=5.0, unit=Unit.FOOT)

        summary = command.execute([frame], StandardProfileSpec(length=20.0, unit=Unit.FOOT)).summary

        assert summary is not None
        assert summary.total_length == 20.0
        assert summary.total_waste == 2.0
        assert summary.waste_percentage == 10.0
        assert summary.unit == Unit.FOOT


class TestValidationFailures:
    """Tests for rejected input."""

    def test_output_carries_error(
        self, command: OptimizeCutListCommand, stock_6000: StandardProfileSpec
    ) -> None:
        output = command.execute([], stock_6000)

        assert not output.is_valid
        assert output.profiles == []
        assert output.summary is None
        assert output.error is not None
        assert output.error.kind == ValidationErrorKind.NO_FRAMES_PROVIDED

    def test_oversized_piece_never_packed(
        self, command: OptimizeCutListCommand, stock_6000: StandardProfileSpec
    ) -> None:
        frame = FrameSpec(id="f", ref_no="W1", width=6500.0, height=1000.0)

        output = command.execute([frame], stock_6000)

        assert output.error is not None
        assert output.error.kind == ValidationErrorKind.PIECE_EXCEEDS_STOCK_LENGTH
        assert output.profiles == []

    def test_optimize_raises(self, stock_6000: StandardProfileSpec) -> None:
        frame = FrameSpec(id="f", ref_no="W1", width=0.0, height=1000.0)

        with pytest.raises(OptimizationFailedError) as exc_info:
            optimize([frame], stock_6000)

        assert exc_info.value.kind == "invalid_frame_dimensions"
        assert exc_info.value.error.frame_id == "f"

    def test_optimize_returns_profiles(
        self, frame_w1: FrameSpec, stock_6000: StandardProfileSpec
    ) -> None:
        profiles = optimize([frame_w1], stock_6000)

        assert len(profiles) == 1
        assert profiles[0].waste_length == 1600.0


class TestProperties:
    """Properties that hold for every valid result."""

    def test_conservation(
        self,
        command: OptimizeCutListCommand,
        workshop_frames: list[FrameSpec],
        stock_6000_kerf: StandardProfileSpec,
    ) -> None:
        output = command.execute(workshop_frames, stock_6000_kerf)

        for profile in output.profiles:
            total = profile.used_length + profile.kerf_length + profile.waste_length
            assert total == pytest.approx(profile.original_length, abs=0.05)

    def test_completeness(
        self,
        command: OptimizeCutListCommand,
        workshop_frames: list[FrameSpec],
        stock_6000_kerf: StandardProfileSpec,
    ) -> None:
        output = command.execute(workshop_frames, stock_6000_kerf)

        packed = Counter(
            (c.frame_id, c.position, c.sub_component_name, c.length)
            for profile in output.profiles
            for c in profile.cuts
        )
        expected = Counter(
            (p.frame_id, p.position, p.sub_component_name, p.length)
            for p in PieceListBuilder().build(workshop_frames)
        )
        assert packed == expected

    def test_piece_count_law(
        self,
        command: OptimizeCutListCommand,
        workshop_frames: list[FrameSpec],
        stock_6000: StandardProfileSpec,
    ) -> None:
        output = command.execute(workshop_frames, stock_6000)

        quantities = sum(s.quantity for f in workshop_frames for s in f.sub_components)
        assert output.summary is not None
        assert output.summary.total_pieces == 4 * len(workshop_frames) + quantities

    def test_capacity_bound(
        self,
        command: OptimizeCutListCommand,
        workshop_frames: list[FrameSpec],
        stock_6000_kerf: StandardProfileSpec,
    ) -> None:
        output = command.execute(workshop_frames, stock_6000_kerf)

        for profile in output.profiles:
            assert profile.used_length + profile.kerf_length <= profile.original_length
            assert profile.waste_length >= 0

    def test_cuts_in_descending_order(
        self,
        command: OptimizeCutListCommand,
        workshop_frames: list[FrameSpec],
        stock_6000: StandardProfileSpec,
    ) -> None:
        output = command.execute(workshop_frames, stock_6000)

        for profile in output.profiles:
            lengths = [c.length for c in profile.cuts]
            assert lengths == sorted(lengths, reverse=True)

    def test_determinism(
        self,
        command: OptimizeCutListCommand,
        workshop_frames: list[FrameSpec],
        stock_6000_kerf: StandardProfileSpec,
    ) -> None:
        first = command.execute(workshop_frames, stock_6000_kerf)
        second = command.execute(workshop_frames, stock_6000_kerf)

        assert first.profiles == second.profiles
        assert first.summary == second.summary

    def test_unit_round_trip(
        self,
        command: OptimizeCutListCommand,
        workshop_frames: list[FrameSpec],
    ) -> None:
        mm_output = command.execute(workshop_frames, StandardProfileSpec(length=6096.0))
        ft_frames = [
            FrameSpec(
                id=f.id,
                ref_no=f.ref_no,
                width=f.width / 304.8,
                height=f.height / 304.8,
                unit=Unit.FOOT,
                sub_components=tuple(
                    SubComponentSpec(
                        id=s.id, name=s.name, length=s.length / 304.8, quantity=s.quantity
                    )
                    for s in f.sub_components
                ),
            )
            for f in workshop_frames
        ]
        ft_output = command.execute(ft_frames, StandardProfileSpec(length=20.0, unit=Unit.FOOT))

        assert mm_output.summary is not None and ft_output.summary is not None
        assert ft_output.summary.total_profiles == mm_output.summary.total_profiles
        assert ft_output.summary.waste_percentage == pytest.approx(
            mm_output.summary.waste_percentage, abs=0.1
        )
