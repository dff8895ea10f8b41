"""Pytest configuration and shared fixtures for frame cut tests."""

from __future__ import annotations

import pytest

from framecut.domain import (
    FrameSpec,
    StandardProfileSpec,
    SubComponentSpec,
    Unit,
)


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def frame_w1() -> FrameSpec:
    """A 1000 x 1200 mm frame with no sub-components."""
    return FrameSpec(id="f1", ref_no="W1", width=1000.0, height=1200.0)


@pytest.fixture
def frame_with_mullion() -> FrameSpec:
    """A 1000 x 1200 mm frame with two 1150 mm mullions."""
    return FrameSpec(
        id="f2",
        ref_no="W2",
        width=1000.0,
        height=1200.0,
        sub_components=(
            SubComponentSpec(id="s1", name="Mullion", length=1150.0, quantity=2),
        ),
    )


@pytest.fixture
def stock_6000() -> StandardProfileSpec:
    """A 6000 mm profile without kerf."""
    return StandardProfileSpec(length=6000.0, unit=Unit.MILLIMETER)


@pytest.fixture
def stock_6000_kerf() -> StandardProfileSpec:
    """A 6000 mm profile with a 3 mm blade."""
    return StandardProfileSpec(
        length=6000.0, unit=Unit.MILLIMETER, include_kerf=True, blade_size=3.0
    )


@pytest.fixture
def job_config() -> dict:
    """Cut job configuration document."""
    return {
        "schema_version": "1.0",
        "profile": {"length": 6000, "unit": "mm", "include_kerf": True, "blade_size": 3},
        "frames": [
            {
                "ref_no": "W1",
                "width": 1000,
                "height": 1200,
                "unit": "mm",
            },
            {
                "ref_no": "W2",
                "width": 800,
                "height": 1400,
                "unit": "mm",
                "sub_components": [{"name": "Mullion", "length": 1350, "quantity": 1}],
            },
        ],
    }
