"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class OptimizeRequest(BaseModel):
    """Request for optimizing a cut job from a full configuration."""

    config: dict[str, Any] = Field(..., description="Full cut job configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a cut job configuration."""

    config: dict[str, Any] = Field(..., description="Configuration to validate")
