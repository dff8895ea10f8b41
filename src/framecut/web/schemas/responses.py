"""Pydantic response schemas for the REST API."""

from pydantic import BaseModel, Field


class CutSchema(BaseModel):
    """A single piece cut from a profile."""

    length: float = Field(..., description="Piece length")
    unit: str = Field(..., description="Length unit (mm or ft)")
    frame_id: str = Field(..., description="Owning frame identifier")
    ref_no: str = Field(..., description="Owning frame reference")
    position: str = Field(..., description="top, bottom, left, right or additional")
    label: str = Field(..., description="Display label")
    sub_component_name: str | None = Field(
        default=None, description="Sub-component name for additional pieces"
    )


class PackedProfileSchema(BaseModel):
    """One stock profile with its cuts."""

    original_length: float = Field(..., description="Stock length")
    waste_length: float = Field(..., description="Unused length")
    kerf: float = Field(..., description="Kerf between consecutive cuts")
    utilization: float = Field(..., description="Used share of the profile in percent")
    unit: str = Field(..., description="Length unit (mm or ft)")
    cuts: list[CutSchema] = Field(default_factory=list, description="Cuts in order")


class SummarySchema(BaseModel):
    """Totals over all profiles."""

    total_profiles: int = Field(..., description="Number of stock profiles used")
    total_pieces: int = Field(..., description="Number of pieces cut")
    total_length: float = Field(..., description="Stock length consumed")
    total_waste: float = Field(..., description="Total waste length")
    waste_percentage: float = Field(..., description="Waste share in percent")


class ValidationErrorSchema(BaseModel):
    """A rejected input record."""

    kind: str = Field(..., description="Validation failure kind")
    message: str = Field(..., description="Error message")
    frame_id: str | None = Field(default=None, description="Offending frame id")
    ref_no: str | None = Field(default=None, description="Offending frame reference")
    sub_component: str | None = Field(
        default=None, description="Offending sub-component name"
    )


class OptimizationResultSchema(BaseModel):
    """Response for cut list optimization."""

    unit: str = Field(..., description="Unit of every length in the response")
    profiles: list[PackedProfileSchema] = Field(
        default_factory=list, description="Packed profiles in creation order"
    )
    summary: SummarySchema = Field(..., description="Totals")


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether the input is valid")
    errors: list[ValidationErrorSchema] = Field(
        default_factory=list, description="Validation errors in check order"
    )


class ErrorResponseSchema(BaseModel):
    """Error body returned by exception handlers."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: list[dict] | None = Field(default=None, description="Error details")
