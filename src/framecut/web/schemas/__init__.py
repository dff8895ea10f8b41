"""Pydantic schemas for the REST API."""

from framecut.web.schemas.requests import ConfigValidateRequest, OptimizeRequest
from framecut.web.schemas.responses import (
    CutSchema,
    ErrorResponseSchema,
    OptimizationResultSchema,
    PackedProfileSchema,
    SummarySchema,
    ValidationErrorSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "OptimizeRequest",
    # Responses
    "CutSchema",
    "ErrorResponseSchema",
    "OptimizationResultSchema",
    "PackedProfileSchema",
    "SummarySchema",
    "ValidationErrorSchema",
    "ValidationResultSchema",
]
