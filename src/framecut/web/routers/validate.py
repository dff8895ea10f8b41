"""Input validation endpoints."""

from fastapi import APIRouter

from framecut.application.config import (
    config_to_frames,
    config_to_profile,
    load_config_from_dict,
)
from framecut.web.dependencies import InputValidatorDep
from framecut.web.schemas.requests import ConfigValidateRequest
from framecut.web.schemas.responses import (
    ErrorResponseSchema,
    ValidationErrorSchema,
    ValidationResultSchema,
)

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post(
    "",
    response_model=ValidationResultSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def validate_configuration(
    request: ConfigValidateRequest,
    validator: InputValidatorDep,
) -> ValidationResultSchema:
    """Validate a cut job without optimizing it.

    Schema violations are reported through the ConfigError handler; value
    problems are listed here, all of them, in check order.
    """
    config = load_config_from_dict(request.config)
    errors = validator.validate_all(config_to_frames(config), config_to_profile(config))

    return ValidationResultSchema(
        is_valid=not errors,
        errors=[
            ValidationErrorSchema(
                kind=error.kind.value,
                message=error.message,
                frame_id=error.frame_id,
                ref_no=error.ref_no,
                sub_component=error.sub_component,
            )
            for error in errors
        ],
    )
