"""Cut list optimization endpoints."""

from fastapi import APIRouter

from framecut.application.commands import OptimizationFailedError
from framecut.application.config import (
    config_to_frames,
    config_to_profile,
    load_config_from_dict,
)
from framecut.application.dtos import OptimizationOutput
from framecut.web.dependencies import OptimizeCommandDep
from framecut.web.schemas.requests import OptimizeRequest
from framecut.web.schemas.responses import (
    CutSchema,
    ErrorResponseSchema,
    OptimizationResultSchema,
    PackedProfileSchema,
    SummarySchema,
)

router = APIRouter(prefix="/optimize", tags=["optimize"])


def _output_to_schema(output: OptimizationOutput) -> OptimizationResultSchema:
    """Convert OptimizationOutput to response schema."""
    profiles = [
        PackedProfileSchema(
            original_length=profile.original_length,
            waste_length=profile.waste_length,
            kerf=profile.kerf,
            utilization=profile.utilization,
            unit=profile.unit.value,
            cuts=[
                CutSchema(
                    length=cut.length,
                    unit=cut.unit.value,
                    frame_id=cut.frame_id,
                    ref_no=cut.ref_no,
                    position=cut.position.value,
                    label=cut.label,
                    sub_component_name=cut.sub_component_name,
                )
                for cut in profile.cuts
            ],
        )
        for profile in output.profiles
    ]

    summary = output.summary
    return OptimizationResultSchema(
        unit=output.unit.value,
        profiles=profiles,
        summary=SummarySchema(
            total_profiles=summary.total_profiles,
            total_pieces=summary.total_pieces,
            total_length=summary.total_length,
            total_waste=summary.total_waste,
            waste_percentage=summary.waste_percentage,
        ),
    )


@router.post(
    "",
    response_model=OptimizationResultSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def optimize_cut_list(
    request: OptimizeRequest,
    command: OptimizeCommandDep,
) -> OptimizationResultSchema:
    """Compute the cut plan for a cut job configuration.

    Raises:
        ConfigError: If the configuration does not match the schema.
        OptimizationFailedError: If the frames or profile fail validation.
    """
    config = load_config_from_dict(request.config)
    output = command.execute(config_to_frames(config), config_to_profile(config))

    if output.error is not None:
        raise OptimizationFailedError(output.error)

    return _output_to_schema(output)
