"""FastAPI dependency injection for optimization services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from framecut.application.commands import OptimizeCutListCommand
from framecut.application.services import InputValidatorService


@lru_cache(maxsize=1)
def get_optimize_command() -> OptimizeCutListCommand:
    """Shared command instance; it keeps no per-call state."""
    return OptimizeCutListCommand()


def get_input_validator() -> InputValidatorService:
    """Dependency for InputValidatorService."""
    return InputValidatorService()


OptimizeCommandDep = Annotated[OptimizeCutListCommand, Depends(get_optimize_command)]
InputValidatorDep = Annotated[InputValidatorService, Depends(get_input_validator)]
