"""Application layer - use cases and orchestration."""

from .commands import OptimizationFailedError, OptimizeCutListCommand, optimize
from .dtos import OptimizationOutput

__all__ = [
    "OptimizationFailedError",
    "OptimizationOutput",
    "OptimizeCutListCommand",
    "optimize",
]
