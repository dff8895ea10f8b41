"""Infrastructure layer - packing engine and output formatters."""

from .bin_packing import (
    LinearBinPacker,
    PackingConfig,
    PackingInvariantError,
)
from .formatters import CutListFormatter, JsonExporter

__all__ = [
    # Bin packing
    "LinearBinPacker",
    "PackingConfig",
    "PackingInvariantError",
    # Formatters
    "CutListFormatter",
    "JsonExporter",
]
