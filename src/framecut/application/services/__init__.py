"""Application services for cut list optimization.

- InputValidatorService: Rejects invalid frames and profiles before packing
- ResultFormatter: Converts packed profiles back to the caller's unit
"""

from .input_validator import InputValidatorService
from .result_formatter import ResultFormatter

__all__ = [
    "InputValidatorService",
    "ResultFormatter",
]
