"""
Input layer — coercing raw user input into BondParameters, plausibility validation.
"""

from .loader import BondInput, coerce_number, parameters_from_mapping
from .validators import ValidationResult, validate_parameters

__all__ = [
    "BondInput",
    "coerce_number",
    "parameters_from_mapping",
    "ValidationResult",
    "validate_parameters",
]
