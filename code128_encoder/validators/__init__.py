"""
Validation modules for the Code 128 encoder.
"""

from .validators import (
    validate_input,
    check_input,
    first_error,
    ValidationResult,
    PATTERNS,
)

__all__ = [
    "validate_input",
    "check_input",
    "first_error",
    "ValidationResult",
    "PATTERNS",
]
