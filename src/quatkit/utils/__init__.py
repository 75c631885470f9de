"""Utility functions for quatkit."""

from .validation import (
    validate_finite,
    validate_unit_quaternion,
    validate_vector,
)

# Orientation helpers depend on quatkit.core; import them from
# quatkit.utils.orientation directly.

__all__ = [
    "validate_finite",
    "validate_vector",
    "validate_unit_quaternion",
]
