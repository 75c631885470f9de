"""
Numeric constants shared across quatkit.

Thresholds are absolute and apply to float64 arithmetic.
"""

# Allowed deviation of |q| from 1 before a quaternion counts as non-unit.
UNIT_NORM_TOLERANCE = 1e-6

# Default absolute tolerance for component-wise quaternion comparison.
ALLCLOSE_ATOL = 1e-9

AXES3 = ("x", "y", "z")
AXES4 = ("x", "y", "z", "w")
