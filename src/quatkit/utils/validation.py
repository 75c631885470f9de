"""
Validation utilities for vectors, scalars and rotation quaternions.

Hard errors raise ValueError; recoverable issues emit a RuntimeWarning.
"""
from __future__ import annotations
import numpy as np
from numpy.typing import ArrayLike, NDArray
import warnings

from quatkit.constants import UNIT_NORM_TOLERANCE
from quatkit.primitives.vector import vec_length


def validate_finite(value: float, name: str) -> None:
    """Validate that a scalar is finite (not NaN or infinite)."""
    if not np.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")


def validate_vector(v: ArrayLike, size: int, name: str) -> NDArray[np.float64]:
    """
    Validate and coerce a fixed-size vector.
    
    Parameters
    ----------
    v : array-like
        Candidate vector
    size : int
        Required number of components
    name : str
        Parameter name for error messages
        
    Returns
    -------
    NDArray[np.float64]
        `v` as a float64 array of shape (size,)
        
    Raises
    ------
    ValueError
        If the shape is wrong or any component is not finite
    """
    arr = np.asarray(v, dtype=np.float64)
    if arr.shape != (size,):
        raise ValueError(f"{name} must have shape ({size},), got {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} must be finite, got {arr}")
    return arr


def validate_unit_quaternion(q: ArrayLike, tol: float = UNIT_NORM_TOLERANCE) -> None:
    """
    Check that a rotation quaternion has unit length.

    Non-unit input is usable (rotation helpers rescale it), so a length
    outside 1 ± `tol` only emits a RuntimeWarning. Anything that is not
    four finite components is rejected.

    Parameters
    ----------
    q : Quaternion or array-like
        Components in (x, y, z, w) order
    tol : float
        Accepted deviation of |q| from 1

    Raises
    ------
    ValueError
        If `q` is not four finite components
    """
    n = vec_length(validate_vector(q, 4, "quaternion"))
    if abs(n - 1.0) > tol:
        warnings.warn(
            f"Rotation quaternion has length {n:.6g}, expected 1 within {tol:g}. "
            "It will be rescaled.",
            RuntimeWarning,
            stacklevel=2
        )
