"""
Small fixed-size vector primitives.

Vectors are plain float64 numpy arrays of shape (3,) or (4,). Every function
returns a new array and leaves its arguments untouched, so callers can treat
them as values.

Zero-length normalization
-------------------------
`vec_normalize` of a vector with every component exactly zero returns the
zero vector of the same shape and emits a RuntimeWarning. It never produces NaN.
"""
from __future__ import annotations

import warnings
from collections.abc import Iterable, Mapping

import numpy as np
from numpy.typing import ArrayLike, NDArray

from quatkit.constants import AXES3, AXES4

Vec = NDArray[np.float64]


def _as_vec(v: ArrayLike, name: str = "vector") -> Vec:
    """Coerce to a float64 3- or 4-vector."""
    arr = np.asarray(v, dtype=np.float64)
    if arr.shape not in ((3,), (4,)):
        raise ValueError(f"{name} must have shape (3,) or (4,), got {arr.shape}")
    return arr


def _axis_index(v: Vec, axis: str) -> int:
    axes = AXES3 if v.shape == (3,) else AXES4
    if axis not in axes:
        raise ValueError(f"axis must be one of {axes}, got '{axis}'")
    return axes.index(axis)


def _check_same_shape(a: Vec, b: Vec) -> None:
    if a.shape != b.shape:
        raise ValueError(f"Shape mismatch: {a.shape} vs {b.shape}")


# =============================================================================
# Construction and conversion
# =============================================================================

def vec3(x: float, y: float, z: float) -> Vec:
    """Build a 3-vector."""
    return np.array([x, y, z], dtype=np.float64)


def vec4(x: float, y: float, z: float, w: float) -> Vec:
    """Build a 4-vector."""
    return np.array([x, y, z, w], dtype=np.float64)


def vec4_from_tuple(t: Iterable[float]) -> Vec:
    """
    Build a 4-vector from an ordered sequence of numbers.

    Raises
    ------
    ValueError
        If `t` is a string or does not have exactly four components.
    """
    if isinstance(t, (str, bytes)):
        raise ValueError(f"Expected a sequence of 4 numbers, got {type(t).__name__}")
    arr = np.asarray(tuple(t), dtype=np.float64)
    if arr.shape != (4,):
        raise ValueError(f"Expected 4 components, got {arr.size}")
    return arr


def vec_to_tuple(v: ArrayLike) -> tuple[float, ...]:
    """Convert to a tuple of Python floats."""
    return tuple(float(c) for c in _as_vec(v))


def vec4_to_record(v: ArrayLike) -> dict[str, float]:
    """Convert a 4-vector to a labeled {x, y, z, w} dict."""
    arr = _as_vec(v)
    if arr.shape != (4,):
        raise ValueError(f"Expected a 4-vector, got shape {arr.shape}")
    return {axis: float(c) for axis, c in zip(AXES4, arr)}


def vec4_from_record(r: Mapping[str, float]) -> Vec:
    """
    Build a 4-vector from a labeled mapping.

    Raises
    ------
    KeyError
        If any of "x", "y", "z", "w" is missing.
    """
    return np.array([r[axis] for axis in AXES4], dtype=np.float64)


# =============================================================================
# Component access
# =============================================================================

def vec_get(v: ArrayLike, axis: str) -> float:
    arr = _as_vec(v)
    return float(arr[_axis_index(arr, axis)])


def vec_set(v: ArrayLike, axis: str, value: float) -> Vec:
    """Return a copy of `v` with one component replaced."""
    out = _as_vec(v).copy()
    out[_axis_index(out, axis)] = value
    return out


# =============================================================================
# Arithmetic
# =============================================================================

def vec_add(a: ArrayLike, b: ArrayLike) -> Vec:
    a, b = _as_vec(a, "a"), _as_vec(b, "b")
    _check_same_shape(a, b)
    return a + b


def vec_sub(a: ArrayLike, b: ArrayLike) -> Vec:
    a, b = _as_vec(a, "a"), _as_vec(b, "b")
    _check_same_shape(a, b)
    return a - b


def vec_negate(v: ArrayLike) -> Vec:
    return -_as_vec(v)


def vec_scale(s: float, v: ArrayLike) -> Vec:
    """Multiply every component by the scalar `s`."""
    return float(s) * _as_vec(v)


def vec_dot(a: ArrayLike, b: ArrayLike) -> float:
    a, b = _as_vec(a, "a"), _as_vec(b, "b")
    _check_same_shape(a, b)
    return float(np.dot(a, b))


def vec_length_squared(v: ArrayLike) -> float:
    arr = _as_vec(v)
    return float(np.dot(arr, arr))


def vec_length(v: ArrayLike) -> float:
    return float(np.sqrt(vec_length_squared(v)))


def vec_normalize(v: ArrayLike) -> Vec:
    """
    Return the unit vector in the direction of `v`.

    Parameters
    ----------
    v : array-like
        3- or 4-vector.

    Returns
    -------
    NDArray[np.float64]
        `v / |v|`, or the zero vector if every component of `v` is zero.

    Notes
    -----
    The zero-length case emits a RuntimeWarning so that silent degenerate
    input can be caught with a warnings filter.
    """
    arr = _as_vec(v)
    if not np.any(arr):
        warnings.warn(
            f"Zero-length vector of shape {arr.shape} cannot be normalized. "
            "Returning zero vector.",
            RuntimeWarning,
            stacklevel=2
        )
        return np.zeros_like(arr)
    n = vec_length(arr)
    if n == 0.0:
        # |v|² underflowed; rescale so the largest component is 1
        arr = arr / np.max(np.abs(arr))
        n = vec_length(arr)
    return arr / n
