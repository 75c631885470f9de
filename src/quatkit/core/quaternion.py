"""
Quaternion value type for 3D rotations.

A Quaternion holds four float components (x, y, z, w) in scalar-last order:
(x, y, z) is the vector part and w the scalar part. Values are immutable;
every operation, including the `set_*` family, returns a new Quaternion.

Quaternion is not an ndarray. Operations that are plain 4-vector
arithmetic forward to `quatkit.primitives.vector` and wrap the result, so a
rotation quaternion is never accepted where a general 4-vector is expected.

Conventions
-----------
- Rotations are right-handed, angles in radians.
- `mul(q1, q2)` composes frame rotations q2 then q1; for the active
  matrices this is `to_matrix(q2) @ to_matrix(q1)`.
- No unit-length invariant is enforced. `to_matrix` normalizes implicitly,
  `normalize` of the zero quaternion returns the zero quaternion with a
  RuntimeWarning.

Examples
--------
>>> import math
>>> from quatkit import from_axis_angle, mul, to_matrix
>>> yaw = from_axis_angle((0.0, 0.0, 1.0), math.pi / 2)
>>> pitch = from_axis_angle((0.0, 1.0, 0.0), math.pi / 4)
>>> M = to_matrix(mul(pitch, yaw))  # same as to_matrix(yaw) @ to_matrix(pitch)
"""
from __future__ import annotations

import math
import numbers
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import TypedDict

import numpy as np
from numpy.typing import ArrayLike, NDArray

from quatkit.constants import ALLCLOSE_ATOL, UNIT_NORM_TOLERANCE
from quatkit.primitives.matrix import Mat4, mat4_from_basis
from quatkit.primitives.vector import (
    Vec,
    vec3,
    vec4,
    vec4_from_record,
    vec4_from_tuple,
    vec4_to_record,
    vec_add,
    vec_dot,
    vec_get,
    vec_length,
    vec_length_squared,
    vec_negate,
    vec_normalize,
    vec_scale,
    vec_set,
    vec_sub,
    vec_to_tuple,
)
from quatkit.utils.validation import validate_finite, validate_vector


class QuaternionRecord(TypedDict):
    """Labeled form of a quaternion."""
    x: float
    y: float
    z: float
    w: float


@dataclass(frozen=True, slots=True)
class Quaternion:
    """
    Immutable quaternion (x, y, z, w), scalar-last.

    Attributes
    ----------
    x, y, z : float
        Vector part.
    w : float
        Scalar part.

    Notes
    -----
    Operators forward to the module functions: `a * b` is the rotation
    composition `mul(a, b)`, `s * q` and `q * s` scale by a real number, and
    `+`, `-` are component-wise. Numpy arithmetic with a Quaternion is
    refused (`__array_ufunc__ = None`); use `as_array` to leave the type
    explicitly.
    """
    x: float
    y: float
    z: float
    w: float

    __array_ufunc__ = None

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def __array__(self, dtype=None, copy=None) -> NDArray:
        return np.array([self.x, self.y, self.z, self.w],
                        dtype=np.float64 if dtype is None else dtype)

    def __add__(self, other: object) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: object) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return sub(self, other)

    def __neg__(self) -> Quaternion:
        return negate(self)

    def __mul__(self, other: object) -> Quaternion:
        if isinstance(other, Quaternion):
            return mul(self, other)
        if isinstance(other, numbers.Real):
            return scale(other, self)
        return NotImplemented

    def __rmul__(self, other: object) -> Quaternion:
        if isinstance(other, numbers.Real):
            return scale(other, self)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Quaternion(x={self.x!r}, y={self.y!r}, z={self.z!r}, w={self.w!r})"


# =============================================================================
# Vector4 forwarding
# =============================================================================

def _to_vec4(q: Quaternion) -> Vec:
    return vec4(q.x, q.y, q.z, q.w)


def _from_vec4(v: Vec) -> Quaternion:
    x, y, z, w = vec_to_tuple(v)
    return Quaternion(x, y, z, w)


# =============================================================================
# Construction and accessors
# =============================================================================

def quat(x: float, y: float, z: float, w: float) -> Quaternion:
    """Build a quaternion from its components. No validation."""
    return Quaternion(float(x), float(y), float(z), float(w))


IDENTITY: Quaternion = Quaternion(0.0, 0.0, 0.0, 1.0)
"""Identity quaternion (0, 0, 0, 1): no rotation."""


def get_x(q: Quaternion) -> float:
    return vec_get(_to_vec4(q), "x")


def get_y(q: Quaternion) -> float:
    return vec_get(_to_vec4(q), "y")


def get_z(q: Quaternion) -> float:
    return vec_get(_to_vec4(q), "z")


def get_w(q: Quaternion) -> float:
    return vec_get(_to_vec4(q), "w")


def set_x(value: float, q: Quaternion) -> Quaternion:
    """Copy of `q` with x replaced. `q` is unchanged."""
    return _from_vec4(vec_set(_to_vec4(q), "x", value))


def set_y(value: float, q: Quaternion) -> Quaternion:
    """Copy of `q` with y replaced. `q` is unchanged."""
    return _from_vec4(vec_set(_to_vec4(q), "y", value))


def set_z(value: float, q: Quaternion) -> Quaternion:
    """Copy of `q` with z replaced. `q` is unchanged."""
    return _from_vec4(vec_set(_to_vec4(q), "z", value))


def set_w(value: float, q: Quaternion) -> Quaternion:
    """Copy of `q` with w replaced. `q` is unchanged."""
    return _from_vec4(vec_set(_to_vec4(q), "w", value))


# =============================================================================
# Tuple / record conversion
# =============================================================================

def to_tuple(q: Quaternion) -> tuple[float, float, float, float]:
    """Ordered (x, y, z, w)."""
    x, y, z, w = vec_to_tuple(_to_vec4(q))
    return (x, y, z, w)


def from_tuple(t: Iterable[float]) -> Quaternion:
    """
    Build a quaternion from an ordered (x, y, z, w) sequence.

    Raises
    ------
    ValueError
        If `t` is a string or does not have exactly four components.
    """
    return _from_vec4(vec4_from_tuple(t))


def to_record(q: Quaternion) -> QuaternionRecord:
    r = vec4_to_record(_to_vec4(q))
    return QuaternionRecord(x=r["x"], y=r["y"], z=r["z"], w=r["w"])


def from_record(r: Mapping[str, float]) -> Quaternion:
    """
    Build a quaternion from a labeled {x, y, z, w} mapping.

    Extra keys are ignored; a missing key raises KeyError.
    """
    return _from_vec4(vec4_from_record(r))


def as_array(q: Quaternion) -> NDArray[np.float64]:
    """Fresh float64 array [x, y, z, w]."""
    return _to_vec4(q)


# =============================================================================
# Component-wise algebra (Vector4 semantics)
# =============================================================================

def add(a: Quaternion, b: Quaternion) -> Quaternion:
    return _from_vec4(vec_add(_to_vec4(a), _to_vec4(b)))


def sub(a: Quaternion, b: Quaternion) -> Quaternion:
    return _from_vec4(vec_sub(_to_vec4(a), _to_vec4(b)))


def negate(q: Quaternion) -> Quaternion:
    return _from_vec4(vec_negate(_to_vec4(q)))


def scale(s: float, q: Quaternion) -> Quaternion:
    """(s·x, s·y, s·z, s·w)"""
    return _from_vec4(vec_scale(s, _to_vec4(q)))


def dot(a: Quaternion, b: Quaternion) -> float:
    return vec_dot(_to_vec4(a), _to_vec4(b))


def length_squared(q: Quaternion) -> float:
    return vec_length_squared(_to_vec4(q))


def length(q: Quaternion) -> float:
    return vec_length(_to_vec4(q))


def normalize(q: Quaternion) -> Quaternion:
    """
    Scale `q` to unit length.

    Parameters
    ----------
    q : Quaternion
        Any quaternion.

    Returns
    -------
    Quaternion
        `q / |q|`. For a zero-length input the zero quaternion
        (0, 0, 0, 0) is returned and a RuntimeWarning is emitted, following
        the vector normalization contract.
    """
    return _from_vec4(vec_normalize(_to_vec4(q)))


# =============================================================================
# Rotation algebra
# =============================================================================

def mul(q1: Quaternion, q2: Quaternion) -> Quaternion:
    """
    Compose two rotations; call as `mul(outer, inner)`.

    Component rule::

        x = w1·x2 + x1·w2 − y1·z2 + z1·y2
        y = w1·y2 + x1·z2 + y1·w2 − z1·x2
        z = w1·z2 − x1·y2 + y1·x2 + z1·w2
        w = w1·w2 − x1·x2 − y1·y2 − z1·z2

    Read as frame rotations, the result applies q2 and then q1. The
    cross-product terms carry the opposite sign of the textbook i·j = k
    table, so in terms of the active matrices from `to_matrix`::

        to_matrix(mul(q1, q2)) == to_matrix(q2) @ to_matrix(q1)

    Parameters
    ----------
    q1 : Quaternion
        Outer rotation
    q2 : Quaternion
        Inner rotation

    Returns
    -------
    Quaternion
        Product quaternion. Unit inputs give a unit output up to rounding.

    Notes
    -----
    Associative but not commutative. IDENTITY is a two-sided identity.
    """
    x1, y1, z1, w1 = q1.x, q1.y, q1.z, q1.w
    x2, y2, z2, w2 = q2.x, q2.y, q2.z, q2.w
    return Quaternion(
        w1*x2 + x1*w2 - y1*z2 + z1*y2,
        w1*y2 + x1*z2 + y1*w2 - z1*x2,
        w1*z2 - x1*y2 + y1*x2 + z1*w2,
        w1*w2 - x1*x2 - y1*y2 - z1*z2,
    )


def conjugate(q: Quaternion) -> Quaternion:
    """(-x, -y, -z, w). Equals the inverse for a unit quaternion."""
    return Quaternion(-q.x, -q.y, -q.z, q.w)


def from_axis_angle(axis: ArrayLike, angle: float) -> Quaternion:
    """
    Unit quaternion for a right-handed rotation of `angle` about `axis`.

    Parameters
    ----------
    axis : array-like
        Rotation axis (3,). Need not be normalized.
    angle : float
        Rotation angle [rad]

    Returns
    -------
    Quaternion
        (sin(θ/2)·â, cos(θ/2)) where â is the normalized axis.

    Raises
    ------
    ValueError
        If `axis` is not a finite 3-vector, is exactly the zero vector,
        or `angle` is not finite. Any nonzero axis, however short, is
        accepted.

    Examples
    --------
    >>> import math
    >>> q = from_axis_angle([0, 0, 1], math.pi / 2)  # 90 deg about z
    """
    a = validate_vector(axis, 3, "axis")
    validate_finite(angle, "angle")
    if not np.any(a):
        raise ValueError(f"Rotation axis must be non-zero, got {a}")

    unit_axis = vec_normalize(a)
    half = 0.5 * angle
    sx, sy, sz = vec_to_tuple(vec_scale(math.sin(half), unit_axis))
    return Quaternion(sx, sy, sz, math.cos(half))


def to_matrix(q: Quaternion) -> Mat4:
    """
    Rotation matrix for `q`, embedded in a 4x4 transform.

    Parameters
    ----------
    q : Quaternion
        Rotation. Need not be unit length: the 2/|q|² factor normalizes
        implicitly.

    Returns
    -------
    NDArray[np.float64]
        4x4 matrix M with M @ [v, 1] = [R v, 1], no translation.

    Notes
    -----
    The zero quaternion maps to the identity matrix: with s = 0 every
    off-diagonal term vanishes and the columns reduce to the world axes.
    No error or warning is raised for it.
    """
    x, y, z, w = q.x, q.y, q.z, q.w
    n = x*x + y*y + z*z + w*w
    s = 0.0 if n == 0.0 else 2.0 / n

    xx, xy, xz = s*x*x, s*x*y, s*x*z
    yy, yz, zz = s*y*y, s*y*z, s*z*z
    wx, wy, wz = s*w*x, s*w*y, s*w*z

    i = vec3(1.0 - (yy + zz), xy + wz, xz - wy)
    j = vec3(xy - wz, 1.0 - (xx + zz), yz + wx)
    k = vec3(xz + wy, yz - wx, 1.0 - (xx + yy))
    return mat4_from_basis(i, j, k)


# =============================================================================
# Predicates
# =============================================================================

def is_unit(q: Quaternion, tol: float = UNIT_NORM_TOLERANCE) -> bool:
    return abs(length(q) - 1.0) <= tol


def allclose(a: Quaternion, b: Quaternion, atol: float = ALLCLOSE_ATOL) -> bool:
    """Component-wise comparison within an absolute tolerance."""
    return bool(np.allclose(_to_vec4(a), _to_vec4(b), rtol=0.0, atol=atol))
