"""
Interop between quatkit quaternions and scipy rotations.

scipy's `Rotation` uses the same scalar-last [x, y, z, w] layout, so a
Quaternion maps onto it without reordering. These helpers are meant for
inspection and for handing rotations to scipy-based code; they do not
construct quaternions from matrices or from scipy objects.

Examples
--------
>>> import math
>>> from quatkit import from_axis_angle
>>> from quatkit.utils.orientation import describe_orientation
>>> describe_orientation(from_axis_angle([0, 0, 1], math.pi / 2))
'Roll: 0.0°, Pitch: 0.0°, Yaw: 90.0°'
"""
from __future__ import annotations

import numpy as np
from scipy.spatial.transform import Rotation as R

from quatkit.core.quaternion import Quaternion, as_array
from quatkit.utils.validation import validate_unit_quaternion


def to_scipy_rotation(q: Quaternion) -> R:
    """
    Convert to a scipy Rotation.
    
    Parameters
    ----------
    q : Quaternion
        Rotation quaternion. Should be unit length; scipy normalizes
        non-unit input, and a RuntimeWarning is emitted for it.
        
    Returns
    -------
    scipy.spatial.transform.Rotation
        
    Raises
    ------
    ValueError
        If `q` is the zero quaternion.
    """
    q_arr = as_array(q)
    if not np.any(q_arr):
        raise ValueError("Zero quaternion does not represent a rotation")
    validate_unit_quaternion(q)
    return R.from_quat(q_arr)


def quaternion_to_euler(
    q: Quaternion,
    order: str = "xyz",
    degrees: bool = True
) -> tuple[float, float, float]:
    """
    Euler angles of a Quaternion, via scipy.

    The three angles follow the axis sequence `order` (extrinsic for
    lowercase, intrinsic for uppercase, as in scipy). With the default
    "xyz" they read as roll, pitch and yaw.

    Parameters
    ----------
    q : Quaternion
        Nonzero quaternion; non-unit input warns and is normalized.
    order : str
        scipy axis sequence.
    degrees : bool
        Return degrees (default) rather than radians.

    Returns
    -------
    tuple[float, float, float]
        Angles about the first, second and third axis of `order`.
    """
    angles = to_scipy_rotation(q).as_euler(order, degrees=degrees)
    return (float(angles[0]), float(angles[1]), float(angles[2]))


def describe_orientation(q: Quaternion) -> str:
    """Human-readable roll/pitch/yaw summary in degrees."""
    roll, pitch, yaw = quaternion_to_euler(q, degrees=True)
    return f"Roll: {roll:.1f}°, Pitch: {pitch:.1f}°, Yaw: {yaw:.1f}°"
