"""
quatkit - Quaternion value algebra for 3D rotations.

Core
----
Quaternion : Immutable (x, y, z, w) value, scalar-last
quat, IDENTITY : Construction
mul, conjugate : Rotation composition and inverse
from_axis_angle : Rotation from axis and angle [rad]
to_matrix : 4x4 rotation matrix for a transform pipeline

Primitives
----------
quatkit.primitives.vector : Vector3 / Vector4 arithmetic on float64 arrays
quatkit.primitives.matrix : 4x4 matrix from basis columns

Examples
--------
>>> import math
>>> from quatkit import from_axis_angle, mul, to_matrix, IDENTITY
>>> q = from_axis_angle([0, 0, 1], math.pi / 2)
>>> mul(q, IDENTITY) == q
True
"""

__version__ = "0.1.0"

# Quaternion algebra
from quatkit.core.quaternion import (
    IDENTITY,
    Quaternion,
    QuaternionRecord,
    add,
    allclose,
    as_array,
    conjugate,
    dot,
    from_axis_angle,
    from_record,
    from_tuple,
    get_w,
    get_x,
    get_y,
    get_z,
    is_unit,
    length,
    length_squared,
    mul,
    negate,
    normalize,
    quat,
    scale,
    set_w,
    set_x,
    set_y,
    set_z,
    sub,
    to_matrix,
    to_record,
    to_tuple,
)

# scipy interop
from quatkit.utils.orientation import (
    describe_orientation,
    quaternion_to_euler,
    to_scipy_rotation,
)

__all__ = [
    # Version
    "__version__",
    # Type
    "Quaternion",
    "QuaternionRecord",
    "IDENTITY",
    # Construction / accessors
    "quat",
    "get_x",
    "get_y",
    "get_z",
    "get_w",
    "set_x",
    "set_y",
    "set_z",
    "set_w",
    # Conversion
    "to_tuple",
    "from_tuple",
    "to_record",
    "from_record",
    "as_array",
    # Algebra
    "add",
    "sub",
    "negate",
    "scale",
    "dot",
    "length",
    "length_squared",
    "normalize",
    # Rotation
    "mul",
    "conjugate",
    "from_axis_angle",
    "to_matrix",
    # Predicates
    "is_unit",
    "allclose",
    # Interop
    "to_scipy_rotation",
    "quaternion_to_euler",
    "describe_orientation",
]
