from .quaternion import (
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
