from .matrix import mat4_from_basis, mat4_identity
from .vector import (
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
