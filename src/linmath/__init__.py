"""linmath - immutable vectors and 4x4 matrices for 3D transform pipelines."""

__version__ = "0.1.0"

from linmath.linmath_config import LinMathConfig, get_config, set_config, reset_config
from linmath.linmath_errors import (
    LinMathError,
    InvalidLengthError,
    InvalidRecordError,
    SingularMatrixError,
)
from linmath.mathutils.vec2 import Vec2
from linmath.mathutils.vec3 import Vec3
from linmath.mathutils.vec4 import Vec4
from linmath.mathutils.mat4 import (
    Mat4,
    identity,
    make_from_list,
    to_list,
    to_record,
    from_record,
    to_array,
    from_array,
    mul,
    mul_affine,
    transform,
    mul_vec4,
    determinant,
    inverse,
    inverse_orthonormal,
    transpose,
    make_frustum,
    make_perspective,
    make_ortho,
    make_ortho_2d,
    make_rotate,
    rotate,
    make_scale3,
    make_scale,
    scale3,
    scale,
    make_translate3,
    make_translate,
    translate3,
    translate,
    make_look_at,
    make_basis,
    is_close,
)


__all__ = [
    # Types
    'Vec2', 'Vec3', 'Vec4', 'Mat4',
    # Errors
    'LinMathError', 'InvalidLengthError', 'InvalidRecordError', 'SingularMatrixError',
    # Configuration
    'LinMathConfig', 'get_config', 'set_config', 'reset_config',
    # Construction & conversion
    'identity', 'make_from_list', 'to_list', 'to_record', 'from_record',
    'to_array', 'from_array',
    # Composition & application
    'mul', 'mul_affine', 'transform', 'mul_vec4',
    # Inversion
    'determinant', 'inverse', 'inverse_orthonormal', 'transpose',
    # Projection
    'make_frustum', 'make_perspective', 'make_ortho', 'make_ortho_2d',
    # Affine builders & appliers
    'make_rotate', 'rotate', 'make_scale3', 'make_scale', 'scale3', 'scale',
    'make_translate3', 'make_translate', 'translate3', 'translate',
    'make_look_at', 'make_basis',
    # Comparison
    'is_close',
]
