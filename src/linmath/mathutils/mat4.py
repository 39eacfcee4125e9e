"""
Immutable 4x4 matrix and the transform-pipeline operations built on it.

Layout:
    Element mRC is row R, column C (1-based). Fields are declared, iterated
    and exported in column-major order:

        m11, m21, m31, m41,  m12, m22, m32, m42,
        m13, m23, m33, m43,  m14, m24, m34, m44

    so to_list()/from_list() match what a GPU uniform upload expects. Points
    are column vectors: transform(m, v) computes m * (x, y, z, 1) and the
    translation lives in m14, m24, m34.

Errors:
    Only two conditions are reported. from_list/from_array raise
    InvalidLengthError for anything but 16 elements, and inverse() returns
    None for a matrix whose determinant is exactly zero. Every other
    degenerate input (near == far, left == right, zero-length axis, w == 0,
    non-affine input to mul_affine, non-orthonormal input to
    inverse_orthonormal) is a caller contract: results propagate as IEEE
    Inf/NaN or are silently wrong, never raised.

Usage:
    from linmath.mathutils.mat4 import make_perspective, make_look_at, mul, transform

    proj = make_perspective(45, 16 / 9, 0.1, 100)
    view = make_look_at(Vec3(0, 0, 5), Vec3(0, 0, 0), Vec3.j())
    clip = transform(mul(proj, view), Vec3(1, 1, 0))
"""
import math
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from linmath.linmath_config import get_config
from linmath.linmath_errors import InvalidLengthError, InvalidRecordError, SingularMatrixError
from .scalar import ieee_div, all_close
from .vec3 import Vec3
from .vec4 import Vec4

FIELD_NAMES = (
    'm11', 'm21', 'm31', 'm41',
    'm12', 'm22', 'm32', 'm42',
    'm13', 'm23', 'm33', 'm43',
    'm14', 'm24', 'm34', 'm44',
)


@dataclass(frozen=True)
class Mat4:
    """
    A 4x4 matrix of floats. Equality is exact over all 16 elements; use
    is_close() for approximate comparison.

    Supports a @ b (matrix product) and m @ v (transform a Vec3 point).
    """
    m11: float
    m21: float
    m31: float
    m41: float
    m12: float
    m22: float
    m32: float
    m42: float
    m13: float
    m23: float
    m33: float
    m43: float
    m14: float
    m24: float
    m34: float
    m44: float

    def __post_init__(self):
        for name in FIELD_NAMES:
            object.__setattr__(self, name, float(getattr(self, name)))

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def identity(cls) -> 'Mat4':
        if cls is Mat4:
            return _IDENTITY
        return cls(*_IDENTITY.to_list())

    @classmethod
    def from_list(cls, values) -> 'Mat4':
        """Create from exactly 16 numbers in column-major order."""
        values = list(values)
        if len(values) != 16:
            raise InvalidLengthError(16, len(values))
        return cls(*values)

    @classmethod
    def from_record(cls, record) -> 'Mat4':
        """Create from a mapping keyed by the 16 field names. Extra keys are ignored."""
        missing = [name for name in FIELD_NAMES if name not in record]
        if missing:
            raise InvalidRecordError(missing)
        return cls(**{name: record[name] for name in FIELD_NAMES})

    @classmethod
    def from_array(cls, array) -> 'Mat4':
        """
        Create from a numpy array (or anything np.asarray accepts).

        A flat 16-element array is read in column-major order, the same as
        from_list. A 4x4 array is read as array[row][col].
        """
        a = np.asarray(array, dtype=np.float64)
        if a.shape == (4, 4):
            return cls(*a.T.ravel().tolist())
        if a.ndim == 1 and a.size == 16:
            return cls(*a.tolist())
        raise InvalidLengthError(16, a.shape)

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_list(self) -> List[float]:
        """The 16 elements in column-major order."""
        return [
            self.m11, self.m21, self.m31, self.m41,
            self.m12, self.m22, self.m32, self.m42,
            self.m13, self.m23, self.m33, self.m43,
            self.m14, self.m24, self.m34, self.m44,
        ]

    def to_record(self) -> dict:
        return dict(zip(FIELD_NAMES, self.to_list()))

    def to_array(self, dtype=None) -> np.ndarray:
        """Flat column-major numpy array, ready for a uniform buffer upload."""
        return np.array(self.to_list(), dtype=dtype or get_config().array_dtype)

    def row(self, i: int) -> tuple:
        """Row i (0-based) as a 4-tuple."""
        if not 0 <= i < 4:
            raise IndexError(f"Mat4 row {i} out of range")
        r = i + 1
        return tuple(getattr(self, f"m{r}{c}") for c in range(1, 5))

    def column(self, i: int) -> tuple:
        """Column i (0-based) as a 4-tuple."""
        if not 0 <= i < 4:
            raise IndexError(f"Mat4 column {i} out of range")
        values = self.to_list()
        return tuple(values[i * 4:i * 4 + 4])

    def __iter__(self):
        return iter(self.to_list())

    def __len__(self):
        return 16

    # -------------------------------------------------------------------------
    # Conveniences
    # -------------------------------------------------------------------------

    def __matmul__(self, other):
        if isinstance(other, Mat4):
            return mul(self, other)
        if isinstance(other, Vec3):
            return transform(self, other)
        return NotImplemented

    def inverted(self) -> 'Mat4':
        """Like inverse(), but raises SingularMatrixError instead of returning None."""
        result = inverse(self)
        if result is None:
            raise SingularMatrixError("Matrix is singular (determinant is exactly 0)")
        return result

    def is_close(self, other: 'Mat4', rel_tol: Optional[float] = None,
                 abs_tol: Optional[float] = None) -> bool:
        """Approximate equality, tolerances default to the active config."""
        config = get_config()
        return all_close(
            self.to_list(), other.to_list(),
            config.rel_tol if rel_tol is None else rel_tol,
            config.abs_tol if abs_tol is None else abs_tol,
        )

    def pretty(self, precision: Optional[int] = None) -> str:
        """Multi-line, row-by-row string for debugging."""
        if precision is None:
            precision = get_config().repr_precision
        lines = []
        for r in range(4):
            lines.append("[" + ", ".join(f"{v:.{precision}f}" for v in self.row(r)) + "]")
        return "\n".join(lines)


_IDENTITY = Mat4(
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


def _as_vec3(v) -> Vec3:
    return v if isinstance(v, Vec3) else Vec3.from_list(v)


# =============================================================================
# Identity & Construction
# =============================================================================

def identity() -> Mat4:
    """Return the 4x4 identity matrix."""
    return _IDENTITY


def make_from_list(values) -> Mat4:
    """Create a matrix from 16 column-major numbers. Raises InvalidLengthError otherwise."""
    return Mat4.from_list(values)


def to_list(m: Mat4) -> List[float]:
    return m.to_list()


def to_record(m: Mat4) -> dict:
    """Plain dict keyed by field name. from_record(to_record(m)) == m."""
    return m.to_record()


def from_record(record) -> Mat4:
    return Mat4.from_record(record)


def to_array(m: Mat4, dtype=None) -> np.ndarray:
    return m.to_array(dtype)


def from_array(array) -> Mat4:
    return Mat4.from_array(array)


# =============================================================================
# Composition
# =============================================================================

def mul(a: Mat4, b: Mat4) -> Mat4:
    """Matrix product a * b."""
    return Mat4(
        m11=a.m11 * b.m11 + a.m12 * b.m21 + a.m13 * b.m31 + a.m14 * b.m41,
        m21=a.m21 * b.m11 + a.m22 * b.m21 + a.m23 * b.m31 + a.m24 * b.m41,
        m31=a.m31 * b.m11 + a.m32 * b.m21 + a.m33 * b.m31 + a.m34 * b.m41,
        m41=a.m41 * b.m11 + a.m42 * b.m21 + a.m43 * b.m31 + a.m44 * b.m41,
        m12=a.m11 * b.m12 + a.m12 * b.m22 + a.m13 * b.m32 + a.m14 * b.m42,
        m22=a.m21 * b.m12 + a.m22 * b.m22 + a.m23 * b.m32 + a.m24 * b.m42,
        m32=a.m31 * b.m12 + a.m32 * b.m22 + a.m33 * b.m32 + a.m34 * b.m42,
        m42=a.m41 * b.m12 + a.m42 * b.m22 + a.m43 * b.m32 + a.m44 * b.m42,
        m13=a.m11 * b.m13 + a.m12 * b.m23 + a.m13 * b.m33 + a.m14 * b.m43,
        m23=a.m21 * b.m13 + a.m22 * b.m23 + a.m23 * b.m33 + a.m24 * b.m43,
        m33=a.m31 * b.m13 + a.m32 * b.m23 + a.m33 * b.m33 + a.m34 * b.m43,
        m43=a.m41 * b.m13 + a.m42 * b.m23 + a.m43 * b.m33 + a.m44 * b.m43,
        m14=a.m11 * b.m14 + a.m12 * b.m24 + a.m13 * b.m34 + a.m14 * b.m44,
        m24=a.m21 * b.m14 + a.m22 * b.m24 + a.m23 * b.m34 + a.m24 * b.m44,
        m34=a.m31 * b.m14 + a.m32 * b.m24 + a.m33 * b.m34 + a.m34 * b.m44,
        m44=a.m41 * b.m14 + a.m42 * b.m24 + a.m43 * b.m34 + a.m44 * b.m44,
    )


def mul_affine(a: Mat4, b: Mat4) -> Mat4:
    """
    Matrix product a * b for affine a and b (last row exactly 0, 0, 0, 1).

    Only the upper 3x4 block is computed and the last row of the result is
    written as 0, 0, 0, 1. The precondition is not checked: a projective
    input gives a wrong answer, not an error.
    """
    return Mat4(
        m11=a.m11 * b.m11 + a.m12 * b.m21 + a.m13 * b.m31,
        m21=a.m21 * b.m11 + a.m22 * b.m21 + a.m23 * b.m31,
        m31=a.m31 * b.m11 + a.m32 * b.m21 + a.m33 * b.m31,
        m41=0.0,
        m12=a.m11 * b.m12 + a.m12 * b.m22 + a.m13 * b.m32,
        m22=a.m21 * b.m12 + a.m22 * b.m22 + a.m23 * b.m32,
        m32=a.m31 * b.m12 + a.m32 * b.m22 + a.m33 * b.m32,
        m42=0.0,
        m13=a.m11 * b.m13 + a.m12 * b.m23 + a.m13 * b.m33,
        m23=a.m21 * b.m13 + a.m22 * b.m23 + a.m23 * b.m33,
        m33=a.m31 * b.m13 + a.m32 * b.m23 + a.m33 * b.m33,
        m43=0.0,
        m14=a.m11 * b.m14 + a.m12 * b.m24 + a.m13 * b.m34 + a.m14,
        m24=a.m21 * b.m14 + a.m22 * b.m24 + a.m23 * b.m34 + a.m24,
        m34=a.m31 * b.m14 + a.m32 * b.m24 + a.m33 * b.m34 + a.m34,
        m44=1.0,
    )


# =============================================================================
# Transform Application
# =============================================================================

def transform(m: Mat4, v) -> Vec3:
    """
    Transform the point v by m, including the perspective divide.

    w = m41*x + m42*y + m43*z + m44, and each output coordinate is divided
    by w. Affine matrices have w == 1. A w of zero gives Inf/NaN components.
    """
    x, y, z = v
    w = x * m.m41 + y * m.m42 + z * m.m43 + m.m44
    return Vec3(
        ieee_div(x * m.m11 + y * m.m12 + z * m.m13 + m.m14, w),
        ieee_div(x * m.m21 + y * m.m22 + z * m.m23 + m.m24, w),
        ieee_div(x * m.m31 + y * m.m32 + z * m.m33 + m.m34, w),
    )


def mul_vec4(m: Mat4, v) -> Vec4:
    """m * v for a homogeneous Vec4, no perspective divide."""
    x, y, z, w = v
    return Vec4(
        x * m.m11 + y * m.m12 + z * m.m13 + w * m.m14,
        x * m.m21 + y * m.m22 + z * m.m23 + w * m.m24,
        x * m.m31 + y * m.m32 + z * m.m33 + w * m.m34,
        x * m.m41 + y * m.m42 + z * m.m43 + w * m.m44,
    )


# =============================================================================
# Inversion
# =============================================================================

def _adjugate(m: Mat4) -> List[float]:
    """Transposed cofactor matrix, column-major, from 3x3 minors."""
    a = m.to_list()
    inv = [0.0] * 16

    inv[0] = (a[5] * a[10] * a[15] - a[5] * a[11] * a[14] - a[9] * a[6] * a[15]
              + a[9] * a[7] * a[14] + a[13] * a[6] * a[11] - a[13] * a[7] * a[10])
    inv[4] = (-a[4] * a[10] * a[15] + a[4] * a[11] * a[14] + a[8] * a[6] * a[15]
              - a[8] * a[7] * a[14] - a[12] * a[6] * a[11] + a[12] * a[7] * a[10])
    inv[8] = (a[4] * a[9] * a[15] - a[4] * a[11] * a[13] - a[8] * a[5] * a[15]
              + a[8] * a[7] * a[13] + a[12] * a[5] * a[11] - a[12] * a[7] * a[9])
    inv[12] = (-a[4] * a[9] * a[14] + a[4] * a[10] * a[13] + a[8] * a[5] * a[14]
               - a[8] * a[6] * a[13] - a[12] * a[5] * a[10] + a[12] * a[6] * a[9])

    inv[1] = (-a[1] * a[10] * a[15] + a[1] * a[11] * a[14] + a[9] * a[2] * a[15]
              - a[9] * a[3] * a[14] - a[13] * a[2] * a[11] + a[13] * a[3] * a[10])
    inv[5] = (a[0] * a[10] * a[15] - a[0] * a[11] * a[14] - a[8] * a[2] * a[15]
              + a[8] * a[3] * a[14] + a[12] * a[2] * a[11] - a[12] * a[3] * a[10])
    inv[9] = (-a[0] * a[9] * a[15] + a[0] * a[11] * a[13] + a[8] * a[1] * a[15]
              - a[8] * a[3] * a[13] - a[12] * a[1] * a[11] + a[12] * a[3] * a[9])
    inv[13] = (a[0] * a[9] * a[14] - a[0] * a[10] * a[13] - a[8] * a[1] * a[14]
               + a[8] * a[2] * a[13] + a[12] * a[1] * a[10] - a[12] * a[2] * a[9])

    inv[2] = (a[1] * a[6] * a[15] - a[1] * a[7] * a[14] - a[5] * a[2] * a[15]
              + a[5] * a[3] * a[14] + a[13] * a[2] * a[7] - a[13] * a[3] * a[6])
    inv[6] = (-a[0] * a[6] * a[15] + a[0] * a[7] * a[14] + a[4] * a[2] * a[15]
              - a[4] * a[3] * a[14] - a[12] * a[2] * a[7] + a[12] * a[3] * a[6])
    inv[10] = (a[0] * a[5] * a[15] - a[0] * a[7] * a[13] - a[4] * a[1] * a[15]
               + a[4] * a[3] * a[13] + a[12] * a[1] * a[7] - a[12] * a[3] * a[5])
    inv[14] = (-a[0] * a[5] * a[14] + a[0] * a[6] * a[13] + a[4] * a[1] * a[14]
               - a[4] * a[2] * a[13] - a[12] * a[1] * a[6] + a[12] * a[2] * a[5])

    inv[3] = (-a[1] * a[6] * a[11] + a[1] * a[7] * a[10] + a[5] * a[2] * a[11]
              - a[5] * a[3] * a[10] - a[9] * a[2] * a[7] + a[9] * a[3] * a[6])
    inv[7] = (a[0] * a[6] * a[11] - a[0] * a[7] * a[10] - a[4] * a[2] * a[11]
              + a[4] * a[3] * a[10] + a[8] * a[2] * a[7] - a[8] * a[3] * a[6])
    inv[11] = (-a[0] * a[5] * a[11] + a[0] * a[7] * a[9] + a[4] * a[1] * a[11]
               - a[4] * a[3] * a[9] - a[8] * a[1] * a[7] + a[8] * a[3] * a[5])
    inv[15] = (a[0] * a[5] * a[10] - a[0] * a[6] * a[9] - a[4] * a[1] * a[10]
               + a[4] * a[2] * a[9] + a[8] * a[1] * a[6] - a[8] * a[2] * a[5])

    return inv


def _det_from_adjugate(m: Mat4, adj: List[float]) -> float:
    # first column of m dotted with first row of the adjugate
    return m.m11 * adj[0] + m.m21 * adj[4] + m.m31 * adj[8] + m.m41 * adj[12]


def determinant(m: Mat4) -> float:
    """Determinant by Laplace expansion, the same value inverse() tests against zero."""
    return _det_from_adjugate(m, _adjugate(m))


def inverse(m: Mat4) -> Optional[Mat4]:
    """
    General 4x4 inverse by cofactor expansion.

    Returns None when the determinant is exactly 0.0. There is no tolerance:
    a nearly singular matrix returns a valid but numerically unstable
    inverse.
    """
    adj = _adjugate(m)
    det = _det_from_adjugate(m, adj)
    if det == 0.0:
        return None
    inv_det = 1.0 / det
    return Mat4(*[v * inv_det for v in adj])


def inverse_orthonormal(m: Mat4) -> Mat4:
    """
    Inverse of a rigid transform (orthonormal 3x3 block plus translation).

    The rotation part is transposed and the translation becomes -R^T * t.
    Faster than inverse() and never fails; a matrix with scale or shear
    gives a result that is not its inverse.
    """
    tx, ty, tz = m.m14, m.m24, m.m34
    return Mat4(
        m11=m.m11, m21=m.m12, m31=m.m13, m41=0.0,
        m12=m.m21, m22=m.m22, m32=m.m23, m42=0.0,
        m13=m.m31, m23=m.m32, m33=m.m33, m43=0.0,
        m14=-(m.m11 * tx + m.m21 * ty + m.m31 * tz),
        m24=-(m.m12 * tx + m.m22 * ty + m.m32 * tz),
        m34=-(m.m13 * tx + m.m23 * ty + m.m33 * tz),
        m44=m.m44,
    )


def transpose(m: Mat4) -> Mat4:
    """Swap rows and columns."""
    # the row-major listing of m is the column-major listing of its transpose
    return Mat4(
        m.m11, m.m12, m.m13, m.m14,
        m.m21, m.m22, m.m23, m.m24,
        m.m31, m.m32, m.m33, m.m34,
        m.m41, m.m42, m.m43, m.m44,
    )


# =============================================================================
# Projection
# =============================================================================

def make_frustum(left: float, right: float, bottom: float, top: float,
                 znear: float, zfar: float) -> Mat4:
    """
    Perspective projection for an asymmetric view frustum (glFrustum).

    Maps the frustum to the [-1, 1] clip cube with the camera looking down -z.
    Degenerate bounds (left == right, znear == zfar, ...) give Inf/NaN.
    """
    return Mat4(
        m11=ieee_div(2.0 * znear, right - left), m21=0.0, m31=0.0, m41=0.0,
        m12=0.0, m22=ieee_div(2.0 * znear, top - bottom), m32=0.0, m42=0.0,
        m13=ieee_div(right + left, right - left),
        m23=ieee_div(top + bottom, top - bottom),
        m33=-ieee_div(zfar + znear, zfar - znear),
        m43=-1.0,
        m14=0.0, m24=0.0,
        m34=-ieee_div(2.0 * zfar * znear, zfar - znear),
        m44=0.0,
    )


def make_perspective(fovy: float, aspect: float, znear: float, zfar: float) -> Mat4:
    """
    Symmetric perspective projection (gluPerspective).

    Args:
        fovy: Vertical field of view in degrees.
        aspect: Width / height of the viewport.
        znear: Distance to the near clip plane.
        zfar: Distance to the far clip plane.
    """
    ymax = znear * math.tan(fovy * math.pi / 360.0)
    ymin = -ymax
    xmin = ymin * aspect
    xmax = ymax * aspect
    return make_frustum(xmin, xmax, ymin, ymax, znear, zfar)


def make_ortho(left: float, right: float, bottom: float, top: float,
               znear: float, zfar: float) -> Mat4:
    """Orthographic projection (glOrtho)."""
    return Mat4(
        m11=ieee_div(2.0, right - left), m21=0.0, m31=0.0, m41=0.0,
        m12=0.0, m22=ieee_div(2.0, top - bottom), m32=0.0, m42=0.0,
        m13=0.0, m23=0.0, m33=ieee_div(-2.0, zfar - znear), m43=0.0,
        m14=-ieee_div(right + left, right - left),
        m24=-ieee_div(top + bottom, top - bottom),
        m34=-ieee_div(zfar + znear, zfar - znear),
        m44=1.0,
    )


def make_ortho_2d(left: float, right: float, bottom: float, top: float) -> Mat4:
    """Orthographic projection with znear = -1 and zfar = 1 (gluOrtho2D)."""
    return make_ortho(left, right, bottom, top, -1.0, 1.0)


# =============================================================================
# Affine Transform Builders & Appliers
# =============================================================================

def _rotation_block(angle: float, axis):
    """3x3 Rodrigues rotation about the normalized axis, column-major."""
    x, y, z = _as_vec3(axis).normalize()
    c = math.cos(angle)
    c1 = 1.0 - c
    s = math.sin(angle)
    return (
        x * x * c1 + c, y * x * c1 + z * s, z * x * c1 - y * s,
        x * y * c1 - z * s, y * y * c1 + c, y * z * c1 + x * s,
        x * z * c1 + y * s, y * z * c1 - x * s, z * z * c1 + c,
    )


def make_rotate(angle: float, axis) -> Mat4:
    """
    Rotation by angle (radians) about axis, counter-clockwise when looking
    down the axis towards the origin. The axis is normalized first, so a
    zero-length axis gives a NaN matrix.
    """
    r11, r21, r31, r12, r22, r32, r13, r23, r33 = _rotation_block(angle, axis)
    return Mat4(
        m11=r11, m21=r21, m31=r31, m41=0.0,
        m12=r12, m22=r22, m32=r32, m42=0.0,
        m13=r13, m23=r23, m33=r33, m43=0.0,
        m14=0.0, m24=0.0, m34=0.0, m44=1.0,
    )


def rotate(angle: float, axis, m: Mat4) -> Mat4:
    """
    Concatenate a rotation onto m, i.e. m * make_rotate(angle, axis).

    Only the first three columns change; m's translation column is kept.
    """
    r11, r21, r31, r12, r22, r32, r13, r23, r33 = _rotation_block(angle, axis)
    return Mat4(
        m11=m.m11 * r11 + m.m12 * r21 + m.m13 * r31,
        m21=m.m21 * r11 + m.m22 * r21 + m.m23 * r31,
        m31=m.m31 * r11 + m.m32 * r21 + m.m33 * r31,
        m41=m.m41 * r11 + m.m42 * r21 + m.m43 * r31,
        m12=m.m11 * r12 + m.m12 * r22 + m.m13 * r32,
        m22=m.m21 * r12 + m.m22 * r22 + m.m23 * r32,
        m32=m.m31 * r12 + m.m32 * r22 + m.m33 * r32,
        m42=m.m41 * r12 + m.m42 * r22 + m.m43 * r32,
        m13=m.m11 * r13 + m.m12 * r23 + m.m13 * r33,
        m23=m.m21 * r13 + m.m22 * r23 + m.m23 * r33,
        m33=m.m31 * r13 + m.m32 * r23 + m.m33 * r33,
        m43=m.m41 * r13 + m.m42 * r23 + m.m43 * r33,
        m14=m.m14, m24=m.m24, m34=m.m34, m44=m.m44,
    )


def make_scale3(x: float, y: float, z: float) -> Mat4:
    return Mat4(
        x, 0.0, 0.0, 0.0,
        0.0, y, 0.0, 0.0,
        0.0, 0.0, z, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def make_scale(v) -> Mat4:
    x, y, z = v
    return make_scale3(x, y, z)


def scale3(x: float, y: float, z: float, m: Mat4) -> Mat4:
    """Concatenate a scale onto m, i.e. m * make_scale3(x, y, z)."""
    return Mat4(
        m11=m.m11 * x, m21=m.m21 * x, m31=m.m31 * x, m41=m.m41 * x,
        m12=m.m12 * y, m22=m.m22 * y, m32=m.m32 * y, m42=m.m42 * y,
        m13=m.m13 * z, m23=m.m23 * z, m33=m.m33 * z, m43=m.m43 * z,
        m14=m.m14, m24=m.m24, m34=m.m34, m44=m.m44,
    )


def scale(v, m: Mat4) -> Mat4:
    x, y, z = v
    return scale3(x, y, z, m)


def make_translate3(x: float, y: float, z: float) -> Mat4:
    return Mat4(
        1.0, 0.0, 0.0, 0.0,
        0.0, 1.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        x, y, z, 1.0,
    )


def make_translate(v) -> Mat4:
    x, y, z = v
    return make_translate3(x, y, z)


def translate3(x: float, y: float, z: float, m: Mat4) -> Mat4:
    """
    Concatenate a translation onto m, i.e. m * make_translate3(x, y, z).

    The offset is carried through m's 3x3 block and added to m's
    translation column.
    """
    return Mat4(
        m11=m.m11, m21=m.m21, m31=m.m31, m41=m.m41,
        m12=m.m12, m22=m.m22, m32=m.m32, m42=m.m42,
        m13=m.m13, m23=m.m23, m33=m.m33, m43=m.m43,
        m14=m.m11 * x + m.m12 * y + m.m13 * z + m.m14,
        m24=m.m21 * x + m.m22 * y + m.m23 * z + m.m24,
        m34=m.m31 * x + m.m32 * y + m.m33 * z + m.m34,
        m44=m.m41 * x + m.m42 * y + m.m43 * z + m.m44,
    )


def translate(v, m: Mat4) -> Mat4:
    x, y, z = v
    return translate3(x, y, z, m)


def make_look_at(eye, center, up) -> Mat4:
    """
    View matrix for a camera at eye looking at center (gluLookAt).

    The camera looks down its local -z with up projected onto the plane
    perpendicular to the view direction. eye == center, or up parallel to
    the view direction, gives a NaN matrix.
    """
    eye = _as_vec3(eye)
    f = _as_vec3(center).sub(eye).normalize()
    s = f.cross(_as_vec3(up)).normalize()
    u = s.cross(f)
    return Mat4(
        m11=s.x, m21=u.x, m31=-f.x, m41=0.0,
        m12=s.y, m22=u.y, m32=-f.y, m42=0.0,
        m13=s.z, m23=u.z, m33=-f.z, m43=0.0,
        m14=-s.dot(eye), m24=-u.dot(eye), m34=f.dot(eye), m44=1.0,
    )


def make_basis(vx, vy, vz) -> Mat4:
    """Change-of-basis matrix with vx, vy, vz as its first three columns."""
    x1, x2, x3 = vx
    y1, y2, y3 = vy
    z1, z2, z3 = vz
    return Mat4(
        x1, x2, x3, 0.0,
        y1, y2, y3, 0.0,
        z1, z2, z3, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def is_close(a, b, rel_tol: Optional[float] = None, abs_tol: Optional[float] = None) -> bool:
    """Approximate equality for two matrices or two vectors."""
    return a.is_close(b, rel_tol=rel_tol, abs_tol=abs_tol)
