"""Sample matrices shared by the unit and performance tests."""

from linmath.mathutils.vec3 import Vec3
from linmath.mathutils import mat4 as M4


def rigid_matrix():
    """Rotation about a skew axis followed by a translation (orthonormal 3x3)."""
    return M4.translate3(5.0, 9.0, 7.0, M4.make_rotate(0.9, Vec3(1.0, 2.0, 3.0)))


def general_matrix():
    """Affine matrix with non-uniform scale, invertible."""
    return M4.scale3(4.2, 3.7, 9.5, rigid_matrix())


def projective_matrix():
    """Projection * view * model, with a non-trivial last row."""
    proj = M4.make_perspective(60.0, 1.5, 0.5, 50.0)
    view = M4.make_look_at(Vec3(3.0, 4.0, 10.0), Vec3(0.0, 0.0, 0.0), Vec3.j())
    return M4.mul(M4.mul(proj, view), general_matrix())


def singular_matrix():
    """All zeros except m44 = 1: determinant exactly zero."""
    values = [0.0] * 16
    values[15] = 1.0
    return M4.make_from_list(values)
