"""Test fixtures and utilities for linmath testing.

- assertions: Custom assertion functions (assert_mat4_close, assert_vec_close)
- samples: Reusable sample matrices (rigid, general, projective, singular)
"""

from .assertions import assert_mat4_close, assert_vec_close
from .samples import rigid_matrix, general_matrix, projective_matrix, singular_matrix

__all__ = [
    'assert_mat4_close',
    'assert_vec_close',
    'rigid_matrix',
    'general_matrix',
    'projective_matrix',
    'singular_matrix',
]
