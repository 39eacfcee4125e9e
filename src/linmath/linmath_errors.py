"""
Exceptions raised by linmath.

Only two conditions are reported as errors: constructing a value from a
sequence of the wrong length, and asking for an exception-raising inverse of
a singular matrix. Everything else (degenerate frustums, zero-length axes,
non-affine input to affine-only operations) propagates as IEEE Inf/NaN or as
a silently wrong value.
"""


class LinMathError(Exception):
    """Base class for all linmath errors."""


class InvalidLengthError(LinMathError, ValueError):
    """A list or array had the wrong number of elements for the target type."""

    def __init__(self, expected, actual, type_name="Mat4"):
        self.expected = expected
        self.actual = actual
        self.type_name = type_name
        super().__init__(f"{type_name} requires exactly {expected} elements, got {actual}")


class InvalidRecordError(LinMathError, KeyError):
    """A record (dict) was missing one or more required fields."""

    def __init__(self, missing, type_name="Mat4"):
        self.missing = tuple(missing)
        self.type_name = type_name
        super().__init__(f"{type_name} record is missing fields: {', '.join(self.missing)}")

    def __str__(self):
        # KeyError quotes its argument; keep the plain message
        return self.args[0]


class SingularMatrixError(LinMathError, ValueError):
    """The matrix has an exactly-zero determinant and cannot be inverted."""
