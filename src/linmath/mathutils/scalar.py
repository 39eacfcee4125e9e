"""
Scalar helpers shared by the vector and matrix types.

Python raises ZeroDivisionError on float division by zero, while the matrix
kernel promises IEEE 754 results (x/0 -> +-inf, 0/0 -> nan). Every division
in the kernel goes through ieee_div: plain float division for the common case,
numpy only when the divisor is zero.
"""
import math

import numpy as np


def ieee_div(a, b):
    """Divide a by b with IEEE 754 semantics. Returns a Python float."""
    # numpy scalars would divide (and warn) on their own, bypass them
    a = float(a)
    b = float(b)
    try:
        return a / b
    except ZeroDivisionError:
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.float64(a) / np.float64(b))


def ieee_recip(b):
    """1/b with IEEE 754 semantics."""
    return ieee_div(1.0, b)


def close(a, b, rel_tol, abs_tol):
    """math.isclose that also treats two NaNs as equal."""
    if a != a and b != b:
        return True
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def all_close(xs, ys, rel_tol, abs_tol):
    """Element-wise close() over two equal-length iterables."""
    xs = tuple(xs)
    ys = tuple(ys)
    if len(xs) != len(ys):
        return False
    return all(close(a, b, rel_tol, abs_tol) for a, b in zip(xs, ys))
