"""
Immutable 3D vector.

Vec3 is the vector type consumed and produced by the Mat4 kernel: transform
inputs and outputs, rotation axes, look-at eye/center/up and basis columns.

All operations return new values. Zero vectors are legal everywhere; the
only place they matter is normalize(), which divides by the length and so
returns NaN components for a zero vector (IEEE 0/0) instead of raising or
returning a zero vector.
"""
import math
from dataclasses import dataclass, replace

from linmath.linmath_config import get_config
from linmath.linmath_errors import InvalidLengthError, InvalidRecordError
from .scalar import ieee_div, ieee_recip, all_close


@dataclass(frozen=True)
class Vec3:
    """
    A 3D vector of floats.

    Supports arithmetic operators (+, -, * by scalar, / by scalar, unary -),
    indexing and iteration like a 3-tuple.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))
        object.__setattr__(self, 'z', float(self.z))

    # -------------------------------------------------------------------------
    # Construction and conversion
    # -------------------------------------------------------------------------

    @classmethod
    def i(cls):
        """Unit vector along x."""
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def j(cls):
        """Unit vector along y."""
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def k(cls):
        """Unit vector along z."""
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def from_list(cls, values):
        """Create from a sequence of exactly 3 numbers."""
        values = list(values)
        if len(values) != 3:
            raise InvalidLengthError(3, len(values), "Vec3")
        return cls(values[0], values[1], values[2])

    @classmethod
    def from_record(cls, record):
        """Create from a mapping with 'x', 'y' and 'z' keys."""
        missing = [name for name in ('x', 'y', 'z') if name not in record]
        if missing:
            raise InvalidRecordError(missing, "Vec3")
        return cls(record['x'], record['y'], record['z'])

    def to_list(self):
        return [self.x, self.y, self.z]

    def to_tuple(self):
        return (self.x, self.y, self.z)

    def to_record(self):
        return {'x': self.x, 'y': self.y, 'z': self.z}

    def with_x(self, x):
        return replace(self, x=x)

    def with_y(self, y):
        return replace(self, y=y)

    def with_z(self, z):
        return replace(self, z=z)

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------

    def __getitem__(self, i):
        if i == 0: return self.x
        if i == 1: return self.y
        if i == 2: return self.z
        raise IndexError(f"Vec3 index {i} out of range")

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __len__(self):
        return 3

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other):
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other):
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def negate(self):
        return Vec3(-self.x, -self.y, -self.z)

    def scale(self, s):
        return Vec3(self.x * s, self.y * s, self.z * s)

    def dot(self, other):
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other):
        """Cross product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self):
        """Squared length (avoids sqrt)."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self):
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def distance_squared(self, other):
        dx, dy, dz = self.x - other.x, self.y - other.y, self.z - other.z
        return dx * dx + dy * dy + dz * dz

    def distance(self, other):
        return math.sqrt(self.distance_squared(other))

    def normalize(self):
        """Return a unit-length copy. A zero vector gives NaN components."""
        inv_mag = ieee_recip(self.length())
        return Vec3(self.x * inv_mag, self.y * inv_mag, self.z * inv_mag)

    def direction(self, other):
        """Unit vector pointing from other to self."""
        return self.sub(other).normalize()

    def is_close(self, other, rel_tol=None, abs_tol=None):
        """Approximate equality, tolerances default to the active config."""
        config = get_config()
        return all_close(
            self, other,
            config.rel_tol if rel_tol is None else rel_tol,
            config.abs_tol if abs_tol is None else abs_tol,
        )

    __add__ = add
    __sub__ = sub
    __neg__ = negate

    def __mul__(self, scalar):
        return self.scale(scalar)

    def __rmul__(self, scalar):
        return self.scale(scalar)

    def __truediv__(self, scalar):
        return Vec3(ieee_div(self.x, scalar), ieee_div(self.y, scalar), ieee_div(self.z, scalar))
